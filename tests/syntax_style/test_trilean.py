"""Tests for three-state attributes."""

from syntax_style import Trilean


class TestTrilean:
    """Test Trilean rendering."""

    def test_prefix(self):
        """Test rendering attribute names."""
        assert Trilean.YES.prefix("bold") == "bold"
        assert Trilean.NO.prefix("bold") == "nobold"
        assert Trilean.PASS.prefix("bold") == ""

    def test_str(self):
        """Test string forms."""
        assert str(Trilean.YES) == "Yes"
        assert str(Trilean.NO) == "No"
        assert str(Trilean.PASS) == "Pass"

    def test_default_is_pass(self):
        """Test that PASS is the zero value."""
        assert Trilean(0) == Trilean.PASS
