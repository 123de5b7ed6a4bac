"""Tests for style entries."""

import pytest

from syntax_style import Colour, StyleEntry, StyleParseError, Trilean


class TestStyleEntryFormat:
    """Test formatting entries as descriptors."""

    def test_format_order(self):
        """Test that elements are written in a fixed order."""
        entry = StyleEntry.parse("border:#00ff00 bg:#000000 #ff0000 noinherit underline noitalic bold")
        assert entry.format() == "bold noitalic underline noinherit #ff0000 bg:#000000 border:#00ff00"

    def test_format_empty(self):
        """Test that an empty entry formats as an empty string."""
        assert StyleEntry().format() == ""

    def test_str_is_format(self):
        """Test that str() gives the descriptor."""
        entry = StyleEntry(bold=Trilean.NO, colour=Colour.parse("#123456"))
        assert str(entry) == "nobold #123456"

    @pytest.mark.parametrize("entry", [
        StyleEntry(),
        StyleEntry(bold=Trilean.YES),
        StyleEntry(italic=Trilean.NO, underline=Trilean.YES),
        StyleEntry(no_inherit=True, colour=Colour.parse("#000000")),
        StyleEntry(
            colour=Colour.parse("#ff0000"),
            background=Colour.parse("#00ff00"),
            border=Colour.parse("#0000ff"),
            bold=Trilean.NO,
            italic=Trilean.YES,
            underline=Trilean.NO,
            no_inherit=True
        ),
    ])
    def test_parse_format_round_trip(self, entry):
        """Test that formatted entries parse back to equal entries."""
        assert StyleEntry.parse(entry.format()) == entry

    def test_parse_rejects_invalid(self):
        """Test that StyleEntry.parse raises on invalid descriptors."""
        with pytest.raises(StyleParseError):
            StyleEntry.parse("bold bogus")


class TestStyleEntryIsZero:
    """Test detection of empty entries."""

    def test_default_is_zero(self):
        """Test that a default entry is zero."""
        assert StyleEntry().is_zero()

    @pytest.mark.parametrize("descriptor", ["bold", "nobold", "#000000", "bg:#000000", "border:#000000", "noinherit"])
    def test_any_attribute_is_not_zero(self, descriptor):
        """Test that any single attribute makes an entry non-zero."""
        assert not StyleEntry.parse(descriptor).is_zero()


class TestStyleEntrySub:
    """Test subtracting entries."""

    def test_sub_keeps_differences(self):
        """Test that only differing attributes are kept."""
        a = StyleEntry.parse("bold #ff0000 bg:#000000")
        b = StyleEntry.parse("bold #00ff00 bg:#000000")
        assert a.sub(b) == StyleEntry.parse("#ff0000")

    def test_sub_self_is_zero(self):
        """Test that subtracting an entry from itself leaves nothing."""
        entry = StyleEntry.parse("bold italic #ff0000 bg:#000000 border:#ffffff")
        assert entry.sub(entry).is_zero()

    def test_sub_keeps_explicit_pass_difference(self):
        """Test an attribute set on the other entry but not this one."""
        a = StyleEntry.parse("#ff0000")
        b = StyleEntry.parse("bold #ff0000")
        assert a.sub(b).is_zero()

    def test_sub_ignores_no_inherit(self):
        """Test that no_inherit is not carried into the difference."""
        assert StyleEntry.parse("noinherit bold").sub(StyleEntry()) == StyleEntry.parse("bold")


class TestStyleEntryInherit:
    """Test merging entries with their ancestors."""

    def test_nearest_ancestor_wins(self):
        """Test that the last (nearest) ancestor fills fields first."""
        entry = StyleEntry.parse("bold")
        result = entry.inherit(StyleEntry.parse("#ff0000"), StyleEntry.parse("#00ff00"))
        assert result.colour == Colour.parse("#00ff00")
        assert result.bold == Trilean.YES

    def test_own_fields_never_overwritten(self):
        """Test that set fields are kept."""
        entry = StyleEntry.parse("nobold #0000ff")
        result = entry.inherit(StyleEntry.parse("bold italic #ff0000"))
        assert result == StyleEntry.parse("nobold italic #0000ff")

    def test_distant_ancestor_fills_remaining(self):
        """Test that distant ancestors fill fields nearer ones leave unset."""
        entry = StyleEntry()
        result = entry.inherit(StyleEntry.parse("bg:#000000 #ffffff"), StyleEntry.parse("#ff0000"))
        assert result == StyleEntry.parse("#ff0000 bg:#000000")

    def test_no_inherit_short_circuits(self):
        """Test that no_inherit prevents any ancestor being consulted."""
        entry = StyleEntry.parse("noinherit #ff0000")
        result = entry.inherit(StyleEntry.parse("bold bg:#000000"), StyleEntry.parse("italic"))
        assert result == entry

    def test_ancestor_no_inherit_not_copied(self):
        """Test that no_inherit is not copied from ancestors."""
        entry = StyleEntry()
        result = entry.inherit(StyleEntry.parse("bold"), StyleEntry.parse("noinherit #ff0000"))
        assert not result.no_inherit
        assert result == StyleEntry.parse("bold #ff0000")

    def test_zero_ancestor_is_transparent(self):
        """Test that merging an empty ancestor changes nothing."""
        entry = StyleEntry.parse("bold #ff0000 bg:#000000")
        assert entry.inherit(StyleEntry()) == entry

    def test_no_ancestors(self):
        """Test merging with no ancestors."""
        entry = StyleEntry.parse("italic")
        assert entry.inherit() == entry
