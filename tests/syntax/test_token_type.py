"""Tests for token type categories."""

import pytest

from syntax import TokenType


class TestTokenTypeCategory:
    """Test projection of token types onto categories."""

    def test_category_of_sub_type(self):
        """Test that a sub-type maps onto its category."""
        assert TokenType.KEYWORD_CONSTANT.category() == TokenType.KEYWORD
        assert TokenType.LITERAL_STRING_DOC.category() == TokenType.LITERAL
        assert TokenType.COMMENT_PREPROC_FILE.category() == TokenType.COMMENT

    def test_category_of_category(self):
        """Test that a category maps onto itself."""
        assert TokenType.NAME.category() == TokenType.NAME
        assert TokenType.TEXT.category() == TokenType.TEXT

    def test_sub_category(self):
        """Test projection onto sub-categories."""
        assert TokenType.LITERAL_STRING_DOC.sub_category() == TokenType.LITERAL_STRING
        assert TokenType.LITERAL_NUMBER_HEX.sub_category() == TokenType.LITERAL_NUMBER
        assert TokenType.COMMENT_PREPROC_FILE.sub_category() == TokenType.COMMENT_PREPROC

    def test_sub_category_without_sub_group(self):
        """Test that types with no hundreds grouping map onto their category."""
        assert TokenType.COMMENT_SINGLE.sub_category() == TokenType.COMMENT
        assert TokenType.KEYWORD_TYPE.sub_category() == TokenType.KEYWORD

    @pytest.mark.parametrize("token_type", [
        TokenType.BACKGROUND,
        TokenType.LINE_NUMBERS,
        TokenType.LINE_HIGHLIGHT,
        TokenType.NONE,
    ])
    def test_structural_types_map_to_eof(self, token_type):
        """Test that structural types have EOF_TYPE as category and sub-category."""
        assert token_type.category() == TokenType.EOF_TYPE
        assert token_type.sub_category() == TokenType.EOF_TYPE

    def test_every_type_has_valid_projections(self):
        """Test that every token type projects onto a defined token type."""
        for token_type in TokenType:
            assert isinstance(token_type.category(), TokenType)
            assert isinstance(token_type.sub_category(), TokenType)

    def test_in_category(self):
        """Test category membership."""
        assert TokenType.NAME_FUNCTION.in_category(TokenType.NAME)
        assert TokenType.NAME_FUNCTION.in_category(TokenType.NAME_CLASS)
        assert not TokenType.NAME_FUNCTION.in_category(TokenType.KEYWORD)

    def test_in_sub_category(self):
        """Test sub-category membership."""
        assert TokenType.LITERAL_STRING_DOC.in_sub_category(TokenType.LITERAL_STRING)
        assert not TokenType.LITERAL_STRING_DOC.in_sub_category(TokenType.LITERAL_NUMBER)
