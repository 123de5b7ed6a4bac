"""
Utilities for converting between token type names and TokenType enum values.

The names produced here are the stable identifiers used when styles are
written to, or read from, external documents.
"""

import logging
from typing import Dict, List

from syntax.token_type import TokenType


# Names that don't follow the simple CamelCase conversion
_SPECIAL_NAMES: Dict[TokenType, str] = {
    TokenType.EOF_TYPE: "EOFType",
    TokenType.LINE_TABLE_TD: "LineTableTD",
}


def _camel_case_name(token_type: TokenType) -> str:
    name = _SPECIAL_NAMES.get(token_type)
    if name is not None:
        return name

    return "".join(part.capitalize() for part in token_type.name.split("_"))


class TokenTypeUtils:
    """
    Utility class for handling token type name conversions.

    Names are CamelCase forms of the enum member names (e.g. COMMENT_SINGLE is
    "CommentSingle").  A small number of names keep upper-case acronyms.
    """

    # Logger for the class
    _logger = logging.getLogger("TokenTypeUtils")

    # Lookup tables, complete before the class is first used
    _TOKEN_TYPE_TO_NAME: Dict[TokenType, str] = {t: _camel_case_name(t) for t in TokenType}
    _NAME_TO_TOKEN_TYPE: Dict[str, TokenType] = {name: t for t, name in _TOKEN_TYPE_TO_NAME.items()}
    _LOWER_NAME_TO_TOKEN_TYPE: Dict[str, TokenType] = {
        name.lower(): t for t, name in _TOKEN_TYPE_TO_NAME.items()
    }

    @classmethod
    def get_all_token_types(cls) -> List[TokenType]:
        """
        Get a list of all token types in their stable sort order.

        Returns:
            List of all token types, sorted by value
        """
        return sorted(TokenType)

    @classmethod
    def get_name(cls, token_type: TokenType) -> str:
        """
        Get the stable name for a token type.

        Args:
            token_type: The token type enum value

        Returns:
            CamelCase name of the token type
        """
        return cls._TOKEN_TYPE_TO_NAME[token_type]

    @classmethod
    def from_name(cls, name: str) -> TokenType | None:
        """
        Convert a token type name to a TokenType enum value.

        An exact match is tried first, followed by a case-insensitive match.

        Args:
            name: The name of the token type

        Returns:
            The corresponding TokenType enum value, or None if not found
        """
        token_type = cls._NAME_TO_TOKEN_TYPE.get(name)
        if token_type is not None:
            return token_type

        token_type = cls._LOWER_NAME_TO_TOKEN_TYPE.get(name.strip().lower())
        if token_type is None:
            cls._logger.debug("unknown token type name: %s", name)

        return token_type
