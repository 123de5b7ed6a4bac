"""Token categories used when styling lexer output."""

from syntax.token_type import TokenType
from syntax.token_type_utils import TokenTypeUtils


__all__ = [
    "TokenType",
    "TokenTypeUtils"
]
