"""Custom exceptions for style operations."""

from typing import Any

from syntax import TokenType, TokenTypeUtils


class StyleError(Exception):
    """Base exception for style operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class StyleParseError(StyleError):
    """Raised when a style entry descriptor cannot be parsed."""

    def __init__(self, message: str, token: str):
        """
        Initialize the exception.

        Args:
            message: Error message
            token: The descriptor element that could not be parsed
        """
        super().__init__(message, {'token': token})
        self.token = token


class StyleBuildError(StyleError):
    """Raised when a style builder holds a descriptor that cannot be parsed."""

    def __init__(self, token_type: TokenType, cause: StyleParseError):
        """
        Initialize the exception.

        Args:
            token_type: The token type the invalid descriptor was added for
            cause: The underlying parse error
        """
        super().__init__(
            f"invalid entry for {TokenTypeUtils.get_name(token_type)}: {cause}",
            {'token_type': TokenTypeUtils.get_name(token_type), 'token': cause.token}
        )
        self.token_type = token_type
        self.cause = cause


class StyleDecodeError(StyleError):
    """Raised when a serialized style document is invalid."""


class StyleEncodeError(StyleError):
    """Raised when a style cannot be serialized."""
