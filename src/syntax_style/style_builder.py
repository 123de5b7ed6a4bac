"""Mutable builder for immutable styles."""

import logging
from typing import Callable, Dict, Mapping

from syntax import TokenType

from syntax_style.style import Style
from syntax_style.style_entry import StyleEntry
from syntax_style.style_exceptions import StyleBuildError, StyleParseError


class StyleBuilder:
    """
    Staging area for a style.

    Descriptors are held as text and only validated when `build()` is called, so
    builder methods can be chained without checking for errors at each step.
    A builder must not be shared between threads while it is being modified.
    """

    def __init__(self, name: str, theme: str, parent: Style | None = None) -> None:
        """
        Initialize the builder.

        Args:
            name: Name of the style to build
            theme: Theme identifier of the style to build
            parent: Optional already-built style that the new style derives from
        """
        if parent is not None and not isinstance(parent, Style):
            raise TypeError(f"parent must be a Style, not {type(parent).__name__}")

        self._logger = logging.getLogger("StyleBuilder")
        self._name = name
        self._theme = theme
        self._entries: Dict[TokenType, str] = {}
        self._parent = parent

    @property
    def name(self) -> str:
        return self._name

    @property
    def theme(self) -> str:
        return self._theme

    def add_all(self, entries: Mapping[TokenType, str]) -> "StyleBuilder":
        """Add descriptors for several token types, replacing any already present."""
        for token_type, descriptor in entries.items():
            self._entries[token_type] = descriptor

        return self

    def add(self, token_type: TokenType, descriptor: str) -> "StyleBuilder":
        """
        Add a descriptor for a token type.

        Args:
            token_type: Token type to style
            descriptor: Style descriptor, e.g. "bold #ff0000"

        Returns:
            This builder
        """
        self._entries[token_type] = descriptor
        return self

    def add_entry(self, token_type: TokenType, entry: StyleEntry) -> "StyleBuilder":
        """Add an already-parsed entry for a token type."""
        self._entries[token_type] = entry.format()
        return self

    def get(self, token_type: TokenType) -> StyleEntry:
        """
        Preview the entry for a token type.

        The staged descriptor is merged with the parent's resolved entry.  Invalid
        descriptors are treated as empty here; they are reported by `build()`.
        """
        try:
            entry = StyleEntry.parse(self._entries.get(token_type, ""))

        except StyleParseError:
            entry = StyleEntry()

        if self._parent is not None:
            entry = entry.inherit(self._parent.get(token_type))

        return entry

    def transform(self, transform: Callable[[StyleEntry], StyleEntry]) -> "StyleBuilder":
        """
        Replace every known entry with the result of a function applied to it.

        This covers entries staged in this builder as well as every token type
        styled by the parent, e.g. to clamp the brightness of a whole palette.

        Args:
            transform: Function mapping an entry to its replacement

        Returns:
            This builder
        """
        token_types = set(self._entries)
        if self._parent is not None:
            token_types.update(self._parent.types())

        for token_type in token_types:
            self.add_entry(token_type, transform(self.get(token_type)))

        return self

    def build(self) -> Style:
        """
        Build an immutable style from the staged descriptors.

        Returns:
            The new style

        Raises:
            StyleBuildError: If any staged descriptor is invalid; no style is created
        """
        entries: Dict[TokenType, StyleEntry] = {}
        for token_type, descriptor in self._entries.items():
            try:
                entries[token_type] = StyleEntry.parse(descriptor)

            except StyleParseError as e:
                raise StyleBuildError(token_type, e) from e

        self._logger.debug("built style '%s' with %d entries", self._name, len(entries))
        return Style(self._name, self._theme, entries, self._parent)
