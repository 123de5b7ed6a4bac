"""Immutable styles mapping token types to style entries."""

from typing import TYPE_CHECKING, Dict, FrozenSet, Mapping, Set

from syntax import TokenType

from syntax_style.style_entry import StyleEntry

if TYPE_CHECKING:
    from syntax_style.style_builder import StyleBuilder


class Style:
    """
    A named set of style entries, optionally layered over a parent style.

    Styles are created by `StyleBuilder.build()` and never change afterwards, so they
    may be shared freely.  A derived style only holds the entries it overrides; the
    rest are found by walking the parent chain.
    """

    # Token types for which an entry is derived from the background when none is defined
    _SYNTHESISABLE: FrozenSet[TokenType] = frozenset({
        TokenType.LINE_HIGHLIGHT,
        TokenType.LINE_NUMBERS,
        TokenType.LINE_NUMBERS_TABLE,
    })

    def __init__(
        self,
        name: str,
        theme: str,
        entries: Mapping[TokenType, StyleEntry],
        parent: "Style | None" = None
    ) -> None:
        """
        Initialize the style.

        Args:
            name: Name of the style
            theme: Theme identifier, e.g. "light" or "dark"
            entries: Entries defined at this level
            parent: Style to fall back to for entries not defined here
        """
        if parent is not None and not isinstance(parent, Style):
            raise TypeError(f"parent must be a Style, not {type(parent).__name__}")

        self._name = name
        self._theme = theme
        self._entries: Dict[TokenType, StyleEntry] = dict(entries)
        self._parent = parent

    @classmethod
    def create(cls, name: str, theme: str, entries: Mapping[TokenType, str]) -> "Style":
        """
        Create a style from a mapping of token types to descriptors.

        Raises:
            StyleBuildError: If any descriptor is invalid
        """
        from syntax_style.style_builder import StyleBuilder  # pylint: disable=import-outside-toplevel
        return StyleBuilder(name, theme).add_all(entries).build()

    def __repr__(self) -> str:
        return f"Style(name={self._name!r}, theme={self._theme!r}, entries={len(self._entries)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def theme(self) -> str:
        return self._theme

    @property
    def parent(self) -> "Style | None":
        return self._parent

    def entries(self) -> Dict[TokenType, StyleEntry]:
        """Return a copy of the entries defined at this level only."""
        return dict(self._entries)

    def builder(self) -> "StyleBuilder":
        """
        Create a builder for a style derived from this one.

        This is cheap: the new builder starts with no entries of its own and refers
        back to this style for everything else.
        """
        from syntax_style.style_builder import StyleBuilder  # pylint: disable=import-outside-toplevel
        return StyleBuilder(self._name, self._theme, parent=self)

    def types(self) -> Set[TokenType]:
        """Return every token type with an entry in this style or any of its ancestors."""
        out = set(self._entries)
        if self._parent is not None:
            out.update(self._parent.types())

        return out

    def has(self, token_type: TokenType) -> bool:
        """
        Check whether a token type has an entry in this style or any of its ancestors.

        Unlike `get`, no category fallback is applied.  Synthesisable token types
        always count as present.
        """
        return not self._get(token_type).is_zero() or token_type in self._SYNTHESISABLE

    def get(self, token_type: TokenType) -> StyleEntry:
        """
        Get the fully resolved entry for a token type.

        Unspecified attributes are filled from, in order of priority, the token
        type's sub-category, its category, TEXT and finally BACKGROUND.

        Args:
            token_type: Token type to look up

        Returns:
            The resolved style entry
        """
        return self._get(token_type).inherit(
            self._get(TokenType.BACKGROUND),
            self._get(TokenType.TEXT),
            self._get(token_type.category()),
            self._get(token_type.sub_category())
        )

    def _get(self, token_type: TokenType) -> StyleEntry:
        entry = self._entries.get(token_type, StyleEntry())
        if entry.is_zero() and self._parent is not None:
            return self._parent._get(token_type)  # pylint: disable=protected-access

        if entry.is_zero() and token_type in self._SYNTHESISABLE:
            entry = self._synthesise(token_type)

        return entry

    def _synthesise(self, token_type: TokenType) -> StyleEntry:
        background = self._get(TokenType.BACKGROUND)

        # Line highlight is the background, 10% brighter or darker
        if token_type == TokenType.LINE_HIGHLIGHT:
            return StyleEntry(background=background.background.brighten_or_darken(0.1))

        # Line numbers take the background entry's text colour, 50% brighter or darker
        if token_type in (TokenType.LINE_NUMBERS, TokenType.LINE_NUMBERS_TABLE):
            return StyleEntry(colour=background.colour.brighten_or_darken(0.5))

        return StyleEntry()
