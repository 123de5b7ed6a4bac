"""Parser for style entry descriptors."""

from dataclasses import replace
from typing import Any, Dict, Tuple

from syntax_style.colour import Colour
from syntax_style.style_entry import StyleEntry
from syntax_style.style_exceptions import StyleParseError
from syntax_style.trilean import Trilean


class StyleEntryParser:
    """
    Parser for the compact style descriptor grammar.

    A descriptor is a whitespace-separated list of elements, applied left to right so
    later elements override earlier ones:

        bold nobold italic noitalic underline nounderline inherit noinherit
        #RRGGBB bg:#RRGGBB bg: border:#RRGGBB
    """

    # Elements that set a single field to a fixed value
    _FLAG_ELEMENTS: Dict[str, Tuple[str, Any]] = {
        "bold": ("bold", Trilean.YES),
        "nobold": ("bold", Trilean.NO),
        "italic": ("italic", Trilean.YES),
        "noitalic": ("italic", Trilean.NO),
        "underline": ("underline", Trilean.YES),
        "nounderline": ("underline", Trilean.NO),
        "inherit": ("no_inherit", False),
        "noinherit": ("no_inherit", True),
        "bg:": ("background", Colour()),
    }

    def parse(self, descriptor: str) -> StyleEntry:
        """
        Parse a style descriptor into a StyleEntry.

        Args:
            descriptor: Whitespace-separated style elements

        Returns:
            The parsed entry; an empty descriptor gives an empty entry

        Raises:
            StyleParseError: If an element is unknown or a colour is invalid
        """
        entry = StyleEntry()
        for element in descriptor.split():
            entry = self._apply_element(entry, element)

        return entry

    def _apply_element(self, entry: StyleEntry, element: str) -> StyleEntry:
        """
        Apply a single descriptor element to an entry.

        Args:
            entry: Entry built from the preceding elements
            element: The element to apply

        Returns:
            The updated entry

        Raises:
            StyleParseError: If the element is unknown or a colour is invalid
        """
        flag = self._FLAG_ELEMENTS.get(element)
        if flag is not None:
            field_name, value = flag
            return replace(entry, **{field_name: value})

        if element.startswith("bg:#"):
            return replace(entry, background=self._parse_colour(element[3:], element, "invalid background colour"))

        if element.startswith("border:#"):
            return replace(entry, border=self._parse_colour(element[7:], element, "invalid border colour"))

        if element.startswith("#"):
            return replace(entry, colour=self._parse_colour(element, element, "invalid colour"))

        raise StyleParseError(f"unknown style element '{element}'", element)

    def _parse_colour(self, text: str, element: str, message: str) -> Colour:
        colour = Colour.parse(text)
        if not colour.is_set():
            raise StyleParseError(f"{message} '{element}'", element)

        return colour
