"""
XML serialization for styles.

A style document looks like:

    <style name="monokai" theme="dark">
      <entry type="Background" style="#f8f8f2 bg:#272822"/>
      <entry type="Keyword" style="#66d9ef"/>
    </style>
"""

import logging
from typing import Dict
import xml.etree.ElementTree as ET

from syntax import TokenType, TokenTypeUtils

from syntax_style.style import Style
from syntax_style.style_entry import StyleEntry
from syntax_style.style_exceptions import StyleDecodeError, StyleEncodeError, StyleParseError


class StyleXmlCodec:
    """Encode styles to, and decode styles from, XML documents."""

    _ROOT_TAG = "style"
    _ENTRY_TAG = "entry"

    def __init__(self) -> None:
        self._logger = logging.getLogger("StyleXmlCodec")

    def encode(self, style: Style) -> str:
        """
        Encode a style as an XML document.

        Entries are written in token type order so the output is deterministic.

        Args:
            style: Style to encode; it must not have a parent

        Returns:
            The XML document text

        Raises:
            StyleEncodeError: If the style has a parent
        """
        if style.parent is not None:
            raise StyleEncodeError(
                f"cannot encode style '{style.name}' with a parent",
                {'name': style.name, 'parent': style.parent.name}
            )

        root = ET.Element(self._ROOT_TAG, {'name': style.name, 'theme': style.theme})
        entries = style.entries()
        for token_type in sorted(entries):
            ET.SubElement(root, self._ENTRY_TAG, {
                'type': TokenTypeUtils.get_name(token_type),
                'style': entries[token_type].format()
            })

        ET.indent(root)
        return ET.tostring(root, encoding="unicode") + "\n"

    def decode(self, text: str) -> Style:
        """
        Decode a style from an XML document.

        Args:
            text: The XML document text

        Returns:
            The decoded style, which has no parent

        Raises:
            StyleDecodeError: If the document is malformed or contains invalid content
        """
        try:
            root = ET.fromstring(text)

        except ET.ParseError as e:
            raise StyleDecodeError(f"malformed style document: {e}") from e

        if root.tag != self._ROOT_TAG:
            raise StyleDecodeError(f"unexpected element {root.tag}", {'element': root.tag})

        for attr in root.attrib:
            if attr not in ('name', 'theme'):
                raise StyleDecodeError(f"unexpected attribute {attr}", {'attribute': attr})

        name = root.get('name', "")
        if not name:
            raise StyleDecodeError("missing style name attribute")

        theme = root.get('theme', "")
        if not theme:
            raise StyleDecodeError("missing style theme attribute")

        entries: Dict[TokenType, StyleEntry] = {}
        for element in root:
            token_type, entry = self._decode_entry(element)
            entries[token_type] = entry

        self._logger.debug("decoded style '%s' with %d entries", name, len(entries))
        return Style(name, theme, entries)

    def _decode_entry(self, element: ET.Element) -> tuple[TokenType, StyleEntry]:
        """
        Decode a single entry element.

        Raises:
            StyleDecodeError: If the element is not a valid entry
        """
        if element.tag != self._ENTRY_TAG:
            raise StyleDecodeError(f"unexpected element {element.tag}", {'element': element.tag})

        for attr in element.attrib:
            if attr not in ('type', 'style'):
                raise StyleDecodeError(f"unexpected attribute {attr}", {'attribute': attr})

        type_name = element.get('type')
        if type_name is None:
            raise StyleDecodeError("missing entry type attribute")

        token_type = TokenTypeUtils.from_name(type_name)
        if token_type is None:
            raise StyleDecodeError(f"unknown token type {type_name}", {'type': type_name})

        try:
            entry = StyleEntry.parse(element.get('style', ""))

        except StyleParseError as e:
            raise StyleDecodeError(
                f"invalid style for {type_name}: {e}",
                {'type': type_name, 'token': e.token}
            ) from e

        return token_type, entry

    def load(self, path: str) -> Style:
        """
        Load a style from an XML file.

        Raises:
            OSError: If the file cannot be read
            StyleDecodeError: If the file does not hold a valid style
        """
        with open(path, 'r', encoding='utf-8') as f:
            return self.decode(f.read())

    def save(self, style: Style, path: str) -> None:
        """
        Save a style to an XML file.

        Raises:
            OSError: If the file cannot be written
            StyleEncodeError: If the style has a parent
        """
        text = self.encode(style)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
