"""
Token styles for syntax highlighting.

This package resolves the colours and font attributes used to render each token
type, supporting styles derived from other styles, category fallback and an XML
form for storing complete styles.
"""

from syntax_style.colour import Colour
from syntax_style.style import Style
from syntax_style.style_builder import StyleBuilder
from syntax_style.style_entry import StyleEntry
from syntax_style.style_entry_parser import StyleEntryParser
from syntax_style.style_exceptions import (
    StyleBuildError,
    StyleDecodeError,
    StyleEncodeError,
    StyleError,
    StyleParseError,
)
from syntax_style.style_registry import StyleRegistry
from syntax_style.style_settings import StyleSettings
from syntax_style.style_xml_codec import StyleXmlCodec
from syntax_style.trilean import Trilean

__all__ = [
    # Exceptions
    'StyleError',
    'StyleParseError',
    'StyleBuildError',
    'StyleDecodeError',
    'StyleEncodeError',
    # Values
    'Colour',
    'Trilean',
    'StyleEntry',
    # Core classes
    'StyleEntryParser',
    'Style',
    'StyleBuilder',
    'StyleXmlCodec',
    'StyleRegistry',
    'StyleSettings',
]
