"""Shared fixtures for style tests."""

import pytest

from syntax import TokenType
from syntax_style import Style, StyleRegistry, StyleSettings


@pytest.fixture
def base_style():
    """Create a parent-less style with a small palette."""
    return Style.create("base", "dark", {
        TokenType.BACKGROUND: "#ffffff bg:#000000",
        TokenType.TEXT: "#cccccc",
        TokenType.KEYWORD: "bold #0000ff",
        TokenType.COMMENT: "italic #888888",
        TokenType.COMMENT_PREPROC: "noitalic #00ff00",
    })


@pytest.fixture
def registry():
    """Give each test a freshly configured style registry."""
    StyleRegistry.configure(StyleSettings.create_default())
    yield StyleRegistry
    StyleRegistry.configure(StyleSettings.create_default())
