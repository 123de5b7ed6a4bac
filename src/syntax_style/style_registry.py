import glob
import logging
import os
from typing import Dict, List

from syntax_style.style import Style
from syntax_style.style_exceptions import StyleDecodeError
from syntax_style.style_settings import StyleSettings
from syntax_style.style_xml_codec import StyleXmlCodec


class StyleRegistry:
    """
    A registry of named styles.

    The registry is shared across the application.  Styles bundled with the package,
    and any found in the directories named by the current settings, are loaded the
    first time the registry is used.  Further styles can be added with `register`.
    """

    _instance = None
    _logger = logging.getLogger("StyleRegistry")
    _styles: Dict[str, Style] = {}
    _settings: StyleSettings = StyleSettings.create_default()
    _loaded = False

    # Always bundled, so always available as a last resort
    _BUILTIN_FALLBACK = "swapoff"

    _BUNDLED_STYLES_DIR = os.path.join(os.path.dirname(__file__), "styles")

    def __new__(cls) -> "StyleRegistry":
        """
        Implement the singleton pattern to ensure only one registry exists.

        Returns:
            The single StyleRegistry instance
        """
        if cls._instance is None:
            cls._instance = super(StyleRegistry, cls).__new__(cls)

        return cls._instance

    @classmethod
    def configure(cls, settings: StyleSettings) -> None:
        """
        Apply new settings.

        All styles are discarded, including registered ones, and are reloaded on next use.

        Args:
            settings: The settings to use
        """
        cls._settings = settings
        cls._styles = {}
        cls._loaded = False

    @classmethod
    def _ensure_loaded(cls) -> None:
        if cls._loaded:
            return

        cls._loaded = True
        cls._load_directory(cls._BUNDLED_STYLES_DIR)
        for path in cls._settings.style_paths:
            cls._load_directory(path)

    @classmethod
    def _load_directory(cls, path: str) -> None:
        """
        Load every *.xml style in a directory.

        Files that can't be read or decoded are skipped.

        Args:
            path: Directory to scan
        """
        codec = StyleXmlCodec()
        for filename in sorted(glob.glob(os.path.join(path, "*.xml"))):
            try:
                style = codec.load(filename)

            except (OSError, StyleDecodeError) as e:
                cls._logger.warning("skipping style file %s: %s", filename, e)
                continue

            cls._styles[style.name] = style
            cls._logger.debug("loaded style '%s' from %s", style.name, filename)

    @classmethod
    def register(cls, style: Style) -> Style:
        """
        Register a style, replacing any existing style of the same name.

        Args:
            style: The style to register

        Returns:
            The registered style
        """
        cls._ensure_loaded()
        cls._styles[style.name] = style
        return style

    @classmethod
    def names(cls) -> List[str]:
        """Return the sorted names of all registered styles."""
        cls._ensure_loaded()
        return sorted(cls._styles)

    @classmethod
    def fallback(cls) -> Style:
        """
        Return the style used when a requested style is unknown.

        If the configured fallback is not registered the bundled fallback is used.
        """
        cls._ensure_loaded()
        style = cls._styles.get(cls._settings.fallback_style)
        if style is None:
            cls._logger.warning(
                "fallback style '%s' not found, using '%s'", cls._settings.fallback_style, cls._BUILTIN_FALLBACK
            )
            style = cls._styles[cls._BUILTIN_FALLBACK]

        return style

    @classmethod
    def get(cls, name: str) -> Style:
        """
        Get a style by name.

        Args:
            name: Name of the style

        Returns:
            The named style, or the fallback style if there is no style with that name
        """
        cls._ensure_loaded()
        style = cls._styles.get(name)
        if style is None:
            cls._logger.warning("style '%s' not found, using fallback", name)
            return cls.fallback()

        return style
