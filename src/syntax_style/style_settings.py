"""Settings controlling where styles are loaded from and which style is the fallback."""

from dataclasses import dataclass, field
import json
import os
from typing import List


@dataclass
class StyleSettings:
    """
    Style registry settings.
    """
    fallback_style: str = "swapoff"
    style_paths: List[str] = field(default_factory=list)  # Extra directories holding *.xml styles

    @classmethod
    def create_default(cls) -> "StyleSettings":
        """Create a new StyleSettings object with default values."""
        return cls(
            fallback_style="swapoff",
            style_paths=[]
        )

    @classmethod
    def load(cls, path: str) -> "StyleSettings":
        """
        Load style settings from file.

        Args:
            path: Path to the settings file

        Returns:
            StyleSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            OSError: If the file cannot be read
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            settings.fallback_style = data.get("fallbackStyle", settings.fallback_style)
            settings.style_paths = list(data.get("stylePaths", []))

        return settings

    def save(self, path: str) -> None:
        """
        Save style settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            OSError: If there's an issue creating the directory or writing the file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "fallbackStyle": self.fallback_style,
            "stylePaths": self.style_paths,
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
