"""RGB colour values used by style entries."""

from dataclasses import dataclass
import math
from typing import ClassVar, Dict


@dataclass(frozen=True)
class Colour:
    """
    An RGB colour that may also be unset.

    The colour is held as a single integer: 0 means "unset", otherwise the value is
    the 24-bit RGB value plus one.  This keeps black distinguishable from unset.
    """
    value: int = 0

    # Named ANSI colours accepted in place of hex values
    _ANSI_TO_RGB: ClassVar[Dict[str, str]] = {
        "#ansiblack": "000000",
        "#ansidarkred": "7f0000",
        "#ansidarkgreen": "007f00",
        "#ansibrown": "7f7fe0",
        "#ansidarkblue": "00007f",
        "#ansipurple": "7f007f",
        "#ansiteal": "007f7f",
        "#ansilightgray": "e5e5e5",
        "#ansidarkgray": "555555",
        "#ansired": "ff0000",
        "#ansigreen": "00ff00",
        "#ansiyellow": "ffff00",
        "#ansiblue": "0000ff",
        "#ansifuchsia": "ff00ff",
        "#ansiturquoise": "00ffff",
        "#ansiwhite": "ffffff",
        "#black": "000000",
        "#darkred": "7f0000",
        "#darkgreen": "007f00",
        "#brown": "7f7fe0",
        "#darkblue": "00007f",
        "#purple": "7f007f",
        "#teal": "007f7f",
        "#lightgray": "e5e5e5",
        "#darkgray": "555555",
        "#red": "ff0000",
        "#green": "00ff00",
        "#yellow": "ffff00",
        "#blue": "0000ff",
        "#fuchsia": "ff00ff",
        "#turquoise": "00ffff",
        "#white": "ffffff",
    }

    _HEX_CHARS: ClassVar[frozenset[str]] = frozenset("0123456789abcdefABCDEF")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Colour":
        """Create a colour from 8-bit red, green and blue components."""
        return cls(((red & 0xff) << 16 | (green & 0xff) << 8 | (blue & 0xff)) + 1)

    @classmethod
    def parse(cls, text: str) -> "Colour":
        """
        Parse a colour from "#RRGGBB", "#RGB" or a named ANSI colour.

        Args:
            text: Colour text to parse

        Returns:
            The parsed colour, or an unset colour if the text is not a valid colour
        """
        rgb = cls._ANSI_TO_RGB.get(text)
        if rgb is None:
            rgb = text[1:] if text.startswith("#") else text
            if len(rgb) == 3:
                rgb = "".join(ch * 2 for ch in rgb)

        if len(rgb) != 6 or not all(ch in cls._HEX_CHARS for ch in rgb):
            return cls()

        return cls(int(rgb, 16) + 1)

    def __str__(self) -> str:
        if not self.is_set():
            return ""

        return f"#{self.value - 1:06x}"

    def is_set(self) -> bool:
        """Return True if this colour holds a value."""
        return self.value != 0

    @property
    def red(self) -> int:
        return ((self.value - 1) >> 16) & 0xff

    @property
    def green(self) -> int:
        return ((self.value - 1) >> 8) & 0xff

    @property
    def blue(self) -> int:
        return (self.value - 1) & 0xff

    def brightness(self) -> float:
        """Perceived brightness of the colour, in the range 0 to 1."""
        return (self.red + self.green + self.blue) / 255.0 / 3.0

    def brighten(self, factor: float) -> "Colour":
        """
        Brighten the colour by a factor.

        Args:
            factor: Fraction (-1 to 1) to brighten by; negative values darken

        Returns:
            The adjusted colour
        """
        if not self.is_set():
            return self

        r = float(self.red)
        g = float(self.green)
        b = float(self.blue)
        if factor < 0:
            factor += 1
            r *= factor
            g *= factor
            b *= factor

        else:
            r = (255 - r) * factor + r
            g = (255 - g) * factor + g
            b = (255 - b) * factor + b

        return Colour.from_rgb(int(r), int(g), int(b))

    def brighten_or_darken(self, factor: float) -> "Colour":
        """Brighten a dark colour, or darken a light one, by a factor."""
        if self.brightness() < 0.5:
            return self.brighten(factor)

        return self.brighten(-factor)

    def clamp_brightness(self, minimum: float, maximum: float) -> "Colour":
        """
        Adjust the colour so its brightness lies between minimum and maximum.

        Args:
            minimum: Lowest acceptable brightness (0 to 1)
            maximum: Highest acceptable brightness (0 to 1)

        Returns:
            This colour if already in range, else a brightened or darkened one
        """
        if not self.is_set():
            return self

        minimum = max(minimum, 0.0)
        maximum = min(maximum, 1.0)
        current = self.brightness()
        target = min(max(current, minimum), maximum)
        if current == target:
            return self

        rgb = float(self.red + self.green + self.blue)
        if target > current:
            return self.brighten((target * 255 * 3 - rgb) / (255 * 3 - rgb))

        return self.brighten((target * 255 * 3 / rgb) - 1)

    def distance(self, other: "Colour") -> float:
        """
        Approximate perceptual distance between two colours.

        See https://www.compuphase.com/cmetric.htm
        """
        rmean = (self.red + other.red) // 2
        r = self.red - other.red
        g = self.green - other.green
        b = self.blue - other.blue
        return math.sqrt((((512 + rmean) * r * r) >> 8) + 4 * g * g + (((767 - rmean) * b * b) >> 8))
