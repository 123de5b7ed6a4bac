"""Style entry: the visual attributes applied to a single token type."""

from dataclasses import dataclass, replace
from typing import List

from syntax_style.colour import Colour
from syntax_style.trilean import Trilean


@dataclass(frozen=True)
class StyleEntry:
    """
    Colours and font attributes for one token type.

    Unset colours and PASS attributes carry no opinion and are filled in from
    ancestors by `inherit`.  Setting `no_inherit` stops that from happening.
    """
    colour: Colour = Colour()
    background: Colour = Colour()
    border: Colour = Colour()
    bold: Trilean = Trilean.PASS
    italic: Trilean = Trilean.PASS
    underline: Trilean = Trilean.PASS
    no_inherit: bool = False

    @classmethod
    def parse(cls, descriptor: str) -> "StyleEntry":
        """
        Parse a style descriptor such as "bold #ff0000 bg:#000000".

        Raises:
            StyleParseError: If any element of the descriptor is invalid
        """
        # The parser module imports StyleEntry
        from syntax_style.style_entry_parser import StyleEntryParser  # pylint: disable=import-outside-toplevel
        return StyleEntryParser().parse(descriptor)

    def format(self) -> str:
        """
        Render the entry in descriptor form.

        The output parses back to an equal entry.
        """
        out: List[str] = []
        if self.bold != Trilean.PASS:
            out.append(self.bold.prefix("bold"))

        if self.italic != Trilean.PASS:
            out.append(self.italic.prefix("italic"))

        if self.underline != Trilean.PASS:
            out.append(self.underline.prefix("underline"))

        if self.no_inherit:
            out.append("noinherit")

        if self.colour.is_set():
            out.append(str(self.colour))

        if self.background.is_set():
            out.append("bg:" + str(self.background))

        if self.border.is_set():
            out.append("border:" + str(self.border))

        return " ".join(out)

    def __str__(self) -> str:
        return self.format()

    def sub(self, other: "StyleEntry") -> "StyleEntry":
        """
        Remove the attributes this entry shares with another.

        Args:
            other: Entry to subtract

        Returns:
            A new entry holding only the attributes of this entry that differ from `other`
        """
        out = StyleEntry()
        if other.colour != self.colour:
            out = replace(out, colour=self.colour)

        if other.background != self.background:
            out = replace(out, background=self.background)

        if other.border != self.border:
            out = replace(out, border=self.border)

        if other.bold != self.bold:
            out = replace(out, bold=self.bold)

        if other.italic != self.italic:
            out = replace(out, italic=self.italic)

        if other.underline != self.underline:
            out = replace(out, underline=self.underline)

        return out

    def inherit(self, *ancestors: "StyleEntry") -> "StyleEntry":
        """
        Fill unspecified attributes from ancestor entries.

        Ancestors are given oldest first and are consulted nearest first, so nearer
        ancestors take priority.  Attributes already set on this entry are never
        replaced.  Resolution stops as soon as the entry has `no_inherit` set.

        Args:
            ancestors: Ancestor entries, from most distant to nearest

        Returns:
            The merged entry
        """
        out = self
        for ancestor in reversed(ancestors):
            if out.no_inherit:
                return out

            out = replace(
                out,
                colour=out.colour if out.colour.is_set() else ancestor.colour,
                background=out.background if out.background.is_set() else ancestor.background,
                border=out.border if out.border.is_set() else ancestor.border,
                bold=out.bold if out.bold != Trilean.PASS else ancestor.bold,
                italic=out.italic if out.italic != Trilean.PASS else ancestor.italic,
                underline=out.underline if out.underline != Trilean.PASS else ancestor.underline
            )

        return out

    def is_zero(self) -> bool:
        """Return True if the entry specifies nothing at all."""
        return (
            not self.colour.is_set() and
            not self.background.is_set() and
            not self.border.is_set() and
            self.bold == Trilean.PASS and
            self.italic == Trilean.PASS and
            self.underline == Trilean.PASS and
            not self.no_inherit
        )
