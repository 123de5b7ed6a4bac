from enum import IntEnum


class Trilean(IntEnum):
    """
    Three-state style attribute.

    PASS means the attribute is not specified and should be inherited.
    """
    PASS = 0
    YES = 1
    NO = 2

    def __str__(self) -> str:
        if self == Trilean.YES:
            return "Yes"

        if self == Trilean.NO:
            return "No"

        return "Pass"

    def prefix(self, name: str) -> str:
        """
        Render the attribute name for this state.

        Args:
            name: Base attribute name, e.g. "bold"

        Returns:
            `name` for YES, "no" + `name` for NO and an empty string for PASS
        """
        if self == Trilean.YES:
            return name

        if self == Trilean.NO:
            return "no" + name

        return ""
