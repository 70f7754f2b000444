"""
DanceStyle enumeration and helpers for preference parsing.
"""

from enum import IntEnum


class DanceStyle(IntEnum):
    """Styles taught at the academy, numbered as offered on the menu."""

    BACHATA = 1
    REGGAETON = 2
    SALSA = 3
    CUMBIA = 4
    TANGO = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: str) -> "DanceStyle":
        """
        Parse a style from its name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not a known style.
        """
        try:
            return cls[text.strip().upper()]
        except KeyError:
            valid = ", ".join(style.label for style in cls)
            raise ValueError(f"Unknown dance style {text!r}; expected one of {valid}") from None

    @classmethod
    def from_menu_choices(cls, choices: list[int], limit: int = 3) -> tuple["DanceStyle", ...]:
        """
        Convert menu numbers to styles.

        Out-of-range numbers and repeats are dropped; at most `limit` styles
        are kept, in the order given.
        """
        styles: list[DanceStyle] = []
        for choice in choices:
            if len(styles) >= limit:
                break
            try:
                style = cls(choice)
            except ValueError:
                continue
            if style not in styles:
                styles.append(style)
        return tuple(styles)

    def __str__(self) -> str:
        return self.label
