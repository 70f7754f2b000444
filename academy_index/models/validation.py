"""
Input validation helpers shared by the records and the Academy.
"""

MONTH_NAMES = {
    "enero": 1,
    "febrero": 2,
    "marzo": 3,
    "abril": 4,
    "mayo": 5,
    "junio": 6,
    "julio": 7,
    "agosto": 8,
    "septiembre": 9,
    "setiembre": 9,
    "octubre": 10,
    "noviembre": 11,
    "diciembre": 12,
}


def validate_full_name(name: str) -> bool:
    """
    Check a "Firstname Lastname" full name.

    Exactly one space is allowed, and it may not lead or trail.
    """
    if not name or name[0] == " " or name[-1] == " ":
        return False
    return name.count(" ") == 1


def month_from_name(name: str) -> int:
    """Map a Spanish month name to 1..12, or 0 when unknown."""
    return MONTH_NAMES.get(name.strip().lower(), 0)


def parse_month(text: str | int) -> int:
    """
    Accept a month as a number or a Spanish month name.

    Returns:
        The month number, or 0 if the text is neither.
    """
    if isinstance(text, int):
        return text
    text = text.strip()
    if text[:1].isdigit():
        try:
            return int(text)
        except ValueError:
            return 0
    return month_from_name(text)
