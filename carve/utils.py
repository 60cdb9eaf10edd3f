from __future__ import annotations

from . import constants


def is_whitespace(char: str | None) -> bool:
    """Whether a grapheme cluster is Unicode whitespace.

    A cluster such as "\\r\\n" counts as whitespace; a space carrying a
    combining mark does not."""
    if not char:
        return False
    return all(
        (c.isspace() and c not in constants.NOT_WHITESPACE) or c in constants.EXTRA_WHITESPACE
        for c in char
    )


def is_not_whitespace(char: str | None) -> bool:
    return bool(char) and not is_whitespace(char)


def is_digit(char: str | None) -> bool:
    """ASCII decimal digits only; other Unicode digits are not numeric input."""
    return char is not None and len(char) == 1 and char in constants.DIGITS
