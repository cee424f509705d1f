"""Path characters and how they classify."""

import string

from .models import Direction


START_CHARACTER = "@"
END_CHARACTER = "x"
CORNER_CHARACTER = "+"
HORIZONTAL_CHARACTER = "-"
VERTICAL_CHARACTER = "|"
NO_PATH_CHARACTER = " "

LETTERS = frozenset(string.ascii_uppercase)
PATH_CHARACTERS = LETTERS | {
    HORIZONTAL_CHARACTER,
    VERTICAL_CHARACTER,
    CORNER_CHARACTER,
    START_CHARACTER,
    END_CHARACTER,
}


def is_path_character(char: str) -> bool:
    """True if `char` may appear on a path."""
    return char in PATH_CHARACTERS


def is_letter(char: str) -> bool:
    """True if `char` is a collectible uppercase letter."""
    return char in LETTERS


def is_synced_with_direction(char: str, direction: Direction) -> bool:
    """Straight segments may only be travelled along their own axis."""
    if direction.is_horizontal:
        return char != VERTICAL_CHARACTER
    return char != HORIZONTAL_CHARACTER
