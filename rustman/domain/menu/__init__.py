"""Menu domain package.

Classification of user input and the states of the interactive menu.
"""

from rustman.domain.menu.selection import (
    NOT_A_NUMBER,
    OUT_OF_RANGE,
    QUIT_TOKEN,
    Index,
    Invalid,
    MenuState,
    Quit,
    Selection,
    classify_selection,
    parse_index,
)

__all__ = [
    "NOT_A_NUMBER",
    "OUT_OF_RANGE",
    "QUIT_TOKEN",
    "Index",
    "Invalid",
    "MenuState",
    "Quit",
    "Selection",
    "classify_selection",
    "parse_index",
]
