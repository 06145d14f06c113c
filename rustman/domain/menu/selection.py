"""Selection parsing for the interactive project menu.

A line typed at the prompt is classified into exactly one of:

- Quit: the quit token ``q`` in any case
- Index: a listed project number, 1-based
- Invalid: anything else, with the message to show before re-prompting

All functions are pure - no I/O, no side effects.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from rustman.errors import InvalidSelectionInput

QUIT_TOKEN = "q"

NOT_A_NUMBER = "Please enter a valid number or 'q' to quit."
OUT_OF_RANGE = "Invalid selection. Please enter a valid project number."

# ASCII digits only; int() alone would also accept "1_0" and non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


class MenuState(str, Enum):
    """States of the interactive menu loop."""

    LISTING = "listing"
    AWAITING_SELECTION = "awaiting-selection"
    SHOWING_DETAIL = "showing-detail"
    TERMINATED = "terminated"


@dataclass(frozen=True, slots=True)
class Quit:
    """The user asked to leave the menu."""


@dataclass(frozen=True, slots=True)
class Index:
    """A valid project number.

    Attributes:
        number: 1-based position in the listing.
    """

    number: int

    @property
    def offset(self) -> int:
        """0-based position in the project sequence."""
        return self.number - 1


@dataclass(frozen=True, slots=True)
class Invalid:
    """Input that cannot be acted on.

    Attributes:
        reason: Message shown to the user before the next prompt.
    """

    reason: str


Selection = Union[Quit, Index, Invalid]  # noqa: UP007


def parse_index(text: str, count: int) -> int:
    """Parse a listing number and check it against the listing length.

    Args:
        text: Trimmed user input.
        count: Number of projects in the listing.

    Returns:
        The 1-based project number.

    Raises:
        InvalidSelectionInput: If text is not an integer, or is outside
            ``[1, count]``.
    """
    if not _INTEGER.fullmatch(text):
        raise InvalidSelectionInput(NOT_A_NUMBER)

    try:
        number = int(text)
    except ValueError:
        # Beyond the interpreter's int-from-string digit limit
        raise InvalidSelectionInput(OUT_OF_RANGE) from None

    if not 1 <= number <= count:
        raise InvalidSelectionInput(OUT_OF_RANGE)
    return number


def classify_selection(text: str, count: int) -> Selection:
    """Classify one line of menu input.

    Args:
        text: Raw line as read from the user, surrounding whitespace allowed.
        count: Number of projects in the listing.

    Returns:
        Quit, Index or Invalid. Never raises for bad input.
    """
    text = text.strip()
    if text.lower() == QUIT_TOKEN:
        return Quit()

    try:
        return Index(parse_index(text, count))
    except InvalidSelectionInput as e:
        return Invalid(str(e))
