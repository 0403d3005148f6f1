"""Fixed-width sort key for LC call numbers.

Column layout (38 characters in total)
--------------------------------------
letters      3   right padded
number      10   integer half left padded, fraction half right padded
class year   5   right padded
cutters     15   three 5-character slots, right padded
remainder    5   right padded

Each value is truncated to its column width before padding.  Absent values
contribute filler only, which makes a call number with fewer components
sort before one with more.

Note that fractions are compared as text: ``"76.5"`` pads to ``"5    "``
and sorts before ``"76.50"`` (``"50   "``) because the filler is the lowest
character, not because the numeric values differ.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal

from lccallnumber.core.constants import (
    CLASS_YEAR_WIDTH,
    CUTTER_WIDTH,
    LETTERS_WIDTH,
    LOW_SORT_CHAR,
    MAX_CUTTERS,
    NUMBER_HALF_WIDTH,
    REMAINDER_WIDTH,
)
from lccallnumber.parsing.grammar import parse_call_number

logger = logging.getLogger(__name__)

PadSide = Literal["left", "right"]


def pad_field(
    value: str | None,
    width: int,
    *,
    filler: str = LOW_SORT_CHAR,
    side: PadSide = "right",
) -> str:
    """Truncate *value* to *width* characters, then pad it with *filler*.

    ``None`` is treated as an empty string.  Pass
    :data:`~lccallnumber.core.constants.HI_SORT_CHAR` as *filler* to build
    keys that sort after every real call number sharing the same prefix.
    """
    text = (value or "")[:width]
    if side == "left":
        return text.rjust(width, filler)
    return text.ljust(width, filler)


def normalize_letters(letters: str | None) -> str:
    return pad_field(letters, LETTERS_WIDTH)


def normalize_number(number: str | None) -> str:
    """Return the 10-character number column.

    The number is split on the first ``.``; a missing point or an empty
    fraction (``"123."``) both give an empty fraction half.
    """
    whole, _, fraction = (number or "").partition(".")
    if len(whole) > NUMBER_HALF_WIDTH or len(fraction) > NUMBER_HALF_WIDTH:
        logger.debug("normalize_number: truncating %r", number)
    return pad_field(whole, NUMBER_HALF_WIDTH, side="left") + pad_field(
        fraction, NUMBER_HALF_WIDTH
    )


def normalize_class_year(class_year: str | None) -> str:
    return pad_field(class_year, CLASS_YEAR_WIDTH)


def normalize_cutters(cutters: Sequence[str | None]) -> str:
    """Return the 15-character cutter column.

    Only the first three slots are used; missing trailing slots and
    ``None`` entries both contribute five filler characters.
    """
    slots = list(cutters[:MAX_CUTTERS])
    slots.extend([None] * (MAX_CUTTERS - len(slots)))
    return "".join(pad_field(cutter, CUTTER_WIDTH) for cutter in slots)


def normalize_remainder(remainder: str | None) -> str:
    return pad_field(remainder, REMAINDER_WIDTH)


def normalize_fields(
    letters: str | None,
    number: str | None,
    class_year: str | None,
    cutters: Sequence[str | None],
    remainder: str | None,
) -> str:
    """Concatenate all normalized columns into one 38-character key."""
    return (
        normalize_letters(letters)
        + normalize_number(number)
        + normalize_class_year(class_year)
        + normalize_cutters(cutters)
        + normalize_remainder(remainder)
    )


def sort_key(raw: str) -> str:
    """Parse *raw* and return its normalized sort key.

    The key is produced even for call numbers that fail validation; check
    :func:`~lccallnumber.parsing.grammar.parse_call_number` first when only
    valid call numbers should be indexed.
    """
    parsed = parse_call_number(raw)
    return normalize_fields(
        parsed.letters,
        parsed.number,
        parsed.class_year,
        parsed.cutters,
        parsed.remainder,
    )
