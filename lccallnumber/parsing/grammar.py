"""Single-pass grammar for Library of Congress call numbers.

The whole call number is matched by one verbose regular expression whose
capture groups map positionally onto the parsed fields:

    1  letters            1-3 uppercase class letters
    2  number             integer part of the class number
    3  number fraction    digits after the decimal point
    4  class year         extra numbering, ordinal suffixes kept (1st, 15th)
    5  cutter 1 letter    6  cutter 1 digits
    7  cutter 2 letter    8  cutter 2 digits
    9  cutter 3 letter    10 cutter 3 digits
    11 remainder          free text tail, trimmed

Groups are evaluated left to right with ordinary backtracking, so the
precedence between the optional slots is fixed by the pattern itself.
The cutter 1 digit group is lazy (``??``) and accepts ``\\d+\\w?`` or end of
input; cutters 2 and 3 accept a digit run followed by one word character
(or ``|``), or a single digit.  Because the cutter 1 group is lazy, a bare
trailing cutter letter (``"HD1691 .A"``) leaves cutter 1 absent.

For ``"HD1691 .A59 1987"`` the result is cutter 1 ``"A59"`` and remainder
``"1987"``; the class year slot stays empty because ``1987`` only appears
after the cutter.

Parsing never raises.  Input the grammar cannot match at all yields a
result with every field ``None`` and ``is_valid`` set to ``False``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from lccallnumber.core.constants import MAX_CUTTERS

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

_CALL_NUMBER_RE = re.compile(
    r"""
    ^\s*
    ([A-Z]{1,3})                # letters
    \s*
    (?:                         # optional number with optional decimal point
        (\d+)
        (?:\s*?\.\s*?(\d+))?
    )?
    \s*
    (\d+[stndrh]*)?             # extra numbering, suffixes included (1st, 2nd)
    \s*
    (?:                         # cutter 1
        \.?\s*
        ([A-Z])
        \s*
        (\d+\w?|\Z)??
    )?
    \s*
    (?:                         # cutter 2
        \.?\s*
        ([A-Z])
        \s*
        (\d+[\w|]|\d)?
    )?
    \s*
    (?:                         # cutter 3
        \.?\s*
        ([A-Z])
        \s*
        (\d+[\w|]|\d)?
    )?
    (\s+.+?)?                   # everything else
    \s*$
    """,
    re.VERBOSE | re.ASCII,
)

_LETTERS_RE = re.compile(r"^[A-Z]")

# (letter group, digits group) for each cutter slot
_CUTTER_GROUPS: tuple[tuple[int, int], ...] = ((5, 6), (7, 8), (9, 10))


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedCallNumber:
    """Fields captured from one raw call number string.

    Attributes
    ----------
    raw:        The input string exactly as given.
    letters:    Class letters, e.g. ``"HD"``.
    number:     Class number, ``"1691"`` or ``"76.73"``.
    class_year: Extra numbering after the class number, e.g. ``"15th"``.
    cutters:    Exactly three slots; absent cutters are ``None``.
    remainder:  Trimmed free text after the structured fields.
    is_valid:   Letters, number and cutter 1 are all present.
    """

    raw: str
    letters: str | None = None
    number: str | None = None
    class_year: str | None = None
    cutters: tuple[str | None, ...] = (None,) * MAX_CUTTERS
    remainder: str | None = None
    is_valid: bool = False


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build_cutter(match: re.Match[str], letter_group: int, digits_group: int) -> str | None:
    """Return letter + digits, or ``None`` when either half did not match."""
    letter = match.group(letter_group)
    digits = match.group(digits_group)
    if letter is None or digits is None:
        return None
    return letter + digits


def _build_number(match: re.Match[str]) -> str | None:
    whole = match.group(2)
    fraction = match.group(3)
    if fraction is None:
        return whole
    return f"{whole}.{fraction}"


def is_valid_call_number(
    letters: str | None,
    number: str | None,
    cutter_1: str | None,
) -> bool:
    """Return ``True`` when the three required fields are present."""
    return bool(
        letters
        and _LETTERS_RE.match(letters)
        and number
        and cutter_1
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_call_number(raw: str) -> ParsedCallNumber:
    """Parse *raw* into its call number fields.

    Parameters
    ----------
    raw:
        Call number as it appears in a catalog record, e.g.
        ``"QA76.73.P98 2001"``.

    Returns
    -------
    ParsedCallNumber
        Every capture slot that did not participate in the match is
        ``None``.  Never raises.
    """
    match = _CALL_NUMBER_RE.match(raw)
    if match is None:
        logger.debug("parse_call_number: no match for %r", raw)
        return ParsedCallNumber(raw=raw)

    letters = match.group(1)
    number = _build_number(match)
    cutters = tuple(
        _build_cutter(match, letter_group, digits_group)
        for letter_group, digits_group in _CUTTER_GROUPS
    )
    remainder = match.group(11)
    if remainder is not None:
        remainder = remainder.strip() or None

    is_valid = is_valid_call_number(letters, number, cutters[0])
    if not is_valid:
        logger.debug("parse_call_number: %r is missing a required field", raw)

    return ParsedCallNumber(
        raw=raw,
        letters=letters,
        number=number,
        class_year=match.group(4),
        cutters=cutters,
        remainder=remainder,
        is_valid=is_valid,
    )
