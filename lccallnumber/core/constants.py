"""Sort characters and fixed field widths for normalized call numbers.

A normalized call number is the concatenation of five fixed-width columns.
Every column is padded with :data:`LOW_SORT_CHAR`, which sorts below any
character the grammar can capture, so shorter or missing content sorts
before longer or present content within the same column.

Column layout
-------------
letters     3   right padded
number     10   5 integer (left padded) + 5 fraction (right padded)
class year  5   right padded
cutters    15   3 x 5, right padded, absent cutter = 5 fillers
remainder   5   right padded
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Sort characters
# ---------------------------------------------------------------------------

LOW_SORT_CHAR = " "
# Never used by normalize(); available for "greater than everything" keys.
HI_SORT_CHAR = "~"

# ---------------------------------------------------------------------------
# Field widths
# ---------------------------------------------------------------------------

LETTERS_WIDTH = 3
NUMBER_HALF_WIDTH = 5
NUMBER_WIDTH = NUMBER_HALF_WIDTH * 2
CLASS_YEAR_WIDTH = 5
CUTTER_WIDTH = 5
MAX_CUTTERS = 3
CUTTERS_WIDTH = CUTTER_WIDTH * MAX_CUTTERS
REMAINDER_WIDTH = 5

NORMALIZED_WIDTH = (
    LETTERS_WIDTH + NUMBER_WIDTH + CLASS_YEAR_WIDTH + CUTTERS_WIDTH + REMAINDER_WIDTH
)
