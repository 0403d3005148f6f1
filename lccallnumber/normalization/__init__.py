"""Normalization package.

Turns parsed call number fields into a fixed-width sort key.  Every
column is truncated to its width and padded with the low-sort filler, so
two keys compare lexicographically in shelf order.

All column normalizers follow the same contract::

    def normalize_<column>(value: str | None) -> str:
        ...

They never validate and never raise; ``None`` yields filler only.
"""
from lccallnumber.normalization.sort_key import normalize_fields, pad_field, sort_key

__all__ = ["normalize_fields", "pad_field", "sort_key"]
