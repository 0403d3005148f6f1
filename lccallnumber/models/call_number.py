"""Mutable call number record with name-based field access.

A record is either in its default state (every field ``None``, invalid)
or holds the fields of the last :meth:`CallNumberRecord.parse` call,
possibly edited afterwards through setters.

Field contract
--------------
letters     : class letters; always stored upper-cased
number      : class number, optionally with one decimal point
class_year  : extra numbering after the class number
cutters     : three slots, cutter 1 first; a later slot may be filled
              while an earlier one is ``None``
remainder   : trimmed free text tail

Validity is computed once per parse and cached; editing fields does not
change it.  :meth:`CallNumberRecord.normalize` always reflects the
current field values.
"""
from __future__ import annotations

from enum import StrEnum

from lccallnumber.core.constants import MAX_CUTTERS
from lccallnumber.core.errors import InvalidFieldError
from lccallnumber.normalization.sort_key import normalize_fields
from lccallnumber.parsing.grammar import parse_call_number


class CallNumberField(StrEnum):
    LETTERS = "letters"
    NUMBER = "number"
    CLASS_YEAR = "classYear"
    REMAINDER = "remainder"
    CUTTER_1 = "cutter1"
    CUTTER_2 = "cutter2"
    CUTTER_3 = "cutter3"

    @classmethod
    def from_name(cls, name: object) -> CallNumberField:
        """Return the member called *name*.

        Accepts the canonical names as well as the snake_case spellings
        (``class_year``, ``cutter_1`` ...).  Anything else raises
        :class:`InvalidFieldError`.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            member = _FIELD_ALIASES.get(name)
            if member is not None:
                return member
        raise InvalidFieldError(name)

    @property
    def cutter_index(self) -> int | None:
        """0-based cutter slot for cutter fields, ``None`` otherwise."""
        return _CUTTER_INDEX.get(self)


_CUTTER_INDEX: dict[CallNumberField, int] = {
    CallNumberField.CUTTER_1: 0,
    CallNumberField.CUTTER_2: 1,
    CallNumberField.CUTTER_3: 2,
}

_FIELD_ALIASES: dict[str, CallNumberField] = {
    **{member.value: member for member in CallNumberField},
    "class_year": CallNumberField.CLASS_YEAR,
    "cutter_1": CallNumberField.CUTTER_1,
    "cutter_2": CallNumberField.CUTTER_2,
    "cutter_3": CallNumberField.CUTTER_3,
}


class CallNumberRecord:
    """One LC call number, parsed into fields and normalizable to a sort key.

    Not thread-safe: a record belongs to a single caller.
    """

    def __init__(self) -> None:
        self.raw: str | None = None
        self._letters: str | None = None
        self.number: str | None = None
        self.class_year: str | None = None
        self.cutters: list[str | None] = [None] * MAX_CUTTERS
        self.remainder: str | None = None
        self._is_valid = False

    @classmethod
    def from_string(cls, raw: str) -> CallNumberRecord:
        return cls().parse(raw)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.to_dict().items())
        return f"{type(self).__name__}({fields}, valid={self._is_valid})"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def letters(self) -> str | None:
        return self._letters

    @letters.setter
    def letters(self, value: str | None) -> None:
        self._letters = value.upper() if value is not None else None

    def get(self, name: str | CallNumberField) -> str | None:
        """Return the field called *name*; raises :class:`InvalidFieldError`."""
        field = CallNumberField.from_name(name)
        if field.cutter_index is not None:
            return self.cutters[field.cutter_index]
        if field is CallNumberField.LETTERS:
            return self.letters
        if field is CallNumberField.NUMBER:
            return self.number
        if field is CallNumberField.CLASS_YEAR:
            return self.class_year
        return self.remainder

    def set(self, name: str | CallNumberField, value: str | None) -> None:
        """Store *value* in the field called *name*.

        ``letters`` is upper-cased; every other field is stored verbatim.
        """
        field = CallNumberField.from_name(name)
        if field.cutter_index is not None:
            self.cutters[field.cutter_index] = value
        elif field is CallNumberField.LETTERS:
            self.letters = value
        elif field is CallNumberField.NUMBER:
            self.number = value
        elif field is CallNumberField.CLASS_YEAR:
            self.class_year = value
        else:
            self.remainder = value

    __getitem__ = get
    __setitem__ = set

    def to_dict(self) -> dict[str, str | None]:
        return {field.value: self.get(field) for field in CallNumberField}

    # ------------------------------------------------------------------
    # Parsing / normalization
    # ------------------------------------------------------------------

    def parse(self, raw: str) -> CallNumberRecord:
        """Overwrite every field from *raw* and cache its validity.

        Never raises; malformed input leaves fields ``None`` and the
        record invalid.
        """
        parsed = parse_call_number(raw)
        self.raw = parsed.raw
        self.letters = parsed.letters
        self.number = parsed.number
        self.class_year = parsed.class_year
        self.cutters = list(parsed.cutters)
        self.remainder = parsed.remainder
        self._is_valid = parsed.is_valid
        return self

    def is_valid(self) -> bool:
        return self._is_valid

    def normalize(self) -> str:
        """Return the 38-character sort key for the current field values."""
        return normalize_fields(
            self.letters,
            self.number,
            self.class_year,
            self.cutters,
            self.remainder,
        )
