"""Parse Library of Congress call numbers and build sortable keys."""
from lccallnumber.core.errors import InvalidFieldError
from lccallnumber.models.call_number import CallNumberField, CallNumberRecord
from lccallnumber.normalization.sort_key import sort_key
from lccallnumber.parsing.grammar import ParsedCallNumber, parse_call_number

__all__ = [
    "CallNumberField",
    "CallNumberRecord",
    "InvalidFieldError",
    "ParsedCallNumber",
    "parse_call_number",
    "sort_key",
]
