"""Call number parsing package.

The grammar lives in :mod:`lccallnumber.parsing.grammar`; it turns a raw
call number string into a :class:`ParsedCallNumber` and never raises.
"""
