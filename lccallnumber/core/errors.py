from __future__ import annotations


class InvalidFieldError(LookupError):
    """Raised when a call number field is requested or set by an unknown name."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"{name!r} is not a call number field")
