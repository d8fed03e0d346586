from __future__ import annotations


class AbsentValueError(LookupError):
    """Raised when a payload is forced out of an ``Absent`` option."""
    def __init__(self, message: str = "no value present"):
        super().__init__(message); self.message = message
