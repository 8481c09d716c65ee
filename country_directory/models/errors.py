"""
Loader failure types.
"""
from enum import Enum


class FetchErrorKind(str, Enum):
    """Why the country list could not be loaded."""
    NETWORK_ERROR = "NetworkError"
    PARSE_ERROR = "ParseError"


class FetchError(Exception):
    """Terminal failure of the one-time country fetch."""

    def __init__(self, kind: FetchErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "message": self.message}

    def __repr__(self) -> str:
        return f"FetchError(kind={self.kind.value!r}, message={self.message!r})"
