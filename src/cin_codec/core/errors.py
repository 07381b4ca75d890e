"""Error types raised by the identifier codecs.

All errors derive from ``ValueError`` so callers that already guard against
bad input with ``except ValueError`` keep working.
"""


class CinError(ValueError):
    """Base class for identifier codec errors."""


class FormatError(CinError):
    """Input length or character class does not fit the requested operation."""


class ChecksumError(CinError):
    """An 18-digit body is well formed but its control character is wrong.

    Attributes:
        expected: The recomputed control character.
        actual: The control character found in the input.
    """

    def __init__(self, message: str, expected: str = "", actual: str = "") -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class DecodeError(CinError):
    """A positional field could not be decoded (non-numeric or impossible date)."""


class ValidationError(CinError):
    """Raised by the ``validate_*`` helpers when a value is rejected."""
