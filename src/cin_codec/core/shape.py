"""
Identifier shape classification

Every raw string is classified exactly once, by length and character set,
into one of a closed set of shapes. Dispatch code matches on the shape
instead of repeating length checks.

Layouts:
    BODY18    PPCCDD YYYYMMDD SSS K   (K is a digit or X/x)
    BODY15    PPCCDD YYMMDD SSS
    PERMIT10  10-character HK/Macau/Taiwan identity number
    PERMIT11  [HhMm] + 10 digits (Home-Return Permit with renewal counter)
"""

import re
from dataclasses import dataclass
from enum import Enum

from cin_codec.utils.text import contains_whitespace, is_blank

CIN_MIN_LENGTH = 15
CIN_MAX_LENGTH = 18
PERMIT10_LENGTH = 10
PERMIT11_LENGTH = 11

_BODY18_PATTERN = re.compile(r"^[0-9]{17}[0-9Xx]$")
_BODY15_PATTERN = re.compile(r"^[0-9]{15}$")


class IdentifierShape(str, Enum):
    """Closed set of identifier shapes."""

    BODY18 = "body18"
    BODY15 = "body15"
    PERMIT10 = "permit10"
    PERMIT11 = "permit11"
    INVALID = "invalid"

    @property
    def is_citizen_id(self) -> bool:
        """Whether the shape is a 15- or 18-digit CIN body."""
        return self in (IdentifierShape.BODY18, IdentifierShape.BODY15)


def classify(value: object) -> IdentifierShape:
    """Classify a raw value by length and character set.

    Blank values, non-strings and values containing whitespace are INVALID
    regardless of length.

    Examples:
        >>> classify("11010119900307109X")
        <IdentifierShape.BODY18: 'body18'>
        >>> classify("110101900307123")
        <IdentifierShape.BODY15: 'body15'>
        >>> classify("11010119900307109")
        <IdentifierShape.INVALID: 'invalid'>
    """
    if not isinstance(value, str) or is_blank(value) or contains_whitespace(value):
        return IdentifierShape.INVALID

    length = len(value)
    if length == CIN_MAX_LENGTH:
        return IdentifierShape.BODY18 if _BODY18_PATTERN.match(value) else IdentifierShape.INVALID
    if length == CIN_MIN_LENGTH:
        return IdentifierShape.BODY15 if _BODY15_PATTERN.match(value) else IdentifierShape.INVALID
    if length == PERMIT10_LENGTH:
        return IdentifierShape.PERMIT10
    if length == PERMIT11_LENGTH:
        return IdentifierShape.PERMIT11
    return IdentifierShape.INVALID


@dataclass(frozen=True)
class RawIdentifier:
    """An input string together with its classified shape.

    Attributes:
        value: The string exactly as supplied.
        shape: Shape determined by ``classify``.
    """

    value: str
    shape: IdentifierShape

    @classmethod
    def of(cls, value: str) -> "RawIdentifier":
        """Classify a value and wrap it."""
        return cls(value=value, shape=classify(value))
