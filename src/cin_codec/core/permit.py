"""
Hong Kong / Macau / Taiwan permit number validation

Neither format carries a check digit, so validation is an exact pattern
match only.

10-character identity numbers:
    [HhMm]dddddddd         permit-marker form (historically 9 characters)
    Ldddddddd(d)           Taiwan: letter, gender digit 1/2, 8 digits
    [157]dddddd(d)         Macau
    Ldddddd(c)             Hong Kong, check character 0-9 or A

Home-Return Permit:
    [HhMm]dddddddd[dd]     8-digit lifelong id plus an optional 2-digit
                           renewal counter ("00" is the first issue)
"""

import re
from dataclasses import dataclass

from cin_codec.core.errors import FormatError

_CARD10_PATTERNS = (
    re.compile(r"[HhMm][0-9]{8}"),
    re.compile(r"[A-Za-z][12][0-9]{8}"),
    re.compile(r"[157][0-9]{6}\([0-9]\)"),
    re.compile(r"[A-Za-z][0-9]{6}\([0-9Aa]\)"),
)

_HOME_RETURN_PATTERN = re.compile(r"([HhMm])([0-9]{8})([0-9]{2})?")

_REGIONS = {"H": "HK", "M": "MO"}


@dataclass(frozen=True)
class HomeReturnPermit:
    """Fields of a Home-Return Permit number.

    Attributes:
        region: "HK" for Hong Kong (H prefix), "MO" for Macau (M prefix).
        personal_id: 8-digit lifelong personal identifier.
        renewal_count: Times the permit has been renewed; 0 for the first
            issue or when the counter is absent.
    """

    region: str
    personal_id: str
    renewal_count: int


def is_valid_card10(value: str) -> bool:
    """Validate a 10-character Hong Kong, Macau or Taiwan identity number.

    Examples:
        >>> is_valid_card10("A123456789")
        True
        >>> is_valid_card10("1234567(8)")
        True
        >>> is_valid_card10("X12345")
        False
    """
    if not value or not isinstance(value, str):
        return False
    return any(pattern.fullmatch(value) for pattern in _CARD10_PATTERNS)


def is_valid_hk_mo_home_return(value: str) -> bool:
    """Validate a Hong Kong/Macau Home-Return Permit number.

    Examples:
        >>> is_valid_hk_mo_home_return("H1234567800")
        True
        >>> is_valid_hk_mo_home_return("X1234567800")
        False
        >>> is_valid_hk_mo_home_return("H123")
        False
    """
    if not value or not isinstance(value, str):
        return False
    return _HOME_RETURN_PATTERN.fullmatch(value) is not None


def parse_home_return_permit(value: str) -> HomeReturnPermit:
    """Split a Home-Return Permit number into its fields.

    Raises:
        FormatError: If the value is not a Home-Return Permit number.
    """
    match = _HOME_RETURN_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise FormatError(f"Not a Home-Return Permit number: {value!r}")

    marker, personal_id, counter = match.groups()
    return HomeReturnPermit(
        region=_REGIONS[marker.upper()],
        personal_id=personal_id,
        renewal_count=int(counter) if counter else 0,
    )
