"""Calendar helpers: strict date construction and age arithmetic."""

import re
from datetime import date, datetime
from typing import Optional

_PURE_DATE_PATTERN = re.compile(r"[0-9]{8}")


def make_date(year: int, month: int, day: int) -> date:
    """Build a calendar date, rejecting impossible month/day combinations.

    Args:
        year: Four-digit year.
        month: Month, 1-12.
        day: Day of month, leap years honoured for February.

    Returns:
        The corresponding ``datetime.date``.

    Raises:
        ValueError: If the combination is not a real calendar date.

    Examples:
        >>> make_date(2000, 2, 29)
        datetime.date(2000, 2, 29)
        >>> make_date(1900, 2, 29)  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        ValueError: ...
    """
    return date(year, month, day)


def parse_pure_date(value: str) -> date:
    """Parse an 8-digit ``yyyyMMdd`` string into a date.

    Raises:
        ValueError: If the value is not 8 digits or not a real date.
    """
    if not _PURE_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Expected 8 digits in yyyyMMdd form, got {value!r}")
    return make_date(int(value[:4]), int(value[4:6]), int(value[6:8]))


def age_at(birth: date, reference: Optional[date] = None) -> int:
    """Full years elapsed between birth and reference.

    One year is subtracted when the reference month/day falls before the
    birth month/day (birthday not yet reached that year).

    Args:
        birth: Date of birth.
        reference: Date to measure at. Defaults to today.

    Returns:
        Age in full years.

    Raises:
        ValueError: If reference is earlier than birth.

    Examples:
        >>> age_at(date(2000, 3, 15), date(2024, 3, 14))
        23
        >>> age_at(date(2000, 3, 15), date(2024, 3, 15))
        24
    """
    if reference is None:
        reference = date.today()
    if isinstance(reference, datetime):
        reference = reference.date()
    if reference < birth:
        raise ValueError(f"Reference date {reference} is before birth date {birth}")

    age = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        age -= 1
    return age
