"""Text predicates used by the identifier codecs."""

import re
from typing import Optional


_WHITESPACE_PATTERN = re.compile(r"\s")


def is_blank(text: Optional[str]) -> bool:
    """Check whether text is None, empty, or whitespace only.

    Args:
        text: Text to check.

    Returns:
        True if the text carries no visible characters, False otherwise.

    Examples:
        >>> is_blank(None)
        True
        >>> is_blank("  \\t")
        True
        >>> is_blank(" 110101 ")
        False
    """
    if not text:
        return True
    return not text.strip()


def contains_whitespace(text: Optional[str]) -> bool:
    """Check whether text contains any whitespace character.

    Unicode whitespace (full-width spaces, non-breaking spaces, line breaks)
    counts as whitespace.

    Examples:
        >>> contains_whitespace("1101011990 0307")
        True
        >>> contains_whitespace("110101199003076543")
        False
    """
    if not text:
        return False
    return _WHITESPACE_PATTERN.search(text) is not None


def equals(a: Optional[str], b: Optional[str], ignore_case: bool = False) -> bool:
    """Compare two strings, optionally ignoring case.

    Two None values are equal; None never equals a string.

    Examples:
        >>> equals("X", "x", ignore_case=True)
        True
        >>> equals("X", "x")
        False
    """
    if a is None or b is None:
        return a is b
    if ignore_case:
        return a.casefold() == b.casefold()
    return a == b


def mask_identifier(value: str, keep: int = 6) -> str:
    """Mask an identifier for logging, keeping only its leading characters.

    Examples:
        >>> mask_identifier("110101199003076543")
        '110101************'
        >>> mask_identifier("H123", keep=6)
        'H123'
    """
    if not value:
        return ""
    if len(value) <= keep:
        return value
    return value[:keep] + "*" * (len(value) - keep)
