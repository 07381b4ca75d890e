"""
GB11643-1999 checksum engine

The 18th character of a Citizen Identification Number is an ISO 7064
MOD 11-2 control character computed over the first 17 digits:

    sum = Σ digit[i] × WEIGHTS[i]   for i in 0..16
    control = CHECKSUM_ALPHABET[sum % 11]

Every weight is coprime to 11, so any single-digit substitution changes the
remainder and is always detected.
"""

import re

from cin_codec.core.errors import ChecksumError, FormatError
from cin_codec.core.shape import IdentifierShape, classify
from cin_codec.logging.setup import get_logger
from cin_codec.utils.text import equals

logger = get_logger(__name__)

# Weights applied positionally to digits 1-17
WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# Control characters indexed by sum % 11
CHECKSUM_ALPHABET = "10X98765432"

BODY_LENGTH = len(WEIGHTS)

_BODY17_PATTERN = re.compile(r"[0-9]{17}")


def _is_body17(value: object) -> bool:
    return isinstance(value, str) and _BODY17_PATTERN.fullmatch(value) is not None


def weighted_sum(body17: str) -> int:
    """Weighted digit sum of a 17-digit body.

    Raises:
        FormatError: If body17 is not exactly 17 ASCII digits.
    """
    if not _is_body17(body17):
        raise FormatError(f"Checksum body must be {BODY_LENGTH} digits, got {body17!r}")
    return sum(int(digit) * weight for digit, weight in zip(body17, WEIGHTS))


def compute_checksum(body17: str) -> str:
    """Compute the control character for a 17-digit body.

    Args:
        body17: The first 17 digits of an 18-digit CIN.

    Returns:
        A single character, ``0``-``9`` or ``X``.

    Raises:
        FormatError: If body17 is not exactly 17 ASCII digits.

    Examples:
        >>> compute_checksum("11010119900307109")
        'X'
        >>> compute_checksum("11010119900307771")
        '5'
    """
    return CHECKSUM_ALPHABET[weighted_sum(body17) % 11]


def verify(body18: str, ignore_case: bool = True) -> bool:
    """Verify the control character of an 18-character CIN.

    Only the checksum is checked; region and birth-date plausibility are not.
    Malformed input is reported as False, never raised.

    Args:
        body18: Candidate 18-character identifier.
        ignore_case: Accept a lowercase ``x`` where ``X`` is expected.

    Returns:
        True if the last character equals the recomputed control character.

    Examples:
        >>> verify("11010119900307109X")
        True
        >>> verify("11010119900307109x", ignore_case=False)
        False
    """
    if not isinstance(body18, str) or len(body18) != BODY_LENGTH + 1:
        return False

    body17 = body18[:BODY_LENGTH]
    if not _is_body17(body17):
        return False

    return equals(compute_checksum(body17), body18[BODY_LENGTH], ignore_case=ignore_case)


def ensure_checksum(body18: str, ignore_case: bool = True) -> str:
    """Raising counterpart of ``verify``.

    Returns:
        body18, unchanged, when the control character matches.

    Raises:
        FormatError: If the value is not 17 digits plus one control character.
        ChecksumError: If the control character does not match.
    """
    if classify(body18) is not IdentifierShape.BODY18:
        raise FormatError(f"Expected 17 digits plus a digit or X, got {body18!r}")

    expected = compute_checksum(body18[:BODY_LENGTH])
    actual = body18[BODY_LENGTH]
    if not equals(expected, actual, ignore_case=ignore_case):
        logger.debug(
            "Checksum mismatch",
            extra={"expected": expected, "actual": actual},
        )
        raise ChecksumError(
            f"Checksum mismatch: expected {expected!r}, got {actual!r}",
            expected=expected,
            actual=actual,
        )
    return body18
