"""
Boolean validation entry points

These functions answer yes/no questions and never raise. Format and checksum
problems met along the way become False. Only the control character is
checked: an 18-digit number with a correct checksum but an impossible birth
date (day 32, say) is still reported valid here. Use the decoder to enforce
calendar plausibility.
"""

from typing import Optional

from cin_codec.config.settings import get_settings
from cin_codec.core.checksum import verify
from cin_codec.core.converter import try_convert_15_to_18
from cin_codec.core.errors import ValidationError
from cin_codec.core.permit import is_valid_card10
from cin_codec.core.shape import IdentifierShape, RawIdentifier
from cin_codec.logging.setup import get_logger
from cin_codec.utils.text import mask_identifier

logger = get_logger(__name__)


def _reject(raw: RawIdentifier, reason: str) -> bool:
    logger.debug(
        "Identifier rejected: %s",
        reason,
        extra={
            "shape": raw.shape.value,
            "identifier": mask_identifier(raw.value, get_settings().mask_keep),
        },
    )
    return False


def is_valid_card(value: str) -> bool:
    """Validate an 18-digit, 15-digit or 10-character identity number.

    Blank input and input containing any whitespace are rejected regardless
    of length.

    Examples:
        >>> is_valid_card("11010119900307109X")
        True
        >>> is_valid_card("110101900307123")
        True
        >>> is_valid_card(" 11010119900307109X")
        False
    """
    if not isinstance(value, str):
        return False

    raw = RawIdentifier.of(value)

    if raw.shape is IdentifierShape.BODY18:
        return verify(raw.value, ignore_case=True) or _reject(raw, "checksum mismatch")

    if raw.shape is IdentifierShape.BODY15:
        id18, error = try_convert_15_to_18(raw.value)
        if error:
            return _reject(raw, error)
        return verify(id18, ignore_case=True) or _reject(raw, "checksum mismatch")

    if raw.shape is IdentifierShape.PERMIT10:
        return is_valid_card10(raw.value) or _reject(raw, "not a permit number")

    # PERMIT11 has its own entry point; INVALID never matches
    return _reject(raw, "unsupported shape")


def is_valid_card18(value: str, ignore_case: Optional[bool] = None) -> bool:
    """Validate the control character of an 18-character CIN.

    Args:
        value: Candidate identifier.
        ignore_case: Accept lowercase ``x``. Defaults to the configured
            ``ignore_case`` (True).
    """
    if ignore_case is None:
        ignore_case = get_settings().ignore_case
    return verify(value, ignore_case=ignore_case)


def is_valid_card15(value: str) -> bool:
    """Validate a legacy 15-digit CIN (digits and a real birth date)."""
    if not isinstance(value, str):
        return False
    raw = RawIdentifier.of(value)
    if raw.shape is not IdentifierShape.BODY15:
        return False
    id18, error = try_convert_15_to_18(raw.value)
    return error is None and verify(id18)


def validate_citizen_id(value: str, error_msg: Optional[str] = None) -> str:
    """Return value unchanged if ``is_valid_card`` accepts it.

    Raises:
        ValidationError: With error_msg (or a default message) otherwise.
    """
    if not is_valid_card(value):
        raise ValidationError(error_msg or "Invalid citizen identification number")
    return value
