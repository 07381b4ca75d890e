"""
15/18-digit CIN format conversion

The legacy GB11643-1989 body (15 digits) carries a two-digit birth year and no
control character. Widening inserts the century before the year and appends
a freshly computed checksum; narrowing drops both again:

    110101 900307 123         (15)
    110101 19900307 123 3     (18)
"""

from typing import Optional

from cin_codec.config.settings import get_settings
from cin_codec.core.checksum import compute_checksum
from cin_codec.core.errors import FormatError
from cin_codec.core.shape import IdentifierShape, classify
from cin_codec.utils.dates import parse_pure_date


def convert_15_to_18(id15: str, century: Optional[str] = None) -> str:
    """Widen a 15-digit CIN to 18 digits.

    Args:
        id15: Exactly 15 ASCII digits.
        century: Two-digit century to insert. Defaults to the configured
            ``default_century`` ("19").

    Returns:
        The 18-character CIN with a computed control character.

    Raises:
        FormatError: If id15 is not 15 digits, or the widened birth date is
            not a real calendar date.

    Examples:
        >>> convert_15_to_18("110101900307123")
        '110101199003071233'
    """
    if classify(id15) is not IdentifierShape.BODY15:
        raise FormatError(f"Expected 15 digits, got {id15!r}")

    if century is None:
        century = get_settings().default_century

    birth = century + id15[6:12]
    try:
        parse_pure_date(birth)
    except ValueError as e:
        raise FormatError(f"Invalid birthday: {id15[6:12]}") from e

    body17 = id15[:6] + birth + id15[12:]
    return body17 + compute_checksum(body17)


def convert_18_to_15(id18: str) -> str:
    """Narrow an 18-character CIN to the legacy 15-digit body.

    The checksum is not re-validated before it is dropped.

    Raises:
        FormatError: If id18 is not 17 digits plus a digit or X/x.

    Examples:
        >>> convert_18_to_15("110101199003071233")
        '110101900307123'
    """
    if classify(id18) is not IdentifierShape.BODY18:
        raise FormatError(f"Expected 18-character CIN, got {id18!r}")
    return id18[:6] + id18[8:17]


def try_convert_15_to_18(
    id15: str, century: Optional[str] = None
) -> tuple[Optional[str], Optional[str]]:
    """Non-raising variant of ``convert_15_to_18``.

    Returns:
        Tuple of (id18, error_message). If successful, error_message is None.
        If failed, id18 is None.

    Example:
        >>> id18, error = try_convert_15_to_18("11010190030712")
        >>> error
        "Expected 15 digits, got '11010190030712'"
    """
    try:
        return convert_15_to_18(id15, century=century), None
    except FormatError as e:
        return None, str(e)


def to_18(value: str) -> str:
    """Normalize a 15- or 18-character CIN to its 18-character form.

    A lowercase ``x`` control character is upper-cased. The checksum of an
    18-character input is not verified.

    Raises:
        FormatError: If the value is neither shape.
    """
    shape = classify(value)
    if shape is IdentifierShape.BODY18:
        return value.upper()
    if shape is IdentifierShape.BODY15:
        return convert_15_to_18(value)
    raise FormatError(f"Expected a 15- or 18-character CIN, got {value!r}")
