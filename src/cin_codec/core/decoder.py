"""
Positional field decoding for Citizen Identification Numbers

Layout of the 18-character body (GB11643-1999):

    chars[0:2]    province code
    chars[0:4]    city code
    chars[0:6]    district code
    chars[6:14]   birth date, yyyyMMdd
    chars[14:17]  sequence code; chars[16] parity is the gender (odd = male)
    chars[17]     control character

15-digit inputs are widened through the format converter first. Decoders
assume a pre-validated identifier: they never verify the checksum, and they
raise DecodeError instead of guessing when a field cannot be decoded.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from cin_codec.core.checksum import ensure_checksum
from cin_codec.core.converter import convert_15_to_18, convert_18_to_15, to_18
from cin_codec.core.errors import DecodeError, FormatError
from cin_codec.core.shape import IdentifierShape, classify
from cin_codec.utils.dates import age_at, parse_pure_date

MALE = 1
FEMALE = 0


@dataclass(frozen=True)
class DecodedIdentity:
    """Read-only view of the fields embedded in a CIN.

    Attributes:
        province_code: 2-digit province code.
        city_code: 4-digit city code.
        district_code: 6-digit district/county code.
        birth_date: Date of birth.
        sequence_code: 3-digit registration sequence.
        gender: 1 for male, 0 for female.
        checksum_char: The control character as it appears in the input.
    """

    province_code: str
    city_code: str
    district_code: str
    birth_date: date
    sequence_code: str
    gender: int
    checksum_char: str


def _body18(value: str) -> str:
    shape = classify(value)
    if not shape.is_citizen_id:
        raise DecodeError(f"Cannot decode fields of a {shape.value} identifier")
    if shape is IdentifierShape.BODY18:
        return value
    try:
        return convert_15_to_18(value)
    except FormatError as e:
        raise DecodeError(str(e)) from e


def get_province_code(value: str) -> str:
    """Province code (first 2 digits)."""
    return _body18(value)[0:2]


def get_city_code(value: str) -> str:
    """City code (first 4 digits)."""
    return _body18(value)[0:4]


def get_district_code(value: str) -> str:
    """District/county code (first 6 digits)."""
    return _body18(value)[0:6]


def get_birth(value: str) -> str:
    """Birth date field as the raw 8-digit ``yyyyMMdd`` string."""
    return _body18(value)[6:14]


def get_birth_date(value: str) -> date:
    """Date of birth.

    Raises:
        DecodeError: If the birth field is not a real calendar date.

    Examples:
        >>> get_birth_date("110101199003071233")
        datetime.date(1990, 3, 7)
    """
    birth = get_birth(value)
    try:
        return parse_pure_date(birth)
    except ValueError as e:
        raise DecodeError(f"Invalid birth date {birth!r}: {e}") from e


def get_birth_year(value: str) -> int:
    return get_birth_date(value).year


def get_birth_month(value: str) -> int:
    return get_birth_date(value).month


def get_birth_day(value: str) -> int:
    return get_birth_date(value).day


def get_sequence_code(value: str) -> str:
    """3-digit sequence code."""
    return _body18(value)[14:17]


def get_gender(value: str) -> int:
    """Gender from the parity of the 17th digit: 1 male, 0 female."""
    return MALE if int(_body18(value)[16]) % 2 else FEMALE


def get_checksum_char(value: str) -> str:
    """Control character; for a 15-digit input, the one computed on widening."""
    return _body18(value)[17]


def get_age(value: str, reference: Optional[date] = None) -> int:
    """Age in full years at the reference date (default today).

    Raises:
        DecodeError: If the birth date is invalid or after the reference date.
    """
    birth_date = get_birth_date(value)
    try:
        return age_at(birth_date, reference)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def decode(value: str) -> DecodedIdentity:
    """Decode every positional field at once.

    Raises:
        DecodeError: If the value is not a 15/18-character body or its birth
            date is impossible.
    """
    body = _body18(value)
    return DecodedIdentity(
        province_code=body[0:2],
        city_code=body[0:4],
        district_code=body[0:6],
        birth_date=get_birth_date(body),
        sequence_code=body[14:17],
        gender=get_gender(body),
        checksum_char=body[17],
    )


@dataclass(frozen=True)
class CitizenId:
    """A checksum-verified Citizen Identification Number.

    Always holds the 18-character form with an upper-case control character.
    Only the checksum is verified on construction; the birth date is checked
    when it is first decoded.

    Example:
        >>> cin = CitizenId.of("110101900307123")
        >>> cin.code
        '110101199003071233'
        >>> cin.gender
        1
    """

    code: str

    @classmethod
    def of(cls, value: str) -> "CitizenId":
        """Build from a 15- or 18-character CIN.

        Raises:
            FormatError: If the value is neither shape, or a 15-digit value
                carries an impossible birth date.
            ChecksumError: If an 18-character value has a wrong control
                character.
        """
        if not classify(value).is_citizen_id:
            raise FormatError("CIN length must be 15 or 18")
        return cls(ensure_checksum(to_18(value)))

    def __str__(self) -> str:
        return self.code

    @property
    def province_code(self) -> str:
        return self.code[0:2]

    @property
    def city_code(self) -> str:
        return self.code[0:4]

    @property
    def district_code(self) -> str:
        return self.code[0:6]

    @property
    def birth(self) -> str:
        return self.code[6:14]

    @property
    def birth_date(self) -> date:
        return get_birth_date(self.code)

    @property
    def birth_year(self) -> int:
        return self.birth_date.year

    @property
    def birth_month(self) -> int:
        return self.birth_date.month

    @property
    def birth_day(self) -> int:
        return self.birth_date.day

    @property
    def sequence_code(self) -> str:
        return self.code[14:17]

    @property
    def gender(self) -> int:
        return get_gender(self.code)

    def age(self, reference: Optional[date] = None) -> int:
        """Age in full years at the reference date (default today)."""
        return get_age(self.code, reference)

    def to_15(self) -> str:
        """Legacy 15-digit form."""
        return convert_18_to_15(self.code)

    def decode(self) -> DecodedIdentity:
        return decode(self.code)
