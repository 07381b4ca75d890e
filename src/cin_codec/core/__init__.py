"""Core codec modules for Citizen Identification Numbers and permits."""

from cin_codec.core.checksum import (
    CHECKSUM_ALPHABET,
    WEIGHTS,
    compute_checksum,
    ensure_checksum,
    verify,
    weighted_sum,
)
from cin_codec.core.converter import (
    convert_15_to_18,
    convert_18_to_15,
    to_18,
    try_convert_15_to_18,
)
from cin_codec.core.decoder import (
    CitizenId,
    DecodedIdentity,
    decode,
    get_age,
    get_birth,
    get_birth_date,
    get_birth_day,
    get_birth_month,
    get_birth_year,
    get_checksum_char,
    get_city_code,
    get_district_code,
    get_gender,
    get_province_code,
    get_sequence_code,
)
from cin_codec.core.errors import (
    ChecksumError,
    CinError,
    DecodeError,
    FormatError,
    ValidationError,
)
from cin_codec.core.permit import (
    HomeReturnPermit,
    is_valid_card10,
    is_valid_hk_mo_home_return,
    parse_home_return_permit,
)
from cin_codec.core.shape import IdentifierShape, RawIdentifier, classify
from cin_codec.core.validation import (
    is_valid_card,
    is_valid_card15,
    is_valid_card18,
    validate_citizen_id,
)

__all__ = [
    # Shapes
    "IdentifierShape",
    "RawIdentifier",
    "classify",
    # Checksum
    "WEIGHTS",
    "CHECKSUM_ALPHABET",
    "weighted_sum",
    "compute_checksum",
    "verify",
    "ensure_checksum",
    # Conversion
    "convert_15_to_18",
    "convert_18_to_15",
    "try_convert_15_to_18",
    "to_18",
    # Decoding
    "CitizenId",
    "DecodedIdentity",
    "decode",
    "get_province_code",
    "get_city_code",
    "get_district_code",
    "get_birth",
    "get_birth_date",
    "get_birth_year",
    "get_birth_month",
    "get_birth_day",
    "get_sequence_code",
    "get_gender",
    "get_checksum_char",
    "get_age",
    # Permits
    "HomeReturnPermit",
    "is_valid_card10",
    "is_valid_hk_mo_home_return",
    "parse_home_return_permit",
    # Validation
    "is_valid_card",
    "is_valid_card15",
    "is_valid_card18",
    "validate_citizen_id",
    # Errors
    "CinError",
    "FormatError",
    "ChecksumError",
    "DecodeError",
    "ValidationError",
]
