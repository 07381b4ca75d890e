"""
cin-codec: Chinese identity number codec

Validation, 15/18-digit conversion and field decoding for Mainland China
Citizen Identification Numbers (GB11643-1999), plus pattern validation of
Hong Kong/Macau/Taiwan permit numbers.
"""

__version__ = "1.0.0"

from cin_codec.core.decoder import CitizenId, DecodedIdentity, decode
from cin_codec.core.converter import convert_15_to_18, convert_18_to_15
from cin_codec.core.errors import ChecksumError, CinError, DecodeError, FormatError
from cin_codec.core.permit import is_valid_card10, is_valid_hk_mo_home_return
from cin_codec.core.validation import is_valid_card, is_valid_card18

__all__ = [
    "CitizenId",
    "DecodedIdentity",
    "decode",
    "convert_15_to_18",
    "convert_18_to_15",
    "is_valid_card",
    "is_valid_card18",
    "is_valid_card10",
    "is_valid_hk_mo_home_return",
    "CinError",
    "FormatError",
    "ChecksumError",
    "DecodeError",
]
