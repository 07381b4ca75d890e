"""Presidio recognizers for identity numbers in free text."""

from cin_codec.recognizers.hk_mo_permit import HkMoPermitRecognizer
from cin_codec.recognizers.zh_id_card import ChineseIdCardRecognizer, validate_chinese_id_card

__all__ = [
    "ChineseIdCardRecognizer",
    "HkMoPermitRecognizer",
    "validate_chinese_id_card",
]
