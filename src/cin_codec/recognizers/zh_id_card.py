"""
Chinese ID Card (Resident Identity Card) Recognizer

Recognizes 18-digit and legacy 15-digit Citizen Identification Numbers in
free text. Matches are confirmed through the checksum engine, so only the
control character decides validity, not the birth date.
Format: RRRRRRYYYYMMDDSSSC (6 region + 8 birthdate + 3 sequence + 1 checksum)
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from cin_codec.core.validation import is_valid_card


class ChineseIdCardRecognizer(PatternRecognizer):
    """Recognizer for Chinese Resident Identity Card numbers.

    Supports:
    - 18-digit format with ISO 7064:1983 MOD 11-2 checksum
    - 15-digit legacy format, widened and checksummed before acceptance

    Example:
        >>> recognizer = ChineseIdCardRecognizer()
        >>> results = recognizer.analyze("身份证号 11010119900307109X", ["ZH_ID_CARD"])
    """

    PATTERNS = [
        Pattern(
            name="zh_id_card_18",
            regex=r"\b[1-9]\d{5}(?:18|19|20)\d{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}[\dXx]\b",
            score=0.7,
        ),
        Pattern(
            name="zh_id_card_15",
            regex=r"\b[1-9]\d{7}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}\b",
            score=0.4,
        ),
    ]

    CONTEXT = [
        "身份证",
        "身份证号",
        "身份证号码",
        "证件号",
        "证件号码",
        "ID",
        "id",
        "identity",
        "居民身份证",
        "公民身份号码",
    ]

    def __init__(
        self,
        supported_language: str = "zh",
        context: Optional[list[str]] = None,
    ) -> None:
        """Initialize the recognizer.

        Args:
            supported_language: Language code (default: zh).
            context: Additional context words.
        """
        context_words = list(self.CONTEXT) + (context or [])

        super().__init__(
            supported_entity="ZH_ID_CARD",
            patterns=self.PATTERNS,
            context=context_words,
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Validate a match through the checksum engine.

        Returns:
            True if valid, False otherwise.
        """
        return is_valid_card(pattern_text)


def validate_chinese_id_card(id_number: str) -> bool:
    """Standalone validation function for Chinese ID card numbers.

    Example:
        >>> validate_chinese_id_card("110101199003077715")
        True
    """
    recognizer = ChineseIdCardRecognizer()
    return recognizer.validate_result(id_number) is True
