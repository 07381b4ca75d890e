"""
Home-Return Permit Recognizer

Recognizes Hong Kong/Macau Home-Return Permit numbers (H/M prefix followed
by 8 or 10 digits) in free text.
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from cin_codec.core.permit import is_valid_hk_mo_home_return


class HkMoPermitRecognizer(PatternRecognizer):
    """Recognizer for Mainland Travel Permits for Hong Kong and Macau Residents."""

    PATTERNS = [
        Pattern(
            name="hk_mo_home_return",
            regex=r"\b[HhMm]\d{8}(?:\d{2})?\b",
            score=0.5,
        ),
    ]

    CONTEXT = [
        "回乡证",
        "港澳居民来往内地通行证",
        "通行证",
        "permit",
        "home return",
    ]

    def __init__(
        self,
        supported_language: str = "zh",
        context: Optional[list[str]] = None,
    ) -> None:
        context_words = list(self.CONTEXT) + (context or [])

        super().__init__(
            supported_entity="HK_MO_PERMIT",
            patterns=self.PATTERNS,
            context=context_words,
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        return is_valid_hk_mo_home_return(pattern_text)
