"""
Chinese ID Card (Resident Identity Card) Recognizer

Recognizes 18-digit and legacy 15-digit Chinese national ID numbers in text
and confirms each candidate with the full identity validator (format, birth
date and checksum).
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from pii_idcard.core.identity import validate


class ChineseIdCardRecognizer(PatternRecognizer):
    """Recognizer for Chinese Resident Identity Card numbers.

    Supports:
    - 18-digit format with ISO 7064:1983 MOD 11-2 checksum
    - 15-digit legacy format
    - Birth date validation

    Example:
        >>> recognizer = ChineseIdCardRecognizer()
        >>> results = recognizer.analyze("身份证：511702198002221308", ["ZH_ID_CARD"])
        >>> results[0].start
        4
    """

    # Not using \b: CJK characters count as word characters
    PATTERNS = [
        Pattern(
            name="zh_id_card_18",
            regex=r"(?<![0-9A-Za-z])[1-9]\d{5}(?:18|19|20)\d{2}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}[\dXx](?![0-9A-Za-z])",
            score=0.7,
        ),
        Pattern(
            name="zh_id_card_15",
            regex=r"(?<![0-9A-Za-z])[1-9]\d{7}(?:0[1-9]|1[0-2])(?:0[1-9]|[12]\d|3[01])\d{3}(?![0-9A-Za-z])",
            score=0.5,
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
        "身份",
        "证号",
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
        """Validate the matched number.

        Args:
            pattern_text: The matched ID card number.

        Returns:
            True if valid, False otherwise.
        """
        return validate(pattern_text)
