"""
Hong Kong, Macau and Taiwan ID Card Recognizers

Pattern recognizers for the identity card numbers issued outside the
mainland. Hong Kong and Taiwan candidates are confirmed by their check
characters; Macau numbers carry no public checksum, so a match only keeps
its pattern score.
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from pii_idcard.regional import hk, mo, tw


class _RegionalIdCardRecognizer(PatternRecognizer):
    """Shared constructor for the regional recognizers."""

    ENTITY = ""
    PATTERNS: list[Pattern] = []
    CONTEXT: list[str] = []

    def __init__(
        self,
        supported_language: str = "zh",
        context: Optional[list[str]] = None,
    ) -> None:
        context_words = list(self.CONTEXT) + (context or [])

        super().__init__(
            supported_entity=self.ENTITY,
            patterns=self.PATTERNS,
            context=context_words,
            supported_language=supported_language,
        )


class HongKongIdCardRecognizer(_RegionalIdCardRecognizer):
    """Recognizer for Hong Kong Identity Card numbers, e.g. ``A123456(3)``."""

    ENTITY = "HK_ID_CARD"

    PATTERNS = [
        Pattern(
            name="hk_id_card",
            regex=r"(?<![0-9A-Za-z])[A-Z]{1,2}\d{6}(?:\([0-9A]\)|[0-9A])(?![0-9A-Za-z])",
            score=0.6,
        ),
    ]

    CONTEXT = ["香港身份证", "身份证", "HKID", "hkid", "identity card"]

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        return hk.validate(pattern_text)


class MacauIdCardRecognizer(_RegionalIdCardRecognizer):
    """Recognizer for Macau identity card numbers, e.g. ``1123456(A)``.

    Only the parenthesised form is matched; the bare 8-character form is
    indistinguishable from ordinary numbers.
    """

    ENTITY = "MO_ID_CARD"

    PATTERNS = [
        Pattern(
            name="mo_id_card",
            regex=r"(?<![0-9A-Za-z])[157]\d{6}\([0-9A-Z]\)",
            score=0.4,
        ),
    ]

    CONTEXT = ["澳门身份证", "身份证", "BIR", "identity card"]

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        # Format only: a match stays uncertain
        return None if mo.validate(pattern_text) else False


class TaiwanIdCardRecognizer(_RegionalIdCardRecognizer):
    """Recognizer for Taiwan National Identification Card numbers, e.g. ``A123456789``."""

    ENTITY = "TW_ID_CARD"

    PATTERNS = [
        Pattern(
            name="tw_id_card",
            regex=r"(?<![0-9A-Za-z])[A-Z][12]\d{8}(?![0-9A-Za-z])",
            score=0.6,
        ),
    ]

    CONTEXT = ["台湾身份证", "身分證", "身份证", "统一编号", "identity card"]

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        return tw.validate(pattern_text)
