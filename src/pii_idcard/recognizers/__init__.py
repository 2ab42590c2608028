"""Presidio recognizers for identity card numbers."""

from pii_idcard.recognizers.zh_id_card import ChineseIdCardRecognizer
from pii_idcard.recognizers.regional_id_card import (
    HongKongIdCardRecognizer,
    MacauIdCardRecognizer,
    TaiwanIdCardRecognizer,
)
from pii_idcard.recognizers.registry import (
    create_id_card_recognizers,
    create_id_card_registry,
    get_supported_entities,
)

__all__ = [
    "ChineseIdCardRecognizer",
    "HongKongIdCardRecognizer",
    "MacauIdCardRecognizer",
    "TaiwanIdCardRecognizer",
    "create_id_card_recognizers",
    "create_id_card_registry",
    "get_supported_entities",
]
