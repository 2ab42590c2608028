"""
Identity Card Recognizer Registry

Bundles the identity card recognizers into a Presidio registry.
"""

from typing import Optional

from presidio_analyzer import EntityRecognizer, RecognizerRegistry

from pii_idcard.recognizers.regional_id_card import (
    HongKongIdCardRecognizer,
    MacauIdCardRecognizer,
    TaiwanIdCardRecognizer,
)
from pii_idcard.recognizers.zh_id_card import ChineseIdCardRecognizer


def create_id_card_recognizers(language: str = "zh") -> list[EntityRecognizer]:
    """Create one instance of every identity card recognizer.

    Args:
        language: Language code the recognizers are registered for.

    Returns:
        List of recognizers.
    """
    return [
        ChineseIdCardRecognizer(supported_language=language),
        HongKongIdCardRecognizer(supported_language=language),
        MacauIdCardRecognizer(supported_language=language),
        TaiwanIdCardRecognizer(supported_language=language),
    ]


def create_id_card_registry(
    language: str = "zh",
    registry: Optional[RecognizerRegistry] = None,
) -> RecognizerRegistry:
    """Add the identity card recognizers to a Presidio registry.

    Args:
        language: Language code (default: "zh").
        registry: Existing registry to extend; a new one is created if omitted.

    Returns:
        The registry holding the identity card recognizers.

    Example:
        >>> from presidio_analyzer import AnalyzerEngine
        >>> registry = create_id_card_registry()
        >>> # AnalyzerEngine(registry=registry, nlp_engine=..., supported_languages=["zh"])
    """
    registry = registry if registry is not None else RecognizerRegistry()
    for recognizer in create_id_card_recognizers(language):
        registry.add_recognizer(recognizer)
    return registry


def get_supported_entities() -> list[str]:
    """Get list of identity card entity types.

    Returns:
        List of entity type strings.
    """
    return ["ZH_ID_CARD", "HK_ID_CARD", "MO_ID_CARD", "TW_ID_CARD"]
