"""
gujtranslit - Latin-to-Gujarati transliteration for shop records

Converts names, addresses and notes typed in Latin script to Gujarati,
formats rupee amounts and dates for bilingual documents, renders
bilingual invoices, and transliterates whole documents.
"""

__version__ = "1.0.0"

from .transliteration import (
    Transliterator,
    TransliterationField,
    TransliterationToggle,
    is_gujarati_text,
    transliterate_segment,
    transliterate_to_gujarati,
)

__all__ = [
    "Transliterator",
    "TransliterationField",
    "TransliterationToggle",
    "is_gujarati_text",
    "transliterate_segment",
    "transliterate_to_gujarati",
]
