"""
Gujarati transliteration engine.

Converts Latin-script input to Gujarati script in two passes:
whole-word name/place overrides first, then dictionary substitution with
the longest keys applied first. Unmapped characters pass through.
"""

import re
from typing import Callable, Optional

from .mappings import (
    COMMON_NAME_MAPPINGS,
    ENGLISH_TO_GUJARATI,
    GUJARATI_BLOCK_END,
    GUJARATI_BLOCK_START,
)

_GUJARATI_CHAR = re.compile(
    "[" + chr(GUJARATI_BLOCK_START) + "-" + chr(GUJARATI_BLOCK_END) + "]"
)


class Transliterator:
    """
    Reusable transliteration engine.

    Holds its own copy of the lookup tables so callers can register extra
    whole-word overrides (shop-specific names, local areas) without
    touching the module defaults.
    """

    def __init__(
        self,
        character_map: Optional[dict] = None,
        name_overrides: Optional[dict] = None,
    ):
        """
        Initialize the engine.

        Args:
            character_map: Replacement for the Latin-to-Gujarati table.
            name_overrides: Extra whole-word overrides, applied after the
                built-in common names.
        """
        self.character_map = dict(character_map or ENGLISH_TO_GUJARATI)
        self.name_mappings = dict(COMMON_NAME_MAPPINGS)
        for english, gujarati in (name_overrides or {}).items():
            self.name_mappings[english.lower()] = gujarati

        self._name_patterns = [
            (re.compile(rf"\b{re.escape(english)}\b", re.IGNORECASE | re.ASCII), gujarati)
            for english, gujarati in self.name_mappings.items()
        ]
        # sorted() is stable, so equal-length keys keep table order
        self._ordered_keys = sorted(self.character_map, key=len, reverse=True)

    def transliterate(self, text: Optional[str]) -> str:
        """
        Transliterate Latin text to Gujarati.

        Args:
            text: Latin-script input. Case is ignored.

        Returns:
            The Gujarati rendering, trimmed. Empty input gives "".
        """
        if not text:
            return ""

        result = text.lower().strip()

        for pattern, gujarati in self._name_patterns:
            result = pattern.sub(gujarati, result)

        for english in self._ordered_keys:
            result = result.replace(english, self.character_map[english])

        return result

    def transliterate_segment(self, text: Optional[str]) -> str:
        """
        Transliterate a fragment of a larger document or form.

        Blank fragments and fragments that already contain Gujarati are
        returned untouched. Surrounding whitespace is preserved.
        """
        if not text or not text.strip() or self.is_gujarati(text):
            return text or ""

        stripped = text.strip()
        start = text.index(stripped)
        leading = text[:start]
        trailing = text[start + len(stripped):]
        return leading + self.transliterate(stripped) + trailing

    @staticmethod
    def is_gujarati(text: Optional[str]) -> bool:
        """Check whether text contains any Gujarati character."""
        if not text:
            return False
        return bool(_GUJARATI_CHAR.search(text))


_default_engine = Transliterator()


def transliterate_to_gujarati(english_text: Optional[str]) -> str:
    """Transliterate Latin text to Gujarati with the default tables."""
    return _default_engine.transliterate(english_text)


def transliterate_segment(text: Optional[str]) -> str:
    """Transliterate a document fragment, keeping its surrounding whitespace."""
    return _default_engine.transliterate_segment(text)


def is_gujarati_text(text: Optional[str]) -> bool:
    """Check whether text contains any Gujarati character."""
    return Transliterator.is_gujarati(text)


class TransliterationToggle:
    """On/off switch for transliterating free text."""

    def __init__(self, enabled: bool = False, engine: Optional[Transliterator] = None):
        self.is_enabled = enabled
        self.engine = engine or _default_engine

    def toggle(self) -> bool:
        """Flip the switch and return the new state."""
        self.is_enabled = not self.is_enabled
        return self.is_enabled

    def transliterate(self, text: str) -> str:
        return self.engine.transliterate(text) if self.is_enabled else text


class TransliterationField:
    """
    State of a single auto-transliterating form field.

    Mirrors how a text input behaves when the user types Latin text:
    while transliteration is active, each new value is converted unless it
    already contains Gujarati (the user switched keyboards, or the value was
    converted earlier). When the application language is Gujarati,
    transliteration is always active and the toggle is hidden.
    """

    def __init__(
        self,
        value: str = "",
        enabled: bool = False,
        auto_language: bool = False,
        on_change: Optional[Callable[[str], None]] = None,
        engine: Optional[Transliterator] = None,
    ):
        self.value = value
        self.enabled = enabled or auto_language
        self.auto_language = auto_language
        self.on_change = on_change
        self.engine = engine or _default_engine

    @property
    def active(self) -> bool:
        return self.auto_language or self.enabled

    @property
    def show_toggle(self) -> bool:
        return not self.auto_language

    def input(self, text: str) -> str:
        """
        Handle a new raw value typed into the field.

        Returns:
            The value stored in the field after conversion.
        """
        if self.active and not self.engine.is_gujarati(text):
            self._set(self.engine.transliterate(text))
        else:
            self._set(text)
        return self.value

    def toggle(self) -> bool:
        """
        Flip manual transliteration.

        Turning it on converts the current value in place.
        """
        self.enabled = not self.enabled
        if self.enabled and self.value and not self.engine.is_gujarati(self.value):
            self._set(self.engine.transliterate(self.value))
        return self.enabled

    def _set(self, value: str) -> None:
        self.value = value
        if self.on_change is not None:
            self.on_change(value)
