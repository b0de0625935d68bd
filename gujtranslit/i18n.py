"""
Interface strings and the persisted display-language preference.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .formatting import format_status


class Language(Enum):
    """Display languages supported by the shop application."""
    ENGLISH = "en"
    GUJARATI = "gu"


GUJARATI_TRANSLATIONS = {
    # Navigation
    "dashboard": "ડેશબોર્ડ",
    "customers": "ગ્રાહકો",
    "workOrders": "કાર્ય આદેશો",
    "technicians": "ટેકનિશિયન",
    "inventory": "સ્ટોક",
    "billing": "બિલિંગ",
    "reports": "રિપોર્ટ્સ",
    "salesReports": "વેચાણ રિપોર્ટ્સ",

    # Common actions
    "save": "સેવ કરો",
    "cancel": "રદ કરો",
    "delete": "ડિલીટ કરો",
    "edit": "એડિટ કરો",
    "view": "જુઓ",
    "search": "શોધો",
    "filter": "ફિલ્ટર",
    "export": "એક્સપોર્ટ",
    "print": "પ્રિન્ટ",

    # Status
    "pending": "બાકી",
    "inProgress": "પ્રગતિમાં",
    "completed": "પૂર્ણ",
    "onHold": "રોકાયેલ",
    "cancelled": "રદ કરેલ",
    "paid": "ચૂકવ્યું",
    "overdue": "મુદત વીતેલ",

    # Customer fields
    "firstName": "પ્રથમ નામ",
    "lastName": "અટક",
    "email": "ઇમેઇલ",
    "phone": "ફોન",
    "address": "સરનામું",
    "city": "શહેર",
    "state": "રાજ્ય",
    "zipCode": "પિન કોડ",

    # Messages
    "loading": "લોડ થઈ રહ્યું છે...",
    "noData": "કોઈ ડેટા ઉપલબ્ધ નથી",
    "error": "એરર આવ્યો છે",
    "success": "સફળ",

    # Business specific
    "ramCycleMart": "રામ સાયકલ માર્ટ",
    "sewingMachine": "સિલાઈ મશીન",
    "repairService": "રિપેર સર્વિસ",
}

# Enum values (snake_case) to translation keys
_STATUS_KEYS = {
    "pending": "pending",
    "in_progress": "inProgress",
    "completed": "completed",
    "on_hold": "onHold",
    "cancelled": "cancelled",
    "paid": "paid",
    "overdue": "overdue",
}


def _coerce_language(language: Union[str, Language, None]) -> Language:
    if isinstance(language, Language):
        return language
    try:
        return Language(language)
    except ValueError:
        return Language.ENGLISH


def get_gujarati_text(key: str, language: Union[str, Language, None] = Language.GUJARATI) -> str:
    """
    Look up an interface label.

    Args:
        key: Translation key, e.g. "customers".
        language: Display language; anything but Gujarati returns the key.

    Raises:
        KeyError: If the key has no translation.
    """
    if key not in GUJARATI_TRANSLATIONS:
        raise KeyError(f"No translation for key: {key}")
    if _coerce_language(language) is Language.GUJARATI:
        return GUJARATI_TRANSLATIONS[key]
    return key


def status_label(status: str, language: Union[str, Language, None] = Language.ENGLISH) -> str:
    """Label a work-order or payment status in the given language."""
    if _coerce_language(language) is Language.GUJARATI and status in _STATUS_KEYS:
        return GUJARATI_TRANSLATIONS[_STATUS_KEYS[status]]
    return format_status(status)


class LanguagePreference:
    """
    The user's display language, persisted between runs.

    The preference lives in a small JSON settings file. The
    GUJTRANSLIT_LANGUAGE environment variable overrides whatever is stored.
    """

    SETTINGS_ENV = "GUJTRANSLIT_SETTINGS"
    LANGUAGE_ENV = "GUJTRANSLIT_LANGUAGE"
    SETTINGS_KEY = "ram-cycle-mart-language"
    DEFAULT_PATH = Path.home() / ".gujtranslit" / "settings.json"

    def __init__(self, settings_path: Optional[Union[str, Path]] = None):
        """
        Initialize the preference store.

        Args:
            settings_path: Settings file location. Defaults to the
                GUJTRANSLIT_SETTINGS environment variable, then
                ~/.gujtranslit/settings.json.
        """
        env_path = os.environ.get(self.SETTINGS_ENV)
        self.settings_path = Path(settings_path or env_path or self.DEFAULT_PATH)

    @property
    def language(self) -> Language:
        override = os.environ.get(self.LANGUAGE_ENV)
        if override:
            return _coerce_language(override.strip().lower())
        return _coerce_language(self._read().get(self.SETTINGS_KEY))

    @property
    def is_gujarati(self) -> bool:
        return self.language is Language.GUJARATI

    def set_language(self, language: Union[str, Language]) -> Language:
        """
        Store a new display language.

        Raises:
            ValueError: If the language is not supported.
        """
        chosen = language if isinstance(language, Language) else Language(language)
        settings = self._read()
        settings[self.SETTINGS_KEY] = chosen.value
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        self.settings_path.write_text(
            json.dumps(settings, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        return chosen

    def _read(self) -> dict:
        if not self.settings_path.exists():
            return {}
        try:
            data = json.loads(self.settings_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return data if isinstance(data, dict) else {}
