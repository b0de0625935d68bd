"""
Unit tests for interface strings and the language preference.
"""

import json

import pytest

from gujtranslit.i18n import (
    GUJARATI_TRANSLATIONS,
    Language,
    LanguagePreference,
    get_gujarati_text,
    status_label,
)
from gujtranslit.transliteration import is_gujarati_text


class TestGetGujaratiText:
    def test_gujarati(self):
        assert get_gujarati_text("customers", "gu") == "ગ્રાહકો"

    def test_english_returns_key(self):
        assert get_gujarati_text("customers", Language.ENGLISH) == "customers"

    def test_unknown_language_returns_key(self):
        assert get_gujarati_text("save", "fr") == "save"

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            get_gujarati_text("notAKey", "gu")

    def test_all_translations_are_gujarati(self):
        assert all(is_gujarati_text(value) for value in GUJARATI_TRANSLATIONS.values())


class TestStatusLabel:
    def test_english(self):
        assert status_label("in_progress") == "In progress"

    def test_gujarati(self):
        assert status_label("in_progress", "gu") == "પ્રગતિમાં"
        assert status_label("on_hold", Language.GUJARATI) == "રોકાયેલ"

    def test_unknown_status_falls_back(self):
        assert status_label("waiting_parts", "gu") == "Waiting parts"


class TestLanguagePreference:
    """Tests for the persisted display language."""

    def test_defaults_to_english(self, preference):
        assert preference.language is Language.ENGLISH
        assert preference.is_gujarati is False

    def test_set_and_read_back(self, preference):
        preference.set_language("gu")
        assert preference.is_gujarati is True
        assert LanguagePreference(preference.settings_path).language is Language.GUJARATI

    def test_stored_under_app_key(self, preference):
        preference.set_language(Language.GUJARATI)
        data = json.loads(preference.settings_path.read_text(encoding="utf-8"))
        assert data == {"ram-cycle-mart-language": "gu"}

    def test_other_settings_kept(self, preference):
        preference.settings_path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
        preference.set_language("gu")
        data = json.loads(preference.settings_path.read_text(encoding="utf-8"))
        assert data["theme"] == "dark"

    def test_invalid_language_rejected(self, preference):
        with pytest.raises(ValueError):
            preference.set_language("fr")

    def test_garbage_file_falls_back(self, preference):
        preference.settings_path.write_text("not json", encoding="utf-8")
        assert preference.language is Language.ENGLISH

    def test_non_utf8_file_falls_back(self, preference):
        preference.settings_path.write_bytes(b'\xff\xfe{"ram-cycle-mart-language": "gu"}')
        assert preference.language is Language.ENGLISH
        assert preference.set_language("gu") is Language.GUJARATI

    def test_unknown_stored_value_falls_back(self, preference):
        preference.settings_path.write_text(
            json.dumps({"ram-cycle-mart-language": "xx"}), encoding="utf-8"
        )
        assert preference.language is Language.ENGLISH

    def test_environment_override(self, preference, monkeypatch):
        preference.set_language("en")
        monkeypatch.setenv(LanguagePreference.LANGUAGE_ENV, "GU")
        assert preference.language is Language.GUJARATI

    def test_settings_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "custom" / "settings.json"
        monkeypatch.setenv(LanguagePreference.SETTINGS_ENV, str(path))
        monkeypatch.delenv(LanguagePreference.LANGUAGE_ENV, raising=False)
        pref = LanguagePreference()
        pref.set_language("gu")
        assert path.exists()
