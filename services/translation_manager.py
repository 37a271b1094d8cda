# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support.

The wizard core never renders text itself; it resolves every user-facing
message through ``tr`` so the hosting layer controls the language.
"""

from typing import Callable, List

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton Translation Manager with RTL/LTR support."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._translations = {}
            cls._instance._listeners: List[Callable] = []
            cls._instance._load_translations()
            cls._instance._current_language = (
                Config.DEFAULT_LANGUAGE if Config.DEFAULT_LANGUAGE in cls._instance._translations else "ar"
            )
        return cls._instance

    def _load_translations(self):
        from services.translations.ar import AR_TRANSLATIONS
        from services.translations.en import EN_TRANSLATIONS
        self._translations = {
            "ar": AR_TRANSLATIONS,
            "en": EN_TRANSLATIONS,
        }

    def on_language_changed(self, callback: Callable):
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"Unsupported language '{lang_code}', falling back to ar")
            lang_code = "ar"
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")
            for callback in self._listeners:
                try:
                    callback(lang_code)
                except Exception as e:
                    logger.error(f"Language change callback error: {e}")

    def get_language(self) -> str:
        return self._current_language

    def has_key(self, key: str) -> bool:
        return key in self._translations.get(self._current_language, {})

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            logger.debug(f"Missing translation for '{key}' ({self._current_language})")
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError) as e:
                logger.warning(f"Bad placeholders for '{key}': {e}")
        return translation

    def is_rtl(self) -> bool:
        return self._current_language in ("ar", "he", "fa")


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def is_rtl() -> bool:
    return _translator.is_rtl()
