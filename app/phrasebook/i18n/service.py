"""Localization service exposing the active locale's translator.

Holds one Translator for the active locale, restores the user's chosen
locale from a preference store, and persists locale changes.
"""

import threading
from typing import Any, Dict, List, Mapping, Optional

from phrasebook.i18n.models import PhraseSource
from phrasebook.i18n.resolvers import LocaleResolver
from phrasebook.i18n.storage import LocalePreferenceStore
from phrasebook.i18n.transform import TranslateOptions
from phrasebook.i18n.translator import Translator
from phrasebook.logging import get_module_logger

logger = get_module_logger()

DEFAULT_STORAGE_KEY = "locale"


class LocalizationService:
    """Class-based facade over the active locale's Translator.

    Initial locale, in order:
    1. The stored preference, when it names a supported locale
    2. The locale detected from the environment, when supported
    3. The default locale

    Usage:
        service = LocalizationService(
            dictionaries={"en": en_tree, "fr": fr_tree},
            default_locale="fr",
            store=LocalePreferenceStore("~/.app/preferences.json"),
        )
        service.translate("greeting.one", {"smart_count": 3})
        service.change_locale("en")
    """

    def __init__(
        self,
        dictionaries: Mapping[str, PhraseSource],
        default_locale: str,
        store: Optional[LocalePreferenceStore] = None,
        resolver: Optional[LocaleResolver] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        environ: Optional[Mapping[str, str]] = None,
        **engine_options: Any,
    ):
        """Initialize the service.

        Args:
            dictionaries: Locale code -> dictionary tree.
            default_locale: Locale used when nothing else applies.
            store: Preference store (default: no persistence).
            resolver: Locale resolver used for environment detection.
            storage_key: Key the chosen locale is stored under.
            environ: Environment mapping for detection (default: os.environ).
            **engine_options: Passed to every Translator (allow_missing,
                on_missing_key, warn, interpolation, plural_rules).

        Raises:
            ValueError: If default_locale has no dictionary.
        """
        if default_locale not in dictionaries:
            raise ValueError(
                f"Default locale {default_locale!r} has no dictionary "
                f"(available: {sorted(dictionaries)})"
            )

        self._dictionaries: Dict[str, PhraseSource] = dict(dictionaries)
        self.default_locale = default_locale
        self.store = store or LocalePreferenceStore()
        self.resolver = resolver or LocaleResolver(
            default_locale=default_locale,
            supported_locales=list(self._dictionaries),
        )
        self.storage_key = storage_key
        self._engine_options = engine_options
        self._lock = threading.RLock()

        initial = self._initial_locale(environ)
        self._translator = self._build_translator(initial)
        logger.info(
            "localization_service_initialized",
            locale=initial,
            supported_locales=self.supported_locales,
        )

    @property
    def supported_locales(self) -> List[str]:
        return list(self._dictionaries)

    @property
    def current_locale(self) -> str:
        with self._lock:
            return self._translator.get_locale()

    @property
    def translator(self) -> Translator:
        with self._lock:
            return self._translator

    def is_supported(self, locale: Any) -> bool:
        """Check whether a value names a locale with a dictionary.

        Non-string values, such as a malformed stored preference, are never
        supported.
        """
        return isinstance(locale, str) and locale in self._dictionaries

    def _initial_locale(self, environ: Optional[Mapping[str, str]]) -> str:
        stored = self.store.get_item(self.storage_key)
        if stored is not None:
            if self.is_supported(stored):
                return stored
            logger.warning("stored_locale_unsupported", stored_locale=stored)

        detected = self.resolver.resolve_from_environment(environ)
        if self.is_supported(detected):
            return detected

        return self.default_locale

    def _build_translator(self, locale: str) -> Translator:
        return Translator(
            phrases=self._dictionaries[locale],
            locale=locale,
            **self._engine_options,
        )

    def change_locale(self, new_locale: str) -> str:
        """Switch to a supported locale and persist the choice.

        Unsupported locales are ignored.

        Returns:
            The active locale after the call.
        """
        with self._lock:
            if not self.is_supported(new_locale):
                logger.warning(
                    "locale_change_ignored",
                    requested_locale=new_locale,
                    current_locale=self._translator.get_locale(),
                )
                return self._translator.get_locale()

            if new_locale != self._translator.get_locale():
                self._translator = self._build_translator(new_locale)
                logger.info("locale_changed", locale=new_locale)

            self.store.set_item(self.storage_key, new_locale)
            return new_locale

    def translate(self, key: str, options: TranslateOptions = None) -> Any:
        """Translate a key with the active locale's translator."""
        return self.translator.translate(key, options)

    t = translate
