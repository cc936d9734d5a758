"""Translation engine: key lookup, pluralization and interpolation.

Core component of the i18n system. Every other piece (phrase store, plural
resolver, token interpolator, missing-key strategy) is owned by one
Translator instance.
"""

import threading
from re import Pattern
from typing import Any, Dict, Mapping, Optional, Union

from phrasebook.i18n.interpolation import TokenInterpolator
from phrasebook.i18n.models import InterpolationOptions, PhraseSource
from phrasebook.i18n.plurals import PluralResolver, PluralRuleCatalogue
from phrasebook.i18n.store import PhraseStore
from phrasebook.i18n.strategies import (
    MissingKeyHandler,
    MissingKeyStrategy,
    WarnSink,
    select_missing_key_strategy,
)
from phrasebook.i18n.transform import (
    DEFAULT_PHRASE,
    TranslateOptions,
    normalize_options,
    transform_phrase,
)
from phrasebook.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LOCALE = "en"


class Translator:
    """Service for translating keys into display strings.

    Looks a key up in the phrase store, selects the plural variant when a
    ``smart_count`` is given, then substitutes placeholders.

    An instance may be shared between threads: mutation, locale changes
    and lookups run under a per-instance lock.

    Attributes:
        phrases: PhraseStore holding the flat dotted-key map.
        interpolator: TokenInterpolator built from the interpolation options.
        missing_key_strategy: Strategy used when a key has no phrase.
    """

    def __init__(
        self,
        phrases: Optional[PhraseSource] = None,
        locale: Optional[str] = None,
        allow_missing: bool = False,
        on_missing_key: Optional[MissingKeyHandler] = None,
        warn: Optional[WarnSink] = None,
        interpolation: Optional[
            Union[InterpolationOptions, Mapping[str, Any]]
        ] = None,
        plural_rules: Optional[PluralRuleCatalogue] = None,
    ):
        """Initialize Translator.

        Args:
            phrases: Initial dictionary tree.
            locale: Current locale (default: en).
            allow_missing: Transform missing keys as if they were templates.
            on_missing_key: Handler deciding the result for missing keys.
                Takes precedence over allow_missing.
            warn: Sink for the missing-key warning (default: structured log).
            interpolation: Placeholder delimiters ``{prefix, suffix}``.
            plural_rules: Custom plural catalogue (default: built-in rules).

        Raises:
            ReservedDelimiterError: If a delimiter is the plural separator.
        """
        self._lock = threading.RLock()
        self.interpolator = TokenInterpolator.from_options(interpolation)
        self.phrases = PhraseStore(phrases)
        self.current_locale = locale or DEFAULT_LOCALE
        self._resolver = PluralResolver(plural_rules)
        self.missing_key_strategy: MissingKeyStrategy = select_missing_key_strategy(
            on_missing_key=on_missing_key,
            allow_missing=allow_missing,
            warn=warn,
        )
        logger.info(
            "initialized_translator",
            locale=self.current_locale,
            phrase_count=len(self.phrases),
            missing_key_strategy=self.missing_key_strategy.name,
        )

    @property
    def token_pattern(self) -> Pattern[str]:
        return self.interpolator.pattern

    @property
    def plural_rules(self) -> PluralRuleCatalogue:
        return self._resolver.catalogue

    @plural_rules.setter
    def plural_rules(self, catalogue: PluralRuleCatalogue) -> None:
        with self._lock:
            self._resolver.catalogue = catalogue
        logger.info("plural_rules_replaced", families=catalogue.families)

    def locale(self, new_locale: Optional[str] = None) -> str:
        """Get the current locale, switching to ``new_locale`` when truthy."""
        with self._lock:
            if new_locale:
                self.current_locale = new_locale
            return self.current_locale

    def get_locale(self) -> str:
        return self.locale()

    def set_locale(self, new_locale: str) -> str:
        """Switch locale and return the active one.

        Empty values leave the current locale in place.
        """
        return self.locale(new_locale)

    def extend(self, phrases: PhraseSource, prefix: Optional[str] = None) -> None:
        """Merge a dictionary tree into the phrase store.

        Args:
            phrases: Node or nested mapping of phrases.
            prefix: Optional dotted prefix for every added key.
        """
        with self._lock:
            self.phrases.extend(phrases, prefix)

    def unset(
        self, phrases: Union[str, PhraseSource], prefix: Optional[str] = None
    ) -> None:
        """Remove a key, or every key a dictionary tree would add."""
        with self._lock:
            self.phrases.unset(phrases, prefix)

    def clear(self) -> None:
        with self._lock:
            self.phrases.clear()

    def replace(self, phrases: PhraseSource) -> None:
        """Replace every phrase with the given dictionary tree."""
        with self._lock:
            self.phrases.replace(phrases)
        logger.info("replaced_phrases", phrase_count=len(self.phrases))

    def has(self, key: str) -> bool:
        with self._lock:
            return self.phrases.has(key)

    def translate(self, key: str, options: TranslateOptions = None) -> Any:
        """Translate a key.

        Args:
            key: Dotted phrase key (e.g. "greeting.one").
            options: Placeholder values, or a bare count used as
                ``smart_count``. A string under ``"_"`` is used as the
                template when the key is missing.

        Returns:
            The translated string, or whatever the missing-key strategy
            returns for an unknown key.
        """
        opts: Dict[str, Any] = normalize_options(options)

        with self._lock:
            phrase = self.phrases.get(key)
            if phrase is None and isinstance(opts.get(DEFAULT_PHRASE), str):
                phrase = opts[DEFAULT_PHRASE]

            if phrase is None:
                return self.missing_key_strategy.resolve(
                    key,
                    opts,
                    self.current_locale,
                    self.interpolator.pattern,
                    self._resolver,
                )

            return transform_phrase(
                phrase,
                opts,
                self.current_locale,
                self.interpolator.pattern,
                self._resolver,
            )

    t = translate
