"""Plural rule catalogue and resolver.

A catalogue maps plural family names to classifier functions (count to
variant index) and to the locale codes that select them. The resolver picks
the family for a locale and memoizes the choice per instance.
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from phrasebook.logging import get_module_logger

logger = get_module_logger()

Number = Union[int, float]
PluralClassifier = Callable[[Number], int]

DEFAULT_FAMILY_LOCALE = "en"


def _slavic_groups(n: Number) -> int:
    last_two = n % 100
    end = last_two % 10
    if last_two != 11 and end == 1:
        return 0
    if 2 <= end <= 4 and not 12 <= last_two <= 14:
        return 1
    return 2


def _arabic(n: Number) -> int:
    if n < 3:
        return int(n)
    last_two = n % 100
    if 3 <= last_two <= 10:
        return 3
    return 4 if last_two >= 11 else 5


def _chinese(n: Number) -> int:
    return 0


def _french(n: Number) -> int:
    return 1 if n >= 2 else 0


def _german(n: Number) -> int:
    return 1 if n != 1 else 0


def _lithuanian(n: Number) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 9 and (n % 100 < 11 or n % 100 > 19):
        return 1
    return 2


def _czech(n: Number) -> int:
    if n == 1:
        return 0
    return 1 if 2 <= n <= 4 else 2


def _polish(n: Number) -> int:
    if n == 1:
        return 0
    end = n % 10
    return 1 if 2 <= end <= 4 and (n % 100 < 10 or n % 100 >= 20) else 2


def _icelandic(n: Number) -> int:
    return 1 if n % 10 != 1 or n % 100 == 11 else 0


def _slovenian(n: Number) -> int:
    last_two = n % 100
    if last_two == 1:
        return 0
    if last_two == 2:
        return 1
    if last_two in (3, 4):
        return 2
    return 3


@dataclass
class PluralRuleCatalogue:
    """Plural families, their classifiers and the locales that select them.

    Attributes:
        plural_types: Family name -> classifier returning a variant index.
        type_to_languages: Family name -> locale codes or language prefixes.
        fallback_family: Family used for unknown locales. When None, the
            family of ``en`` is used, then ``german`` if present.
    """

    plural_types: Dict[str, PluralClassifier] = field(default_factory=dict)
    type_to_languages: Dict[str, List[str]] = field(default_factory=dict)
    fallback_family: Optional[str] = None

    def language_map(self) -> Dict[str, str]:
        """Invert type_to_languages into locale -> family."""
        mapping: Dict[str, str] = {}
        for family, languages in self.type_to_languages.items():
            for language in languages:
                mapping[language] = family
        return mapping

    def has_family(self, family: Optional[str]) -> bool:
        return family is not None and family in self.plural_types

    def default_family(self) -> Optional[str]:
        """Return the family used when a locale has no entry."""
        if self.has_family(self.fallback_family):
            return self.fallback_family
        english = self.language_map().get(DEFAULT_FAMILY_LOCALE)
        if self.has_family(english):
            return english
        if self.has_family("german"):
            return "german"
        return None

    @property
    def families(self) -> List[str]:
        return list(self.plural_types.keys())

    @classmethod
    def from_mapping(
        cls,
        plural_types: Mapping[str, PluralClassifier],
        type_to_languages: Mapping[str, Iterable[str]],
        fallback_family: Optional[str] = None,
    ) -> "PluralRuleCatalogue":
        return cls(
            plural_types=dict(plural_types),
            type_to_languages={
                family: list(languages)
                for family, languages in type_to_languages.items()
            },
            fallback_family=fallback_family,
        )


def default_plural_rules() -> PluralRuleCatalogue:
    """Build the built-in catalogue.

    A new instance is returned on every call, so each resolver owns its rules.
    """
    return PluralRuleCatalogue(
        plural_types={
            "arabic": _arabic,
            "bosnian_serbian": _slavic_groups,
            "chinese": _chinese,
            "croatian": _slavic_groups,
            "french": _french,
            "german": _german,
            "russian": _slavic_groups,
            "lithuanian": _lithuanian,
            "czech": _czech,
            "polish": _polish,
            "icelandic": _icelandic,
            "slovenian": _slovenian,
        },
        type_to_languages={
            "arabic": ["ar"],
            "bosnian_serbian": ["bs-Latn-BA", "bs-Cyrl-BA", "srl-RS", "sr-RS"],
            "chinese": [
                "id",
                "id-ID",
                "ja",
                "ko",
                "ko-KR",
                "lo",
                "ms",
                "th",
                "th-TH",
                "zh",
            ],
            "croatian": ["hr", "hr-HR"],
            "german": [
                "fa",
                "da",
                "de",
                "en",
                "es",
                "fi",
                "el",
                "he",
                "hi-IN",
                "hu",
                "hu-HU",
                "it",
                "nl",
                "no",
                "pt",
                "sv",
                "tr",
            ],
            "french": ["fr", "tl", "pt-br"],
            "russian": ["ru", "ru-RU"],
            "lithuanian": ["lt"],
            "czech": ["cs", "cs-CZ", "sk"],
            "polish": ["pl"],
            "icelandic": ["is"],
            "slovenian": ["sl-SL"],
        },
    )


class PluralResolver:
    """Selects plural variant indexes for locales.

    Resolution order for a locale's family:
    1. Exact locale code (e.g. "pt-br")
    2. Language part before the first "-" (e.g. "ru" for "ru-UA")
    3. The catalogue's default family

    Resolved families are memoized per locale string. A memoized family that
    is no longer part of the catalogue is resolved again, so the catalogue
    can be swapped at runtime.

    Attributes:
        catalogue: Active PluralRuleCatalogue.
    """

    def __init__(self, catalogue: Optional[PluralRuleCatalogue] = None):
        self.catalogue = (
            catalogue if catalogue is not None else default_plural_rules()
        )
        self._memo: Dict[str, Optional[str]] = {}
        self._lock = threading.Lock()

    def resolve_family(self, locale: str) -> Optional[str]:
        """Return the plural family name for a locale.

        Args:
            locale: Locale code (e.g. "en", "ru-RU").

        Returns:
            Family name, or None if the catalogue has no usable family.
        """
        with self._lock:
            family = self._memo.get(locale)
            if family is not None and not self.catalogue.has_family(family):
                logger.debug(
                    "plural_family_cache_invalidated", locale=locale, family=family
                )
                del self._memo[locale]
                family = None

            if family is None:
                family = self._lookup(locale)
                if family is not None:
                    self._memo[locale] = family
            return family

    def _lookup(self, locale: str) -> Optional[str]:
        languages = self.catalogue.language_map()
        family = languages.get(locale)
        if not self.catalogue.has_family(family):
            family = languages.get(locale.split("-", 1)[0])
        if not self.catalogue.has_family(family):
            family = self.catalogue.default_family()
        return family

    def resolve_variant(self, family: Optional[str], count: Number) -> int:
        """Classify a count into a variant index for a family.

        Unknown families use the catalogue's default family; a catalogue
        without any usable family always yields 0. The caller bounds the
        index against the variants actually available.
        """
        classifier = self.catalogue.plural_types.get(family) if family else None
        if classifier is None:
            fallback = self.catalogue.default_family()
            classifier = self.catalogue.plural_types.get(fallback) if fallback else None
        if classifier is None:
            return 0
        return classifier(count)

    def variant_index(self, locale: str, count: Number) -> int:
        """Resolve the family for a locale and classify a count in one step."""
        return self.resolve_variant(self.resolve_family(locale), count)

    def cached_locales(self) -> List[str]:
        """Locales with a memoized family."""
        with self._lock:
            return list(self._memo.keys())
