"""Locale resolution logic for determining the user's preferred language.

Detects the user's language from the process environment and matches it
against the locales the application ships dictionaries for.
"""

import os
from typing import Any, List, Mapping, Optional, Sequence

from phrasebook.logging import get_module_logger

logger = get_module_logger()

ENVIRONMENT_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")
IGNORED_ENVIRONMENT_LOCALES = {"c", "posix"}


def normalize_locale_tag(value: str) -> str:
    """Turn a POSIX locale (``fr_FR.UTF-8@euro``) into a tag (``fr-FR``)."""
    tag = value.split(".", 1)[0].split("@", 1)[0]
    return tag.replace("_", "-").strip()


class LanguageNegotiator:
    """Matches requested language tags against available ones.

    Falls back to language-only matching, so a request for "pt-BR" can be
    served by "pt".
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if an available tag satisfies a requested tag.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact (case-insensitive) match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the best available tag for a preference-ordered request list.

        Returns:
            Best matching tag from available, or default if none match.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default


class LocaleResolver:
    """Resolves a supported locale from context sources.

    Attributes:
        default_locale: Fallback locale code.
        supported_locales: Locale codes the application ships dictionaries for.
    """

    def __init__(
        self,
        default_locale: str = "en",
        supported_locales: Optional[Sequence[str]] = None,
    ):
        self.default_locale = default_locale
        self.supported_locales: List[str] = list(supported_locales or [default_locale])
        self.log = logger.bind(default_locale=default_locale)

    def is_supported(self, locale: Any) -> bool:
        return isinstance(locale, str) and locale in self.supported_locales

    def resolve_from_environment(
        self, environ: Optional[Mapping[str, str]] = None
    ) -> Optional[str]:
        """Resolve locale from LANGUAGE, LC_ALL, LC_MESSAGES and LANG.

        Args:
            environ: Mapping to read (default: os.environ).

        Returns:
            Supported locale code, or None when the environment names no
            supported language.
        """
        environ = os.environ if environ is None else environ

        requested = []
        for variable in ENVIRONMENT_VARIABLES:
            value = environ.get(variable)
            if not value:
                continue
            for candidate in value.split(":"):
                tag = normalize_locale_tag(candidate)
                if tag and tag.lower() not in IGNORED_ENVIRONMENT_LOCALES:
                    requested.append(tag)

        match = LanguageNegotiator.find_best_match(requested, self.supported_locales)
        if match:
            self.log.info("resolved_from_environment", locale=match)
        else:
            self.log.debug("no_matching_locale_in_environment", requested=requested)
        return match
