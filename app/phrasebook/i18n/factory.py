"""Factory functions for creating i18n components.

Wires settings, dictionary loader, preference store and locale resolver
into ready-to-use translators and localization services.
"""

from pathlib import Path
from typing import Any, Optional

from phrasebook.configuration import I18nSettings, settings as app_settings
from phrasebook.i18n.loader import YAMLDictionaryLoader
from phrasebook.i18n.models import InterpolationOptions, PhraseSource
from phrasebook.i18n.resolvers import LocaleResolver
from phrasebook.i18n.service import LocalizationService
from phrasebook.i18n.storage import LocalePreferenceStore
from phrasebook.i18n.translator import Translator
from phrasebook.logging import get_module_logger

logger = get_module_logger()

BUNDLED_LOCALES_DIR = Path(__file__).resolve().parents[1] / "locales"


def _interpolation(config: I18nSettings) -> InterpolationOptions:
    return InterpolationOptions(
        prefix=config.interpolation_prefix,
        suffix=config.interpolation_suffix,
    )


def create_translator(
    phrases: Optional[PhraseSource] = None,
    locale: Optional[str] = None,
    config: Optional[I18nSettings] = None,
    **overrides: Any,
) -> Translator:
    """Create a Translator configured from settings.

    Args:
        phrases: Dictionary tree to load.
        locale: Current locale (default: settings default locale).
        config: I18nSettings (default: application settings).
        **overrides: Translator keyword arguments taking precedence over
            settings (allow_missing, on_missing_key, warn, interpolation,
            plural_rules).

    Returns:
        Translator: Configured translator instance
    """
    config = config or app_settings.i18n
    options = {
        "allow_missing": config.allow_missing,
        "interpolation": _interpolation(config),
    }
    options.update(overrides)
    return Translator(
        phrases=phrases,
        locale=locale or config.default_locale,
        **options,
    )


def create_localization_service(
    config: Optional[I18nSettings] = None,
    dictionaries_dir: Optional[Path] = None,
    **overrides: Any,
) -> LocalizationService:
    """Create a LocalizationService with every dictionary loaded up front.

    Only the supported locales that have dictionary files are served. If
    no dictionaries directory is configured, the bundled locales are used.

    Args:
        config: I18nSettings (default: application settings).
        dictionaries_dir: Directory override for dictionary files.
        **overrides: Translator keyword arguments, as in create_translator().

    Raises:
        ValueError: If the directory does not exist or no supported locale
            has a dictionary.
    """
    config = config or app_settings.i18n
    directory = dictionaries_dir or (
        Path(config.locales_dir) if config.locales_dir else BUNDLED_LOCALES_DIR
    )

    loader = YAMLDictionaryLoader(directory)
    dictionaries = loader.load_all()

    supported = [locale for locale in config.supported_locales if locale in dictionaries]
    if not supported:
        raise ValueError(
            f"No dictionaries for supported locales {config.supported_locales} in {directory}"
        )
    default_locale = (
        config.default_locale if config.default_locale in supported else supported[0]
    )

    options = {
        "allow_missing": config.allow_missing,
        "interpolation": _interpolation(config),
    }
    options.update(overrides)

    service = LocalizationService(
        dictionaries={locale: dictionaries[locale] for locale in supported},
        default_locale=default_locale,
        store=LocalePreferenceStore(config.preferences_file),
        resolver=LocaleResolver(
            default_locale=default_locale, supported_locales=supported
        ),
        storage_key=config.storage_key,
        **options,
    )
    logger.info(
        "localization_service_created",
        dictionaries_dir=str(directory),
        locale_count=len(supported),
    )
    return service
