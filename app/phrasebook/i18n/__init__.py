"""i18n system - key-based translation with pluralization and interpolation.

Main components:
- models: Leaf / Node dictionary trees, InterpolationOptions
- store: PhraseStore flattening dictionary trees into dotted keys
- plurals: PluralRuleCatalogue and PluralResolver
- interpolation: TokenInterpolator for %{placeholder} substitution
- translator: Translator engine and missing-key strategies
- loader: YAMLDictionaryLoader for dictionary files
- storage: LocalePreferenceStore persisting the chosen locale
- resolvers: LocaleResolver and LanguageNegotiator for locale detection
- service: LocalizationService exposing the active locale
"""

from phrasebook.i18n.exceptions import (
    DictionaryLoadError,
    I18nError,
    ReservedDelimiterError,
)
from phrasebook.i18n.interpolation import TokenInterpolator, build_token_pattern
from phrasebook.i18n.loader import DictionaryLoader, YAMLDictionaryLoader
from phrasebook.i18n.models import (
    PLURAL_DELIMITER,
    InterpolationOptions,
    Leaf,
    Node,
)
from phrasebook.i18n.plurals import (
    PluralResolver,
    PluralRuleCatalogue,
    default_plural_rules,
)
from phrasebook.i18n.resolvers import LanguageNegotiator, LocaleResolver
from phrasebook.i18n.service import LocalizationService
from phrasebook.i18n.storage import LocalePreferenceStore
from phrasebook.i18n.store import PhraseStore
from phrasebook.i18n.strategies import (
    CustomHandlerStrategy,
    MissingKeyStrategy,
    PassthroughStrategy,
    WarnStrategy,
)
from phrasebook.i18n.transform import transform_phrase
from phrasebook.i18n.translator import Translator

__all__ = [
    "PLURAL_DELIMITER",
    "Leaf",
    "Node",
    "InterpolationOptions",
    "PhraseStore",
    "PluralRuleCatalogue",
    "PluralResolver",
    "default_plural_rules",
    "TokenInterpolator",
    "build_token_pattern",
    "transform_phrase",
    "Translator",
    "MissingKeyStrategy",
    "CustomHandlerStrategy",
    "PassthroughStrategy",
    "WarnStrategy",
    "DictionaryLoader",
    "YAMLDictionaryLoader",
    "LocalePreferenceStore",
    "LocaleResolver",
    "LanguageNegotiator",
    "LocalizationService",
    "I18nError",
    "ReservedDelimiterError",
    "DictionaryLoadError",
]
