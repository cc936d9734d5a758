"""Missing-key strategies.

The translator picks one strategy at construction:
- CustomHandlerStrategy: a caller-supplied handler decides the result
- PassthroughStrategy: the key itself is transformed as if it were the template
- WarnStrategy: a warning is emitted and the key is returned unchanged
"""

from abc import ABC, abstractmethod
from re import Pattern
from typing import Any, Callable, Dict, Optional

from phrasebook.i18n.plurals import PluralResolver, PluralRuleCatalogue
from phrasebook.i18n.transform import transform_phrase
from phrasebook.logging import get_module_logger

logger = get_module_logger()

MissingKeyHandler = Callable[
    [str, Dict[str, Any], str, Pattern[str], PluralRuleCatalogue], Any
]
WarnSink = Callable[[str], Any]


def log_warning(message: str) -> None:
    """Default warn sink."""
    logger.warning("translation_missing", message=message)


class MissingKeyStrategy(ABC):
    """Decides what translate() returns for a key with no phrase."""

    name: str = "abstract"

    @abstractmethod
    def resolve(
        self,
        key: str,
        options: Dict[str, Any],
        locale: str,
        token_pattern: Pattern[str],
        resolver: PluralResolver,
    ) -> Any:
        """Produce the translate() result for a missing key.

        Args:
            key: The key that was not found.
            options: Normalized translate() options.
            locale: Current locale.
            token_pattern: Active placeholder pattern.
            resolver: The translator's plural resolver.
        """
        pass


class CustomHandlerStrategy(MissingKeyStrategy):
    """Delegates to a handler called with
    ``(key, options, locale, token_pattern, plural_rules)``.

    The handler's return value is used verbatim.
    """

    name = "custom_handler"

    def __init__(self, handler: MissingKeyHandler):
        self.handler = handler

    def resolve(self, key, options, locale, token_pattern, resolver):
        return self.handler(key, options, locale, token_pattern, resolver.catalogue)


class PassthroughStrategy(MissingKeyStrategy):
    """Pluralizes and interpolates the key text itself."""

    name = "passthrough"

    def resolve(self, key, options, locale, token_pattern, resolver):
        return transform_phrase(key, options, locale, token_pattern, resolver)


class WarnStrategy(MissingKeyStrategy):
    """Reports the missing key through a warn sink and returns the key."""

    name = "warn"

    def __init__(self, warn: Optional[WarnSink] = None):
        self.warn = warn or log_warning

    def resolve(self, key, options, locale, token_pattern, resolver):
        self.warn(f'Missing translation for key: "{key}"')
        return key


def select_missing_key_strategy(
    on_missing_key: Optional[MissingKeyHandler] = None,
    allow_missing: bool = False,
    warn: Optional[WarnSink] = None,
) -> MissingKeyStrategy:
    """Pick the strategy: handler first, then allow_missing, then warn."""
    if callable(on_missing_key):
        return CustomHandlerStrategy(on_missing_key)
    if allow_missing:
        return PassthroughStrategy()
    return WarnStrategy(warn)
