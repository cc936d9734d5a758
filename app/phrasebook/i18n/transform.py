"""Phrase transformation: plural variant selection followed by interpolation."""

from numbers import Number
from re import Pattern
from typing import Any, Dict, Mapping, Optional, Union

from phrasebook.i18n.interpolation import DEFAULT_TOKEN_PATTERN, interpolate
from phrasebook.i18n.models import PLURAL_DELIMITER
from phrasebook.i18n.plurals import PluralResolver, PluralRuleCatalogue

SMART_COUNT = "smart_count"
DEFAULT_PHRASE = "_"

TranslateOptions = Union[Mapping[str, Any], int, float, None]


def normalize_options(options: TranslateOptions) -> Dict[str, Any]:
    """Turn translate() options into a substitution mapping.

    A bare number is shorthand for ``{"smart_count": number}``.
    """
    if options is None:
        return {}
    if isinstance(options, Number) and not isinstance(options, bool):
        return {SMART_COUNT: options}
    return dict(options)


def select_plural_variant(
    phrase: str, count: Union[int, float], locale: str, resolver: PluralResolver
) -> str:
    """Pick the variant of ``phrase`` matching ``count`` in ``locale``.

    Variants are separated by ``||||``. An index past the last variant, or
    an empty variant, falls back to the first one. Surrounding whitespace
    is stripped.
    """
    texts = phrase.split(PLURAL_DELIMITER)
    index = resolver.variant_index(locale, count)
    selected = texts[index] if 0 <= index < len(texts) else ""
    return (selected or texts[0]).strip()


def transform_phrase(
    phrase: str,
    substitutions: TranslateOptions = None,
    locale: Optional[str] = None,
    token_pattern: Optional[Pattern[str]] = None,
    plural_rules: Optional[Union[PluralRuleCatalogue, PluralResolver]] = None,
) -> str:
    """Pluralize and interpolate a phrase template.

    Args:
        phrase: Template string.
        substitutions: Mapping of placeholder values, a bare count, or None.
            With None the phrase is returned untouched.
        locale: Locale used for plural rules (default "en").
        token_pattern: Placeholder pattern (default ``%{name}``).
        plural_rules: Catalogue, or a resolver whose memo should be reused.

    Returns:
        The transformed phrase.

    Raises:
        TypeError: If phrase is not a string.
    """
    if not isinstance(phrase, str):
        raise TypeError("transform_phrase expects argument #1 to be string")

    if substitutions is None:
        return phrase

    options = normalize_options(substitutions)
    result = phrase

    if options.get(SMART_COUNT) is not None and phrase:
        if isinstance(plural_rules, PluralResolver):
            resolver = plural_rules
        else:
            resolver = PluralResolver(plural_rules)
        result = select_plural_variant(
            phrase, options[SMART_COUNT], locale or "en", resolver
        )

    return interpolate(result, options, token_pattern or DEFAULT_TOKEN_PATTERN)
