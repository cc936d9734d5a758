"""Placeholder substitution for phrase templates."""

import re
from re import Pattern
from typing import Any, Mapping, Optional

from phrasebook.i18n.exceptions import ReservedDelimiterError
from phrasebook.i18n.models import (
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    PLURAL_DELIMITER,
    InterpolationOptions,
)


def build_token_pattern(
    prefix: Optional[str] = None, suffix: Optional[str] = None
) -> Pattern[str]:
    """Compile the placeholder pattern ``prefix(.*?)suffix``.

    Args:
        prefix: Opening delimiter (default ``%{``).
        suffix: Closing delimiter (default ``}``).

    Returns:
        Compiled pattern capturing the placeholder name.

    Raises:
        ReservedDelimiterError: If either delimiter is the plural separator.
    """
    prefix = prefix or DEFAULT_PREFIX
    suffix = suffix or DEFAULT_SUFFIX

    if PLURAL_DELIMITER in (prefix, suffix):
        raise ReservedDelimiterError(
            f'"{PLURAL_DELIMITER}" token is reserved for pluralization'
        )

    return re.compile(re.escape(prefix) + "(.*?)" + re.escape(suffix))


DEFAULT_TOKEN_PATTERN = build_token_pattern()


class TokenInterpolator:
    """Substitutes named placeholders in phrase templates.

    Placeholders without a matching, non-None substitution are left in
    place, delimiters included.

    Attributes:
        options: Delimiters the pattern was built from.
        pattern: Compiled placeholder pattern.
    """

    def __init__(
        self,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None,
    ):
        self.options = InterpolationOptions(
            prefix=prefix or DEFAULT_PREFIX, suffix=suffix or DEFAULT_SUFFIX
        )
        self.pattern = build_token_pattern(self.options.prefix, self.options.suffix)

    @classmethod
    def from_options(cls, options: Any = None) -> "TokenInterpolator":
        """Build from InterpolationOptions, a ``{prefix, suffix}`` mapping or None."""
        resolved = InterpolationOptions.from_value(options)
        return cls(prefix=resolved.prefix, suffix=resolved.suffix)

    def interpolate(
        self, text: str, substitutions: Optional[Mapping[str, Any]] = None
    ) -> str:
        return interpolate(text, substitutions, self.pattern)


def format_value(value: Any) -> str:
    """Render a substitution value as display text.

    Booleans render as ``true``/``false`` and whole floats without a
    fractional part, so ``5.0`` shows as ``5``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def interpolate(
    text: str,
    substitutions: Optional[Mapping[str, Any]],
    pattern: Optional[Pattern[str]] = None,
) -> str:
    """Replace every placeholder found in ``text``.

    Args:
        text: Template string.
        substitutions: Placeholder name -> value. Values are rendered with format_value().
        pattern: Placeholder pattern (default ``%{name}``).

    Returns:
        Interpolated string.
    """
    substitutions = substitutions or {}
    pattern = pattern or DEFAULT_TOKEN_PATTERN

    def _replace(match):
        value = substitutions.get(match.group(1))
        if value is None:
            return match.group(0)
        return format_value(value)

    return pattern.sub(_replace, text)
