"""Custom exceptions for the i18n system."""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator = create_translator(...)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class ReservedDelimiterError(I18nError, ValueError):
    """Raised when an interpolation delimiter reuses the plural separator.

    Example:
        >>> TokenInterpolator(prefix="||||")
        Traceback (most recent call last):
        ...
        ReservedDelimiterError: "||||" token is reserved for pluralization
    """

    pass


class DictionaryLoadError(I18nError, ValueError):
    """Raised when a dictionary file cannot be read or parsed."""

    pass
