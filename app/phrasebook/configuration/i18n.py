"""Internationalization settings."""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from phrasebook.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for the translation engine and localization service.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when no preference is found (default: en)
        I18N_SUPPORTED_LOCALES: JSON list or comma separated locale codes
        I18N_LOCALES_DIR: Directory holding the dictionary files
        I18N_ALLOW_MISSING: Render missing keys through the engine instead of warning
        I18N_INTERPOLATION_PREFIX: Placeholder opening delimiter (default: %{)
        I18N_INTERPOLATION_SUFFIX: Placeholder closing delimiter (default: })
        I18N_PREFERENCES_FILE: JSON file persisting the chosen locale
        I18N_STORAGE_KEY: Key under which the chosen locale is stored

    Example:
        ```python
        from phrasebook.configuration import settings

        if settings.i18n.allow_missing:
            ...
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when no stored or detected preference applies",
    )
    supported_locales: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["en", "fr"],
        alias="I18N_SUPPORTED_LOCALES",
        description="Locale codes the localization service accepts",
    )
    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory with <locale>.yml / <domain>.<locale>.yml files",
    )
    allow_missing: bool = Field(
        default=False,
        alias="I18N_ALLOW_MISSING",
        description="Treat missing keys as their own template",
    )
    interpolation_prefix: str = Field(
        default="%{",
        alias="I18N_INTERPOLATION_PREFIX",
    )
    interpolation_suffix: str = Field(
        default="}",
        alias="I18N_INTERPOLATION_SUFFIX",
    )
    preferences_file: Optional[str] = Field(
        default=None,
        alias="I18N_PREFERENCES_FILE",
        description="JSON key-value file used to persist the chosen locale",
    )
    storage_key: str = Field(
        default="locale",
        alias="I18N_STORAGE_KEY",
    )

    @field_validator("supported_locales", mode="before")
    @classmethod
    def _parse_supported_locales(cls, v: Optional[Any]) -> Any:
        """Parse I18N_SUPPORTED_LOCALES from a JSON list, CSV string or list."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v if str(item).strip()]
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid I18N_SUPPORTED_LOCALES JSON: {e} (value: {s[:80]})"
                    ) from e
            return [part.strip() for part in s.split(",") if part.strip()]
        raise ValueError("I18N_SUPPORTED_LOCALES must be a list or a string")
