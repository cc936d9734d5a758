"""Dictionary loading interface and implementations.

Defines the contract for loading translation dictionaries and provides a
file-based loader for YAML and JSON dictionaries.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from phrasebook.i18n.exceptions import DictionaryLoadError
from phrasebook.logging import get_module_logger

logger = get_module_logger()

DICTIONARY_SUFFIXES = (".yml", ".yaml", ".json")


class DictionaryLoader(ABC):
    """Abstract base for dictionary loaders.

    Implementations return one nested dictionary tree per locale.
    """

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Load the dictionary tree for a locale.

        Raises:
            FileNotFoundError: If no dictionary exists for the locale.
            DictionaryLoadError: If a dictionary cannot be parsed.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load the dictionary trees of every available locale."""
        pass


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``source`` into ``target`` recursively; later leaves win."""
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            deep_merge(existing, value)
        elif isinstance(value, dict):
            target[key] = deep_merge({}, value)
        else:
            target[key] = value
    return target


def locale_from_path(path: Path) -> str:
    """Extract the locale from a dictionary file name.

    ``fr.yml`` -> ``fr``; ``incident.en-US.json`` -> ``en-US``.
    """
    return path.stem.split(".")[-1]


class YAMLDictionaryLoader(DictionaryLoader):
    """Loader for YAML and JSON dictionary files.

    Expects files named ``<locale>.<ext>`` or ``<domain>.<locale>.<ext>``
    with ext one of .yml, .yaml, .json. All files of a locale are merged
    into one tree, in file name order.

    YAML 1.1 reads unquoted yes, no, on, off, true and false as booleans,
    so phrases with those words must be quoted. Booleans and other non-string
    leaves are rejected with TypeError when the tree is parsed.

    Attributes:
        dictionaries_dir: Directory containing the dictionary files.
        cache: Loaded trees by locale, when caching is enabled.
    """

    def __init__(
        self,
        dictionaries_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize the loader.

        Args:
            dictionaries_dir: Directory with dictionary files.
            use_cache: Whether to keep loaded trees in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.dictionaries_dir = Path(dictionaries_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.dictionaries_dir.is_dir():
            raise ValueError(
                f"Dictionaries directory not found: {self.dictionaries_dir}"
            )

        logger.info(
            "initialized_dictionary_loader",
            dictionaries_dir=str(self.dictionaries_dir),
            use_cache=use_cache,
        )

    def _files(self) -> List[Path]:
        return sorted(
            path
            for path in self.dictionaries_dir.iterdir()
            if path.is_file() and path.suffix in DICTIONARY_SUFFIXES
        )

    def available_locales(self) -> List[str]:
        """Locales with at least one dictionary file, sorted."""
        return sorted({locale_from_path(path) for path in self._files()})

    def load(self, locale: str) -> Dict[str, Any]:
        """Load and merge every dictionary file of a locale.

        Args:
            locale: Locale code as used in file names.

        Returns:
            Nested dictionary tree.

        Raises:
            FileNotFoundError: If no file exists for the locale.
            DictionaryLoadError: If a file cannot be parsed.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("dictionary_loaded_from_cache", locale=locale)
            return self.cache[locale]

        files = [path for path in self._files() if locale_from_path(path) == locale]
        if not files:
            raise FileNotFoundError(
                f"No dictionary files found for locale {locale} in {self.dictionaries_dir}"
            )

        tree: Dict[str, Any] = {}
        for path in files:
            data = self._read(path)
            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_dictionary_format", file=str(path), expected="mapping"
                )
                continue
            deep_merge(tree, data)

        logger.info(
            "dictionary_loaded",
            locale=locale,
            file_count=len(files),
            top_level_keys=len(tree),
        )

        if self.use_cache:
            self.cache[locale] = tree

        return tree

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load the dictionaries of every locale found in the directory.

        Raises:
            DictionaryLoadError: If the directory holds no dictionary files.
        """
        locales = self.available_locales()
        if not locales:
            raise DictionaryLoadError(
                f"No dictionary files found in {self.dictionaries_dir}"
            )
        return {locale: self.load(locale) for locale in locales}

    def _read(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    return json.load(f)
                return yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error("dictionary_parse_error", file=str(path), error=str(e))
            raise DictionaryLoadError(f"Failed to parse {path}: {e}") from e

    def clear_cache(self) -> None:
        """Clear all cached dictionaries."""
        self.cache.clear()
        logger.info("cleared_dictionary_cache")
