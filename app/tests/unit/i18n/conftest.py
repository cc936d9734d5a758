"""Feature-level fixtures for i18n system tests."""

import json

import pytest
import yaml

from phrasebook.i18n import YAMLDictionaryLoader
from tests.factories.i18n import make_translator


@pytest.fixture
def translator(warn_sink):
    """Translator over the default test dictionary, warnings captured."""
    return make_translator(warn=warn_sink)


@pytest.fixture
def temp_dictionaries_dir(tmp_path):
    """Create a directory with sample dictionary files.

    - common.en.yml
    - incident.en.yml
    - common.fr.json
    - ru.yaml
    """
    with open(tmp_path / "common.en.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {"common": {"save": "Save", "cancel": "Cancel"}},
            f,
        )

    with open(tmp_path / "incident.en.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {
                "incident": {"created": "Incident %{incident_id} created"},
                "common": {"close": "Close"},
            },
            f,
        )

    with open(tmp_path / "common.fr.json", "w", encoding="utf-8") as f:
        json.dump(
            {"common": {"save": "Enregistrer", "cancel": "Annuler"}},
            f,
            ensure_ascii=False,
        )

    with open(tmp_path / "ru.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(
            {"files": "%{smart_count} файл |||| %{smart_count} файла |||| %{smart_count} файлов"},
            f,
            allow_unicode=True,
        )

    return tmp_path


@pytest.fixture
def dictionary_loader(temp_dictionaries_dir):
    """YAMLDictionaryLoader without caching."""
    return YAMLDictionaryLoader(temp_dictionaries_dir, use_cache=False)


@pytest.fixture
def preferences_path(tmp_path):
    """Path for a preferences file that does not exist yet."""
    return tmp_path / "state" / "preferences.json"
