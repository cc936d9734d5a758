"""Tests for phrasebook.i18n.transform module."""

import pytest

from phrasebook.i18n import PluralResolver, transform_phrase
from phrasebook.i18n.interpolation import build_token_pattern
from phrasebook.i18n.transform import normalize_options, select_plural_variant
from tests.factories.i18n import make_plural_catalogue


class TestNormalizeOptions:
    """Tests for translate() option normalization."""

    def test_none(self):
        assert normalize_options(None) == {}

    def test_bare_count(self):
        assert normalize_options(3) == {"smart_count": 3}
        assert normalize_options(2.5) == {"smart_count": 2.5}

    def test_mapping_is_copied(self):
        options = {"name": "Ada"}
        normalized = normalize_options(options)
        assert normalized == options
        assert normalized is not options


class TestSelectPluralVariant:
    """Tests for plural variant selection."""

    def test_selects_and_strips(self):
        phrase = "%{smart_count} car |||| %{smart_count} cars"
        assert select_plural_variant(phrase, 1, "en", PluralResolver()) == "%{smart_count} car"
        assert select_plural_variant(phrase, 2, "en", PluralResolver()) == "%{smart_count} cars"

    def test_out_of_range_index_falls_back_to_first(self):
        """Russian needs three variants; a two-variant phrase uses the first."""
        phrase = "one||||few"
        assert select_plural_variant(phrase, 5, "ru", PluralResolver()) == "one"

    def test_empty_variant_falls_back_to_first(self):
        assert select_plural_variant("one||||", 2, "en", PluralResolver()) == "one"

    def test_single_variant_phrase(self):
        assert select_plural_variant("  items  ", 10, "en", PluralResolver()) == "items"


class TestTransformPhrase:
    """Tests for the standalone transformation entry point."""

    def test_non_string_phrase_raises_type_error(self):
        with pytest.raises(TypeError, match="argument #1 to be string"):
            transform_phrase(42, {})

    def test_none_substitutions_return_phrase_untouched(self):
        phrase = "a||||b %{x}"
        assert transform_phrase(phrase) == phrase

    def test_interpolation_only(self):
        assert transform_phrase("Hi %{name}", {"name": "Ada"}) == "Hi Ada"

    def test_bare_count(self):
        assert transform_phrase("%{smart_count} dog||||%{smart_count} dogs", 3) == "3 dogs"

    def test_locale_affects_plural(self):
        phrase = "%{smart_count} file||||%{smart_count} files"
        assert transform_phrase(phrase, 0, locale="en") == "0 files"
        assert transform_phrase(phrase, 0, locale="fr") == "0 file"

    def test_default_locale_is_english(self):
        assert transform_phrase("one||||many", {"smart_count": 1}) == "one"

    def test_smart_count_none_skips_pluralization(self):
        phrase = "a||||b"
        assert transform_phrase(phrase, {"smart_count": None}) == phrase

    def test_empty_phrase(self):
        assert transform_phrase("", {"smart_count": 2}) == ""

    def test_custom_pattern(self):
        pattern = build_token_pattern("{{", "}}")
        assert transform_phrase("{{a}}", {"a": 1}, token_pattern=pattern) == "1"

    def test_custom_catalogue(self):
        phrase = "none||||some"
        catalogue = make_plural_catalogue()
        assert transform_phrase(phrase, 0, locale="xx", plural_rules=catalogue) == "none"
        assert transform_phrase(phrase, 1, locale="xx", plural_rules=catalogue) == "some"

    def test_reuses_given_resolver(self):
        resolver = PluralResolver()
        transform_phrase("a||||b", 2, locale="pl", plural_rules=resolver)
        assert resolver.cached_locales() == ["pl"]
