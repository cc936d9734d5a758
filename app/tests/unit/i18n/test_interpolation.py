"""Tests for phrasebook.i18n.interpolation module."""

import pytest

from phrasebook.i18n import ReservedDelimiterError, TokenInterpolator, Translator
from phrasebook.i18n.interpolation import build_token_pattern, interpolate


class TestTokenInterpolator:
    """Tests for placeholder substitution."""

    @pytest.fixture
    def interpolator(self):
        return TokenInterpolator()

    def test_substitutes_placeholder(self, interpolator):
        assert interpolator.interpolate("Hello, %{name}!", {"name": "Ada"}) == "Hello, Ada!"

    def test_missing_placeholder_left_untouched(self, interpolator):
        assert interpolator.interpolate("Hi %{name}", {}) == "Hi %{name}"

    def test_none_value_left_untouched(self, interpolator):
        """Placeholders mapped to None keep their original text."""
        assert interpolator.interpolate("Hi %{name}", {"name": None}) == "Hi %{name}"

    def test_values_are_stringified(self, interpolator):
        assert interpolator.interpolate("%{n} of %{total}", {"n": 3, "total": 10.5}) == "3 of 10.5"

    def test_booleans_and_whole_floats(self, interpolator):
        """Booleans are lowercase and whole floats drop the fraction."""
        result = interpolator.interpolate(
            "%{on}/%{off}/%{count}", {"on": True, "off": False, "count": 5.0}
        )
        assert result == "true/false/5"

    def test_smart_count_float_renders_whole(self):
        translator = Translator(phrases={"k": "%{smart_count} item||||%{smart_count} items"})
        assert translator.translate("k", 2.0) == "2 items"

    def test_repeated_placeholders(self, interpolator):
        result = interpolator.interpolate("%{a}-%{a}-%{b}", {"a": "x"})
        assert result == "x-x-%{b}"

    def test_falsy_values_are_substituted(self, interpolator):
        """Zero and empty strings are real values."""
        assert interpolator.interpolate("[%{n}][%{s}]", {"n": 0, "s": ""}) == "[0][]"

    def test_non_greedy_match(self, interpolator):
        assert interpolator.interpolate("%{a}}", {"a": "A"}) == "A}"

    def test_none_substitutions(self, interpolator):
        assert interpolator.interpolate("Hi %{name}", None) == "Hi %{name}"

    def test_custom_delimiters(self):
        interpolator = TokenInterpolator(prefix="{{", suffix="}}")
        result = interpolator.interpolate("Hi {{name}}, %{name}", {"name": "Ada"})
        assert result == "Hi Ada, %{name}"

    def test_regex_metacharacters_are_literal(self):
        """Delimiters are matched literally, not as regex syntax."""
        interpolator = TokenInterpolator(prefix="$(", suffix=")")
        assert interpolator.interpolate("cost: $(price)", {"price": 5}) == "cost: 5"

    def test_from_options_mapping(self):
        interpolator = TokenInterpolator.from_options({"prefix": "<", "suffix": ">"})
        assert interpolator.interpolate("<x>", {"x": 1}) == "1"

    @pytest.mark.parametrize(
        "prefix,suffix", [("||||", None), (None, "||||"), ("||||", "||||")]
    )
    def test_reserved_delimiter_rejected(self, prefix, suffix):
        with pytest.raises(ReservedDelimiterError):
            TokenInterpolator(prefix=prefix, suffix=suffix)

    def test_reserved_delimiter_is_value_error(self):
        with pytest.raises(ValueError, match="reserved for pluralization"):
            build_token_pattern(prefix="||||")


class TestInterpolateFunction:
    """Tests for the module-level interpolate()."""

    def test_default_pattern(self):
        assert interpolate("%{x}!", {"x": "y"}) == "y!"

    def test_explicit_pattern(self):
        pattern = build_token_pattern("[", "]")
        assert interpolate("[x] %{x}", {"x": "y"}, pattern) == "y %{x}"
