"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_dictionary,
    make_plural_catalogue,
    make_russian_dictionary,
    make_translator,
)

__all__ = [
    "make_dictionary",
    "make_plural_catalogue",
    "make_russian_dictionary",
    "make_translator",
]
