"""phrasebook - key-based translation with pluralization and interpolation."""

__version__ = "1.0.0"
