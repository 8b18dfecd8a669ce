"""Sharaku - template-driven organizer for illustration and manga libraries."""

__version__ = "0.1.0"
