"""Parsing and semantic validation for the tasty styling mini-language."""

__version__ = "0.1.0"
