"""Escape {{ }} template delimiters in text and files to prevent interpolation."""

__version__ = "0.1.0"