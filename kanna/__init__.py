"""Kanna - personal vocabulary lookup with a local translation cache."""

__version__ = "1.0.0"
