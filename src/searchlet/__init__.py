"""Searchlet - searchable index of API documentation."""

__version__ = "0.1.0"
