"""Categorized, independently-paginated chat media loader."""

__version__ = "0.1.0"
