"""Utility functions."""

from .formatting import extract_url, format_sender_name

__all__ = ["extract_url", "format_sender_name"]
