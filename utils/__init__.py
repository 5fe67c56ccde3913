"""Utility functions."""

from .formatting import format_bytes, format_listing, format_search_results

__all__ = ["format_bytes", "format_listing", "format_search_results"]
