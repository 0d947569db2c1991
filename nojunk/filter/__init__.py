"""URL extension filtering."""

from .url_filter import UrlFilter, extract_extension, strip_query_fragment

__all__ = ["UrlFilter", "extract_extension", "strip_query_fragment"]
