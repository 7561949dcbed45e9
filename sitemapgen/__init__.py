"""
sitemapgen - sitemaps.org XML sitemap generator.

Buffers URL entries and writes them to sitemap files, splitting output
whenever a file would exceed the protocol's URL count or size limits.
"""

from .exceptions import SitemapError, InvalidValue, InvalidInput, IOFailure
from .models import Entry, CHANGE_FREQUENCIES
from .generators import UrlSet, generate_sitemap, generate_sitemap_index
from .utils import with_retry

__all__ = [
    "SitemapError", "InvalidValue", "InvalidInput", "IOFailure",
    "Entry", "CHANGE_FREQUENCIES",
    "UrlSet", "generate_sitemap", "generate_sitemap_index",
    "with_retry"
]
