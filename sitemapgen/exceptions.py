"""
Exceptions raised by the sitemap generator.
"""


class SitemapError(Exception):
    """Base class for all sitemap generation errors."""


class InvalidValue(SitemapError, ValueError):
    """An entry field holds a value the protocol does not allow."""


class InvalidInput(SitemapError, TypeError):
    """Something other than a URL string or Entry was added to a UrlSet."""


class IOFailure(SitemapError, OSError):
    """The output directory could not be created or a file could not be written."""
