from .date_utils import parse_date, format_lastmod, W3C_DATE
from .files import ensure_directory, gzip_bytes, write_bytes
from .retry import with_retry
from .xml_utils import render_element, render_document, document_overhead, byte_length

__all__ = [
    "parse_date", "format_lastmod", "W3C_DATE",
    "ensure_directory", "gzip_bytes", "write_bytes",
    "with_retry",
    "render_element", "render_document", "document_overhead", "byte_length"
]
