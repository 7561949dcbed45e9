"""
Configuration for the sitemap generator.
"""

import os

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

# Protocol constants (https://www.sitemaps.org/protocol.html)
SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
MAX_FILE_SIZE_BYTES = 52428800  # 50 MiB, uncompressed
MAX_URLS_PER_FILE = 50000

URLSET_TAG = "urlset"
SITEMAPINDEX_TAG = "sitemapindex"

# Output naming (base names, without extension)
DEFAULT_FILENAME = os.environ.get("SITEMAP_FILENAME", "sitemap")
DEFAULT_INDEX_FILENAME = os.environ.get("SITEMAP_INDEX_FILENAME", "sitemap_index")

# Gzip output files by default in the convenience generators
COMPRESSION_ENABLED = os.environ.get("SITEMAP_GZIP", "").lower() in ("1", "true", "yes", "on")

# How many times with_retry() attempts a failing write
WRITE_RETRY_ATTEMPTS = int(os.environ.get("SITEMAP_WRITE_RETRIES", "3"))
