"""
Generate complete sitemap and sitemap index runs.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union
import logging

from ..config import COMPRESSION_ENABLED, DEFAULT_FILENAME, DEFAULT_INDEX_FILENAME
from ..models import Entry
from .urlset import UrlSet

logger = logging.getLogger(__name__)


def generate_sitemap(
    entries: Iterable[Union[Entry, str]],
    output_dir: Union[str, Path],
    filename: str = DEFAULT_FILENAME,
    compress: bool = COMPRESSION_ENABLED,
    **limits
) -> List[Path]:
    """
    Write entries to as many sitemap files as the protocol limits require.

    Args:
        entries: Entry objects or plain URL strings
        output_dir: Directory to write into
        filename: Base filename, without extension
        compress: Gzip the output files
        **limits: max_bytes / max_urls overrides passed to UrlSet

    Returns:
        Paths of the written files, first file first
    """
    urlset = UrlSet(output_dir, filename=filename, compress=compress, **limits)

    count = 0
    for entry in entries:
        urlset.add(entry)
        count += 1

    files = urlset.finish()
    logger.info(f"Generated {len(files)} sitemap file(s) with {count} URLs")
    return files


def generate_sitemap_index(
    locations: Iterable[str],
    output_dir: Union[str, Path],
    filename: str = DEFAULT_INDEX_FILENAME,
    last_modified: Optional[Union[datetime, date]] = None,
    compress: bool = COMPRESSION_ENABLED,
    **limits
) -> List[Path]:
    """
    Write a sitemap index referencing the given sitemap URLs.

    Typical use is to turn the files returned by generate_sitemap() into
    public URLs and pass those here:

        files = generate_sitemap(urls, "public")
        generate_sitemap_index([f"{SITE_URL}/{f.name}" for f in files], "public")

    Args:
        locations: Public URLs of the sitemap files
        output_dir: Directory to write into
        filename: Base filename of the index, without extension
        last_modified: Optional <lastmod> applied to every reference
        compress: Gzip the output files
        **limits: max_bytes / max_urls overrides passed to UrlSet

    Returns:
        Paths of the written index files
    """
    index = UrlSet.for_index(output_dir, filename=filename, compress=compress, **limits)

    for location in locations:
        entry = Entry(location, is_index_entry=True)
        if last_modified is not None:
            entry = entry.set_last_modified(last_modified)
        index.add(entry)

    files = index.finish()
    logger.info(f"Generated sitemap index with {len(files)} file(s)")
    return files
