"""
URL set accumulator: buffers entries and writes them out as sitemap files,
starting a new file whenever the next entry would break a protocol limit.
"""

from pathlib import Path
from typing import List, Union
import logging

from ..config import (
    DEFAULT_FILENAME, DEFAULT_INDEX_FILENAME, MAX_FILE_SIZE_BYTES, MAX_URLS_PER_FILE,
    URLSET_TAG, SITEMAPINDEX_TAG
)
from ..exceptions import InvalidInput, InvalidValue
from ..models import Entry
from ..utils.files import ensure_directory, gzip_bytes, write_bytes
from ..utils.xml_utils import render_document, document_overhead

logger = logging.getLogger(__name__)

ROOT_TAGS = (URLSET_TAG, SITEMAPINDEX_TAG)


class UrlSet:
    """
    Accumulates sitemap entries and writes them to one or more files.

    The first file of a run is named `<filename>.xml`, later ones
    `<filename>1.xml`, `<filename>2.xml` and so on (`.gz` instead of `.xml`
    when compression is on). A file is flushed before adding the entry that
    would push it past max_urls entries or max_bytes bytes, so every file
    stays within both limits and no entry is ever split.

    Not thread-safe: add() checks the limits and then mutates the buffer.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        filename: str = DEFAULT_FILENAME,
        root_tag: str = URLSET_TAG,
        compress: bool = False,
        max_bytes: int = MAX_FILE_SIZE_BYTES,
        max_urls: int = MAX_URLS_PER_FILE,
    ):
        """
        Args:
            output_dir: Directory files are written to; created if missing
            filename: Base filename, without extension
            root_tag: "urlset" for content sitemaps, "sitemapindex" for indexes
            compress: Gzip output files
            max_bytes: Size limit per file, in bytes of uncompressed XML
            max_urls: Entry limit per file
        """
        if root_tag not in ROOT_TAGS:
            raise InvalidValue(f"Root tag must be one of {ROOT_TAGS}, got `{root_tag}`")
        if not filename:
            raise InvalidValue("Base filename must not be empty")

        self.overhead = document_overhead(root_tag)
        if max_urls < 1:
            raise InvalidValue(f"max_urls must be at least 1, got {max_urls}")
        if max_bytes <= self.overhead:
            raise InvalidValue(f"max_bytes must exceed the {self.overhead} byte document overhead, got {max_bytes}")

        self.output_dir = ensure_directory(output_dir)
        self.filename = filename
        self.root_tag = root_tag
        self.compress = compress
        self.max_bytes = max_bytes
        self.max_urls = max_urls

        self.files_written = 0
        self._run_files: List[Path] = []
        self._fragments: List[str] = []
        self._entry_count = 0
        self._byte_count = self.overhead

    @classmethod
    def for_index(cls, output_dir: Union[str, Path], filename: str = DEFAULT_INDEX_FILENAME, **kwargs) -> "UrlSet":
        """Create an accumulator that writes <sitemapindex> files."""
        return cls(output_dir, filename=filename, root_tag=SITEMAPINDEX_TAG, **kwargs)

    @property
    def is_index(self) -> bool:
        return self.root_tag == SITEMAPINDEX_TAG

    @property
    def entry_count(self) -> int:
        """Entries buffered for the file currently being built."""
        return self._entry_count

    @property
    def byte_count(self) -> int:
        """Size in bytes of what to_xml() would return right now."""
        return self._byte_count

    def enable_compression(self) -> "UrlSet":
        self.compress = True
        return self

    def disable_compression(self) -> "UrlSet":
        self.compress = False
        return self

    def add(self, entry: Union[Entry, str]) -> "UrlSet":
        """
        Add an entry, flushing the current file first if the entry would not fit.

        A plain string is shorthand for an Entry with only a location (a
        <sitemap> entry when this is an index).

        Raises:
            InvalidInput: if entry is neither a string nor an Entry
            InvalidValue: if the entry is too large to fit even an empty file
        """
        if isinstance(entry, str):
            entry = Entry(entry, is_index_entry=self.is_index)

        if not isinstance(entry, Entry):
            raise InvalidInput(f"{type(entry).__name__} is not an instance of {Entry.__name__}")

        fragment, size = entry.serialize()

        if self.overhead + size > self.max_bytes:
            raise InvalidValue(
                f"Entry for {entry.location} is {size} bytes and cannot fit in a {self.max_bytes} byte file"
            )

        if self._byte_count + size > self.max_bytes or self._entry_count == self.max_urls:
            logger.debug(
                f"Limit reached at {self._entry_count} entries / {self._byte_count} bytes, flushing"
            )
            self.write_file()

        self._fragments.append(fragment)
        self._entry_count += 1
        self._byte_count += size

        return self

    def to_xml(self) -> str:
        """Render the buffered entries as a complete sitemap document."""
        return render_document(self.root_tag, "".join(self._fragments))

    def _next_path(self) -> Path:
        name = self.filename
        if self.files_written > 0:
            name = f"{self.filename}{self.files_written}"
        extension = "gz" if self.compress else "xml"
        return self.output_dir / f"{name}.{extension}"

    def reset_counters(self) -> None:
        """Drop buffered entries and start a new, empty file."""
        self._fragments = []
        self._entry_count = 0
        self._byte_count = self.overhead

    def write_file(self) -> Path:
        """
        Write buffered entries to the next file in the sequence and reset the buffer.

        Nothing is reset if the write fails, so the call can be retried.

        Returns:
            Path of the written file

        Raises:
            IOFailure: if the file cannot be written
        """
        output = self.to_xml().encode("utf-8")
        if self.compress:
            output = gzip_bytes(output)

        path = self._next_path()
        write_bytes(path, output)

        logger.info(f"Wrote {path.name} with {self._entry_count} URLs ({self._byte_count} bytes of XML)")

        self.files_written += 1
        self._run_files.append(path)
        self.reset_counters()

        return path

    def finish(self) -> List[Path]:
        """
        Write the remaining entries and end the run.

        A file is always written, so finishing an empty accumulator produces
        an empty <urlset>. The next run starts over at the unsuffixed filename.

        Returns:
            Paths of all files written during this run, in order
        """
        self.write_file()

        files = self._run_files
        self._run_files = []
        self.files_written = 0

        logger.info(f"Finished {self.root_tag} run: {len(files)} file(s) in {self.output_dir}")
        return files
