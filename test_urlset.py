#!/usr/bin/env python3
"""
Tests for the UrlSet accumulator: byte accounting, file splitting,
file naming, compression and error handling.

Usage:
    pytest test_urlset.py
"""

import gzip
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from sitemapgen import Entry, UrlSet, InvalidInput, InvalidValue, IOFailure
from sitemapgen.config import SITEMAP_NAMESPACE, MAX_FILE_SIZE_BYTES, MAX_URLS_PER_FILE

NS = {"sm": SITEMAP_NAMESPACE}


def _locations(path: Path, child: str = "url"):
    data = path.read_bytes()
    if path.suffix == ".gz":
        data = gzip.decompress(data)
    root = ET.fromstring(data)
    return [el.findtext("sm:loc", namespaces=NS) for el in root.findall(f"sm:{child}", NS)]


def _names(directory: Path):
    return sorted(p.name for p in directory.iterdir())


def test_defaults_match_protocol_limits(tmp_path):
    urlset = UrlSet(tmp_path)

    assert urlset.max_bytes == MAX_FILE_SIZE_BYTES == 52428800
    assert urlset.max_urls == MAX_URLS_PER_FILE == 50000
    assert urlset.filename == "sitemap"
    assert urlset.root_tag == "urlset"
    assert urlset.compress is False


def test_output_directory_is_created(tmp_path):
    target = tmp_path / "public" / "maps"
    UrlSet(target).finish()

    assert (target / "sitemap.xml").exists()


def test_sample_scenario_splits_on_entry_count(tmp_path):
    urlset = UrlSet(tmp_path, max_urls=2)
    urlset.add("/a").add("/b").add("/c")
    files = urlset.finish()

    assert [f.name for f in files] == ["sitemap.xml", "sitemap1.xml"]
    assert _names(tmp_path) == ["sitemap.xml", "sitemap1.xml"]
    assert _locations(tmp_path / "sitemap.xml") == ["/a", "/b"]
    assert _locations(tmp_path / "sitemap1.xml") == ["/c"]


def test_exactly_max_urls_fits_in_one_file(tmp_path):
    urlset = UrlSet(tmp_path, max_urls=5)
    for i in range(5):
        urlset.add(f"https://example.com/{i}")

    assert urlset.files_written == 0
    assert urlset.entry_count == 5

    files = urlset.finish()

    assert len(files) == 1
    assert len(_locations(files[0])) == 5


def test_one_over_max_urls_flushes_before_buffering(tmp_path):
    urlset = UrlSet(tmp_path, max_urls=5)
    for i in range(5):
        urlset.add(f"https://example.com/{i}")
    urlset.add("https://example.com/5")

    # the full file went out before the sixth entry was buffered
    assert urlset.files_written == 1
    assert urlset.entry_count == 1
    assert len(_locations(tmp_path / "sitemap.xml")) == 5

    urlset.finish()
    assert _locations(tmp_path / "sitemap1.xml") == ["https://example.com/5"]


def test_byte_count_matches_rendered_document(tmp_path):
    urlset = UrlSet(tmp_path)
    assert urlset.byte_count == len(urlset.to_xml().encode("utf-8"))

    entries = [
        Entry("https://example.com/"),
        Entry("https://example.com/ü?a=1&b=<2>", change_frequency="daily", priority=0.4),
        Entry("https://例え.jp/ページ", last_modified="2024-01-01"),
    ]
    for entry in entries:
        urlset.add(entry)
        assert urlset.byte_count == len(urlset.to_xml().encode("utf-8"))


def test_overhead_is_calibrated_to_this_renderer(tmp_path):
    # The 260093 byte estimate only held for one specific XML writer; the
    # overhead here is whatever an empty document of our own renderer weighs.
    urlset = UrlSet(tmp_path)
    empty = urlset.to_xml()

    assert urlset.overhead == len(empty.encode("utf-8"))
    assert urlset.overhead != 260093
    assert urlset.byte_count == urlset.overhead


def test_byte_limit_split(tmp_path):
    entry_size = Entry("https://example.com/page-0").serialize()[1]
    overhead = UrlSet(tmp_path / "probe").overhead
    max_bytes = overhead + 2 * entry_size

    urlset = UrlSet(tmp_path / "out", max_bytes=max_bytes)
    urlset.add("https://example.com/page-0")
    urlset.add("https://example.com/page-1")

    # landing exactly on the limit is allowed
    assert urlset.byte_count == max_bytes
    assert urlset.files_written == 0

    urlset.add("https://example.com/page-2")
    assert urlset.files_written == 1

    files = urlset.finish()

    assert _locations(files[0]) == ["https://example.com/page-0", "https://example.com/page-1"]
    assert _locations(files[1]) == ["https://example.com/page-2"]
    for f in files:
        assert f.stat().st_size <= max_bytes
    assert files[0].stat().st_size == max_bytes


def test_byte_limit_with_mixed_sizes_never_exceeded(tmp_path):
    urlset = UrlSet(tmp_path, max_bytes=1200)
    expected = []
    for i in range(60):
        loc = f"https://example.com/{'x' * (i % 17)}/{i}"
        expected.append(loc)
        urlset.add(Entry(loc, change_frequency="weekly"))
    files = urlset.finish()

    assert len(files) > 1
    seen = []
    for f in files:
        assert f.stat().st_size <= 1200
        seen.extend(_locations(f))
    assert seen == expected


def test_entry_too_large_for_any_file_is_rejected(tmp_path):
    urlset = UrlSet(tmp_path, max_bytes=400)
    urlset.add("https://example.com/")

    with pytest.raises(InvalidValue):
        urlset.add("https://example.com/" + "a" * 500)

    assert urlset.entry_count == 1
    assert urlset.files_written == 0


def test_empty_finish_writes_empty_root_and_resets_sequence(tmp_path):
    urlset = UrlSet(tmp_path)
    files = urlset.finish()

    assert [f.name for f in files] == ["sitemap.xml"]
    root = ET.parse(tmp_path / "sitemap.xml").getroot()
    assert root.tag == f"{{{SITEMAP_NAMESPACE}}}urlset"
    assert len(root) == 0
    assert urlset.files_written == 0

    # a second run starts over at the unsuffixed name
    urlset.add("https://example.com/again")
    assert [f.name for f in urlset.finish()] == ["sitemap.xml"]
    assert _names(tmp_path) == ["sitemap.xml"]
    assert _locations(tmp_path / "sitemap.xml") == ["https://example.com/again"]


def test_to_xml_shape(tmp_path):
    urlset = UrlSet(tmp_path)
    urlset.add(Entry("https://example.com/", last_modified="2024-01-01T00:00:00+00:00",
                     change_frequency="daily", priority=0.8))

    assert urlset.to_xml() == (
        '<?xml version="1.0"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        "  <url>\n"
        "    <loc>https://example.com/</loc>\n"
        "    <lastmod>2024-01-01T00:00:00+00:00</lastmod>\n"
        "    <changefreq>daily</changefreq>\n"
        "    <priority>0.8</priority>\n"
        "  </url>\n"
        "</urlset>\n"
    )


def test_compression_only_changes_encoding_and_extension(tmp_path):
    entries = [Entry(f"https://example.com/{i}", priority=0.5) for i in range(7)]

    plain = UrlSet(tmp_path / "plain", max_urls=3)
    packed = UrlSet(tmp_path / "packed", max_urls=3).enable_compression()
    for entry in entries:
        plain.add(entry)
        packed.add(entry)
    plain_files = plain.finish()
    packed_files = packed.finish()

    assert [f.name for f in plain_files] == ["sitemap.xml", "sitemap1.xml", "sitemap2.xml"]
    assert [f.name for f in packed_files] == ["sitemap.gz", "sitemap1.gz", "sitemap2.gz"]
    for raw, gz in zip(plain_files, packed_files):
        assert gzip.decompress(gz.read_bytes()) == raw.read_bytes()


def test_disable_compression(tmp_path):
    urlset = UrlSet(tmp_path, compress=True).disable_compression()

    assert urlset.finish()[0].name == "sitemap.xml"


def test_sitemap_index(tmp_path):
    index = UrlSet.for_index(tmp_path)
    index.add("https://example.com/sitemap.xml")
    index.add(Entry("https://example.com/sitemap1.xml", last_modified="2024-01-01").mark_as_index_entry())
    files = index.finish()

    assert [f.name for f in files] == ["sitemap_index.xml"]
    root = ET.parse(files[0]).getroot()
    assert root.tag == f"{{{SITEMAP_NAMESPACE}}}sitemapindex"
    assert _locations(files[0], child="sitemap") == [
        "https://example.com/sitemap.xml",
        "https://example.com/sitemap1.xml",
    ]


@pytest.mark.parametrize("bad", [None, 42, 3.5, b"https://example.com/", ["https://example.com/"]])
def test_add_rejects_non_entries(tmp_path, bad):
    urlset = UrlSet(tmp_path)
    urlset.add("https://example.com/")

    with pytest.raises(InvalidInput):
        urlset.add(bad)

    assert urlset.entry_count == 1


def test_add_rejects_empty_string(tmp_path):
    with pytest.raises(InvalidValue):
        UrlSet(tmp_path).add("")


@pytest.mark.parametrize("kwargs", [
    {"root_tag": "feed"},
    {"max_urls": 0},
    {"max_bytes": 10},
    {"filename": ""},
])
def test_invalid_configuration(tmp_path, kwargs):
    with pytest.raises(InvalidValue):
        UrlSet(tmp_path, **kwargs)


def test_uncreatable_output_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(IOFailure):
        UrlSet(blocker / "maps")


def test_failed_write_keeps_buffer_for_retry(tmp_path):
    urlset = UrlSet(tmp_path)
    urlset.add("https://example.com/a").add("https://example.com/b")

    # a directory squatting on the target name makes the write fail
    squatter = tmp_path / "sitemap.xml"
    squatter.mkdir()

    with pytest.raises(IOFailure) as excinfo:
        urlset.finish()

    assert isinstance(excinfo.value, OSError)
    assert urlset.entry_count == 2
    assert urlset.files_written == 0

    squatter.rmdir()
    files = urlset.finish()

    assert _locations(files[0]) == ["https://example.com/a", "https://example.com/b"]
