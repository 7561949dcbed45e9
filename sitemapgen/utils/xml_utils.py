"""
XML rendering for sitemap documents.

Documents are rendered by string concatenation with a fixed layout:

    <?xml version="1.0"?>
    <urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
      <url>
        <loc>https://example.com/</loc>
      </url>
    </urlset>

Because the layout never depends on what comes before or after an element,
the byte size of a document is exactly the size of its wrapper plus the
sum of its rendered elements. UrlSet relies on this to track file sizes
without re-rendering.
"""

from typing import Iterable, Tuple
from xml.sax.saxutils import escape

from ..config import SITEMAP_NAMESPACE

XML_DECLARATION = '<?xml version="1.0"?>\n'
INDENT = "  "


def render_element(tag: str, children: Iterable[Tuple[str, str]], level: int = 1) -> str:
    """
    Render an element with text-only children, indented for its nesting level.

    Args:
        tag: Element name (e.g. "url", "sitemap")
        children: Ordered (name, text) pairs; text is escaped here
        level: Nesting depth of the element below the document root

    Returns:
        The element text, terminated by a newline
    """
    pad = INDENT * level
    child_pad = INDENT * (level + 1)

    lines = [f"{pad}<{tag}>"]
    for name, text in children:
        lines.append(f"{child_pad}<{name}>{escape(text)}</{name}>")
    lines.append(f"{pad}</{tag}>")

    return "\n".join(lines) + "\n"


def _open_root(root_tag: str) -> str:
    return f'{XML_DECLARATION}<{root_tag} xmlns="{SITEMAP_NAMESPACE}">\n'


def _close_root(root_tag: str) -> str:
    return f"</{root_tag}>\n"


def render_document(root_tag: str, body: str) -> str:
    """Wrap already rendered elements in the declaration and namespaced root."""
    return _open_root(root_tag) + body + _close_root(root_tag)


def document_overhead(root_tag: str) -> int:
    """Bytes a document with this root adds on top of its rendered elements."""
    return byte_length(render_document(root_tag, ""))


def byte_length(text: str) -> int:
    """Size of text once encoded as UTF-8."""
    return len(text.encode("utf-8"))
