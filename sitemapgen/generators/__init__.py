from .urlset import UrlSet
from .sitemap_generator import generate_sitemap, generate_sitemap_index

__all__ = [
    "UrlSet",
    "generate_sitemap",
    "generate_sitemap_index"
]
