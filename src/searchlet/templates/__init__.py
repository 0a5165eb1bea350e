"""Static files shipped next to the generated index."""

from pathlib import Path

SEARCH_PAGE = "index.html"


def get_search_page_path() -> Path:
    """Path of the bundled search page, copied verbatim into the output directory."""
    return Path(__file__).parent / SEARCH_PAGE


__all__ = ["SEARCH_PAGE", "get_search_page_path"]
