"""Search index construction.

Build operations live in ``searchlet.index.ops``.
"""

from searchlet.index.indexer import Indexer
from searchlet.index.keys import split_camel_case, tokenize_key, type_link
from searchlet.index.models import EntryType, IndexEntry, IndexStats, NestedIndex

__all__ = [
    "EntryType",
    "IndexEntry",
    "IndexStats",
    "Indexer",
    "NestedIndex",
    "split_camel_case",
    "tokenize_key",
    "type_link",
]
