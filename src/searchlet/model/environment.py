"""Access to a resolved documentation model."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from searchlet.model.comments import DocTree
from searchlet.model.elements import Element


@runtime_checkable
class DocEnvironment(Protocol):
    """What the indexer needs from a documentation model.

    Implementations supply the root elements selected for documentation and a
    way to look up each element's comment, both as raw text and as a tree.
    """

    def included_elements(self) -> Iterable[Element]:
        """Root elements to index, in the order they should be visited."""
        ...

    def doc_comment(self, element: Element) -> str | None:
        """Raw comment text, or None when the element is undocumented."""
        ...

    def doc_comment_tree(self, element: Element) -> DocTree | None:
        """Structured comment, or None when the element is undocumented."""
        ...


class InMemoryEnvironment:
    """Environment over an element tree whose comments live on the elements."""

    def __init__(self, elements: Sequence[Element]) -> None:
        self._elements = tuple(elements)

    def included_elements(self) -> tuple[Element, ...]:
        return self._elements

    def doc_comment(self, element: Element) -> str | None:
        doc = element.doc
        return doc.raw if doc is not None else None

    def doc_comment_tree(self, element: Element) -> DocTree | None:
        doc = element.doc
        return doc.tree if doc is not None else None

    def __len__(self) -> int:
        return len(self._elements)
