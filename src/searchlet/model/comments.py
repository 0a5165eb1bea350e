"""Structured documentation comments.

The tree is deliberately small: plain text runs, block tags (``@param``,
``@hidden``...) and inline tags (``{@link ...}``). Markup inside text is not
interpreted. The only question ever asked of a tree is whether it carries the
``@hidden`` marker.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

HIDDEN_TAG = "hidden"

_BLOCK_TAG = re.compile(r"^\s*\*?\s*@(?P<name>[A-Za-z][\w.-]*)\b(?P<rest>.*)$")
_INLINE_TAG = re.compile(r"\{@(?P<name>[A-Za-z][\w.-]*)(?:\s+(?P<body>[^}]*))?\}")


@dataclass(frozen=True, slots=True)
class TextNode:
    text: str


@dataclass(frozen=True, slots=True)
class InlineTag:
    name: str
    body: str = ""


@dataclass(frozen=True, slots=True)
class BlockTag:
    name: str
    content: tuple[DocNode, ...] = ()


DocNode = TextNode | InlineTag | BlockTag


@dataclass(frozen=True, slots=True)
class DocTree:
    """Root of a comment: the main description followed by block tags."""

    body: tuple[DocNode, ...] = ()
    block_tags: tuple[BlockTag, ...] = ()

    def walk(self) -> Iterator[DocNode]:
        """Depth-first iteration over every node."""
        stack: list[DocNode] = [*reversed(self.block_tags), *reversed(self.body)]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, BlockTag):
                stack.extend(reversed(node.content))


def is_hidden(tree: DocTree | None) -> bool:
    """True if the comment carries a ``@hidden`` block tag anywhere in its tree."""
    if tree is None:
        return False
    return any(isinstance(node, BlockTag) and node.name == HIDDEN_TAG for node in tree.walk())


def _split_inline(text: str) -> tuple[DocNode, ...]:
    nodes: list[DocNode] = []
    pos = 0
    for m in _INLINE_TAG.finditer(text):
        if m.start() > pos:
            nodes.append(TextNode(text[pos : m.start()]))
        nodes.append(InlineTag(m.group("name"), (m.group("body") or "").strip()))
        pos = m.end()
    if pos < len(text):
        nodes.append(TextNode(text[pos:]))
    return tuple(nodes)


def parse_comment(raw: str) -> DocTree:
    """Split raw comment text into description and block tags.

    A block tag starts at the beginning of a line with ``@name``; its content
    runs until the next block tag. Inline ``{@name ...}`` tags are split out
    of text runs but their bodies are kept verbatim.
    """
    body_lines: list[str] = []
    tags: list[tuple[str, list[str]]] = []

    for line in raw.splitlines():
        m = _BLOCK_TAG.match(line)
        if m:
            tags.append((m.group("name"), [m.group("rest").strip()]))
        elif tags:
            tags[-1][1].append(line)
        else:
            body_lines.append(line)

    body_text = "\n".join(body_lines).strip()
    return DocTree(
        body=_split_inline(body_text) if body_text else (),
        block_tags=tuple(
            BlockTag(name, _split_inline("\n".join(lines).strip())) for name, lines in tags
        ),
    )
