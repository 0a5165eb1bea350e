"""Depth-first indexer over the documentation element tree.

Visit rules per element variant:

- Module: always indexed, link is empty, packages are not entered.
- Package: always indexed, even when hidden or non-public. Its types are
  visited with the package on the package stack.
- Type: skipped (with all members) when excluded or anonymous. Otherwise
  indexed, then members are visited with the type on the enclosing-type stack.
- Method / record component accessor / field: only with ``include_members``,
  only when not excluded, only inside a type.
- Type parameter and unknown elements: ignored.

Excluded means: neither public nor protected, or the comment carries
``@hidden``. Ids are assigned in emission order starting at 1.
"""

from __future__ import annotations

from collections.abc import Iterable

from searchlet.core.logging import get_logger
from searchlet.index.keys import (
    method_signature,
    normalize_body,
    package_link,
    relative_type_name,
    tokenize_key,
    type_link,
)
from searchlet.index.models import EntryType, IndexEntry, NestedIndex
from searchlet.model.comments import is_hidden
from searchlet.model.elements import (
    Element,
    ExecutableElement,
    Modifier,
    ModuleElement,
    NestingKind,
    PackageElement,
    RecordComponentElement,
    TypeElement,
    TypeParameterElement,
    VariableElement,
)
from searchlet.model.environment import DocEnvironment

log = get_logger("index.indexer")

_VISIBLE = frozenset({Modifier.PUBLIC, Modifier.PROTECTED})


class Indexer:
    """Single-use traversal state: output entries, id counter, context stacks.

    Not thread-safe; one traversal per instance.
    """

    def __init__(self, environment: DocEnvironment, *, include_members: bool = False) -> None:
        self._env = environment
        self._include_members = include_members
        self.entries: list[IndexEntry] = []
        self._next_id = 1
        self._packages: list[NestedIndex] = []
        self._types: list[NestedIndex] = []
        self._visited: set[tuple[object, ...]] = set()

    def index_all(self, elements: Iterable[Element] | None = None) -> list[IndexEntry]:
        """Visit every root element (default: the environment's included elements)."""
        roots = self._env.included_elements() if elements is None else elements
        for element in roots:
            self.visit(element)
        return self.entries

    def visit(self, element: Element) -> None:
        """Dispatch on element variant. Each element is visited at most once."""
        key = self._identity(element)
        if key in self._visited:
            return
        self._visited.add(key)

        if isinstance(element, ModuleElement):
            self._visit_module(element)
        elif isinstance(element, PackageElement):
            self._visit_package(element)
        elif isinstance(element, TypeElement):
            self._visit_type(element)
        elif isinstance(element, ExecutableElement):
            self._visit_executable(element)
        elif isinstance(element, RecordComponentElement):
            self.visit(element.accessor)
        elif isinstance(element, VariableElement):
            self._visit_variable(element)
        elif isinstance(element, TypeParameterElement):
            return
        else:
            log.debug("skip_unknown", kind=getattr(element, "kind", type(element).__name__))

    # -- visibility ---------------------------------------------------------

    def is_excluded(self, element: TypeElement | ExecutableElement | VariableElement) -> bool:
        if not (element.modifiers & _VISIBLE):
            return True
        return is_hidden(self._env.doc_comment_tree(element))

    # -- variants -----------------------------------------------------------

    def _visit_module(self, e: ModuleElement) -> None:
        name = e.qualified_name
        self._emit(e, "module", key=name, title=name, link="")

    def _visit_package(self, e: PackageElement) -> None:
        name = e.qualified_name
        self._emit(e, "package", key=name, title=name, link=package_link(name))

        self._packages.append(NestedIndex(name))
        try:
            for child in e.types:
                self.visit(child)
        finally:
            self._packages.pop()

    def _visit_type(self, e: TypeElement) -> None:
        if self.is_excluded(e):
            log.debug("skip_excluded", element=e.binary_name)
            return
        if e.nesting is NestingKind.ANONYMOUS:
            log.debug("skip_anonymous", element=e.binary_name)
            return

        package = self._packages[-1].name if self._packages else None
        name = e.binary_name
        link = type_link(name)
        self._emit(e, "type", key=relative_type_name(name, package), title=name, link=link)

        self._types.append(NestedIndex(name, link))
        try:
            for member in e.members:
                self.visit(member)
        finally:
            self._types.pop()

    def _visit_executable(self, e: ExecutableElement) -> None:
        if not self._include_members or self.is_excluded(e):
            return
        owner = self._enclosing_type()
        if owner is None:
            return

        signature = method_signature(e.simple_name, (p.erased_type for p in e.parameters))
        self._emit(
            e,
            "method",
            key=e.simple_name,
            title=f"{owner.name}#{signature}",
            link=f"{owner.link}#{signature}",
            unifier=owner.name,
        )

    def _visit_variable(self, e: VariableElement) -> None:
        if not self._include_members or self.is_excluded(e):
            return
        owner = self._enclosing_type()
        if owner is None:
            return

        name = e.simple_name
        self._emit(e, "variable", key=name, title=f"{owner.name}#{name}", link=f"{owner.link}#{name}")

    # -- helpers ------------------------------------------------------------

    def _identity(self, element: Element) -> tuple[object, ...]:
        """Name-based identity, so separately loaded copies of one element match.

        Members are identified within their enclosing type; executables by
        signature so overloads stay distinct.
        """
        enclosing = self._enclosing_type()
        owner = enclosing.name if enclosing else None
        if isinstance(element, ModuleElement):
            return ("module", element.qualified_name)
        if isinstance(element, PackageElement):
            return ("package", element.qualified_name)
        if isinstance(element, TypeElement):
            return ("type", element.binary_name)
        if isinstance(element, ExecutableElement):
            erased = (p.erased_type for p in element.parameters)
            return ("method", owner, method_signature(element.simple_name, erased))
        if isinstance(element, VariableElement):
            return ("variable", owner, element.simple_name)
        return ("other", id(element))

    def _enclosing_type(self) -> NestedIndex | None:
        return self._types[-1] if self._types else None

    def _emit(
        self,
        element: Element,
        type_: EntryType,
        *,
        key: str,
        title: str,
        link: str,
        unifier: str | None = None,
    ) -> None:
        entry = IndexEntry(
            id=self._next_id,
            type=type_,
            key=tokenize_key(key),
            title=title,
            link=link,
            unifier=unifier,
            body=normalize_body(self._env.doc_comment(element)),
        )
        self._next_id += 1
        self.entries.append(entry)
