"""Documentation element tree.

A closed set of element variants. Containers hold their children as tuples in
declaration order; nothing here is mutated after construction.

    ModuleElement      named module, lists its package names (no recursion)
    PackageElement     package with its top-level types
    TypeElement        class/interface/enum/record/annotation, with members
    ExecutableElement  method or constructor
    RecordComponentElement  record component, indexed through its accessor
    VariableElement    field or enum constant
    TypeParameterElement
    UnknownElement     anything the model could not classify
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from searchlet.model.comments import DocTree, parse_comment


class Modifier(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    STATIC = "static"
    FINAL = "final"
    ABSTRACT = "abstract"
    DEFAULT = "default"
    SEALED = "sealed"
    NON_SEALED = "non-sealed"
    SYNCHRONIZED = "synchronized"
    NATIVE = "native"
    TRANSIENT = "transient"
    VOLATILE = "volatile"
    STRICTFP = "strictfp"


class NestingKind(str, Enum):
    TOP_LEVEL = "top_level"
    MEMBER = "member"
    LOCAL = "local"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True, slots=True)
class DocComment:
    """Raw comment text plus its structured tree."""

    raw: str
    tree: DocTree

    @classmethod
    def from_raw(cls, raw: str) -> DocComment:
        return cls(raw=raw, tree=parse_comment(raw))


@dataclass(frozen=True, slots=True)
class Parameter:
    name: str
    erased_type: str  # e.g. "java.util.List", "int[]"


@dataclass(frozen=True, slots=True)
class ModuleElement:
    qualified_name: str
    packages: tuple[str, ...] = ()
    doc: DocComment | None = None


@dataclass(frozen=True, slots=True)
class PackageElement:
    qualified_name: str
    types: tuple[TypeElement, ...] = ()
    doc: DocComment | None = None


@dataclass(frozen=True, slots=True)
class TypeElement:
    binary_name: str  # e.g. "com.example.Outer$Inner"
    simple_name: str
    modifiers: frozenset[Modifier] = frozenset()
    nesting: NestingKind = NestingKind.TOP_LEVEL
    members: tuple[Element, ...] = ()
    doc: DocComment | None = None
    kind: str = "class"


@dataclass(frozen=True, slots=True)
class ExecutableElement:
    simple_name: str  # "<init>" for constructors
    parameters: tuple[Parameter, ...] = ()
    modifiers: frozenset[Modifier] = frozenset()
    doc: DocComment | None = None


@dataclass(frozen=True, slots=True)
class RecordComponentElement:
    simple_name: str
    accessor: ExecutableElement
    doc: DocComment | None = None


@dataclass(frozen=True, slots=True)
class VariableElement:
    simple_name: str
    modifiers: frozenset[Modifier] = frozenset()
    doc: DocComment | None = None


@dataclass(frozen=True, slots=True)
class TypeParameterElement:
    simple_name: str
    doc: DocComment | None = None


@dataclass(frozen=True, slots=True)
class UnknownElement:
    kind: str
    name: str = ""
    attributes: dict[str, object] = field(default_factory=dict, compare=False, hash=False)
    doc: DocComment | None = None


Element = (
    ModuleElement
    | PackageElement
    | TypeElement
    | ExecutableElement
    | RecordComponentElement
    | VariableElement
    | TypeParameterElement
    | UnknownElement
)
