"""Documentation model: element tree, comments and loading."""

from searchlet.model.comments import BlockTag, DocTree, InlineTag, TextNode, is_hidden, parse_comment
from searchlet.model.elements import (
    DocComment,
    Element,
    ExecutableElement,
    Modifier,
    ModuleElement,
    NestingKind,
    PackageElement,
    Parameter,
    RecordComponentElement,
    TypeElement,
    TypeParameterElement,
    UnknownElement,
    VariableElement,
)
from searchlet.model.environment import DocEnvironment, InMemoryEnvironment
from searchlet.model.loader import load_model, parse_model

__all__ = [
    "BlockTag",
    "DocComment",
    "DocEnvironment",
    "DocTree",
    "Element",
    "ExecutableElement",
    "InMemoryEnvironment",
    "InlineTag",
    "Modifier",
    "ModuleElement",
    "NestingKind",
    "PackageElement",
    "Parameter",
    "RecordComponentElement",
    "TextNode",
    "TypeElement",
    "TypeParameterElement",
    "UnknownElement",
    "VariableElement",
    "is_hidden",
    "load_model",
    "parse_model",
]
