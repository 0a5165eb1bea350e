"""Load a documentation model from a JSON or YAML document.

Document shape::

    elements:
      - kind: package
        name: com.example
        doc: "Example package."
        types:
          - kind: class
            name: com.example.Widget
            modifiers: [public]
            doc: |
              A widget.
              @hidden
            members:
              - kind: method
                name: resize
                modifiers: [public]
                parameters: [{name: width, type: int}]

``doc`` is either raw comment text (block tags are split out of it) or a
mapping ``{text: ..., tags: [{name: hidden, text: ""}]}`` that spells out the
block tags explicitly.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from searchlet.core.errors import ModelError
from searchlet.core.logging import get_logger
from searchlet.model.comments import BlockTag, DocTree, TextNode, parse_comment
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
from searchlet.model.environment import InMemoryEnvironment

log = get_logger("model.loader")

TYPE_KINDS = frozenset({"class", "interface", "enum", "record", "annotation", "@interface"})
EXECUTABLE_KINDS = frozenset({"method", "constructor"})
VARIABLE_KINDS = frozenset({"field", "enum_constant", "variable"})

CONSTRUCTOR_NAME = "<init>"


def load_model(path: Path) -> InMemoryEnvironment:
    """Read a model document and build an environment over its elements.

    Raises:
        ModelError: If the file is missing, unparseable, or malformed.
    """
    if not path.exists():
        raise ModelError.file_not_found(str(path))

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ModelError.parse_error(str(path), str(e)) from e

    env = parse_model(data, source=str(path))
    log.debug("model_loaded", path=str(path), roots=len(env))
    return env


def parse_model(data: Any, *, source: str = "<model>") -> InMemoryEnvironment:
    """Build an environment from an already-decoded document."""
    if not isinstance(data, Mapping):
        raise ModelError.parse_error(source, "top level must be a mapping")
    raw_elements = data.get("elements", [])
    if not isinstance(raw_elements, list):
        raise ModelError.parse_error(source, "'elements' must be a list")
    return InMemoryEnvironment(
        [parse_element(node, f"elements[{i}]") for i, node in enumerate(raw_elements)]
    )


def parse_element(node: Any, where: str) -> Element:
    if not isinstance(node, Mapping):
        raise ModelError.invalid_element(where, "element must be a mapping")
    kind = node.get("kind")
    if not isinstance(kind, str):
        raise ModelError.invalid_element(where, "missing 'kind'")

    doc = _parse_doc(node.get("doc"), where)

    if kind == "module":
        return ModuleElement(
            qualified_name=_name(node, where),
            packages=tuple(str(p) for p in node.get("packages", [])),
            doc=doc,
        )
    if kind == "package":
        return PackageElement(
            qualified_name=_name(node, where, allow_empty=True),
            types=tuple(
                _parse_type(child, f"{where}.types[{i}]")
                for i, child in enumerate(node.get("types", []))
            ),
            doc=doc,
        )
    if kind in TYPE_KINDS:
        return _parse_type(node, where)
    if kind in EXECUTABLE_KINDS:
        return _parse_executable(node, where)
    if kind == "record_component":
        name = _name(node, where)
        accessor_node = node.get("accessor")
        if accessor_node is None:
            accessor = ExecutableElement(
                simple_name=name,
                modifiers=frozenset({Modifier.PUBLIC}),
                doc=doc,
            )
        else:
            accessor = _parse_executable(accessor_node, f"{where}.accessor")
        return RecordComponentElement(simple_name=name, accessor=accessor, doc=doc)
    if kind in VARIABLE_KINDS:
        return VariableElement(
            simple_name=_name(node, where),
            modifiers=_modifiers(node, where),
            doc=doc,
        )
    if kind == "type_parameter":
        return TypeParameterElement(simple_name=_name(node, where), doc=doc)

    log.debug("unknown_element_kind", where=where, kind=kind)
    return UnknownElement(
        kind=kind,
        name=str(node.get("name", "")),
        attributes={k: v for k, v in node.items() if k not in ("kind", "name", "doc")},
        doc=doc,
    )


def _parse_type(node: Any, where: str) -> TypeElement:
    if not isinstance(node, Mapping):
        raise ModelError.invalid_element(where, "element must be a mapping")
    kind = node.get("kind", "class")
    if kind not in TYPE_KINDS:
        raise ModelError.invalid_element(where, f"expected a type, got '{kind}'")

    binary_name = _name(node, where)
    nesting_raw = node.get("nesting", NestingKind.TOP_LEVEL.value)
    try:
        nesting = NestingKind(nesting_raw)
    except ValueError as e:
        raise ModelError.invalid_element(where, f"unknown nesting '{nesting_raw}'") from e

    return TypeElement(
        binary_name=binary_name,
        simple_name=str(node.get("simple_name") or _simple_name(binary_name)),
        modifiers=_modifiers(node, where),
        nesting=nesting,
        members=tuple(
            parse_element(child, f"{where}.members[{i}]")
            for i, child in enumerate(node.get("members", []))
        ),
        doc=_parse_doc(node.get("doc"), where),
        kind=kind,
    )


def _parse_executable(node: Any, where: str) -> ExecutableElement:
    if not isinstance(node, Mapping):
        raise ModelError.invalid_element(where, "element must be a mapping")
    if node.get("kind") == "constructor":
        name = str(node.get("name") or CONSTRUCTOR_NAME)
    else:
        name = _name(node, where)

    params: list[Parameter] = []
    for i, raw in enumerate(node.get("parameters", [])):
        if isinstance(raw, str):
            params.append(Parameter(name=f"arg{i}", erased_type=raw))
        elif isinstance(raw, Mapping) and "type" in raw:
            params.append(Parameter(name=str(raw.get("name", f"arg{i}")), erased_type=str(raw["type"])))
        else:
            raise ModelError.invalid_element(f"{where}.parameters[{i}]", "parameter needs a 'type'")

    return ExecutableElement(
        simple_name=name,
        parameters=tuple(params),
        modifiers=_modifiers(node, where),
        doc=_parse_doc(node.get("doc"), where),
    )


def _name(node: Mapping[str, Any], where: str, *, allow_empty: bool = False) -> str:
    name = node.get("name")
    if name is None or (not allow_empty and name == ""):
        raise ModelError.invalid_element(where, "missing 'name'")
    return str(name)


def _simple_name(binary_name: str) -> str:
    return binary_name.rsplit(".", 1)[-1].rsplit("$", 1)[-1]


def _modifiers(node: Mapping[str, Any], where: str) -> frozenset[Modifier]:
    raw = node.get("modifiers", [])
    try:
        return frozenset(Modifier(str(m).lower()) for m in raw)
    except ValueError as e:
        raise ModelError.invalid_element(where, f"bad modifiers {raw!r}") from e


def _parse_doc(raw: Any, where: str) -> DocComment | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return DocComment.from_raw(raw)
    if isinstance(raw, Mapping):
        text = str(raw.get("text", ""))
        tags = raw.get("tags")
        if tags is None:
            return DocComment.from_raw(text)
        parsed = parse_comment(text)
        extra: list[BlockTag] = []
        for i, tag in enumerate(tags):
            if not isinstance(tag, Mapping) or "name" not in tag:
                raise ModelError.invalid_element(f"{where}.doc.tags[{i}]", "tag needs a 'name'")
            tag_text = str(tag.get("text", ""))
            extra.append(BlockTag(str(tag["name"]), (TextNode(tag_text),) if tag_text else ()))
        return DocComment(
            raw=text,
            tree=DocTree(body=parsed.body, block_tags=(*parsed.block_tags, *extra)),
        )
    raise ModelError.invalid_element(where, "'doc' must be text or a mapping")
