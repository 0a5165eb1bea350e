"""Search key tokenization and link formatting."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

KEY_SEPARATORS = re.compile(r"[.$/]")
_SPACE_RUN = re.compile(r" +")

PAGE_SUFFIX = ".html"
PACKAGE_SUMMARY = "package-summary.html"


def split_camel_case(text: str) -> list[str]:
    """Split where the Unicode character category changes.

    An upper-case letter followed by lower-case letters stays with them, so
    ``getFooBar`` gives ``get Foo Bar`` and ``XMLParser`` gives ``XML Parser``.
    Digits and punctuation form their own tokens.
    """
    if not text:
        return []

    tokens: list[str] = []
    start = 0
    current = unicodedata.category(text[0])
    for pos in range(1, len(text)):
        kind = unicodedata.category(text[pos])
        if kind == current:
            continue
        if kind == "Ll" and current == "Lu":
            new_start = pos - 1
            if new_start != start:
                tokens.append(text[start:new_start])
                start = new_start
        else:
            tokens.append(text[start:pos])
            start = pos
        current = kind
    tokens.append(text[start:])
    return tokens


def tokenize_key(name: str) -> str:
    """Turn an identifier or qualified name into space-separated search tokens.

    ``getFooBar`` -> ``get Foo Bar``; ``a.b$C`` -> ``a b C``.
    """
    tokens: list[str] = []
    for word in split_camel_case(name):
        tokens.extend(t for t in KEY_SEPARATORS.split(word) if t)
    return " ".join(tokens)


def to_path(name: str) -> str:
    """``com.example.Outer$Inner`` -> ``com/example/Outer.Inner``."""
    return name.replace(".", "/").replace("$", ".")


def type_link(binary_name: str) -> str:
    return to_path(binary_name) + PAGE_SUFFIX


def package_link(qualified_name: str) -> str:
    if not qualified_name:
        return PACKAGE_SUMMARY
    return f"{to_path(qualified_name)}/{PACKAGE_SUMMARY}"


def relative_type_name(binary_name: str, package: str | None) -> str:
    """Binary name with the enclosing package stripped, when it is a prefix."""
    if package and binary_name.startswith(package + "."):
        return binary_name[len(package) :]
    return binary_name


def method_signature(simple_name: str, erased_types: Iterable[str]) -> str:
    """``resize(int,int)``: the form used both in titles and link fragments."""
    return f"{simple_name}({','.join(erased_types)})"


def normalize_body(raw: str | None) -> str | None:
    """Trim and collapse space runs. None for missing or blank comments."""
    if raw is None:
        return None
    body = _SPACE_RUN.sub(" ", raw.strip())
    return body or None
