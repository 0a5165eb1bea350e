"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages and
provides small in-memory documentation trees.
"""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from searchlet.model.elements import (  # noqa: E402
    DocComment,
    ExecutableElement,
    Modifier,
    ModuleElement,
    NestingKind,
    PackageElement,
    Parameter,
    RecordComponentElement,
    TypeElement,
    TypeParameterElement,
    VariableElement,
)
from searchlet.model.environment import InMemoryEnvironment  # noqa: E402

PUBLIC = frozenset({Modifier.PUBLIC})
PROTECTED = frozenset({Modifier.PROTECTED})
PRIVATE = frozenset({Modifier.PRIVATE})


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers bound to streams that CliRunner closes between tests."""
    yield
    root = logging.getLogger()
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def widget_tree() -> InMemoryEnvironment:
    """A module plus one package with a mix of visible and excluded elements.

    com.example (package)
      Widget (public, documented)
        resize(int,int) public
        <init>() public
        secret() private
        WIDTH public field
        hiddenField public, @hidden
        T type parameter
        Widget$Part public member type
          name() public
        Widget$1 anonymous
          run() public
      Internal (package-private)
        work() public
      Ghost (public, @hidden)
        boo() public
      Point (public record)
        x component
    """
    part = TypeElement(
        binary_name="com.example.Widget$Part",
        simple_name="Part",
        modifiers=PUBLIC | {Modifier.STATIC},
        nesting=NestingKind.MEMBER,
        members=(ExecutableElement("name", modifiers=PUBLIC),),
    )
    anonymous = TypeElement(
        binary_name="com.example.Widget$1",
        simple_name="",
        modifiers=PUBLIC,
        nesting=NestingKind.ANONYMOUS,
        members=(ExecutableElement("run", modifiers=PUBLIC),),
    )
    widget = TypeElement(
        binary_name="com.example.Widget",
        simple_name="Widget",
        modifiers=PUBLIC,
        doc=DocComment.from_raw("  A   resizable widget.  "),
        members=(
            ExecutableElement(
                "resize",
                parameters=(Parameter("width", "int"), Parameter("height", "int")),
                modifiers=PUBLIC,
                doc=DocComment.from_raw("Resize it.\n@param width the width"),
            ),
            ExecutableElement("<init>", modifiers=PUBLIC),
            ExecutableElement("secret", modifiers=PRIVATE),
            VariableElement("WIDTH", modifiers=PUBLIC | {Modifier.STATIC, Modifier.FINAL}),
            VariableElement(
                "hiddenField", modifiers=PUBLIC, doc=DocComment.from_raw("Gone.\n@hidden")
            ),
            TypeParameterElement("T"),
            part,
            anonymous,
        ),
    )
    internal = TypeElement(
        binary_name="com.example.Internal",
        simple_name="Internal",
        members=(ExecutableElement("work", modifiers=PUBLIC),),
    )
    ghost = TypeElement(
        binary_name="com.example.Ghost",
        simple_name="Ghost",
        modifiers=PUBLIC,
        doc=DocComment.from_raw("Not here.\n@hidden"),
        members=(ExecutableElement("boo", modifiers=PUBLIC),),
    )
    accessor = ExecutableElement("x", modifiers=PUBLIC)
    point = TypeElement(
        binary_name="com.example.Point",
        simple_name="Point",
        modifiers=PUBLIC | {Modifier.FINAL},
        kind="record",
        members=(RecordComponentElement("x", accessor=accessor), accessor),
    )
    package = PackageElement(
        "com.example",
        types=(widget, internal, ghost, point),
        doc=DocComment.from_raw("Example classes."),
    )
    module = ModuleElement("example.core", packages=("com.example",))
    return InMemoryEnvironment([module, package])


@pytest.fixture
def single_method_tree() -> InMemoryEnvironment:
    """Package p with public type p.A and public no-arg method foo()."""
    a = TypeElement(
        binary_name="p.A",
        simple_name="A",
        modifiers=PUBLIC,
        members=(ExecutableElement("foo", modifiers=PUBLIC),),
    )
    return InMemoryEnvironment([PackageElement("p", types=(a,))])
