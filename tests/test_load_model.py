"""Tests for loading type models from YAML."""

from pathlib import Path

import pytest

from apisite.errors import ModelError
from apisite.load_model import load_model
from apisite.type_kind import MemberKind, TypeKind

MODEL = """\
directory: src
types:
  - name: \\A\\Foo
    package: P1
    file: A/Foo.php
    line: 3
    annotations:
      short_description: The foo.
      see: [One, Two]
    members:
      - {name: run, kind: method, line: 5}
      - {name: count, kind: property}
      - {name: LIMIT, kind: const}
  - name: A\\Countable
    interface: true
  - name: A\\Failure
    kind: interface
    exception: true
    parent: Exception
    interfaces: [\\A\\Countable]
  - name: Exception
    kind: exception
    user_defined: false
"""


def test_load_model(tmp_path: Path) -> None:
    """Verify names, kinds, files and members of a loaded model."""
    (tmp_path / "model.yml").write_text(MODEL, encoding="utf-8")
    model = load_model(tmp_path / "model.yml")

    assert model.directory == (tmp_path / "src").resolve()
    assert list(model.types) == ["A\\Foo", "A\\Countable", "A\\Failure", "Exception"]

    foo = model.types["A\\Foo"]
    assert foo.short_name == "Foo"
    assert foo.namespace == "A"
    assert foo.package == "P1"
    assert foo.kind is TypeKind.CLASS
    assert foo.file == model.directory / "A" / "Foo.php"
    assert foo.user_defined
    assert foo.annotations == {"short_description": "The foo.", "see": "One\nTwo"}
    assert [m.kind for m in foo.members] == [
        MemberKind.METHOD,
        MemberKind.PROPERTY,
        MemberKind.CONSTANT,
    ]
    assert foo.member("run").line == 5

    assert model.types["A\\Countable"].kind is TypeKind.INTERFACE
    failure = model.types["A\\Failure"]
    assert failure.kind is TypeKind.EXCEPTION
    assert failure.interfaces == ("A\\Countable",)
    assert failure.parent == "Exception"

    exc = model.types["Exception"]
    assert exc.namespace == ""
    assert not exc.user_defined
    assert exc.file is None


def test_resolve_type(tmp_path: Path) -> None:
    """Verify relative and absolute type name resolution."""
    (tmp_path / "model.yml").write_text(MODEL, encoding="utf-8")
    model = load_model(tmp_path / "model.yml")
    assert model.resolve_type("Foo", "A") is model.types["A\\Foo"]
    assert model.resolve_type("\\Exception", "A") is model.types["Exception"]
    assert model.resolve_type("Exception", "A") is model.types["Exception"]
    assert model.resolve_type("Missing", "A") is None
    assert model.resolve_type("", "A") is None


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("types: [{package: P}]", "Invalid type entry"),
        ("types: [{name: X, kind: struct}]", "Invalid kind"),
        ("types: [{name: X, annotations: [a]}]", "mapping"),
        ("types: [{name: X, members: [{kind: method}]}]", "Invalid member"),
        ("- just a list", "must contain a mapping"),
        ("types: [unclosed", "Cannot parse"),
    ],
)
def test_load_model_errors(tmp_path: Path, text: str, message: str) -> None:
    """Verify that malformed model files raise ModelError."""
    (tmp_path / "model.yml").write_text(text, encoding="utf-8")
    with pytest.raises(ModelError, match=message):
        load_model(tmp_path / "model.yml")
