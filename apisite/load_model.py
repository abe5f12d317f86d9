"""Logic for loading a type model from a YAML model file."""

from pathlib import Path
from typing import Any

import yaml

from apisite.errors import ModelError
from apisite.namespace_of import namespace_of, short_name_of
from apisite.type_entity import MemberEntity, TypeEntity
from apisite.type_kind import (
    TypeKind,
    classify,
    parse_member_kind,
    parse_type_kind,
)
from apisite.type_model import TypeModel


def load_model(path: Path) -> TypeModel:
    """Load and parse a model file into a ``TypeModel``."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        msg = f"Cannot parse model file {path}: {e}"
        raise ModelError(msg) from e

    if not isinstance(doc, dict):
        msg = f"Model file {path} must contain a mapping"
        raise ModelError(msg)

    directory = Path(doc.get("directory") or ".")
    if not directory.is_absolute():
        directory = (path.parent / directory).resolve()

    types = [_type_from_dict(it, directory) for it in doc.get("types") or []]
    return TypeModel(types, directory)


def _type_from_dict(it: Any, directory: Path) -> TypeEntity:
    """Build one ``TypeEntity`` from a raw model entry."""
    if not isinstance(it, dict) or not it.get("name"):
        msg = f"Invalid type entry: {it!r}"
        raise ModelError(msg)

    name = str(it["name"]).lstrip("\\")
    ns = it.get("namespace")
    namespace = str(ns) if ns is not None else namespace_of(name)

    try:
        declared = parse_type_kind(str(it["kind"])) if it.get("kind") else None
        kind = classify(
            is_interface=declared is TypeKind.INTERFACE or bool(it.get("interface")),
            is_exception=declared is TypeKind.EXCEPTION or bool(it.get("exception")),
        )
        members = tuple(_member_from_dict(m, name) for m in it.get("members") or [])
    except ValueError as e:
        msg = f"Invalid kind in type {name}: {e}"
        raise ModelError(msg) from e

    file = None
    if it.get("file"):
        file = Path(str(it["file"]))
        if not file.is_absolute():
            file = directory / file

    user_defined = it.get("user_defined")
    return TypeEntity(
        name=name,
        short_name=str(it.get("short_name") or short_name_of(name)),
        namespace=namespace,
        package=str(it.get("package") or ""),
        kind=kind,
        parent=str(it["parent"]).lstrip("\\") if it.get("parent") else None,
        interfaces=tuple(str(x).lstrip("\\") for x in it.get("interfaces") or []),
        file=file,
        line=int(it["line"]) if it.get("line") is not None else None,
        user_defined=bool(file) if user_defined is None else bool(user_defined),
        annotations=_annotations(it.get("annotations")),
        members=members,
    )


def _member_from_dict(m: Any, declaring_class: str) -> MemberEntity:
    if not isinstance(m, dict) or not m.get("name"):
        msg = f"Invalid member entry in {declaring_class}: {m!r}"
        raise ModelError(msg)
    return MemberEntity(
        name=str(m["name"]),
        kind=parse_member_kind(str(m.get("kind") or "method")),
        declaring_class=declaring_class,
        line=int(m["line"]) if m.get("line") is not None else None,
        annotations=_annotations(m.get("annotations")),
    )


def _annotations(raw: Any) -> dict[str, str]:
    if not raw:
        return {}
    if not isinstance(raw, dict):
        msg = f"Annotations must be a mapping, got {raw!r}"
        raise ModelError(msg)
    return {str(k): _as_text(v) for k, v in raw.items()}


def _as_text(v: object) -> str:
    """Convert an annotation value to a string, joining lists by newlines."""
    if v is None:
        return ""
    if isinstance(v, list):
        return "\n".join(_as_text(x) for x in v if _as_text(x))
    return str(v).strip()
