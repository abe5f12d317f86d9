"""Shared fixtures for building type entities and configurations."""

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from apisite.load_config import DEFAULT_CONFIG
from apisite.namespace_of import namespace_of, short_name_of
from apisite.type_entity import MemberEntity, TypeEntity
from apisite.type_kind import TypeKind

TypeFactory = Callable[..., TypeEntity]


def _make_type(
    name: str,
    package: str = "",
    *,
    kind: TypeKind = TypeKind.CLASS,
    parent: str | None = None,
    interfaces: tuple[str, ...] = (),
    file: Path | None = None,
    line: int | None = None,
    user_defined: bool | None = None,
    annotations: dict[str, str] | None = None,
    members: tuple[MemberEntity, ...] = (),
) -> TypeEntity:
    return TypeEntity(
        name=name,
        short_name=short_name_of(name),
        namespace=namespace_of(name),
        package=package,
        kind=kind,
        parent=parent,
        interfaces=interfaces,
        file=file,
        line=line,
        user_defined=file is not None if user_defined is None else user_defined,
        annotations=annotations or {},
        members=members,
    )


@pytest.fixture
def make_type() -> TypeFactory:
    """Factory for ``TypeEntity`` values with the namespace derived from the name."""
    return _make_type


@pytest.fixture
def config() -> dict[str, Any]:
    """A private copy of the default configuration without the progress bar."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg["settings"]["progressbar"] = False
    return cfg
