"""Data models for documented types and their members."""

from dataclasses import dataclass, field
from pathlib import Path

from apisite.type_kind import MemberKind, TypeKind


@dataclass(frozen=True)
class MemberEntity:
    """A property, method or constant declared by a type."""

    name: str
    kind: MemberKind
    declaring_class: str  # full name of the declaring type
    line: int | None = None
    annotations: dict[str, str] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class TypeEntity:
    """A documented class, interface or exception declaration."""

    name: str  # fully-qualified, e.g. A\Foo
    short_name: str
    namespace: str  # "" when declared outside any namespace
    package: str  # "" when no package annotation is present
    kind: TypeKind
    parent: str | None = None  # full name of the parent type
    interfaces: tuple[str, ...] = ()
    file: Path | None = None  # None for built-in/external types
    line: int | None = None
    user_defined: bool = True
    annotations: dict[str, str] = field(default_factory=dict, compare=False)
    members: tuple[MemberEntity, ...] = ()

    def in_namespace(self) -> bool:
        """Check whether the type is declared inside a namespace."""
        return bool(self.namespace)

    def member(self, name: str) -> MemberEntity | None:
        """Return the member with the given name, if declared."""
        for m in self.members:
            if m.name == name:
                return m
        return None
