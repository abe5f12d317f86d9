"""Closed sets of entity kinds."""

from enum import Enum


class TypeKind(Enum):
    """Kind of a declared type."""

    CLASS = "class"
    INTERFACE = "interface"
    EXCEPTION = "exception"


class MemberKind(Enum):
    """Kind of a type member."""

    PROPERTY = "property"
    METHOD = "method"
    CONSTANT = "constant"


def classify(*, is_interface: bool, is_exception: bool) -> TypeKind:
    """Pick a single kind from reflection flags.

    An exception flag wins over an interface flag.
    """
    if is_exception:
        return TypeKind.EXCEPTION
    if is_interface:
        return TypeKind.INTERFACE
    return TypeKind.CLASS


def parse_type_kind(value: str) -> TypeKind:
    """Parse a kind label from a model file ("class", "Interface", ...)."""
    k = value.strip().lower()
    if k in {"exception", "exceptiontype"}:
        return TypeKind.EXCEPTION
    return TypeKind(k)


def parse_member_kind(value: str) -> MemberKind:
    """Parse a member kind label, accepting "const" for constants."""
    k = value.strip().lower()
    if k == "const":
        return MemberKind.CONSTANT
    return MemberKind(k)
