"""Split types into the class, interface and exception lists pages show."""

from collections.abc import Iterable
from dataclasses import dataclass

from apisite.type_entity import TypeEntity
from apisite.type_kind import TypeKind


@dataclass(frozen=True)
class TypePartition:
    """Types split by kind; every type lands in exactly one list."""

    classes: tuple[TypeEntity, ...] = ()
    interfaces: tuple[TypeEntity, ...] = ()
    exceptions: tuple[TypeEntity, ...] = ()


def partition_types(types: Iterable[TypeEntity]) -> TypePartition:
    """Partition types by kind, keeping the input order inside each list."""
    classes: list[TypeEntity] = []
    interfaces: list[TypeEntity] = []
    exceptions: list[TypeEntity] = []
    for t in types:
        match t.kind:
            case TypeKind.CLASS:
                classes.append(t)
            case TypeKind.INTERFACE:
                interfaces.append(t)
            case TypeKind.EXCEPTION:
                exceptions.append(t)
    return TypePartition(tuple(classes), tuple(interfaces), tuple(exceptions))
