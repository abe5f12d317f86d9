"""The queryable set of type entities a site is compiled from."""

from collections.abc import Iterable
from pathlib import Path

from apisite.namespace_of import NAMESPACE_SEPARATOR
from apisite.type_entity import TypeEntity


class TypeModel:
    """Holds every known type, keyed by fully-qualified name."""

    def __init__(self, types: Iterable[TypeEntity], directory: Path) -> None:
        """Initialize the model with its types and the source root directory."""
        self.directory = directory
        self.types: dict[str, TypeEntity] = {}
        for t in types:
            self.types[t.name] = t

    def get_types(self) -> list[TypeEntity]:
        """Return all types in declaration order."""
        return list(self.types.values())

    def get(self, name: str) -> TypeEntity | None:
        """Look up a type by its fully-qualified name."""
        return self.types.get(name.lstrip(NAMESPACE_SEPARATOR))

    def resolve_type(self, name: str, namespace: str = "") -> TypeEntity | None:
        """Resolve a name as written inside ``namespace`` to a known type.

        Names with a leading separator are absolute; others are tried relative
        to the namespace first and then as absolute names.
        """
        if not name:
            return None
        if name.startswith(NAMESPACE_SEPARATOR):
            return self.get(name)
        if namespace:
            found = self.get(f"{namespace}{NAMESPACE_SEPARATOR}{name}")
            if found:
                return found
        return self.get(name)
