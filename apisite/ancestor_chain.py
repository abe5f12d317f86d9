"""Logic for walking a type's parent chain."""

from collections.abc import Callable

from apisite.errors import CyclicHierarchyError
from apisite.type_entity import TypeEntity


def ancestor_chain(
    entity: TypeEntity,
    lookup: Callable[[str], TypeEntity | None],
) -> list[TypeEntity]:
    """Return ``entity`` preceded by its ancestors, root first.

    Parents that ``lookup`` cannot resolve end the chain. A parent that was
    already visited raises ``CyclicHierarchyError``.
    """
    chain = [entity]
    seen = {entity.name}
    current = entity
    while current.parent:
        parent = lookup(current.parent)
        if parent is None:
            break
        if parent.name in seen:
            raise CyclicHierarchyError(parent.name, [t.name for t in chain])
        seen.add(parent.name)
        chain.append(parent)
        current = parent
    chain.reverse()
    return chain
