"""Logic for grouping type entities by name, namespace and package."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypeVar

from apisite.type_entity import TypeEntity

V = TypeVar("V")


def casefold_key(name: str) -> tuple[str, str]:
    """Case-insensitive sort key, ties broken by the exact name."""
    return (name.lower(), name)


def sort_by_key(mapping: Mapping[str, V]) -> dict[str, V]:
    """Return a copy of ``mapping`` ordered case-insensitively by key."""
    return {k: mapping[k] for k in sorted(mapping, key=casefold_key)}


@dataclass
class NamespaceGroup:
    """Types declared in one namespace, keyed by short name."""

    name: str
    classes: dict[str, TypeEntity] = field(default_factory=dict)
    packages: list[str] = field(default_factory=list)


@dataclass
class PackageGroup:
    """Types belonging to one package, keyed by full name."""

    name: str
    classes: dict[str, TypeEntity] = field(default_factory=dict)
    namespaces: list[str] = field(default_factory=list)


@dataclass
class SiteIndex:
    """Sorted groupings of all types plus a reverse hierarchy index."""

    packages: dict[str, PackageGroup]
    namespaces: dict[str, NamespaceGroup]
    all_by_name: dict[str, TypeEntity]
    subclasses: dict[str, list[TypeEntity]] = field(default_factory=dict)
    implementers: dict[str, list[TypeEntity]] = field(default_factory=dict)

    def direct_subclasses(self, entity: TypeEntity) -> list[TypeEntity]:
        """Types whose parent is ``entity``."""
        return list(self.subclasses.get(entity.name, []))

    def direct_implementers(self, entity: TypeEntity) -> list[TypeEntity]:
        """Types that list ``entity`` among their own interfaces."""
        return list(self.implementers.get(entity.name, []))

    def user_defined_files(self) -> set[str]:
        """Distinct origin files of user-defined types."""
        return {
            str(t.file)
            for t in self.all_by_name.values()
            if t.user_defined and t.file is not None
        }


def build_index(all_types: Iterable[TypeEntity]) -> SiteIndex:
    """Index all types into sorted package, namespace and name maps."""
    package_classes: dict[str, dict[str, TypeEntity]] = {}
    package_namespaces: dict[str, set[str]] = {}
    namespace_classes: dict[str, dict[str, TypeEntity]] = {}
    namespace_packages: dict[str, set[str]] = {}
    all_by_name: dict[str, TypeEntity] = {}
    subclasses: dict[str, list[TypeEntity]] = {}
    implementers: dict[str, list[TypeEntity]] = {}

    for t in all_types:
        if t.package:
            package_classes.setdefault(t.package, {})[t.name] = t
            package_namespaces.setdefault(t.package, set())
        if t.in_namespace():
            namespace_classes.setdefault(t.namespace, {})[t.short_name] = t
            packages = namespace_packages.setdefault(t.namespace, set())
            if t.package:
                packages.add(t.package)
                package_namespaces[t.package].add(t.namespace)
        all_by_name[t.name] = t
        if t.parent:
            subclasses.setdefault(t.parent, []).append(t)
        for iface in t.interfaces:
            implementers.setdefault(iface, []).append(t)

    packages = {
        name: PackageGroup(
            name=name,
            classes=sort_by_key(classes),
            namespaces=sorted(package_namespaces[name], key=casefold_key),
        )
        for name, classes in package_classes.items()
    }
    namespaces = {
        name: NamespaceGroup(
            name=name,
            classes=sort_by_key(classes),
            packages=sorted(namespace_packages[name], key=casefold_key),
        )
        for name, classes in namespace_classes.items()
    }

    def by_name(types: list[TypeEntity]) -> list[TypeEntity]:
        return sorted(types, key=lambda x: casefold_key(x.name))

    return SiteIndex(
        packages=sort_by_key(packages),
        namespaces=sort_by_key(namespaces),
        all_by_name=sort_by_key(all_by_name),
        subclasses={k: by_name(v) for k, v in subclasses.items()},
        implementers={k: by_name(v) for k, v in implementers.items()},
    )
