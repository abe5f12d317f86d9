"""The immutable set of values a single page is rendered with."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from apisite.partition_types import TypePartition
from apisite.type_entity import TypeEntity


@dataclass(frozen=True)
class PageContext:
    """Values available to one template; built fresh for every page."""

    version: str
    file_root: str
    variables: Mapping[str, Any] = field(default_factory=dict)
    namespaces: tuple[str, ...] = ()
    packages: tuple[str, ...] = ()
    namespace: str | None = None
    package: str | None = None
    classes: tuple[TypeEntity, ...] = ()
    interfaces: tuple[TypeEntity, ...] = ()
    exceptions: tuple[TypeEntity, ...] = ()
    tree: tuple[TypeEntity, ...] = ()
    sub_classes: tuple[TypeEntity, ...] = ()
    implementers: tuple[TypeEntity, ...] = ()
    type: TypeEntity | None = None
    source: str | None = None
    file_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))

    @classmethod
    def with_partition(cls, partition: TypePartition, **kwargs: Any) -> "PageContext":
        """Build a context whose type lists come from ``partition``."""
        return cls(
            classes=partition.classes,
            interfaces=partition.interfaces,
            exceptions=partition.exceptions,
            **kwargs,
        )

    def as_template_vars(self) -> dict[str, Any]:
        """Flatten into template variables; configured variables come first."""
        values: dict[str, Any] = dict(self.variables)
        for f in fields(self):
            if f.name != "variables":
                values[f.name] = getattr(self, f.name)
        return values
