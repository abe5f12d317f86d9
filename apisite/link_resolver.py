"""Logic for deriving output paths and cross-links for entities."""

import re
from collections.abc import Callable, Mapping
from pathlib import Path

from apisite.errors import ConfigurationError
from apisite.relative_path import relative_path
from apisite.sanitize import sanitize
from apisite.type_entity import MemberEntity, TypeEntity
from apisite.type_kind import MemberKind

# printf-style string placeholder, e.g. "%s" or "%-20s"
PLACEHOLDER_RE = re.compile(r"%[^%]*?s")

EMPTY_NAME = "None"

LINK_KINDS = ("namespace", "package", "class", "source")


def fill_pattern(pattern: str, token: str) -> str:
    """Substitute ``token`` for the placeholder in a filename pattern."""
    if not PLACEHOLDER_RE.search(pattern):
        msg = f"Filename pattern '{pattern}' has no %s placeholder"
        raise ConfigurationError(msg)
    return PLACEHOLDER_RE.sub(lambda _: token, pattern, count=1)


def pattern_glob(pattern: str) -> str:
    """Turn a filename pattern into a wildcard glob matching its outputs."""
    return PLACEHOLDER_RE.sub("*", pattern)


def member_anchor(member: MemberEntity) -> str:
    """Anchor a member takes on its declaring type's page."""
    match member.kind:
        case MemberKind.PROPERTY:
            return f"#${member.name}"
        case MemberKind.METHOD:
            return f"#_{member.name}"
        case MemberKind.CONSTANT:
            return f"#{member.name}"


class LinkResolver:
    """Maps namespaces, packages, types and members to output-relative links."""

    def __init__(
        self,
        filenames: Mapping[str, str],
        directory: Path,
        lookup: Callable[[str], TypeEntity | None],
        external_url: str = "http://php.net/manual/",
    ) -> None:
        """Initialize the resolver with filename patterns and model access."""
        self.filenames = dict(filenames)
        self.directory = directory
        self.lookup = lookup
        self.external_url = external_url

    def _pattern(self, kind: str) -> str:
        pattern = self.filenames.get(kind)
        if not pattern:
            msg = f"{kind.capitalize()} output filename not defined."
            raise ConfigurationError(msg)
        return pattern

    def namespace_link(self, element: str | TypeEntity | None) -> str:
        """Link to a namespace summary page."""
        pattern = self._pattern("namespace")
        name = element.namespace if isinstance(element, TypeEntity) else element
        return fill_pattern(pattern, sanitize(name) if name else EMPTY_NAME)

    def package_link(self, element: str | TypeEntity | None) -> str:
        """Link to a package summary page."""
        pattern = self._pattern("package")
        name = element.package if isinstance(element, TypeEntity) else element
        return fill_pattern(pattern, sanitize(name) if name else EMPTY_NAME)

    def class_link(self, element: str | TypeEntity | MemberEntity) -> str:
        """Link to a type page, or to a member's anchor on it."""
        pattern = self._pattern("class")
        anchor = ""
        if isinstance(element, str):
            name = element.lstrip("\\")
        elif isinstance(element, TypeEntity):
            name = element.name
        else:
            name = element.declaring_class
            anchor = member_anchor(element)
        return fill_pattern(pattern, sanitize(name)) + anchor

    def source_link(
        self, element: TypeEntity | MemberEntity, *, with_line: bool = True
    ) -> str | None:
        """Link to the highlighted source of a type or member.

        Built-in types link to an external reference page instead. Returns
        None when the declaring type is unknown or has no origin file.
        """
        self._pattern("source")  # required even when linking externally
        if isinstance(element, TypeEntity):
            declaring = element
        else:
            declaring = self.lookup(element.declaring_class)
            if declaring is None:
                return None

        if not declaring.user_defined:
            return self.external_link(element, declaring)
        if declaring.file is None:
            return None

        link = self.source_file_link(declaring.file)
        if with_line and element.line is not None:
            link += f"#{element.line}"
        return link

    def source_file_link(self, file: Path) -> str:
        """Link to the source mirror page of an origin file."""
        rel = relative_path(file, self.directory)
        return fill_pattern(self._pattern("source"), sanitize(rel))

    def external_link(
        self, element: TypeEntity | MemberEntity, declaring: TypeEntity
    ) -> str:
        """Reference URL for a built-in type or one of its members."""
        if isinstance(element, TypeEntity):
            url = f"{self.external_url}class.{declaring.name}.php"
        else:
            member = element.name.lstrip("_").replace("_", "-")
            url = f"{self.external_url}{declaring.name}.{member}.php"
        return url.lower()
