"""Jinja2 rendering of page templates to files."""

import logging
import re
import zlib
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup, escape

from apisite.doc_format import docblock, docline, long_description, short_description
from apisite.highlight import highlight_css, highlight_snippet
from apisite.link_resolver import LinkResolver
from apisite.namespace_of import NAMESPACE_SEPARATOR
from apisite.page_context import PageContext
from apisite.type_entity import MemberEntity, TypeEntity
from apisite.type_model import TypeModel

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


def replace_ns(name: str, namespace: str | None) -> str:
    """Drop ``namespace`` from ``name`` when the type lives directly in it."""
    name = name.lstrip(NAMESPACE_SEPARATOR)
    if not namespace:
        return name
    prefix = namespace + NAMESPACE_SEPARATOR
    rest = name[len(prefix) :]
    if name.startswith(prefix) and NAMESPACE_SEPARATOR not in rest:
        return rest
    return name


def force_dir(path: Path) -> Path:
    """Ensure the parent directory of ``path`` exists."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


class TemplateRenderer:
    """Renders templates with link, formatting and highlighting helpers."""

    def __init__(
        self,
        template_dir: Path,
        links: LinkResolver,
        model: TypeModel,
        output_dir: Path,
    ) -> None:
        """Initialize a Jinja2 environment over ``template_dir``."""
        self.links = links
        self.model = model
        self.output_dir = output_dir
        self._versions: dict[str, str] = {}
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._register_helpers()

    def _register_helpers(self) -> None:
        filters = self.env.filters
        filters["namespace_link"] = self.links.namespace_link
        filters["package_link"] = self.links.package_link
        filters["class_link"] = self.links.class_link
        filters["source_link"] = self.links.source_link
        filters["ucfirst"] = lambda s: s[:1].upper() + s[1:]
        filters["replace_ns"] = replace_ns
        filters["docline"] = lambda text: Markup(docline(text))
        filters["docblock"] = lambda text: Markup(docblock(text))
        filters["doclabel"] = self.doclabel
        filters["get_types"] = self.get_types
        filters["highlight"] = lambda code: Markup(highlight_snippet(str(code)))
        filters["short_description"] = lambda e: short_description(e.annotations)
        filters["long_description"] = lambda e: long_description(e.annotations)
        filters["resolve_type"] = self.model.resolve_type
        filters["static_file"] = self.static_file
        self.env.globals["highlight_css"] = lambda: Markup(highlight_css())

    def doclabel(self, doc: str, namespace: str | None) -> Markup:
        """Turn ``Type|Other description`` into linked type names and a label."""
        names, label = (WHITESPACE_RE.split(doc.strip(), maxsplit=1) + [""])[:2]
        parts = []
        for name in names.split("|"):
            entity = self.model.resolve_type(name, namespace or "")
            short = replace_ns(name, namespace)
            if entity is not None:
                href = self.links.class_link(entity)
                parts.append(Markup('<a href="{}">{}</a>').format(href, short))
            else:
                parts.append(escape(short))
        return Markup("|").join(parts) + Markup(" ") + escape(label.strip())

    def get_types(
        self, element: TypeEntity | MemberEntity, position: int | None = None
    ) -> list[tuple[str, TypeEntity | None]]:
        """Declared types of a property, method return or ``position``-th param.

        Each name is paired with the model type it resolves to, or None.
        """
        if isinstance(element, MemberEntity):
            declaring = self.model.get(element.declaring_class)
            namespace = declaring.namespace if declaring else ""
        else:
            namespace = element.namespace
        annotations = element.annotations
        if position is None:
            doc = annotations.get("var") or annotations.get("return") or ""
        else:
            params = annotations.get("param", "").splitlines()
            doc = params[position] if position < len(params) else ""
        if not doc.strip():
            return []
        names = WHITESPACE_RE.split(doc.strip(), maxsplit=1)[0]
        return [
            (name, self.model.resolve_type(name, namespace))
            for name in names.split("|")
            if name
        ]

    def static_file(self, name: str) -> str:
        """Append a content checksum to a generated file's URL."""
        filename = self.output_dir / name
        key = str(filename)
        if key not in self._versions and filename.is_file():
            self._versions[key] = str(zlib.crc32(filename.read_bytes()))
        if key in self._versions:
            return f"{name}?{self._versions[key]}"
        return name

    def render(self, template: str, context: PageContext, destination: Path) -> None:
        """Render ``template`` with ``context`` into ``destination``."""
        html = self.env.get_template(template).render(context.as_template_vars())
        force_dir(destination).write_text(html, encoding="utf-8")
        logger.debug("Rendered %s -> %s", template, destination)
