"""Orchestration of the page rendering phases."""

import logging
import shutil
from pathlib import Path
from typing import Any

from apisite.ancestor_chain import ancestor_chain
from apisite.build_index import SiteIndex, build_index
from apisite.errors import OutputDirectoryError
from apisite.generated_file_registry import GeneratedFileRegistry
from apisite.highlight import highlight_source
from apisite.link_resolver import LinkResolver
from apisite.page_context import PageContext
from apisite.partition_types import partition_types
from apisite.progress_tracker import NullProgressTracker, ProgressTracker
from apisite.relative_path import relative_path
from apisite.template_renderer import TemplateRenderer, force_dir
from apisite.type_entity import TypeEntity
from apisite.type_model import TypeModel

logger = logging.getLogger(__name__)

VERSION = "2.0"


def related_namespaces(namespaces: list[str], current: str) -> tuple[str, ...]:
    """Namespaces that are string-prefix ancestors or descendants of ``current``."""
    return tuple(
        ns for ns in namespaces if ns.startswith(current) or current.startswith(ns)
    )


def copy_resources(resources: dict[str, str], output: Path) -> int:
    """Copy every file under each resource source into ``output/<dest>``."""
    copied = 0
    for source, dest in resources.items():
        src_root = Path(source)
        for f in sorted(src_root.rglob("*")):
            if not f.is_file():
                continue
            target = force_dir(output / dest / f.relative_to(src_root))
            shutil.copyfile(f, target)
            copied += 1
    return copied


class Generator:
    """Generates the HTML site for a type model."""

    def __init__(self, model: TypeModel) -> None:
        """Initialize the generator with the model to document."""
        self.model = model
        self.progress: ProgressTracker = NullProgressTracker()
        self.written = 0

    def generate(self, output: Path, config: dict[str, Any]) -> SiteIndex:
        """Render the whole site into an existing ``output`` directory."""
        if not output.is_dir():
            msg = f"Directory {output} doesn't exist."
            raise OutputDirectoryError(msg)

        index = build_index(self.model.get_types())
        links = LinkResolver(
            config["filenames"],
            self.model.directory,
            self.model.get,
            config["settings"].get("external_url", "http://php.net/manual/"),
        )
        renderer = TemplateRenderer(
            Path(config["templates"]["directory"]), links, self.model, output
        )
        self._prepare_progress(index, config)
        self.written = 0

        copied = copy_resources(config["resources"], output)
        logger.info("Copied %d resource files", copied)

        base = {
            "version": VERSION,
            "file_root": str(self.model.directory),
            "variables": config["variables"],
        }
        self._render_common(renderer, index, config, output, base)
        self._render_namespaces(renderer, links, index, config, output, base)
        self._render_packages(renderer, links, index, config, output, base)
        self._render_types(renderer, links, index, config, output, base)
        return index

    def _prepare_progress(self, index: SiteIndex, config: dict[str, Any]) -> None:
        maximum = (
            len(index.all_by_name)
            + len(index.namespaces)
            + len(index.packages)
            + len(config["templates"]["common"])
            + len(index.user_defined_files())
        )
        if config["settings"].get("progressbar"):
            self.progress = ProgressTracker(maximum)
        else:
            self.progress = NullProgressTracker(maximum)

    def _emit(
        self,
        renderer: TemplateRenderer,
        template: str,
        context: PageContext,
        destination: Path,
    ) -> None:
        renderer.render(template, context, destination)
        self.written += 1
        self.progress.increment()

    def _render_common(
        self,
        renderer: TemplateRenderer,
        index: SiteIndex,
        config: dict[str, Any],
        output: Path,
        base: dict[str, Any],
    ) -> None:
        context = PageContext.with_partition(
            partition_types(index.all_by_name.values()),
            namespaces=tuple(index.namespaces),
            packages=tuple(index.packages),
            **base,
        )
        for dest, source in config["templates"]["common"].items():
            self._emit(renderer, source, context, output / dest)

    def _render_namespaces(
        self,
        renderer: TemplateRenderer,
        links: LinkResolver,
        index: SiteIndex,
        config: dict[str, Any],
        output: Path,
        base: dict[str, Any],
    ) -> None:
        all_namespaces = list(index.namespaces)
        template = config["templates"]["namespace"]
        for name, group in index.namespaces.items():
            packages = tuple(group.packages)
            context = PageContext.with_partition(
                partition_types(group.classes.values()),
                namespace=name,
                package=packages[0] if len(packages) == 1 else None,
                packages=packages,
                namespaces=related_namespaces(all_namespaces, name),
                **base,
            )
            destination = output / links.namespace_link(name)
            self._emit(renderer, template, context, destination)

    def _render_packages(
        self,
        renderer: TemplateRenderer,
        links: LinkResolver,
        index: SiteIndex,
        config: dict[str, Any],
        output: Path,
        base: dict[str, Any],
    ) -> None:
        template = config["templates"]["package"]
        for name, group in index.packages.items():
            context = PageContext.with_partition(
                partition_types(group.classes.values()),
                package=name,
                packages=(name,),
                namespaces=tuple(group.namespaces),
                **base,
            )
            destination = output / links.package_link(name)
            self._emit(renderer, template, context, destination)

    def _render_types(
        self,
        renderer: TemplateRenderer,
        links: LinkResolver,
        index: SiteIndex,
        config: dict[str, Any],
        output: Path,
        base: dict[str, Any],
    ) -> None:
        all_namespaces = list(index.namespaces)
        templates = config["templates"]
        registry = GeneratedFileRegistry()
        for t in index.all_by_name.values():
            namespaces = (
                related_namespaces(all_namespaces, t.namespace) if t.namespace else ()
            )
            context = PageContext.with_partition(
                partition_types([t]),
                namespace=t.namespace or None,
                package=t.package or None,
                namespaces=namespaces,
                packages=(t.package,) if t.package else (),
                tree=tuple(ancestor_chain(t, index.all_by_name.get)),
                sub_classes=tuple(index.direct_subclasses(t)),
                implementers=tuple(index.direct_implementers(t)),
                type=t,
                **base,
            )
            destination = output / links.class_link(t)
            self._emit(renderer, templates["class"], context, destination)

            if t.user_defined and t.file is not None and registry.claim(t.file):
                self._render_source(
                    renderer, links, t, t.file, templates["source"], output, base
                )

    def _render_source(
        self,
        renderer: TemplateRenderer,
        links: LinkResolver,
        t: TypeEntity,
        file: Path,
        template: str,
        output: Path,
        base: dict[str, Any],
    ) -> None:
        file_name = relative_path(file, self.model.directory)
        code = file.read_text(encoding="utf-8", errors="replace")
        context = PageContext(
            namespace=t.namespace or None,
            package=t.package or None,
            type=t,
            source=highlight_source(code, file.name),
            file_name=file_name,
            **base,
        )
        destination = output / links.source_file_link(file)
        self._emit(renderer, template, context, destination)
        logger.debug("Mirrored source %s", file_name)
