"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from apisite.deep_merge import deep_merge
from apisite.errors import ConfigurationError

PACKAGE_DIR = Path(__file__).parent

DEFAULT_CONFIG: dict[str, Any] = {
    "resources": {
        str(PACKAGE_DIR / "resources"): "resources",
    },
    "filenames": {
        "namespace": "namespace-%s.html",
        "package": "package-%s.html",
        "class": "class-%s.html",
        "source": "source-%s.html",
    },
    "templates": {
        "directory": str(PACKAGE_DIR / "templates"),
        "common": {
            "index.html": "overview.html",
            "elementlist.js": "elementlist.js",
        },
        "namespace": "namespace.html",
        "package": "package.html",
        "class": "class.html",
        "source": "source.html",
    },
    "variables": {
        "title": "API documentation",
    },
    "settings": {
        "progressbar": True,
        "external_url": "http://php.net/manual/",
    },
}

REQUIRED_TEMPLATES = ("common", "namespace", "package", "class", "source")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Configuration file not found: {p}"
            raise ConfigurationError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Cannot parse configuration file {p}: {e}"
            raise ConfigurationError(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Configuration file {p} must contain a mapping"
            raise ConfigurationError(msg)
        config = deep_merge(config, _resolve_paths(user_config, p.parent))
    validate_config(config)
    return config


def _resolve_paths(user_config: dict[str, Any], base: Path) -> dict[str, Any]:
    """Make resource sources and the template directory absolute."""
    resolved = dict(user_config)
    resources = resolved.get("resources")
    if isinstance(resources, dict):
        resolved["resources"] = {
            str((base / src).resolve()): dest for src, dest in resources.items()
        }
    templates = resolved.get("templates")
    if isinstance(templates, dict) and templates.get("directory"):
        resolved["templates"] = {
            **templates,
            "directory": str((base / templates["directory"]).resolve()),
        }
    return resolved


def validate_config(config: dict[str, Any]) -> None:
    """Check the sections every run needs; filename patterns are checked on use."""
    for section in ("resources", "filenames", "templates", "variables", "settings"):
        if not isinstance(config.get(section), dict):
            msg = f"Configuration section '{section}' must be a mapping"
            raise ConfigurationError(msg)
    templates = config["templates"]
    missing = [k for k in REQUIRED_TEMPLATES if not templates.get(k)]
    if missing:
        msg = f"Template(s) not defined: {', '.join(missing)}"
        raise ConfigurationError(msg)
    if not isinstance(templates["common"], dict):
        msg = "Configuration 'templates.common' must map output names to templates"
        raise ConfigurationError(msg)
