"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from apiref.deep_merge import deep_merge
from apiref.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "project_dir": ".",
    "repository_url": "https://github.com/Leaflet/Leaflet.git",
    "cache_dir": "leaflet-repo-cache",
    "api_dir": "hub/develop/api",
    "link_prefix": "/develop/api",
    "sidebar": {
        "path": "hub/.vitepress/generated-sidebars/api-sidebar.ts",
        "group_by_major": False,
    },
    "tags_limit": 5,
    "current_version": None,
    "namespace_prefix": "L.",
    "leafdoc": {
        "source_subdir": "src",
        "command": ["node", "{driver}", "{project_dir}", "{source_dir}"],
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Invalid configuration file {p}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    return config


def config_path(config: dict[str, Any], value: str) -> Path:
    """Resolve a configured path against the project directory."""
    p = Path(value)
    if p.is_absolute():
        return p
    return (Path(config["project_dir"]) / p).resolve()
