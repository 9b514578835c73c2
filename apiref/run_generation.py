"""Orchestration of the multi-version API reference generation."""

import json
import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

from apiref.doc_model_reader import generate_root_doc
from apiref.errors import ApiRefError, ConfigError, RepositoryError
from apiref.git_repository import GitRepository
from apiref.load_config import config_path
from apiref.models import RootDoc
from apiref.organize_tags import organize_tags, strip_version_prefix
from apiref.render_api_page import render_api_page
from apiref.sidebar import SidebarItem, group_by_major, write_sidebar_file
from apiref.working_tree import WorkingTree

logger = logging.getLogger(__name__)

RootDocReader = Callable[[WorkingTree, dict[str, Any]], RootDoc]


def current_version_of(config: dict[str, Any]) -> str:
    """Return the configured version, falling back to package.json."""
    if config.get("current_version"):
        return str(config["current_version"])
    package_json = Path(config["project_dir"]) / "package.json"
    if not package_json.exists():
        msg = f"No current_version configured and no {package_json}"
        raise ApiRefError(msg)
    try:
        package = json.loads(package_json.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON in {package_json}: {e}"
        raise ConfigError(msg) from e
    version = package.get("version") if isinstance(package, dict) else None
    if not version:
        msg = f"{package_json} has no version field"
        raise ApiRefError(msg)
    return str(version)


def version_link(config: dict[str, Any], version: str) -> str:
    """Return the site link of a version's page."""
    return f"{config['link_prefix'].rstrip('/')}/{version}"


def empty_dir(path: Path) -> None:
    """Create a directory, removing anything it already contains."""
    if path.exists():
        for child in path.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
    path.mkdir(parents=True, exist_ok=True)


def write_version_page(
    version: str,
    root: RootDoc,
    api_dir: Path,
    config: dict[str, Any],
) -> Path:
    """Render one version's API page and write it to ``<api_dir>/<version>.md``."""
    md = render_api_page(version, root, namespace_prefix=config["namespace_prefix"])
    out_file = api_dir / f"{version}.md"
    out_file.write_text(md, encoding="utf-8")
    logger.info("Wrote %s", out_file)
    return out_file


def prepare_repository(repo: GitRepository, url: str, *, pull: bool) -> None:
    """Clone or refresh the tags cache, or check it can be reused as-is."""
    if pull:
        if not repo.exists():
            repo.clone(url)
        repo.fetch_tags()
    elif not repo.exists():
        msg = f"No repository cache at {repo.path}; run with --pull first"
        raise RepositoryError(msg)
    repo.clean()


def render_tag_versions(
    repo: GitRepository,
    config: dict[str, Any],
    current_version: str,
    api_dir: Path,
    read_root_doc: RootDocReader,
) -> list[SidebarItem]:
    """Render the newest release tags one after another.

    Each tag is checked out, read, rendered and written before the next
    checkout starts, since all tags share the one working tree.
    """
    tags = repo.tags()
    if not tags:
        logger.warning("No tags found. Make sure to fetch the tags first.")
        return []

    selected = organize_tags(tags, current_version)[: config["tags_limit"]]
    sidebar = []
    for tag in selected:
        logger.info("Processing tag: %s", tag)
        tree = repo.checkout(tag)
        root = read_root_doc(tree, config)
        version = strip_version_prefix(tag)
        write_version_page(version, root, api_dir, config)
        sidebar.append(SidebarItem(text=version, link=version_link(config, version)))
    return sidebar


def run_generation(
    config: dict[str, Any],
    *,
    pull: bool = False,
    repository: GitRepository | None = None,
    read_root_doc: RootDocReader = generate_root_doc,
) -> list[SidebarItem]:
    """Generate every version's API page and the sidebar manifest.

    Any failure propagates and aborts the whole run.
    """
    current_version = current_version_of(config)
    repo = repository or GitRepository(config_path(config, config["cache_dir"]))
    logger.info("Using repository cache at %s", repo.path)
    prepare_repository(repo, config["repository_url"], pull=pull)

    api_dir = config_path(config, config["api_dir"])
    empty_dir(api_dir)

    sidebar = render_tag_versions(repo, config, current_version, api_dir, read_root_doc)
    if config["sidebar"].get("group_by_major"):
        sidebar = group_by_major(sidebar)

    logger.info("Processing current version: %s", current_version)
    project_dir = Path(config["project_dir"]).resolve()
    project_tree = WorkingTree(path=project_dir, label="current")
    version = strip_version_prefix(current_version)
    write_version_page(version, read_root_doc(project_tree, config), api_dir, config)
    sidebar.insert(0, SidebarItem(text=version, link=version_link(config, version)))

    write_sidebar_file(config_path(config, config["sidebar"]["path"]), sidebar)
    logger.info("Completed generating API documentation!")
    return sidebar
