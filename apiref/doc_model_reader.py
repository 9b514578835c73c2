"""Build the documentation model from Leafdoc's JSON output."""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any

from apiref.errors import ModelError
from apiref.models import (
    ClassDoc,
    Documentable,
    Param,
    RootDoc,
    Section,
    SectionKind,
    SuperSection,
)
from apiref.working_tree import WorkingTree

logger = logging.getLogger(__name__)

_KINDS_BY_KEY = {kind.value: kind for kind in SectionKind}

LEAFDOC_DRIVER = Path(__file__).with_name("leafdoc_json.mjs")


def _str_list(v: object) -> list[str]:
    if not v:
        return []
    if isinstance(v, str):
        return [v]
    return [str(x) for x in v]


def _expect_dict(v: object, where: str) -> dict[str, Any]:
    if v is None:
        return {}
    if not isinstance(v, dict):
        msg = f"Expected an object at {where}, got {type(v).__name__}"
        raise ModelError(msg)
    return v


def _parse_params(raw: object, where: str) -> list[Param]:
    # Leafdoc emits params as an object keyed by name; accept a list too.
    values = raw.values() if isinstance(raw, dict) else (raw or [])
    params = []
    for value in values:
        p = _expect_dict(value, where)
        params.append(Param(name=str(p.get("name") or ""), type=p.get("type")))
    return params


def _parse_documentable(key: str, raw: object, where: str) -> Documentable:
    d = _expect_dict(raw, where)
    return Documentable(
        name=str(d.get("name") or key),
        aka=_str_list(d.get("aka")),
        comments=_str_list(d.get("comments")),
        params=_parse_params(d.get("params"), f"{where}.params"),
        type=d.get("type"),
        optional=bool(d.get("optional")),
        default_value=d.get("defaultValue"),
        id=d.get("id"),
    )


def _parse_section(key: str, raw: object, where: str) -> Section:
    s = _expect_dict(raw, where)
    documentables = {
        name: _parse_documentable(name, d, f"{where}.{name}")
        for name, d in _expect_dict(s.get("documentables"), where).items()
    }
    return Section(
        name=str(s.get("name") or key),
        aka=_str_list(s.get("aka")),
        comments=_str_list(s.get("comments")),
        uninheritable=bool(s.get("uninheritable")),
        type=str(s.get("type") or ""),
        documentables=documentables,
        id=s.get("id"),
    )


def _parse_supersection(key: str, raw: object, where: str) -> SuperSection:
    ss = _expect_dict(raw, where)
    sections = {
        name: _parse_section(name, s, f"{where}.{name}")
        for name, s in _expect_dict(ss.get("sections"), where).items()
    }
    return SuperSection(
        name=str(ss.get("name") or key),
        aka=_str_list(ss.get("aka")),
        comments=_str_list(ss.get("comments")),
        sections=sections,
        id=ss.get("id"),
    )


def _parse_class(key: str, raw: object) -> ClassDoc:
    c = _expect_dict(raw, key)
    if not c.get("name"):
        msg = f"Class entry '{key}' has no name"
        raise ModelError(msg)

    supersections: dict[SectionKind, SuperSection] = {}
    for ss_key, ss in _expect_dict(c.get("supersections"), key).items():
        kind = _KINDS_BY_KEY.get(ss_key)
        if kind is None:
            logger.debug("Ignoring supersection '%s' of %s", ss_key, key)
            continue
        supersections[kind] = _parse_supersection(ss_key, ss, f"{key}.{ss_key}")

    return ClassDoc(
        id=key,
        name=str(c["name"]),
        aka=_str_list(c.get("aka")),
        comments=_str_list(c.get("comments")),
        supersections=supersections,
        inherits=_str_list(c.get("inherits")),
        relationships=list(c.get("relationships") or []),
        anchor_id=c.get("id"),
    )


def parse_root_doc(raw: object) -> RootDoc:
    """Convert the parser's JSON object into the documentation model."""
    return {key: _parse_class(key, c) for key, c in _expect_dict(raw, "root").items()}


def load_root_doc(path: Path) -> RootDoc:
    """Load and parse a Leafdoc JSON file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Invalid Leafdoc JSON in {path}: {e}"
        raise ModelError(msg) from e
    return parse_root_doc(raw)


def leafdoc_command(tree: WorkingTree, config: dict[str, Any]) -> list[str]:
    """Expand the configured Leafdoc command for a working tree."""
    leafdoc = config["leafdoc"]
    values = {
        "driver": str(LEAFDOC_DRIVER),
        "project_dir": str(Path(config["project_dir"]).resolve()),
        "source_dir": str(tree.source_dir(leafdoc["source_subdir"])),
    }
    return [str(arg).format(**values) for arg in leafdoc["command"]]


def generate_root_doc(tree: WorkingTree, config: dict[str, Any]) -> RootDoc:
    """Run Leafdoc over a working tree and return the parsed model."""
    cmd = leafdoc_command(tree, config)
    logger.info("Running Leafdoc on %s (%s)", tree.path, tree.label)
    logger.debug("$ %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            check=True,
            capture_output=True,
            text=True,
            cwd=Path(config["project_dir"]),
        )
    except FileNotFoundError as e:
        msg = f"Leafdoc could not be started: {e}"
        raise ModelError(msg) from e
    except subprocess.CalledProcessError as e:
        msg = f"Leafdoc failed for {tree.label}: {(e.stderr or '').strip()}"
        raise ModelError(msg) from e

    try:
        raw = json.loads(proc.stdout)
    except json.JSONDecodeError as e:
        msg = f"Leafdoc produced invalid JSON for {tree.label}: {e}"
        raise ModelError(msg) from e
    return parse_root_doc(raw)
