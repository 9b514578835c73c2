"""Sidebar manifest listing the generated API versions."""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

SIDEBAR_HEADER = "// This file is auto-generated by main.py"

MAJOR_VERSION_RE = re.compile(r"^v?(\d+)\.")


@dataclass
class SidebarItem:
    """One entry of the VitePress sidebar."""

    text: str
    link: str
    items: list["SidebarItem"] = field(default_factory=list)
    collapsed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the item, omitting unset optional fields."""
        out: dict[str, Any] = {"text": self.text, "link": self.link}
        if self.items:
            out["items"] = [i.to_dict() for i in self.items]
        if self.collapsed is not None:
            out["collapsed"] = self.collapsed
        return out


def group_by_major(sidebar: list[SidebarItem]) -> list[SidebarItem]:
    """Group items under ``<major>.x.x`` entries, in first-seen order.

    Items whose text is not a version end up under ``Other``. Each group
    links to its first item and starts collapsed.
    """
    groups: dict[str, list[SidebarItem]] = {}
    for item in sidebar:
        m = MAJOR_VERSION_RE.match(item.text)
        key = f"{m.group(1)}.x.x" if m else "Other"
        text = re.sub(r"^v", "", item.text) if m else item.text
        groups.setdefault(key, []).append(SidebarItem(text=text, link=item.link))

    return [
        SidebarItem(text=key, link=items[0].link, items=items, collapsed=True)
        for key, items in groups.items()
    ]


def render_sidebar(sidebar: list[SidebarItem]) -> str:
    """Render the sidebar as a TypeScript module."""
    data = json.dumps([i.to_dict() for i in sidebar], indent="\t")
    return f"{SIDEBAR_HEADER}\nexport default {data};\n"


def write_sidebar_file(path: Path, sidebar: list[SidebarItem]) -> None:
    """Write the sidebar manifest, creating its directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_sidebar(sidebar), encoding="utf-8")
