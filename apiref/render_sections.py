"""Rendering of documentation sections into Markdown blocks."""

from collections.abc import Callable
from dataclasses import dataclass

from apiref.aggregate_sections import InheritedGroup
from apiref.md_table import escape_pipes, md_table
from apiref.models import (
    DEFAULT_SECTION,
    ClassDoc,
    DefaultValue,
    Documentable,
    Param,
    Section,
    SectionKind,
)
from apiref.slugify import slugify

KIND_TITLES = {
    SectionKind.EXAMPLE: "Examples",
    SectionKind.CONSTRUCTOR: "Constructor",
    SectionKind.OPTION: "Options",
    SectionKind.EVENT: "Events",
    SectionKind.METHOD: "Methods",
    SectionKind.FUNCTION: "Functions",
    SectionKind.PROPERTY: "Properties",
    SectionKind.PANE: "Panes",
}


@dataclass(frozen=True)
class RenderContext:
    """Settings shared by every row of a page."""

    namespace_prefix: str = "L."


@dataclass(frozen=True)
class TablePolicy:
    """How the documentables of one kind are laid out in a table."""

    headers: list[str]
    row: Callable[[Documentable, RenderContext], list[str]]


def kind_anchor(class_name: str, kind: SectionKind) -> str:
    """Return the stable anchor of a kind heading, e.g. ``marker-options-list``."""
    suffix = "constructor" if kind is SectionKind.CONSTRUCTOR else KIND_TITLES[kind]
    return slugify(f"{class_name}-{suffix.lower()}-list")


def kind_heading(class_name: str, kind: SectionKind) -> str:
    """Return the ``###`` heading line of a kind, carrying its anchor."""
    return f"### {KIND_TITLES[kind]} {{#{kind_anchor(class_name, kind)}}}"


def format_default(value: DefaultValue) -> str:
    """Render a default value the way it reads in JavaScript."""
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _safe_type(type_: str | None) -> str:
    return escape_pipes(type_) if type_ else ""


def _description(doc: Documentable) -> str:
    return " ".join(doc.comments).replace("\n", " ").strip()


def params_string(params: list[Param]) -> str:
    """Render a parameter list; the stylesheet inserts the separating commas."""
    return "".join(
        f'<div class="param-definition">{p.name}: {_safe_type(p.type)}</div>'
        for p in params
    )


def _constructor_row(doc: Documentable, ctx: RenderContext) -> list[str]:
    signature = f"{ctx.namespace_prefix}{doc.name}({params_string(doc.params)})"
    return [signature, _description(doc)]


def _option_row(doc: Documentable, _ctx: RenderContext) -> list[str]:
    default = (
        f"<span class='default-value'>default: {format_default(doc.default_value)}"
        "</span>"
    )
    definition = (
        f'<div class="option-definition">{doc.name} ({_safe_type(doc.type)})</div>'
    )
    return [definition + default, _description(doc)]


def _event_row(doc: Documentable, _ctx: RenderContext) -> list[str]:
    return [doc.name, _safe_type(doc.type), _description(doc)]


def _method_row(doc: Documentable, _ctx: RenderContext) -> list[str]:
    returns = _safe_type(doc.type) or "void"
    return [f".{doc.name}({params_string(doc.params)}): {returns}", _description(doc)]


def _property_row(doc: Documentable, _ctx: RenderContext) -> list[str]:
    definition = (
        f'<div class="property-definition">{doc.name} ({_safe_type(doc.type)})</div>'
    )
    return [definition, _description(doc)]


def _pane_row(doc: Documentable, _ctx: RenderContext) -> list[str]:
    definition = (
        f'<div class="pane-definition">{doc.name} ({_safe_type(doc.type)})</div>'
    )
    z_index = (
        f"<span class='default-value'>z-index: {format_default(doc.default_value)}"
        "</span>"
    )
    return [f"{definition} {z_index}", _description(doc)]


TABLE_POLICIES: dict[SectionKind, TablePolicy] = {
    SectionKind.CONSTRUCTOR: TablePolicy(
        ["Signature", "Description"], _constructor_row
    ),
    SectionKind.OPTION: TablePolicy(["Option", "Description"], _option_row),
    SectionKind.EVENT: TablePolicy(["Event", "Data", "Description"], _event_row),
    SectionKind.METHOD: TablePolicy(["Signature", "Description"], _method_row),
    SectionKind.FUNCTION: TablePolicy(["Signature", "Description"], _method_row),
    SectionKind.PROPERTY: TablePolicy(["Property", "Description"], _property_row),
    SectionKind.PANE: TablePolicy(["Pane", "Description"], _pane_row),
}


def render_table(kind: SectionKind, section: Section, ctx: RenderContext) -> str:
    """Render the documentables of a section as a table."""
    policy = TABLE_POLICIES[kind]
    rows = [policy.row(doc, ctx) for doc in section.documentables.values()]
    return md_table(policy.headers, rows)


def _section_body(kind: SectionKind, section: Section, ctx: RenderContext) -> list[str]:
    parts = []
    if section.comments:
        parts += ["\n".join(section.comments), ""]
    table = render_table(kind, section, ctx)
    if table:
        parts += [table, ""]
    return parts


def render_own_sections(
    kind: SectionKind,
    sections: list[Section],
    ctx: RenderContext,
) -> list[str]:
    """Render a class's own sections, each under its name unless anonymous."""
    parts = []
    for section in sections:
        if not section.is_default:
            parts += [f"#### {section.name}", ""]
        parts.extend(_section_body(kind, section, ctx))
    return parts


def inherited_title(kind: SectionKind, section: Section, parent: ClassDoc) -> str:
    """Return the title of a collapsible inherited block."""
    label = KIND_TITLES[kind] if section.is_default else section.name
    return f"{label} inherited from {parent.name}"


def render_inherited_group(
    kind: SectionKind,
    group: InheritedGroup,
    ctx: RenderContext,
) -> list[str]:
    """Render an ancestor's sections as collapsible blocks."""
    parts = []
    for section in group.sections:
        title = inherited_title(kind, section, group.class_doc)
        parts += [f'<CollapsibleData title="{title}">', ""]
        parts.extend(_section_body(kind, section, ctx))
        parts += ["</CollapsibleData>", ""]
    return parts


def render_kind(
    class_name: str,
    kind: SectionKind,
    own: list[Section],
    inherited: list[InheritedGroup],
    ctx: RenderContext,
) -> list[str]:
    """Render one kind of a class: heading, own sections, then inherited groups.

    Returns no lines at all when there is neither own nor inherited content.
    """
    if not own and not inherited:
        return []
    parts = [kind_heading(class_name, kind), ""]
    parts.extend(render_own_sections(kind, own, ctx))
    for group in inherited:
        parts.extend(render_inherited_group(kind, group, ctx))
    return parts


def render_constructors(
    class_doc: ClassDoc,
    ctx: RenderContext,
) -> list[str]:
    """Render the constructor tables of a class, one per overload group."""
    ss = class_doc.supersection(SectionKind.CONSTRUCTOR)
    if ss is None:
        return []
    tables = [
        render_table(SectionKind.CONSTRUCTOR, section, ctx)
        for section in ss.sections.values()
        if section.documentables
    ]
    if not tables:
        return []
    parts = [kind_heading(class_doc.name, SectionKind.CONSTRUCTOR), ""]
    for table in tables:
        parts += [table, ""]
    return parts


def render_examples(class_doc: ClassDoc) -> list[str]:
    """Render the example snippets of a class."""
    ss = class_doc.supersection(SectionKind.EXAMPLE)
    if ss is None:
        return []
    bodies = []
    for section in ss.sections.values():
        example = section.documentables.get(DEFAULT_SECTION)
        if example is not None and example.comments:
            bodies.append("\n".join(example.comments))
    if not bodies:
        return []
    parts = [kind_heading(class_doc.name, SectionKind.EXAMPLE), ""]
    for body in bodies:
        parts += [body, ""]
    return parts
