"""Logic for rendering the documentation block of one class."""

from apiref.aggregate_sections import aggregate_sections
from apiref.models import ClassDoc, RootDoc, SectionKind
from apiref.render_sections import (
    RenderContext,
    render_constructors,
    render_examples,
    render_kind,
)

# Order in which the aggregated kinds follow Examples and Constructor.
KIND_ORDER = (
    SectionKind.OPTION,
    SectionKind.EVENT,
    SectionKind.METHOD,
    SectionKind.FUNCTION,
    SectionKind.PROPERTY,
    SectionKind.PANE,
)


def render_class_doc(
    class_doc: ClassDoc,
    root: RootDoc,
    *,
    namespace_prefix: str = "L.",
) -> str:
    """Render a class in Markdown, its own content before inherited content."""
    ctx = RenderContext(namespace_prefix=namespace_prefix)
    sections = aggregate_sections(class_doc, root)

    parts = [f"## {class_doc.name}", ""]
    if class_doc.comments:
        parts += ["\n".join(class_doc.comments), ""]

    parts.extend(render_examples(class_doc))
    parts.extend(render_constructors(class_doc, ctx))
    for kind in KIND_ORDER:
        parts.extend(
            render_kind(
                class_doc.name,
                kind,
                sections.own_of(kind),
                sections.inherited_of(kind),
                ctx,
            )
        )

    return "\n".join(parts).rstrip() + "\n"
