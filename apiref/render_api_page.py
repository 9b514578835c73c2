"""Logic for rendering the API reference page of one version."""

from apiref.models import RootDoc
from apiref.render_class_doc import render_class_doc

DISCLAIMER = '<!-- This file is auto-generated with the script "main.py" -->'

STYLESHEET = """<style>
.default-value {
    font-size: 0.9em;
    color: var(--text-secondary);
}

.param-definition {
    white-space: nowrap;
    padding-inline-start: 10px;
}

.param-definition:not(:last-child):after {
    content: ',';
}

.option-definition {
    white-space: nowrap;
}

.property-definition {
    white-space: nowrap;
}

.pane-definition {
    white-space: nowrap;
}
</style>"""


def render_api_page(
    version: str,
    root: RootDoc,
    *,
    namespace_prefix: str = "L.",
) -> str:
    """Render every class of a version into one Markdown document."""
    parts = ["---", "---", "", DISCLAIMER, "", f"# API Reference - {version}", ""]
    for class_doc in root.values():
        parts.append(
            render_class_doc(class_doc, root, namespace_prefix=namespace_prefix)
        )
    parts += [STYLESHEET, ""]
    return "\n".join(parts)
