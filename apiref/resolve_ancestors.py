"""Flatten a class's inheritance graph into an ordered ancestor list."""

from apiref.errors import ModelError
from apiref.models import ClassDoc, RootDoc


def _lookup(root: RootDoc, class_id: str, referrer: str | None) -> ClassDoc:
    doc = root.get(class_id)
    if doc is None:
        if referrer is None:
            msg = f"Unknown class '{class_id}'"
        else:
            msg = f"Class '{referrer}' inherits from unknown class '{class_id}'"
        raise ModelError(msg)
    return doc


def resolve_ancestors(class_id: str, root: RootDoc) -> list[ClassDoc]:
    """Return every ancestor of a class, depth-first and pre-order.

    Immediate parents come in ``inherits`` order, each followed by its own
    ancestors. An ancestor reachable through several parents appears once per
    path. A cycle in ``inherits`` raises ``ModelError``.
    """
    start = _lookup(root, class_id, None)
    ancestors: list[ClassDoc] = []

    def walk(doc: ClassDoc, path: list[str]) -> None:
        for parent_id in doc.inherits:
            if parent_id in path:
                chain = " -> ".join([*path, parent_id])
                msg = f"Inheritance cycle detected: {chain}"
                raise ModelError(msg)
            parent = _lookup(root, parent_id, doc.id)
            ancestors.append(parent)
            walk(parent, [*path, parent_id])

    walk(start, [class_id])
    return ancestors
