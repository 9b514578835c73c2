"""Shared fixtures: a small Leafdoc model shaped like Leaflet's."""

from typing import Any

import pytest

from apiref.doc_model_reader import parse_root_doc
from apiref.models import RootDoc


def _section(
    name: str, documentables: dict[str, Any], **extra: Any
) -> dict[str, Any]:
    return {
        "name": name,
        "aka": [],
        "comments": [],
        "documentables": documentables,
        **extra,
    }


def _supersection(name: str, sections: dict[str, Any]) -> dict[str, Any]:
    return {"name": name, "aka": [], "comments": [], "sections": sections}


@pytest.fixture
def raw_root_doc() -> dict[str, Any]:
    """Return Leafdoc JSON for Evented, Layer and Marker."""
    return {
        "evented": {
            "name": "Evented",
            "id": "evented",
            "aka": [],
            "comments": ["Mixin for firing and listening to events."],
            "inherits": [],
            "relationships": [],
            "supersections": {
                "method": _supersection(
                    "method",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "on": {
                                    "name": "on",
                                    "comments": ["Adds a listener."],
                                    "params": {
                                        "type": {"name": "type", "type": "String"},
                                        "fn": {"name": "fn", "type": "Function"},
                                    },
                                    "type": "this",
                                },
                            },
                        ),
                    },
                ),
            },
        },
        "layer": {
            "name": "Layer",
            "id": "layer",
            "aka": [],
            "comments": [],
            "inherits": ["evented"],
            "relationships": [],
            "supersections": {
                "option": _supersection(
                    "option",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "pane": {
                                    "name": "pane",
                                    "comments": ["Map pane where the layer is added."],
                                    "type": "String",
                                    "defaultValue": "'overlayPane'",
                                },
                            },
                        ),
                    },
                ),
                "event": _supersection(
                    "event",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "add": {
                                    "name": "add",
                                    "comments": ["Fired after the layer is added."],
                                    "type": "Event",
                                },
                            },
                        ),
                    },
                ),
            },
        },
        "marker": {
            "name": "Marker",
            "id": "marker",
            "aka": [],
            "comments": ["L.Marker is used to display clickable icons."],
            "inherits": ["layer"],
            "relationships": [],
            "supersections": {
                "example": _supersection(
                    "example",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "__default": {
                                    "name": "__default",
                                    "comments": ["```js", "L.marker([50, 30]);", "```"],
                                },
                            },
                        ),
                    },
                ),
                "constructor": _supersection(
                    "constructor",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "l.marker": {
                                    "name": "marker",
                                    "comments": ["Instantiates a Marker."],
                                    "params": {
                                        "latlng": {"name": "latlng", "type": "LatLng"},
                                        "options": {
                                            "name": "options",
                                            "type": "Marker options",
                                        },
                                    },
                                },
                            },
                        ),
                    },
                ),
                "option": _supersection(
                    "option",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "icon": {
                                    "name": "icon",
                                    "comments": ["Icon instance to use."],
                                    "type": "Icon",
                                    "defaultValue": "*",
                                },
                                "keyboard": {
                                    "name": "keyboard",
                                    "comments": ["Whether the marker is focusable."],
                                    "type": "Boolean",
                                    "defaultValue": True,
                                },
                            },
                        ),
                        "Interaction": _section(
                            "Interaction",
                            {
                                "draggable": {
                                    "name": "draggable",
                                    "comments": ["Whether the marker is draggable."],
                                    "type": "Boolean|Function",
                                    "defaultValue": False,
                                },
                            },
                        ),
                    },
                ),
                "method": _supersection(
                    "method",
                    {
                        "__default": _section(
                            "__default",
                            {
                                "getLatLng": {
                                    "name": "getLatLng",
                                    "comments": ["Returns the position."],
                                    "type": "LatLng",
                                },
                                "setLatLng": {
                                    "name": "setLatLng",
                                    "comments": ["Changes the position."],
                                    "params": {
                                        "latlng": {"name": "latlng", "type": "LatLng"},
                                    },
                                    "type": "this",
                                },
                            },
                        ),
                    },
                ),
            },
        },
    }


@pytest.fixture
def root_doc(raw_root_doc: dict[str, Any]) -> RootDoc:
    """Return the parsed sample model."""
    return parse_root_doc(raw_root_doc)
