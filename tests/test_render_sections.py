"""Tests for the Markdown rendering of sections."""

from apiref.aggregate_sections import InheritedGroup
from apiref.md_table import escape_pipes, md_table
from apiref.models import ClassDoc, Documentable, Param, Section, SectionKind
from apiref.render_sections import (
    RenderContext,
    format_default,
    inherited_title,
    kind_anchor,
    kind_heading,
    params_string,
    render_inherited_group,
    render_kind,
    render_own_sections,
    render_table,
)
from apiref.slugify import slugify

CTX = RenderContext()


def _section(
    name: str, *docs: Documentable, comments: list[str] | None = None
) -> Section:
    return Section(
        name=name,
        comments=comments or [],
        documentables={d.name: d for d in docs},
    )


def test_slugify() -> None:
    """Test anchor slug generation."""
    assert slugify("Marker-options-list") == "marker-options-list"
    assert slugify("  Tile Layer  ") == "tile-layer"
    assert slugify("Tile\t \nLayer") == "tile-layer"
    assert slugify("L.Util") == "l.util"
    assert slugify("Größe") == "gr%C3%B6%C3%9Fe"
    assert slugify("a/b?c") == "a%2Fb%3Fc"


def test_md_table() -> None:
    """Test Markdown table generation."""
    assert md_table(["A"], []) == ""

    headers = ["Name", "Value"]
    rows = [["A", "1"], ["B", "2"]]
    expected = "| Name | Value |\n| --- | --- |\n| A | 1 |\n| B | 2 |"
    assert md_table(headers, rows) == expected


def test_escape_pipes() -> None:
    """Test escaping of table cell separators."""
    assert escape_pipes("String|HTMLElement") == "String\\|HTMLElement"
    assert escape_pipes("Number") == "Number"


def test_format_default() -> None:
    """Test rendering of default values."""
    assert format_default(None) == "none"
    assert format_default(True) == "true"
    assert format_default(False) == "false"
    assert format_default(0) == "0"
    assert format_default("'overlayPane'") == "'overlayPane'"


def test_kind_anchor_and_heading() -> None:
    """Test the stable anchors of kind headings."""
    assert kind_anchor("Marker", SectionKind.METHOD) == "marker-methods-list"
    assert kind_anchor("Marker", SectionKind.CONSTRUCTOR) == "marker-constructor-list"
    anchor = kind_anchor("Tile Layer", SectionKind.PROPERTY)
    assert anchor == "tile-layer-properties-list"
    assert (
        kind_heading("Map", SectionKind.PANE) == "### Panes {#map-panes-list}"
    )


def test_params_string_escapes_types() -> None:
    """Test parameter rendering and escaping."""
    params = [Param("latlng", "LatLng"), Param("el", "String|HTMLElement"), Param("x")]
    assert params_string(params) == (
        '<div class="param-definition">latlng: LatLng</div>'
        '<div class="param-definition">el: String\\|HTMLElement</div>'
        '<div class="param-definition">x: </div>'
    )
    assert params_string([]) == ""


def test_constructor_table() -> None:
    """Test constructor signatures with the namespace prefix."""
    doc = Documentable(
        name="marker",
        comments=["Instantiates a Marker."],
        params=[Param("latlng", "LatLng")],
    )
    table = render_table(SectionKind.CONSTRUCTOR, _section("__default", doc), CTX)
    assert table.splitlines() == [
        "| Signature | Description |",
        "| --- | --- |",
        '| L.marker(<div class="param-definition">latlng: LatLng</div>) '
        "| Instantiates a Marker. |",
    ]

    bare = render_table(
        SectionKind.CONSTRUCTOR,
        _section("__default", doc),
        RenderContext(namespace_prefix=""),
    )
    assert "| marker(" in bare


def test_option_rows() -> None:
    """Test option cells with types and default badges."""
    docs = (
        Documentable(name="opacity", type="Number", default_value=1.0, comments=["A"]),
        Documentable(name="pane", type="String|null", comments=["B", "C"]),
    )
    section = _section("__default", *docs)
    rows = render_table(SectionKind.OPTION, section, CTX).splitlines()
    assert rows[0] == "| Option | Description |"
    assert rows[2] == (
        '| <div class="option-definition">opacity (Number)</div>'
        "<span class='default-value'>default: 1.0</span> | A |"
    )
    assert rows[3] == (
        '| <div class="option-definition">pane (String\\|null)</div>'
        "<span class='default-value'>default: none</span> | B C |"
    )


def test_event_rows() -> None:
    """Test event cells with and without payload types."""
    docs = (
        Documentable(name="click", type="MouseEvent", comments=["Clicked."]),
        Documentable(name="unload", comments=["Gone."]),
    )
    section = _section("__default", *docs)
    rows = render_table(SectionKind.EVENT, section, CTX).splitlines()
    assert rows[0] == "| Event | Data | Description |"
    assert rows[2] == "| click | MouseEvent | Clicked. |"
    assert rows[3] == "| unload |  | Gone. |"


def test_method_and_function_rows() -> None:
    """Test method signatures and the void return fallback."""
    docs = (
        Documentable(
            name="setZIndex", params=[Param("zIndex", "Number")], type="this"
        ),
        Documentable(name="redraw"),
        Documentable(name="getBounds", type="LatLngBounds|null"),
    )
    section = _section("__default", *docs)
    rows = render_table(SectionKind.METHOD, section, CTX).splitlines()
    assert rows[2] == (
        '| .setZIndex(<div class="param-definition">zIndex: Number</div>): this |  |'
    )
    assert rows[3] == "| .redraw(): void |  |"
    assert rows[4] == "| .getBounds(): LatLngBounds\\|null |  |"
    assert render_table(SectionKind.FUNCTION, section, CTX) == render_table(
        SectionKind.METHOD, section, CTX
    )


def test_property_and_pane_rows() -> None:
    """Test property and pane cells."""
    prop = Documentable(name="dragging", type="Handler", comments=["Drag handler."])
    rows = render_table(SectionKind.PROPERTY, _section("__default", prop), CTX)
    assert rows.splitlines()[2] == (
        '| <div class="property-definition">dragging (Handler)</div> | Drag handler. |'
    )

    pane = Documentable(name="tilePane", type="HTMLElement", default_value=200)
    bare = Documentable(name="mapPane", type="HTMLElement")
    rows = render_table(SectionKind.PANE, _section("__default", pane, bare), CTX)
    assert rows.splitlines()[0] == "| Pane | Description |"
    assert rows.splitlines()[2] == (
        '| <div class="pane-definition">tilePane (HTMLElement)</div> '
        "<span class='default-value'>z-index: 200</span> |  |"
    )
    assert "z-index: none" in rows.splitlines()[3]


def test_multiline_comments_stay_in_one_cell() -> None:
    """Test that line breaks in comments do not break the table."""
    doc = Documentable(name="x", comments=["first\nline", "second"])
    table = render_table(SectionKind.EVENT, _section("__default", doc), CTX)
    assert table.splitlines()[2] == "| x |  | first line second |"


def test_default_section_has_no_subheading() -> None:
    """Test that only named sections get a sub-heading."""
    doc = Documentable(name="on")
    lines = render_own_sections(
        SectionKind.METHOD,
        [_section("__default", doc), _section("Layer events", doc, comments=["Note."])],
        CTX,
    )
    headings = [line for line in lines if line.startswith("#")]
    assert headings == ["#### Layer events"]
    named = lines.index("#### Layer events")
    assert lines[named + 2] == "Note."


def test_inherited_titles() -> None:
    """Test the collapsible block titles for inherited sections."""
    layer = ClassDoc(id="layer", name="Layer")
    assert (
        inherited_title(SectionKind.OPTION, Section(name="__default"), layer)
        == "Options inherited from Layer"
    )
    assert (
        inherited_title(SectionKind.EVENT, Section(name="Popup events"), layer)
        == "Popup events inherited from Layer"
    )


def test_inherited_group_is_collapsible() -> None:
    """Test that inherited sections are wrapped in collapsible blocks."""
    layer = ClassDoc(id="layer", name="Layer")
    group = InheritedGroup(
        class_doc=layer,
        sections=[_section("__default", Documentable(name="add", type="Event"))],
    )
    lines = render_inherited_group(SectionKind.EVENT, group, CTX)
    assert lines[0] == '<CollapsibleData title="Events inherited from Layer">'
    assert "| add | Event |  |" in "\n".join(lines)
    assert lines[-2:] == ["</CollapsibleData>", ""]


def test_render_kind_empty() -> None:
    """Test that a kind with no content emits nothing."""
    assert render_kind("Marker", SectionKind.PROPERTY, [], [], CTX) == []


def test_render_kind_inherited_only() -> None:
    """Test that inherited content alone still produces the heading."""
    group = InheritedGroup(
        class_doc=ClassDoc(id="evented", name="Evented"),
        sections=[_section("__default", Documentable(name="on"))],
    )
    lines = render_kind("Marker", SectionKind.METHOD, [], [group], CTX)
    assert lines[0] == "### Methods {#marker-methods-list}"
    assert lines[2] == '<CollapsibleData title="Methods inherited from Evented">'
