from heroblocks.hero3_background import (
    STAR2_FILL,
    STAR_FILL,
    STAR_ICON_CLASS,
    Background,
    BackgroundLines,
    BackgroundShapes,
)
from heroblocks.markup import Element


def _svg_fill(node: Element) -> str:
    svg = node.children[0]
    assert svg.tag == "svg"
    circle = svg.children[0]
    assert circle.tag == "circle"
    return circle.attrs["fill"]


def test_shapes_structure_and_container_style():
    shapes = BackgroundShapes()
    root = shapes.render()
    assert root.tag == "div"
    assert root.attrs["style"] == shapes.container_style
    assert len(root.children) == 4
    assert [child.attrs["style"] for child in root.children] == [
        shapes.rectangle_style,
        shapes.rectangle1_style,
        shapes.star2_style,
        shapes.star1f_style,
    ]


def test_shapes_circle_fills():
    root = BackgroundShapes().render()
    star = root.children[0].children[0]
    assert _svg_fill(star) == STAR_FILL
    assert _svg_fill(root.children[2]) == STAR2_FILL


def test_shapes_svg_attributes():
    root = BackgroundShapes().render()
    svg = root.children[2].children[0]
    assert svg.attrs["viewBox"] == "0 0 100 100"
    assert svg.attrs["preserveAspectRatio"] == "none"
    circle = svg.children[0]
    assert (circle.attrs["cx"], circle.attrs["cy"], circle.attrs["r"]) == ("50", "50", "50")


def test_shapes_star_icon_and_empty_rectangle():
    root = BackgroundShapes().render()
    assert root.children[1].children == []
    icon = root.children[3].children[0]
    assert icon.tag == "i"
    assert icon.attrs["class"] == STAR_ICON_CLASS


def test_rectangle_default_keeps_declarations():
    shapes = BackgroundShapes()
    assert "aspect-ratio: 2/3;" in shapes.rectangle_style
    assert shapes.rectangle_style == shapes.rectangle1_style


def test_shapes_custom_style_is_used():
    root = BackgroundShapes(star_style="opacity: 0;").render()
    assert root.children[0].children[0].attrs["style"] == "opacity: 0;"


def test_lines_groups_in_order():
    lines = BackgroundLines()
    root = lines.render()
    assert root.attrs["style"] == lines.container_style
    left, right = root.children
    assert left.attrs["style"] == lines.left_lines_style
    assert right.attrs["style"] == lines.right_lines_style
    assert [c.attrs["style"] for c in left.children] == [
        lines.vector10_style,
        lines.vector11_style,
        lines.vector12_style,
    ]
    assert [c.attrs["style"] for c in right.children] == [
        lines.vector14_style,
        lines.vector15_style,
        lines.vector16_style,
    ]


def test_lines_custom_vector_style():
    root = BackgroundLines(vector15_style="width: 1px;").render()
    assert root.children[1].children[1].attrs["style"] == "width: 1px;"


def test_background_wraps_shapes_and_lines():
    background = Background()
    root = background.render()
    assert root.attrs["role"] == "presentation"
    assert root.attrs["aria-hidden"] == "true"
    assert root.attrs["style"] == background.style
    assert root.children == [BackgroundShapes().render(), BackgroundLines().render()]


def test_background_renders_html():
    html_text = Background().render().render()
    assert html_text.startswith("<div ")
    assert html_text.endswith("</div>")
    assert html_text.count("<circle") == 2
    assert 'role="presentation"' in html_text