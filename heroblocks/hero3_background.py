"""Decorative background layers: blurred shapes and thin vertical guide lines."""

from __future__ import annotations

from dataclasses import dataclass

from .markup import Element, element

STAR_FILL = "rgba(255, 255, 255, 0.12)"
STAR2_FILL = "rgba(139, 77, 255, 0.1)"
STAR_ICON_CLASS = "fa-solid fa-star"
STAR_ICON_STYLE = "font-size: 240px; color: rgba(105, 71, 255, 0.12); opacity: 0.7;"

_FULL_COVER_STYLE = "position: absolute; top: 0; left: 0; width: 100%; height: 100%;"


def _block_style(*declarations: str) -> str:
    """Lay out CSS declarations one per line, indented as in a template block."""
    lines = "".join(f"        {declaration}\n" for declaration in declarations)
    return f"\n{lines}    "


_RECTANGLE_STYLE = _block_style(
    "position: absolute;",
    "width: 80vw;",
    "max-width: 900px;",
    "height: auto;",
    "aspect-ratio: 2/3;",
    "top: -30vh;",
    "left: -20vw;",
    "transform: rotate(-31.91deg);",
    "filter: blur(12px);",
    "z-index: 23;",
    "border-radius: 70px;",
    "background: linear-gradient(135deg, rgba(105, 71, 255, 0.1), rgba(139, 77, 255, 0.1));",
)

_LINES_GROUP_STYLE = (
    "display: flex; align-items: center; flex-wrap: nowrap; gap: 60px; position: absolute; "
    "width: 120px; height: 953.5px; top: 33px; left: {left}px; z-index: {z};"
)


def _vector_style(z_index: int) -> str:
    return (
        "flex-shrink: 0; position: relative; width: 0.4px; height: 927px; "
        f"z-index: {z_index};"
    )


def _circle(color: str) -> Element:
    """A circle stretched to fill its box."""
    return element(
        "svg",
        {
            "viewBox": "0 0 100 100",
            "preserveAspectRatio": "none",
            "style": "width: 100%; height: 100%;",
        },
        element("circle", {"cx": "50", "cy": "50", "r": "50", "fill": color}),
    )


@dataclass
class BackgroundShapes:
    """Blurred gradient rectangles, circles and a large star icon."""

    container_style: str = _FULL_COVER_STYLE
    rectangle_style: str = _RECTANGLE_STYLE
    star_style: str = (
        "position: relative; width: 390.262px; height: 412.927px; "
        "margin: 711.381px 0 0 224.508px; filter: blur(25px); z-index: 58;"
    )
    rectangle1_style: str = _RECTANGLE_STYLE
    star2_style: str = (
        "position: absolute; width: 280.238px; height: 328.237px; top: -150.746px; "
        "left: 50%; transform: translate(82.32%, 0); filter: blur(25px);"
    )
    star1f_style: str = (
        "position: absolute; width: 372.744px; height: 259.888px; top: 650.956px; "
        "left: 1227.403px; filter: blur(25px); z-index: 57;"
    )

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.container_style},
            element(
                "div",
                {"style": self.rectangle_style},
                element("div", {"style": self.star_style}, _circle(STAR_FILL)),
            ),
            element("div", {"style": self.rectangle1_style}),
            element("div", {"style": self.star2_style}, _circle(STAR2_FILL)),
            element(
                "div",
                {"style": self.star1f_style},
                element("i", {"class": STAR_ICON_CLASS, "style": STAR_ICON_STYLE}),
            ),
        )


@dataclass
class BackgroundLines:
    """Two groups of three hairline vertical lines."""

    container_style: str = _FULL_COVER_STYLE
    left_lines_style: str = _LINES_GROUP_STYLE.format(left=335, z=1)
    vector10_style: str = _vector_style(2)
    vector11_style: str = _vector_style(3)
    vector12_style: str = _vector_style(4)
    right_lines_style: str = _LINES_GROUP_STYLE.format(left=985, z=5)
    vector14_style: str = _vector_style(6)
    vector15_style: str = _vector_style(7)
    vector16_style: str = _vector_style(8)

    def render(self) -> Element:
        left = (self.vector10_style, self.vector11_style, self.vector12_style)
        right = (self.vector14_style, self.vector15_style, self.vector16_style)
        return element(
            "div",
            {"style": self.container_style},
            element(
                "div",
                {"style": self.left_lines_style},
                [element("div", {"style": style}) for style in left],
            ),
            element(
                "div",
                {"style": self.right_lines_style},
                [element("div", {"style": style}) for style in right],
            ),
        )


@dataclass
class Background:
    """A non-interactive layer holding the shapes and the guide lines."""

    style: str = (
        "position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "pointer-events: none; z-index: 0;"
    )
    class_: str = ""

    def render(self) -> Element:
        return element(
            "div",
            {
                "style": self.style,
                "class": self.class_ or None,
                "role": "presentation",
                "aria-hidden": "true",
            },
            BackgroundShapes().render(),
            BackgroundLines().render(),
        )