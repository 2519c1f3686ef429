"""A small HTML element tree with escaping and serialisation."""

from __future__ import annotations

import html
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union

AttrValue = Union[str, bool, int, float, None]

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9-]*\Z")
_ATTR_NAME = re.compile(r"[^\s\"'>/=\x00-\x1f]+\Z")


def _flatten(nodes: Iterable[object]) -> Iterator[Union["Element", str]]:
    for node in nodes:
        if node is None:
            continue
        if isinstance(node, (Element, str)):
            yield node
        elif isinstance(node, bool):
            raise TypeError("booleans cannot be used as element children")
        elif isinstance(node, (int, float)):
            yield str(node)
        elif isinstance(node, Iterable):
            yield from _flatten(node)
        else:
            raise TypeError(f"unsupported child node: {type(node).__name__}")


@dataclass
class Element:
    """An HTML element with ordered attributes and child nodes."""

    tag: str
    attrs: dict[str, AttrValue] = field(default_factory=dict)
    children: list[Union["Element", str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not _TAG_NAME.match(self.tag):
            raise ValueError(f"invalid tag name: {self.tag!r}")
        for name in self.attrs:
            if not _ATTR_NAME.match(name):
                raise ValueError(f"invalid attribute name: {name!r}")
        self.children = list(_flatten(self.children))
        if self.tag.lower() in VOID_ELEMENTS and self.children:
            raise ValueError(f"void element <{self.tag}> cannot have children")

    def _render_attrs(self) -> str:
        parts = []
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
        return "".join(parts)

    def render(self) -> str:
        """Serialise the element and its subtree to HTML."""
        opening = f"<{self.tag}{self._render_attrs()}>"
        if self.tag.lower() in VOID_ELEMENTS:
            return opening
        inner = "".join(render(child) for child in self.children)
        return f"{opening}{inner}</{self.tag}>"


def element(tag: str, attrs: Mapping[str, AttrValue] | None = None, *args: object) -> Element:
    """Build an element; nested iterables of children are flattened and None is dropped."""
    return Element(tag, dict(attrs or {}), list(_flatten(args)))


def render(node: object) -> str:
    """Serialise an element, a text node, None or an iterable of nodes to HTML."""
    if node is None:
        return ""
    if isinstance(node, Element):
        return node.render()
    if isinstance(node, str):
        return html.escape(node, quote=False)
    return "".join(render(child) for child in _flatten([node]))