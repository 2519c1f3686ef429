"""Hero section with a badge, call-to-action button and process tabs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial

from .markup import Element, element

DEFAULT_HEADING = "Build Ultra-Fast Web Apps with Open SASS"
DEFAULT_DESCRIPTION = (
    "Open SASS brings modern Rust-powered speed to your web stack. Build scalable, "
    "reactive, and blazingly fast web apps with less effort and more performance."
)
DEFAULT_TABS: tuple[tuple[str, str, str], ...] = (
    ("connect", "Connect", "fas fa-link"),
    ("explore", "Explore", "fas fa-search"),
    ("activate", "Activate", "fas fa-bolt"),
)

_CONTAINER_STYLE = (
    "width: 100%; padding: 40px 64px 64px; display: flex; flex-direction: column; "
    "align-items: center; position: relative; overflow: hidden; "
    "min-height: calc(100vh - 96vh);"
)
_WRAPPER_STYLE = (
    "width: 100%; max-width: 1440px; display: flex; flex-direction: column; "
    "align-items: center; gap: 80px; flex: 1; position: relative; z-index: 10;"
)
_CONTENT_STYLE = (
    "display: flex; flex-direction: column; gap: 48px; align-items: center; width: 100%;"
)
_TITLE_STYLE = "font-size: 48px; font-weight: bold; color: white; text-align: center;"
_DESCRIPTION_STYLE = (
    "max-width: 700px; text-align: center; color: white; font-size: 18px; "
    "font-weight: 300; line-height: 1.6;"
)
_TABS_CONTAINER_STYLE = (
    "display: flex; justify-content: center; align-items: center; width: 100%;"
)
_TABLIST_STYLE = (
    "display: flex; gap: 16px; justify-content: center; align-items: center; "
    "border-radius: 12px; width: 100%; max-width: 800px;"
)
_ICON_BOX_STYLE = (
    "width: 24px; height: 24px; display: flex; align-items: center; justify-content: center;"
)


@dataclass
class Badge:
    """A pill-shaped badge with an icon and a short text."""

    icon: str = "fas fa-rocket"
    text: str = "Launching Open SASS"
    container_style: str = (
        "display: flex; width: 230px; padding: 8px 16px 8px 8px; gap: 11px; "
        "align-items: center; justify-content: center; background: rgba(252, 92, 64, 0.08); "
        "border-radius: 99px; overflow: hidden;"
    )
    icon_style: str = _ICON_BOX_STYLE
    text_style: str = (
        "font-family: sans-serif; font-size: 14px; font-weight: 300; line-height: 16.8px; "
        "letter-spacing: 0.11px; color: white; white-space: nowrap;"
    )
    container_class: str = "badge-container"
    icon_class: str = "badge-icon"
    text_class: str = "badge-text"
    role: str = "image"
    aria_label: str = "Badge"
    icon_alt: str = ""
    icon_loading: str = "eager"

    def render(self) -> Element:
        return element(
            "div",
            {
                "role": self.role,
                "aria-label": self.aria_label,
                "style": self.container_style,
                "class": self.container_class,
            },
            element("i", {"class": self.icon, "style": self.icon_style, "aria-hidden": "true"}),
            element("span", {"style": self.text_style, "class": self.text_class}, self.text),
        )


@dataclass
class Button:
    """The primary call-to-action button with a trailing icon."""

    label: str = "Start Building"
    button_type: str = "button"
    disabled: bool = False
    class_: str = "primary-button"
    icon: str = "fas fa-arrow-right"
    icon_style: str = "font-size: 16px; width: 1em; height: 1em; vertical-align: middle;"
    icon_class: str = "button-icon"
    style: str = (
        "display: inline-flex; align-items: center; justify-content: center; gap: 8px; "
        "border: none; border-radius: 4px; font-family: sans-serif; font-weight: 300; "
        "cursor: pointer; transition: all 0.2s ease; text-decoration: none; "
        "white-space: nowrap; background:rgb(255, 38, 0); color: white; "
        "box-shadow: inset 0 8px 32px rgba(212, 212, 212, 0.64); height: 56px; "
        "padding: 0 24px; font-size: 18px; line-height: 21.6px; letter-spacing: 0.14px;"
    )
    aria_label: str = "Get started with Open SASS"
    aria_pressed: str = "true"

    def render(self) -> Element:
        icon_classes = " ".join(c for c in (self.icon, self.icon_class) if c)
        return element(
            "button",
            {
                "type": self.button_type,
                "disabled": self.disabled,
                "class": self.class_,
                "style": self.style,
                "aria-label": self.aria_label,
                "aria-pressed": self.aria_pressed,
            },
            self.label,
            element(
                "i",
                {"class": icon_classes, "style": self.icon_style, "aria-hidden": "true"},
            ),
        )


@dataclass
class HeroContent:
    """Heading, description, badge and call to action of the hero."""

    heading: str = DEFAULT_HEADING
    description: str = DEFAULT_DESCRIPTION
    container_class: str = "hero-container"
    wrapper_class: str = "hero-wrapper"
    content_class: str = "hero-content"
    title_class: str = "hero-title"
    description_class: str = "hero-description"
    cta_class: str = "hero-cta"
    container_style: str = _CONTAINER_STYLE
    wrapper_style: str = _WRAPPER_STYLE
    content_style: str = _CONTENT_STYLE
    title_style: str = _TITLE_STYLE
    description_style: str = _DESCRIPTION_STYLE
    cta_style: str = ""
    heading_tag: str = "h1"
    aria_label: str = "Hero Section"

    def render(self) -> Element:
        heading = element(
            self.heading_tag,
            {
                "id": "hero-heading",
                "class": self.title_class,
                "style": self.title_style,
                "role": "heading",
                "aria-level": "1",
            },
            self.heading,
        )
        description = element(
            "p",
            {
                "class": self.description_class,
                "style": self.description_style,
                "aria-label": "Platform description",
            },
            self.description,
        )
        return element(
            "div",
            {
                "class": self.container_class,
                "style": self.container_style,
                "aria-label": self.aria_label,
            },
            element(
                "div",
                {
                    "class": self.wrapper_class,
                    "style": self.wrapper_style,
                    "aria-labelledby": "hero-heading",
                },
                element(
                    "div",
                    {"class": self.content_class, "style": self.content_style},
                    Badge().render(),
                    heading,
                    description,
                ),
                element(
                    "div",
                    {
                        "class": self.cta_class,
                        "style": self.cta_style,
                        "aria-label": "Call to Action",
                    },
                    Button().render(),
                ),
            ),
        )


@dataclass
class TabButton:
    """A single tab in the process tab list."""

    id: str = ""
    label: str = ""
    icon: str = ""
    is_active: bool = False
    on_click: Callable[[], None] | None = field(default=None, compare=False)
    style: str = (
        "display: flex; height: 48px; padding: 0 24px; gap: 8px; justify-content: center; "
        "align-items: center; flex: 1; border-radius: 6px; "
        "border: 1px solid rgba(255, 255, 255, 0.24); background: rgba(0, 0, 0, 0.04); "
        "cursor: pointer; transition: all 0.2s ease; color: white;"
    )
    active_style: str = (
        "background: rgba(255, 255, 255, 0.16); border-color: rgba(255, 255, 255, 0.32); "
        "box-shadow: 0 4px 16px 0 rgba(51, 14, 11, 0.56);"
    )
    icon_style: str = _ICON_BOX_STYLE
    label_style: str = (
        "font-family: sans-serif; font-size: 14px; font-weight: 400; line-height: 16.8px; "
        "letter-spacing: 0.11px; opacity: 0.8; white-space: nowrap;"
    )
    active_label_style: str = "opacity: 1;"

    def click(self) -> None:
        """Fire the click callback, if any."""
        if self.on_click is not None:
            self.on_click()

    def key_down(self, key: str) -> bool:
        """Handle a key press; Enter and space activate the tab. Returns whether it was handled."""
        if key in ("Enter", " "):
            self.click()
            return True
        return False

    def render(self) -> Element:
        if self.is_active:
            style = f"{self.style} {self.active_style}"
            label_style = f"{self.label_style} {self.active_label_style}"
        else:
            style = self.style
            label_style = self.label_style
        return element(
            "button",
            {
                "id": f"tab-{self.id}",
                "role": "tab",
                "aria-selected": "true" if self.is_active else "false",
                "aria-controls": f"tabpanel-{self.id}",
                "tabindex": "0" if self.is_active else "-1",
                "style": style,
            },
            element("i", {"class": self.icon, "style": self.icon_style, "aria-hidden": "true"}),
            element("span", {"style": label_style}, self.label),
        )


@dataclass
class ProcessTabs:
    """A tab list that keeps track of the selected step."""

    container_style: str = _TABS_CONTAINER_STYLE
    tablist_style: str = _TABLIST_STYLE
    tabs: tuple[tuple[str, str, str], ...] = DEFAULT_TABS
    active_tab: str = "connect"

    def select(self, tab_id: str) -> None:
        """Make the given tab the active one."""
        self.active_tab = tab_id

    def _buttons(self) -> list[TabButton]:
        return [
            TabButton(
                id=tab_id,
                label=label,
                icon=icon,
                is_active=self.active_tab == tab_id,
                on_click=partial(self.select, tab_id),
            )
            for tab_id, label, icon in self.tabs
        ]

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.container_style},
            element(
                "div",
                {
                    "role": "tablist",
                    "aria-label": "Platform process steps",
                    "style": self.tablist_style,
                },
                [button.render() for button in self._buttons()],
            ),
        )


@dataclass
class Hero:
    """The full hero section: content block followed by the process tabs."""

    section_style: str = _CONTAINER_STYLE
    container_style: str = _WRAPPER_STYLE
    content_style: str = _CONTENT_STYLE
    heading: str = DEFAULT_HEADING
    description: str = DEFAULT_DESCRIPTION
    container_class: str = "hero-container"
    wrapper_class: str = "hero-wrapper"
    content_class: str = "hero-content"
    title_class: str = "hero-title"
    description_class: str = "hero-description"
    cta_class: str = "hero-cta"
    container_style_inner: str = _CONTAINER_STYLE
    wrapper_style: str = _WRAPPER_STYLE
    content_style_inner: str = _CONTENT_STYLE
    title_style: str = _TITLE_STYLE
    description_style: str = _DESCRIPTION_STYLE
    cta_style: str = ""
    heading_tag: str = "h1"
    aria_label: str = "Hero Section"
    tabs_container_style: str = _TABS_CONTAINER_STYLE
    tablist_style: str = _TABLIST_STYLE
    tabs: tuple[tuple[str, str, str], ...] = DEFAULT_TABS
    active_tab: str = "connect"

    def select_tab(self, tab_id: str) -> None:
        """Make the given process tab the active one."""
        self.active_tab = tab_id

    def render(self) -> Element:
        content = HeroContent(
            heading=self.heading,
            description=self.description,
            container_class=self.container_class,
            wrapper_class=self.wrapper_class,
            content_class=self.content_class,
            title_class=self.title_class,
            description_class=self.description_class,
            cta_class=self.cta_class,
            container_style=self.container_style_inner,
            wrapper_style=self.wrapper_style,
            content_style=self.content_style_inner,
            title_style=self.title_style,
            description_style=self.description_style,
            cta_style=self.cta_style,
            heading_tag=self.heading_tag,
            aria_label=self.aria_label,
        )
        tabs = ProcessTabs(
            container_style=self.tabs_container_style,
            tablist_style=self.tablist_style,
            tabs=self.tabs,
            active_tab=self.active_tab,
        )
        return element(
            "section",
            {
                "id": "main-content",
                "aria-labelledby": "hero-heading",
                "style": self.section_style,
            },
            element(
                "div",
                {"style": self.container_style},
                element("div", {"style": self.content_style}, content.render(), tabs.render()),
            ),
        )