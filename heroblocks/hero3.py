"""Centred hero with a gradient title, actions and a row of company logos."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .hero3_background import Background
from .markup import Element, element

DEFAULT_BADGE_TEXT = "Launching Soon"
DEFAULT_DRIVE_TEXT = "Build "
DEFAULT_GROWTH_TEXT = "Apps"
DEFAULT_EMPTY_TEXT = " "
DEFAULT_THROUGH_TEXT = "Blazingly Fast"
DEFAULT_DESCRIPTION = (
    "OpenSASS gives you everything you need to create, deploy, and scale full-stack "
    "applications using Rust and WebAssembly. Developer-friendly tools, production-ready "
    "out of the box."
)
DEFAULT_PRIMARY_LABEL = "Get Started"
DEFAULT_SECONDARY_LABEL = "Learn More"
DEFAULT_ARROW_LABEL = "→"
DEFAULT_COMPANIES_TITLE = "Trusted by teams building the future with Open SASS"
DEFAULT_COMPANIES: tuple[tuple[str, str], ...] = (
    ("Google", "fa-brands fa-google"),
    ("Apple", "fa-brands fa-apple"),
    ("Microsoft", "fa-brands fa-microsoft"),
    ("Slack", "fa-brands fa-slack"),
    ("Github", "fa-brands fa-github"),
)


def _block(*declarations: str, closing: str = "    ") -> str:
    """Lay out CSS declarations one per line, indented as in a template block."""
    lines = "".join(f"        {declaration}\n" for declaration in declarations)
    return f"\n{lines}{closing}"


_HEADLINE_FONT = (
    "font-family: Helvetica Neue, sans-serif; font-size: clamp(32px, 6vw, 76px); "
    "font-weight: 700; line-height: clamp(40px, 6.3vw, 80px); text-align: center; "
    "letter-spacing: -0.76px;"
)
_PLAIN_WORD_STYLE = f"position: relative; color: #141415; {_HEADLINE_FONT}"
_GROWTH_STYLE = (
    f"position: relative; {_HEADLINE_FONT} background: linear-gradient(90deg, #6947ff, #6947ff); "
    "-webkit-background-clip: text; -webkit-text-fill-color: transparent;"
)
_EMPTY_STYLE = (
    f"position: relative; {_HEADLINE_FONT} background: linear-gradient(90deg, #6e4dff, #8b4dff); "
    "-webkit-background-clip: text; -webkit-text-fill-color: transparent;"
)
_BADGE_STYLE = (
    "display: flex; align-items: center; justify-content: center; flex-wrap: nowrap; "
    "flex-shrink: 0; gap: 4px; position: relative; width: 224px; height: 34px; "
    "padding: 8px 12px; background: rgba(255, 255, 255, 0.65); border: 0.6px solid #ffffff; "
    "z-index: 18; border-radius: 100px; backdrop-filter: blur(30px);"
)
_BADGE_TEXT_STYLE = (
    "flex-shrink: 0; flex-basis: auto; position: relative; height: 19px; color: #43454a; "
    "font-family: Inter, sans-serif; font-size: 16px; font-weight: 420; line-height: 19px; "
    "text-align: left; white-space: nowrap; z-index: 19;"
)
_ARROW_STYLE = "font-size: 18px;"
_COMPANIES_STYLE = _block(
    "display: flex;",
    "flex-direction: column;",
    "align-items: center;",
    "justify-content: center;",
    "gap: clamp(20px, 4vw, 40px);",
    "width: 90vw;",
    "max-width: 1028px;",
    "margin: 0 auto;",
    "z-index: 48;",
    closing="        ",
)


def _cls(name: str) -> str | None:
    return name or None


def _fire(callback: Callable[[], None] | None) -> None:
    if callback is not None:
        callback()


@dataclass
class HeroBadge:
    """A frosted pill announcing the product status."""

    style: str = _BADGE_STYLE
    class_: str = ""
    text_style: str = _BADGE_TEXT_STYLE
    text_class: str = ""
    text: str = DEFAULT_BADGE_TEXT

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.style, "class": _cls(self.class_), "role": "banner"},
            element("span", {"style": self.text_style, "class": _cls(self.text_class)}, self.text),
        )


@dataclass
class HeroTitle:
    """A headline made of four separately styled runs of text."""

    style: str = _block(
        "align-self: stretch;",
        "flex-shrink: 0;",
        "position: relative;",
        "font-family: Helvetica Neue, sans-serif;",
        "font-size: clamp(24px, 8vw, 76px);",
        "font-weight: 700;",
        "line-height: 1.2;",
        "text-align: center;",
        "letter-spacing: -0.5px;",
        "z-index: 21;",
        "margin: 0;",
    )
    class_: str = ""
    drive_style: str = _PLAIN_WORD_STYLE
    drive_class: str = ""
    growth_style: str = _GROWTH_STYLE
    growth_class: str = ""
    empty_style: str = _EMPTY_STYLE
    empty_class: str = ""
    through_style: str = _PLAIN_WORD_STYLE
    through_class: str = ""
    drive_text: str = DEFAULT_DRIVE_TEXT
    growth_text: str = DEFAULT_GROWTH_TEXT
    empty_text: str = DEFAULT_EMPTY_TEXT
    through_text: str = DEFAULT_THROUGH_TEXT

    def render(self) -> Element:
        runs = (
            (self.drive_style, self.drive_class, self.drive_text),
            (self.growth_style, self.growth_class, self.growth_text),
            (self.empty_style, self.empty_class, self.empty_text),
            (self.through_style, self.through_class, self.through_text),
        )
        return element(
            "h1",
            {"style": self.style, "class": _cls(self.class_), "id": "hero-title"},
            [element("span", {"style": style, "class": _cls(cls)}, text) for style, cls, text in runs],
        )


@dataclass
class HeroDescription:
    """The paragraph under the headline."""

    style: str = _block(
        "display: flex;",
        "align-items: flex-start;",
        "justify-content: center;",
        "flex-shrink: 0;",
        "position: relative;",
        "max-width: 90vw;",
        "height: auto;",
        "font-size: clamp(14px, 4vw, 20px);",
        "line-height: 1.5;",
        "padding: 0 16px;",
        "text-align: center;",
        "margin: 0 auto;",
        "color: #43454a;",
        "z-index: 22;",
    )
    class_: str = ""
    text: str = DEFAULT_DESCRIPTION

    def render(self) -> Element:
        return element("p", {"style": self.style, "class": _cls(self.class_)}, self.text)


@dataclass
class HeroActions:
    """A primary and a secondary button, each wired to an optional callback."""

    style: str = _block(
        "display: flex;",
        "flex-direction: row;",
        "flex-wrap: wrap;",
        "justify-content: center;",
        "gap: 12px;",
        "position: relative;",
        "width: 100%;",
        "max-width: 90vw;",
        "padding: 12px 16px;",
        "margin: 32px auto 0;",
        "z-index: 9;",
    )
    class_: str = ""
    primary_button_style: str = _block(
        "background: linear-gradient(90deg, #7F37FF 0%, #8C2EFF 100%);",
        "color: white;",
        "font-size: 16px;",
        "font-weight: 600;",
        "border: none;",
        "border-radius: 9999px;",
        "padding: 14px 24px;",
        "height: 54px;",
        "cursor: pointer;",
        "transition: all 0.3s ease;",
        "box-shadow: 0 0 0 1px rgba(0, 0, 0, 0.05);",
    )
    secondary_button_style: str = _block(
        "background: white;",
        "color: black;",
        "font-size: 16px;",
        "font-weight: 600;",
        "border: 1px solid #e5e7eb;",
        "border-radius: 9999px;",
        "padding: 14px 24px;",
        "height: 54px;",
        "cursor: pointer;",
        "display: flex;",
        "align-items: center;",
        "gap: 8px;",
        "transition: all 0.3s ease;",
    )
    arrow_style: str = _ARROW_STYLE
    primary_button_label: str = DEFAULT_PRIMARY_LABEL
    secondary_button_label: str = DEFAULT_SECONDARY_LABEL
    arrow_label: str = DEFAULT_ARROW_LABEL
    on_get_started: Callable[[], None] | None = field(default=None, compare=False)
    on_learn_more: Callable[[], None] | None = field(default=None, compare=False)

    def get_started(self) -> None:
        """Fire the primary button's callback, if any."""
        _fire(self.on_get_started)

    def learn_more(self) -> None:
        """Fire the secondary button's callback, if any."""
        _fire(self.on_learn_more)

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.style, "class": _cls(self.class_)},
            element(
                "button",
                {"aria-label": self.primary_button_label, "style": self.primary_button_style},
                self.primary_button_label,
            ),
            element(
                "button",
                {"aria-label": self.secondary_button_label, "style": self.secondary_button_style},
                self.secondary_button_label,
                element("span", {"style": self.arrow_style}, self.arrow_label),
            ),
        )


@dataclass
class CompanyLogo:
    """One company logo icon in the trust row."""

    name: str = ""
    icon_class: str = ""
    icon_style: str = "font-size: 32px; color: #666; opacity: 0.7; transition: opacity 0.2s ease;"
    wrapper_style: str = (
        "flex-shrink: 0; display: flex; align-items: center; justify-content: center;"
    )
    class_: str = ""

    def render(self) -> Element:
        return element(
            "div",
            {"role": "listitem", "class": _cls(self.class_), "style": self.wrapper_style},
            element(
                "i",
                {
                    "class": _cls(self.icon_class),
                    "style": self.icon_style,
                    "aria-label": f"{self.name} logo",
                },
            ),
        )


@dataclass
class Companies:
    """A caption followed by a scrollable row of company logos."""

    style: str = _COMPANIES_STYLE
    class_: str = ""
    title_style: str = _block(
        "align-self: stretch;",
        "flex-shrink: 0;",
        "flex-basis: auto;",
        "position: relative;",
        "min-width: 0;",
        "color: #43454a;",
        "font-family: Helvetica Neue, sans-serif;",
        "font-size: clamp(16px, 2vw, 20px);",
        "font-weight: 400;",
        "line-height: 1.2;",
        "text-align: center;",
        "white-space: normal;",
        "z-index: 49;",
        "margin: 0;",
        closing="        ",
    )
    title_class: str = ""
    logos_style: str = _block(
        "display: flex;",
        "align-items: center;",
        "justify-content: center;",
        "flex-wrap: nowrap;",
        "gap: clamp(30px, 5vw, 65px);",
        "width: 100%;",
        "max-width: 100%;",
        "flex-shrink: 0;",
        "position: relative;",
        "min-width: 0;",
        "z-index: 50;",
        "overflow-x: auto;",
        "-webkit-overflow-scrolling: touch;",
        "scrollbar-width: none; /* Firefox */",
        closing="        ",
    )
    logos_class: str = _block("scrollbar-width: none;")
    title_text: str = DEFAULT_COMPANIES_TITLE
    companies: tuple[tuple[str, str], ...] = DEFAULT_COMPANIES

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.style, "class": _cls(self.class_)},
            element(
                "p",
                {"style": self.title_style, "class": _cls(self.title_class)},
                self.title_text,
            ),
            element(
                "div",
                {"style": self.logos_style, "class": _cls(self.logos_class)},
                [CompanyLogo(name=name, icon_class=icon).render() for name, icon in self.companies],
            ),
        )


@dataclass
class Hero:
    """The full hero: background, badge, headline, description, actions and logos."""

    style: str = (
        "display: flex; flex-direction: column; justify-content: center; align-items: center; "
        "gap: 42px; width: 100%; height: 50vh; z-index: 16;"
    )
    class_: str = ""
    content_style: str = (
        "display: flex; flex-direction: column; align-items: center; align-self: stretch; "
        "flex-wrap: nowrap; flex-shrink: 0; gap: 18px; position: relative; min-width: 0; "
        "z-index: 17;"
    )
    content_class: str = ""
    text_content_style: str = (
        "display: flex; flex-direction: column; align-items: center; align-self: stretch; "
        "flex-wrap: nowrap; flex-shrink: 0; gap: 20px; position: relative; z-index: 20;"
    )
    text_content_class: str = ""
    badge_style: str = _BADGE_STYLE
    badge_class: str = ""
    badge_text_style: str = _BADGE_TEXT_STYLE
    badge_text_class: str = ""
    badge_text: str = DEFAULT_BADGE_TEXT
    title_style: str = (
        "align-self: stretch; flex-shrink: 0; position: relative; "
        "font-family: Helvetica Neue, sans-serif; font-size: clamp(24px, 8vw, 76px); "
        "font-weight: 700; line-height: 1.2; text-align: center; letter-spacing: -0.5px; "
        "z-index: 21; margin: 0;"
    )
    title_class: str = ""
    drive_style: str = _PLAIN_WORD_STYLE
    drive_class: str = ""
    growth_style: str = _GROWTH_STYLE
    growth_class: str = ""
    empty_style: str = _EMPTY_STYLE
    empty_class: str = ""
    through_style: str = _PLAIN_WORD_STYLE
    through_class: str = ""
    drive_text: str = DEFAULT_DRIVE_TEXT
    growth_text: str = DEFAULT_GROWTH_TEXT
    empty_text: str = DEFAULT_EMPTY_TEXT
    through_text: str = DEFAULT_THROUGH_TEXT
    description_style: str = (
        "display: flex; align-items: flex-start; justify-content: center; flex-shrink: 0; "
        "position: relative; max-width: 90vw; height: auto; font-size: clamp(14px, 4vw, 20px); "
        "line-height: 1.5; padding: 0 16px; text-align: center; margin: 0 auto; "
        "color: #43454a; z-index: 22;"
    )
    description_class: str = ""
    description_text: str = DEFAULT_DESCRIPTION
    actions_style: str = (
        "display: flex; flex-direction: row; flex-wrap: wrap; justify-content: center; "
        "gap: 12px; position: relative; width: 100%; max-width: 90vw; padding: 12px 16px; "
        "margin: 32px auto 0; z-index: 9;"
    )
    actions_class: str = ""
    primary_button_style: str = (
        "background: linear-gradient(90deg, #7F37FF 0%, #8C2EFF 100%); color: white; "
        "font-size: 16px; font-weight: 600; border: none; border-radius: 9999px; "
        "padding: 14px 24px; height: 54px; cursor: pointer; transition: all 0.3s ease; "
        "box-shadow: 0 0 0 1px rgba(0, 0, 0, 0.05);"
    )
    secondary_button_style: str = (
        "background: white; color: black; font-size: 16px; font-weight: 600; "
        "border: 1px solid #e5e7eb; border-radius: 9999px; padding: 14px 24px; height: 54px; "
        "cursor: pointer; display: flex; align-items: center; gap: 8px; "
        "transition: all 0.3s ease;"
    )
    arrow_style: str = _ARROW_STYLE
    primary_button_label: str = DEFAULT_PRIMARY_LABEL
    secondary_button_label: str = DEFAULT_SECONDARY_LABEL
    arrow_label: str = DEFAULT_ARROW_LABEL
    on_get_started: Callable[[], None] | None = field(default=None, compare=False)
    on_learn_more: Callable[[], None] | None = field(default=None, compare=False)
    companies_style: str = _COMPANIES_STYLE
    companies_class: str = ""
    companies_title_style: str = (
        "align-self: stretch; flex-shrink: 0; flex-basis: auto; position: relative; "
        "min-width: 0; color: #43454a; font-family: Helvetica Neue, sans-serif; "
        "font-size: clamp(16px, 2vw, 20px); font-weight: 400; line-height: 1.2; "
        "text-align: center; white-space: normal; z-index: 49; margin: 0;"
    )
    companies_title_class: str = ""
    companies_logos_style: str = (
        "display: flex; align-items: center; justify-content: center; flex-wrap: nowrap; "
        "gap: clamp(30px, 5vw, 65px); width: 100%; max-width: 100%; flex-shrink: 0; "
        "position: relative; min-width: 0; z-index: 50; overflow-x: auto; "
        "-webkit-overflow-scrolling: touch; scrollbar-width: none;"
    )
    companies_logos_class: str = "scrollbar-width: none;"
    companies_title_text: str = DEFAULT_COMPANIES_TITLE
    companies: tuple[tuple[str, str], ...] = DEFAULT_COMPANIES

    def _actions(self) -> HeroActions:
        return HeroActions(
            style=self.actions_style,
            class_=self.actions_class,
            primary_button_style=self.primary_button_style,
            secondary_button_style=self.secondary_button_style,
            arrow_style=self.arrow_style,
            primary_button_label=self.primary_button_label,
            secondary_button_label=self.secondary_button_label,
            arrow_label=self.arrow_label,
            on_get_started=self.on_get_started,
            on_learn_more=self.on_learn_more,
        )

    def render(self) -> Element:
        badge = HeroBadge(
            style=self.badge_style,
            class_=self.badge_class,
            text_style=self.badge_text_style,
            text_class=self.badge_text_class,
            text=self.badge_text,
        )
        title = HeroTitle(
            style=self.title_style,
            class_=self.title_class,
            drive_style=self.drive_style,
            drive_class=self.drive_class,
            growth_style=self.growth_style,
            growth_class=self.growth_class,
            empty_style=self.empty_style,
            empty_class=self.empty_class,
            through_style=self.through_style,
            through_class=self.through_class,
            drive_text=self.drive_text,
            growth_text=self.growth_text,
            empty_text=self.empty_text,
            through_text=self.through_text,
        )
        description = HeroDescription(
            style=self.description_style,
            class_=self.description_class,
            text=self.description_text,
        )
        companies = Companies(
            style=self.companies_style,
            class_=self.companies_class,
            title_style=self.companies_title_style,
            title_class=self.companies_title_class,
            logos_style=self.companies_logos_style,
            logos_class=self.companies_logos_class,
            title_text=self.companies_title_text,
            companies=self.companies,
        )
        section = element(
            "section",
            {
                "style": self.style,
                "class": _cls(self.class_),
                "role": "main",
                "aria-labelledby": "hero-title",
            },
            element(
                "div",
                {"style": self.content_style, "class": _cls(self.content_class)},
                badge.render(),
                element(
                    "div",
                    {"style": self.text_content_style, "class": _cls(self.text_content_class)},
                    title.render(),
                    description.render(),
                ),
            ),
            self._actions().render(),
        )
        return element(
            "div",
            {},
            Background().render(),
            element("main", {"id": "main-content"}, section),
            companies.render(),
        )