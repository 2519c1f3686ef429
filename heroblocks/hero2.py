"""Hero section with a text column, a team image and floating service cards."""

from __future__ import annotations

from dataclasses import dataclass

from .markup import Element, element

DEFAULT_BADGE_TEXT = "Open SASS"
DEFAULT_TITLE = "Rust for Modern Web Development"
DEFAULT_DESCRIPTION = (
    "Ship blazingly fast full stack Rust web applications in Rust with Open SASS; "
    "built for performance, productivity, and modern development."
)
DEFAULT_PRIMARY_BUTTON_TEXT = "Get Started"
DEFAULT_PRIMARY_BUTTON_HREF = "#contact"
CONTACT_ARIA_LABEL = "Get in touch - Contact us"
ICON_BUTTON_ALT = "Arrow pointing up and right"

MOBILE_LAYOUT_STYLE = (
    "display: grid; grid-template-columns: 1fr; grid-template-rows: auto auto; gap: 4rem; "
    "width: 100%; max-width: 1200px; align-items: center; z-index: 1; box-sizing: border-box;"
)
MOBILE_LEFT_CONTENT_STYLE = "width: 100%; box-sizing: border-box; padding: 0;"
MOBILE_RIGHT_CONTENT_STYLE = (
    "position: relative; width: 100%; box-sizing: border-box; padding-left: 0;"
)
MOBILE_MEDIA_QUERY = "(max-width: 768px)"

_FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"

_SECTION_STYLE = (
    "display: flex; flex-direction: column; align-items: flex-start; gap: 1.375rem; "
    "position: absolute; width: 40.0625rem; height: 28.5625rem; top: 50%; left: 3.75rem; "
    "transform: translate(0, -40.59%); z-index: 2;"
)
_MAIN_STYLE = (
    "display: flex; flex-direction: column; align-items: flex-start; align-self: stretch; "
    "gap: 2.5rem;"
)
_TEXT_STYLE = (
    "display: flex; flex-direction: column; align-items: flex-start; align-self: stretch; "
    "gap: 1.25rem;"
)
_TITLE_STYLE = (
    "width: 40rem; height: 13.125rem; color: #19191a; "
    f"font-family: Montserrat, {_FONT_STACK}; font-size: clamp(2rem, 5vw, 3.75rem); "
    "font-weight: 580; line-height: clamp(2.5rem, 6vw, 4.375rem); "
    "letter-spacing: -0.0375rem; margin: 0;"
)
_DESCRIPTION_STYLE = (
    "width: 41.9375rem; height: 5.25rem; color: #404146; "
    f"font-family: Montserrat, {_FONT_STACK}; font-size: clamp(1rem, 2.5vw, 1.125rem); "
    "font-weight: 462; line-height: clamp(1.5rem, 3vw, 1.75rem); margin: 0;"
)
_ACTIONS_STYLE = "display: flex; align-items: center; gap: 1rem;"
_PRIMARY_BUTTON_STYLE = (
    "display: inline-flex; align-items: center; padding: 0.875rem 1.5rem; "
    "background-color: white; color: #19191a; font-weight: 600; border-radius: 2rem; "
    "text-decoration: none; font-family: Montserrat, sans-serif; font-size: 1rem; "
    "box-shadow: 0 4px 10px rgba(0, 0, 0, 0.05); transition: all 0.3s ease;"
)
_ICON_BUTTON_STYLE = (
    "display: inline-flex; justify-content: center; align-items: center; width: 2.75rem; "
    "height: 2.75rem; background-color: #19191a; color: white; border-radius: 50%; "
    "text-decoration: none; font-size: 1rem; transition: all 0.3s ease;"
)
_ICON_BUTTON_CLASS = "fas fa-arrow-up-right-from-square"


def _cls(*names: str) -> str | None:
    """Join non-empty class names; None when there are none, so no attribute is written."""
    joined = " ".join(name for name in names if name)
    return joined or None


@dataclass
class Badge:
    """A translucent pill holding a short text."""

    text: str = ""
    container_class: str = ""
    text_class: str = ""
    container_style: str = (
        "display: flex; align-items: center; justify-content: center; gap: 0.625rem; "
        "width: 11.8125rem; padding: 0.5rem 0.75rem; background: rgba(255, 255, 255, 0.5); "
        "border-radius: 6.25rem; backdrop-filter: blur(2.8125rem);"
    )
    text_style: str = (
        f"height: 1.0625rem; color: #0c1f2e; font-family: Inter, {_FONT_STACK}; "
        "font-size: clamp(0.875rem, 2vw, 1rem); font-weight: 400; line-height: 1.0625rem; "
        "white-space: nowrap;"
    )

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.container_style, "class": _cls(self.container_class)},
            element("span", {"style": self.text_style, "class": _cls(self.text_class)}, self.text),
        )


@dataclass
class Button:
    """A link styled as a button, with an optional text and an optional icon."""

    text: str | None = None
    icon: str | None = None
    icon_alt: str = ""
    href: str = "#"
    variant: str = "primary"
    button_class: str = ""
    text_class: str = ""
    icon_class: str = ""
    button_style: str = (
        "display: flex; align-items: center; justify-content: center; gap: 0.375rem; "
        "height: 3rem; padding: 0.5rem 0.875rem; border-radius: 62.4375rem; "
        "text-decoration: none; transition: all 0.2s ease; cursor: pointer;"
    )
    text_style: str = (
        f"height: 1.5rem; color: #19191a; font-family: Inter, {_FONT_STACK}; "
        "font-size: clamp(0.875rem, 2vw, 1rem); font-weight: 500; line-height: 1.5rem; "
        "white-space: nowrap; letter-spacing: -0.01rem;"
    )
    icon_style: str = "width: 1.5rem; height: 1.5rem; object-fit: cover;"
    aria_label: str | None = None

    @property
    def accessible_label(self) -> str:
        """The explicit aria label, else the text, else an empty string."""
        if self.aria_label is not None:
            return self.aria_label
        return self.text or ""

    def render(self) -> Element:
        text = (
            element("span", {"style": self.text_style, "class": _cls(self.text_class)}, self.text)
            if self.text is not None
            else None
        )
        icon = (
            element(
                "i",
                {
                    "class": _cls(self.icon, self.icon_class),
                    "alt": self.icon_alt,
                    "style": self.icon_style,
                    "aria-hidden": "true" if not self.icon_alt else "false",
                },
            )
            if self.icon is not None
            else None
        )
        return element(
            "a",
            {
                "href": self.href,
                "style": self.button_style,
                "class": _cls(self.button_class),
                "role": "button",
                "aria-label": self.accessible_label,
            },
            text,
            icon,
        )


@dataclass
class HeroContent:
    """Badge, title, description and the two action buttons."""

    badge_text: str = DEFAULT_BADGE_TEXT
    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    primary_button_text: str = DEFAULT_PRIMARY_BUTTON_TEXT
    primary_button_href: str = DEFAULT_PRIMARY_BUTTON_HREF
    section_style: str = _SECTION_STYLE
    section_class: str = ""
    main_style: str = _MAIN_STYLE
    main_class: str = ""
    text_style: str = _TEXT_STYLE
    text_class: str = ""
    title_style: str = _TITLE_STYLE
    title_class: str = ""
    description_style: str = _DESCRIPTION_STYLE
    description_class: str = ""
    actions_class: str = ""
    actions_style: str = _ACTIONS_STYLE
    primary_button_style: str = _PRIMARY_BUTTON_STYLE
    icon_button_style: str = _ICON_BUTTON_STYLE
    icon_button_class: str = _ICON_BUTTON_CLASS

    def render(self) -> Element:
        primary = Button(
            text=self.primary_button_text,
            href=self.primary_button_href,
            icon_style=self.primary_button_style,
        )
        contact = Button(
            icon=self.icon_button_class,
            icon_alt=ICON_BUTTON_ALT,
            href=self.primary_button_href,
            aria_label=CONTACT_ARIA_LABEL,
            icon_style=self.icon_button_style,
        )
        return element(
            "section",
            {
                "style": self.section_style,
                "class": _cls(self.section_class),
                "aria-labelledby": "hero-title",
            },
            Badge(text=self.badge_text).render(),
            element(
                "div",
                {"style": self.main_style, "class": _cls(self.main_class)},
                element(
                    "div",
                    {"style": self.text_style, "class": _cls(self.text_class)},
                    element(
                        "h1",
                        {
                            "id": "hero-title",
                            "style": self.title_style,
                            "class": _cls(self.title_class),
                        },
                        self.title,
                    ),
                    element(
                        "p",
                        {"style": self.description_style, "class": _cls(self.description_class)},
                        self.description,
                    ),
                ),
                element(
                    "div",
                    {"style": self.actions_style, "class": _cls(self.actions_class)},
                    primary.render(),
                    contact.render(),
                ),
            ),
        )


@dataclass
class HeroImage:
    """A rounded frame holding a cropped image."""

    src: str = ""
    alt: str = ""
    container_class: str = ""
    img_class: str = ""
    container_style: str = (
        "width: 28.625rem; height: 39.5rem; background: #c3a2a2; border-radius: 1.25rem; "
        "overflow: hidden;"
    )
    img_style: str = (
        "width: 33.5rem; height: 59.75rem; object-fit: cover; transform: translate(-10%, -10%); "
        "position: relative; top: 10%; left: 10%;"
    )

    def render(self) -> Element:
        return element(
            "div",
            {"style": self.container_style, "class": _cls(self.container_class)},
            element(
                "img",
                {
                    "src": self.src,
                    "alt": self.alt,
                    "style": self.img_style,
                    "class": _cls(self.img_class),
                },
            ),
        )


@dataclass
class ServiceCard:
    """A frosted card with an icon and a service title."""

    icon: str = ""
    icon_alt: str = ""
    title: str = ""
    container_class: str = ""
    content_class: str = ""
    title_class: str = ""
    container_style: str = (
        "width: 12.5rem; height: 11.375rem; background: rgba(255, 255, 255, 0.3); "
        "border-radius: 2.5rem; backdrop-filter: blur(1.3125rem); "
        "box-shadow: -3.125rem 1.5625rem 4.375rem 0 rgba(232, 224, 224, 0.7); overflow: hidden;"
    )
    content_style: str = (
        "display: flex; flex-direction: column; align-items: center; gap: 1.25rem; "
        "width: 9.125rem; margin: 3.5625rem 0 0 1.6875rem;"
    )
    icon_style: str = "width: 2.875rem; height: 2.875rem; object-fit: cover;"
    title_style: str = (
        "display: flex; align-items: flex-start; justify-content: center; align-self: stretch; "
        "width: 100%; min-width: 0; height: 3.125rem; color: #19191a; "
        f"font-family: Montserrat, {_FONT_STACK}; font-size: clamp(1rem, 2.5vw, 1.25rem); "
        "font-weight: 600; line-height: clamp(1.25rem, 3vw, 1.5625rem); text-align: center; "
        "margin: 0;"
    )

    def render(self) -> Element:
        return element(
            "article",
            {"style": self.container_style, "class": _cls(self.container_class)},
            element(
                "div",
                {"style": self.content_style, "class": _cls(self.content_class)},
                element(
                    "i",
                    {"class": _cls(self.icon), "aria-hidden": "true", "title": self.icon_alt},
                ),
                element(
                    "h3",
                    {"style": self.title_style, "class": _cls(self.title_class)},
                    self.title,
                ),
            ),
        )


@dataclass
class Hero:
    """Two-column hero; on narrow screens (``is_mobile``) the columns stack."""

    background_image: str = (
        "https://dev-to-uploads.s3.amazonaws.com/uploads/articles/e0rnow0h59d13gwrafwg.png"
    )
    team_image: str = "https://avatars.githubusercontent.com/u/62179149?v=4"
    web_dev_icon: str = "fa-solid fa-code"
    ui_ux_icon: str = "fa-solid fa-palette"
    web_dev_title: str = "Rusty Web Dev"
    ui_ux_title: str = "UI UX"
    web_dev_icon_alt: str = "Web development icon"
    ui_ux_icon_alt: str = "UI UX design icon"
    team_image_alt: str = "Enthusiastic team discussing all things opensass"
    container_style: str = (
        "position: relative; width: 100%; min-height: 100vh; "
        "background: linear-gradient(135deg, #fcf3f9, #fcf9f3); overflow: hidden; "
        "padding: 2rem; display: flex; align-items: center; justify-content: center; "
        "box-sizing: border-box;"
    )
    container_class: str = ""
    container_aria: str = "Hero section"
    background_style: str = (
        "position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background-size: cover; background-position: center; opacity: 0.1; z-index: 0;"
    )
    background_class: str = ""
    background_aria: str = "true"
    layout_style: str = (
        "position: relative; display: grid; grid-template-columns: 1fr 1fr; gap: 4rem; "
        "width: 100%; max-width: 1200px; align-items: center; z-index: 1; "
        "box-sizing: border-box;"
    )
    layout_class: str = ""
    left_content_style: str = "width: 100%; box-sizing: border-box; padding: 0 10rem;"
    left_content_class: str = ""
    right_content_style: str = (
        "position: relative; width: 100%; box-sizing: border-box; padding-left: 10rem;"
    )
    right_content_class: str = ""
    card_top_left_style: str = "position: absolute; top: -5.5rem; left: 3.5rem; z-index: 2;"
    card_bottom_right_style: str = (
        "position: absolute; bottom: -5.5rem; right: -4.5rem; z-index: 2;"
    )
    badge_text: str = DEFAULT_BADGE_TEXT
    heading: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    primary_button_text: str = DEFAULT_PRIMARY_BUTTON_TEXT
    primary_button_href: str = DEFAULT_PRIMARY_BUTTON_HREF
    section_style: str = _SECTION_STYLE
    section_class: str = ""
    main_style: str = _MAIN_STYLE
    main_class: str = ""
    text_style: str = _TEXT_STYLE
    text_class: str = ""
    title_style: str = _TITLE_STYLE
    title_class: str = ""
    description_style: str = _DESCRIPTION_STYLE
    description_class: str = ""
    actions_class: str = ""
    actions_style: str = _ACTIONS_STYLE
    primary_button_style: str = _PRIMARY_BUTTON_STYLE
    icon_button_style: str = _ICON_BUTTON_STYLE
    icon_button_class: str = _ICON_BUTTON_CLASS
    is_mobile: bool = False

    def layout_styles(self) -> tuple[str, str, str]:
        """Return the layout, left-column and right-column styles for the current width."""
        if self.is_mobile:
            return MOBILE_LAYOUT_STYLE, MOBILE_LEFT_CONTENT_STYLE, MOBILE_RIGHT_CONTENT_STYLE
        return self.layout_style, self.left_content_style, self.right_content_style

    def render(self) -> Element:
        layout_style, left_style, right_style = self.layout_styles()
        content = HeroContent(
            badge_text=self.badge_text,
            title=self.heading,
            description=self.description,
            primary_button_text=self.primary_button_text,
            primary_button_href=self.primary_button_href,
            section_style=self.section_style,
            section_class=self.section_class,
            main_style=self.main_style,
            main_class=self.main_class,
            text_style=self.text_style,
            text_class=self.text_class,
            title_style=self.title_style,
            title_class=self.title_class,
            description_style=self.description_style,
            description_class=self.description_class,
            actions_class=self.actions_class,
            actions_style=self.actions_style,
            primary_button_style=self.primary_button_style,
            icon_button_style=self.icon_button_style,
            icon_button_class=self.icon_button_class,
        )
        web_dev = ServiceCard(
            icon=self.web_dev_icon, title=self.web_dev_title, icon_alt=self.web_dev_icon_alt
        )
        ui_ux = ServiceCard(
            icon=self.ui_ux_icon, title=self.ui_ux_title, icon_alt=self.ui_ux_icon_alt
        )
        return element(
            "section",
            {
                "id": "main-content",
                "aria-labelledby": "hero-heading",
                "aria-label": self.container_aria,
                "style": self.container_style,
                "class": _cls(self.container_class),
            },
            element(
                "div",
                {
                    "style": f"background-image: url('{self.background_image}'); "
                    f"{self.background_style}",
                    "class": _cls(self.background_class),
                    "aria-hidden": self.background_aria,
                },
            ),
            element(
                "div",
                {"style": layout_style, "class": _cls(self.layout_class)},
                element(
                    "div",
                    {"style": left_style, "class": _cls(self.left_content_class)},
                    content.render(),
                ),
                element(
                    "div",
                    {"style": right_style, "class": _cls(self.right_content_class)},
                    HeroImage(src=self.team_image, alt=self.team_image_alt).render(),
                    element("div", {"style": self.card_top_left_style}, web_dev.render()),
                    element("div", {"style": self.card_bottom_right_style}, ui_ux.render()),
                ),
            ),
        )