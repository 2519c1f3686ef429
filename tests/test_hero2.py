import pytest

from heroblocks.hero2 import (
    CONTACT_ARIA_LABEL,
    DEFAULT_TITLE,
    MOBILE_LAYOUT_STYLE,
    MOBILE_LEFT_CONTENT_STYLE,
    MOBILE_RIGHT_CONTENT_STYLE,
    Badge,
    Button,
    Hero,
    HeroContent,
    HeroImage,
    ServiceCard,
)
from heroblocks.markup import Element


def find_all(node, tag):
    found = []
    if isinstance(node, Element):
        if node.tag == tag:
            found.append(node)
        for child in node.children:
            found.extend(find_all(child, tag))
    return found


def test_badge_renders_text_escaped():
    html_text = Badge(text="Fish & Chips").render().render()
    assert "Fish &amp; Chips" in html_text
    assert html_text.startswith("<div")


def test_button_label_falls_back_to_text():
    assert Button(text="Go").render().attrs["aria-label"] == "Go"


def test_button_explicit_aria_label_wins():
    tree = Button(text="Go", aria_label="Start now").render()
    assert tree.attrs["aria-label"] == "Start now"


def test_button_without_text_or_label_has_empty_label_and_no_span():
    tree = Button(icon="fa-x").render()
    assert tree.attrs["aria-label"] == ""
    assert find_all(tree, "span") == []
    assert len(find_all(tree, "i")) == 1


def test_button_icon_hidden_only_without_alt():
    hidden = find_all(Button(icon="fa-x").render(), "i")[0]
    shown = find_all(Button(icon="fa-x", icon_alt="arrow").render(), "i")[0]
    assert hidden.attrs["aria-hidden"] == "true"
    assert shown.attrs["aria-hidden"] == "false"


def test_button_default_href_and_role():
    tree = Button(text="Go").render()
    assert tree.tag == "a"
    assert tree.attrs["href"] == "#"
    assert tree.attrs["role"] == "button"


def test_hero_content_title_and_buttons():
    tree = HeroContent(title="Hello", primary_button_href="#here").render()
    (h1,) = find_all(tree, "h1")
    assert h1.attrs["id"] == "hero-title"
    assert h1.children == ["Hello"]
    links = find_all(tree, "a")
    assert [link.attrs["href"] for link in links] == ["#here", "#here"]
    assert links[0].attrs["aria-label"] == "Get Started"
    assert links[1].attrs["aria-label"] == CONTACT_ARIA_LABEL


def test_hero_content_icon_button_class():
    tree = HeroContent(icon_button_class="fa-custom").render()
    icons = find_all(tree, "i")
    assert [icon.attrs["class"] for icon in icons] == ["fa-custom"]


def test_hero_image_sets_src_and_alt():
    tree = HeroImage(src="team.png", alt="The team").render()
    (img,) = find_all(tree, "img")
    assert img.attrs["src"] == "team.png"
    assert img.attrs["alt"] == "The team"
    assert img.render().endswith(">") and "</img>" not in img.render()


def test_service_card_structure():
    tree = ServiceCard(icon="fa-solid fa-code", icon_alt="code", title="Web").render()
    assert tree.tag == "article"
    (icon,) = find_all(tree, "i")
    assert icon.attrs["title"] == "code"
    assert icon.attrs["class"] == "fa-solid fa-code"
    (h3,) = find_all(tree, "h3")
    assert h3.children == ["Web"]


def test_layout_styles_desktop_uses_props():
    hero = Hero(layout_style="a", left_content_style="b", right_content_style="c")
    assert hero.layout_styles() == ("a", "b", "c")


def test_layout_styles_mobile_overrides_props():
    hero = Hero(layout_style="a", left_content_style="b", right_content_style="c", is_mobile=True)
    assert hero.layout_styles() == (
        MOBILE_LAYOUT_STYLE,
        MOBILE_LEFT_CONTENT_STYLE,
        MOBILE_RIGHT_CONTENT_STYLE,
    )


@pytest.mark.parametrize("mobile", [False, True])
def test_hero_render_applies_layout_styles(mobile):
    hero = Hero(is_mobile=mobile)
    tree = hero.render()
    layout = tree.children[1]
    left, right = layout.children
    assert (layout.attrs["style"], left.attrs["style"], right.attrs["style"]) == hero.layout_styles()


def test_hero_background_image_style():
    tree = Hero(background_image="bg.png", background_style="opacity: 0.1;").render()
    background = tree.children[0]
    assert background.attrs["style"] == "background-image: url('bg.png'); opacity: 0.1;"
    assert background.attrs["aria-hidden"] == "true"


def test_hero_renders_heading_and_cards():
    tree = Hero(web_dev_title="Backend", ui_ux_title="Design").render()
    assert tree.attrs["id"] == "main-content"
    assert find_all(tree, "h1")[0].children == [DEFAULT_TITLE]
    titles = [h3.children[0] for h3 in find_all(tree, "h3")]
    assert titles == ["Backend", "Design"]


def test_hero_team_image_passed_through():
    tree = Hero(team_image="people.jpg", team_image_alt="People").render()
    (img,) = find_all(tree, "img")
    assert (img.attrs["src"], img.attrs["alt"]) == ("people.jpg", "People")