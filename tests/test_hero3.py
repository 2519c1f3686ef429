from heroblocks.hero3 import (
    DEFAULT_COMPANIES,
    Companies,
    CompanyLogo,
    Hero,
    HeroActions,
    HeroBadge,
    HeroDescription,
    HeroTitle,
)
from heroblocks.hero3_background import Background
from heroblocks.markup import Element


def _texts(node):
    if isinstance(node, str):
        return [node]
    return [text for child in node.children for text in _texts(child)]


def _find_all(node, predicate):
    if isinstance(node, str):
        return []
    found = [node] if predicate(node) else []
    for child in node.children:
        found.extend(_find_all(child, predicate))
    return found


def test_badge_defaults():
    badge = HeroBadge().render()
    assert badge.tag == "div"
    assert badge.attrs["role"] == "banner"
    assert "class" not in badge.render()
    assert _texts(badge) == ["Launching Soon"]


def test_badge_custom_class_and_text():
    badge = HeroBadge(class_="pill", text="Now live").render()
    assert badge.attrs["class"] == "pill"
    assert _texts(badge) == ["Now live"]


def test_title_spans_in_order():
    title = HeroTitle().render()
    assert title.tag == "h1"
    assert title.attrs["id"] == "hero-title"
    assert [child.tag for child in title.children] == ["span"] * 4
    assert _texts(title) == ["Build ", "Apps", " ", "Blazingly Fast"]


def test_title_custom_texts():
    title = HeroTitle(drive_text="Ship ", growth_text="Tools", through_text="Today").render()
    assert _texts(title) == ["Ship ", "Tools", " ", "Today"]


def test_title_default_style_is_block_layout():
    style = HeroTitle().style
    assert style.startswith("\n")
    assert "letter-spacing: -0.5px;" in style


def test_description_escapes_text():
    html = HeroDescription(text="a < b & c").render().render()
    assert "a &lt; b &amp; c" in html
    assert html.startswith("<p ")


def test_actions_buttons_and_labels():
    actions = HeroActions().render()
    buttons = [child for child in actions.children if isinstance(child, Element)]
    assert [b.attrs["aria-label"] for b in buttons] == ["Get Started", "Learn More"]
    assert _texts(buttons[1]) == ["Learn More", "→"]


def test_actions_callbacks_fire_separately():
    calls = []
    actions = HeroActions(
        on_get_started=lambda: calls.append("start"),
        on_learn_more=lambda: calls.append("learn"),
    )
    actions.get_started()
    actions.learn_more()
    actions.get_started()
    assert calls == ["start", "learn", "start"]


def test_actions_without_callbacks_return_none():
    actions = HeroActions()
    assert actions.get_started() is None
    assert actions.learn_more() is None


def test_company_logo_aria_label():
    logo = CompanyLogo(name="Acme", icon_class="fa-brands fa-acme").render()
    assert logo.attrs["role"] == "listitem"
    icon = logo.children[0]
    assert icon.attrs["aria-label"] == "Acme logo"
    assert icon.attrs["class"] == "fa-brands fa-acme"


def test_companies_renders_one_logo_each_in_order():
    tree = Companies().render()
    items = _find_all(tree, lambda e: e.attrs.get("role") == "listitem")
    assert len(items) == len(DEFAULT_COMPANIES)
    labels = [item.children[0].attrs["aria-label"] for item in items]
    assert labels == [f"{name} logo" for name, _ in DEFAULT_COMPANIES]


def test_companies_custom_list_and_title():
    tree = Companies(title_text="Friends", companies=(("Acme", "fa-acme"),)).render()
    assert tree.children[0].tag == "p"
    assert _texts(tree.children[0]) == ["Friends"]
    items = _find_all(tree, lambda e: e.attrs.get("role") == "listitem")
    assert len(items) == 1


def test_companies_empty_list():
    tree = Companies(companies=()).render()
    assert _find_all(tree, lambda e: e.attrs.get("role") == "listitem") == []


def test_hero_structure():
    tree = Hero().render()
    assert tree.tag == "div"
    first, main, last = tree.children
    assert first == Background().render()
    assert main.tag == "main"
    assert main.attrs["id"] == "main-content"
    section = main.children[0]
    assert section.attrs["role"] == "main"
    assert section.attrs["aria-labelledby"] == "hero-title"
    assert last == Companies(
        logos_style=Hero().companies_logos_style,
        logos_class=Hero().companies_logos_class,
        title_style=Hero().companies_title_style,
    ).render()


def test_hero_passes_texts_through():
    hero = Hero(
        badge_text="Beta",
        drive_text="Make ",
        growth_text="Sites",
        through_text="Quickly",
        description_text="Short blurb.",
    )
    tree = hero.render()
    titles = _find_all(tree, lambda e: e.tag == "h1")
    assert len(titles) == 1
    assert _texts(titles[0]) == ["Make ", "Sites", " ", "Quickly"]
    banners = _find_all(tree, lambda e: e.attrs.get("role") == "banner")
    assert _texts(banners[0]) == ["Beta"]
    paragraphs = [p for p in _find_all(tree, lambda e: e.tag == "p") if _texts(p) == ["Short blurb."]]
    assert len(paragraphs) == 1


def test_hero_single_main_content_id():
    html = Hero().render().render()
    assert html.count('id="main-content"') == 1
    assert html.count('id="hero-title"') == 1


def test_hero_button_labels():
    tree = Hero(primary_button_label="Go", secondary_button_label="More").render()
    buttons = _find_all(tree, lambda e: e.tag == "button")
    assert [b.attrs["aria-label"] for b in buttons] == ["Go", "More"]