# heroblocks

Ready-made hero sections for landing pages, built as trees of HTML elements
and serialised to plain, accessible HTML. Every piece of text, every CSS class
and every inline style is a field that can be overridden, and the defaults
give a finished-looking section with no extra work.

The package has no runtime dependencies.

## Installation

```
pip install heroblocks
```

## The building blocks

`heroblocks.markup` holds a small HTML tree:

```python
from heroblocks.markup import element, render

node = element("p", {"class": "lead"}, "Hello & welcome")
print(render(node))   # <p class="lead">Hello &amp; welcome</p>
```

- `element(tag, attrs, *children)` builds an `Element`. Children may be text,
  numbers, other elements, `None` (dropped) or nested iterables of these
  (flattened).
- Attribute values are escaped; `None` and `False` leave the attribute out,
  `True` writes it bare (for example `disabled`).
- Void elements such as `img` and `input` cannot take children; invalid tag
  or attribute names raise `ValueError`, unsupported children `TypeError`.
- `Element.render()` serialises one element; `render(node)` accepts an
  element, a string, `None` or an iterable of nodes.

## Hero sections

Every component is a dataclass whose `render()` method returns an `Element`.
Pass that to `heroblocks.markup.render` (or call its own `render()`) to get
the HTML string.

### Hero 1: heading, call to action and process tabs (`heroblocks.hero1`)

```python
from heroblocks.hero1 import Hero
from heroblocks.markup import render

hero = Hero(heading="Rust for Modern Web Development",
            description="Ship fast full stack web applications.")
hero.select_tab("explore")
html = render(hero.render())
```

The tab strip starts on the `connect` tab. The selected tab is written with
`aria-selected="true"`, `tabindex="0"` and the active styles added.

Smaller pieces: `Badge`, `Button`, `HeroContent`, `TabButton` and
`ProcessTabs`. `ProcessTabs.select(tab_id)` changes its active tab.
`TabButton.click()` calls its `on_click` callback, if set, and
`TabButton.key_down(key)` does the same for `"Enter"` or `" "`, returning
whether the key was handled.

### Hero 2: content beside an image and service cards (`heroblocks.hero2`)

```python
from heroblocks.hero2 import Hero

hero = Hero(heading="Build Ultra-Fast Web Apps",
            description="Modern speed for your web stack.",
            is_mobile=True)
layout, left, right = hero.layout_styles()
html = hero.render().render()
```

With `is_mobile=True` the two columns stack in a single-column grid;
`layout_styles()` returns the layout, left-column and right-column styles
that `render()` will use. Smaller pieces: `Badge`, `Button`, `HeroContent`,
`HeroImage` and `ServiceCard`.

### Hero 3: decorated background, gradient title and company logos (`heroblocks.hero3`)

```python
from heroblocks.hero3 import Hero, HeroActions

hero = Hero(drive_text="Build ",
            growth_text="Next-gen Apps",
            through_text="Effortlessly")
html = hero.render().render()

actions = HeroActions(on_get_started=lambda: print("started"))
actions.get_started()   # calls on_get_started
actions.learn_more()    # no callback set: does nothing
```

The rest of the section is made from `HeroBadge`, `HeroTitle`,
`HeroDescription`, `HeroActions`, `CompanyLogo` and `Companies`. The
decorative background lives in `heroblocks.hero3_background`: `Background`
combines `BackgroundShapes` (blurred shapes and a star icon) with
`BackgroundLines` (thin vertical guide lines).

## What the package does not do

- It produces static markup only. No JavaScript is written, so clicks and key
  presses in a browser do nothing by themselves; the `click`, `key_down`,
  `select`, `select_tab`, `get_started` and `learn_more` methods exist for
  your own code to call before rendering again.
- It does not watch the screen width: the narrow layout of `hero2.Hero` is
  chosen only by the `is_mobile` field. Its media query is available as
  `heroblocks.hero2.MOBILE_MEDIA_QUERY` for use in your own pages.
- Icons use Font Awesome class names; the stylesheet for them is not included.
- There is no command-line tool and no web server.

## Running the tests

```
pip install heroblocks[test]
pytest
```