# bulmakit

Build Bulma CSS markup from plain Python functions. Each function returns an
`Element` tree that renders to an HTML string with the Bulma class names
already worked out: columns, sections, blocks, boxes, titles, progress bars,
notifications, buttons, icons, tags, tables, breadcrumbs, dropdowns, menus,
modals, navbars, pagination and form fields.

## Installing

```
pip install bulmakit
```

The package has no runtime dependencies.

## Rendering markup

```python
from bulmakit.columns import columns, column
from bulmakit.elements import block, title
from bulmakit.node import render

page = columns(
    column(title("Hello", is_=3), is_="two-fifths"),
    column(block("World")),
)

print(render(page))
```

Children are passed positionally; options are keyword arguments. Extra CSS
classes go in `class_name`. Children may be elements, strings, numbers,
nested iterables or `None` (which is skipped). Text and attribute values are
HTML-escaped when rendered.

`render()` accepts any node; `Element.render()` renders one element,
`Element.classes()` returns the tokens of its class attribute and
`Element.with_attrs()` returns a copy with attributes added or replaced.

## What is in the package

- `bulmakit.node` – `Element`, `element()` and `render()`.
- `bulmakit.enums` – `Alignment`, `Color` (with `Color.custom()` for other
  color names), `Size`, `BreadcrumbSeparator` and `State`.
- `bulmakit.columns` – `columns`, `column`.
- `bulmakit.layout` – `section`.
- `bulmakit.elements` – `block`, `box`, `title`, `subtitle`, `progress`,
  `notification` (returns `None` when not active).
- `bulmakit.button` – `button`, `a_button`, `buttons`, `button_class_list`.
- `bulmakit.icon` – `icon`, `icon_text`, `icon_class_list`.
- `bulmakit.tag` – `tag`, `tags`.
- `bulmakit.table` – `table`, `thead`, `tbody`, `tfoot`; the last three build
  rows and cells from data with a render callback.
- `bulmakit.breadcrumb` – `breadcrumb`, `breadcrumb_item`,
  `breadcrumb_class_list`.
- `bulmakit.dropdown` – `dropdown`, `dropdown_item`, `dropdown_divider`, and
  `toggled()`, which gives the active state after a trigger click.
- `bulmakit.menu` – `aside_menu`, `menu`, `menu_label`, `menu_list`,
  `menu_link` (marked active when `current_path` equals `href`).
- `bulmakit.modal` – `modal`, `modal_content`, `modal_close`.
- `bulmakit.navbar` – `navbar`, `navbar_brand`, `navbar_burger`,
  `navbar_menu`, `navbar_start`, `navbar_end`, `navbar_item`,
  `navbar_item_dropdown`, `navbar_divider`.
- `bulmakit.pagination` – the `Pagination` dataclass (visible page range,
  ellipses, previous/next page, links), `current_page()` to read the page
  number from a query mapping, and `pagination()` to render a bar in one call.
- `bulmakit.form` – `field`, `control`, `help_text`, `label`.
- `bulmakit.inputs` – `text_input`, `textarea`, `checkbox`, `select`,
  `option_elements`, `file_input`, `join_file_names`.
- `bulmakit.fields` – labelled fields with error help: `text_field`,
  `password_field`, `select_field`, `textarea_field`, `checkbox_field`, and
  `normalize_error()`.

## Generating the stylesheet

`bulmakit-build` runs `npm --prefix ./target install bulma@1.0` and writes a
`leptos-bulma.scss` file into the output directory (default `./style`). The
file starts with an `@forward` of `target/node_modules/bulma/sass`, given
relative to the output directory, followed by the contents of your main
stylesheet (default `style/main.scss`, set with `--main-scss`). `npm` must be
on your `PATH`; the same is available from Python as
`bulmakit.build.build(output_dir, main_scss_path)`.

```
bulmakit-build --help
bulmakit-build ./style --main-scss style/main.scss
```

## What the package does not do

The package produces static HTML only. It does not run in the browser and
attaches no event handlers: opening and closing dropdowns, modals, navbar
burgers and notifications, clicks outside an element, clearing a file input
or toggling password visibility are not handled. The state of each component
(`is_active`, `is_visible`, the chosen `file_names`, the current page) is
passed in by the caller, and the markup reflects it. It ships no icon set;
`icon` only wraps whatever content it is given.

## Running the tests

```
pip install -e ".[test]"
pytest
```