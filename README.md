# traveller

A small HTML and CSS document engine for pages shown in a character-cell
terminal. It tokenizes a forgiving subset of HTML, builds a DOM tree, matches
CSS selectors against the tree, computes styles (padding, margin, colours,
display, width, height, position, text alignment) and lays the tree out in the
rows and columns of a fixed-width window.

The package has no runtime dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using it

Parse a page, apply a style sheet and lay it out for an 80-column window:

```python
from traveller.css import (
    CssDeclaration, CssRule, CssSelector, CssStyleSheet,
    DeclarationType, SelectorAttributeType, SelectorSection, SelectorSectionType,
)
from traveller.document import parse_document

sheet = CssStyleSheet()
sheet.add_rule(CssRule(
    selector=CssSelector([
        SelectorSection(SelectorSectionType.TAG, "td",
                        SelectorAttributeType.CLASS, "active"),
    ]),
    declarations=[
        CssDeclaration(DeclarationType.PADDING_LEFT, "padding-left", "10"),
    ],
))

document = parse_document("""
<html>
  <head><title>Harbour</title></head>
  <body>
    <div class="hello"><table><tr><td class="active">x</td></tr></table></div>
  </body>
</html>
""", sheet)
document.render(80)
print(document.title)   # "Harbour"
```

### Modules

- `traveller.html` — `scan_html_tokens(content)` yields `Token` objects whose
  `type` is a `TokenType` (`START_TAG`, `END_TAG`, `SELF_CLOSING_TAG`, `TEXT`).
  `parse_html(content)` returns a `ParsedHtml` holding the root `HtmlDom` and
  the text found inside `<script>` and `<style>` elements. Text nodes have
  whitespace collapsed and the entities `&quot;`, `&amp;`, `&gt;`, `&lt;` and
  `&nbsp;` decoded. Each `HtmlDom` carries its `title` (tag name),
  `attributes`, `id`, `classes`, `children` and a computed `style`
  (`DomStyle`). `lookup_dom_info(name)` describes the known tags, and
  `HtmlDom.format_tree(indent)` returns a readable outline of a subtree.
- `traveller.css` — the style sheet model: `CssStyleSheet`, `CssRule`,
  `CssSelector`, `SelectorSection` and `CssDeclaration`.
  `CssStyleSheet.add_rule(rule)` merges a rule into an existing rule with the
  same selector, replacing declarations of the same type.
- `traveller.selector` — `select_doms(root, selector)` returns the elements a
  descendant selector matches, in document order; `section_matches`,
  `sections_match_left` and `scan_leaf_doms(dom)` (the styleable elements with
  no styleable children) are available too.
- `traveller.style` — `apply_declaration(dom, declaration)` applies one
  declaration; `compute_tree_style(root, stylesheet)` applies every rule of the
  sheet and then each element's `style_declarations`.
- `traveller.layout` — `layout_tree(root, width)` assigns each element its
  start position, width and height and returns the final `LayoutEnvironment`.
- `traveller.document` — `parse_document(content, stylesheet)` builds a
  `Document`; `Document.render(width)` lays it out and walks the tree, taking
  the page title from the `<title>` element.
- `traveller.color` — `color_from_name(name)` maps the eight terminal colour
  names to `Color`, and `color_pair(foreground, background)` gives the pair
  number for a combination (`ValueError` for `Color.UNKNOWN`).

## What it does not do

- It does not parse CSS text. The contents of `<style>` elements are collected
  in `Document.style`, and the text of a `style` attribute is kept in
  `HtmlDom.style_text`, but the rules and declarations to apply have to be
  built as `traveller.css` objects and passed in (or put in
  `HtmlDom.style_declarations`).
- It does not draw anything on a screen; layout produces positions and sizes
  only.
- It does not run scripts; script text is only collected in `Document.script`.
- It has no command-line program.