from traveller.css import (
    CssDeclaration,
    CssRule,
    CssSelector,
    CssStyleSheet,
    DeclarationType,
    SelectorSection,
    SelectorSectionType,
)
from traveller.document import Document, parse_document
from traveller.html import HtmlDom


def _find(dom: HtmlDom, title: str) -> list[HtmlDom]:
    found = [dom] if dom.title == title else []
    for child in dom.children:
        found.extend(_find(child, title))
    return found


def test_title_set_by_render():
    doc = parse_document("<html><head><title>Hello</title></head></html>")
    assert doc.title is None
    doc.render(80)
    assert doc.title == "Hello"


def test_empty_title_leaves_title_unset():
    doc = parse_document("<html><head><title> </title></head></html>")
    doc.render(80)
    assert doc.title is None


def test_script_and_style_collected():
    doc = parse_document("<script>run()</script><style>div {}</style>")
    assert doc.script == "run()"
    assert doc.style == "div {}"


def test_content_kept():
    html = "<div>a</div>"
    doc = parse_document(html)
    assert doc.content == html
    assert [d.title for d in doc.root.children] == ["div"]


def test_stylesheet_applied():
    sheet = CssStyleSheet()
    sheet.add_rule(
        CssRule(
            CssSelector([SelectorSection(SelectorSectionType.TAG, "div")]),
            [CssDeclaration(DeclarationType.PADDING_TOP, "padding-top", "10")],
        )
    )
    doc = parse_document("<div>a</div><table></table>", sheet)
    assert _find(doc.root, "div")[0].style.padding_top == 10
    assert _find(doc.root, "table")[0].style.padding_top == 0
    assert doc.stylesheet is sheet


def test_without_stylesheet_no_styles():
    doc = parse_document("<div>a</div>")
    assert doc.stylesheet.rules == []
    assert _find(doc.root, "div")[0].style.padding_top == 0


def test_render_lays_out_tree():
    doc = parse_document("<div>a</div>")
    doc.render(80)
    assert doc.root.style.width == 80
    assert doc.layout_environment.width == 80
    assert _find(doc.root, "div")[0].style.width == 80


def test_render_tree_on_subtree():
    doc = parse_document("<head><title>Page</title></head>")
    title = _find(doc.root, "title")[0]
    doc.render_tree(title)
    assert doc.title == "Page"


def test_render_replaces_previous_title():
    doc = Document(content="", root=parse_document("<title>New</title>").root)
    doc.title = "Old"
    doc.render(20)
    assert doc.title == "New"