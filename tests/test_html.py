import pytest

from traveller.html import (
    Display,
    DomType,
    Position,
    TextAlign,
    Token,
    TokenType,
    lookup_dom_info,
    parse_html,
    scan_html_tokens,
)

PARSER_HTML = (
    '      <div id="top" style="background:black" data="shit \'\' \\" shit" class="top hover">'
    '        <input type="text" name="text" />'
    "        <table>"
    "            <tr>"
    "                <td>   hello    world   ! </td>"
    "            </tr> "
    "        </table>"
    "        <script>"
    "        hello sdlkfjsdfonounoi123oi12n3oin "
    "        </script>"
    "        hello  &gt; &nbsp; sdlkfj "
    "      </div>"
    "      <style>"
    "      .hello {} "
    "      div {} "
    "      </style>"
    "      "
)


def test_token_scanner_sequence():
    html = (
        "      <div>"
        '      <input type="text" name="text" />'
        "      hello world ! "
        "      </div>"
        "      "
    )
    tokens = list(scan_html_tokens(html))
    assert tokens == [
        Token(TokenType.START_TAG, "<div>"),
        Token(TokenType.SELF_CLOSING_TAG, '<input type="text" name="text" />'),
        Token(TokenType.TEXT, "hello world !"),
        Token(TokenType.END_TAG, "</div>"),
    ]


def test_scanner_empty_input():
    assert list(scan_html_tokens("   \n\t ")) == []


def test_scanner_nested_lt_inside_tag():
    assert list(scan_html_tokens("<a<b>")) == [Token(TokenType.START_TAG, "<a<b>")]


@pytest.fixture
def parsed():
    return parse_html(PARSER_HTML)


def test_parser_root_div(parsed):
    root_div = parsed.root.children[0]
    assert len(root_div.children) == 4
    assert root_div.title == "div"
    assert root_div.classes == ["top", "hover"]
    assert root_div.id == "top"


def test_parser_nested_structure(parsed):
    root_div = parsed.root.children[0]
    assert root_div.children[0].title == "input"
    table = root_div.children[1]
    assert table.title == "table"
    tr = table.children[0]
    assert tr.title == "tr"
    td = tr.children[0]
    assert td.title == "td"
    assert td.children[0].content == "hello world !"


def test_parser_attributes(parsed):
    root_div = parsed.root.children[0]
    assert root_div.attributes == [
        ("id", "top"),
        ("style", "background:black"),
        ("data", "shit '' \" shit"),
        ("class", "top hover"),
    ]
    assert root_div.style_text == "background:black"
    assert root_div.children[0].attributes == [("type", "text"), ("name", "text")]


def test_parser_entities_and_whitespace(parsed):
    text_dom = parsed.root.children[0].children[3]
    assert text_dom.info.type is DomType.TEXT
    assert text_dom.content == "hello >   sdlkfj"
    assert text_dom.content_width == len("hello >   sdlkfj")


def test_parser_script_and_style(parsed):
    assert parsed.script == "hello sdlkfjsdfonounoi123oi12n3oin"
    assert " ".join(parsed.style.split()) == ".hello {} div {}"
    script_dom = parsed.root.children[0].children[2]
    assert script_dom.is_style_exempt()
    assert script_dom.children == []


def test_unknown_entity_drops_rest():
    result = parse_html("<p>a &foo b</p>")
    assert result.root.children[0].children[0].content == "a "


def test_wide_characters_width():
    result = parse_html("<div>你好</div>")
    text_dom = result.root.children[0].children[0]
    assert text_dom.content == "你好"
    assert text_dom.content_width == 4


def test_initial_styles():
    result = parse_html("<div><td></td><a></a></div>")
    div = result.root.children[0]
    assert div.style.display is Display.BLOCK
    assert div.style.position is Position.RELATIVE
    td, anchor = div.children
    assert td.style.display is Display.INLINE_BLOCK
    assert td.style.position is Position.STATIC
    assert anchor.style.display is Display.NONE
    assert anchor.info.name == "undefined"
    assert td.style.text_align is TextAlign.LEFT


def test_extra_end_tag_at_root_is_tolerated():
    result = parse_html("</x><div></div>")
    assert [child.title for child in result.root.children] == ["div"]


def test_lookup_dom_info():
    info = lookup_dom_info("td")
    assert info.type is DomType.TD
    assert info.initial_display is Display.INLINE_BLOCK
    assert lookup_dom_info("a") is None


def test_format_tree():
    result = parse_html('<div id="x">hi</div>')
    assert result.root.format_tree(0) == (
        "<:undefined>\n"
        "  <div:div> |id=x| \n"
        "    (text) hi\n"
    )


def test_multiple_class_attributes_accumulate():
    result = parse_html('<div class=" a  b " class="c"></div>')
    assert result.root.children[0].classes == ["a", "b", "c"]