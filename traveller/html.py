"""HTML tokenizer and DOM tree builder for terminal pages."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, Optional

_WHITESPACE = " \t\r\n"


class TokenType(IntEnum):
    """Kinds of token produced by the HTML scanner."""

    TEXT = -1
    START_TAG = -2
    END_TAG = -3
    SELF_CLOSING_TAG = -4


@dataclass(frozen=True)
class Token:
    """A single scanned piece of markup."""

    type: TokenType
    content: str


class DomType(IntEnum):
    UNDEFINED = 0
    TEXT = 1
    HTML = 2
    HEAD = 3
    TITLE = 4
    BODY = 5
    SCRIPT = 6
    DIV = 7
    TABLE = 8
    TR = 9
    TD = 10
    STYLE = 11
    INPUT = 12


class Display(IntEnum):
    NONE = 0
    BLOCK = 1
    INLINE_BLOCK = 2


class Position(IntEnum):
    RELATIVE = 0
    ABSOLUTE = 1
    FIXED = 2
    STATIC = 3


class TextAlign(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class DomInfo:
    """Static description of a known tag."""

    name: str
    type: DomType
    initial_display: Display = Display.NONE
    initial_position: Position = Position.RELATIVE


_DOM_INFOS: dict[str, DomInfo] = {
    info.name: info
    for info in (
        DomInfo("undefined", DomType.UNDEFINED),
        DomInfo("head", DomType.HEAD),
        DomInfo("title", DomType.TITLE),
        DomInfo("script", DomType.SCRIPT),
        DomInfo("style", DomType.STYLE),
        DomInfo("html", DomType.HTML, Display.BLOCK, Position.STATIC),
        DomInfo("text", DomType.TEXT, Display.BLOCK, Position.STATIC),
        DomInfo("body", DomType.BODY, Display.BLOCK, Position.STATIC),
        DomInfo("div", DomType.DIV, Display.BLOCK, Position.RELATIVE),
        DomInfo("table", DomType.TABLE, Display.BLOCK, Position.RELATIVE),
        DomInfo("tr", DomType.TR, Display.BLOCK, Position.STATIC),
        DomInfo("td", DomType.TD, Display.INLINE_BLOCK, Position.STATIC),
        DomInfo("input", DomType.INPUT, Display.INLINE_BLOCK, Position.RELATIVE),
    )
}

_UNDEFINED_INFO = _DOM_INFOS["undefined"]

_ENTITIES: dict[str, str] = {
    "&quot;": '"',
    "&amp;": "&",
    "&gt;": ">",
    "&lt;": "<",
    "&nbsp;": " ",
}


def lookup_dom_info(name: str) -> Optional[DomInfo]:
    """Return the description of a known tag name, or None."""
    return _DOM_INFOS.get(name)


@dataclass
class DomStyle:
    """Computed style of a DOM node."""

    padding_top: int = 0
    padding_bottom: int = 0
    padding_left: int = 0
    padding_right: int = 0
    margin_top: int = 0
    margin_bottom: int = 0
    margin_left: int = 0
    margin_right: int = 0
    background_color: int = 0
    color: int = 0
    is_width_percent: bool = False
    width_percent: int = 0
    width: int = 0
    height: int = 0
    position_start_x: int = 0
    position_start_y: int = 0
    text_align: TextAlign = TextAlign.LEFT
    display: Display = Display.NONE
    position: Position = Position.RELATIVE
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


@dataclass(eq=False)
class HtmlDom:
    """A node of the parsed document tree."""

    parent: Optional["HtmlDom"] = field(default=None, repr=False)
    title: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)
    id: Optional[str] = None
    classes: list[str] = field(default_factory=list)
    style_text: Optional[str] = None
    style_declarations: list = field(default_factory=list, repr=False)
    css_declarations: list = field(default_factory=list, repr=False)
    content: Optional[str] = None
    content_width: int = 0
    children: list["HtmlDom"] = field(default_factory=list, repr=False)
    style: DomStyle = field(default_factory=DomStyle)
    info: DomInfo = _UNDEFINED_INFO
    layout_children_width: int = field(default=0, repr=False)
    layout_current_row_height: int = field(default=0, repr=False)
    layout_children_height: int = field(default=0, repr=False)

    def is_style_exempt(self) -> bool:
        """True for nodes that never take part in CSS matching."""
        return self.info.type in (DomType.TEXT, DomType.SCRIPT, DomType.STYLE)

    def apply_info(self, info: DomInfo) -> None:
        """Set the tag description and its initial style."""
        self.info = info
        self.style.display = info.initial_display
        self.style.position = info.initial_position
        self.style.text_align = (
            self.parent.style.text_align if self.parent is not None else TextAlign.LEFT
        )

    def format_tree(self, indent: int = 0) -> str:
        """Render this subtree as an indented, human readable outline."""
        parts: list[str] = []
        self._format_into(parts, indent)
        return "".join(parts)

    def _format_into(self, parts: list[str], indent: int) -> None:
        parts.append("  " * indent)
        exempt = self.is_style_exempt()
        if not exempt:
            parts.append(f"<{self.title}:{self.info.name}>")
        for key, value in self.attributes:
            parts.append(f" |{key}={value}| ")
        if exempt:
            parts.append(f"({self.info.name}) {self.content or ''}\n")
        else:
            parts.append("\n")
        for child in self.children:
            child._format_into(parts, indent + 1)


@dataclass
class ParsedHtml:
    """Result of parsing HTML: the tree plus collected script and style text."""

    root: HtmlDom
    script: str = ""
    style: str = ""


def _display_width(text: str) -> int:
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


_LT, _GT, _SLASH, _TEXT = "<", ">", "/", "text"


def _scan_one(content: str, start: int) -> tuple[Token, int]:
    n = len(content)
    stack: list[str] = []
    token_type = TokenType.TEXT
    i = start
    while i < n and len(stack) < 6:
        ch = content[i]
        if ch == "<":
            if not stack:
                stack.append(_LT)
            elif stack[0] == _LT:
                if stack[-1] != _TEXT:
                    stack.append(_TEXT)
            else:
                stack.append(_LT)
        elif ch == ">":
            stack.append(_GT)
        elif ch == "/":
            stack.append(_SLASH)
        elif not stack or stack[-1] != _TEXT:
            stack.append(_TEXT)

        if stack == [_LT, _TEXT, _GT]:
            token_type = TokenType.START_TAG
            break
        if stack == [_LT, _SLASH, _TEXT, _GT]:
            token_type = TokenType.END_TAG
            break
        if stack == [_LT, _TEXT, _SLASH, _GT]:
            token_type = TokenType.SELF_CLOSING_TAG
            break
        if stack == [_TEXT, _LT]:
            token_type = TokenType.TEXT
            i -= 1
            break
        i += 1

    end = min(i, n - 1)
    next_pos = end + 1
    if token_type is TokenType.TEXT:
        while end >= start and content[end] in _WHITESPACE:
            end -= 1
    return Token(token_type, content[start:end + 1]), next_pos


def scan_html_tokens(content: str) -> Iterator[Token]:
    """Yield the tokens of an HTML string in order."""
    pos = 0
    n = len(content)
    while True:
        while pos < n and content[pos] in _WHITESPACE:
            pos += 1
        if pos >= n:
            return
        token, pos = _scan_one(content, pos)
        yield token


def _read_quoted(text: str, pos: int) -> tuple[str, int]:
    quote = text[pos]
    pos += 1
    chars: list[str] = []
    n = len(text)
    while pos < n:
        ch = text[pos]
        if ch == "\\" and pos + 1 < n:
            chars.append(text[pos + 1])
            pos += 2
            continue
        if ch == quote:
            return "".join(chars), pos + 1
        chars.append(ch)
        pos += 1
    return "".join(chars), pos


def _attribute_words(text: str) -> Iterator[str]:
    pos = 0
    n = len(text)
    while True:
        if pos < n and text[pos] in _WHITESPACE:
            pos += 1
        if pos < n and text[pos] in "'\"":
            word, pos = _read_quoted(text, pos)
        else:
            chars: list[str] = []
            while pos < n:
                ch = text[pos]
                if ch in _WHITESPACE or ch == "=":
                    pos += 1
                    break
                if ch == "\\":
                    pos += 1
                    if pos >= n:
                        break
                    chars.append(text[pos])
                    pos += 1
                    continue
                chars.append(ch)
                pos += 1
            word = "".join(chars)
        yield word
        if pos >= n:
            return


def _parse_tag(dom: HtmlDom, body: str) -> None:
    end = 1
    while end < len(body) and body[end] not in _WHITESPACE:
        end += 1
    dom.title = body[:end]
    info = lookup_dom_info(dom.title)
    if info is not None:
        dom.apply_info(info)

    rest = body[end + 1:]
    if not rest:
        return

    key: Optional[str] = None
    for word in _attribute_words(rest):
        if key is None:
            key = word
            continue
        value = word
        dom.attributes.append((key, value))
        if key == "class":
            dom.classes.extend(value.split())
        elif key == "id":
            dom.id = value
        elif key == "style":
            dom.style_text = value
        key = None


def _decode_text(raw: str) -> str:
    out: list[str] = []
    in_space = False
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch in _WHITESPACE:
            if not in_space:
                in_space = True
                out.append(" ")
            i += 1
            continue
        in_space = False
        if ch == "&":
            semi = raw.find(";", i)
            if semi == -1:
                key, i = raw[i:], n
            else:
                key, i = raw[i:semi + 1], semi + 1
            replacement = _ENTITIES.get(key)
            if replacement is not None:
                out.append(replacement)
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def parse_html(content: str) -> ParsedHtml:
    """Parse an HTML string into a DOM tree, collecting script and style text."""
    root = HtmlDom()
    result = ParsedHtml(root=root)
    dom = root
    for token in scan_html_tokens(content):
        if token.type is TokenType.START_TAG:
            child = HtmlDom(parent=dom)
            _parse_tag(child, token.content[1:-1])
            dom.children.append(child)
            dom = child
        elif token.type is TokenType.END_TAG:
            if dom.parent is not None:
                dom = dom.parent
        elif token.type is TokenType.SELF_CLOSING_TAG:
            child = HtmlDom(parent=dom)
            _parse_tag(child, token.content[1:-2])
            dom.children.append(child)
        elif dom.info.type is DomType.SCRIPT:
            result.script += token.content
        elif dom.info.type is DomType.STYLE:
            result.style += token.content
        else:
            text_dom = HtmlDom(parent=dom)
            text_dom.apply_info(_DOM_INFOS["text"])
            text_dom.content = _decode_text(token.content)
            text_dom.content_width = _display_width(text_dom.content)
            dom.children.append(text_dom)
    return result