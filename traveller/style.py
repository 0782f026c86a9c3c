"""Applying style sheet rules and inline declarations to a DOM tree."""

from __future__ import annotations

import re

from traveller.color import color_from_name
from traveller.css import CssDeclaration, CssStyleSheet, DeclarationType
from traveller.html import Display, HtmlDom, Position, TextAlign
from traveller.selector import select_doms

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_DISPLAYS = {
    "none": Display.NONE,
    "block": Display.BLOCK,
    "inline-block": Display.INLINE_BLOCK,
}
_ALIGNS = {
    "left": TextAlign.LEFT,
    "center": TextAlign.CENTER,
    "right": TextAlign.RIGHT,
}
_POSITIONS = {
    "relative": Position.RELATIVE,
    "absolute": Position.ABSOLUTE,
    "fixed": Position.FIXED,
    "static": Position.STATIC,
}

_SIMPLE_FIELDS = {
    DeclarationType.PADDING_TOP: ("padding_top",),
    DeclarationType.PADDING_BOTTOM: ("padding_bottom",),
    DeclarationType.PADDING_LEFT: ("padding_left",),
    DeclarationType.PADDING_RIGHT: ("padding_right",),
    DeclarationType.PADDING: (
        "padding_top",
        "padding_bottom",
        "padding_left",
        "padding_right",
    ),
    DeclarationType.MARGIN_TOP: ("margin_top",),
    DeclarationType.MARGIN_BOTTOM: ("margin_bottom",),
    DeclarationType.MARGIN_LEFT: ("margin_left",),
    DeclarationType.MARGIN_RIGHT: ("margin_right",),
    DeclarationType.MARGIN: (
        "margin_top",
        "margin_bottom",
        "margin_left",
        "margin_right",
    ),
    DeclarationType.HEIGHT: ("height",),
    DeclarationType.LEFT: ("left",),
    DeclarationType.RIGHT: ("right",),
    DeclarationType.TOP: ("top",),
    DeclarationType.BOTTOM: ("bottom",),
}


def _non_negative(value: str) -> int:
    match = _LEADING_INT.match(value)
    number = int(match.group(1)) if match else 0
    return max(number, 0)


def _remember(dom: HtmlDom, declaration: CssDeclaration) -> None:
    for held in dom.css_declarations:
        if held.type == declaration.type:
            held.update_from(declaration)
            return
    dom.css_declarations.append(declaration.copy())


def apply_declaration(dom: HtmlDom, declaration: CssDeclaration) -> None:
    """Record ``declaration`` on ``dom`` and update its computed style."""
    _remember(dom, declaration)
    style = dom.style
    kind = declaration.type
    value = declaration.value

    if kind in _SIMPLE_FIELDS:
        number = _non_negative(value)
        for name in _SIMPLE_FIELDS[kind]:
            setattr(style, name, number)
    elif kind is DeclarationType.BACKGROUND_COLOR:
        style.background_color = int(color_from_name(value))
    elif kind is DeclarationType.COLOR:
        style.color = int(color_from_name(value))
    elif kind is DeclarationType.DISPLAY:
        style.display = _DISPLAYS.get(value, style.display)
    elif kind is DeclarationType.TEXT_ALIGN:
        style.text_align = _ALIGNS.get(value, style.text_align)
    elif kind is DeclarationType.POSITION:
        style.position = _POSITIONS.get(value, style.position)
    elif kind is DeclarationType.WIDTH:
        if value.endswith("%"):
            style.is_width_percent = True
            style.width_percent = _non_negative(value[:-1])
        else:
            style.is_width_percent = False
            style.width = _non_negative(value)


def _apply_inline(dom: HtmlDom) -> None:
    if not dom.is_style_exempt():
        for declaration in dom.style_declarations:
            apply_declaration(dom, declaration)
    for child in dom.children:
        _apply_inline(child)


def compute_tree_style(root: HtmlDom, stylesheet: CssStyleSheet) -> None:
    """Apply every rule of ``stylesheet``, then each node's inline declarations."""
    for rule in stylesheet.rules:
        if not rule.declarations:
            continue
        for dom in select_doms(root, rule.selector):
            for declaration in rule.declarations:
                apply_declaration(dom, declaration)
    _apply_inline(root)