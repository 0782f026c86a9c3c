"""Box layout of a styled DOM tree into terminal rows and columns."""

from __future__ import annotations

from dataclasses import dataclass

from traveller.html import Display, DomType, HtmlDom


@dataclass
class LayoutEnvironment:
    """Running cursor and available width while laying out a document."""

    start_x: int = 0
    start_y: int = 0
    width: int = 0


def _break_line(env: LayoutEnvironment, dom: HtmlDom) -> None:
    parent = dom.parent
    env.start_x = 0
    env.start_y += parent.layout_current_row_height + 1
    parent.layout_children_height += parent.layout_current_row_height
    parent.layout_current_row_height = 0


def _layout_block(env: LayoutEnvironment, dom: HtmlDom) -> None:
    parent = dom.parent
    if parent.layout_children_width > 0:
        _break_line(env, dom)
    dom.style.position_start_x = env.start_x
    dom.style.position_start_y = env.start_y
    dom.style.width = parent.style.width
    parent.layout_children_width = dom.style.width


def _layout_inline_block(env: LayoutEnvironment, dom: HtmlDom) -> None:
    parent = dom.parent
    style = dom.style
    if style.is_width_percent:
        style.width = int(parent.style.width * 0.01 * style.width_percent)

    overflows = style.width + parent.layout_children_width > parent.style.width
    if dom.info.type is DomType.TD:
        if overflows:
            style.display = Display.NONE
        return

    if overflows:
        _break_line(env, dom)
    style.position_start_x = env.start_x
    style.position_start_y = env.start_y


def _compute_width(env: LayoutEnvironment, dom: HtmlDom) -> None:
    if dom.style.display is Display.BLOCK:
        _layout_block(env, dom)
    elif dom.style.display is Display.INLINE_BLOCK:
        _layout_inline_block(env, dom)


def _compute_height(dom: HtmlDom) -> None:
    style = dom.style
    if dom.info.type is DomType.TEXT:
        # Text in a box without width cannot occupy any row.
        if style.width <= 0:
            style.height = 0
        else:
            style.height = -(-dom.content_width // style.width)
    else:
        style.height = dom.layout_current_row_height + dom.layout_children_height

    parent = dom.parent
    if parent is not None and style.height > parent.layout_current_row_height:
        parent.layout_current_row_height = style.height


def _layout(env: LayoutEnvironment, dom: HtmlDom) -> None:
    dom.layout_children_width = 0
    dom.layout_current_row_height = 0
    dom.layout_children_height = 0

    if dom.parent is None:
        dom.style.width = env.width
    else:
        if dom.style.display is Display.NONE:
            return
        _compute_width(env, dom)
        if dom.style.display is Display.NONE:
            return

    for child in dom.children:
        _layout(env, child)

    _compute_height(dom)


def layout_tree(root: HtmlDom, width: int) -> LayoutEnvironment:
    """Lay out the tree under ``root`` for a window ``width`` columns wide.

    Returns the environment as it stands after layout.
    """
    env = LayoutEnvironment(start_x=0, start_y=0, width=width)
    _layout(env, root)
    return env