"""A parsed page: DOM tree, collected script and style, and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from traveller.css import CssStyleSheet
from traveller.html import DomType, HtmlDom, parse_html
from traveller.layout import LayoutEnvironment, layout_tree
from traveller.style import compute_tree_style


@dataclass
class Document:
    """A page built from HTML content."""

    content: str
    root: HtmlDom
    stylesheet: CssStyleSheet = field(default_factory=CssStyleSheet)
    title: Optional[str] = None
    script: str = ""
    style: str = ""
    layout_environment: LayoutEnvironment = field(default_factory=LayoutEnvironment)

    def render(self, width: int) -> None:
        """Lay the document out for ``width`` columns and render every node."""
        self.layout_environment = layout_tree(self.root, width)
        self.render_tree(self.root)

    def render_tree(self, dom: HtmlDom) -> None:
        """Render ``dom`` and then each of its descendants in document order."""
        renderer = _RENDERERS.get(dom.info.type)
        if renderer is not None:
            renderer(self, dom)
        for child in dom.children:
            self.render_tree(child)


def _render_title(document: Document, dom: HtmlDom) -> None:
    if not dom.children:
        return
    text = dom.children[0].content
    if text is None:
        return
    document.title = text


_RENDERERS: dict[DomType, Callable[[Document, HtmlDom], None]] = {
    DomType.TITLE: _render_title,
}


def parse_document(content: str, stylesheet: Optional[CssStyleSheet] = None) -> Document:
    """Parse ``content`` and apply ``stylesheet`` and inline styles to the tree."""
    parsed = parse_html(content)
    sheet = stylesheet if stylesheet is not None else CssStyleSheet()
    document = Document(
        content=content,
        root=parsed.root,
        stylesheet=sheet,
        script=parsed.script,
        style=parsed.style,
    )
    compute_tree_style(document.root, sheet)
    return document