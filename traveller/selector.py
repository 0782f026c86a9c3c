"""Matching CSS selectors against a parsed DOM tree."""

from __future__ import annotations

from typing import Iterable, Optional

from traveller.css import (
    CssSelector,
    SelectorAttributeType,
    SelectorSection,
    SelectorSectionType,
)
from traveller.html import HtmlDom


def scan_leaf_doms(dom: HtmlDom) -> list[HtmlDom]:
    """Return the styleable nodes below ``dom`` that have no styleable children."""
    leaves: list[HtmlDom] = []
    for child in dom.children:
        if child.is_style_exempt():
            continue
        below = scan_leaf_doms(child)
        if below:
            leaves.extend(below)
        else:
            leaves.append(child)
    return leaves


def section_matches(section: SelectorSection, dom: HtmlDom) -> bool:
    """True if a single selector section applies to ``dom``."""
    if dom.is_style_exempt():
        return False

    if section.type is SelectorSectionType.TAG:
        matched = dom.title == section.value
    elif section.type is SelectorSectionType.CLASS:
        matched = section.value in dom.classes
    elif section.type is SelectorSectionType.ID:
        matched = dom.id is not None and dom.id == section.value
    else:
        matched = False
    if not matched:
        return False

    if section.attribute_type is SelectorAttributeType.CLASS:
        return section.attribute in dom.classes
    return True


def sections_match_left(sections: Iterable[SelectorSection], dom: HtmlDom) -> bool:
    """Check that each section in turn matches ``dom`` or one of its ancestors."""
    current: Optional[HtmlDom] = dom
    for section in sections:
        while not section_matches(section, current):
            current = current.parent
            if current is None or current.parent is None:
                return False
    return True


class _Cursor:
    """Position within a selector's sections, shared across a whole search."""

    def __init__(self, sections: Iterable[SelectorSection]) -> None:
        self._sections = list(sections)
        self._index = 0

    @property
    def current(self) -> Optional[SelectorSection]:
        if self._index < len(self._sections):
            return self._sections[self._index]
        return None

    @property
    def at_last(self) -> bool:
        return self._index == len(self._sections) - 1

    def advance(self) -> None:
        self._index += 1


def _select_by_section(section: SelectorSection, dom: HtmlDom) -> list[HtmlDom]:
    found = [dom] if section_matches(section, dom) else []
    if dom.is_style_exempt() and not dom.children:
        return found
    for child in dom.children:
        found.extend(_select_by_section(section, child))
    return found


def _find_right(cursor: _Cursor, dom: Optional[HtmlDom]) -> list[HtmlDom]:
    if dom is None or dom.is_style_exempt():
        return []
    section = cursor.current
    if section is None:
        return []
    if cursor.at_last:
        return _select_by_section(section, dom)
    if section_matches(section, dom):
        cursor.advance()
    found: list[HtmlDom] = []
    for child in dom.children:
        found.extend(_find_right(cursor, child))
    return found


def select_doms(root: HtmlDom, selector: CssSelector) -> list[HtmlDom]:
    """Return the nodes under ``root`` selected by ``selector``, in document order."""
    return _find_right(_Cursor(selector.sections), root)