"""Data model for style sheets: declarations, selectors, rules."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Optional

PARSE_STATE_NOT_SELECTOR = "parse state is not UI_PARSE_STATE_SELECTOR"
PARSE_STATE_NOT_DECLARATION_KEY = "parse state is not UI_PARSE_STATE_CSS_DECLARATION_KEY"
PARSE_STATE_NOT_DECLARATION_VALUE = (
    "parse state is not UI_PARSE_STATE_CSS_DECLARATION_VALUE"
)


class DeclarationType(IntEnum):
    """The CSS properties the renderer understands."""

    UNKNOWN = 0
    BACKGROUND_COLOR = 1
    COLOR = 2
    PADDING = 3
    PADDING_TOP = 4
    PADDING_BOTTOM = 5
    PADDING_LEFT = 6
    PADDING_RIGHT = 7
    MARGIN = 8
    MARGIN_TOP = 9
    MARGIN_BOTTOM = 10
    MARGIN_LEFT = 11
    MARGIN_RIGHT = 12
    DISPLAY = 13
    TEXT_ALIGN = 14
    WIDTH = 15
    HEIGHT = 16
    POSITION = 17
    LEFT = 18
    RIGHT = 19
    TOP = 20
    BOTTOM = 21


@dataclass
class CssDeclaration:
    """A single ``key: value`` pair with its recognised property type."""

    type: DeclarationType = DeclarationType.UNKNOWN
    key: str = ""
    value: str = ""

    def update_from(self, other: "CssDeclaration") -> None:
        """Overwrite this declaration with the contents of another."""
        self.type = other.type
        self.key = other.key
        self.value = other.value

    def copy(self) -> "CssDeclaration":
        """Return an independent duplicate."""
        return replace(self)


class SelectorSectionType(IntEnum):
    UNKNOWN = 0
    TAG = 1
    CLASS = 2
    ID = 3


class SelectorAttributeType(IntEnum):
    NONE = 0
    CLASS = 1


@dataclass(frozen=True)
class SelectorSection:
    """One compound part of a selector, such as ``td.active``."""

    type: SelectorSectionType = SelectorSectionType.UNKNOWN
    value: str = ""
    attribute_type: SelectorAttributeType = SelectorAttributeType.NONE
    attribute: Optional[str] = None


@dataclass
class CssSelector:
    """A descendant selector: sections ordered from outermost to innermost."""

    sections: list[SelectorSection] = field(default_factory=list)


@dataclass
class CssRule:
    """A selector together with the declarations it applies."""

    selector: CssSelector
    declarations: list[CssDeclaration] = field(default_factory=list)


@dataclass
class CssStyleSheet:
    """An ordered collection of rules."""

    rules: list[CssRule] = field(default_factory=list)

    def add_rule(self, rule: CssRule) -> CssRule:
        """Add a rule, merging it into an existing rule with the same selector.

        Returns the rule that holds the declarations afterwards.
        """
        for existing in self.rules:
            if existing.selector == rule.selector:
                for declaration in rule.declarations:
                    for held in existing.declarations:
                        if held.type == declaration.type:
                            held.update_from(declaration)
                            break
                    else:
                        existing.declarations.append(declaration.copy())
                return existing
        self.rules.append(rule)
        return rule