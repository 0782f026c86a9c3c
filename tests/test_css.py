from traveller.css import (
    CssDeclaration,
    CssRule,
    CssSelector,
    CssStyleSheet,
    DeclarationType,
    SelectorAttributeType,
    SelectorSection,
    SelectorSectionType,
)


def _selector(*tags):
    return CssSelector([SelectorSection(SelectorSectionType.TAG, t) for t in tags])


def test_update_from_copies_all_fields():
    target = CssDeclaration(DeclarationType.WIDTH, "width", "30")
    source = CssDeclaration(DeclarationType.HEIGHT, "height", "20")
    target.update_from(source)
    assert (target.type, target.key, target.value) == (
        DeclarationType.HEIGHT,
        "height",
        "20",
    )


def test_copy_is_independent():
    original = CssDeclaration(DeclarationType.COLOR, "color", "red")
    duplicate = original.copy()
    assert duplicate == original
    duplicate.value = "blue"
    assert original.value == "red"


def test_add_rule_appends_new_selectors_in_order():
    sheet = CssStyleSheet()
    first = CssRule(_selector("body"))
    second = CssRule(_selector("div", "td"))
    sheet.add_rule(first)
    sheet.add_rule(second)
    assert sheet.rules == [first, second]


def test_add_rule_merges_same_selector():
    sheet = CssStyleSheet()
    first = CssRule(
        _selector("div"),
        [CssDeclaration(DeclarationType.WIDTH, "width", "30")],
    )
    sheet.add_rule(first)
    merged = sheet.add_rule(
        CssRule(
            _selector("div"),
            [
                CssDeclaration(DeclarationType.WIDTH, "width", "20"),
                CssDeclaration(DeclarationType.COLOR, "color", "red"),
            ],
        )
    )
    assert merged is first
    assert len(sheet.rules) == 1
    assert [(d.type, d.value) for d in first.declarations] == [
        (DeclarationType.WIDTH, "20"),
        (DeclarationType.COLOR, "red"),
    ]


def test_selector_sections_compare_by_value():
    a = SelectorSection(
        SelectorSectionType.TAG, "td", SelectorAttributeType.CLASS, "active"
    )
    b = SelectorSection(
        SelectorSectionType.TAG, "td", SelectorAttributeType.CLASS, "active"
    )
    assert CssSelector([a]) == CssSelector([b])
    assert CssSelector([a]) != _selector("td")