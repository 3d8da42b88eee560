"""
Unit tests for the XPath expression builder.
"""

import pytest

from catalog_acceptance.dom.xpath import (
    And,
    AttributeEquals,
    AttributeStartsWith,
    Contains,
    HasClasses,
    Position,
    Step,
    literal,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("plain", "'plain'"),
        ("it's", "\"it's\""),
        ("say \"hi\" it's", "concat('say \"hi\" it', \"'\", 's')"),
        (42, "'42'"),
    ],
)
def test_literal_quoting(value, expected):
    assert literal(value) == expected


def test_attribute_predicates_render():
    assert AttributeEquals("value", 7).render() == "@value = '7'"
    assert AttributeStartsWith("name", "variable_post_id").render() == "starts-with(@name, 'variable_post_id')"


def test_and_flattens_nested_predicates():
    combined = AttributeEquals("a", "1") & AttributeEquals("b", "2") & AttributeEquals("c", "3")

    assert isinstance(combined, And)
    assert len(combined.predicates) == 3
    assert combined.render() == "@a = '1' and @b = '2' and @c = '3'"


def test_has_classes_matches_whole_tokens():
    rendered = HasClasses("wc-metabox").render()

    assert rendered == "contains(concat(' ', normalize-space(@class), ' '), ' wc-metabox ')"


def test_has_classes_requires_a_class():
    with pytest.raises(ValueError):
        HasClasses()


def test_step_with_descendant_containment():
    marker = Step("input").where(AttributeEquals("value", "5"))
    panel = Step("div").where(HasClasses("panel"), Contains(marker))

    assert panel.anywhere() == (
        "//div[contains(concat(' ', normalize-space(@class), ' '), ' panel ')]"
        "[descendant::input[@value = '5']]"
    )


def test_step_where_returns_new_step():
    base = Step("div")
    narrowed = base.where(Position(2))

    assert base.render() == "div"
    assert narrowed.render() == "div[2]"


def test_position_is_one_based():
    with pytest.raises(ValueError):
        Position(0)


def test_selector_prefixes_engine():
    step = Step("input")

    assert step.selector() == "xpath=//input"
    assert step.selector(relative=True) == "xpath=.//input"
