"""
Small XPath expression builder.

Expressions are composed from predicate objects instead of string
concatenation, so quoting of values is handled in one place:

    marker = Step("input").where(
        AttributeStartsWith("name", "variable_post_id") & AttributeEquals("value", "42")
    )
    panel = Step("div").where(HasClasses("woocommerce_variation"), Contains(marker))
    panel.selector()   # "xpath=//div[...][descendant::input[...]]"
"""

from typing import Iterable, Tuple


def literal(value: str) -> str:
    """Render a string as an XPath 1.0 literal"""
    value = str(value)
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    # Both quote kinds present: split on single quotes and rejoin with concat()
    parts = value.split("'")
    pieces = []
    for index, part in enumerate(parts):
        if index:
            pieces.append('"\'"')
        if part:
            pieces.append(f"'{part}'")
    return f"concat({', '.join(pieces)})"


class Predicate:
    """Boolean condition usable inside a step's brackets"""

    def render(self) -> str:
        raise NotImplementedError

    def __and__(self, other: "Predicate") -> "And":
        return And(self, other)

    def __str__(self):
        return self.render()


class And(Predicate):
    def __init__(self, *predicates: Predicate):
        flattened = []
        for predicate in predicates:
            if isinstance(predicate, And):
                flattened.extend(predicate.predicates)
            else:
                flattened.append(predicate)
        self.predicates: Tuple[Predicate, ...] = tuple(flattened)

    def render(self) -> str:
        return " and ".join(predicate.render() for predicate in self.predicates)


class AttributeEquals(Predicate):
    def __init__(self, attribute: str, value):
        self.attribute = attribute
        self.value = value

    def render(self) -> str:
        return f"@{self.attribute} = {literal(self.value)}"


class AttributeStartsWith(Predicate):
    def __init__(self, attribute: str, prefix: str):
        self.attribute = attribute
        self.prefix = prefix

    def render(self) -> str:
        return f"starts-with(@{self.attribute}, {literal(self.prefix)})"


class HasClasses(Predicate):
    """Element carries every one of the given class tokens"""

    def __init__(self, *classes: str):
        if not classes:
            raise ValueError("HasClasses needs at least one class name")
        self.classes = classes

    def render(self) -> str:
        return " and ".join(
            f"contains(concat(' ', normalize-space(@class), ' '), {literal(' ' + name + ' ')})"
            for name in self.classes
        )


class Contains(Predicate):
    """Element has a descendant matching the given step"""

    def __init__(self, step: "Step"):
        self.step = step

    def render(self) -> str:
        return f"descendant::{self.step.render()}"


class Position(Predicate):
    """1-based position among the matched siblings"""

    def __init__(self, index: int):
        if index < 1:
            raise ValueError("XPath positions start at 1")
        self.index = index

    def render(self) -> str:
        return str(self.index)


class Step:
    """A single location step: tag name plus bracketed predicates"""

    def __init__(self, tag: str = "*", predicates: Iterable[Predicate] = ()):
        self.tag = tag
        self.predicates: Tuple[Predicate, ...] = tuple(predicates)

    def where(self, *predicates: Predicate) -> "Step":
        return Step(self.tag, self.predicates + predicates)

    def render(self) -> str:
        return self.tag + "".join(f"[{predicate.render()}]" for predicate in self.predicates)

    def anywhere(self) -> str:
        return f"//{self.render()}"

    def relative(self) -> str:
        return f".//{self.render()}"

    def selector(self, relative: bool = False) -> str:
        """Playwright selector string for this step"""
        return "xpath=" + (self.relative() if relative else self.anywhere())

    def __str__(self):
        return self.anywhere()
