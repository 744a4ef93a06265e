# Fluent builder for CSS compound and complex selectors
# Fragments must follow: element#id.class[attr]:pseudo-class::pseudo-element

from __future__ import annotations

# ruff: noqa: A001, A002

import enum
import logging
from types import SimpleNamespace
from typing import Protocol

from .errors import DuplicateFragmentError, OutOfOrderError

logger = logging.getLogger(__name__)

# Standard CSS combinators. combine() accepts any text; this is for callers.
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class Category(enum.IntEnum):
    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTR = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def single(self) -> bool:
        return self in _SINGLE_CATEGORIES


_CATEGORY_LABELS: dict[Category, str] = {
    Category.NONE: "none",
    Category.ELEMENT: "element",
    Category.ID: "id",
    Category.CLASS: "class",
    Category.ATTR: "attribute",
    Category.PSEUDO_CLASS: "pseudo-class",
    Category.PSEUDO_ELEMENT: "pseudo-element",
}

_SINGLE_CATEGORIES: frozenset[Category] = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class CompoundSelector:
    """Fragments of one compound selector (e.g., div#main.foo[href]:hover)."""

    __slots__ = ("attributes", "classes", "identifier", "pseudo_classes", "pseudo_element", "tag", "watermark")

    tag: str | None
    identifier: str | None
    classes: list[str]
    attributes: list[str]
    pseudo_classes: list[str]
    pseudo_element: str | None
    watermark: Category

    def __init__(self) -> None:
        self.tag = None
        self.identifier = None
        self.classes = []
        self.attributes = []
        self.pseudo_classes = []
        self.pseudo_element = None
        # Highest category added so far
        self.watermark = Category.NONE

    def check(self, category: Category, value: str) -> None:
        """Raise if a fragment of ``category`` may not be added next."""
        if category < self.watermark:
            raise OutOfOrderError(category, value)
        if category == self.watermark and category.single:
            raise DuplicateFragmentError(category, value)

    def add(self, category: Category, value: str) -> None:
        self.check(category, value)

        if category == Category.ELEMENT:
            self.tag = value
        elif category == Category.ID:
            self.identifier = value
        elif category == Category.CLASS:
            self.classes.append(value)
        elif category == Category.ATTR:
            self.attributes.append(value)
        elif category == Category.PSEUDO_CLASS:
            self.pseudo_classes.append(value)
        else:
            self.pseudo_element = value

        # An empty element, id or pseudo-element counts as unset
        if value or not category.single:
            self.watermark = category

    def render(self) -> str:
        parts: list[str] = []
        if self.tag:
            parts.append(self.tag)
        if self.identifier:
            parts.extend(["#", self.identifier])
        for name in self.classes:
            parts.extend([".", name])
        # All attributes share one bracket pair
        if self.attributes:
            parts.extend(["[", "".join(self.attributes), "]"])
        for name in self.pseudo_classes:
            parts.extend([":", name])
        if self.pseudo_element:
            parts.extend(["::", self.pseudo_element])
        return "".join(parts)

    def __repr__(self) -> str:
        return f"CompoundSelector({self.render()!r})"


class CombinedSelector:
    """Two rendered selectors joined by a combinator."""

    __slots__ = ("text",)

    text: str

    def __init__(self, text: str) -> None:
        self.text = text

    def render(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"CombinedSelector({self.text!r})"


SelectorForm = CompoundSelector | CombinedSelector


class SelectorBuilder:
    """Accumulates selector fragments and renders them with stringify().

    Every fragment method returns the builder itself so calls can be chained:

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    A failed call raises and leaves the builder unchanged. Once combine() has
    been called the combined text is what renders; fragments added afterwards
    are still checked and kept but do not appear in the output.
    """

    __slots__ = ("combined", "compound")

    compound: CompoundSelector
    combined: CombinedSelector | None

    def __init__(self) -> None:
        self.compound = CompoundSelector()
        self.combined = None

    @property
    def form(self) -> SelectorForm:
        """The form that stringify() renders."""
        if self.combined is not None:
            return self.combined
        return self.compound

    def _add(self, category: Category, value: str) -> SelectorBuilder:
        compound = self.compound
        try:
            compound.add(category, value)
        except (DuplicateFragmentError, OutOfOrderError) as e:
            logger.debug("Rejected %s %r after %s: %s", category.label, value, compound.watermark.label, e.code)
            raise
        if self.combined is not None:
            logger.debug("Added %s %r to a combined selector; output unchanged", category.label, value)
        return self

    def element(self, value: str) -> SelectorBuilder:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Add a raw attribute expression such as ``href$=".png"`` (no brackets)."""
        return self._add(Category.ATTR, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_ELEMENT, value)

    def combine(self, left: Stringifiable, combinator: str, right: Stringifiable) -> SelectorBuilder:
        """Render as ``left``, ``combinator`` and ``right`` joined by single spaces.

        Both sides are rendered now; later changes to them are not reflected.
        The combinator is not validated.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("Combined selector: %r", text)
        self.combined = CombinedSelector(text)
        return self

    def stringify(self) -> str:
        form = self.form
        if isinstance(form, CombinedSelector):
            return form.text
        return form.render()

    @property
    def is_combined(self) -> bool:
        return self.combined is not None

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.form!r})"


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> SelectorBuilder:
    """
    Join two selectors with a combinator.

    Args:
        left: Selector rendered on the left of the combinator
        combinator: Combinator text, normally one of COMBINATORS
        right: Selector rendered on the right

    Returns:
        A new builder holding the combined selector text
    """
    return SelectorBuilder().combine(left, combinator, right)


def stringify() -> str:
    return ""


# Single-object façade; "class" is only reachable through getattr()
css_selector_builder: SimpleNamespace = SimpleNamespace(
    **{
        "element": element,
        "id": id,
        "class": class_,
        "class_": class_,
        "attr": attr,
        "pseudo_class": pseudo_class,
        "pseudo_element": pseudo_element,
        "combine": combine,
        "stringify": stringify,
    }
)
