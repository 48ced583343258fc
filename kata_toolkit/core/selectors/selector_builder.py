from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional, Protocol

from kata_toolkit.core.errors import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    OutOfOrderError,
)


class Category(IntEnum):
    """Selector part categories, in the order they must be written."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


SINGLETON_CATEGORIES: frozenset[Category] = frozenset(
    {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
)

COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class Renderable(Protocol):
    def stringify(self) -> str: ...


@dataclass(frozen=True)
class Selector:
    """A single compound selector: element#id.class[attr]:pseudo-class::pseudo-element.

    Instances are immutable. Each builder method returns a new selector, so a
    partially built selector can be reused as a prefix.
    """

    element_name: Optional[str] = None
    id_name: Optional[str] = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_name: Optional[str] = None

    def element(self, value: str) -> Selector:
        self._check(Category.ELEMENT)
        return replace(self, element_name=value)

    def id(self, value: str) -> Selector:
        self._check(Category.ID)
        return replace(self, id_name=value)

    def class_(self, value: str) -> Selector:
        self._check(Category.CLASS)
        return replace(self, classes=self.classes + (value,))

    def attr(self, value: str) -> Selector:
        self._check(Category.ATTRIBUTE)
        return replace(self, attributes=self.attributes + (value,))

    def pseudo_class(self, value: str) -> Selector:
        self._check(Category.PSEUDO_CLASS)
        return replace(self, pseudo_classes=self.pseudo_classes + (value,))

    def pseudo_element(self, value: str) -> Selector:
        self._check(Category.PSEUDO_ELEMENT)
        return replace(self, pseudo_element_name=value)

    def categories(self) -> list[Category]:
        present: list[Category] = []
        if self.element_name is not None:
            present.append(Category.ELEMENT)
        if self.id_name is not None:
            present.append(Category.ID)
        if self.classes:
            present.append(Category.CLASS)
        if self.attributes:
            present.append(Category.ATTRIBUTE)
        if self.pseudo_classes:
            present.append(Category.PSEUDO_CLASS)
        if self.pseudo_element_name is not None:
            present.append(Category.PSEUDO_ELEMENT)
        return present

    def stringify(self) -> str:
        parts: list[str] = []
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_name is not None:
            parts.append(f"#{self.id_name}")
        if self.classes:
            parts.append("." + ".".join(self.classes))
        if self.attributes:
            parts.append("[" + ",".join(self.attributes) + "]")
        if self.pseudo_classes:
            parts.append(":" + ":".join(self.pseudo_classes))
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    def _check(self, category: Category) -> None:
        present = self.categories()
        name = category.name.lower()
        if category in SINGLETON_CATEGORIES and category in present:
            raise DuplicateSingletonError(
                code="E_DUPLICATE_SINGLETON",
                message=(
                    "element, id and pseudo-element should not occur more than one time "
                    f"inside the selector ({name} is already set)"
                ),
                path=name,
            )
        later = [c for c in present if c > category]
        if later:
            raise OutOfOrderError(
                code="E_OUT_OF_ORDER",
                message=(
                    "selector parts should be arranged in the following order: element, id, "
                    "class, attribute, pseudo-class, pseudo-element "
                    f"({name} after {later[-1].name.lower()})"
                ),
                path=name,
            )


@dataclass(frozen=True)
class CombinedSelector:
    """Two rendered selectors joined by a combinator. Render-only."""

    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class CssSelectorBuilder:
    """Stateless facade: every call starts a fresh selector."""

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
        if combinator not in COMBINATORS:
            raise InvalidCombinatorError(
                code="E_INVALID_COMBINATOR",
                message=f"unknown combinator: {combinator!r} (choose one of: ' ', '+', '~', '>')",
                path="combinator",
            )
        return CombinedSelector(text=f"{left.stringify()} {combinator} {right.stringify()}")


css_selector_builder = CssSelectorBuilder()
