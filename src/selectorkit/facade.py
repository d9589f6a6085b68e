"""Stateless entry points for building CSS selectors.

Usage::

    from selectorkit import css_selector_builder as css

    css.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    css.combine(
        css.element("div").id("main"),
        "+",
        css.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'

Each call returns a fresh, independent builder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from selectorkit.domain.selectors import SelectorBuilder

if TYPE_CHECKING:
    from selectorkit.domain.selectors import CombinedSelector, Selector


class CssSelectorBuilder:
    """Factory facade: one method per fragment kind, plus ``combine``."""

    __slots__ = ()

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        return SelectorBuilder().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
