"""Selector builders — compound selectors and combinator trees.

Two variants share the :class:`Selector` capability (``stringify()``):

- :class:`SelectorBuilder` accumulates fragments of one compound selector
  and enforces CSS ordering and cardinality rules as they are added.
- :class:`CombinedSelector` joins two selectors with a combinator token.

INVARIANT: element, id and pseudo-element occur at most once per builder,
and the distinct kinds of a builder are added in canonical order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable

from selectorkit.domain.errors import DuplicateFragmentError, OrderError
from selectorkit.domain.fragments import (
    CANONICAL_ORDER,
    SINGULAR_KINDS,
    FragmentKind,
    render_fragment,
)


@runtime_checkable
class Selector(Protocol):
    """Anything that renders to CSS selector text."""

    def stringify(self) -> str: ...


class Combinator(StrEnum):
    """CSS combinator tokens."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    COLUMN = "||"


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator, rendered on demand.

    The combinator is always surrounded by single spaces, so the descendant
    combinator (itself a space) renders as three spaces.
    """

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


def combine(left: Selector, combinator: str, right: Selector) -> CombinedSelector:
    """Join *left* and *right* with *combinator*.

    Raises:
        TypeError: If either operand is not a selector instance.
    """
    for operand in (left, right):
        # Protocol checks accept classes that define stringify.
        if isinstance(operand, type) or not isinstance(operand, Selector):
            msg = f"Cannot combine {type(operand).__name__!r}: expected a selector"
            raise TypeError(msg)
    return CombinedSelector(left=left, combinator=str(combinator), right=right)


class SelectorBuilder:
    """Chainable builder for one compound selector.

    Every fragment method mutates the builder and returns it::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    Raises :class:`DuplicateFragmentError` or :class:`OrderError` at the
    offending call; the builder must not be reused afterwards.
    """

    def __init__(self) -> None:
        self._fragments: dict[FragmentKind, list[str]] = {}
        # distinct kinds in first-insertion order
        self._seen: list[FragmentKind] = []

    # ------------------------------------------------------------------
    # Fragments
    # ------------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind | str, value: str) -> SelectorBuilder:
        """Add a fragment of *kind*; the named methods delegate here."""
        if not isinstance(kind, FragmentKind):
            kind = FragmentKind.parse(kind)
        if kind in SINGULAR_KINDS and kind in self._fragments:
            raise DuplicateFragmentError(kind)
        self._check_order(kind)
        if kind not in self._fragments:
            self._fragments[kind] = []
            self._seen.append(kind)
        self._fragments[kind].append(render_fragment(kind, value))
        return self

    def _check_order(self, kind: FragmentKind) -> None:
        # Only a kind's first insertion fixes its position; _seen stays sorted.
        if kind in self._fragments or not self._seen:
            return
        last = self._seen[-1]
        if last.position > kind.position:
            raise OrderError(kind, after=last)

    # ------------------------------------------------------------------
    # Combination and rendering
    # ------------------------------------------------------------------

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        """Combine two selectors; this builder's own fragments play no part."""
        return combine(left, combinator, right)

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        """Kinds present on this builder, in canonical order."""
        return tuple(kind for kind in CANONICAL_ORDER if kind in self._fragments)

    @property
    def is_empty(self) -> bool:
        return not self._fragments

    def stringify(self) -> str:
        return "".join(
            "".join(self._fragments[kind]) for kind in CANONICAL_ORDER if kind in self._fragments
        )

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"
