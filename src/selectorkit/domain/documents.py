"""Selector documents — a JSON-friendly form of selector trees.

A document is either a compound selector::

    {"parts": [{"kind": "element", "value": "a"},
               {"kind": "pseudo-class", "value": "focus"}]}

or a combination of two documents::

    {"left": {...}, "combinator": "+", "right": {...}}

Documents only describe structure.  Ordering and cardinality rules are
enforced when :meth:`to_selector` feeds the parts into a builder.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from selectorkit.domain.fragments import FragmentKind
from selectorkit.domain.selectors import CombinedSelector, SelectorBuilder, combine


class FragmentDocument(BaseModel):
    """One fragment: a kind and its raw (unrendered) value."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: FragmentKind
    value: str

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, FragmentKind):
            return FragmentKind.parse(value)
        return value


class CompoundDocument(BaseModel):
    """A compound selector as an ordered list of fragments."""

    model_config = {"frozen": True, "extra": "forbid"}

    parts: list[FragmentDocument] = Field(min_length=1)

    def to_selector(self) -> SelectorBuilder:
        builder = SelectorBuilder()
        for part in self.parts:
            builder.add(part.kind, part.value)
        return builder


class CombinationDocument(BaseModel):
    """Two documents joined by a combinator token."""

    model_config = {"frozen": True, "extra": "forbid"}

    left: SelectorDocument
    combinator: str
    right: SelectorDocument

    def to_selector(self) -> CombinedSelector:
        return combine(self.left.to_selector(), self.combinator, self.right.to_selector())


SelectorDocument = CompoundDocument | CombinationDocument

CombinationDocument.model_rebuild()

_DOCUMENT_ADAPTER: TypeAdapter[SelectorDocument] = TypeAdapter(SelectorDocument)


def parse_document(data: Any) -> SelectorDocument:
    """Validate *data* (decoded JSON) as a selector document.

    Raises:
        pydantic.ValidationError: If *data* matches neither document shape.
    """
    return _DOCUMENT_ADAPTER.validate_python(data)
