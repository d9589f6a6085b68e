"""Tests for selector documents."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from selectorkit.domain.documents import (
    CombinationDocument,
    CompoundDocument,
    FragmentDocument,
    parse_document,
)
from selectorkit.domain.errors import DuplicateFragmentError, OrderError
from selectorkit.domain.fragments import FragmentKind
from selectorkit.domain.selectors import CombinedSelector, SelectorBuilder


def _compound(*parts: tuple[str, str]) -> dict[str, Any]:
    return {"parts": [{"kind": kind, "value": value} for kind, value in parts]}


class TestParseDocument:
    def test_compound(self) -> None:
        doc = parse_document(_compound(("element", "a"), ("pseudo-class", "focus")))
        assert isinstance(doc, CompoundDocument)
        assert doc.parts[1] == FragmentDocument(kind=FragmentKind.PSEUDO_CLASS, value="focus")

    def test_kind_aliases(self) -> None:
        doc = parse_document(_compound(("attr", "disabled")))
        assert doc.parts[0].kind is FragmentKind.ATTRIBUTE

    def test_combination(self) -> None:
        doc = parse_document(
            {
                "left": _compound(("element", "ul")),
                "combinator": ">",
                "right": _compound(("element", "li")),
            }
        )
        assert isinstance(doc, CombinationDocument)
        assert isinstance(doc.left, CompoundDocument)

    def test_nested_combination(self) -> None:
        doc = parse_document(
            {
                "left": _compound(("id", "a")),
                "combinator": "~",
                "right": {
                    "left": _compound(("id", "b")),
                    "combinator": " ",
                    "right": _compound(("id", "c")),
                },
            }
        )
        assert isinstance(doc.right, CombinationDocument)

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"parts": []},
            {"parts": [{"kind": "tag", "value": "div"}]},
            {"parts": [{"kind": "element"}]},
            {"parts": [{"kind": "element", "value": "a"}], "extra": 1},
            {"left": {"parts": [{"kind": "id", "value": "a"}]}, "combinator": ">"},
            [1, 2],
        ],
    )
    def test_invalid(self, data: Any) -> None:
        with pytest.raises(ValidationError):
            parse_document(data)


class TestToSelector:
    def test_compound_builds_builder(self) -> None:
        doc = parse_document(_compound(("element", "a"), ("attr", 'href$=".png"')))
        selector = doc.to_selector()
        assert isinstance(selector, SelectorBuilder)
        assert selector.stringify() == 'a[href$=".png"]'

    def test_combination_builds_tree(self) -> None:
        doc = parse_document(
            {
                "left": _compound(("element", "tr")),
                "combinator": " ",
                "right": _compound(("element", "td")),
            }
        )
        selector = doc.to_selector()
        assert isinstance(selector, CombinedSelector)
        assert selector.stringify() == "tr   td"

    def test_order_error_propagates(self) -> None:
        doc = parse_document(_compound(("class", "a"), ("id", "b")))
        with pytest.raises(OrderError):
            doc.to_selector()

    def test_duplicate_error_propagates(self) -> None:
        doc = parse_document(_compound(("element", "a"), ("element", "b")))
        with pytest.raises(DuplicateFragmentError):
            doc.to_selector()
