"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from selectorkit.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="build_selector", data={"selector": "#main"})
        assert result.ok is True
        assert result.op == "build_selector"
        assert result.data == {"selector": "#main"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="ORDER_VIOLATION", message="bad order")
        result = ServiceResult(ok=False, op="build_selector", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "ORDER_VIOLATION"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="render_selector", data={"selector": "ul > li"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["selector"] == "ul > li"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="DUPLICATE_FRAGMENT",
            message="duplicate",
            detail={"kind": "element"},
        )
        assert error.detail["kind"] == "element"

    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
