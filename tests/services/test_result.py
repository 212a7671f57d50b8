"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from nricctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="complete", data={"identifier": "S1234567D"})
        assert result.ok is True
        assert result.op == "complete"
        assert result.data == {"identifier": "S1234567D"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="LENGTH_ERROR", message="Expected 9 characters, got 3")
        result = ServiceResult(ok=False, op="validate", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "LENGTH_ERROR"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="inspect", data={"valid": True})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["valid"] is True
        assert "meta" not in parsed

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="X", message="m").detail == {}

    def test_with_detail(self) -> None:
        error = ServiceError(code="PREFIX_ERROR", message="bad", detail={"prefix": "X"})
        assert error.detail["prefix"] == "X"
