"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from newx.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="create_project", data={"project": "demo"})
        assert result.ok is True
        assert result.data == {"project": "demo"}
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="TARGET_EXISTS", message="Directory 'demo' already exists")
        result = ServiceResult(ok=False, op="create_project", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "TARGET_EXISTS"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="create_project",
            data={"files_added": ["demo/rustfmt.toml"]},
            meta={"duration_ms": 4.2},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["files_added"] == ["demo/rustfmt.toml"]
        assert parsed["meta"]["duration_ms"] == 4.2

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
