"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="create_zone", data={"zone": {"id": "abc"}})
        assert result.ok is True
        assert result.op == "create_zone"
        assert result.data == {"zone": {"id": "abc"}}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_from_exception(self) -> None:
        exc = BlueprintError.zone_not_found("z1")
        result = ServiceResult.failure("get_zone", exc)
        assert result.ok is False
        assert result.op == "get_zone"
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == ErrorCode.ZONE_NOT_FOUND
        assert result.error.message == "zone not found: z1"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_matching_paths",
            data={"paths": ["a", "b"]},
            meta={"count": 2},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["paths"] == ["a", "b"]
        assert parsed["meta"]["count"] == 2

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    @pytest.mark.parametrize(
        ("code", "kind"),
        [
            (ErrorCode.PROJECT_NOT_FOUND, "not_found"),
            (ErrorCode.AGENT_NOT_FOUND, "not_found"),
            (ErrorCode.INVALID_PATTERN, "bad_request"),
            (ErrorCode.ROOT_UNREADABLE, "bad_request"),
            (ErrorCode.STORAGE_ERROR, "internal"),
        ],
    )
    def test_kind_in_detail(self, code: ErrorCode, kind: str) -> None:
        error = ServiceError.from_exception(BlueprintError(code, "boom"))
        assert error.code == code
        assert error.detail == {"kind": kind}
        assert error.kind == kind

    def test_kind_without_detail(self) -> None:
        error = ServiceError(code=ErrorCode.INVALID_NAME, message="zone name is required")
        assert error.kind == "bad_request"
