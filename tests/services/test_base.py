"""Tests for BaseService and the service_op decorator."""

from __future__ import annotations

import pytest

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.infrastructure.workspace import Workspace
from zonectl.services.base import BaseService, service_op
from zonectl.services.blueprint import BlueprintService
from zonectl.services.result import ServiceResult


class SampleService(BaseService):
    @service_op
    def succeed(self, value: str) -> ServiceResult:
        return ServiceResult(ok=True, op="succeed", data={"value": value})

    @service_op
    def fail(self) -> ServiceResult:
        raise BlueprintError(ErrorCode.INVALID_PATH, "path is required")

    @service_op
    def crash(self) -> ServiceResult:
        raise RuntimeError("not a domain error")


@pytest.fixture
def sample() -> SampleService:
    return SampleService(Workspace.in_memory())


class TestBaseService:
    def test_workspace_stored(self) -> None:
        workspace = Workspace.in_memory()
        service = BaseService(workspace)
        assert service.workspace is workspace

    def test_blueprint_service_extends_base(self) -> None:
        assert issubclass(BlueprintService, BaseService)


class TestServiceOp:
    def test_passes_success_through(self, sample: SampleService) -> None:
        result = sample.succeed("x")
        assert result.ok
        assert result.data == {"value": "x"}

    def test_converts_domain_error(self, sample: SampleService) -> None:
        result = sample.fail()
        assert not result.ok
        assert result.op == "fail"
        assert result.error is not None
        assert result.error.code == ErrorCode.INVALID_PATH
        assert result.error.kind == "bad_request"

    def test_other_exceptions_propagate(self, sample: SampleService) -> None:
        with pytest.raises(RuntimeError):
            sample.crash()

    def test_preserves_metadata(self) -> None:
        assert SampleService.succeed.__name__ == "succeed"
        assert BlueprintService.delete_project.__doc__ is not None
