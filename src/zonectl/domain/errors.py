"""Structured error taxonomy shared by every layer.

A :class:`BlueprintError` is the only failure shape that crosses the
repository and filesystem ports. The service layer converts it into a
:class:`~zonectl.services.result.ServiceError` without altering the code;
adapters map the code to their own error class via :func:`error_kind`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

ErrorKind = Literal["not_found", "bad_request", "internal"]


class ErrorCode(StrEnum):
    """Machine-readable error codes."""

    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    ZONE_NOT_FOUND = "ZONE_NOT_FOUND"
    AGENT_NOT_FOUND = "AGENT_NOT_FOUND"
    INVALID_ROOT = "INVALID_ROOT"
    INVALID_NAME = "INVALID_NAME"
    INVALID_PATH = "INVALID_PATH"
    INVALID_PATTERN = "INVALID_PATTERN"
    INVALID_AGENT = "INVALID_AGENT"
    ROOT_UNREADABLE = "ROOT_UNREADABLE"
    STORAGE_ERROR = "STORAGE_ERROR"


class BlueprintError(Exception):
    """A ``{code, message}`` failure raised by repositories and ports."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = str(code)
        self.message = message

    @property
    def kind(self) -> ErrorKind:
        return error_kind(self.code)

    @classmethod
    def project_not_found(cls, project_id: str) -> BlueprintError:
        return cls(ErrorCode.PROJECT_NOT_FOUND, f"project not found: {project_id}")

    @classmethod
    def zone_not_found(cls, zone_id: str) -> BlueprintError:
        return cls(ErrorCode.ZONE_NOT_FOUND, f"zone not found: {zone_id}")

    @classmethod
    def agent_not_found(cls, agent_id: str) -> BlueprintError:
        return cls(ErrorCode.AGENT_NOT_FOUND, f"agent not found: {agent_id}")


def error_kind(code: str) -> ErrorKind:
    """Classify an error code for transport mapping.

    ``*_NOT_FOUND`` -> ``not_found``; ``INVALID_*`` and ``ROOT_UNREADABLE``
    -> ``bad_request``; anything else -> ``internal``.

    Examples:
        >>> error_kind("ZONE_NOT_FOUND")
        'not_found'
        >>> error_kind("INVALID_PATTERN")
        'bad_request'
        >>> error_kind("STORAGE_ERROR")
        'internal'
    """
    if code.endswith("_NOT_FOUND"):
        return "not_found"
    if code.startswith("INVALID_") or code == ErrorCode.ROOT_UNREADABLE:
        return "bad_request"
    return "internal"
