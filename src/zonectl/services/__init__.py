"""Service layer — the only entry point the CLI and MCP adapters call."""

from zonectl.services.blueprint import BlueprintService
from zonectl.services.result import ServiceError, ServiceResult

__all__ = ["BlueprintService", "ServiceError", "ServiceResult"]
