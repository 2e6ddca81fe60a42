"""BaseService — shared plumbing for service classes.

Every service receives a :class:`Workspace` at construction time and
reaches storage and the filesystem only through its ports.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate, ParamSpec, TypeVar

from zonectl.domain.errors import BlueprintError
from zonectl.services.result import ServiceResult

if TYPE_CHECKING:
    from zonectl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

P = ParamSpec("P")
S = TypeVar("S", bound="BaseService")


def service_op(
    func: Callable[Concatenate[S, P], ServiceResult],
) -> Callable[Concatenate[S, P], ServiceResult]:
    """Convert a :class:`BlueprintError` raised by *func* into a failed result.

    The result's ``op`` is the method name. Any other exception propagates.
    """
    op = func.__name__

    @functools.wraps(func)
    def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> ServiceResult:
        try:
            return func(self, *args, **kwargs)
        except BlueprintError as exc:
            logger.debug("%s failed: %s", op, exc)
            return ServiceResult.failure(op, exc)

    return wrapper


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BlueprintService(BaseService):
            @service_op
            def get_zone(self, zone_id: str) -> ServiceResult:
                zone = self._workspace.zones.get(zone_id)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def workspace(self) -> Workspace:
        return self._workspace
