"""Path normalization — the canonical form of every stored path.

INVARIANT: Paths are normalized once, at the point of insertion, never
on read. The canonical form uses forward slashes, has no leading slash,
and has ``.``/``..`` segments resolved.
"""

from __future__ import annotations

import posixpath

from zonectl.domain.errors import BlueprintError, ErrorCode


def normalize_path(path: str) -> str:
    """Return *path* in canonical relative form.

    Pure and total: never raises. ``""`` and ``"."`` both map to ``""``,
    which callers must reject where a non-empty path is required.

    Examples:
        >>> normalize_path("/cmd//server/")
        'cmd/server'
        >>> normalize_path("internal\\\\domain\\\\..\\\\app")
        'internal/app'
        >>> normalize_path("./")
        ''
    """
    if not path:
        return ""
    cleaned = posixpath.normpath(path.replace("\\", "/"))
    # normpath keeps a leading "//" (POSIX implementation-defined root)
    if cleaned.startswith("/"):
        cleaned = cleaned.lstrip("/")
    if cleaned == ".":
        return ""
    return cleaned


def require_path(path: str) -> str:
    """Normalize *path*, raising ``INVALID_PATH`` if nothing is left."""
    normalized = normalize_path(path)
    if not normalized:
        raise BlueprintError(ErrorCode.INVALID_PATH, "path is required")
    return normalized
