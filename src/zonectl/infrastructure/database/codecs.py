"""Defensive encode/decode for JSON-text array columns.

Writes always produce a JSON array. Reads never raise: rows written by
older builds may hold ``NULL``, an empty string, or a bare path such as
``node_modules`` instead of a JSON array, and a corrupt column must not
make a whole project or zone unreadable.

Decoding is a tagged attempt: structured JSON first, then a fallback
shape specific to the column family.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from zonectl.domain.errors import BlueprintError
from zonectl.domain.models import AgentRef

_JSON_LEADERS = ("[", '"', "{")


def _as_text(raw: Any) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, bytes | bytearray):
        return bytes(raw).decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return raw
    return None


def encode_string_list(values: Sequence[str] | None) -> str:
    """Encode a string collection as a JSON array (``None`` -> ``[]``)."""
    return json.dumps(list(values or []))


def decode_string_list(raw: Any) -> list[str]:
    """Decode a string-array column.

    - ``NULL``, empty, or whitespace-only -> ``[]``
    - JSON array of strings -> that list
    - JSON string literal -> ``[value]``
    - anything else (bare text, invalid JSON, mixed arrays) -> ``[raw]``

    Examples:
        >>> decode_string_list('["a", "b"]')
        ['a', 'b']
        >>> decode_string_list("node_modules")
        ['node_modules']
        >>> decode_string_list(None)
        []
    """
    text = _as_text(raw)
    if text is None or not text.strip():
        return []
    if not text.lstrip().startswith(_JSON_LEADERS):
        return [text]
    try:
        value = json.loads(text)
    except ValueError:
        return [text]
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    return [text]


def encode_agent_refs(refs: Sequence[AgentRef] | None) -> str:
    """Encode agent references as a JSON array of ``{"id", "name"}`` objects."""
    return json.dumps([{"id": r.id, "name": r.name} for r in refs or []])


def decode_agent_refs(raw: Any) -> list[AgentRef]:
    """Decode an agent-reference column.

    Anything that is not a JSON array decodes to ``[]``. Object items
    become :class:`AgentRef`; both ``id``/``name`` and the capitalized
    ``ID``/``Name`` keys of older rows are accepted. Other items are
    skipped.
    """
    text = _as_text(raw)
    if text is None or not text.lstrip().startswith("["):
        return []
    try:
        value = json.loads(text)
    except ValueError:
        return []
    if not isinstance(value, list):
        return []
    refs: list[AgentRef] = []
    for item in value:
        if not isinstance(item, dict):
            continue
        try:
            refs.append(AgentRef.from_mapping(item))
        except BlueprintError:
            continue
    return refs
