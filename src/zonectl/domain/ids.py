"""Identifier generation for projects, zones, and agents.

IDs are 8 random bytes from :mod:`secrets`, hex-encoded (16 chars).
Collisions are not checked; at the expected scale (hundreds of records)
the probability is negligible.
"""

from __future__ import annotations

import re
import secrets

ID_BYTES = 8
ID_PATTERN = re.compile(r"^[0-9a-f]{16}$")


def generate_id() -> str:
    """Return a new random hex identifier."""
    return secrets.token_hex(ID_BYTES)


def validate_id(entity_id: str) -> bool:
    """Check whether *entity_id* has the shape produced by :func:`generate_id`."""
    return ID_PATTERN.match(entity_id) is not None
