"""Tests for identifier generation."""

from __future__ import annotations

from zonectl.domain.ids import generate_id, validate_id


class TestGenerateId:
    def test_format(self) -> None:
        assert validate_id(generate_id())

    def test_unique(self) -> None:
        ids = {generate_id() for _ in range(1000)}
        assert len(ids) == 1000


class TestValidateId:
    def test_rejects_malformed(self) -> None:
        assert not validate_id("")
        assert not validate_id("ABCDEF0123456789")
        assert not validate_id("0123")
        assert not validate_id("0123456789abcdefg")
