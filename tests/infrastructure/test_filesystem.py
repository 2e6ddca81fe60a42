"""Tests for the filesystem tree lister and path matcher."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.domain.tree import iter_paths
from zonectl.infrastructure.filesystem import FilesystemPathMatcher, FilesystemTreeLister

ALL_PATHS = {
    "README.md",
    "cmd",
    "cmd/server",
    "cmd/server/main.go",
    "internal",
    "internal/app",
    "internal/app/app.go",
    "internal/app/app_test.go",
    "node_modules",
    "node_modules/react",
    "node_modules/react/index.js",
}


class TestTreeLister:
    def test_root_node(self, source_root: Path) -> None:
        tree = FilesystemTreeLister().list_tree(str(source_root))
        assert tree.path == ""
        assert tree.name == "."
        assert tree.is_dir

    def test_lists_everything(self, source_root: Path) -> None:
        tree = FilesystemTreeLister().list_tree(str(source_root))
        assert set(iter_paths(tree)) == ALL_PATHS | {""}

    def test_dirs_and_files_flagged(self, source_root: Path) -> None:
        tree = FilesystemTreeLister().list_tree(str(source_root))
        by_name = {child.name: child for child in tree.children}
        assert by_name["cmd"].is_dir
        assert not by_name["README.md"].is_dir
        assert by_name["README.md"].children == []

    def test_child_paths_are_relative(self, source_root: Path) -> None:
        tree = FilesystemTreeLister().list_tree(str(source_root))
        cmd = next(c for c in tree.children if c.name == "cmd")
        assert cmd.children[0].path == "cmd/server"

    def test_empty_root_uses_cwd(self, source_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(source_root / "cmd")
        tree = FilesystemTreeLister().list_tree("")
        assert set(iter_paths(tree)) == {"", "server", "server/main.go"}

    def test_missing_root(self) -> None:
        with pytest.raises(BlueprintError) as exc_info:
            FilesystemTreeLister().list_tree("/nonexistent/zonectl/root")
        assert exc_info.value.code == ErrorCode.ROOT_UNREADABLE

    def test_file_root(self, source_root: Path) -> None:
        with pytest.raises(BlueprintError) as exc_info:
            FilesystemTreeLister().list_tree(str(source_root / "README.md"))
        assert exc_info.value.code == ErrorCode.ROOT_UNREADABLE

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_dirs_not_followed(self, source_root: Path) -> None:
        (source_root / "loop").symlink_to(source_root, target_is_directory=True)
        tree = FilesystemTreeLister().list_tree(str(source_root))
        loop = next(c for c in tree.children if c.name == "loop")
        assert not loop.is_dir
        assert loop.children == []


class TestPathMatcher:
    def test_matches_dirs_and_files(self, source_root: Path) -> None:
        paths = FilesystemPathMatcher().list_matching_paths(str(source_root), r"^cmd/")
        assert set(paths) == {"cmd/server", "cmd/server/main.go"}

    def test_search_is_unanchored(self, source_root: Path) -> None:
        paths = FilesystemPathMatcher().list_matching_paths(str(source_root), r"_test\.go$")
        assert paths == ["internal/app/app_test.go"]

    def test_match_everything_includes_root(self, source_root: Path) -> None:
        paths = FilesystemPathMatcher().list_matching_paths(str(source_root), "")
        assert paths[0] == ""
        assert set(paths) == ALL_PATHS | {""}
        assert len(paths) == len(set(paths))

    def test_lexical_preorder(self, tmp_path: Path) -> None:
        (tmp_path / "b").write_text("")
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "x").write_text("")
        (tmp_path / "a-b").write_text("")
        paths = FilesystemPathMatcher().list_matching_paths(str(tmp_path), ".")
        assert paths == ["a", "a/x", "a-b", "b"]

    def test_sample_tree_order(self, source_root: Path) -> None:
        paths = FilesystemPathMatcher().list_matching_paths(str(source_root), ".")
        assert paths == sorted(ALL_PATHS)

    def test_no_match(self, source_root: Path) -> None:
        assert FilesystemPathMatcher().list_matching_paths(str(source_root), r"\.rs$") == []

    def test_invalid_pattern(self, source_root: Path) -> None:
        with pytest.raises(BlueprintError) as exc_info:
            FilesystemPathMatcher().list_matching_paths(str(source_root), "[")
        assert exc_info.value.code == ErrorCode.INVALID_PATTERN

    def test_unreadable_root_checked_before_pattern(self) -> None:
        with pytest.raises(BlueprintError) as exc_info:
            FilesystemPathMatcher().list_matching_paths("/nonexistent", "[")
        assert exc_info.value.code == ErrorCode.ROOT_UNREADABLE
