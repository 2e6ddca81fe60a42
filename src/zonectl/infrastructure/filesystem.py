"""Filesystem projection: directory trees and regex path matching.

Stateless wrappers around directory enumeration. Both walks run to
completion and cannot be cancelled mid-traversal; callers that need to
bound latency must apply their own timeout.

All returned paths are relative to the root, slash-separated, with the
root itself represented as ``""``.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.domain.models import TreeNode
from zonectl.domain.ports import PathMatcher, TreeLister

logger = logging.getLogger(__name__)


def _resolve_root(root: str) -> Path:
    """Return the walk root, or raise ``ROOT_UNREADABLE``.

    An empty *root* means the current working directory.
    """
    try:
        path = Path(root) if root else Path.cwd()
        is_dir = path.is_dir()
        exists = is_dir or path.exists()
    except OSError as exc:
        raise BlueprintError(ErrorCode.ROOT_UNREADABLE, str(exc)) from exc
    if not exists:
        raise BlueprintError(ErrorCode.ROOT_UNREADABLE, f"root does not exist: {path}")
    if not is_dir:
        raise BlueprintError(ErrorCode.ROOT_UNREADABLE, f"root is not a directory: {path}")
    return path


def _join(parent: str, name: str) -> str:
    return f"{parent}/{name}" if parent else name


class FilesystemTreeLister(TreeLister):
    """Builds a :class:`TreeNode` hierarchy with :func:`os.scandir`.

    Symlinked directories are listed as leaves, not followed.
    """

    def list_tree(self, root: str) -> TreeNode:
        base = _resolve_root(root)
        logger.debug("Listing tree under %s", base)
        return self._list_dir(base, "")

    def _list_dir(self, directory: Path, rel: str) -> TreeNode:
        node = TreeNode(path=rel, name=directory.name if rel else ".", is_dir=True)
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    child_rel = _join(rel, entry.name)
                    if entry.is_dir(follow_symlinks=False):
                        node.children.append(self._list_dir(Path(entry.path), child_rel))
                    else:
                        node.children.append(
                            TreeNode(path=child_rel, name=entry.name, is_dir=False)
                        )
        except OSError as exc:
            raise BlueprintError(ErrorCode.ROOT_UNREADABLE, str(exc)) from exc
        return node


class FilesystemPathMatcher(PathMatcher):
    """Lists every relative path (dirs and files) where the regex matches.

    Matching uses :meth:`re.Pattern.search`, so patterns are unanchored
    unless they say otherwise. The root itself is tested as ``""``.
    Results come in lexical pre-order: a directory, then everything below
    it, then its next sibling. Symlinked directories are not descended.
    """

    def list_matching_paths(self, root: str, pattern: str) -> list[str]:
        base = _resolve_root(root)
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise BlueprintError(ErrorCode.INVALID_PATTERN, str(exc)) from exc

        paths: list[str] = [""] if regex.search("") else []
        self._walk(base, "", regex, paths)
        return paths

    def _walk(self, directory: Path, rel: str, regex: re.Pattern[str], out: list[str]) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            raise BlueprintError(ErrorCode.ROOT_UNREADABLE, str(exc)) from exc
        for entry in entries:
            child = _join(rel, entry.name)
            if regex.search(child):
                out.append(child)
            if entry.is_dir(follow_symlinks=False):
                self._walk(Path(entry.path), child, regex, out)
