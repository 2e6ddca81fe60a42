"""Pure helpers over :class:`TreeNode` values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from zonectl.domain.models import TreeNode


def is_ignored(path: str, ignored: Iterable[str]) -> bool:
    """True if *path* equals an ignored path or lies beneath one.

    Examples:
        >>> is_ignored("node_modules/react", ["node_modules"])
        True
        >>> is_ignored("node_modules_old", ["node_modules"])
        False
    """
    for entry in ignored:
        if not entry:
            continue
        if path == entry or path.startswith(f"{entry}/"):
            return True
    return False


def prune_ignored(node: TreeNode, ignored: Iterable[str]) -> TreeNode | None:
    """Return a copy of *node* without ignored paths and their descendants.

    Returns None when *node* itself is ignored. The root (``path == ""``)
    is never ignored.
    """
    ignored = [p for p in ignored if p]
    if node.path and is_ignored(node.path, ignored):
        return None
    children: list[TreeNode] = []
    for child in node.children:
        kept = prune_ignored(child, ignored)
        if kept is not None:
            children.append(kept)
    return TreeNode(path=node.path, name=node.name, is_dir=node.is_dir, children=children)


def iter_paths(node: TreeNode) -> Iterator[str]:
    """Yield every path in the tree, depth-first, starting with *node*."""
    yield node.path
    for child in node.children:
        yield from iter_paths(child)
