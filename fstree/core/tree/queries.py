"""Pure traversals over an already resolved tree."""
from typing import Iterator, List

from ..path import PathValue
from .models import TreeNode


def flatten(node: TreeNode) -> List[PathValue]:
    """
    Every path in the tree, pre-order.

    The node's own path comes first, followed by each child flattened.
    """
    return list(_walk(node))


def files_only(node: TreeNode) -> List[PathValue]:
    """
    Paths of every leaf in the tree.

    Directories are never emitted, empty ones included.
    """
    return list(_files(node))


def directories_only(node: TreeNode, include_root: bool = False) -> List[PathValue]:
    """
    Paths of every non-empty directory below the node.

    Empty directories are skipped. The starting node itself is only
    reported when include_root is set.

    Args:
        node: Tree to traverse
        include_root: Also report the starting node if it is a non-empty directory
    """
    if include_root:
        return list(_directories(node))

    paths: List[PathValue] = []
    for child in getattr(node, 'children', ()):
        paths.extend(_directories(child))
    return paths


def _walk(node: TreeNode) -> Iterator[PathValue]:
    yield node.path
    for child in getattr(node, 'children', ()):
        yield from _walk(child)


def _files(node: TreeNode) -> Iterator[PathValue]:
    if not node.is_directory:
        yield node.path
        return
    for child in node.children:
        yield from _files(child)


def _directories(node: TreeNode) -> Iterator[PathValue]:
    if not node.is_directory or not node.children:
        return
    yield node.path
    for child in node.children:
        yield from _directories(child)
