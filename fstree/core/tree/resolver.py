"""
Tree Resolver - builds an in-memory tree of a directory subtree.

Process:
1. Check the root exists, then stat it
2. For a directory, list its children
3. Stat every child of the level concurrently
4. Recurse concurrently into every child directory of the level
5. Attach the children once the whole level has completed

Concurrency is bounded by directory fan-out: one batch of stats and one
batch of recursions per directory level, never one global batch for the
whole tree.
"""
import asyncio
from typing import Awaitable, Iterable, List, TypeVar

from ..exceptions import NotAccessibleError
from ..logging import get_logger
from ..path import PathInput, PathValue
from ..storage.models import StatResult
from ..storage.protocols import StorageProtocol
from .models import DirectoryNode, FileNode, TreeNode

logger = get_logger(__name__)

T = TypeVar('T')


class TreeResolver:
    """
    Resolve a directory subtree through a storage backend.

    Each resolve() call builds its own independent graph; nothing is
    cached between calls.

    Example:
        >>> resolver = TreeResolver(LocalStorage())
        >>> root = await resolver.resolve("./src")
        >>> [str(p) for p in flatten(root)]
    """

    def __init__(self, storage: StorageProtocol):
        """
        Initialize tree resolver.

        Args:
            storage: Backend providing exists/stat/list_children
        """
        self._storage = storage

    async def resolve(self, path: PathInput) -> TreeNode:
        """
        Resolve a path into a fully built tree.

        Args:
            path: Root of the subtree

        Returns:
            FileNode if the root is a file, DirectoryNode otherwise

        Raises:
            NotAccessibleError: If the root, or any entry below it, can't be stat'ed
            NotDirectoryError: If a listed directory turns out not to be one
        """
        root = PathValue.of(path)

        if not await self._storage.exists(root):
            raise NotAccessibleError(root.absolute, operation='exists')

        stat = await self._storage.stat(root)

        if not stat.is_directory:
            return FileNode(path=root, stat=stat)

        logger.debug(f"Resolving tree at {root.absolute}")
        try:
            node = await self._resolve_directory(root, stat)
        except Exception as e:
            logger.error(f"Tree resolution of {root.absolute} failed: {e}")
            raise

        return node

    async def _resolve_directory(self, path: PathValue, stat: StatResult) -> DirectoryNode:
        """Resolve one directory level, then recurse into its subdirectories."""
        names = await self._storage.list_children(path)

        if not names:
            return DirectoryNode(path=path, stat=stat)

        child_paths = [path.join(name) for name in names]

        # Step 1: stat the whole level at once
        child_stats = await self._gather_level(
            self._storage.stat(child) for child in child_paths
        )

        # Step 2: recurse into every subdirectory of the level at once
        pending = {}
        children: List[TreeNode] = []
        for index, (child, child_stat) in enumerate(zip(child_paths, child_stats)):
            if child_stat.is_directory:
                pending[index] = self._resolve_directory(child, child_stat)
                children.append(DirectoryNode(path=child, stat=child_stat))
            else:
                children.append(FileNode(path=child, stat=child_stat))

        logger.debug(
            f"{path.absolute}: {len(children)} entries, "
            f"{len(pending)} subdirectories"
        )

        if pending:
            resolved = await self._gather_level(pending.values())
            for index, subtree in zip(pending.keys(), resolved):
                children[index] = subtree

        return DirectoryNode(path=path, stat=stat, children=tuple(children))

    async def _gather_level(self, coros: Iterable[Awaitable[T]]) -> List[T]:
        """
        Run one level's coroutines concurrently and wait for all of them.

        On the first failure the remaining tasks are cancelled and drained
        before the error is re-raised, so nothing outlives the call.
        """
        tasks = [asyncio.ensure_future(coro) for coro in coros]

        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
