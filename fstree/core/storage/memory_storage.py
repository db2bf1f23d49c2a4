"""
In-memory storage implementation.

Provides a non-persistent hierarchy for testing and temporary use.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import asyncio
import os
import time

from ..exceptions import NotAccessibleError, NotDirectoryError, NotFileError
from ..logging import get_logger
from ..path import PathInput, PathValue
from .models import StatResult

logger = get_logger(__name__)


@dataclass
class _Entry:
    is_directory: bool
    data: bytearray = field(default_factory=bytearray)
    mtime: float = field(default_factory=time.time)
    ctime: float = field(default_factory=time.time)


class MemoryStorage:
    """
    In-memory storage.

    Entries are keyed by absolute path. Listings follow insertion order,
    the way a real directory returns entries in on-disk order. Every call
    yields to the event loop (optionally sleeping `latency` seconds) so
    concurrent callers interleave.

    Useful for:
    - Unit testing
    - Temporary trees

    Example:
        >>> storage = MemoryStorage()
        >>> storage.add_file("/a/x.txt", b"hello")
        >>> storage.add_directory("/a/y")
        >>> await storage.list_children("/a")
        ['x.txt', 'y']
    """

    def __init__(self, latency: float = 0.0):
        """
        Initialize memory storage.

        Args:
            latency: Seconds every operation waits before completing
        """
        self.latency = latency
        self._entries: Dict[str, _Entry] = {}

    # =========================================================================
    # Seeding (synchronous)
    # =========================================================================

    def add_directory(self, path: PathInput) -> PathValue:
        """Create a directory and its missing parents immediately."""
        abs_path = PathValue.of(path).absolute
        self._make_dirs(abs_path)
        return PathValue(abs_path)

    def add_file(self, path: PathInput, data: bytes = b'') -> PathValue:
        """Create a file, and its missing parents, immediately."""
        abs_path = PathValue.of(path).absolute
        self._make_dirs(os.path.dirname(abs_path))
        self._entries[abs_path] = _Entry(is_directory=False, data=bytearray(data))
        return PathValue(abs_path)

    # =========================================================================
    # StorageProtocol
    # =========================================================================

    async def exists(self, path: PathInput) -> bool:
        abs_path = PathValue.of(path).absolute
        await self._tick()
        return self._lookup(abs_path) is not None

    async def stat(self, path: PathInput) -> StatResult:
        abs_path = PathValue.of(path).absolute
        await self._tick()
        entry = self._require(abs_path, 'stat')

        return StatResult(
            is_directory=entry.is_directory,
            is_file=not entry.is_directory,
            size=len(entry.data),
            mtime=entry.mtime,
            atime=entry.mtime,
            ctime=entry.ctime,
        )

    async def list_children(self, path: PathInput) -> List[str]:
        abs_path = PathValue.of(path).absolute
        await self._tick()
        entry = self._require(abs_path, 'ls')

        if not entry.is_directory:
            raise NotDirectoryError(
                f"You can not perform an 'ls' on a non-directory path ({abs_path}).",
                path=abs_path,
                operation='ls'
            )

        return [
            os.path.basename(key)
            for key in self._entries
            if key != abs_path and os.path.dirname(key) == abs_path
        ]

    async def read_file(self, path: PathInput) -> bytes:
        abs_path = PathValue.of(path).absolute
        await self._tick()
        entry = self._require(abs_path, 'read')

        if entry.is_directory:
            raise NotFileError(
                f"'{abs_path}' is not a file that can be read.",
                path=abs_path,
                operation='read'
            )
        return bytes(entry.data)

    async def write_file(self, path: PathInput, data: bytes) -> None:
        entry = await self._writable(PathValue.of(path).absolute, 'write')
        entry.data = bytearray(data)
        entry.mtime = time.time()

    async def append_file(self, path: PathInput, data: bytes) -> None:
        entry = await self._writable(PathValue.of(path).absolute, 'append')
        entry.data.extend(data)
        entry.mtime = time.time()

    async def make_directory(self, path: PathInput) -> None:
        abs_path = PathValue.of(path).absolute
        await self._tick()
        self._make_dirs(abs_path)

    # =========================================================================
    # Internals
    # =========================================================================

    async def _tick(self) -> None:
        await asyncio.sleep(self.latency)

    def _lookup(self, abs_path: str) -> Optional[_Entry]:
        entry = self._entries.get(abs_path)
        if entry is None and os.path.dirname(abs_path) == abs_path:
            # filesystem root always exists
            entry = self._entries.setdefault(abs_path, _Entry(is_directory=True))
        return entry

    def _require(self, abs_path: str, operation: str) -> _Entry:
        entry = self._lookup(abs_path)
        if entry is None:
            raise NotAccessibleError(abs_path, operation=operation)
        return entry

    def _make_dirs(self, abs_path: str) -> None:
        missing = []
        current = abs_path

        while True:
            entry = self._lookup(current)
            if entry is not None:
                if not entry.is_directory:
                    raise NotDirectoryError(
                        f"'{abs_path}' can not be created as a directory.",
                        path=abs_path,
                        operation='mkdir'
                    )
                break
            missing.append(current)
            current = os.path.dirname(current)

        for directory in reversed(missing):
            self._entries[directory] = _Entry(is_directory=True)
            logger.debug(f"Created directory {directory}")

    async def _writable(self, abs_path: str, operation: str) -> _Entry:
        await self._tick()
        parent = os.path.dirname(abs_path)
        parent_entry = self._lookup(parent)

        if parent_entry is None or not parent_entry.is_directory:
            raise NotDirectoryError(
                f"'{parent}' is not a directory to which a file can be written.",
                path=parent,
                operation=operation
            )

        entry = self._entries.get(abs_path)
        if entry is None:
            entry = self._entries[abs_path] = _Entry(is_directory=False)
        elif entry.is_directory:
            raise NotFileError(
                f"'{abs_path}' is not a file that can be written.",
                path=abs_path,
                operation=operation
            )
        return entry
