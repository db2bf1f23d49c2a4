"""
Local filesystem storage.

Uses aiofiles for non-blocking I/O operations: every blocking syscall runs
in aiofiles' executor so sibling calls overlap on the event loop.
"""
from typing import List

import aiofiles
import aiofiles.os

from ..exceptions import NotAccessibleError, NotDirectoryError, NotFileError
from ..logging import get_logger
from ..path import PathInput, PathValue
from .models import StatResult

logger = get_logger(__name__)


class LocalStorage:
    """
    Storage backed by the local disk.

    Responsibilities:
    - Translate OSError into fstree exceptions
    - Resolve every path to its absolute form before touching the disk
    """

    async def exists(self, path: PathInput) -> bool:
        """Check if path exists and is accessible."""
        abs_path = PathValue.of(path).absolute
        return await aiofiles.os.path.exists(abs_path)

    async def stat(self, path: PathInput) -> StatResult:
        """
        Stat a path.

        Args:
            path: Path to stat

        Returns:
            StatResult for the path

        Raises:
            NotAccessibleError: If path doesn't exist or can't be read
        """
        abs_path = PathValue.of(path).absolute

        try:
            result = await aiofiles.os.stat(abs_path)
        except OSError as e:
            raise NotAccessibleError(abs_path, operation='stat') from e

        return StatResult.from_os(result)

    async def list_children(self, path: PathInput) -> List[str]:
        """
        List a directory.

        Args:
            path: Directory to list

        Returns:
            Child names in the order the OS returns them

        Raises:
            NotAccessibleError: If path doesn't exist
            NotDirectoryError: If path is not a directory
        """
        abs_path = PathValue.of(path).absolute
        stat = await self.stat(abs_path)

        if not stat.is_directory:
            raise NotDirectoryError(
                f"You can not perform an 'ls' on a non-directory path ({abs_path}).",
                path=abs_path,
                operation='ls'
            )

        try:
            names = await aiofiles.os.listdir(abs_path)
        except OSError as e:
            raise NotAccessibleError(abs_path, operation='ls') from e

        logger.debug(f"Listed {abs_path}: {len(names)} entries")
        return names

    async def read_file(self, path: PathInput) -> bytes:
        """
        Read entire file.

        Raises:
            NotAccessibleError: If path doesn't exist
            NotFileError: If path is not a regular file
        """
        abs_path = PathValue.of(path).absolute
        stat = await self.stat(abs_path)

        if not stat.is_file:
            raise NotFileError(
                f"'{abs_path}' is not a file that can be read.",
                path=abs_path,
                operation='read'
            )

        try:
            async with aiofiles.open(abs_path, 'rb') as f:
                data = await f.read()
        except OSError as e:
            raise NotAccessibleError(abs_path, operation='read') from e

        logger.debug(f"Read {abs_path} ({len(data)} bytes)")
        return data

    async def write_file(self, path: PathInput, data: bytes) -> None:
        """Create or truncate a file and write data to it."""
        await self._write(PathValue.of(path), data, 'wb', 'write')

    async def append_file(self, path: PathInput, data: bytes) -> None:
        """Append data to a file, creating it if needed."""
        await self._write(PathValue.of(path), data, 'ab', 'append')

    async def make_directory(self, path: PathInput) -> None:
        """
        Create directory and missing parents.

        Raises:
            NotDirectoryError: If a file occupies the path or one of its parents
        """
        abs_path = PathValue.of(path).absolute

        try:
            await aiofiles.os.makedirs(abs_path, exist_ok=True)
        except (FileExistsError, NotADirectoryError) as e:
            raise NotDirectoryError(
                f"'{abs_path}' can not be created as a directory.",
                path=abs_path,
                operation='mkdir'
            ) from e
        except OSError as e:
            raise NotAccessibleError(abs_path, operation='mkdir') from e

        logger.debug(f"Created directory {abs_path}")

    async def _write(self, path: PathValue, data: bytes, mode: str, operation: str) -> None:
        abs_path = path.absolute
        parent = PathValue(abs_path).dirname

        if not await aiofiles.os.path.isdir(parent):
            raise NotDirectoryError(
                f"'{parent}' is not a directory to which a file can be written.",
                path=parent,
                operation=operation
            )

        try:
            async with aiofiles.open(abs_path, mode) as f:
                await f.write(data)
        except IsADirectoryError as e:
            raise NotFileError(
                f"'{abs_path}' is not a file that can be written.",
                path=abs_path,
                operation=operation
            ) from e
        except OSError as e:
            raise NotAccessibleError(abs_path, operation=operation) from e

        logger.debug(f"{operation.capitalize()} {abs_path} ({len(data)} bytes)")
