"""
Storage protocols.

Defines the primitive filesystem capability the tree resolver and the FS
facade call into. Implementations never retry, lock or buffer on behalf of
the caller; every failure propagates.
"""
from typing import List, Protocol, runtime_checkable

from ..path import PathInput
from .models import StatResult


@runtime_checkable
class StorageProtocol(Protocol):
    """
    Async protocol for storage backends.

    Implementations can target the local disk, memory, or any other
    hierarchical store.
    """

    async def exists(self, path: PathInput) -> bool:
        """
        Check if a path exists and is accessible.

        Returns:
            True if the path exists
        """
        ...

    async def stat(self, path: PathInput) -> StatResult:
        """
        Get type, size and timestamps of a path.

        Raises:
            NotAccessibleError: If the path does not exist
        """
        ...

    async def list_children(self, path: PathInput) -> List[str]:
        """
        List the leaf names of a directory's immediate children.

        Returns:
            Names in the order the backend returns them

        Raises:
            NotAccessibleError: If the path does not exist
            NotDirectoryError: If the path is not a directory
        """
        ...

    async def read_file(self, path: PathInput) -> bytes:
        """
        Read a whole file.

        Raises:
            NotAccessibleError: If the path does not exist
            NotFileError: If the path is not a file
        """
        ...

    async def write_file(self, path: PathInput, data: bytes) -> None:
        """
        Create or truncate a file and write data to it.

        Raises:
            NotDirectoryError: If the parent directory is missing
        """
        ...

    async def append_file(self, path: PathInput, data: bytes) -> None:
        """
        Append data to a file, creating it if needed.

        Raises:
            NotDirectoryError: If the parent directory is missing
        """
        ...

    async def make_directory(self, path: PathInput) -> None:
        """
        Create a directory and any missing parents.

        Succeeds silently if the directory already exists.
        """
        ...
