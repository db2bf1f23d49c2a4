"""
FS facade.

Single entry point over a storage backend: path-typed async operations,
tree resolution and tree queries.
"""
from typing import List, Optional, Union

from .config import FSConfig
from .logging import set_package_level
from .path import PathInput, PathValue
from .storage import LocalStorage, StatResult, StorageProtocol
from .tree import TreeNode, TreeResolver, directories_only, files_only, flatten


Content = Union[str, bytes]


class FS:
    """
    Async filesystem facade.

    Example:
        >>> fs = FS()
        >>> await fs.mkdir("build/out")
        >>> await fs.write("build/out/log.txt", "started\\n")
        >>> tree = await fs.tree("build")
        >>> fs.files(tree)
        [PathValue('build/out/log.txt')]
    """

    def __init__(
        self,
        storage: Optional[StorageProtocol] = None,
        config: Optional[FSConfig] = None
    ):
        """
        Initialize the facade.

        Args:
            storage: Backend to use (defaults to LocalStorage)
            config: Codec and logging configuration
        """
        self.storage: StorageProtocol = storage if storage is not None else LocalStorage()
        self.config = config or FSConfig.default()
        self._resolver = TreeResolver(self.storage)
        if self.config.log_level is not None:
            set_package_level(self.config.log_level)

    # =========================================================================
    # Inspection
    # =========================================================================

    async def is_accessible(self, path: PathInput) -> bool:
        """Check if path exists and is accessible."""
        return await self.storage.exists(PathValue.of(path))

    async def stat(self, path: PathInput) -> StatResult:
        """Get type, size and timestamps of a path."""
        return await self.storage.stat(PathValue.of(path))

    async def ls(self, path: PathInput) -> List[PathValue]:
        """
        List a directory.

        Args:
            path: Directory to list

        Returns:
            Child paths, each joined onto `path`, in storage order
        """
        path = PathValue.of(path)
        names = await self.storage.list_children(path)
        return [path.join(name) for name in names]

    async def tree(self, path: PathInput) -> TreeNode:
        """Resolve the whole subtree below a path."""
        return await self._resolver.resolve(path)

    # =========================================================================
    # Reading and writing
    # =========================================================================

    async def read(self, path: PathInput) -> bytes:
        """Read a whole file as bytes."""
        return await self.storage.read_file(PathValue.of(path))

    async def read_text(self, path: PathInput) -> str:
        """Read a whole file, decoded with the configured encoding."""
        encoding, errors = self.config.codec()
        data = await self.read(path)
        return data.decode(encoding, errors)

    async def write(self, path: PathInput, content: Content) -> None:
        """
        Write a file, replacing any previous content.

        Args:
            path: Target file, whose parent directory must exist
            content: Text (encoded with the configured encoding) or bytes
        """
        await self.storage.write_file(PathValue.of(path), self._encode(content))

    async def append(self, path: PathInput, content: Content) -> None:
        """Append text or bytes to a file, creating it if needed."""
        await self.storage.append_file(PathValue.of(path), self._encode(content))

    async def mkdir(self, path: PathInput) -> None:
        """Create a directory and its missing parents."""
        await self.storage.make_directory(PathValue.of(path))

    # =========================================================================
    # Tree queries
    # =========================================================================

    @staticmethod
    def flatten(node: TreeNode) -> List[PathValue]:
        return flatten(node)

    @staticmethod
    def files(node: TreeNode) -> List[PathValue]:
        return files_only(node)

    @staticmethod
    def directories(node: TreeNode, include_root: bool = False) -> List[PathValue]:
        return directories_only(node, include_root=include_root)

    def _encode(self, content: Content) -> bytes:
        if isinstance(content, str):
            encoding, errors = self.config.codec()
            return content.encode(encoding, errors)
        return bytes(content)
