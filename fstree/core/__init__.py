"""Core components: paths, storage, tree resolution."""
from .path import PathValue, PathBundle
from .exceptions import FSException, NotAccessibleError, NotDirectoryError, NotFileError
from .config import FSConfig
from .storage import StatResult, StorageProtocol, LocalStorage, MemoryStorage
from .tree import (
    TreeNode,
    FileNode,
    DirectoryNode,
    TreeResolver,
    flatten,
    files_only,
    directories_only,
)
from .fs import FS

__all__ = [
    'PathValue',
    'PathBundle',
    'FSException',
    'NotAccessibleError',
    'NotDirectoryError',
    'NotFileError',
    'FSConfig',
    'StatResult',
    'StorageProtocol',
    'LocalStorage',
    'MemoryStorage',
    'TreeNode',
    'FileNode',
    'DirectoryNode',
    'TreeResolver',
    'flatten',
    'files_only',
    'directories_only',
    'FS',
]
