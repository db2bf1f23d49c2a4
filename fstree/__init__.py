"""
fstree - Path values and an async, concurrent directory-tree walker.

Usage:
    >>> from fstree import FS
    >>> 
    >>> fs = FS()
    >>> root = await fs.tree("./project")
    >>> for path in fs.files(root):
    ...     print(path)
"""
import logging

from .core.path import PathValue, PathBundle
from .core.exceptions import (
    FSException,
    NotAccessibleError,
    NotDirectoryError,
    NotFileError
)
from .core.config import FSConfig
from .core.logging import set_package_level

# Storage backends
from .core.storage import (
    StatResult,
    StorageProtocol,
    LocalStorage,
    MemoryStorage
)

# Tree resolution
from .core.tree import (
    TreeNode,
    FileNode,
    DirectoryNode,
    TreeResolver,
    flatten,
    files_only,
    directories_only
)
from .core.fs import FS

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for fstree modules.

    This ensures that all fstree loggers are properly configured
    to show log messages at the specified level.

    Args:
        level: Logging level (default: logging.INFO)
    """
    set_package_level(level)


__all__ = [
    'FS',
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
    'setup_logging',
]
