"""Tree resolution and queries."""
from .models import TreeNode, FileNode, DirectoryNode
from .resolver import TreeResolver
from .queries import flatten, files_only, directories_only

__all__ = [
    'TreeNode',
    'FileNode',
    'DirectoryNode',
    'TreeResolver',
    'flatten',
    'files_only',
    'directories_only',
]
