"""Tree node variants built by the resolver."""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ..path import PathValue
from ..storage.models import StatResult


@dataclass(frozen=True)
class FileNode:
    """A leaf entry. Leaves have no children attribute at all."""
    path: PathValue
    stat: Optional[StatResult] = field(default=None, repr=False)

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def is_file(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return self.path.basename

    @property
    def size(self) -> int:
        return self.stat.size if self.stat else 0

    def to_dict(self) -> dict:
        """Converts node to dictionary."""
        return {
            'path': self.path.path,
            'is_directory': False,
        }


@dataclass(frozen=True)
class DirectoryNode:
    """
    A directory entry with its resolved children.

    Children keep the order the storage listed them in. An empty
    directory has an empty tuple.
    """
    path: PathValue
    stat: Optional[StatResult] = field(default=None, repr=False)
    children: Tuple['TreeNode', ...] = ()

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def is_file(self) -> bool:
        return False

    @property
    def name(self) -> str:
        return self.path.basename

    @property
    def size(self) -> int:
        """Total size of every file below this directory."""
        return sum(child.size for child in self.children)

    @property
    def files(self) -> Tuple['TreeNode', ...]:
        return tuple(c for c in self.children if c.is_file)

    @property
    def folders(self) -> Tuple['TreeNode', ...]:
        return tuple(c for c in self.children if c.is_directory)

    def find_child(self, name: str) -> Optional['TreeNode']:
        """Finds child by name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def to_dict(self) -> dict:
        """Converts node, and its subtree, to dictionary."""
        return {
            'path': self.path.path,
            'is_directory': True,
            'children': [child.to_dict() for child in self.children],
        }


TreeNode = Union[FileNode, DirectoryNode]
