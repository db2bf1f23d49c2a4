"""Storage data models."""
from dataclasses import dataclass
import os
import stat as stat_module


@dataclass(frozen=True)
class StatResult:
    """
    Type, size and timestamps of a filesystem entry.

    Attributes:
        is_directory: Entry is a directory
        is_file: Entry is a regular file
        size: Size in bytes
        mtime: Last modification time (seconds since epoch)
        atime: Last access time (seconds since epoch)
        ctime: Metadata change / creation time (seconds since epoch)
    """
    is_directory: bool
    is_file: bool
    size: int = 0
    mtime: float = 0.0
    atime: float = 0.0
    ctime: float = 0.0

    @classmethod
    def from_os(cls, result: os.stat_result) -> 'StatResult':
        """
        Build from an os.stat_result.

        Args:
            result: Value returned by os.stat

        Returns:
            StatResult instance
        """
        return cls(
            is_directory=stat_module.S_ISDIR(result.st_mode),
            is_file=stat_module.S_ISREG(result.st_mode),
            size=result.st_size,
            mtime=result.st_mtime,
            atime=result.st_atime,
            ctime=result.st_ctime,
        )

    def to_dict(self) -> dict:
        """Converts stat result to dictionary."""
        return {
            'is_directory': self.is_directory,
            'is_file': self.is_file,
            'size': self.size,
            'mtime': self.mtime,
            'atime': self.atime,
            'ctime': self.ctime,
        }
