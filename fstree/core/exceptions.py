"""
Custom exceptions for filesystem operations.

Every exception carries the absolute path it concerns and the operation
that was attempted, so a single terminal failure is enough to diagnose
what went wrong during a tree resolution or a read/write.
"""
from typing import Optional


class FSException(Exception):
    """Base exception for all fstree errors."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        operation: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            path: Absolute path the operation was attempted on
            operation: Name of the attempted operation (stat, ls, read...)
        """
        self.path = path
        self.operation = operation
        super().__init__(message)


class NotAccessibleError(FSException):
    """Raised when a path does not exist or cannot be accessed."""

    def __init__(self, path: str, operation: str = 'stat') -> None:
        super().__init__(
            f"'{path}' does not exist or is not accessible by this user.",
            path=path,
            operation=operation
        )


class NotDirectoryError(FSException):
    """Raised when a directory-only operation hits a non-directory."""
    pass


class NotFileError(FSException):
    """Raised when a file-only operation hits something that is not a file."""
    pass
