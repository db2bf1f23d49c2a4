"""
Configuration for the fstree facade.

Open for extension through custom configurations.
"""
from dataclasses import dataclass
from typing import Optional, Tuple
import logging


@dataclass
class FSConfig:
    """
    Complete FS configuration.

    Centralizes the options used by the FS facade when turning text into
    bytes and back, and the level of the package loggers.
    """
    # Text codec used by read_text(), write() and append() for str content
    encoding: str = 'utf-8'
    errors: str = 'strict'

    # Package logger level; None leaves logging untouched
    log_level: Optional[int] = None

    @classmethod
    def default(cls) -> 'FSConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def verbose(cls, **kwargs) -> 'FSConfig':
        """Create configuration with DEBUG logging."""
        return cls(log_level=logging.DEBUG, **kwargs)

    def codec(self) -> Tuple[str, str]:
        """Get (encoding, errors) for str.encode / bytes.decode."""
        return self.encoding, self.errors
