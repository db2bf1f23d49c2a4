"""Storage backends the tree resolver and FS facade call into."""
from .models import StatResult
from .protocols import StorageProtocol
from .local_storage import LocalStorage
from .memory_storage import MemoryStorage

__all__ = [
    'StatResult',
    'StorageProtocol',
    'LocalStorage',
    'MemoryStorage',
]
