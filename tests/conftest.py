"""Pytest fixtures for fstree tests."""
import pytest

from fstree import FS, MemoryStorage


@pytest.fixture
def memory_storage():
    """Returns an empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def scenario_storage():
    """Returns storage holding /a with file x.txt and empty directory y."""
    storage = MemoryStorage()
    storage.add_file('/a/x.txt', b'hello')
    storage.add_directory('/a/y')
    return storage


@pytest.fixture
def nested_storage():
    """
    Returns storage holding a nested tree of 9 entries below /root:

        /root/readme.md
        /root/src/
        /root/src/main.py
        /root/src/pkg/
        /root/src/pkg/__init__.py
        /root/src/pkg/util.py
        /root/docs/
        /root/docs/empty/
        /root/setup.cfg
    """
    storage = MemoryStorage()
    storage.add_file('/root/readme.md', b'# readme')
    storage.add_file('/root/src/main.py', b'print(1)')
    storage.add_file('/root/src/pkg/__init__.py')
    storage.add_file('/root/src/pkg/util.py', b'x = 1')
    storage.add_directory('/root/docs/empty')
    storage.add_file('/root/setup.cfg')
    return storage


@pytest.fixture
def memory_fs(memory_storage):
    """Returns an FS facade over empty in-memory storage."""
    return FS(storage=memory_storage)
