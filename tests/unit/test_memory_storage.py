"""Tests for MemoryStorage."""
import pytest

from fstree import (
    MemoryStorage,
    NotAccessibleError,
    NotDirectoryError,
    NotFileError,
    StorageProtocol,
)


class TestSeeding:
    """Test suite for synchronous seeding helpers."""

    def test_satisfies_protocol(self, memory_storage):
        """Test MemoryStorage implements StorageProtocol."""
        assert isinstance(memory_storage, StorageProtocol)

    @pytest.mark.asyncio
    async def test_add_file_creates_parents(self, memory_storage):
        """Test parents of a seeded file exist."""
        memory_storage.add_file('/a/b/c.txt', b'data')

        assert await memory_storage.exists('/a')
        assert (await memory_storage.stat('/a/b')).is_directory
        assert (await memory_storage.stat('/a/b/c.txt')).size == 4

    @pytest.mark.asyncio
    async def test_root_always_exists(self, memory_storage):
        """Test the filesystem root exists in empty storage."""
        assert await memory_storage.exists('/')
        assert await memory_storage.list_children('/') == []

    def test_add_directory_over_file(self, memory_storage):
        """Test seeding a directory below a file fails."""
        memory_storage.add_file('/f')

        with pytest.raises(NotDirectoryError):
            memory_storage.add_directory('/f/sub')


class TestOperations:
    """Test suite for StorageProtocol operations."""

    @pytest.mark.asyncio
    async def test_listing_in_insertion_order(self, memory_storage):
        """Test listing returns insertion order, not sorted order."""
        memory_storage.add_file('/d/zeta')
        memory_storage.add_directory('/d/alpha')
        memory_storage.add_file('/d/mid')
        memory_storage.add_file('/d/alpha/inner')

        assert await memory_storage.list_children('/d') == ['zeta', 'alpha', 'mid']

    @pytest.mark.asyncio
    async def test_stat_missing(self, memory_storage):
        """Test stat of a missing path."""
        with pytest.raises(NotAccessibleError):
            await memory_storage.stat('/nope')

    @pytest.mark.asyncio
    async def test_list_file(self, memory_storage):
        """Test listing a file."""
        memory_storage.add_file('/f')

        with pytest.raises(NotDirectoryError):
            await memory_storage.list_children('/f')

    @pytest.mark.asyncio
    async def test_read_directory(self, memory_storage):
        """Test reading a directory."""
        memory_storage.add_directory('/d')

        with pytest.raises(NotFileError):
            await memory_storage.read_file('/d')

    @pytest.mark.asyncio
    async def test_write_and_append(self, memory_storage):
        """Test write replaces and append extends."""
        memory_storage.add_directory('/d')

        await memory_storage.write_file('/d/f', b'abc')
        await memory_storage.write_file('/d/f', b'xy')
        await memory_storage.append_file('/d/f', b'z')

        assert await memory_storage.read_file('/d/f') == b'xyz'

    @pytest.mark.asyncio
    async def test_write_missing_parent(self, memory_storage):
        """Test writing below a missing directory."""
        with pytest.raises(NotDirectoryError) as exc_info:
            await memory_storage.write_file('/missing/f', b'x')

        assert exc_info.value.path == '/missing'

    @pytest.mark.asyncio
    async def test_write_over_directory(self, memory_storage):
        """Test writing onto a directory."""
        memory_storage.add_directory('/d')

        with pytest.raises(NotFileError):
            await memory_storage.write_file('/d', b'x')

    @pytest.mark.asyncio
    async def test_make_directory_idempotent(self, memory_storage):
        """Test make_directory is recursive and idempotent."""
        await memory_storage.make_directory('/x/y/z')
        await memory_storage.make_directory('/x/y/z')

        assert await memory_storage.list_children('/x') == ['y']
        assert (await memory_storage.stat('/x/y/z')).is_directory
