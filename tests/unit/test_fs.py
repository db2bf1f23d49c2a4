"""Tests for the FS facade."""
import logging

import pytest

from fstree import (
    FS,
    FSConfig,
    LocalStorage,
    MemoryStorage,
    NotAccessibleError,
    NotDirectoryError,
    NotFileError,
    PathValue,
    setup_logging,
)
from fstree.core.logging import set_package_level


class TestConstruction:
    """Test suite for FS construction."""

    def test_default_storage(self):
        """Test FS defaults to local storage and default config."""
        fs = FS()

        assert isinstance(fs.storage, LocalStorage)
        assert fs.config == FSConfig.default()

    @pytest.fixture(autouse=True)
    def reset_level(self):
        """Restore package level after each test."""
        yield
        set_package_level(logging.WARNING)

    def test_applies_log_level(self):
        """Test an explicit config log level reaches the package loggers."""
        FS(storage=MemoryStorage(), config=FSConfig.verbose())

        assert logging.getLogger('fstree').level == logging.DEBUG
        assert logging.getLogger('fstree.core.tree.resolver').level == logging.DEBUG

    def test_default_config_keeps_logging(self):
        """Test a default config leaves the package level alone."""
        setup_logging(logging.DEBUG)

        FS(storage=MemoryStorage())
        FS(storage=MemoryStorage(), config=FSConfig(encoding='latin-1'))

        assert logging.getLogger('fstree').level == logging.DEBUG
        assert logging.getLogger('fstree.core.tree.resolver').level == logging.DEBUG

    @pytest.mark.asyncio
    async def test_setup_logging_survives_facade(self, scenario_storage, caplog):
        """Test resolver debug output still appears after building an FS."""
        setup_logging(logging.DEBUG)
        fs = FS(storage=scenario_storage)

        with caplog.at_level(logging.DEBUG, logger='fstree'):
            await fs.tree('/a')

        assert any('subdirectories' in record.getMessage() for record in caplog.records)


class TestMemoryFS:
    """Test suite for FS over memory storage."""

    @pytest.mark.asyncio
    async def test_is_accessible(self, memory_fs):
        """Test accessibility checks."""
        memory_fs.storage.add_file('/a.txt')

        assert await memory_fs.is_accessible('/a.txt') is True
        assert await memory_fs.is_accessible('/b.txt') is False

    @pytest.mark.asyncio
    async def test_stat(self, memory_fs):
        """Test stat through the facade."""
        memory_fs.storage.add_file('/a.txt', b'abc')

        result = await memory_fs.stat('/a.txt')

        assert result.size == 3

    @pytest.mark.asyncio
    async def test_ls_returns_joined_paths(self, memory_fs):
        """Test ls joins child names onto the listed path."""
        memory_fs.storage.add_file('/d/one')
        memory_fs.storage.add_directory('/d/two')

        children = await memory_fs.ls(PathValue('/d'))

        assert children == [PathValue('/d/one'), PathValue('/d/two')]

    @pytest.mark.asyncio
    async def test_ls_on_file(self, memory_fs):
        """Test ls on a file raises NotDirectoryError."""
        memory_fs.storage.add_file('/f')

        with pytest.raises(NotDirectoryError):
            await memory_fs.ls('/f')

    @pytest.mark.asyncio
    async def test_text_round_trip(self, memory_fs):
        """Test str content is encoded and decoded with the config codec."""
        await memory_fs.mkdir('/notes')
        await memory_fs.write('/notes/today.txt', 'café\n')
        await memory_fs.append('/notes/today.txt', b'more\n')

        assert await memory_fs.read('/notes/today.txt') == 'café\nmore\n'.encode('utf-8')
        assert await memory_fs.read_text('/notes/today.txt') == 'café\nmore\n'

    @pytest.mark.asyncio
    async def test_custom_encoding(self):
        """Test a non-default encoding is applied."""
        fs = FS(storage=MemoryStorage(), config=FSConfig(encoding='latin-1'))
        await fs.mkdir('/d')

        await fs.write('/d/f', 'é')

        assert await fs.read('/d/f') == b'\xe9'
        assert await fs.read_text('/d/f') == 'é'

    @pytest.mark.asyncio
    async def test_read_directory(self, memory_fs):
        """Test reading a directory raises NotFileError."""
        await memory_fs.mkdir('/d')

        with pytest.raises(NotFileError):
            await memory_fs.read_text('/d')

    @pytest.mark.asyncio
    async def test_write_without_parent(self, memory_fs):
        """Test writes never create missing directories."""
        with pytest.raises(NotDirectoryError):
            await memory_fs.write('/missing/f.txt', 'x')

        assert await memory_fs.is_accessible('/missing') is False

    @pytest.mark.asyncio
    async def test_tree_and_queries(self, scenario_storage):
        """Test tree resolution and query helpers."""
        fs = FS(storage=scenario_storage)

        root = await fs.tree('/a')

        assert [p.path for p in fs.flatten(root)] == ['/a', '/a/x.txt', '/a/y']
        assert [p.path for p in fs.files(root)] == ['/a/x.txt']
        assert fs.directories(root) == []
        assert [p.path for p in fs.directories(root, include_root=True)] == ['/a']

    @pytest.mark.asyncio
    async def test_tree_missing(self, memory_fs):
        """Test tree of a missing path."""
        with pytest.raises(NotAccessibleError):
            await memory_fs.tree('/nope')


class TestLocalFS:
    """Test suite for FS over the local disk."""

    @pytest.mark.asyncio
    async def test_end_to_end(self, tmp_path):
        """Test building and walking a tree on disk."""
        fs = FS()
        base = PathValue(tmp_path)

        await fs.mkdir(base / 'build' / 'out')
        await fs.write(base / 'build' / 'out' / 'log.txt', 'started\n')
        await fs.append(base / 'build' / 'out' / 'log.txt', 'done\n')

        root = await fs.tree(base / 'build')

        assert fs.files(root) == [base / 'build' / 'out' / 'log.txt']
        assert fs.directories(root) == [base / 'build' / 'out']
        assert await fs.read_text(base / 'build' / 'out' / 'log.txt') == 'started\ndone\n'
