"""Tests for FSConfig."""
import logging

from fstree import FSConfig


class TestFSConfig:
    """Test suite for FSConfig."""

    def test_defaults(self):
        """Test default values."""
        config = FSConfig.default()

        assert config.encoding == 'utf-8'
        assert config.errors == 'strict'
        assert config.log_level is None

    def test_verbose(self):
        """Test verbose factory."""
        config = FSConfig.verbose(encoding='ascii')

        assert config.log_level == logging.DEBUG
        assert config.encoding == 'ascii'

    def test_codec(self):
        """Test codec pair."""
        config = FSConfig(encoding='latin-1', errors='replace')

        assert config.codec() == ('latin-1', 'replace')
