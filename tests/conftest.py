"""
Pytest configuration and shared fixtures.

Provides sample strings, temporary files and an isolated settings directory.
"""

from unittest.mock import patch

import pytest

from cellfit.config.settings import SettingsManager

# ===== Sample Text =====

RED = "\x1b[31m"
RESET = "\x1b[0m"


@pytest.fixture
def styled_word():
    """A color-escaped word whose visible width is 5."""
    return f"{RED}hello{RESET}"


@pytest.fixture
def long_path():
    """An absolute path wider than typical list columns."""
    return "/home/user/documents/file.txt"


# ===== File Fixtures =====


@pytest.fixture
def text_file(tmp_path):
    """Create a small UTF-8 text file."""
    path = tmp_path / "notes.txt"
    path.write_text("hello world\n\tindented\n", encoding="utf-8")
    return path


@pytest.fixture
def binary_file(tmp_path):
    """Create a file with NUL bytes in its head."""
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x00\x01\x02\x03" * 64)
    return path


@pytest.fixture
def empty_file(tmp_path):
    """Create a zero-length file."""
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    return path


# ===== Settings Fixtures =====


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def isolated_config(temp_config_dir):
    """Point every SettingsManager at the temporary config directory."""
    with patch(
        "cellfit.config.settings.user_config_dir", return_value=str(temp_config_dir)
    ):
        yield temp_config_dir


@pytest.fixture
def settings_manager(isolated_config):
    """Create settings manager with temporary config directory."""
    return SettingsManager()
