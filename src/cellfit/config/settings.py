"""
Configuration management with XDG-compliant persistent settings.

Provides cross-platform configuration storage following OS conventions:
- Linux/Unix: XDG_CONFIG_HOME (~/.config/cellfit/)
- macOS: ~/Library/Application Support/cellfit/
- Windows: %APPDATA%/cellfit/
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .constants import (
    DEFAULT_NAME_WIDTH,
    DEFAULT_PREVIEW_WIDTH,
    DEFAULT_TAB_WIDTH,
    DEFAULT_TRUNCATION_MARKER,
    MAX_RECENT_PATHS,
    SAMPLE_SIZE_BYTES,
)


@dataclass
class ShapeSettings:
    """Shaping preferences that persist across sessions."""

    # Size humanizer
    file_size_use_si: bool = False

    # Truncation
    truncation_marker: str = DEFAULT_TRUNCATION_MARKER
    name_width: int = DEFAULT_NAME_WIDTH

    # Preview
    preview_width: int = DEFAULT_PREVIEW_WIDTH
    tab_width: int = DEFAULT_TAB_WIDTH
    sample_size: int = SAMPLE_SIZE_BYTES
    show_hidden: bool = False

    # History
    recent_paths: list[str] = None

    def __post_init__(self):
        """Initialize mutable defaults."""
        if self.recent_paths is None:
            self.recent_paths = []


class SettingsManager:
    """Manages shaping settings with automatic persistence."""

    APP_NAME = "cellfit"
    CONFIG_FILE = "settings.json"

    MAX_RECENT_PATHS = MAX_RECENT_PATHS

    def __init__(self):
        """Initialize settings manager."""
        self.config_dir = Path(user_config_dir(self.APP_NAME))
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.settings = ShapeSettings()

    def load(self) -> ShapeSettings:
        """
        Load settings from disk.

        Returns:
            Loaded settings (or defaults if file doesn't exist)
        """
        if not self.config_file.exists():
            return self.settings

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)

            self.settings = ShapeSettings(**data)
            self._trim_recent_paths()
            return self.settings

        except (json.JSONDecodeError, TypeError, ValueError):
            # If config is corrupted, start fresh with defaults
            self.settings = ShapeSettings()
            return self.settings

    def save(self, settings: ShapeSettings | None = None) -> None:
        """
        Save settings to disk.

        Args:
            settings: Settings to save (uses current if None)
        """
        if settings is not None:
            self.settings = settings

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._trim_recent_paths()

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(asdict(self.settings), f, indent=2)

    def _trim_recent_paths(self) -> None:
        """Limit the recent path history to its maximum size."""
        if len(self.settings.recent_paths) > self.MAX_RECENT_PATHS:
            self.settings.recent_paths = self.settings.recent_paths[
                : self.MAX_RECENT_PATHS
            ]

    def add_recent_path(self, path: str) -> None:
        """
        Add a path to history (most recent first).

        Args:
            path: Directory or file path to add
        """
        if not path or not path.strip():
            return

        path = path.strip()

        if path in self.settings.recent_paths:
            self.settings.recent_paths.remove(path)

        self.settings.recent_paths.insert(0, path)
        self._trim_recent_paths()

    def get_recent_path_options(self) -> list[tuple[str, str]]:
        """
        Get recent paths as (value, label) pairs.

        Labels are the path truncated from the start so the final
        segment stays visible.

        Returns:
            List of (path, display_label) tuples
        """
        from ..shaping import truncate_start

        return [
            (
                path,
                truncate_start(
                    path, self.settings.name_width, self.settings.truncation_marker
                ),
            )
            for path in self.settings.recent_paths
        ]
