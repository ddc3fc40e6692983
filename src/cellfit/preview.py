"""
cellfit preview - directory listing and file preview in the terminal.

Every string that reaches the screen goes through the shaping engine first:
names are truncated to the list column, the current path keeps its tail,
and file bodies are sanitized and clamped to the preview pane.
"""

import os
from dataclasses import replace
from datetime import datetime
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Static

from .cli.runner import render_file_preview
from .config.constants import EMPTY_DIRECTORY_NOTICE, MIN_PANEL_WIDTH
from .config.settings import SettingsManager
from .shaping import cell_width, clip_cells, format_size, truncate_end, truncate_start
from .utils import (
    file_name_without_extension,
    is_extension_extractable,
    truncate_path_intelligently,
)

SELECTED_PREFIX = "> "
UNSELECTED_PREFIX = "  "


class PreviewApp(App):
    """cellfit - browse a directory and preview files"""

    CSS = """
    Screen {
        background: $surface;
    }

    #path_label {
        height: 1;
        padding: 0 1;
        color: $accent;
    }

    #panes {
        height: 1fr;
    }

    .panel {
        border: solid $primary;
        border-title-color: $accent;
        border-title-style: bold;
        height: 100%;
        padding: 0 1;
    }

    #file_list {
        width: 2fr;
    }

    #preview {
        width: 3fr;
    }

    #status {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("j,down", "cursor_down", "Down"),
        Binding("k,up", "cursor_up", "Up"),
        Binding("enter,l", "open", "Open"),
        Binding("backspace,h", "parent", "Parent"),
        Binding("period", "toggle_hidden", "Hidden"),
        Binding("s", "toggle_units", "SI/IEC"),
        Binding("r", "recent", "Recent"),
    ]

    TITLE = "cellfit - Terminal Preview"

    def __init__(self, start_dir: str | os.PathLike = "."):
        super().__init__()

        self.settings_manager = SettingsManager()
        self.settings = self.settings_manager.load()
        self.current_dir = Path(start_dir).expanduser().resolve()
        self.entries: list[Path] = []
        self.selected = 0
        self.log_messages = []
        self._recent_index = 0
        self._resize_timer = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        yield Static(id="path_label")
        with Horizontal(id="panes"):
            file_list = Static(id="file_list", classes="panel")
            file_list.border_title = "Files"
            yield file_list
            preview = Static(id="preview", classes="panel")
            preview.border_title = "Preview"
            yield preview
        yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app starts."""
        self._load_entries()
        self.call_after_refresh(self._render_all)

    def on_unmount(self) -> None:
        """Persist settings and remember the last directory."""
        self.settings_manager.add_recent_path(str(self.current_dir))
        self.settings_manager.save(self.settings)

    def log_message(self, message: str, level: str = "info"):
        """Record a message and show it on the status line."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        icons = {"info": "i", "error": "x", "debug": "."}
        formatted = f"{timestamp} {icons.get(level, '.')} {message}"
        self.log_messages.append({"level": level, "formatted": formatted})

        status = self.query_one("#status", Static)
        status.update(Text(truncate_end(formatted, self._width_of(status))))

    def _width_of(self, widget: Static) -> int:
        """Usable content width of a widget, before layout uses settings."""
        width = widget.content_size.width
        if width < MIN_PANEL_WIDTH:
            return self.settings.name_width
        return width

    def _load_entries(self) -> None:
        """Read the current directory, directories first."""
        try:
            children = list(self.current_dir.iterdir())
        except OSError as e:
            self.entries = []
            self.log_message(f"Cannot list {self.current_dir}: {e}", "error")
            return

        if not self.settings.show_hidden:
            children = [p for p in children if not p.name.startswith(".")]
        self.entries = sorted(
            children, key=lambda p: (not p.is_dir(), p.name.lower())
        )
        self.selected = min(self.selected, max(len(self.entries) - 1, 0))

    def _format_entry(self, entry: Path, width: int, is_selected: bool) -> str:
        """One list row: selection prefix, truncated name, right-aligned size."""
        prefix = SELECTED_PREFIX if is_selected else UNSELECTED_PREFIX
        name = entry.name + ("/" if entry.is_dir() else "")

        if entry.is_dir():
            size = ""
        else:
            try:
                size = format_size(
                    entry.stat().st_size, self.settings.file_size_use_si
                )
            except OSError:
                size = "?"
            if is_extension_extractable(entry.suffix):
                size = "[a] " + size

        name_budget = width - cell_width(prefix) - cell_width(size) - 1
        name = truncate_end(name, max(name_budget, 1), self.settings.truncation_marker)
        padding = " " * max(width - cell_width(prefix + name) - cell_width(size), 1)
        return clip_cells(prefix + name + padding + size, width)

    def _render_all(self) -> None:
        """Redraw path label, file list and preview."""
        self._render_path()
        self._render_list()
        self._render_preview()

    def _render_path(self) -> None:
        label = self.query_one("#path_label", Static)
        label.update(
            Text(
                truncate_start(
                    str(self.current_dir),
                    self._width_of(label),
                    self.settings.truncation_marker,
                )
            )
        )

    def _render_list(self) -> None:
        file_list = self.query_one("#file_list", Static)
        width = self._width_of(file_list)
        rows = [
            self._format_entry(entry, width, i == self.selected)
            for i, entry in enumerate(self.entries)
        ]
        file_list.update(Text("\n".join(rows) if rows else EMPTY_DIRECTORY_NOTICE))

    def _render_preview(self) -> None:
        preview = self.query_one("#preview", Static)
        if not self.entries:
            preview.update("")
            return

        entry = self.entries[self.selected]
        settings = replace(self.settings, preview_width=self._width_of(preview))
        preview.border_title = truncate_end(
            f"Preview: {file_name_without_extension(entry.name)}",
            settings.preview_width,
            settings.truncation_marker,
        )
        try:
            if entry.is_dir():
                names = sorted(p.name for p in entry.iterdir())
                body = "\n".join(names) if names else EMPTY_DIRECTORY_NOTICE
                content = Text(
                    "\n".join(
                        truncate_end(
                            line,
                            settings.preview_width,
                            settings.truncation_marker,
                        )
                        for line in body.split("\n")
                    )
                )
            else:
                content = Text.from_ansi(render_file_preview(entry, settings))
        except OSError as e:
            content = Text(truncate_end(f"Error: {e}", settings.preview_width))
            shown = truncate_path_intelligently(
                str(entry), settings.name_width, settings.truncation_marker
            )
            self.log_message(f"Preview failed for {shown}: {e}", "error")

        preview.update(content)

    def action_cursor_down(self) -> None:
        if self.selected < len(self.entries) - 1:
            self.selected += 1
            self._render_list()
            self._render_preview()

    def action_cursor_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1
            self._render_list()
            self._render_preview()

    def action_open(self) -> None:
        if not self.entries:
            return
        entry = self.entries[self.selected]
        if entry.is_dir():
            self.current_dir = entry
            self.selected = 0
            self._load_entries()
            self._render_all()

    def action_parent(self) -> None:
        parent = self.current_dir.parent
        if parent != self.current_dir:
            previous = self.current_dir
            self.current_dir = parent
            self._load_entries()
            if previous in self.entries:
                self.selected = self.entries.index(previous)
            self._render_all()

    def action_toggle_hidden(self) -> None:
        self.settings.show_hidden = not self.settings.show_hidden
        self._load_entries()
        self._render_all()

    def action_toggle_units(self) -> None:
        self.settings.file_size_use_si = not self.settings.file_size_use_si
        units = "SI" if self.settings.file_size_use_si else "IEC"
        self.log_message(f"Size units: {units}")
        self._render_list()

    def action_recent(self) -> None:
        """Jump to the next remembered directory."""
        options = [
            (path, label)
            for path, label in self.settings_manager.get_recent_path_options()
            if Path(path) != self.current_dir and Path(path).is_dir()
        ]
        if not options:
            self.log_message("No recent directories")
            return

        path, label = options[self._recent_index % len(options)]
        self._recent_index += 1
        self.current_dir = Path(path)
        self.selected = 0
        self._load_entries()
        self._render_all()
        self.log_message(f"Recent: {label}")

    def on_resize(self, event) -> None:
        """Handle window resize - reshape everything to the new widths."""
        if self._resize_timer is not None:
            self._resize_timer.stop()
        # Debounce: redraw only after 100ms of no resize events
        self._resize_timer = self.set_timer(0.1, self._render_all)


def run_gui(start_dir: str | os.PathLike = ".") -> None:
    """Run the preview UI."""
    app = PreviewApp(start_dir)
    app.run()
