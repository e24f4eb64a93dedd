"""
Kanban TUI application.

The app builds both screens once and hands them to the dispatcher, which
decides which one is shown.
"""

from __future__ import annotations

from textual.app import App

from kanban.config import AppConfig
from kanban.dispatcher import ScreenDispatcher
from kanban.views.board import BoardScreen
from kanban.views.form import FormScreen


class KanbanApp(App, inherit_bindings=False):
    """Terminal task board."""

    TITLE = "Kanban"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, config: AppConfig | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.app_config = config or AppConfig()
        self.board: BoardScreen | None = None
        self.form: FormScreen | None = None
        self.dispatcher: ScreenDispatcher | None = None

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.board = BoardScreen()
        self.form = FormScreen(self.app_config.form_status)
        self.dispatcher = ScreenDispatcher(self, self.board, self.form)
        self.dispatcher.start()


def run(config: AppConfig | None = None) -> int:
    """Run the TUI application and return its exit code."""
    app = KanbanApp(config)
    app.run()
    return app.return_code or 0
