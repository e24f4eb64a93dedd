"""
Screen dispatcher.

Owns the board and the form, keeps track of which one is active, and
applies the switch requests they hand over. Both screens are installed
once, so the inactive one keeps its state while the other is shown.
"""

from enum import Enum

from loguru import logger
from textual.app import App
from textual.screen import Screen

from kanban.messages import Quit, Request, SwitchToBoard, SwitchToForm
from kanban.views.board import BoardScreen
from kanban.views.form import FormScreen


class ActiveScreen(Enum):
    BOARD = "board"
    FORM = "form"


class ScreenDispatcher:
    """Switches between the board and the form and performs hand-offs."""

    def __init__(self, app: App, board: BoardScreen, form: FormScreen) -> None:
        self.app = app
        self.board = board
        self.form = form
        self.active = ActiveScreen.BOARD
        self.finished = False

    @property
    def screen(self) -> Screen:
        if self.active is ActiveScreen.FORM:
            return self.form
        return self.board

    def start(self) -> None:
        self.app.install_screen(self.board, ActiveScreen.BOARD.value)
        self.app.install_screen(self.form, ActiveScreen.FORM.value)
        self.app.push_screen(ActiveScreen.BOARD.value)

    async def request(self, request: Request) -> None:
        """Apply a request handed over by the active screen."""
        if self.finished:
            return

        if isinstance(request, Quit):
            logger.info("Quit requested from {} screen", self.active.value)
            self.finished = True
            self.app.exit(return_code=0)
        elif isinstance(request, SwitchToForm):
            logger.info("Switching to form")
            self.active = ActiveScreen.FORM
            self.app.push_screen(ActiveScreen.FORM.value)
            self.form.handoff(request.trigger)
        elif isinstance(request, SwitchToBoard):
            logger.info("Switching to board")
            self.active = ActiveScreen.BOARD
            self.app.pop_screen()
            # The new task lands before the board handles another key.
            await self.board.accept_created_task(request.task)
