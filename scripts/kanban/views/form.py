"""Form screen: collect a title, then a description, then emit a task."""

from enum import Enum

from loguru import logger
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Footer, Input, Label, TextArea

from kanban.messages import Quit, SwitchToBoard
from kanban.models import Status, Task
from kanban.widgets import AreaField, InputField, TextEntry


class FormPhase(Enum):
    TITLE = "title"
    DESCRIPTION = "description"


class FormScreen(Screen, inherit_bindings=False):
    """Two-step entry form.

    Enter on the title moves focus to the description; enter on the
    description emits the task and hands control back to the board.
    Buffers are kept between visits.
    """

    AUTO_FOCUS = None

    BINDINGS = [
        Binding("enter", "submit", "Next / save", priority=True),
        Binding("q,ctrl+c", "quit", "Quit", priority=True),
    ]

    DEFAULT_CSS = """
    FormScreen {
        padding: 1 2;
    }

    FormScreen .heading {
        text-style: bold;
        margin-bottom: 1;
    }

    FormScreen #title {
        margin-bottom: 1;
    }

    FormScreen #description {
        height: 1fr;
    }
    """

    def __init__(self, target_status: Status = Status.TODO, **kwargs) -> None:
        super().__init__(**kwargs)
        self.target_status = target_status
        self.phase = FormPhase.TITLE
        self.title_field: TextEntry = InputField(Input(placeholder="Title", id="title"))
        self.description_field: TextEntry = AreaField(TextArea(id="description", tab_behavior="indent"))

    def compose(self) -> ComposeResult:
        yield Label(f"New task ({self.target_status.title})", classes="heading")
        yield self.title_field.widget
        yield self.description_field.widget
        yield Footer()

    def on_mount(self) -> None:
        self.description_field.blur()
        self.title_field.focus()

    def handoff(self, trigger: str) -> None:
        """Receive the key that opened the form.

        The trigger is consumed here rather than passed to the title
        field, otherwise the ``n`` that opened the form would be typed in
        as the first character of the title.
        """
        logger.debug("Form opened by {!r}", trigger)

    def create_task(self) -> Task:
        return Task(self.target_status, self.title_field.value, self.description_field.value)

    async def action_submit(self) -> None:
        if self.phase is FormPhase.TITLE:
            self.title_field.blur()
            self.description_field.focus()
            self.phase = FormPhase.DESCRIPTION
            return

        task = self.create_task()
        logger.info("Created task '{}'", task.title)
        await self.app.dispatcher.request(SwitchToBoard(task))

    async def action_quit(self) -> None:
        """Quit the application."""
        await self.app.dispatcher.request(Quit())
