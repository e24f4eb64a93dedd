"""Board screen: three task columns with one focused."""

from loguru import logger
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Static

from kanban.messages import Quit, SwitchToForm
from kanban.models import DIVISOR, Status, Task, seed_tasks
from kanban.widgets import SelectableList, TaskColumn


class BoardScreen(Screen, inherit_bindings=False):
    """Owns the three columns and the focus index.

    Every task sits in the column whose index equals its status; the only
    paths that move tasks are promote_selected and accept_created_task.
    Keys without a binding here go to the focused column's ``ListView``.
    """

    AUTO_FOCUS = None

    BINDINGS = [
        Binding("left,h", "previous_column", "Previous column", priority=True),
        Binding("right,l", "next_column", "Next column", priority=True),
        Binding("enter", "promote", "Advance", priority=True),
        Binding("n", "new_task", "New task", priority=True),
        Binding("q,ctrl+c", "quit", "Quit", priority=True),
    ]

    DEFAULT_CSS = """
    BoardScreen #loading {
        padding: 1 2;
    }

    BoardScreen #columns {
        height: 1fr;
        display: none;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.focused_column = Status.TODO
        self.columns = [TaskColumn(status, id=f"column-{status.name.lower()}") for status in Status]
        self.lists: list[SelectableList] = list(self.columns)
        self.loaded = False
        self.quitting = False
        self.column_width: int | None = None
        self.column_height: int | None = None

    def compose(self) -> ComposeResult:
        yield Static("Loading ...", id="loading")
        with Horizontal(id="columns"):
            yield from self.columns
        yield Footer()

    async def on_mount(self) -> None:
        await self.handle_resize(self.app.size.width, self.app.size.height)

    async def on_resize(self, event: events.Resize) -> None:
        await self.handle_resize(event.size.width, event.size.height)

    # -------------------- operations --------------------

    async def handle_resize(self, width: int, height: int) -> None:
        """Reseed the columns for a new terminal size.

        Columns are reseeded with the sample tasks on every call, so moves
        made since the previous resize are lost. Column boxes are sized by
        the first call only; each list fills its column's content area.
        """
        for status, column in zip(Status, self.lists):
            await column.set_items(seed_tasks(status))

        if not self.loaded:
            self.column_width = width // DIVISOR
            self.column_height = height - DIVISOR
            for column in self.columns:
                column.styles.width = self.column_width
                column.styles.height = self.column_height
            self.query_one("#loading").display = False
            self.query_one("#columns").display = True
            self.loaded = True
            self._show_focus()
        logger.debug("Board resized to {}x{}", width, height)

    def next_column(self) -> None:
        self.focused_column = self.focused_column.next()
        self._show_focus()

    def previous_column(self) -> None:
        self.focused_column = self.focused_column.previous()
        self._show_focus()

    def _show_focus(self) -> None:
        for column in self.columns:
            column.set_class(column.status == self.focused_column, "focused")
        if self.loaded:
            self.columns[self.focused_column].view.focus()
        logger.debug("Focus -> {}", self.focused_column.name)

    async def promote_selected(self) -> Task | None:
        """Advance the selected task and move it to the tail of its new column.

        Returns the moved task, or None when the focused column has no
        selection.
        """
        column = self.lists[self.focused_column]
        index = column.current_index()
        if index < 0:
            return None

        task = await column.remove_item(index)
        task.advance()
        destination = self.lists[task.status]
        await destination.insert_item(len(destination.items()), task)
        logger.info("Moved '{}' to {}", task.title, task.status.name)
        return task

    async def accept_created_task(self, task: Task) -> None:
        destination = self.lists[task.status]
        await destination.insert_item(len(destination.items()), task)
        logger.info("Added '{}' to {}", task.title, task.status.name)

    # -------------------- actions --------------------

    def action_previous_column(self) -> None:
        self.previous_column()

    def action_next_column(self) -> None:
        self.next_column()

    async def action_promote(self) -> None:
        await self.promote_selected()

    async def action_new_task(self) -> None:
        await self.app.dispatcher.request(SwitchToForm("n"))

    async def action_quit(self) -> None:
        """Quit the application."""
        self.quitting = True
        self.query_one("#loading").display = False
        self.query_one("#columns").display = False
        await self.app.dispatcher.request(Quit())
