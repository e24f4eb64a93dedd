"""
Collection and text-entry widgets used by the screens.

The screens depend on two narrow contracts, ``SelectableList`` and
``TextEntry``. Both are satisfied by thin adapters over Textual widgets:
``TaskColumn`` wraps a ``ListView`` and ``InputField``/``AreaField`` wrap
``Input`` and ``TextArea``. Cursor movement, scrolling and line editing
belong to those widgets; keys the screens do not bind reach them through
Textual's normal focus routing.
"""

from typing import Protocol

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Input, Label, ListItem, ListView, TextArea

from kanban.models import Status, Task


class SelectableList(Protocol):
    """An ordered task collection with one optional selection."""

    async def set_items(self, items: list[Task]) -> None: ...

    def items(self) -> list[Task]: ...

    async def insert_item(self, index: int, item: Task) -> None: ...

    async def remove_item(self, index: int) -> Task: ...

    def selected_item(self) -> Task | None: ...

    def current_index(self) -> int: ...


class TextEntry(Protocol):
    """A focusable text buffer."""

    widget: Widget

    def focus(self) -> None: ...

    def blur(self) -> None: ...

    @property
    def focused(self) -> bool: ...

    @property
    def value(self) -> str: ...


class TaskItem(ListItem):
    """One task: title on the first line, description on the second."""

    DEFAULT_CSS = """
    TaskItem Label {
        height: 1;
    }

    TaskItem .task-description {
        color: $text-muted;
    }
    """

    def __init__(self, record: Task, **kwargs) -> None:
        super().__init__(
            Label(record.title, classes="task-title"),
            Label(record.description, classes="task-description"),
            **kwargs,
        )
        self.record = record


class TaskColumn(Vertical):
    """A titled column backed by a ``ListView`` of ``TaskItem`` rows."""

    DEFAULT_CSS = """
    TaskColumn {
        border: blank;
        padding: 1 2;
    }

    TaskColumn.focused {
        border: round #5f5fd7;
    }

    TaskColumn .column-title {
        background: #25A065;
        color: #FFFDF5;
        text-style: bold;
        padding: 0 1;
        margin-bottom: 1;
    }

    TaskColumn ListView {
        height: 1fr;
        background: transparent;
    }
    """

    def __init__(self, status: Status, **kwargs) -> None:
        super().__init__(**kwargs)
        self.status = status
        self.view = ListView()

    def compose(self) -> ComposeResult:
        yield Label(self.status.title, classes="column-title")
        yield self.view

    async def set_items(self, items: list[Task]) -> None:
        await self.view.clear()
        await self.view.extend(TaskItem(item) for item in items)
        self.view.index = 0 if items else None

    def items(self) -> list[Task]:
        return [child.record for child in self.view.children if isinstance(child, TaskItem)]

    async def insert_item(self, index: int, item: Task) -> None:
        if index >= len(self.view):
            await self.view.append(TaskItem(item))
        else:
            await self.view.insert(index, [TaskItem(item)])
        if self.view.index is None:
            self.view.index = 0

    async def remove_item(self, index: int) -> Task:
        item = self.items()[index]
        await self.view.pop(index)
        remaining = len(self.view)
        if remaining == 0:
            self.view.index = None
        elif self.view.index is None or self.view.index >= remaining:
            self.view.index = remaining - 1
        return item

    def selected_item(self) -> Task | None:
        child = self.view.highlighted_child
        return child.record if isinstance(child, TaskItem) else None

    def current_index(self) -> int:
        """Position of the selection in the collection, or -1 when empty."""
        if self.view.index is None or not len(self.view):
            return -1
        return self.view.index


class InputField:
    """TextEntry over a single-line ``Input``."""

    def __init__(self, widget: Input) -> None:
        self.widget = widget

    def focus(self) -> None:
        self.widget.focus()

    def blur(self) -> None:
        self.widget.blur()

    @property
    def focused(self) -> bool:
        return self.widget.has_focus

    @property
    def value(self) -> str:
        return self.widget.value


class AreaField:
    """TextEntry over a multi-line ``TextArea``."""

    def __init__(self, widget: TextArea) -> None:
        self.widget = widget

    def focus(self) -> None:
        self.widget.focus()

    def blur(self) -> None:
        self.widget.blur()

    @property
    def focused(self) -> bool:
        return self.widget.has_focus

    @property
    def value(self) -> str:
        return self.widget.text
