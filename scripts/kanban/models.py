"""
Task model for the board.

A task's status doubles as the index of the column that holds it.
"""

from dataclasses import dataclass
from enum import IntEnum

# Columns take a quarter of the terminal width each.
DIVISOR = 4


class Status(IntEnum):
    """Column index and task status in one."""

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2

    @property
    def title(self) -> str:
        return COLUMN_TITLES[self]

    def next(self) -> "Status":
        """Cyclic successor: todo -> in progress -> done -> todo."""
        return Status((self + 1) % len(Status))

    def previous(self) -> "Status":
        return Status((self - 1) % len(Status))


COLUMN_TITLES = {
    Status.TODO: "To Do",
    Status.IN_PROGRESS: "In progress",
    Status.DONE: "Done",
}


@dataclass
class Task:
    """A single card on the board."""

    status: Status
    title: str
    description: str = ""

    def advance(self) -> None:
        """Move the status one step along the cycle. Relocation is up to the caller."""
        self.status = self.status.next()


SEED_TASKS: dict[Status, tuple[tuple[str, str], ...]] = {
    Status.TODO: (
        ("buy milk", "strawbery milk"),
        ("eat sushi", "miso soup"),
        ("cleaning", "do laundry"),
    ),
    Status.IN_PROGRESS: (("write code", "finish the kanban project"),) * 3,
    Status.DONE: (("learn algebra", "repeat finite fields"),) * 3,
}


def seed_tasks(status: Status) -> list[Task]:
    """Fresh copies of the sample tasks for one column."""
    return [Task(status, title, description) for title, description in SEED_TASKS[status]]
