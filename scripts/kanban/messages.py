"""
Requests the screens hand to the dispatcher.

Screens never switch themselves; they describe the switch and the
dispatcher performs it.
"""

from dataclasses import dataclass
from typing import Union

from kanban.models import Task


@dataclass(frozen=True)
class Quit:
    """Stop reading events and exit cleanly."""


@dataclass(frozen=True)
class SwitchToForm:
    """Open the form. ``trigger`` is the key that asked for it."""

    trigger: str


@dataclass(frozen=True)
class SwitchToBoard:
    task: Task


Request = Union[Quit, SwitchToForm, SwitchToBoard]
