"""Shared helpers for the board tests."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

from textual.pilot import Pilot

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from kanban.app import KanbanApp  # noqa: E402
from kanban.config import AppConfig  # noqa: E402
from kanban.models import Status, Task  # noqa: E402
from kanban.views.board import BoardScreen  # noqa: E402

Scenario = Callable[[KanbanApp, Pilot], Awaitable[None]]


def run_app(scenario: Scenario, size: tuple[int, int] = (120, 40), config: AppConfig | None = None) -> KanbanApp:
    """Run ``scenario(app, pilot)`` against a headless app that has loaded its board."""

    async def main() -> KanbanApp:
        app = KanbanApp(config)
        async with app.run_test(size=size) as pilot:
            await pilot.pause()
            await scenario(app, pilot)
        return app

    return asyncio.run(main())


def titles(column) -> list[str]:
    return [t.title for t in column.items()]


def assert_board_consistent(board: BoardScreen) -> None:
    """Every task sits in exactly one column, the one matching its status."""
    seen: list[Task] = []
    for status, column in zip(Status, board.lists):
        for task in column.items():
            assert task.status == status
            assert not any(task is other for other in seen)
            seen.append(task)
