"""Tests for widgets.py - the ListView, Input and TextArea adapters."""

from textual.pilot import Pilot

from conftest import run_app, titles
from kanban.app import KanbanApp
from kanban.models import Status, Task


class TestTaskColumn:
    """Tests for the SelectableList adapter."""

    def test_items_mirror_list_view(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.TODO]
            assert len(column.view) == len(column.items()) == 3

        run_app(scenario)

    def test_selection_follows_cursor(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.TODO]
            assert column.selected_item().title == "buy milk"
            await pilot.press("down")
            await pilot.pause()
            assert column.current_index() == 1
            assert column.selected_item().title == "eat sushi"

        run_app(scenario)

    def test_selection_is_the_item_at_current_index(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.IN_PROGRESS]
            await pilot.press("right", "down", "down")
            await pilot.pause()
            assert column.current_index() == 2
            assert column.selected_item() is column.items()[2]

        run_app(scenario)

    def test_remove_returns_item_and_keeps_selection_in_range(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.TODO]
            await pilot.press("down", "down")
            await pilot.pause()

            removed = await column.remove_item(2)

            assert removed.title == "cleaning"
            assert titles(column) == ["buy milk", "eat sushi"]
            assert column.current_index() == 1
            assert column.selected_item().title == "eat sushi"

        run_app(scenario)

    def test_empty_column_has_no_selection(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.DONE]
            while column.items():
                await column.remove_item(0)
            assert column.selected_item() is None
            assert column.current_index() == -1

        run_app(scenario)

    def test_insert_into_empty_column_selects_it(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.DONE]
            await column.set_items([])
            task = Task(Status.DONE, "ship it")

            await column.insert_item(0, task)

            assert column.items() == [task]
            assert column.selected_item() is task

        run_app(scenario)

    def test_insert_in_the_middle(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.TODO]
            await column.insert_item(1, Task(Status.TODO, "call mum"))
            assert titles(column) == ["buy milk", "call mum", "eat sushi", "cleaning"]
            assert column.selected_item().title == "buy milk"

        run_app(scenario)

    def test_set_items_resets_selection(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            column = app.board.columns[Status.TODO]
            await pilot.press("down", "down")
            await pilot.pause()
            await column.set_items([Task(Status.TODO, "a"), Task(Status.TODO, "b")])
            assert titles(column) == ["a", "b"]
            assert column.current_index() == 0

        run_app(scenario)


class TestTextFields:
    """Tests for the TextEntry adapters."""

    def test_title_field_reads_input(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            await pilot.press("n")
            await pilot.pause()
            await pilot.press("a", "space", "b")
            await pilot.pause()
            form = app.form
            assert form.title_field.value == "a b"
            assert form.title_field.focused
            assert not form.description_field.focused

        run_app(scenario)

    def test_description_field_reads_text_area(self) -> None:
        async def scenario(app: KanbanApp, pilot: Pilot) -> None:
            await pilot.press("n")
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            await pilot.press("x", "y")
            await pilot.pause()
            form = app.form
            assert form.description_field.value == "xy"
            assert form.description_field.focused
            assert not form.title_field.focused

        run_app(scenario)
