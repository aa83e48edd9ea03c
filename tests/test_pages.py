from datetime import datetime

import pytest

from taskboard.pages import index_page, render_task_board, render_task_card
from taskboard.task import Task


def make_task(title="Write docs", priority=3, completed=False, description="Some text"):
    task = Task(title, description, datetime(2025, 1, 15), priority)
    task.completed = completed
    return task


def test_card_shows_task_fields():
    task = make_task(priority=2)
    card = render_task_card(task, "regular")
    assert card.startswith('<div class="task-card regular-task">')
    assert "<h4>Write docs</h4>" in card
    assert '<span class="priority priority-2">P2</span>' in card
    assert '<p class="task-description">Some text</p>' in card
    assert "📅 2025-01-15" in card


def test_pending_card_has_complete_and_delete_buttons():
    task = make_task()
    card = render_task_card(task, "urgent")
    expected_vals = "hx-vals='{\"id\":%d}'" % task.id
    assert 'class="task-card urgent-task"' in card
    assert expected_vals in card
    assert 'hx-post="/complete-task"' in card
    assert 'hx-post="/delete-task"' in card
    assert 'class="status pending"' in card
    assert "⏳ Active" in card


def test_completed_card_has_no_complete_button():
    task = make_task(completed=True)
    card = render_task_card(task, "regular")
    assert 'hx-post="/complete-task"' not in card
    assert 'hx-post="/delete-task"' in card
    assert 'class="status completed"' in card
    assert "✅ Done" in card


def test_card_escapes_markup():
    task = make_task(title="<b>bold</b>", description="a & b")
    card = render_task_card(task, "regular")
    assert "<b>bold</b>" not in card
    assert "&lt;b&gt;bold&lt;/b&gt;" in card
    assert "a &amp; b" in card


def test_card_rejects_unknown_kind():
    with pytest.raises(ValueError):
        render_task_card(make_task(), "someday")


def test_empty_board():
    board = render_task_board([], [])
    assert board.startswith('<div id="task-list" class="kanban-board">')
    assert "No urgent tasks" in board
    assert "No regular tasks" in board
    assert 'class="no-tasks"' in board
    assert board.count('<span class="task-count">0 tasks</span>') == 2


def test_board_with_tasks_lists_each_in_its_column():
    regular = [make_task("Alpha"), make_task("Beta")]
    urgent = [make_task("Gamma", priority=5)]
    board = render_task_board(regular, urgent)
    assert 'class="no-tasks"' not in board
    assert "No urgent tasks" not in board
    assert "No regular tasks" not in board
    assert '<span class="task-count">2 tasks</span>' in board
    assert '<span class="task-count">1 tasks</span>' in board
    urgent_column = board.index("urgent-column")
    regular_column = board.index("regular-column")
    assert urgent_column < board.index("<h4>Gamma</h4>") < regular_column
    assert regular_column < board.index("<h4>Alpha</h4>") < board.index("<h4>Beta</h4>")


def test_board_contains_every_card():
    regular = [make_task("One")]
    urgent = [make_task("Two", priority=4)]
    board = render_task_board(regular, urgent)
    assert render_task_card(regular[0], "regular") in board
    assert render_task_card(urgent[0], "urgent") in board


def test_only_one_column_empty():
    board = render_task_board([make_task("Solo")], [])
    assert "No urgent tasks" in board
    assert "No regular tasks" not in board
    assert 'class="no-tasks"' not in board


def test_index_page_has_form_and_controls():
    page = index_page()
    assert page.startswith("<!DOCTYPE html>")
    assert page.rstrip().endswith("</html>")
    assert 'hx-post="/add-task"' in page
    for name in ("title", "description", "dueDate", "priority", "isUrgent"):
        assert 'name="%s"' % name in page
    for key in ("priority", "dueDate", "title"):
        assert '{"sortBy":"%s"}' % key in page
    assert 'hx-get="/tasks"' in page
    assert 'hx-trigger="load"' in page


def test_index_page_priority_options():
    page = index_page()
    for value in range(1, 6):
        assert '<option value="%d"' % value in page
    assert '<option value="3" selected>3 - Medium</option>' in page
    assert page.count(" selected>") == 1