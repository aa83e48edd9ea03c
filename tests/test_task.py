import io
import json
from datetime import datetime

from taskboard.task import Task


def make(title="Complete Report", priority=2, due=None):
    return Task(title, "Write quarterly report", due or datetime(2025, 1, 15), priority)


def test_ids_increase_by_one():
    first = make()
    second = make()
    assert second.id == first.id + 1


def test_new_task_is_pending():
    task = make()
    assert task.completed is False


def test_due_date_string_format():
    task = make(due=datetime(2025, 1, 15, 13, 45))
    assert task.due_date_string() == "2025-01-15"


def test_to_json_round_trip():
    task = make(priority=3)
    data = json.loads(task.to_json())
    assert data == {
        "id": task.id,
        "title": "Complete Report",
        "description": "Write quarterly report",
        "completed": False,
        "dueDate": "2025-01-15",
        "priority": 3,
    }


def test_to_json_key_order_and_compact():
    task = make()
    text = task.to_json()
    assert text.startswith('{"id":')
    assert text.index('"title"') < text.index('"description"') < text.index('"completed"')
    assert text.index('"dueDate"') < text.index('"priority"')
    assert " " not in text.replace("Complete Report", "").replace("Write quarterly report", "")


def test_to_json_reflects_completion():
    task = make()
    task.completed = True
    assert json.loads(task.to_json())["completed"] is True


def test_describe_contents():
    due = datetime(2025, 1, 15)
    task = make(due=due)
    lines = task.describe().splitlines()
    assert lines[0] == f"ID: {task.id}"
    assert lines[1] == "Title: Complete Report"
    assert lines[2] == "Description: Write quarterly report"
    assert lines[3] == "Status: Pending"
    assert lines[4] == f"Due Date: {due.ctime()}"
    assert lines[5] == "Priority: 2"
    assert lines[6] == "------------------------"


def test_describe_completed_status():
    task = make()
    task.completed = True
    assert "Status: Completed\n" in task.describe()


def test_display_writes_description():
    task = make()
    buffer = io.StringIO()
    task.display(buffer)
    assert buffer.getvalue() == task.describe()


def test_fields_are_mutable():
    task = make()
    task.title = "Review Code"
    task.priority = 5
    data = json.loads(task.to_json())
    assert data["title"] == "Review Code"
    assert data["priority"] == 5