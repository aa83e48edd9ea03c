"""HTML fragments and the main page of the web task board."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from html import escape

from taskboard.task import Task

HTMX_SCRIPT = "https://unpkg.com/htmx.org@1.9.10"

_COLUMNS = {
    "urgent": ("🚨 Urgent Tasks", "(double-ended queue)", "No urgent tasks"),
    "regular": ("📝 Regular Tasks", "(list)", "No regular tasks"),
}

EMPTY_BOARD = (
    '<div class="no-tasks">🎯 Your Kanban board is empty! '
    "Add your first task above to get started.</div>"
)


def _action_button(path: str, task_id: int, css: str, label: str) -> str:
    return (
        f'<button hx-post="{path}" hx-vals=\'{{"id":{task_id}}}\' '
        f'hx-target="#task-list" class="action-btn {css}">{label}</button>'
    )


def render_task_card(task: Task, kind: str) -> str:
    """One task as a card; ``kind`` is "urgent" or "regular"."""
    if kind not in _COLUMNS:
        raise ValueError(f"unknown task kind: {kind!r}")
    status_class = "completed" if task.completed else "pending"
    status_text = "✅ Done" if task.completed else "⏳ Active"
    parts = [
        f'<div class="task-card {kind}-task">',
        '<div class="task-header">',
        f"<h4>{escape(task.title)}</h4>",
        f'<span class="priority priority-{task.priority}">P{task.priority}</span>',
        "</div>",
        f'<p class="task-description">{escape(task.description)}</p>',
        '<div class="task-meta">',
        f'<span class="due-date">📅 {task.due_date_string()}</span>',
        f'<span class="status {status_class}">{status_text}</span>',
        "</div>",
        '<div class="task-actions">',
    ]
    if not task.completed:
        parts.append(_action_button("/complete-task", task.id, "complete-btn", "✓ Complete"))
    parts.append(_action_button("/delete-task", task.id, "delete-btn", "🗑️ Delete"))
    parts.append("</div></div>")
    return "".join(parts)


def _render_column(kind: str, tasks: Sequence[Task]) -> str:
    heading, container, empty = _COLUMNS[kind]
    body = (
        "".join(render_task_card(task, kind) for task in tasks)
        if tasks
        else f'<div class="empty-column">{empty}</div>'
    )
    return (
        f'<div class="kanban-column {kind}-column">'
        f'<div class="column-header {kind}-header">'
        f"<h3>{heading}</h3>"
        f'<span class="container-type">{container}</span>'
        f'<span class="task-count">{len(tasks)} tasks</span>'
        "</div>"
        f'<div class="column-content">{body}</div></div>'
    )


def render_task_board(regular_tasks: Iterable[Task], urgent_tasks: Iterable[Task]) -> str:
    """The task list fragment: an urgent column followed by a regular column."""
    regular = list(regular_tasks)
    urgent = list(urgent_tasks)
    parts = [
        '<div id="task-list" class="kanban-board">',
        '<div class="kanban-columns">',
        _render_column("urgent", urgent),
        _render_column("regular", regular),
        "</div>",
    ]
    if not regular and not urgent:
        parts.append(EMPTY_BOARD)
    parts.append("</div>")
    return "".join(parts)


_STYLE = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: sans-serif; background: #6a5acd; padding: 20px; min-height: 100vh; }
.container { max-width: 1200px; margin: 0 auto; background: white; border-radius: 15px; overflow: hidden; }
.header { background: #2c3e50; color: white; padding: 30px; text-align: center; }
.header h1 { font-size: 2.4em; font-weight: 300; margin-bottom: 10px; }
.info { background: #f8f9fa; padding: 20px; margin: 20px; border-left: 4px solid #3498db; border-radius: 8px; }
.form-section { padding: 30px; }
.form-row { display: flex; gap: 15px; margin-bottom: 15px; flex-wrap: wrap; }
.form-group { flex: 1; min-width: 200px; }
label { display: block; margin-bottom: 5px; font-weight: 600; color: #2c3e50; }
input, textarea, select { width: 100%; padding: 12px; border: 2px solid #e0e0e0; border-radius: 8px; font-size: 16px; }
.btn { background: #3498db; color: white; padding: 12px 25px; border: none; border-radius: 8px;
       cursor: pointer; font-size: 16px; font-weight: 600; margin: 0 10px 10px 0; }
.sort-controls { background: #f8f9fa; padding: 20px; text-align: center; border-bottom: 1px solid #e0e0e0; }
.kanban-board { margin: 20px; }
.kanban-columns { display: flex; gap: 20px; align-items: flex-start; }
.kanban-column { flex: 1; background: #f8f9fa; border-radius: 12px; min-height: 400px; }
.urgent-column { border-top: 4px solid #e74c3c; }
.regular-column { border-top: 4px solid #3498db; }
.column-header { padding: 20px; background: white; text-align: center; border-bottom: 2px solid #ecf0f1; }
.container-type { display: block; font-size: 0.85em; color: #7f8c8d; font-style: italic; }
.task-count { display: inline-block; background: #ecf0f1; padding: 4px 12px; border-radius: 15px; font-size: 0.8em; }
.column-content { padding: 15px; max-height: 600px; overflow-y: auto; }
.task-card { background: white; margin-bottom: 15px; padding: 18px; border-radius: 10px; border-left: 4px solid transparent; }
.urgent-task { border-left-color: #e74c3c; }
.regular-task { border-left-color: #3498db; }
.task-header { display: flex; justify-content: space-between; margin-bottom: 12px; }
.priority { padding: 4px 8px; border-radius: 12px; font-size: 0.75em; font-weight: 700; color: white; }
.priority-1 { background: #95a5a6; }
.priority-2 { background: #3498db; }
.priority-3 { background: #f39c12; }
.priority-4 { background: #e67e22; }
.priority-5 { background: #e74c3c; }
.task-description { color: #5a6c7d; font-size: 0.9em; margin-bottom: 12px; }
.task-meta { display: flex; justify-content: space-between; flex-wrap: wrap; gap: 8px; font-size: 0.85em; }
.status.completed { color: #27ae60; font-weight: 600; }
.status.pending { color: #f39c12; font-weight: 600; }
.task-actions { display: flex; gap: 8px; margin-top: 15px; }
.action-btn { flex: 1; padding: 8px 12px; border: none; border-radius: 6px; cursor: pointer; color: white; }
.complete-btn { background: #27ae60; }
.delete-btn { background: #e74c3c; }
.empty-column { text-align: center; color: #bdc3c7; font-style: italic; padding: 40px 20px; }
.no-tasks { text-align: center; color: #7f8c8d; font-style: italic; padding: 60px 40px; margin: 20px; }
@media (max-width: 768px) { .kanban-columns { flex-direction: column; } }
"""

_BODY = """
<div class="container">
  <div class="header">
    <h1>🚀 Task Board</h1>
    <p>Regular tasks in a list, urgent tasks in a double-ended queue</p>
  </div>
  <div class="info">
    <p><strong>Regular tasks</strong> are kept in insertion order and can be sorted.</p>
    <p><strong>Urgent tasks</strong> can be added at either end of their queue.</p>
  </div>
  <div class="form-section">
    <h2>➕ Add New Task</h2>
    <form hx-post="/add-task" hx-target="#task-list" hx-trigger="submit">
      <div class="form-row">
        <div class="form-group">
          <label for="title">Task Title</label>
          <input type="text" id="title" name="title" required>
        </div>
        <div class="form-group">
          <label for="priority">Priority (1-5)</label>
          <select id="priority" name="priority" required>
            <option value="1">1 - Low</option>
            <option value="2">2 - Normal</option>
            <option value="3" selected>3 - Medium</option>
            <option value="4">4 - High</option>
            <option value="5">5 - Critical</option>
          </select>
        </div>
      </div>
      <div class="form-row">
        <div class="form-group">
          <label for="description">Description</label>
          <textarea id="description" name="description" rows="3" required></textarea>
        </div>
        <div class="form-group">
          <label for="dueDate">Due Date</label>
          <input type="date" id="dueDate" name="dueDate" required>
          <label><input type="checkbox" name="isUrgent" value="true"> 🚨 Mark as Urgent</label>
        </div>
      </div>
      <button type="submit" class="btn">Add Task</button>
    </form>
  </div>
  <div class="sort-controls">
    <h3>🔧 Sort Tasks</h3>
    <button hx-post="/sort-tasks" hx-vals='{"sortBy":"priority"}' hx-target="#task-list" class="btn">Sort by Priority</button>
    <button hx-post="/sort-tasks" hx-vals='{"sortBy":"dueDate"}' hx-target="#task-list" class="btn">Sort by Due Date</button>
    <button hx-post="/sort-tasks" hx-vals='{"sortBy":"title"}' hx-target="#task-list" class="btn">Sort by Title</button>
  </div>
  <div hx-get="/tasks" hx-trigger="load" hx-target="this">Loading tasks...</div>
</div>
"""


def index_page() -> str:
    """The full HTML page holding the form, sort controls and task list loader."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n'
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        "<title>Task Board</title>\n"
        f'<script src="{HTMX_SCRIPT}"></script>\n'
        f"<style>{_STYLE}</style>\n"
        "</head>\n<body>"
        f"{_BODY}"
        "</body>\n</html>"
    )