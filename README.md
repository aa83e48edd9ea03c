# taskboard

A small task manager. Each task has a title, a description, a due date and a
priority, and it can be marked completed. Every new task gets the next id in a
process-wide sequence. Regular tasks are kept in order of arrival and can be
sorted; urgent tasks sit in a double-ended queue, so they can be pushed to its
front or its back.

The package offers three commands and a small library.

## Demo

```
taskboard-demo
```

Builds five sample tasks: three regular, two urgent. It marks "Review Code"
completed, sorts the regular tasks by priority and removes "Fix Production
Bug". It prints the whole list after each step and the two task counts at the
end.

## Console menu

```
taskboard-console
```

An interactive menu on standard input and output:

1. Add New Task (title, description, priority, due date)
2. Display All Tasks
3. Mark Task as Completed
4. Remove Completed Tasks
5. Exit

Priority and due date are free text. A task with priority `High` goes to the
front of the priority list and one with `Low` goes to its back. Anything else
joins the normal list. Marking a task completed searches the normal list
first, by title. The menu also ends when input runs out.

## Web board

```
taskboard-web [--port PORT]
```

Starts a threaded HTTP server on every interface, on port 8080 unless
`--port` says otherwise. Open `http://localhost:8080` in a browser. The page
lets you add tasks, complete or delete them, and sort the regular tasks by
priority, due date or title. Due dates are entered as `YYYY-MM-DD`.

The server starts with two sample tasks. Tasks of priority 4 or 5 appear in
the urgent column of the board, and the rest appear in the regular column.
A request whose form values cannot be read gets a `400 Bad Request` reply.
Unknown paths get `404 Not Found`. The page loads htmx from a public CDN, so
the browser needs network access to it.

## Using it as a library

```python
from taskboard.manager import TaskManager

manager = TaskManager()
manager.create_task("Write report", "Quarterly numbers", "2025-01-15", 2, False)
manager.create_task("Fix outage", "Payment system down", "2025-01-10", 5, True)
manager.mark_task_completed("Write report")
manager.sort_by_priority()
print(manager.to_json())
```

The library is made of these modules:

- `taskboard.task`: the `Task` dataclass. It has `due_date_string()`,
  `to_json()`, `describe()` and `display(file)`.
- `taskboard.manager`: `TaskManager` and `parse_due_date(text)`. The manager
  adds, removes, completes and sorts tasks, and can report them as JSON or as
  text.
- `taskboard.console`: `SimpleTask`, `ConsoleTaskManager` and
  `run_menu(manager, stdin, stdout)`.
- `taskboard.pages`: `render_task_card`, `render_task_board` and
  `index_page`, which build the board's HTML.
- `taskboard.server`: `TaskServer`, with `process_request(request)`, which
  answers a raw HTTP request without a socket. It also has the helpers
  `url_decode`, `parse_form_data`, `http_response` and `not_found_response`.

## What it does not do

Tasks live in memory only. Nothing is saved to disk, and all tasks are lost
when a command exits. The web board has no accounts or authentication.

## Running the tests

Install with the `test` extra and run `pytest`.