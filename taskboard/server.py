"""A small HTTP server that serves the task board and its form actions."""

from __future__ import annotations

import argparse
import re
import socketserver
import sys
import threading
from collections.abc import Callable, Sequence
from urllib.parse import unquote_plus

from taskboard.manager import TaskManager
from taskboard.pages import index_page, render_task_board

DEFAULT_PORT = 8080
URGENT_PRIORITY = 4
RECEIVE_LIMIT = 4096

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def url_decode(text: str) -> str:
    """Decode a form-encoded component: ``+`` becomes a space, ``%XX`` a byte."""
    return unquote_plus(text)


def parse_form_data(data: str) -> dict[str, str]:
    """Parse ``key=value`` pairs separated by ``&``; pairs without ``=`` are skipped."""
    params: dict[str, str] = {}
    for pair in data.split("&"):
        key, sep, value = pair.partition("=")
        if sep:
            params[url_decode(key)] = url_decode(value)
    return params


def http_response(status: str, html: str) -> bytes:
    """A complete HTTP/1.1 response carrying ``html``."""
    body = html.encode("utf-8")
    head = (
        f"HTTP/1.1 {status}\r\n"
        "Content-Type: text/html\r\n"
        f"Content-Length: {len(body)}\r\n\r\n"
    )
    return head.encode("ascii") + body


def not_found_response() -> bytes:
    """The 404 response."""
    return http_response("404 Not Found", "<h1>404 Not Found</h1>")


def _parse_int(text: str) -> int:
    """Read the leading integer of ``text``; raise ValueError if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


class TaskServer:
    """Serves the task board and applies the actions its page posts."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self.port = port
        self.manager = TaskManager()
        self._lock = threading.RLock()
        self._routes: dict[tuple[str, str], Callable[[str], bytes]] = {
            ("GET", "/"): lambda _request: http_response("200 OK", index_page()),
            ("GET", "/tasks"): lambda _request: self.tasks_response(),
            ("POST", "/add-task"): self._with_form(self._add_task),
            ("POST", "/complete-task"): self._with_form(self._complete_task),
            ("POST", "/delete-task"): self._with_form(self._delete_task),
            ("POST", "/sort-tasks"): self._with_form(self._sort_tasks),
        }
        self.manager.create_task(
            "Sample Task", "This is a sample regular task", "2025-01-15", 2, False
        )
        self.manager.create_task(
            "Urgent Bug Fix", "Critical production issue", "2025-01-10", 5, True
        )

    def process_request(self, request: str | bytes) -> bytes:
        """Answer one raw HTTP request; raise ValueError on malformed form values."""
        if isinstance(request, bytes):
            request = request.decode("utf-8", errors="replace")
        words = request.split(maxsplit=2)
        if len(words) < 2:
            return not_found_response()
        handler = self._routes.get((words[0], words[1]))
        if handler is None:
            return not_found_response()
        with self._lock:
            return handler(request)

    def tasks_response(self) -> bytes:
        """The task list fragment; tasks of priority 4 or more show as urgent."""
        with self._lock:
            tasks = self.manager.all_tasks()
        urgent = [task for task in tasks if task.priority >= URGENT_PRIORITY]
        regular = [task for task in tasks if task.priority < URGENT_PRIORITY]
        return http_response("200 OK", render_task_board(regular, urgent))

    def _with_form(self, action: Callable[[dict[str, str]], None]) -> Callable[[str], bytes]:
        def handle(request: str) -> bytes:
            start = request.find("\r\n\r\n")
            if start == -1:
                return not_found_response()
            action(parse_form_data(request[start + 4 :]))
            return self.tasks_response()

        return handle

    def _add_task(self, params: dict[str, str]) -> None:
        self.manager.create_task(
            params.get("title", ""),
            params.get("description", ""),
            params.get("dueDate", ""),
            _parse_int(params.get("priority", "")),
            "isUrgent" in params,
        )

    def _complete_task(self, params: dict[str, str]) -> None:
        self.manager.mark_task_completed_by_id(_parse_int(params.get("id", "")))

    def _delete_task(self, params: dict[str, str]) -> None:
        task_id = _parse_int(params.get("id", ""))
        self.manager.remove_task_by_id(task_id)
        self.manager.remove_urgent_task_by_id(task_id)

    def _sort_tasks(self, params: dict[str, str]) -> None:
        sorters = {
            "priority": self.manager.sort_by_priority,
            "dueDate": self.manager.sort_by_due_date,
            "title": self.manager.sort_by_title,
        }
        sorter = sorters.get(params.get("sortBy", ""))
        if sorter is not None:
            sorter()

    def serve_forever(self) -> None:
        """Listen on every interface and answer each connection in its own thread."""
        with _ThreadingServer(("", self.port), _Handler) as server:
            server.app = self
            print(f"Task Manager Server running on http://localhost:{self.port}", flush=True)
            print("Visit the URL in your browser to access the task manager!", flush=True)
            server.serve_forever()


class _ThreadingServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True
    request_queue_size = 3
    app: TaskServer


class _Handler(socketserver.BaseRequestHandler):
    server: _ThreadingServer

    def handle(self) -> None:
        data = self.request.recv(RECEIVE_LIMIT)
        try:
            response = self.server.app.process_request(data)
        except ValueError:
            response = http_response("400 Bad Request", "<h1>400 Bad Request</h1>")
        self.request.sendall(response)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the task board server."""
    parser = argparse.ArgumentParser(description="Serve the task board over HTTP.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        TaskServer(args.port).serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())