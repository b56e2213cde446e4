"""HTML rendering for the server-side pages.

Every interpolated value goes through ``esc``.
"""
import html
from typing import Iterable, List, Optional

from taskboard.config import settings
from taskboard.models import Board, Task, User
from taskboard.services.tasks import format_created_on


def esc(value) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def render_layout(title: str, body: str, user: Optional[User] = None) -> str:
    if user is not None:
        nav = (
            '<a href="/boards">Boards</a> '
            '<a href="/tasks/create">Create Task</a> '
            '<a href="/tasks/search">Search</a> '
            f'<span class="user">{esc(user.username)}</span> '
            '<form method="post" action="/logout" class="inline"><button type="submit">Logout</button></form>'
        )
    else:
        nav = '<a href="/login">Login</a> <a href="/register">Register</a>'
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{esc(title)} - {esc(settings.APP_NAME)}</title>
</head>
<body>
  <nav>{nav}</nav>
  <main>
    <h1>{esc(title)}</h1>
{body}
  </main>
</body>
</html>
"""


def _render_errors(errors: Iterable[str]) -> str:
    items = "".join(f"<li>{esc(error)}</li>" for error in errors)
    return f'    <ul class="errors">{items}</ul>\n' if items else ""


def render_login(error: str = "", username: str = "") -> str:
    body = _render_errors([error] if error else []) + f"""    <form method="post" action="/login">
      <label>Username <input name="username" value="{esc(username)}"></label>
      <label>Password <input name="password" type="password"></label>
      <button type="submit">Login</button>
    </form>
"""
    return render_layout("Login", body)


def render_register(errors: Optional[List[str]] = None, values: Optional[dict] = None) -> str:
    values = values or {}
    fields = [
        ("username", "Username", "text"),
        ("email", "Email", "email"),
        ("first_name", "First Name", "text"),
        ("last_name", "Last Name", "text"),
        ("password", "Password", "password"),
    ]
    inputs = "".join(
        f'      <label>{label} <input name="{name}" type="{kind}" '
        f'value="{esc(values.get(name, "") if kind != "password" else "")}"></label>\n'
        for name, label, kind in fields
    )
    body = _render_errors(errors or []) + f"""    <form method="post" action="/register">
{inputs}      <button type="submit">Register</button>
    </form>
"""
    return render_layout("Register", body)


def _render_task_rows(tasks: Iterable[Task]) -> str:
    rows = "".join(
        "      <tr>"
        f'<td><a href="/tasks/details/{task.id}">{task.id}</a></td>'
        f"<td>{esc(task.title)}</td>"
        f"<td>{esc(task.description)}</td>"
        f"<td>{esc(task.owner.username)}</td>"
        "</tr>\n"
        for task in tasks
    )
    if not rows:
        return "    <p>No tasks.</p>\n"
    return (
        "    <table>\n"
        "      <tr><th>Id</th><th>Title</th><th>Description</th><th>Owner</th></tr>\n"
        f"{rows}"
        "    </table>\n"
    )


def render_boards(boards: Iterable[Board], user: User) -> str:
    sections = []
    for board in boards:
        items = "".join(
            f'        <li><a href="/tasks/details/{task.id}">{esc(task.title)}</a>'
            f" - {esc(task.description)}</li>\n"
            for task in board.tasks
        )
        sections.append(
            f'    <section class="board">\n      <h2>{esc(board.name)}</h2>\n'
            f"      <ul>\n{items}      </ul>\n    </section>\n"
        )
    return render_layout("Boards", "".join(sections), user)


def render_task_details(task: Task, user: User) -> str:
    body = f"""    <dl>
      <dt>Id</dt><dd>{task.id}</dd>
      <dt>Title</dt><dd>{esc(task.title)}</dd>
      <dt>Description</dt><dd>{esc(task.description)}</dd>
      <dt>Created On</dt><dd>{esc(format_created_on(task.created_on))}</dd>
      <dt>Board</dt><dd>{esc(task.board.name)}</dd>
      <dt>Owner</dt><dd>{esc(task.owner.username)}</dd>
    </dl>
    <form method="post" action="/tasks/delete">
      <input type="hidden" name="id" value="{task.id}">
      <button type="submit">Delete</button>
    </form>
"""
    return render_layout(task.title, body, user)


def render_task_form(
    boards: Iterable[Board],
    user: User,
    title: str = "",
    description: str = "",
    board_id: Optional[int] = None,
    errors: Optional[List[str]] = None,
) -> str:
    options = "".join(
        f'<option value="{board.id}"{" selected" if board.id == board_id else ""}>{esc(board.name)}</option>'
        for board in boards
    )
    body = _render_errors(errors or []) + f"""    <form method="post" action="/tasks/create">
      <label>Title <input name="title" value="{esc(title)}"></label>
      <label>Description <textarea name="description">{esc(description)}</textarea></label>
      <label>Board <select name="board_id">{options}</select></label>
      <button type="submit">Create</button>
    </form>
"""
    return render_layout("Create Task", body, user)


def render_search(keyword: str, tasks: Iterable[Task], user: User) -> str:
    body = f"""    <form method="post" action="/tasks/search">
      <label>Keyword <input name="keyword" value="{esc(keyword)}"></label>
      <button type="submit">Search</button>
    </form>
""" + _render_task_rows(tasks)
    return render_layout("Search Tasks", body, user)
