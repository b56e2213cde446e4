import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

import taskboard.models as models
import taskboard.web.boards as boards_web
import taskboard.web.tasks as tasks_web
from taskboard.config import settings
from taskboard.services import TaskService


def _create(session: Session, owner: models.User, title: str, board: models.Board, description: str = "details"):
    return TaskService(session).create_task(title, description, board, owner)


def test_create_redirects_to_boards(db_session: Session, boards, maria):
    response = tasks_web.create_submit("Fix bug", "NPE on save", str(boards["Open"].id), maria, db_session)

    assert response.status_code == 303
    assert response.headers["location"] == "/boards"
    task = db_session.query(models.Task).one()
    assert task.owner_id == maria.id
    assert task.board_id == boards["Open"].id


@pytest.mark.parametrize("board_id", ["", "abc", "9999"])
def test_create_with_unknown_board_rerenders_form(db_session: Session, boards, maria, board_id):
    response = tasks_web.create_submit("Fix bug", "NPE on save", board_id, maria, db_session)

    assert response.status_code == 400
    assert "Board does not exist." in response.body.decode()
    assert 'value="Fix bug"' in response.body.decode()
    assert db_session.query(models.Task).count() == 0


def test_create_with_blank_fields_rerenders_form(db_session: Session, boards, maria):
    response = tasks_web.create_submit("  ", "", str(boards["Open"].id), maria, db_session)

    body = response.body.decode()
    assert response.status_code == 400
    assert "Title is required." in body
    assert "Description is required." in body
    assert db_session.query(models.Task).count() == 0


def test_details_page_escapes_content(db_session: Session, boards, maria):
    task = _create(db_session, maria, "<script>alert(1)</script>", boards["Done"])

    body = tasks_web.details(task.id, maria, db_session).body.decode()

    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in body
    assert "<script>" not in body
    assert "Done" in body
    assert "maria" in body


def test_details_missing_task_is_not_found(db_session: Session, maria):
    with pytest.raises(HTTPException) as exc:
        tasks_web.details(5, maria, db_session)
    assert exc.value.status_code == 404


def test_delete_requires_owner(db_session: Session, boards, maria, peter):
    task = _create(db_session, maria, "Mine", boards["Open"])

    with pytest.raises(HTTPException) as exc:
        tasks_web.delete(task.id, peter, db_session)
    assert exc.value.status_code == 401
    assert db_session.query(models.Task).count() == 1

    response = tasks_web.delete(task.id, maria, db_session)
    assert response.status_code == 303
    assert db_session.query(models.Task).count() == 0

    with pytest.raises(HTTPException) as exc:
        tasks_web.delete(task.id, maria, db_session)
    assert exc.value.status_code == 404


def test_delete_owner_rule_can_be_disabled(db_session: Session, boards, maria, peter, monkeypatch):
    monkeypatch.setattr(settings, "WEB_REQUIRE_OWNER_FOR_DELETE", False)
    task = _create(db_session, maria, "Mine", boards["Open"])

    assert tasks_web.delete(task.id, peter, db_session).status_code == 303
    assert db_session.query(models.Task).count() == 0


def test_search_ignores_case_and_blank_keyword(db_session: Session, boards, maria):
    _create(db_session, maria, "Fix Login", boards["Open"])
    _create(db_session, maria, "Release", boards["Done"], description="tag the build")

    body = tasks_web.search_submit("  login ", maria, db_session).body.decode()
    assert "Fix Login" in body
    assert "Release" not in body
    assert 'value="login"' in body

    body = tasks_web.search_submit("", maria, db_session).body.decode()
    assert "Fix Login" in body
    assert "Release" in body


def test_boards_page_lists_tasks_per_board(db_session: Session, boards, maria):
    _create(db_session, maria, "Ship it", boards["Done"])

    body = boards_web.all_boards(maria, db_session).body.decode()

    for name in ("Open", "In Progress", "Done", "Sprint1"):
        assert f"<h2>{name}</h2>" in body
    assert "Ship it" in body
