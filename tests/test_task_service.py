from datetime import datetime, timedelta

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import taskboard.models as models
from taskboard.services import TaskService, serialize_task

def _create(session: Session, owner: models.User, board: models.Board, title: str, description: str = "details"):
    return TaskService(session).create_task(title, description, board, owner)

def test_create_task_stamps_time_and_owner(db_session: Session, boards, maria):
    before = datetime.now()
    task = _create(db_session, maria, boards["Open"], "Fix bug", "NPE on save")
    after = datetime.now()

    assert task.id == 1
    assert task.owner_id == maria.id
    assert task.board.name == "Open"
    assert before <= task.created_on <= after

def test_resolve_board_by_name_rejects_unknown_board(db_session: Session, boards):
    with pytest.raises(HTTPException) as exc:
        TaskService(db_session).resolve_board_by_name("Backlog")
    assert exc.value.status_code == 400
    assert exc.value.detail == "Board Backlog does not exist."
    assert db_session.query(models.Task).count() == 0

def test_resolve_board_by_id_rejects_unknown_or_missing_id(db_session: Session, boards):
    service = TaskService(db_session)
    assert service.resolve_board_by_id(boards["Done"].id).name == "Done"
    for board_id in (None, 9999):
        with pytest.raises(HTTPException) as exc:
            service.resolve_board_by_id(board_id)
        assert exc.value.status_code == 400

def test_get_task_missing_id_is_not_found(db_session: Session):
    with pytest.raises(HTTPException) as exc:
        TaskService(db_session).get_task(42)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Task #42 not found."

def test_search_case_sensitive_and_insensitive(db_session: Session, boards, maria):
    _create(db_session, maria, boards["Open"], "Fix Login", "Button does nothing")
    _create(db_session, maria, boards["Open"], "Write docs", "Describe the login flow")
    _create(db_session, maria, boards["Done"], "Release", "Tag the build")
    service = TaskService(db_session)

    sensitive = [task.title for task in service.search_tasks("Login", case_sensitive=True)]
    assert sensitive == ["Fix Login"]

    insensitive = [task.title for task in service.search_tasks("LOGIN", case_sensitive=False)]
    assert insensitive == ["Fix Login", "Write docs"]

def test_search_empty_keyword_returns_everything(db_session: Session, boards, maria):
    _create(db_session, maria, boards["Open"], "One")
    _create(db_session, maria, boards["Done"], "Two")
    service = TaskService(db_session)

    for keyword in (None, ""):
        assert len(service.search_tasks(keyword, case_sensitive=False)) == 2

def test_search_matches_whitespace_without_trimming(db_session: Session, boards, maria):
    _create(db_session, maria, boards["Open"], "Fix bug", "broken")
    _create(db_session, maria, boards["Open"], "Nospace", "nothing")
    service = TaskService(db_session)

    assert [t.title for t in service.search_tasks(" ")] == ["Fix bug"]
    assert service.search_tasks("x bug ") == []

def test_case_insensitive_search_folds_non_ascii(db_session: Session, boards, maria):
    _create(db_session, maria, boards["Open"], "Äpfel kaufen", "Obst")
    _create(db_session, maria, boards["Open"], "Birnen", "ÜBERALL")
    service = TaskService(db_session)

    assert [t.title for t in service.search_tasks("äpfel", case_sensitive=False)] == ["Äpfel kaufen"]
    assert [t.title for t in service.search_tasks("überall", case_sensitive=False)] == ["Birnen"]
    assert service.search_tasks("äpfel", case_sensitive=True) == []

def test_search_treats_like_wildcards_literally(db_session: Session, boards, maria):
    _create(db_session, maria, boards["Open"], "Raise limit to 100%")
    _create(db_session, maria, boards["Open"], "Rename snake_case field")
    _create(db_session, maria, boards["Open"], "Plain")
    service = TaskService(db_session)

    assert [t.title for t in service.search_tasks("%")] == ["Raise limit to 100%"]
    assert [t.title for t in service.search_tasks("_")] == ["Rename snake_case field"]

def test_list_by_board_name_is_exact_match(db_session: Session, boards, maria):
    _create(db_session, maria, boards["Open"], "Open task")
    _create(db_session, maria, boards["In Progress"], "Busy task")
    service = TaskService(db_session)

    assert [t.title for t in service.list_by_board_name("Open")] == ["Open task"]
    assert service.list_by_board_name("Ope") == []
    assert service.list_by_board_name("open") == []

def test_update_overwrites_fields_and_board(db_session: Session, boards, maria, peter):
    task = _create(db_session, maria, boards["Open"], "Draft", "first")
    created_on = task.created_on

    updated = TaskService(db_session).update_task(task.id, "Final", "second", "Done", peter)

    assert updated.title == "Final"
    assert updated.description == "second"
    assert updated.board.name == "Done"
    assert updated.owner_id == maria.id
    assert updated.created_on == created_on

def test_update_requires_owner_when_configured(db_session: Session, boards, maria, peter):
    task = _create(db_session, maria, boards["Open"], "Mine")

    with pytest.raises(HTTPException) as exc:
        TaskService(db_session).update_task(task.id, "Theirs", "x", "Open", peter, require_owner=True)
    assert exc.value.status_code == 401
    db_session.expire_all()
    assert db_session.get(models.Task, task.id).title == "Mine"

def test_update_missing_task_is_checked_before_board(db_session: Session, boards, maria):
    with pytest.raises(HTTPException) as exc:
        TaskService(db_session).update_task(7, "t", "d", "Nowhere", maria)
    assert exc.value.status_code == 404

def test_delete_returns_snapshot_and_removes_task(db_session: Session, boards, maria):
    task = _create(db_session, maria, boards["Sprint1"], "Fix bug", "NPE on save")
    expected = serialize_task(task)
    service = TaskService(db_session)

    deleted = service.delete_task(task.id, maria, require_owner=True)

    assert deleted == expected
    with pytest.raises(HTTPException) as exc:
        service.get_task(task.id)
    assert exc.value.status_code == 404
    assert db_session.query(models.Board).filter(models.Board.name == "Sprint1").count() == 1
    assert db_session.get(models.User, maria.id) is not None

def test_delete_by_non_owner_is_unauthorized_only_when_required(db_session: Session, boards, maria, peter):
    service = TaskService(db_session)
    first = _create(db_session, maria, boards["Open"], "First")
    second = _create(db_session, maria, boards["Open"], "Second")

    with pytest.raises(HTTPException) as exc:
        service.delete_task(first.id, peter, require_owner=True)
    assert exc.value.status_code == 401
    assert service.get_task(first.id).title == "First"

    service.delete_task(second.id, peter, require_owner=False)
    assert [t.title for t in service.list_tasks()] == ["First"]

def test_serialize_task_formats_created_on(db_session: Session, boards, maria):
    task = _create(db_session, maria, boards["Open"], "Stamp")
    task.created_on = datetime(2024, 3, 5, 14, 30, 59)
    db_session.commit()

    summary = serialize_task(task)

    assert summary.created_on == "05/03/2024 14:30"
    assert summary.board == "Open"
    assert summary.owner.username == "maria"
    assert summary.owner.first_name == "Maria"

def test_commit_with_missing_board_fails(db_session: Session, maria):
    db_session.add(
        models.Task(
            title="Orphan",
            description="no board",
            created_on=datetime.now() - timedelta(days=1),
            board_id=999,
            owner_id=maria.id,
        )
    )
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
    assert db_session.query(models.Task).count() == 0
