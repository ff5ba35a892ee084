# File: /tests/test_concurrency.py | Version: 1.0 | Title: First-access races on the document-view triple
import threading
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from second_brain_api.crud.document_view import get_document_view, insert_document_view
from second_brain_api.db import Base
from second_brain_api.models import DocumentView
from second_brain_api.module_configs import build_default_registry
from second_brain_api.services.document_view import DocumentViewService


@pytest.fixture()
def file_sessionmaker(tmp_path):
    # Own engine: the loser's rollback must not undo the shared test transaction
    engine = create_engine(
        f"sqlite:///{tmp_path / 'race.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    finally:
        engine.dispose()


def _dv(user_id):
    return DocumentView(
        user_id=user_id,
        module_type="tasks",
        database_id="tasks-main-db",
        name="Tasks",
        properties=[],
        views=[],
        required_properties=[],
        frozen_properties=[],
        permissions=[],
        created_by=user_id,
        last_edited_by=user_id,
    )


def test_losing_insert_returns_the_winner(file_sessionmaker):
    uid = str(uuid.uuid4())
    with file_sessionmaker() as winner_db, file_sessionmaker() as loser_db:
        winner = insert_document_view(winner_db, _dv(uid))
        result = insert_document_view(loser_db, _dv(uid))
        assert result.id == winner.id

        rows = loser_db.query(DocumentView).filter(DocumentView.user_id == uid).all()
        assert len(rows) == 1


def test_concurrent_first_access_yields_one_aggregate(file_sessionmaker):
    registry = build_default_registry()
    uid = str(uuid.uuid4())
    ids, errors = [], []
    start = threading.Barrier(4)

    def worker():
        with file_sessionmaker() as db:
            svc = DocumentViewService(db, registry, {})
            start.wait()
            try:
                ids.append(svc.get_or_create_document_view(uid, "tasks").id)
            except Exception as exc:  # surfaced by the assertion below
                errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert len(set(ids)) == 1
    with file_sessionmaker() as db:
        assert get_document_view(db, user_id=uid, module_type="tasks", database_id="tasks-main-db")
