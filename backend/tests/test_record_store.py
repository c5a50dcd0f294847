"""Record Store 변경 계약/영속화 테스트입니다."""

import json
import logging
from datetime import datetime

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.models.stored_collection import StoredCollection
from app.schemas.feedback import AnswerInput, RegisteredParent
from app.services.errors import DuplicateKeyError, RecordValidationError
from app.services.record_store import RecordStore
from app.services.storage import (
    PARENTS_KEY,
    QUESTIONS_KEY,
    SUBMISSIONS_KEY,
    MemoryCollectionStorage,
    SqlCollectionStorage,
)
from tests.conftest import StepClock


def _parent(student_id="DSV9999", name="Test Parent", phone="0922334455"):
    return RegisteredParent(student_id=student_id, parent_name=name, parent_phone=phone)


def test_boot_uses_seed_collections(store):
    assert [q.id for q in store.questions] == ["q1", "q2"]
    assert all(q.active for q in store.questions)
    assert [p.student_id for p in store.registered_parents] == ["DSV1234"]
    assert store.submissions == []


def test_register_parent_inserts_at_head(store, memory_storage):
    parent = store.register_parent(_parent())
    assert store.registered_parents[0] == parent
    assert len(store.registered_parents) == 2
    assert memory_storage.writes == [PARENTS_KEY]


def test_register_parent_normalizes_candidate(store):
    parent = store.register_parent(_parent(student_id="  dsv0042 ", name=" Abebe ", phone=" 0911000000 "))
    assert parent.student_id == "DSV0042"
    assert parent.parent_name == "Abebe"
    assert parent.parent_phone == "0911000000"


def test_register_duplicate_leaves_collection_unchanged(store, memory_storage):
    store.register_parent(_parent())
    before = list(store.registered_parents)

    with pytest.raises(DuplicateKeyError) as exc_info:
        store.register_parent(_parent(name="Someone Else"))

    assert exc_info.value.status_code == 409
    assert store.registered_parents == before
    assert store.find_parent("DSV9999").parent_name == "Test Parent"
    assert memory_storage.writes == [PARENTS_KEY]


@pytest.mark.parametrize(
    "student_id,phone,field",
    [
        ("ABC123", "0922334455", "student_id"),
        ("DSV", "0922334455", "student_id"),
        ("DSV12A", "0922334455", "student_id"),
        ("DSV100", "092233445", "parent_phone"),
        ("DSV100", "09223344556", "parent_phone"),
        ("DSV100", "09-2233445", "parent_phone"),
    ],
)
def test_register_rejects_malformed_candidate(store, memory_storage, student_id, phone, field):
    with pytest.raises(RecordValidationError) as exc_info:
        store.register_parent(_parent(student_id=student_id, phone=phone))
    assert exc_info.value.field == field
    assert exc_info.value.status_code == 400
    assert len(store.registered_parents) == 1
    assert memory_storage.writes == []


def test_register_rejects_blank_name(store):
    with pytest.raises(RecordValidationError):
        store.register_parent(_parent(name="   "))


def test_delete_parent_is_idempotent(store, memory_storage):
    store.register_parent(_parent())
    assert store.delete_parent("DSV9999") is True
    once = list(store.registered_parents)
    assert store.delete_parent("DSV9999") is False
    assert store.registered_parents == once
    assert memory_storage.writes == [PARENTS_KEY, PARENTS_KEY]


def test_delete_parent_keeps_submissions(store):
    store.record_submission(
        "DSV1234",
        "Demo Parent",
        [AnswerInput(question_id="q1", answer="well_done"), AnswerInput(question_id="q2", answer="not_done")],
    )
    store.delete_parent("DSV1234")
    assert len(store.submissions) == 1
    assert store.submissions[0].parent_id == "DSV1234"


def test_toggle_question(store, memory_storage):
    toggled = store.toggle_question("q1")
    assert toggled.active is False
    assert [q.id for q in store.active_questions()] == ["q2"]
    assert store.toggle_question("q1").active is True
    assert memory_storage.writes == [QUESTIONS_KEY, QUESTIONS_KEY]


def test_toggle_absent_question_is_noop(store, memory_storage):
    before = list(store.questions)
    assert store.toggle_question("missing") is None
    assert store.questions == before
    assert memory_storage.writes == []


def test_add_question_appends_active_question(store):
    question = store.add_question(" ጥያቄ ", " Did homework get done? ")
    assert store.questions[-1] == question
    assert question.active is True
    assert question.text_primary == "ጥያቄ"
    assert question.text_secondary == "Did homework get done?"
    assert len({q.id for q in store.questions}) == 3


def test_add_question_requires_both_texts(store):
    with pytest.raises(RecordValidationError):
        store.add_question("ጥያቄ", "  ")
    assert len(store.questions) == 2


def test_record_submission_prepends(store, memory_storage):
    answers = [AnswerInput(question_id="q1", answer="well_done"), AnswerInput(question_id="q2", answer="well_done")]
    first = store.record_submission("DSV1234", "Demo Parent", answers)
    second = store.record_submission("DSV1234", "Demo Parent", answers)
    assert [s.id for s in store.submissions] == [second.id, first.id]
    assert first.id != second.id
    assert second.date > first.date
    assert memory_storage.writes == [SUBMISSIONS_KEY, SUBMISSIONS_KEY]


def test_collections_round_trip_through_storage(store, memory_storage):
    store.register_parent(_parent())
    store.add_question("ጥያቄ", "Question")
    store.toggle_question("q2")
    store.record_submission(
        "DSV9999",
        "Test Parent",
        [AnswerInput(question_id="q1", answer="not_done"), AnswerInput(question_id="q3", answer="well_done")],
    )

    reloaded = RecordStore(memory_storage)

    assert reloaded.questions == store.questions
    assert reloaded.registered_parents == store.registered_parents
    assert reloaded.submissions == store.submissions


def test_persisted_payload_uses_camel_case_keys(store, memory_storage):
    store.register_parent(_parent())
    payload = memory_storage.data[PARENTS_KEY]
    assert '"studentId":"DSV9999"' in payload
    assert '"parentPhone":"0922334455"' in payload


def test_unreadable_payload_falls_back_to_seed():
    storage = MemoryCollectionStorage({QUESTIONS_KEY: "{not json", PARENTS_KEY: "[]"})
    store = RecordStore(storage)
    assert [q.id for q in store.questions] == ["q1", "q2"]
    # 빈 목록은 유효한 저장값이므로 시드로 대체하지 않는다.
    assert store.registered_parents == []


def test_unreadable_payload_is_never_overwritten(caplog):
    storage = MemoryCollectionStorage({QUESTIONS_KEY: "{not json"})
    store = RecordStore(storage)
    assert QUESTIONS_KEY in store.read_only_keys

    caplog.set_level(logging.WARNING, logger="app.services.record_store")
    question = store.add_question("ጥያቄ", "Question")

    assert store.questions[-1] == question
    assert storage.data[QUESTIONS_KEY] == "{not json"
    assert QUESTIONS_KEY not in storage.writes
    assert "read-only" in caplog.text


def test_invalid_stored_record_is_dropped_and_history_kept(caplog):
    good = {
        "id": "old1",
        "parentId": "DSV1234",
        "parentName": "Demo Parent",
        "date": "2026-02-20T10:00:00",
        "responses": [{"questionId": "q1", "questionText": "ጥያቄ", "answer": "well_done"}],
    }
    bad = {**good, "id": "bad1", "responses": [{"questionId": "q1", "questionText": "ጥያቄ", "answer": "maybe"}]}
    storage = MemoryCollectionStorage({SUBMISSIONS_KEY: json.dumps([good, bad])})

    caplog.set_level(logging.WARNING, logger="app.services.record_store")
    store = RecordStore(storage, clock=StepClock())
    assert [s.id for s in store.submissions] == ["old1"]
    assert "dropped invalid submissions record #1" in caplog.text

    added = store.record_submission(
        "DSV1234",
        "Demo Parent",
        [AnswerInput(question_id="q1", answer="well_done"), AnswerInput(question_id="q2", answer="not_done")],
    )
    stored_ids = [row["id"] for row in json.loads(storage.data[SUBMISSIONS_KEY])]
    assert stored_ids == [added.id, "old1"]


def test_sql_write_failure_keeps_memory_state(db, monkeypatch, caplog):
    rollbacks = []
    original_rollback = db.rollback

    def failing_commit():
        raise SQLAlchemyError("disk full")

    def tracking_rollback():
        rollbacks.append(True)
        original_rollback()

    store = RecordStore(SqlCollectionStorage(db))
    monkeypatch.setattr(db, "commit", failing_commit)
    monkeypatch.setattr(db, "rollback", tracking_rollback)
    caplog.set_level(logging.ERROR, logger="app.services.storage")

    parent = store.register_parent(_parent())

    assert store.registered_parents[0] == parent
    assert rollbacks == [True]
    assert "[storage] failed to persist collection registeredParents" in caplog.text
    assert db.query(StoredCollection).count() == 0


def test_sql_storage_persists_between_stores(db):
    first = RecordStore(SqlCollectionStorage(db), clock=StepClock(datetime(2026, 5, 1, 8, 0, 0)))
    first.register_parent(_parent())

    row = db.query(StoredCollection).filter(StoredCollection.collection_key == PARENTS_KEY).first()
    assert row is not None

    second = RecordStore(SqlCollectionStorage(db))
    assert [p.student_id for p in second.registered_parents] == ["DSV9999", "DSV1234"]
    assert db.query(StoredCollection).count() == 1
