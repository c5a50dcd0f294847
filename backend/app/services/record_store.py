"""Record Store 도메인 서비스 레이어입니다.

문항(questions), 등록 학부모(registeredParents), 피드백 제출(submissions) 세 컬렉션을 보관합니다.
생명주기: 저장된 스냅샷으로 초기화 → 계약 메서드로만 변경 → 변경마다 해당 컬렉션 전체 flush.
모든 검증은 변경 전에 끝나므로 부분 갱신 상태가 남지 않습니다.
"""

import json
import logging
import re
import uuid
from datetime import datetime
from typing import Callable

from fastapi import Depends
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.schemas.feedback import AnswerInput, FeedbackSubmission, Question, RegisteredParent
from app.services.errors import DuplicateKeyError, RecordValidationError
from app.services.storage import (
    PARENTS_KEY,
    QUESTIONS_KEY,
    SUBMISSIONS_KEY,
    CollectionStorage,
    SqlCollectionStorage,
)
from app.services.submission_service import build_submission

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS = [
    Question(
        id="q1",
        text_primary="የልጅዎ የዛሬ ተግባራት እንቅስቃሴ እንዴት ነበር?",
        text_secondary="How was your son's progress in today's activities?",
        active=True,
    ),
    Question(
        id="q2",
        text_primary="የኩባንያችን አጠቃላይ አገልግሎት ዛሬ እንዴት ነበር?",
        text_secondary="How was our company's overall service today?",
        active=True,
    ),
]

DEFAULT_REGISTERED_PARENTS = [
    RegisteredParent(student_id="DSV1234", parent_name="Demo Parent", parent_phone="0911223344"),
]

PHONE_PATTERN = re.compile(r"^\d{10}$")

_questions_adapter = TypeAdapter(list[Question])
_parents_adapter = TypeAdapter(list[RegisteredParent])
_submissions_adapter = TypeAdapter(list[FeedbackSubmission])
_question_adapter = TypeAdapter(Question)
_parent_adapter = TypeAdapter(RegisteredParent)
_submission_adapter = TypeAdapter(FeedbackSubmission)


def student_id_pattern(prefix: str | None = None) -> re.Pattern:
    return re.compile(rf"^{re.escape(prefix or settings.STUDENT_ID_PREFIX)}\d+$")


def normalize_parent(candidate: RegisteredParent, prefix: str | None = None) -> RegisteredParent:
    prefix = prefix or settings.STUDENT_ID_PREFIX
    student_id = (candidate.student_id or "").strip().upper()
    phone = (candidate.parent_phone or "").strip()
    name = (candidate.parent_name or "").strip()

    if not student_id_pattern(prefix).match(student_id):
        raise RecordValidationError(
            "student_id",
            f'Student ID must start with "{prefix}" followed by numbers only (e.g., {prefix}001).',
        )
    if not PHONE_PATTERN.match(phone):
        raise RecordValidationError("parent_phone", "Phone number must be exactly 10 digits.")
    if not name:
        raise RecordValidationError("parent_name", "Parent name is required.")
    return RegisteredParent(student_id=student_id, parent_name=name, parent_phone=phone)


def encode_collection(adapter: TypeAdapter, records: list) -> str:
    return adapter.dump_json(records, by_alias=True).decode("utf-8")


class RecordStore:
    def __init__(self, storage: CollectionStorage, clock: Callable[[], datetime] = datetime.now):
        self._storage = storage
        self._clock = clock
        # 해석할 수 없는 저장값을 가진 컬렉션. 운영자가 복구하기 전까지 덮어쓰지 않는다.
        self.read_only_keys: set[str] = set()
        self.questions: list[Question] = self._load(QUESTIONS_KEY, _question_adapter, DEFAULT_QUESTIONS)
        self.registered_parents: list[RegisteredParent] = self._load(
            PARENTS_KEY, _parent_adapter, DEFAULT_REGISTERED_PARENTS
        )
        self.submissions: list[FeedbackSubmission] = self._load(SUBMISSIONS_KEY, _submission_adapter, [])

    def _load(self, key: str, item_adapter: TypeAdapter, default: list) -> list:
        raw = self._storage.read(key)
        if raw is None:
            return list(default)
        try:
            rows = json.loads(raw)
        except json.JSONDecodeError:
            rows = None
        if not isinstance(rows, list):
            logger.error("[store] stored %s is unreadable, using defaults and leaving it untouched", key)
            self.read_only_keys.add(key)
            return list(default)

        records = []
        for index, row in enumerate(rows):
            try:
                records.append(item_adapter.validate_python(row))
            except ValidationError as exc:
                logger.warning("[store] dropped invalid %s record #%d: %s", key, index, exc)
        return records

    def _flush(self, key: str) -> None:
        if key in self.read_only_keys:
            logger.warning("[store] %s is read-only until the stored payload is repaired, not persisted", key)
            return
        if key == QUESTIONS_KEY:
            payload = encode_collection(_questions_adapter, self.questions)
        elif key == PARENTS_KEY:
            payload = encode_collection(_parents_adapter, self.registered_parents)
        else:
            payload = encode_collection(_submissions_adapter, self.submissions)
        self._storage.write(key, payload)

    def flush_all(self) -> None:
        for key in (QUESTIONS_KEY, PARENTS_KEY, SUBMISSIONS_KEY):
            self._flush(key)

    # --- questions ---

    def active_questions(self) -> list[Question]:
        return [q for q in self.questions if q.active]

    def add_question(self, text_primary: str, text_secondary: str) -> Question:
        primary = (text_primary or "").strip()
        secondary = (text_secondary or "").strip()
        if not primary or not secondary:
            raise RecordValidationError("question", "Both question texts are required.")
        existing = {q.id for q in self.questions}
        question_id = uuid.uuid4().hex
        while question_id in existing:
            question_id = uuid.uuid4().hex
        question = Question(id=question_id, text_primary=primary, text_secondary=secondary, active=True)
        self.questions = [*self.questions, question]
        self._flush(QUESTIONS_KEY)
        logger.info("[store] question %s added", question.id)
        return question

    def toggle_question(self, question_id: str) -> Question | None:
        toggled = None
        updated = []
        for q in self.questions:
            if q.id == question_id:
                q = q.model_copy(update={"active": not q.active})
                toggled = q
            updated.append(q)
        if toggled is None:
            return None
        self.questions = updated
        self._flush(QUESTIONS_KEY)
        logger.info("[store] question %s active=%s", question_id, toggled.active)
        return toggled

    # --- registered parents ---

    def find_parent(self, student_id: str) -> RegisteredParent | None:
        return next((p for p in self.registered_parents if p.student_id == student_id), None)

    def find_parent_by_credentials(self, student_id: str, phone: str) -> RegisteredParent | None:
        return next(
            (p for p in self.registered_parents if p.student_id == student_id and p.parent_phone == phone),
            None,
        )

    def register_parent(self, candidate: RegisteredParent) -> RegisteredParent:
        parent = normalize_parent(candidate)
        if self.find_parent(parent.student_id) is not None:
            raise DuplicateKeyError(parent.student_id)
        self.registered_parents = [parent, *self.registered_parents]
        self._flush(PARENTS_KEY)
        logger.info("[store] parent %s registered", parent.student_id)
        return parent

    def delete_parent(self, student_id: str) -> bool:
        remaining = [p for p in self.registered_parents if p.student_id != student_id]
        if len(remaining) == len(self.registered_parents):
            return False
        self.registered_parents = remaining
        self._flush(PARENTS_KEY)
        logger.info("[store] parent %s deleted", student_id)
        return True

    # --- submissions ---

    def record_submission(
        self,
        parent_id: str,
        parent_name: str,
        answers: list[AnswerInput],
        lang: str | None = None,
    ) -> FeedbackSubmission:
        submission = build_submission(
            self.questions,
            parent_id=parent_id,
            parent_name=parent_name,
            answers=answers,
            now=self._clock(),
            lang=lang,
        )
        self.submissions = [submission, *self.submissions]
        self._flush(SUBMISSIONS_KEY)
        logger.info("[store] submission %s recorded for %s", submission.id, parent_id)
        return submission


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return RecordStore(SqlCollectionStorage(db))
