"""피드백 문항 API 라우터입니다."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.middleware.auth_middleware import get_current_user, require_roles
from app.schemas.auth import SessionUser
from app.schemas.feedback import Question, QuestionCreate
from app.services.record_store import RecordStore, get_record_store
from app.utils.permissions import is_parent

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("", response_model=List[Question])
def list_questions(
    active_only: bool = False,
    store: RecordStore = Depends(get_record_store),
    current_user: SessionUser = Depends(get_current_user),
):
    # 학부모 화면에는 활성 문항만 노출
    if active_only or is_parent(current_user):
        return store.active_questions()
    return store.questions


@router.post("", response_model=Question)
def create_question(
    data: QuestionCreate,
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    return store.add_question(data.text_primary, data.text_secondary)


@router.patch("/{question_id}/toggle", response_model=Question)
def toggle_question(
    question_id: str,
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    question = store.toggle_question(question_id)
    if question is None:
        raise HTTPException(status_code=404, detail="Question not found")
    return question
