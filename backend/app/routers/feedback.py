"""피드백 제출/최근 활동 API 라우터입니다."""

from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.middleware.auth_middleware import require_roles
from app.schemas.auth import SessionUser
from app.schemas.common import Page
from app.schemas.feedback import ActivityRow, FeedbackReceipt, FeedbackSubmit
from app.services.analytics_service import activity_row
from app.services.list_view import SUBMISSION_SEARCH_FIELDS, search_and_paginate
from app.services.record_store import RecordStore, get_record_store
from app.utils.messages import get_message

router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackReceipt)
def submit_feedback(
    data: FeedbackSubmit,
    store: RecordStore = Depends(get_record_store),
    current_user: SessionUser = Depends(require_roles("parent")),
):
    submission = store.record_submission(
        current_user.id,
        current_user.name,
        data.answers,
        lang=data.lang,
    )
    return FeedbackReceipt(message=get_message("feedback_submitted", data.lang), submission=submission)


@router.get("", response_model=Page[ActivityRow])
def list_recent_activity(
    q: str = "",
    page: int = Query(1, ge=1),
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    result = search_and_paginate(
        store.submissions,
        term=q,
        fields=SUBMISSION_SEARCH_FIELDS,
        page=page,
        page_size=settings.PAGE_SIZE,
    )
    result.items = [activity_row(s) for s in result.items]
    return result
