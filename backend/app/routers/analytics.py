"""학부모 진행 현황(점수 추이) 집계 API 라우터입니다."""

from fastapi import APIRouter, Depends, Query

from app.config import settings
from app.middleware.auth_middleware import require_roles
from app.schemas.analytics import ParentAnalytics, ParentCard
from app.schemas.auth import SessionUser
from app.schemas.common import Page
from app.services import analytics_service
from app.services.list_view import PARENT_SEARCH_FIELDS, search_and_paginate
from app.services.record_store import RecordStore, get_record_store

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/parents", response_model=Page[ParentCard])
def list_parent_cards(
    q: str = "",
    page: int = Query(1, ge=1),
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    result = search_and_paginate(
        store.registered_parents,
        term=q,
        fields=PARENT_SEARCH_FIELDS,
        page=page,
        page_size=settings.PAGE_SIZE,
    )
    result.items = [
        ParentCard(parent=p, summary=analytics_service.parent_summary(store.submissions, p.student_id))
        for p in result.items
    ]
    return result


@router.get("/parents/{student_id}", response_model=ParentAnalytics)
def get_parent_analytics(
    student_id: str,
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    series = analytics_service.score_series(store.submissions, student_id)
    return ParentAnalytics(
        student_id=student_id,
        parent=store.find_parent(student_id),
        summary=analytics_service.parent_summary(store.submissions, student_id),
        series=series,
        history=analytics_service.score_history(series),
    )
