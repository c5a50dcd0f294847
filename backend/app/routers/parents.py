"""등록 학부모 관리 API 라우터입니다."""

from fastapi import APIRouter, Depends, Query, Response

from app.config import settings
from app.middleware.auth_middleware import require_roles
from app.schemas.auth import SessionUser
from app.schemas.common import Page
from app.schemas.feedback import RegisteredParent
from app.services.export_service import export_parents_csv, parents_export_filename
from app.services.list_view import PARENT_SEARCH_FIELDS, search_and_paginate
from app.services.record_store import RecordStore, get_record_store

router = APIRouter(prefix="/api/parents", tags=["parents"])


@router.get("", response_model=Page[RegisteredParent])
def list_parents(
    q: str = "",
    page: int = Query(1, ge=1),
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    return search_and_paginate(
        store.registered_parents,
        term=q,
        fields=PARENT_SEARCH_FIELDS,
        page=page,
        page_size=settings.PAGE_SIZE,
    )


@router.post("", response_model=RegisteredParent)
def register_parent(
    data: RegisteredParent,
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    return store.register_parent(data)


@router.get("/export.csv")
def export_csv(
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    return Response(
        content=export_parents_csv(store.registered_parents),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{parents_export_filename()}"'},
    )


@router.delete("/{student_id}")
def delete_parent(
    student_id: str,
    store: RecordStore = Depends(get_record_store),
    _current_user: SessionUser = Depends(require_roles("admin")),
):
    removed = store.delete_parent(student_id)
    return {"message": "Deleted." if removed else "Nothing to delete.", "deleted": removed}
