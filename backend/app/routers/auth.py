"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends
from app.schemas.auth import AdminLoginRequest, DemoLoginRequest, ParentLoginRequest, SessionUser, TokenResponse
from app.services.auth_service import admin_login, create_access_token, demo_login, parent_login
from app.services.record_store import RecordStore, get_record_store
from app.middleware.auth_middleware import get_current_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _token_response(user: SessionUser) -> TokenResponse:
    return TokenResponse(access_token=create_access_token(user), user=user)


@router.post("/parent-login", response_model=TokenResponse)
def login_parent(request: ParentLoginRequest, store: RecordStore = Depends(get_record_store)):
    return _token_response(parent_login(store, request.student_id, request.phone))


@router.post("/admin-login", response_model=TokenResponse)
def login_admin(request: AdminLoginRequest):
    return _token_response(admin_login(request.email, request.password))


@router.post("/demo-login", response_model=TokenResponse)
def login_demo(request: DemoLoginRequest, store: RecordStore = Depends(get_record_store)):
    return _token_response(demo_login(store, request.role))


@router.post("/logout")
def logout(current_user: SessionUser = Depends(get_current_user)):
    return {"message": "Logged out."}


@router.get("/me", response_model=SessionUser)
def me(current_user: SessionUser = Depends(get_current_user)):
    return current_user
