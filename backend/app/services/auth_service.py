"""Auth Service 도메인 서비스 레이어입니다. 학부모/관리자 로그인 확인과 토큰 발급을 담당합니다.

로그인 확인은 평문 일치 비교이며 보안 경계가 아닙니다.
"""

import logging
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, status
from jose import jwt

from app.config import settings
from app.schemas.auth import SessionUser
from app.services.record_store import DEFAULT_REGISTERED_PARENTS, RecordStore
from app.utils.messages import get_message
from app.utils.permissions import ADMIN, PARENT

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def create_access_token(user: SessionUser) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": user.id, "role": user.role, "name": user.name, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def _parent_session(parent) -> SessionUser:
    return SessionUser(id=parent.student_id, name=parent.parent_name, role=PARENT, phone=parent.parent_phone)


def _admin_session(email: str, name: str = "Admin User") -> SessionUser:
    return SessionUser(id="admin1", name=name, role=ADMIN, email=email)


def parent_login(store: RecordStore, student_id: str, phone: str) -> SessionUser:
    parent = store.find_parent_by_credentials(student_id.strip().upper(), phone.strip())
    if not parent:
        logger.info("[auth] parent login rejected for %s", student_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=get_message("access_denied"),
        )
    return _parent_session(parent)


def admin_login(email: str, password: str) -> SessionUser:
    # 하드코딩된 단일 계정만 허용. 임의의 이메일/비밀번호 조합은 받지 않는다.
    if email.strip() != settings.ADMIN_EMAIL or password != settings.ADMIN_PASSWORD:
        logger.info("[auth] admin login rejected for %s", email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return _admin_session(settings.ADMIN_EMAIL)


def demo_login(store: RecordStore, role: str) -> SessionUser:
    if not settings.DEMO_LOGIN_ENABLED:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Demo login is disabled")
    if role == ADMIN:
        return _admin_session(settings.ADMIN_EMAIL, name="Admin (Demo)")
    demo_id = DEFAULT_REGISTERED_PARENTS[0].student_id
    parent = store.find_parent(demo_id)
    if not parent:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Demo parent {demo_id} is not registered")
    return _parent_session(parent)
