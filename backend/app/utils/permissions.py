"""Permissions 관련 공용 유틸리티 헬퍼입니다."""

from app.schemas.auth import SessionUser


ADMIN = "admin"
PARENT = "parent"

ALL_ROLES = (ADMIN, PARENT)


def is_parent(user: SessionUser) -> bool:
    return user.role == PARENT
