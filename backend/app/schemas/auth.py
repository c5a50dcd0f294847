"""로그인 요청/세션 응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CamelModel

Role = Literal["admin", "parent"]


class ParentLoginRequest(CamelModel):
    student_id: str = Field(min_length=2)
    phone: str = Field(min_length=3)


class AdminLoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class DemoLoginRequest(CamelModel):
    role: Role


class SessionUser(CamelModel):
    id: str
    name: str
    role: Role
    phone: Optional[str] = None
    email: Optional[str] = None


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionUser
