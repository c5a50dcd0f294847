"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./parent_tracker.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    LOG_LEVEL: str = "INFO"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # 관리자 계정 (단일 계정, 보안 경계 아님)
    ADMIN_EMAIL: str = "admin@dreamstars.com"
    ADMIN_PASSWORD: str = "admin"
    # 로그인 화면의 데모 버튼
    DEMO_LOGIN_ENABLED: bool = True

    # 목록 화면 공통 페이지 크기
    PAGE_SIZE: int = 5
    # 학생 ID는 접두어 + 숫자 형태 (예: DSV001)
    STUDENT_ID_PREFIX: str = "DSV"

    class Config:
        # 실행 cwd와 무관하게 backend/.env를 로드한다.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
