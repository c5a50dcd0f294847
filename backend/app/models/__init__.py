"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from app.models.stored_collection import StoredCollection

__all__ = [
    "StoredCollection",
]
