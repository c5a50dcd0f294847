"""컬렉션 단위 직렬화 스냅샷을 저장하는 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from app.database import Base


class StoredCollection(Base):
    __tablename__ = "stored_collection"

    # questions / submissions / registeredParents
    collection_key = Column(String(50), primary_key=True)
    payload = Column(Text, nullable=False, default="[]")
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
