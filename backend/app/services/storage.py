"""컬렉션 스냅샷 저장소(영속화 협력자) 구현입니다.

레코드 저장소는 변경이 일어날 때마다 해당 컬렉션 전체를 직렬화해 키 단위로 기록합니다.
- SqlCollectionStorage: stored_collection 테이블에 키별 JSON 한 행으로 저장
- MemoryCollectionStorage: 테스트/스크립트용 dict 기반 대체 구현

쓰기는 동기식이며 재시도하지 않습니다. 실패하면 로그만 남기고 메모리 상태를 유지합니다.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.stored_collection import StoredCollection

logger = logging.getLogger(__name__)

QUESTIONS_KEY = "questions"
SUBMISSIONS_KEY = "submissions"
PARENTS_KEY = "registeredParents"


class CollectionStorage:
    def read(self, key: str) -> str | None:
        raise NotImplementedError

    def write(self, key: str, payload: str) -> None:
        raise NotImplementedError


class MemoryCollectionStorage(CollectionStorage):
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})
        self.writes: list[str] = []

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def write(self, key: str, payload: str) -> None:
        self.data[key] = payload
        self.writes.append(key)


class SqlCollectionStorage(CollectionStorage):
    def __init__(self, db: Session):
        self.db = db

    def read(self, key: str) -> str | None:
        row = self.db.query(StoredCollection).filter(StoredCollection.collection_key == key).first()
        if not row:
            return None
        return row.payload

    def write(self, key: str, payload: str) -> None:
        try:
            row = self.db.query(StoredCollection).filter(StoredCollection.collection_key == key).first()
            if row:
                row.payload = payload
            else:
                self.db.add(StoredCollection(collection_key=key, payload=payload))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("[storage] failed to persist collection %s: %s", key, exc)
