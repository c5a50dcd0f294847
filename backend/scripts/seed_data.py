"""Seed the database with the default collections."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.stored_collection import StoredCollection
from app.services.record_store import RecordStore
from app.services.storage import SqlCollectionStorage


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(StoredCollection).count() > 0:
            print("Database already seeded. Skipping.")
            return

        # 저장된 값이 없으므로 기본 문항/데모 학부모로 초기화된다.
        store = RecordStore(SqlCollectionStorage(db))
        store.flush_all()

        print("Seed data inserted successfully.")
        print(f"  Questions: {len(store.questions)}")
        print(f"  Registered parents: {len(store.registered_parents)}")
        print()
        print("Test login credentials:")
        for p in store.registered_parents:
            print(f"  student_id={p.student_id}  phone={p.parent_phone}  name={p.parent_name}")

    except Exception as e:
        db.rollback()
        raise e
    finally:
        db.close()


if __name__ == "__main__":
    seed()
