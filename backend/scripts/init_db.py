"""Create the collection snapshot table, optionally wiping stored collections."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, engine, Base
from app.models.stored_collection import StoredCollection


def init_db(reset: bool = False):
    Base.metadata.create_all(bind=engine)
    if not reset:
        print("stored_collection table is ready.")
        return
    db = SessionLocal()
    try:
        # 저장값이 없으면 다음 요청에서 기본 문항/데모 학부모로 다시 초기화된다.
        removed = db.query(StoredCollection).delete()
        db.commit()
        print(f"Removed {removed} stored collection(s).")
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="delete questions/submissions/registeredParents snapshots")
    args = parser.parse_args()
    init_db(reset=args.reset)
