import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from app.main import app
from app.services.record_store import RecordStore
from app.services.storage import MemoryCollectionStorage

TEST_DB_URL = "sqlite:///./test_parent_tracker.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


class StepClock:
    """호출할 때마다 1시간씩 증가하는 테스트용 시계."""

    def __init__(self, start: datetime = datetime(2026, 3, 1, 9, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(hours=1)
        return value


@pytest.fixture
def memory_storage():
    return MemoryCollectionStorage()


@pytest.fixture
def store(memory_storage):
    return RecordStore(memory_storage, clock=StepClock())


def admin_headers(client) -> dict:
    resp = client.post("/api/auth/admin-login", json={"email": "admin@dreamstars.com", "password": "admin"})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


def parent_headers(client, student_id: str = "DSV1234", phone: str = "0911223344") -> dict:
    resp = client.post("/api/auth/parent-login", json={"studentId": student_id, "phone": phone})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}
