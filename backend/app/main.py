"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 정적 프론트엔드 서빙을 등록합니다."""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.database import Base, engine
import app.models  # noqa: F401 - 모델 import로 metadata 등록
from app.routers import auth, questions, parents, feedback, analytics

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = FastAPI(
    title="Study Tracker 학부모 피드백 시스템",
    description="학부모 일일 피드백 수집과 학부모별 점수 추이 관리",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register all routers
app.include_router(auth.router)
app.include_router(questions.router)
app.include_router(parents.router)
app.include_router(feedback.router)
app.include_router(analytics.router)


@app.on_event("startup")
def ensure_schema():
    # 컬렉션 스냅샷 테이블이 없으면 생성한다.
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Study Tracker"}


# Serve frontend static files
frontend_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "frontend")
if os.path.exists(frontend_dir):
    app.mount("/", StaticFiles(directory=frontend_dir, html=True), name="frontend")
