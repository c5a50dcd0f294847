"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    storage,
    submission_service,
    record_store,
    analytics_service,
    list_view,
    export_service,
    auth_service,
)
