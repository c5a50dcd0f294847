"""학부모별 점수 추이/요약 응답 스키마입니다."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.feedback import FeedbackSubmission, RegisteredParent

NEVER_ACTIVE = "Never"


class ScorePoint(CamelModel):
    date: str
    score: int
    full_timestamp: datetime
    raw_submission: FeedbackSubmission


class ParentSummary(CamelModel):
    total_submissions: int = 0
    last_active: str = NEVER_ACTIVE


class ParentCard(CamelModel):
    parent: RegisteredParent
    summary: ParentSummary


class ParentAnalytics(CamelModel):
    student_id: str
    # 삭제된 학부모의 제출 기록도 조회할 수 있어야 하므로 None 허용
    parent: Optional[RegisteredParent] = None
    summary: ParentSummary
    series: List[ScorePoint] = Field(default_factory=list)
    history: List[ScorePoint] = Field(default_factory=list)
