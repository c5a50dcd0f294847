"""학부모별 점수 추이와 요약 통계를 계산하는 읽기 전용 서비스입니다."""

from app.schemas.analytics import NEVER_ACTIVE, ParentSummary, ScorePoint
from app.schemas.feedback import WELL_DONE, ActivityRow, FeedbackSubmission


def well_done_count(submission: FeedbackSubmission) -> int:
    return sum(1 for r in submission.responses if r.answer == WELL_DONE)


def submission_score(submission: FeedbackSubmission) -> int:
    """well_done 비율(0~100). 응답이 없으면 0."""
    total = len(submission.responses)
    if total == 0:
        return 0
    # 반올림은 half-up (round()의 banker's rounding 사용 안 함)
    return (200 * well_done_count(submission) + total) // (2 * total)


def short_date_label(submission: FeedbackSubmission) -> str:
    return f"{submission.date.month}/{submission.date.day}"


def _parent_submissions(submissions: list[FeedbackSubmission], parent_id: str) -> list[FeedbackSubmission]:
    return [s for s in submissions if s.parent_id == parent_id]


def _to_point(submission: FeedbackSubmission) -> ScorePoint:
    return ScorePoint(
        date=short_date_label(submission),
        score=submission_score(submission),
        full_timestamp=submission.date,
        raw_submission=submission,
    )


def score_series(submissions: list[FeedbackSubmission], parent_id: str) -> list[ScorePoint]:
    """차트용: 오래된 제출부터 오름차순."""
    points = [_to_point(s) for s in _parent_submissions(submissions, parent_id)]
    return sorted(points, key=lambda p: p.full_timestamp)


def score_history(series: list[ScorePoint]) -> list[ScorePoint]:
    """표 형태 이력: score_series 결과를 최신순으로 뒤집어 같은 집합을 보장한다."""
    return sorted(series, key=lambda p: p.full_timestamp, reverse=True)


def parent_summary(submissions: list[FeedbackSubmission], parent_id: str) -> ParentSummary:
    matched = _parent_submissions(submissions, parent_id)
    if not matched:
        return ParentSummary(total_submissions=0, last_active=NEVER_ACTIVE)
    # 제출 목록은 최신순으로 저장되므로 첫 항목이 마지막 활동
    return ParentSummary(
        total_submissions=len(matched),
        last_active=matched[0].date.date().isoformat(),
    )


def activity_row(submission: FeedbackSubmission) -> ActivityRow:
    return ActivityRow(
        submission=submission,
        well_done_count=well_done_count(submission),
        total_responses=len(submission.responses),
        score=submission_score(submission),
    )
