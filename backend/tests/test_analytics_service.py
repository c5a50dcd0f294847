from datetime import datetime

import pytest

from app.schemas.feedback import FeedbackResponse, FeedbackSubmission
from app.services import analytics_service


def _submission(sub_id, parent_id, when, answers):
    return FeedbackSubmission(
        id=sub_id,
        parent_id=parent_id,
        parent_name="Parent " + parent_id,
        date=when,
        responses=[
            FeedbackResponse(question_id=f"q{i}", question_text=f"Q{i}", answer=a)
            for i, a in enumerate(answers, start=1)
        ],
    )


@pytest.mark.parametrize(
    "answers,expected",
    [
        (["well_done", "well_done"], 100),
        (["well_done", "not_done", "not_done"], 33),
        (["well_done", "well_done", "not_done"], 67),
        (["well_done", "not_done"], 50),
        (["not_done"], 0),
        ([], 0),
    ],
)
def test_submission_score(answers, expected):
    submission = _submission("s1", "DSV1", datetime(2026, 1, 1), answers)
    assert analytics_service.submission_score(submission) == expected


def test_score_rounds_half_up():
    # 1/8 = 12.5% -> 13
    answers = ["well_done"] + ["not_done"] * 7
    submission = _submission("s1", "DSV1", datetime(2026, 1, 1), answers)
    assert analytics_service.submission_score(submission) == 13


def _stored_most_recent_first():
    return [
        _submission("c", "DSV1", datetime(2026, 10, 24, 9, 0), ["well_done", "well_done"]),
        _submission("x", "DSV2", datetime(2026, 10, 23, 9, 0), ["not_done"]),
        _submission("b", "DSV1", datetime(2026, 10, 5, 17, 45), ["well_done", "not_done"]),
        _submission("a", "DSV1", datetime(2026, 9, 30, 8, 15), ["not_done", "not_done"]),
    ]


def test_score_series_is_chronological_for_one_parent():
    series = analytics_service.score_series(_stored_most_recent_first(), "DSV1")
    assert [p.raw_submission.id for p in series] == ["a", "b", "c"]
    assert [p.score for p in series] == [0, 50, 100]
    assert [p.date for p in series] == ["9/30", "10/5", "10/24"]
    assert series[1].full_timestamp == datetime(2026, 10, 5, 17, 45)


def test_history_is_reverse_of_same_set():
    series = analytics_service.score_series(_stored_most_recent_first(), "DSV1")
    history = analytics_service.score_history(series)
    assert [p.raw_submission.id for p in history] == ["c", "b", "a"]
    assert {p.raw_submission.id for p in history} == {p.raw_submission.id for p in series}


def test_score_series_empty_for_unknown_parent():
    assert analytics_service.score_series(_stored_most_recent_first(), "DSV404") == []


def test_parent_summary():
    summary = analytics_service.parent_summary(_stored_most_recent_first(), "DSV1")
    assert summary.total_submissions == 3
    assert summary.last_active == "2026-10-24"


def test_parent_summary_never_active():
    summary = analytics_service.parent_summary(_stored_most_recent_first(), "DSV404")
    assert summary.total_submissions == 0
    assert summary.last_active == "Never"


def test_activity_row_counts():
    row = analytics_service.activity_row(_stored_most_recent_first()[2])
    assert row.well_done_count == 1
    assert row.total_responses == 2
    assert row.score == 50
