"""피드백 제출 레코드 생성 서비스입니다."""

import logging
import uuid
from datetime import datetime

from app.schemas.feedback import AnswerInput, FeedbackResponse, FeedbackSubmission, Question
from app.services.errors import IncompleteSubmissionError
from app.utils.messages import get_message

logger = logging.getLogger(__name__)

UNKNOWN_QUESTION = "Unknown Question"


def build_submission(
    questions: list[Question],
    *,
    parent_id: str,
    parent_name: str,
    answers: list[AnswerInput],
    now: datetime,
    lang: str | None = None,
) -> FeedbackSubmission:
    active_count = sum(1 for q in questions if q.active)
    if len(answers) != active_count:
        raise IncompleteSubmissionError(
            expected=active_count,
            received=len(answers),
            detail=get_message("answer_all_questions", lang),
        )

    text_by_id = {q.id: q.text_primary for q in questions}
    responses = []
    for item in answers:
        question_text = text_by_id.get(item.question_id)
        if question_text is None:
            logger.warning("[feedback] unresolved question %s from parent %s", item.question_id, parent_id)
            question_text = UNKNOWN_QUESTION
        responses.append(
            FeedbackResponse(
                question_id=item.question_id,
                question_text=question_text,
                answer=item.answer,
            )
        )

    return FeedbackSubmission(
        id=uuid.uuid4().hex,
        parent_id=parent_id,
        parent_name=parent_name,
        date=now,
        responses=responses,
    )
