"""문항/등록 학부모/피드백 제출 레코드와 요청 스키마입니다."""

from datetime import datetime
from typing import List, Literal

from pydantic import ConfigDict, Field

from app.schemas.common import CamelModel
from app.utils.messages import DEFAULT_LANG

WELL_DONE = "well_done"
NOT_DONE = "not_done"
AnswerValue = Literal["well_done", "not_done"]
Language = Literal["am", "en"]


class Question(CamelModel):
    id: str
    text_primary: str
    text_secondary: str
    active: bool = True


class QuestionCreate(CamelModel):
    text_primary: str = Field(min_length=1, max_length=500)
    text_secondary: str = Field(min_length=1, max_length=500)


class RegisteredParent(CamelModel):
    student_id: str
    parent_name: str
    parent_phone: str


class FeedbackResponse(CamelModel):
    model_config = ConfigDict(frozen=True)

    question_id: str
    question_text: str
    answer: AnswerValue


class FeedbackSubmission(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    parent_id: str
    parent_name: str
    date: datetime
    responses: List[FeedbackResponse] = Field(default_factory=list)


class AnswerInput(CamelModel):
    question_id: str
    answer: AnswerValue


class FeedbackSubmit(CamelModel):
    lang: Language = DEFAULT_LANG
    answers: List[AnswerInput] = Field(default_factory=list)


class ActivityRow(CamelModel):
    submission: FeedbackSubmission
    well_done_count: int
    total_responses: int
    score: int


class FeedbackReceipt(CamelModel):
    message: str
    submission: FeedbackSubmission
