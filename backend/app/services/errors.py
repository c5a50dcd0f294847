"""레코드 저장소 오류 분류입니다. HTTPException을 상속해 라우터에서 그대로 응답으로 변환됩니다."""

from fastapi import HTTPException, status


class DuplicateKeyError(HTTPException):
    def __init__(self, key: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail="Error: This Student ID is already registered.",
        )
        self.key = key


class RecordValidationError(HTTPException):
    def __init__(self, field: str, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.field = field


class IncompleteSubmissionError(HTTPException):
    def __init__(self, expected: int, received: int, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.expected = expected
        self.received = received
