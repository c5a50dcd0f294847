"""공용 Pydantic 베이스 모델과 페이지 응답 스키마입니다."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    # 저장 포맷과 API 모두 camelCase 키를 사용한다. 입력은 snake_case도 허용.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Page(CamelModel, Generic[T]):
    items: List[T] = Field(default_factory=list)
    page: int
    total_pages: int
    total_count: int
    page_size: int
