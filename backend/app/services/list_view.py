"""목록 화면 공통 검색/페이지네이션 엔진입니다.

검색과 페이지 분할은 순수 함수이며 입력 컬렉션을 변경하지 않습니다.
페이지 보정 규칙은 ListViewState / clamp_page로 호출 측에서 적용합니다.
- 검색어가 바뀌면 1페이지로 돌아간다.
- 레코드 수가 줄어 현재 페이지가 범위를 벗어나면 마지막 페이지로 내린다.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from app.schemas.common import Page

PARENT_SEARCH_FIELDS = ("parent_name", "student_id", "parent_phone")
SUBMISSION_SEARCH_FIELDS = ("parent_name", "parent_id")


def _matches(record: Any, needle: str, fields: Iterable[str]) -> bool:
    for field in fields:
        value = getattr(record, field, None)
        if value is not None and needle in str(value).lower():
            return True
    return False


def search(term: str | None, records: Sequence[Any], fields: Iterable[str]) -> list[Any]:
    needle = (term or "").lower()
    if not needle:
        return list(records)
    fields = tuple(fields)
    return [r for r in records if _matches(r, needle, fields)]


def total_pages_for(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if total_count else 0


def paginate(records: Sequence[Any], page_size: int, page: int) -> Page:
    if page_size < 1:
        raise ValueError("page_size must be positive")
    total_count = len(records)
    start = (max(page, 1) - 1) * page_size
    return Page(
        items=list(records[start:start + page_size]),
        page=page,
        total_pages=total_pages_for(total_count, page_size),
        total_count=total_count,
        page_size=page_size,
    )


def clamp_page(page: int, total_pages: int) -> int:
    if page < 1:
        return 1
    if total_pages > 0 and page > total_pages:
        return total_pages
    return page


@dataclass
class ListViewState:
    search_term: str = ""
    page: int = 1

    def set_search_term(self, term: str) -> None:
        if term != self.search_term:
            self.search_term = term
            self.page = 1

    def go_to(self, page: int) -> None:
        self.page = max(page, 1)

    def sync(self, total_count: int, page_size: int) -> int:
        self.page = clamp_page(self.page, total_pages_for(total_count, page_size))
        return self.page


def search_and_paginate(
    records: Sequence[Any],
    *,
    term: str | None,
    fields: Iterable[str],
    page: int,
    page_size: int,
) -> Page:
    state = ListViewState(search_term=term or "", page=page)
    matched = search(state.search_term, records, fields)
    state.sync(len(matched), page_size)
    return paginate(matched, page_size, state.page)
