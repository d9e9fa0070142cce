import math

from src.app.use_cases.dto_base import CamelModel

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class Pagination(CamelModel):
    """Page metadata shared by all paginated listings"""

    page: int
    limit: int
    total: int
    pages: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit) if limit else 0,
            has_next_page=page * limit < total,
            has_prev_page=page > 1,
        )


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit
