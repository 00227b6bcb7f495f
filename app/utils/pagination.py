import math
import re
from typing import Any, List, Tuple

from app.schemas.swagger.pagination import PaginationInfo

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_positive_int(*candidates: Any, default: int) -> int:
    """
    후보 값 중 처음으로 양의 정수로 해석되는 값을 반환

    문자열은 앞부분의 숫자만 읽는다 ("20abc" → 20). 모두 실패하면 default.
    """
    for candidate in candidates:
        if candidate is None or isinstance(candidate, bool):
            continue
        if isinstance(candidate, int):
            value = candidate
        else:
            match = _LEADING_INT.match(str(candidate))
            if not match:
                continue
            value = int(match.group(1))
        if value >= 1:
            return value
    return default


def paginate(items: List[Any], page: int, limit: int) -> Tuple[List[Any], PaginationInfo]:
    """page 는 1부터 시작"""
    total = len(items)
    total_pages = math.ceil(total / limit)
    start_index = (page - 1) * limit

    pagination = PaginationInfo(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )
    return items[start_index:start_index + limit], pagination
