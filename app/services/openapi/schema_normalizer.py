from typing import Any, Dict, Optional

from app.core.config import settings
from app.services.openapi.schema_node import (
    PASSTHROUGH_FIELDS,
    get_composition_branches,
    get_properties,
    is_array_shaped,
    is_object_shaped,
)
from app.services.openapi.schema_resolver import resolve_schema

MAX_DEPTH_SENTINEL = {"type": "object", "description": "Max depth reached"}


def extract_schema_structure(
    schema: Any,
    components: Optional[Dict[str, Any]],
    depth: int = 0,
    max_depth: int = None
) -> Optional[Dict[str, Any]]:
    """
    OpenAPI 스키마를 클라이언트용 정규화 구조로 변환

    $ref 는 components 기준으로 해결하고, properties / items / allOf·anyOf·oneOf
    는 depth + 1 로 재귀 처리한다. 순환 참조는 따로 추적하지 않고 깊이 제한으로
    끊는다.

    Args:
        schema: 변환할 스키마 노드
        components: components.schemas 테이블
        depth: 현재 재귀 깊이
        max_depth: 깊이 제한 (기본값은 settings.SCHEMA_MAX_DEPTH)

    Returns:
        Dict: 정규화된 스키마 (원본에 없는 필드는 포함하지 않음)
        None: 스키마가 없거나 참조를 해결할 수 없는 경우
    """
    if max_depth is None:
        max_depth = settings.SCHEMA_MAX_DEPTH

    if depth > max_depth:
        return dict(MAX_DEPTH_SENTINEL)

    if schema is None:
        return None

    resolved = resolve_schema(schema, components)
    if not isinstance(resolved, dict):
        return None

    result = {
        field: resolved[field]
        for field in PASSTHROUGH_FIELDS
        if resolved.get(field) is not None
    }

    if is_object_shaped(resolved):
        result["type"] = "object"
        result["properties"] = {
            name: extract_schema_structure(prop_schema, components, depth + 1, max_depth)
            for name, prop_schema in get_properties(resolved).items()
        }
        required = resolved.get("required")
        result["required"] = list(required) if isinstance(required, list) else []

    if is_array_shaped(resolved):
        result["type"] = "array"
        result["items"] = extract_schema_structure(resolved.get("items"), components, depth + 1, max_depth)
        for field in ("minItems", "maxItems"):
            if resolved.get(field) is not None:
                result[field] = resolved[field]

    # 조합 키워드는 type 처리와 별개로 추가
    for keyword, branches in get_composition_branches(resolved):
        result[keyword] = [
            extract_schema_structure(branch, components, depth + 1, max_depth)
            for branch in branches
        ]

    return result
