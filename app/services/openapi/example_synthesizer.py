from typing import Any, Dict, Optional

from app.core.config import settings
from app.services.openapi.schema_node import SchemaKind, classify, get_properties
from app.services.openapi.schema_resolver import resolve_schema

DEFAULT_STRING_EXAMPLE = "example string"
DEFAULT_NUMBER_EXAMPLE = 123
DEFAULT_BOOLEAN_EXAMPLE = True
DEFAULT_UNKNOWN_EXAMPLE = "mock value"

# 배열 예시는 항상 고정 개수
ARRAY_EXAMPLE_SIZE = 2

_SCALAR_DEFAULTS = {
    SchemaKind.STRING: DEFAULT_STRING_EXAMPLE,
    SchemaKind.INTEGER: DEFAULT_NUMBER_EXAMPLE,
    SchemaKind.NUMBER: DEFAULT_NUMBER_EXAMPLE,
    SchemaKind.BOOLEAN: DEFAULT_BOOLEAN_EXAMPLE,
}


def generate_mock_from_schema(
    schema: Any,
    components: Optional[Dict[str, Any]],
    depth: int = 0,
    max_depth: int = None
) -> Any:
    """
    스키마로부터 예시 값 하나를 생성

    - object: 선언 순서대로 각 property 예시
    - array: items 예시 2개
    - string / integer / number / boolean: 노드의 example, 없으면 기본값
    - 그 외: "mock value"

    참조를 해결할 수 없으면 None, 깊이 제한을 넘으면 None 을 반환한다.
    """
    if max_depth is None:
        max_depth = settings.SCHEMA_MAX_DEPTH

    if schema is None or depth > max_depth:
        return None

    resolved = resolve_schema(schema, components)
    if resolved is None:
        return None

    kind = classify(resolved)

    if kind == SchemaKind.OBJECT:
        return {
            name: generate_mock_from_schema(prop_schema, components, depth + 1, max_depth)
            for name, prop_schema in get_properties(resolved).items()
        }

    if kind == SchemaKind.ARRAY:
        return [
            generate_mock_from_schema(resolved.get("items"), components, depth + 1, max_depth)
            for _ in range(ARRAY_EXAMPLE_SIZE)
        ]

    if kind in _SCALAR_DEFAULTS:
        example = resolved.get("example")
        return example if example is not None else _SCALAR_DEFAULTS[kind]

    return DEFAULT_UNKNOWN_EXAMPLE
