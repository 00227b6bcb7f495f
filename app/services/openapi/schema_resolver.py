from typing import Any, Dict, Optional

from app.services.openapi.schema_node import COMPONENT_REF_PREFIX, get_ref


def resolve_schema(schema: Any, components: Optional[Dict[str, Any]]) -> Any:
    """
    로컬 $ref 참조를 components 테이블의 정의로 한 단계 해결

    Args:
        schema: 해결할 스키마 노드
        components: components.schemas 테이블 (이름 → 스키마)

    Returns:
        - schema 가 없으면 None
        - "#/components/..." 참조면 마지막 경로 이름으로 찾은 정의, 없으면 None
        - 그 외 형태의 참조나 일반 노드는 입력 그대로
    """
    if schema is None:
        return None

    ref_path = get_ref(schema)
    if ref_path is None or not ref_path.startswith(COMPONENT_REF_PREFIX):
        return schema

    ref_name = ref_path.split("/")[-1]
    if not isinstance(components, dict):
        return None
    return components.get(ref_name)
