from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

COMPONENT_REF_PREFIX = "#/components/"

COMPOSITION_KEYWORDS: Tuple[str, ...] = ("allOf", "anyOf", "oneOf")

# 정규화 시 원본 값을 그대로 복사하는 메타데이터 필드
PASSTHROUGH_FIELDS: Tuple[str, ...] = (
    "type",
    "format",
    "description",
    "example",
    "default",
    "enum",
    "minimum",
    "maximum",
    "minLength",
    "maxLength",
    "pattern",
)


class SchemaKind(str, Enum):
    """스키마 노드 종류 (선언된 type 기준)"""
    REFERENCE = "reference"
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"


_DECLARED_KINDS = {
    "object": SchemaKind.OBJECT,
    "array": SchemaKind.ARRAY,
    "string": SchemaKind.STRING,
    "integer": SchemaKind.INTEGER,
    "number": SchemaKind.NUMBER,
    "boolean": SchemaKind.BOOLEAN,
}


def get_ref(node: Any) -> Optional[str]:
    """노드가 $ref 문자열을 가지면 반환"""
    if not isinstance(node, dict):
        return None
    ref = node.get("$ref")
    return ref if isinstance(ref, str) else None


def classify(node: Any) -> SchemaKind:
    """
    스키마 노드를 종류별로 분류

    $ref 가 있으면 REFERENCE, 그 외에는 선언된 type 으로만 판단한다.
    dict 가 아니거나 type 을 알 수 없으면 UNKNOWN.
    """
    if not isinstance(node, dict):
        return SchemaKind.UNKNOWN
    if get_ref(node) is not None:
        return SchemaKind.REFERENCE

    declared = node.get("type")
    if isinstance(declared, str):
        return _DECLARED_KINDS.get(declared, SchemaKind.UNKNOWN)
    return SchemaKind.UNKNOWN


def is_object_shaped(node: Dict[str, Any]) -> bool:
    # type 이 생략되어도 properties 가 있으면 object 로 본다
    return node.get("type") == "object" or isinstance(node.get("properties"), dict)


def is_array_shaped(node: Dict[str, Any]) -> bool:
    return node.get("type") == "array" or node.get("items") is not None


def get_properties(node: Dict[str, Any]) -> Dict[str, Any]:
    properties = node.get("properties")
    return properties if isinstance(properties, dict) else {}


def get_composition_branches(node: Dict[str, Any]) -> List[Tuple[str, List[Any]]]:
    """allOf/anyOf/oneOf 중 선언된 것만 (keyword, branches) 목록으로 반환"""
    branches = []
    for keyword in COMPOSITION_KEYWORDS:
        value = node.get(keyword)
        if isinstance(value, list):
            branches.append((keyword, value))
    return branches
