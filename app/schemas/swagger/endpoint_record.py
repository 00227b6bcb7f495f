from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """
    엔드포인트 레코드 공통 베이스

    - 생성 후 변경 불가 (frozen)
    - JSON 키는 camelCase
    - 생성 시 넘기지 않은 필드는 직렬화에서 제외 (exclude_unset)
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ParameterInfo(RecordModel):
    name: Any = None
    location: Any = Field(None, alias="in")
    required: bool = False
    description: str = ""
    deprecated: bool = False
    schema_info: Optional[Dict[str, Any]] = Field(None, alias="schema")
    # 아래 값들은 문서에 적힌 그대로 전달
    type: Any = None
    format: Any = None
    example: Any = None
    default: Any = None
    enum: Any = None
    minimum: Any = None
    maximum: Any = None
    min_length: Any = None
    max_length: Any = None
    pattern: Any = None
    style: Any = None
    explode: Any = None


class ParameterGroups(RecordModel):
    """위치별 파라미터 목록 + 전체 목록 (선언 순서 유지)"""
    path: List[ParameterInfo] = Field(default_factory=list)
    query: List[ParameterInfo] = Field(default_factory=list)
    header: List[ParameterInfo] = Field(default_factory=list)
    cookie: List[ParameterInfo] = Field(default_factory=list)
    all_parameters: List[ParameterInfo] = Field(default_factory=list, alias="all")


class RequestMediaInfo(RecordModel):
    schema_info: Optional[Dict[str, Any]] = Field(None, alias="schema")
    example: Any = None
    examples: Any = None
    generated_example: Any = None


class RequestBodyInfo(RecordModel):
    required: bool = False
    description: str = ""
    content_types: Dict[str, RequestMediaInfo] = Field(default_factory=dict)
    example: Any = None


class ResponseMediaInfo(RecordModel):
    schema_info: Optional[Dict[str, Any]] = Field(None, alias="schema")
    example: Any = None
    examples: Any = None


class HeaderInfo(RecordModel):
    description: str = ""
    schema_info: Optional[Dict[str, Any]] = Field(None, alias="schema")
    required: bool = False


class ResponseInfo(RecordModel):
    description: str = ""
    content: Dict[str, ResponseMediaInfo] = Field(default_factory=dict)
    headers: Optional[Dict[str, HeaderInfo]] = None


class RequiredParameter(RecordModel):
    name: Any = None
    location: Any = Field(None, alias="in")
    type: Any = None


class ParameterCount(RecordModel):
    path: int = 0
    query: int = 0
    header: int = 0
    cookie: int = 0
    total: int = 0


class EndpointOverview(RecordModel):
    """이미 만들어진 파라미터/요청/응답 구조에서만 계산한 요약"""
    has_parameters: bool
    has_request_body: bool
    parameter_count: ParameterCount
    required_parameters: List[RequiredParameter]
    request_body_required: bool
    request_body_content_types: List[str]
    response_status_codes: List[str]


class EndpointRecord(RecordModel):
    path: str
    method: str
    summary: str = ""
    description: str = ""
    operation_id: str = ""
    tags: List[Any] = Field(default_factory=list)
    parameters: ParameterGroups
    request_body: Optional[RequestBodyInfo] = None
    responses: Dict[str, ResponseInfo] = Field(default_factory=dict)
    security: List[Any] = Field(default_factory=list)
    overview: EndpointOverview
