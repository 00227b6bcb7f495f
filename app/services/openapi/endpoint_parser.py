from typing import Any, Dict, List, Optional

from app.schemas.swagger.endpoint_record import (
    EndpointOverview,
    EndpointRecord,
    HeaderInfo,
    ParameterCount,
    ParameterGroups,
    ParameterInfo,
    RequestBodyInfo,
    RequestMediaInfo,
    RequiredParameter,
    ResponseInfo,
    ResponseMediaInfo,
)
from app.services.openapi.example_synthesizer import generate_mock_from_schema
from app.services.openapi.schema_normalizer import extract_schema_structure
from app.services.openapi.schema_resolver import resolve_schema

HTTP_METHODS = ["get", "post", "put", "patch", "delete", "options", "head"]
PARAMETER_LOCATIONS = ["path", "query", "header", "cookie"]
JSON_CONTENT_TYPE = "application/json"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _present_only(**fields: Any) -> Dict[str, Any]:
    # 값이 없는 필드는 넘기지 않아야 응답에서 빠진다 (exclude_unset)
    return {key: value for key, value in fields.items() if value is not None}


def get_component_schemas(openapi_data: Dict[str, Any]) -> Dict[str, Any]:
    """문서에서 components.schemas 테이블 추출"""
    components = _as_dict(_as_dict(openapi_data).get("components"))
    return _as_dict(components.get("schemas"))


def parse_parameter(param: Any, schemas: Dict[str, Any]) -> Optional[ParameterInfo]:
    """
    OpenAPI parameter 객체를 ParameterInfo 로 변환

    우선순위:
        - example: 파라미터의 example > 정규화된 스키마 > 원본 스키마
        - 나머지: 정규화된 스키마 > 원본 스키마

    Args:
        param: OpenAPI parameter 객체
        schemas: components.schemas 테이블

    Returns:
        ParameterInfo, 객체가 아니면 None
    """
    if not isinstance(param, dict):
        return None

    fields = {
        "name": param.get("name"),
        "location": param.get("in"),
        "required": bool(param.get("required", False)),
        "description": _text(param.get("description")),
        "deprecated": bool(param.get("deprecated", False)),
    }

    raw_schema = param.get("schema")
    if raw_schema is not None:
        resolved = resolve_schema(raw_schema, schemas)
        schema = extract_schema_structure(resolved or raw_schema, schemas)
        normalized = _as_dict(schema)
        raw = _as_dict(raw_schema)

        fields["schema_info"] = schema
        fields["type"] = _first_present(normalized.get("type"), raw.get("type"), "string")
        fields.update(_present_only(
            format=_first_present(normalized.get("format"), raw.get("format")),
            example=_first_present(param.get("example"), normalized.get("example"), raw.get("example")),
            default=_first_present(normalized.get("default"), raw.get("default")),
            enum=_first_present(normalized.get("enum"), raw.get("enum")),
            minimum=normalized.get("minimum"),
            maximum=normalized.get("maximum"),
            min_length=normalized.get("minLength"),
            max_length=normalized.get("maxLength"),
            pattern=normalized.get("pattern"),
        ))
    else:
        fields["type"] = "string"

    # OpenAPI 3.0 직렬화 옵션은 선언된 경우에만
    fields.update(_present_only(style=param.get("style"), explode=param.get("explode")))

    return ParameterInfo(**fields)


def parse_parameters(parameters: Any, schemas: Dict[str, Any]) -> ParameterGroups:
    """파라미터를 위치별 그룹과 all 그룹으로 분류"""
    grouped = {location: [] for location in PARAMETER_LOCATIONS}
    all_parameters = []

    if isinstance(parameters, list):
        for param in parameters:
            param_info = parse_parameter(param, schemas)
            if param_info is None:
                continue
            all_parameters.append(param_info)
            if isinstance(param_info.location, str) and param_info.location in grouped:
                grouped[param_info.location].append(param_info)

    return ParameterGroups(all_parameters=all_parameters, **grouped)


def parse_request_body(request_body: Any, schemas: Dict[str, Any]) -> Optional[RequestBodyInfo]:
    """
    requestBody 를 content type 별로 정리

    리터럴 example 이 없는 content type 에만 generatedExample 을 만든다.
    대표 example 은 application/json 의 example, 없으면 생성된 예시를 쓴다.
    """
    if request_body is None:
        return None

    body = _as_dict(request_body)
    content_types = {}
    primary_example = None

    for content_type, media in _as_dict(body.get("content")).items():
        media = _as_dict(media)
        literal_example = media.get("example")
        media_fields = _present_only(example=literal_example, examples=media.get("examples"))

        content_schema = media.get("schema")
        if content_schema is None:
            content_types[content_type] = RequestMediaInfo(schema_info=None, generated_example=None, **media_fields)
            continue

        target = resolve_schema(content_schema, schemas) or content_schema
        generated = None if literal_example is not None else generate_mock_from_schema(target, schemas)

        content_types[content_type] = RequestMediaInfo(
            schema_info=extract_schema_structure(target, schemas),
            generated_example=generated,
            **media_fields
        )

        if content_type == JSON_CONTENT_TYPE:
            primary_example = _first_present(literal_example, generated)

    return RequestBodyInfo(
        required=bool(body.get("required", False)),
        description=_text(body.get("description")),
        content_types=content_types,
        example=primary_example,
    )


def parse_response_headers(headers: Dict[str, Any], schemas: Dict[str, Any]) -> Dict[str, HeaderInfo]:
    parsed = {}
    for header_name, header in headers.items():
        header = _as_dict(header)
        header_schema = header.get("schema")
        parsed[header_name] = HeaderInfo(
            description=_text(header.get("description")),
            schema_info=extract_schema_structure(header_schema, schemas) if header_schema is not None else None,
            required=bool(header.get("required", False)),
        )
    return parsed


def parse_responses(responses: Any, schemas: Dict[str, Any]) -> Dict[str, ResponseInfo]:
    """상태 코드별 응답 정리 (응답은 예시를 생성하지 않음)"""
    parsed = {}

    for status_code, response in _as_dict(responses).items():
        response = _as_dict(response)

        content = {}
        for content_type, media in _as_dict(response.get("content")).items():
            media = _as_dict(media)
            response_schema = media.get("schema")
            schema = None
            if response_schema is not None:
                target = resolve_schema(response_schema, schemas) or response_schema
                schema = extract_schema_structure(target, schemas)

            content[content_type] = ResponseMediaInfo(
                schema_info=schema,
                **_present_only(example=media.get("example"), examples=media.get("examples"))
            )

        response_fields = {
            "description": _text(response.get("description")),
            "content": content,
        }
        headers = response.get("headers")
        if headers and isinstance(headers, dict):
            response_fields["headers"] = parse_response_headers(headers, schemas)

        parsed[str(status_code)] = ResponseInfo(**response_fields)

    return parsed


def build_endpoint_overview(
    parameters: ParameterGroups,
    request_body: Optional[RequestBodyInfo],
    responses: Dict[str, ResponseInfo]
) -> EndpointOverview:
    """이미 파싱된 구조만으로 요약 정보를 계산"""
    return EndpointOverview(
        has_parameters=len(parameters.all_parameters) > 0,
        has_request_body=request_body is not None,
        parameter_count=ParameterCount(
            path=len(parameters.path),
            query=len(parameters.query),
            header=len(parameters.header),
            cookie=len(parameters.cookie),
            total=len(parameters.all_parameters),
        ),
        required_parameters=[
            RequiredParameter(name=param.name, location=param.location, type=param.type)
            for param in parameters.all_parameters
            if param.required
        ],
        request_body_required=request_body.required if request_body else False,
        request_body_content_types=list(request_body.content_types.keys()) if request_body else [],
        response_status_codes=list(responses.keys()),
    )


def parse_operation(
    path: str,
    method: str,
    operation: Dict[str, Any],
    schemas: Dict[str, Any],
    global_security: Any = None
) -> EndpointRecord:
    """operation 하나를 EndpointRecord 로 변환"""
    parameters = parse_parameters(operation.get("parameters"), schemas)
    request_body = parse_request_body(operation.get("requestBody"), schemas)
    responses = parse_responses(operation.get("responses"), schemas)

    tags = operation.get("tags")
    security = _first_present(operation.get("security"), global_security)

    return EndpointRecord(
        path=path,
        method=method.upper(),
        summary=_text(operation.get("summary")),
        description=_text(operation.get("description")),
        operation_id=_text(operation.get("operationId")),
        tags=tags if isinstance(tags, list) else [],
        parameters=parameters,
        request_body=request_body,
        responses=responses,
        security=security if isinstance(security, list) else [],
        overview=build_endpoint_overview(parameters, request_body, responses),
    )


def extract_endpoint_details(openapi_data: Any) -> List[EndpointRecord]:
    """
    OpenAPI 문서의 모든 path / method 를 EndpointRecord 목록으로 변환

    method 는 get, post, put, patch, delete, options, head 순서로 확인한다.
    paths 가 없거나 구조가 깨진 문서는 예외 없이 빈 목록을 반환한다.

    Args:
        openapi_data: OpenAPI 문서

    Returns:
        List[EndpointRecord]: 선언 순서대로 정렬된 엔드포인트 레코드
    """
    document = _as_dict(openapi_data)
    schemas = get_component_schemas(document)
    global_security = document.get("security")

    endpoints = []
    for path, path_item in _as_dict(document.get("paths")).items():
        if not isinstance(path_item, dict):
            continue

        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            endpoints.append(parse_operation(str(path), method, operation, schemas, global_security))

    return endpoints
