import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from app.business.openapi.swagger_fetcher import SwaggerFetchError, SwaggerFetcher
from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode, SuccessCode
from app.common.response.response_template import ResponseTemplate
from app.core.config import settings
from app.dependencies import get_mock_server_service, get_swagger_fetcher
from app.schemas.swagger import LoadSwaggerRequest
from app.services.mock.mock_server_service import MockServerService
from app.services.openapi.endpoint_parser import extract_endpoint_details
from app.utils.pagination import paginate, parse_positive_int
from app.utils.url_converter import build_mock_base_url

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    path="/load-swagger",
    summary="Swagger 로드 및 Mock API 생성 API",
    description="""
    url 의 Swagger/OpenAPI 문서를 가져와 현재 문서를 교체하고 mock 라우트를 다시 만든다.

    ## 응답:
    - 문서 info, 페이지네이션된 엔드포인트 상세, mockBaseUrl, securitySchemes, servers

    ## 참고사항:
    - page / limit 은 query 가 body 보다 우선 (기본 1 / 50)
    - 문서 요청에 실패하면 기존 상태는 그대로 유지된다
    """
)
async def load_swagger(
    http_request: Request,
    request: Optional[LoadSwaggerRequest] = Body(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    mock_server_service: MockServerService = Depends(get_mock_server_service),
    swagger_fetcher: SwaggerFetcher = Depends(get_swagger_fetcher)
):
    if request is None or not request.url:
        raise ApiException(FailureCode.SWAGGER_URL_REQUIRED)

    page = parse_positive_int(page, request.page, default=settings.DEFAULT_PAGE)
    limit = parse_positive_int(limit, request.limit, default=settings.DEFAULT_PAGE_LIMIT)

    try:
        openapi_data = await swagger_fetcher.fetch_spec(request.url)
    except SwaggerFetchError as e:
        logger.error(f"Swagger 로드 실패: {request.url} - {e}")
        return ResponseTemplate.fail(FailureCode.SWAGGER_LOAD_FAILED, data={"error": str(e)})

    # 1. 엔드포인트 상세 추출 (상태 교체 전)
    all_endpoints = extract_endpoint_details(openapi_data)

    # 2. 문서 + mock 라우트 교체
    state = mock_server_service.replace(openapi_data)
    endpoints, pagination = paginate(all_endpoints, page, limit)

    info = state.document.get("info") if isinstance(state.document.get("info"), dict) else {}
    components = state.document.get("components") if isinstance(state.document.get("components"), dict) else {}

    logger.info(f"Swagger 로드 완료: {info.get('title', '')} (엔드포인트 {len(all_endpoints)}개)")

    response = {
        "info": {
            "title": info.get("title") or "",
            "description": info.get("description") or "",
            "version": info.get("version") or "",
        },
        "pagination": pagination.model_dump(by_alias=True),
        "endpoints": [endpoint.to_response() for endpoint in endpoints],
        "mockBaseUrl": build_mock_base_url(http_request),
        "securitySchemes": components.get("securitySchemes") or {},
        "servers": state.document.get("servers") or [],
    }

    return ResponseTemplate.success(SuccessCode.MOCK_API_CREATED, response, include_message=True)


@router.get(
    path="/endpoints",
    summary="엔드포인트 리스트 조회 API",
    description="""
    마지막으로 로드한 문서의 엔드포인트 상세를 페이지네이션하여 반환한다.

    ## 필터:
    - method: HTTP 메서드 (대소문자 무시)
    - tag: 엔드포인트 태그
    """
)
async def get_endpoints(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    method: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    mock_server_service: MockServerService = Depends(get_mock_server_service)
):
    page = parse_positive_int(page, default=settings.DEFAULT_PAGE)
    limit = parse_positive_int(limit, default=settings.DEFAULT_PAGE_LIMIT)

    all_endpoints = mock_server_service.list_endpoints(method=method, tag=tag)
    endpoints, pagination = paginate(all_endpoints, page, limit)

    response = {
        "pagination": pagination.model_dump(by_alias=True),
        "endpoints": [endpoint.to_response() for endpoint in endpoints],
    }

    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, response)
