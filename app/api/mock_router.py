import logging

from fastapi import APIRouter, Depends, Request

from app.common.response.response_template import ResponseTemplate
from app.dependencies import get_mock_server_service
from app.services.mock.mock_server_service import MockServerService
from app.services.openapi.endpoint_parser import HTTP_METHODS

logger = logging.getLogger(__name__)
router = APIRouter()


# 다른 라우터가 모두 등록된 뒤 마지막에 포함되어야 한다
@router.api_route(
    path="/{mock_path:path}",
    methods=[method.upper() for method in HTTP_METHODS],
    summary="Mock API",
    description="로드된 Swagger 문서의 (method, path) 에 대해 200 응답 스키마 예시를 반환한다.",
    include_in_schema=False,
)
async def serve_mock(
    request: Request,
    mock_server_service: MockServerService = Depends(get_mock_server_service)
):
    content = mock_server_service.build_mock_response(request.method, request.url.path)
    return ResponseTemplate.raw(content)
