import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode
from app.schemas.swagger.endpoint_record import EndpointRecord
from app.services.mock.mock_route_table import MockRouteTable
from app.services.openapi.endpoint_parser import extract_endpoint_details, get_component_schemas
from app.services.openapi.example_synthesizer import generate_mock_from_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwaggerState:
    """로드된 문서와 그 문서로 만든 mock 라우트 (항상 함께 교체된다)"""
    document: Dict[str, Any]
    component_schemas: Dict[str, Any]
    routes: MockRouteTable

    @property
    def has_paths(self) -> bool:
        return isinstance(self.document.get("paths"), dict)


class MockServerService:
    """
    현재 Swagger 문서와 mock 라우트 테이블을 소유하는 서비스

    새 문서를 로드하면 문서와 라우트를 한 번에 교체하므로, 동시에 처리 중인
    mock 요청은 이전 상태나 새 상태 중 하나만 보게 된다.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._state: Optional[SwaggerState] = None

    def replace(self, openapi_data: Dict[str, Any]) -> SwaggerState:
        # 라우트 테이블은 lock 밖에서 미리 만든다
        new_state = SwaggerState(
            document=openapi_data,
            component_schemas=get_component_schemas(openapi_data),
            routes=MockRouteTable.from_document(openapi_data),
        )

        with self._lock:
            previous = self._state
            self._state = new_state

        logger.info(
            f"Swagger 문서 교체 완료: mock 라우트 {len(previous.routes) if previous else 0}개 → "
            f"{len(new_state.routes)}개"
        )
        return new_state

    def snapshot(self) -> Optional[SwaggerState]:
        with self._lock:
            return self._state

    def get_loaded_state(self) -> SwaggerState:
        """paths 가 있는 문서가 로드되어 있지 않으면 404"""
        state = self.snapshot()
        if state is None or not state.has_paths:
            raise ApiException(FailureCode.SWAGGER_NOT_LOADED)
        return state

    def list_endpoints(self, method: str = None, tag: str = None) -> List[EndpointRecord]:
        """
        로드된 문서의 엔드포인트 목록 (method 는 대소문자 무시, tag 는 포함 여부)
        """
        endpoints = extract_endpoint_details(self.get_loaded_state().document)

        if method:
            method = method.upper()
            endpoints = [endpoint for endpoint in endpoints if endpoint.method == method]

        if tag:
            endpoints = [endpoint for endpoint in endpoints if tag in endpoint.tags]

        return endpoints

    def build_mock_response(self, method: str, path: str) -> Any:
        """
        요청과 매칭되는 mock 라우트의 응답 본문 생성

        200 응답의 JSON 스키마가 있으면 예시 값을, 없으면 기본 메시지를 반환한다.
        """
        state = self.snapshot()
        matched = state.routes.match(method, path) if state else None
        if matched is None:
            raise ApiException(
                FailureCode.MOCK_ROUTE_NOT_FOUND,
                f"No mock route for {method.upper()} {path}"
            )

        route, _ = matched
        if route.response_schema is not None:
            return generate_mock_from_schema(route.response_schema, state.component_schemas)

        return {"message": f"Mocked {route.method} {route.path_template}"}
