import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Pattern, Tuple

from app.services.openapi.endpoint_parser import HTTP_METHODS, JSON_CONTENT_TYPE
from app.utils.url_converter import build_path_pattern, convert_path_template

logger = logging.getLogger(__name__)

MOCK_RESPONSE_STATUS = "200"


@dataclass(frozen=True)
class MockRoute:
    """(method, path 템플릿) 하나에 대응하는 mock 라우트"""
    method: str
    path_template: str
    route_path: str
    pattern: Pattern
    group_names: Dict[str, str]
    response_schema: Any = None

    def match(self, method: str, path: str) -> Optional[Dict[str, str]]:
        """매칭되면 path 파라미터 dict, 아니면 None"""
        if method.upper() != self.method:
            return None
        matched = self.pattern.match(path)
        if matched is None:
            return None
        return {self.group_names[name]: value for name, value in matched.groupdict().items()}


def get_mock_response_schema(operation: Dict[str, Any]) -> Any:
    """200 응답의 application/json 스키마 (없으면 None)"""
    node = operation
    for key in ("responses", MOCK_RESPONSE_STATUS, "content", JSON_CONTENT_TYPE, "schema"):
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


@dataclass(frozen=True)
class MockRouteTable:
    """
    현재 서비스 중인 mock 라우트 전체

    문서를 로드할 때마다 통째로 새로 만들고, 요청은 등록 순서대로 처음 매칭된
    라우트가 처리한다.
    """
    routes: Tuple[MockRoute, ...] = field(default_factory=tuple)

    @classmethod
    def from_document(cls, openapi_data: Dict[str, Any]) -> "MockRouteTable":
        routes = []
        paths = openapi_data.get("paths") if isinstance(openapi_data, dict) else None
        if not isinstance(paths, dict):
            return cls()

        for path, path_item in paths.items():
            if not isinstance(path_item, dict):
                continue
            for method in HTTP_METHODS:
                operation = path_item.get(method)
                if not isinstance(operation, dict):
                    continue

                route_path = convert_path_template(str(path))
                pattern, group_names = build_path_pattern(str(path))
                logger.info(f"Registering mock route: [{method.upper()}] {route_path}")
                routes.append(MockRoute(
                    method=method.upper(),
                    path_template=str(path),
                    route_path=route_path,
                    pattern=pattern,
                    group_names=group_names,
                    response_schema=get_mock_response_schema(operation),
                ))

        return cls(routes=tuple(routes))

    def match(self, method: str, path: str) -> Optional[Tuple[MockRoute, Dict[str, str]]]:
        for route in self.routes:
            path_params = route.match(method, path)
            if path_params is not None:
                return route, path_params
        return None

    def describe(self) -> List[str]:
        return [f"{route.method} {route.route_path}" for route in self.routes]

    def __len__(self) -> int:
        return len(self.routes)
