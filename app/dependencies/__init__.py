from .services import get_mock_server_service, get_swagger_fetcher

# Singleton Instance 관리 패키지
__all__ = [
    "get_mock_server_service",
    "get_swagger_fetcher",
]
