from functools import lru_cache

from app.business.openapi.swagger_fetcher import HttpxSwaggerFetcher, SwaggerFetcher
from app.services.mock.mock_server_service import MockServerService


@lru_cache()
def get_mock_server_service() -> MockServerService:
    return MockServerService()


@lru_cache()
def get_swagger_fetcher() -> SwaggerFetcher:
    return HttpxSwaggerFetcher()
