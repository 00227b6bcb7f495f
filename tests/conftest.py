"""
Shared fixtures: a small pet store document and a FastAPI test client whose
Swagger fetcher serves in-memory documents instead of hitting the network.
"""

import copy

import pytest
from fastapi.testclient import TestClient

from app.business.openapi.swagger_fetcher import SwaggerFetchError, SwaggerFetcher
from app.dependencies import get_mock_server_service, get_swagger_fetcher
from app.main import app
from app.services.mock.mock_server_service import MockServerService

PETSTORE_URL = "https://example.com/petstore.json"

PETSTORE_DOCUMENT = {
    "openapi": "3.0.3",
    "info": {"title": "Pet Store", "description": "Pets for testing", "version": "1.2.0"},
    "servers": [{"url": "https://api.example.com/v1"}],
    "security": [{"apiKey": []}],
    "paths": {
        "/pets": {
            "get": {
                "summary": "List pets",
                "operationId": "listPets",
                "tags": ["pets"],
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "required": False,
                        "schema": {"type": "integer", "format": "int32", "minimum": 1, "maximum": 100},
                    },
                    {
                        "name": "X-Request-Id",
                        "in": "header",
                        "required": True,
                        "schema": {"type": "string"},
                        "example": "req-1",
                    },
                ],
                "responses": {
                    "200": {
                        "description": "A list of pets",
                        "headers": {
                            "X-Total": {"description": "Total pets", "schema": {"type": "integer"}},
                        },
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}},
                            },
                        },
                    },
                },
            },
            "post": {
                "summary": "Create pet",
                "tags": ["pets", "admin"],
                "security": [],
                "requestBody": {
                    "required": True,
                    "content": {
                        "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
                        "application/xml": {"schema": {"$ref": "#/components/schemas/Pet"}, "example": "<pet/>"},
                    },
                },
                "responses": {"201": {"description": "Created"}},
            },
        },
        "/pets/{id}": {
            "parameters": [{"name": "id", "in": "path", "required": True}],
            "get": {
                "summary": "Get pet",
                "tags": ["pets"],
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}},
                ],
                "responses": {
                    "200": {
                        "description": "A pet",
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Pet"}}},
                    },
                    "404": {"description": "Not found"},
                },
            },
            "delete": {
                "summary": "Delete pet",
                "responses": {"204": {"description": "Deleted"}},
            },
        },
    },
    "components": {
        "securitySchemes": {"apiKey": {"type": "apiKey", "in": "header", "name": "X-API-Key"}},
        "schemas": {
            "Pet": {
                "type": "object",
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": "integer", "format": "int64"},
                    "name": {"type": "string", "example": "alice"},
                    "tag": {"type": "string"},
                    "vaccinated": {"type": "boolean"},
                },
            },
        },
    },
}


class FakeSwaggerFetcher(SwaggerFetcher):
    """Serves documents from a dict keyed by URL; unknown URLs fail like a 404."""

    def __init__(self, documents=None):
        self.documents = documents or {}
        self.requested_urls = []

    async def fetch_spec(self, url):
        self.requested_urls.append(url)
        if url not in self.documents:
            raise SwaggerFetchError(f"Client error '404 Not Found' for url '{url}'")
        return copy.deepcopy(self.documents[url])


@pytest.fixture
def petstore_document():
    return copy.deepcopy(PETSTORE_DOCUMENT)


@pytest.fixture
def pet_schemas(petstore_document):
    return petstore_document["components"]["schemas"]


@pytest.fixture
def swagger_fetcher():
    return FakeSwaggerFetcher({PETSTORE_URL: PETSTORE_DOCUMENT})


@pytest.fixture
def mock_server_service():
    return MockServerService()


@pytest.fixture
def client(swagger_fetcher, mock_server_service):
    app.dependency_overrides[get_swagger_fetcher] = lambda: swagger_fetcher
    app.dependency_overrides[get_mock_server_service] = lambda: mock_server_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def petstore_url():
    return PETSTORE_URL
