from app.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    INTERNAL_SERVER_ERROR = ("Internal server error", 500)
    SWAGGER_URL_REQUIRED = ("Swagger URL is required", 400)
    SWAGGER_NOT_LOADED = ("No Swagger data loaded. Please call /load-swagger first.", 404)
    SWAGGER_LOAD_FAILED = ("Failed to load Swagger", 500)
    MOCK_ROUTE_NOT_FOUND = ("No mock route matches this request", 404)
