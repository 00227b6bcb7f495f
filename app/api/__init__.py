from fastapi import APIRouter

from app.api.swagger_router import router as swagger_router
from app.api.mock_router import router as mock_router

api_router = APIRouter()
api_router.include_router(
    swagger_router,
    tags=["Swagger Mock"]
)

# catch-all 이므로 반드시 마지막
api_router.include_router(
    mock_router,
    tags=["Mock"]
)
