import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api import api_router
from app.core.config import settings
from app.common.exceptionhandler import register_exception_handler
from app.common.middleware.cors_middleware import register_cors_middleware

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    logger.info(f"Mock server running on port {settings.PORT}")

    yield

    logger.info("Shutting down Swagger Mock Server...")


app = FastAPI(
    title="Swagger Mock Server",
    description="Swagger/OpenAPI 문서로부터 Mock API 와 엔드포인트 상세 정보를 만들어 주는 API입니다.",
    version="1.0.0",
    docs_url="/api/swagger",
    lifespan=lifespan
)

app.include_router(api_router)

register_cors_middleware(app)
register_exception_handler(app)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
