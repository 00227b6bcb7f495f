import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """애플리케이션 설정"""

    # 서버 설정
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS 설정
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["Content-Type"]

    # 스키마 분석 설정
    SCHEMA_MAX_DEPTH: int = int(os.getenv("SCHEMA_MAX_DEPTH", "10"))

    # 페이지네이션 설정
    DEFAULT_PAGE: int = int(os.getenv("DEFAULT_PAGE", "1"))
    DEFAULT_PAGE_LIMIT: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "50"))

    # Swagger 문서 요청 설정 (0이면 타임아웃 없음)
    SWAGGER_FETCH_TIMEOUT_SECONDS: float = float(os.getenv("SWAGGER_FETCH_TIMEOUT_SECONDS", "30"))

    @classmethod
    def get_cors_origins(cls) -> List[str]:
        """CORS 허용 origin 목록을 리스트로 반환"""
        return [origin.strip() for origin in cls.CORS_ALLOW_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def get_fetch_timeout(cls):
        """httpx 에 넘길 timeout 값 반환 (None 이면 제한 없음)"""
        if cls.SWAGGER_FETCH_TIMEOUT_SECONDS <= 0:
            return None
        return cls.SWAGGER_FETCH_TIMEOUT_SECONDS


settings = Settings()
