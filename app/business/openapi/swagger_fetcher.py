import json
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any

import httpx
import yaml

from app.core.config import settings

logger = logging.getLogger(__name__)


class SwaggerFetchError(Exception):
    """Swagger 문서 요청/파싱 실패 (원인 메시지를 그대로 담는다)"""


class SwaggerFetcher(ABC):
    """Swagger 문서 조회 인터페이스"""

    @abstractmethod
    async def fetch_spec(self, url: str) -> Dict[str, Any]:
        """URL 에서 OpenAPI 문서를 가져와 dict 로 반환"""
        pass


def parse_spec_text(text: str) -> Dict[str, Any]:
    """
    응답 본문을 OpenAPI 문서로 파싱 (JSON 우선, 실패하면 YAML)

    Raises:
        SwaggerFetchError: 파싱 실패 또는 최상위가 객체가 아닌 경우
    """
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SwaggerFetchError(f"Invalid Swagger document: {e}") from e

    if not isinstance(data, dict):
        raise SwaggerFetchError("Swagger document must be a JSON or YAML object")
    return data


class HttpxSwaggerFetcher(SwaggerFetcher):
    """httpx 로 원격 Swagger 문서를 가져오는 구현체"""

    def __init__(self, timeout: float = None, transport: httpx.AsyncBaseTransport = None):
        self._timeout = timeout if timeout is not None else settings.get_fetch_timeout()
        self._transport = transport

    async def fetch_spec(self, url: str) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=self._timeout,
                transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Swagger 문서 요청 실패: {url} - {e}")
            raise SwaggerFetchError(str(e)) from e

        return parse_spec_text(response.text)
