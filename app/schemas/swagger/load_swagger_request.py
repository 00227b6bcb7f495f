from typing import Optional, Union

from pydantic import BaseModel, Field


class LoadSwaggerRequest(BaseModel):
    """Swagger 로드 요청 (url 누락은 라우터에서 400 으로 처리)"""
    url: Optional[str] = Field(None, description="Swagger/OpenAPI 문서 URL")
    page: Optional[Union[int, str]] = Field(None, description="페이지 번호 (query 우선)")
    limit: Optional[Union[int, str]] = Field(None, description="페이지 크기 (query 우선)")
