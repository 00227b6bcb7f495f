from typing import Any, Dict

from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from app.common.response.code import BaseCode


class ResponseTemplate:
    """
    클라이언트(Flutter 패널)와 약속된 응답 포맷

    성공 응답은 본문을 그대로, 실패 응답은 {message, ...data} 형태로 내려준다.
    """

    @classmethod
    def success(cls, code: BaseCode, data: Dict[str, Any] = None, include_message: bool = False):
        response_body = {}
        if include_message:
            response_body["message"] = code.message()
        if data:
            response_body.update(data)

        return JSONResponse(content=jsonable_encoder(response_body), status_code=code.status_code())

    @classmethod
    def raw(cls, content: Any, status_code: int = 200):
        # mock 응답처럼 본문이 dict 가 아닐 수도 있는 경우
        return JSONResponse(content=jsonable_encoder(content), status_code=status_code)

    @classmethod
    def fail(cls, code: BaseCode, custom_message: str = None, data: Dict[str, Any] = None):
        status_code = code.status_code()
        message = custom_message or code.message()

        response_body = {"message": message}
        if data:
            response_body.update(data)

        return JSONResponse(content=jsonable_encoder(response_body), status_code=status_code)
