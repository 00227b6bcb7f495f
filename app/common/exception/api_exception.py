from typing import Any, Dict

from app.common.response.code.base_code import BaseCode

class ApiException(Exception):
    def __init__(self, code: BaseCode, message: str = None, data: Dict[str, Any] = None):
        self.code = code
        self.message = message or code.message()
        self.data = data
        super().__init__(self.code)
