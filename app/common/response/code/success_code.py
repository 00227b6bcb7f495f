from app.common.response.code.base_code import BaseCode

class SuccessCode(BaseCode):
    SUCCESS_CODE = ("요청 처리에 성공하였습니다.", 200)
    MOCK_API_CREATED = ("Mock API created successfully", 200)
