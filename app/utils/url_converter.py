import re
from typing import Dict, Pattern, Tuple

from fastapi import Request

_PATH_PARAM_PATTERN = re.compile(r"\{([^{}/]+)\}")


def convert_path_template(path: str) -> str:
    """
    OpenAPI path 템플릿을 라우터 파라미터 문법으로 변환

    예: /pets/{id} → /pets/:id
    """
    return path.replace("{", ":").replace("}", "")


def build_path_pattern(path: str) -> Tuple[Pattern, Dict[str, str]]:
    """
    OpenAPI path 템플릿을 요청 경로 매칭용 정규식으로 변환

    {name} 자리는 슬래시를 제외한 한 구간과 매칭되고 named group 으로 캡처된다.
    끝의 슬래시는 있어도 없어도 매칭된다.
    """
    regex_parts = []
    group_names = {}
    last_end = 0

    for match in _PATH_PARAM_PATTERN.finditer(path):
        regex_parts.append(re.escape(path[last_end:match.start()]))
        # 파라미터 이름이 정규식 group 이름으로 쓸 수 없는 경우가 있어 치환
        group_name = f"p{len(group_names)}"
        group_names[group_name] = match.group(1)
        regex_parts.append(f"(?P<{group_name}>[^/]+)")
        last_end = match.end()
    regex_parts.append(re.escape(path[last_end:].rstrip("/")))

    return re.compile("^" + "".join(regex_parts) + "/?$"), group_names


def build_mock_base_url(request: Request) -> str:
    """프록시 뒤에 있어도 외부에서 접근 가능한 origin 을 계산"""
    protocol = request.headers.get("x-forwarded-proto") or request.url.scheme
    host = request.headers.get("host") or request.url.netloc
    return f"{protocol}://{host}"
