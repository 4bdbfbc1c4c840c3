"""
strings 服务请求构建工具

负责:
- 拼接 base_url 与路径片段
- 构建各接口的 httpx.Request（GET / PUT JSON 字符串）
- URL 脱敏（用于日志记录）
"""

from __future__ import annotations

import re

import httpx

from strings_panel.core.constants import (
    CRASH_PATH,
    JSON_CONTENT_TYPE,
    PROPERTIES_PATH,
    SPLIT_PATH,
    SPLITTER_PATH,
    STATE_PATH,
    STRINGS_PATH,
    TWO_PROP_PATH,
)
from strings_panel.models.strings import encode_json_string

_SENSITIVE_QUERY_PARAMS_PATTERN = re.compile(
    r"([?&])(key|api_key|apikey|token|secret|password)=([^&]*)",
    re.IGNORECASE,
)


def redact_url_for_log(url: str) -> str:
    """将 URL 中的敏感查询参数替换为 ***"""
    return _SENSITIVE_QUERY_PARAMS_PATTERN.sub(r"\1\2=***", url)


def build_url(base_url: str, *fragments: str) -> str:
    """
    拼接完整请求 URL

    兼容 base_url 末尾带或不带斜杠：
    - http://ndrwksr.com
    - http://ndrwksr.com/
    """
    path = "".join(fragments)
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base_url.rstrip('/')}{path}"


class StringsRequestFactory:
    """按当前 base_url 生成各接口请求"""

    def __init__(self, base_url: str):
        self.base_url = base_url

    def _get(self, *fragments: str) -> httpx.Request:
        return httpx.Request("GET", build_url(self.base_url, *fragments))

    def _put_json_string(self, value: str, *fragments: str) -> httpx.Request:
        return httpx.Request(
            "PUT",
            build_url(self.base_url, *fragments),
            content=encode_json_string(value),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    def get_state(self) -> httpx.Request:
        return self._get(STRINGS_PATH, STATE_PATH)

    def put_state(self, state: str) -> httpx.Request:
        return self._put_json_string(state, STRINGS_PATH, STATE_PATH)

    def get_splitter(self) -> httpx.Request:
        return self._get(STRINGS_PATH, STATE_PATH, SPLITTER_PATH)

    def put_splitter(self, splitter: str) -> httpx.Request:
        return self._put_json_string(splitter, STRINGS_PATH, STATE_PATH, SPLITTER_PATH)

    def get_split_state(self) -> httpx.Request:
        return self._get(STRINGS_PATH, STATE_PATH, SPLIT_PATH)

    def get_properties(self) -> httpx.Request:
        return self._get(STRINGS_PATH, STATE_PATH, PROPERTIES_PATH)

    def get_two_prop(self) -> httpx.Request:
        return self._get(STRINGS_PATH, TWO_PROP_PATH)

    def crash(self) -> httpx.Request:
        return self._get(CRASH_PATH)
