"""
输入校验与分隔符显示转换
"""

from __future__ import annotations

import json

from strings_panel.core.constants import SPACE_PLACEHOLDER
from strings_panel.core.exceptions import ResponseParseError


def is_valid_state(value: str) -> bool:
    """state 至少一个字符"""
    return len(value) >= 1


def placeholder_to_splitter(text: str) -> str:
    """将输入框中的占位符还原为空格"""
    return text.replace(SPACE_PLACEHOLDER, " ")


def is_valid_splitter(text: str) -> bool:
    """还原占位符后必须恰好一个字符，且不能是空字符"""
    splitter = placeholder_to_splitter(text)
    return len(splitter) == 1 and splitter != "\0"


def splitter_to_display(splitter: str) -> str:
    """空格显示为占位符，其余字符原样显示"""
    return SPACE_PLACEHOLDER if splitter == " " else splitter


def parse_splitter_response(body: str) -> str:
    """
    从后端响应中取出分隔符字符

    响应通常是带引号的 JSON 字符串（如 ``" "``）；无法按 JSON 解码时去掉首尾引号。

    Raises:
        ResponseParseError: 去掉引号后没有字符
    """
    value: object
    try:
        value = json.loads(body)
    except json.JSONDecodeError:
        value = None

    if not isinstance(value, str):
        text = body
        if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
            text = text[1:-1]
        value = text

    if not value:
        raise ResponseParseError("分隔符响应为空", raw_body=body)
    return value[0]
