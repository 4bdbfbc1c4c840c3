"""
strings 服务的响应模型
"""

from __future__ import annotations

import json
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from strings_panel.core.exceptions import ResponseParseError

ModelT = TypeVar("ModelT", bound=BaseModel)


class StringProperties(BaseModel):
    """state 的派生属性（由后端计算）"""

    original_string: str = Field(..., alias="originalString", description="原始字符串")
    is_palindrome: bool = Field(..., alias="isPalindrome", description="是否为回文")
    reversed: str = Field(..., description="反转后的字符串")
    fifth_char: str | None = Field(None, alias="fifthChar", description="第五个字符，不存在时为 null")

    model_config = ConfigDict(populate_by_name=True)


class TwoPropObject(BaseModel):
    """包含一个字符串和一个整数字段的对象"""

    prop1: str
    prop2: int


def parse_model(model_cls: type[ModelT], body: str) -> ModelT:
    """
    将响应体反序列化为指定模型

    Raises:
        ResponseParseError: 不是合法 JSON 或字段不匹配
    """
    try:
        return model_cls.model_validate_json(body)
    except ValidationError as e:
        raise ResponseParseError(
            f"无法解析为 {model_cls.__name__}: {e.error_count()} 个字段错误", raw_body=body
        ) from e


def decode_json_string(body: str) -> str:
    """
    解码 JSON 字符串响应（如 ``"abc"`` -> ``abc``）

    Raises:
        ResponseParseError: 响应体不是 JSON 字符串
    """
    try:
        value = json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"响应不是有效的 JSON: {e.msg}", raw_body=body) from e
    if not isinstance(value, str):
        raise ResponseParseError(
            f"期望 JSON 字符串，实际为 {type(value).__name__}", raw_body=body
        )
    return value


def encode_json_string(value: str) -> bytes:
    """将字符串编码为 JSON 字符串请求体"""
    return json.dumps(value, ensure_ascii=False).encode("utf-8")
