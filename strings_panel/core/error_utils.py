"""
错误消息处理工具函数
"""

from __future__ import annotations


def extract_error_message(error: BaseException, status_code: int | None = None) -> str:
    """
    从异常中提取用于日志的错误消息

    Args:
        error: 异常对象
        status_code: 可选的 HTTP 状态码

    Returns:
        错误消息字符串
    """
    # 优先使用 message 属性（自定义异常已格式化）
    message = getattr(error, "message", None)
    if message and isinstance(message, str) and message.strip():
        error_str = message
    else:
        # str 可能为空，如 httpx 超时异常
        error_str = str(error) or repr(error)

    if status_code is not None:
        return f"HTTP {status_code}: {error_str}"
    return error_str


def truncate_body(body: str, limit: int = 200) -> str:
    """截断过长的响应体，避免日志噪音"""
    if len(body) <= limit:
        return body
    return f"{body[:limit]}...({len(body)} chars)"
