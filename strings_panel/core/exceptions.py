"""
异常定义
"""

from __future__ import annotations


class StringsPanelError(Exception):
    """所有自定义异常的基类"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class TransportFailure(StringsPanelError):
    """
    一次请求的失败结果

    网络异常与非 2xx 响应都归为此类；非 2xx 的响应体不保留。
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ):
        if status_code is not None:
            message = f"{method} {url} 返回 HTTP {status_code}"
        elif cause is not None:
            message = f"{method} {url} 网络错误: {str(cause) or repr(cause)}"
        else:
            message = f"{method} {url} 请求失败"
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.cause = cause


class ResponseParseError(StringsPanelError):
    """响应体不是期望的 JSON 结构"""

    def __init__(self, message: str, raw_body: str = ""):
        super().__init__(message)
        self.raw_body = raw_body
