"""
HTTP 传输层

对单次请求的结果进行分类：
- 成功: 传输完成且状态码为 2xx，响应体完整读取为文本（空响应体视为 ""）
- 失败: 网络异常（超时、连接失败等）或非 2xx 状态码，非 2xx 的响应体丢弃

每次调用恰好产生一种结果，成功/失败回调只会触发其中一个，且只触发一次。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import httpx

from strings_panel.clients.http_client import HTTPClientPool
from strings_panel.core.error_utils import extract_error_message
from strings_panel.core.exceptions import TransportFailure
from strings_panel.core.logger import logger
from strings_panel.services.requests import redact_url_for_log


@dataclass(frozen=True)
class TransportResult:
    body: str | None = None
    failure: TransportFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


class Transport:
    """基于 httpx.AsyncClient 的单请求传输"""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        # 未指定时使用全局客户端池的默认客户端
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return await HTTPClientPool.get_default_client_async()

    async def fetch(self, request: httpx.Request) -> TransportResult:
        """执行请求并返回分类后的结果，不抛出异常"""
        method = request.method
        url = redact_url_for_log(str(request.url))

        try:
            client = await self._get_client()
            response = await client.send(request)
        except httpx.TimeoutException as e:
            failure = TransportFailure(method, url, cause=e)
            logger.warning("[NET] 请求超时: {} {}", method, url)
            return TransportResult(failure=failure)
        except httpx.HTTPError as e:
            failure = TransportFailure(method, url, cause=e)
            logger.warning("[NET] {}", extract_error_message(failure))
            return TransportResult(failure=failure)
        except Exception as e:
            failure = TransportFailure(method, url, cause=e)
            logger.exception("[NET] 请求异常: {} {}", method, url)
            return TransportResult(failure=failure)

        if not response.is_success:
            failure = TransportFailure(method, url, status_code=response.status_code)
            logger.warning("[NET] {}", failure.message)
            return TransportResult(failure=failure)

        body = response.text
        logger.debug("{} {} -> {} ({} chars)", method, url, response.status_code, len(body))
        return TransportResult(body=body)

    async def send(
        self,
        request: httpx.Request,
        on_success: Callable[[str], None] | None,
        on_failure: Callable[[], None],
    ) -> TransportResult:
        """
        执行请求并回调

        Args:
            request: 待发送的请求
            on_success: 成功时接收响应体，可为 None
            on_failure: 失败时调用

        Returns:
            本次请求的结果
        """
        result = await self.fetch(request)
        if not result.ok:
            on_failure()
            return result

        if on_success is not None:
            try:
                on_success(result.body)
            except Exception:
                # 回调异常不影响本次请求的结果，也不再触发失败回调
                logger.exception("成功回调处理异常: {} {}", request.method, request.url)
        return result
