"""
请求分发器

一次分发的流程：
1. 清除关联输入框的无效标记
2. 如有校验函数且校验未通过：标记输入框，不发送请求
3. 调用 request_builder 生成请求（在分发时生成，反映当前输入内容）
4. 在后台任务中发送；成功时把响应体交给 on_success，失败时显示 failure_message

失败不重试。
"""

from __future__ import annotations

import asyncio
from functools import partial
from typing import Callable

import httpx

from strings_panel.core.logger import logger
from strings_panel.services.transport import Transport, TransportResult
from strings_panel.ui.form import FormField, FormState


class RequestDispatcher:
    """按钮动作到网络请求的编排"""

    def __init__(self, transport: Transport, form: FormState) -> None:
        self.transport = transport
        self.form = form
        self._pending: set[asyncio.Task[TransportResult]] = set()

    def dispatch(
        self,
        request_builder: Callable[[], httpx.Request],
        *,
        failure_message: str,
        validator: Callable[[], bool] | None = None,
        on_success: Callable[[str], None] | None = None,
        form_field: FormField | None = None,
    ) -> asyncio.Task[TransportResult] | None:
        """
        分发一次请求

        Args:
            request_builder: 无参函数，返回完整请求
            failure_message: 请求失败时显示给用户的提示
            validator: 可选的无参校验函数，返回 False 时不发送请求
            on_success: 可选的成功回调，接收响应体文本
            form_field: 校验失败时被标记的输入框

        Returns:
            后台发送任务；校验未通过或请求构建失败时为 None
        """
        if form_field is not None:
            self.form.set_invalid(form_field, False)

        if validator is not None and not validator():
            if form_field is not None:
                self.form.set_invalid(form_field, True)
            logger.warning("输入校验未通过，已取消请求: field={}", getattr(form_field, "value", None))
            return None

        # 校验未通过时不需要事件循环
        loop = asyncio.get_running_loop()
        self.form.bind_loop(loop)

        try:
            request = request_builder()
        except Exception:
            logger.exception("构建请求失败: {}", failure_message)
            self.form.run_on_ui(partial(self.form.notify, failure_message))
            return None

        logger.debug("分发请求: {} {}", request.method, request.url)
        task = loop.create_task(
            self.transport.send(
                request,
                on_success,
                partial(self.form.run_on_ui, partial(self.form.notify, failure_message)),
            )
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def wait_idle(self) -> None:
        """等待所有进行中的请求完成（包括完成回调中新分发的请求）"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
