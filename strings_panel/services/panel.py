"""
strings 面板

界面上的每个按钮对应一个动作：
- get_state / submit_state: 获取/提交 state
- get_splitter / submit_splitter: 获取/提交分隔符
- get_two_prop: 获取两字段对象
- crash: 让后端服务崩溃

state 或分隔符每次成功更新（获取或提交）后，都会刷新派生属性：
按分隔符拆分后的 state 以及 state 的属性对象，两个请求并发且互不影响。
"""

from __future__ import annotations

import asyncio
from typing import Callable

from strings_panel.config import config
from strings_panel.core.constants import (
    MSG_CRASHED,
    MSG_GET_PROPERTIES_FAILED,
    MSG_GET_SPLIT_STATE_FAILED,
    MSG_GET_SPLITTER_FAILED,
    MSG_GET_STATE_FAILED,
    MSG_GET_TWO_PROP_FAILED,
    MSG_SET_SPLITTER_FAILED,
    MSG_SET_STATE_FAILED,
)
from strings_panel.core.error_utils import truncate_body
from strings_panel.core.exceptions import ResponseParseError
from strings_panel.core.logger import logger
from strings_panel.models.strings import (
    StringProperties,
    TwoPropObject,
    decode_json_string,
    parse_model,
)
from strings_panel.services.orchestration import (
    RequestDispatcher,
    is_valid_splitter,
    is_valid_state,
    parse_splitter_response,
    placeholder_to_splitter,
    splitter_to_display,
)
from strings_panel.services.requests import StringsRequestFactory
from strings_panel.services.transport import Transport, TransportResult
from strings_panel.ui.form import FormField, FormState


class StringsPanel:
    """strings 面板控制器"""

    def __init__(
        self,
        transport: Transport | None = None,
        form: FormState | None = None,
        base_url: str | None = None,
    ) -> None:
        self.form = form or FormState()
        self.requests = StringsRequestFactory(base_url or config.base_url)
        self.dispatcher = RequestDispatcher(transport or Transport(), self.form)

    @property
    def actions(self) -> dict[str, Callable[[], asyncio.Task[TransportResult] | None]]:
        return {
            "get_state": self.get_state,
            "submit_state": self.submit_state,
            "get_splitter": self.get_splitter,
            "submit_splitter": self.submit_splitter,
            "get_two_prop": self.get_two_prop,
            "crash": self.crash,
        }

    def run_action(self, name: str) -> asyncio.Task[TransportResult] | None:
        """按名称触发按钮动作"""
        action = self.actions.get(name)
        if action is None:
            raise KeyError(name)
        logger.info("触发动作: {}", name)
        return action()

    async def wait_idle(self) -> None:
        await self.dispatcher.wait_idle()

    # ------------------------------------------------------------------
    # 按钮动作
    # ------------------------------------------------------------------

    def get_state(self) -> asyncio.Task[TransportResult] | None:
        return self.dispatcher.dispatch(
            self.requests.get_state,
            failure_message=MSG_GET_STATE_FAILED,
            on_success=self.on_state_updated,
            form_field=FormField.STATE,
        )

    def submit_state(self) -> asyncio.Task[TransportResult] | None:
        return self.dispatcher.dispatch(
            lambda: self.requests.put_state(self.form.get_text(FormField.STATE)),
            failure_message=MSG_SET_STATE_FAILED,
            validator=lambda: is_valid_state(self.form.get_text(FormField.STATE)),
            on_success=self.on_state_updated,
            form_field=FormField.STATE,
        )

    def get_splitter(self) -> asyncio.Task[TransportResult] | None:
        return self.dispatcher.dispatch(
            self.requests.get_splitter,
            failure_message=MSG_GET_SPLITTER_FAILED,
            on_success=self.on_splitter_updated,
            form_field=FormField.SPLITTER,
        )

    def submit_splitter(self) -> asyncio.Task[TransportResult] | None:
        return self.dispatcher.dispatch(
            lambda: self.requests.put_splitter(
                placeholder_to_splitter(self.form.get_text(FormField.SPLITTER))
            ),
            failure_message=MSG_SET_SPLITTER_FAILED,
            validator=lambda: is_valid_splitter(self.form.get_text(FormField.SPLITTER)),
            on_success=self.on_splitter_updated,
            form_field=FormField.SPLITTER,
        )

    def get_two_prop(self) -> asyncio.Task[TransportResult] | None:
        return self.dispatcher.dispatch(
            self.requests.get_two_prop,
            failure_message=MSG_GET_TWO_PROP_FAILED,
            on_success=self.on_two_prop_fetched,
        )

    def crash(self) -> asyncio.Task[TransportResult] | None:
        return self.dispatcher.dispatch(
            self.requests.crash,
            failure_message=MSG_CRASHED,
        )

    def refresh_properties(self) -> None:
        """刷新派生属性：拆分结果与属性对象"""
        self.dispatcher.dispatch(
            self.requests.get_split_state,
            failure_message=MSG_GET_SPLIT_STATE_FAILED,
            on_success=self.on_split_state_fetched,
        )
        self.dispatcher.dispatch(
            self.requests.get_properties,
            failure_message=MSG_GET_PROPERTIES_FAILED,
            on_success=self.on_properties_fetched,
        )

    # ------------------------------------------------------------------
    # 成功回调
    # ------------------------------------------------------------------

    def on_state_updated(self, body: str) -> None:
        try:
            state = decode_json_string(body)
        except ResponseParseError as e:
            # 非 JSON 字符串时按原文显示
            logger.error("[PARSE] state 响应解析失败: {} body={}", e.message, truncate_body(body))
            state = body

        self.form.run_on_ui(lambda: self.form.set_text(FormField.STATE, state))
        logger.info("state 已更新")
        self.refresh_properties()

    def on_splitter_updated(self, body: str) -> None:
        try:
            splitter = parse_splitter_response(body)
        except ResponseParseError as e:
            logger.error("[PARSE] 分隔符响应解析失败: {} body={}", e.message, truncate_body(body))
            return

        display = splitter_to_display(splitter)
        self.form.run_on_ui(lambda: self.form.set_text(FormField.SPLITTER, display))
        logger.info("分隔符已更新: {!r}", splitter)
        self.refresh_properties()

    def on_two_prop_fetched(self, body: str) -> None:
        try:
            two_prop = parse_model(TwoPropObject, body)
        except ResponseParseError as e:
            logger.error("[PARSE] {} body={}", e.message, truncate_body(body))
            return

        def apply() -> None:
            self.form.set_text(FormField.PROP_ONE, two_prop.prop1)
            self.form.set_text(FormField.PROP_TWO, str(two_prop.prop2))

        self.form.run_on_ui(apply)

    def on_split_state_fetched(self, body: str) -> None:
        # 拆分结果的格式由后端决定，按原文显示
        self.form.run_on_ui(lambda: self.form.set_text(FormField.SPLIT_STATE, body))

    def on_properties_fetched(self, body: str) -> None:
        try:
            properties = parse_model(StringProperties, body)
        except ResponseParseError as e:
            logger.error("[PARSE] {} body={}", e.message, truncate_body(body))
            self.form.run_on_ui(lambda: self.form.notify(MSG_GET_PROPERTIES_FAILED))
            return

        def apply() -> None:
            self.form.set_text(FormField.ORIGINAL, properties.original_string)
            self.form.set_text(FormField.FIFTH_CHAR, properties.fifth_char or "")
            self.form.set_text(FormField.PALINDROME, "true" if properties.is_palindrome else "false")
            self.form.set_text(FormField.REVERSED, properties.reversed)

        self.form.run_on_ui(apply)
