"""
表单状态（界面协作方）

保存各字段的显示内容、无效输入标记和提示消息。
所有修改都应通过 run_on_ui 在所属事件循环上执行。
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable


class FormField(str, Enum):
    """表单字段"""

    STATE = "state"  # 输入框
    SPLITTER = "splitter"  # 输入框
    ORIGINAL = "original"
    SPLIT_STATE = "split_state"
    FIFTH_CHAR = "fifth_char"
    PALINDROME = "palindrome"
    REVERSED = "reversed"
    PROP_ONE = "prop_one"
    PROP_TWO = "prop_two"


INPUT_FIELDS = frozenset({FormField.STATE, FormField.SPLITTER})


@dataclass(frozen=True)
class Notification:
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FormState:
    """内存中的表单"""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop
        self._texts: dict[FormField, str] = {f: "" for f in FormField}
        self._invalid: set[FormField] = set()
        self._notifications: list[Notification] = []

    def bind_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        """绑定所属事件循环（仅首次生效）"""
        if self._loop is None:
            self._loop = loop

    def run_on_ui(self, callback: Callable[[], Any]) -> None:
        """
        在所属事件循环上执行界面更新

        已在该循环中时直接执行；从其他线程调用时通过 call_soon_threadsafe 投递。
        """
        loop = self._loop
        if loop is None or loop.is_closed():
            callback()
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is loop:
            callback()
        else:
            loop.call_soon_threadsafe(callback)

    def get_text(self, form_field: FormField) -> str:
        return self._texts[form_field]

    def set_text(self, form_field: FormField, text: str) -> None:
        self._texts[form_field] = text

    def set_invalid(self, form_field: FormField, invalid: bool) -> None:
        if invalid:
            self._invalid.add(form_field)
        else:
            self._invalid.discard(form_field)

    def is_invalid(self, form_field: FormField) -> bool:
        return form_field in self._invalid

    def notify(self, message: str) -> None:
        """显示一条短暂提示"""
        self._notifications.append(Notification(message=message))

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    def clear_notifications(self) -> None:
        self._notifications.clear()

    def snapshot(self) -> dict[str, Any]:
        return {
            "fields": {f.value: text for f, text in self._texts.items()},
            "invalid_fields": sorted(f.value for f in self._invalid),
            "notifications": [
                {"message": n.message, "created_at": n.created_at} for n in self._notifications
            ],
        }
