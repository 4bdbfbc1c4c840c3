"""
Orchestration 模块

提供请求编排相关的组件：
- RequestDispatcher: 请求分发器，负责校验、发送与结果路由
- validators: 输入校验与分隔符显示转换
"""

from .dispatcher import RequestDispatcher
from .validators import (
    is_valid_splitter,
    is_valid_state,
    parse_splitter_response,
    placeholder_to_splitter,
    splitter_to_display,
)

__all__ = [
    "RequestDispatcher",
    "is_valid_splitter",
    "is_valid_state",
    "parse_splitter_response",
    "placeholder_to_splitter",
    "splitter_to_display",
]
