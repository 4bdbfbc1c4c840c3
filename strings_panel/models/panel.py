"""
面板 API 的请求/响应模型
"""

from datetime import datetime

from pydantic import BaseModel, Field


class FieldValueRequest(BaseModel):
    """输入框内容更新请求"""

    value: str = Field(..., description="输入框的新内容")


class NotificationResponse(BaseModel):
    """一条提示消息"""

    message: str
    created_at: datetime


class FormSnapshotResponse(BaseModel):
    """表单快照"""

    fields: dict[str, str] = Field(default_factory=dict, description="各字段当前显示内容")
    invalid_fields: list[str] = Field(default_factory=list, description="被标记为无效输入的字段")
    notifications: list[NotificationResponse] = Field(default_factory=list)
