"""
面板 API

把输入框与按钮暴露为 HTTP 接口，供前端页面驱动。
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from strings_panel.models.panel import FieldValueRequest, FormSnapshotResponse
from strings_panel.services.panel import StringsPanel
from strings_panel.ui.form import INPUT_FIELDS, FormField

router = APIRouter(prefix="/panel", tags=["Strings Panel"])


def get_panel(request: Request) -> StringsPanel:
    return request.app.state.panel


def _snapshot(panel: StringsPanel) -> FormSnapshotResponse:
    return FormSnapshotResponse.model_validate(panel.form.snapshot())


@router.get("/form", response_model=FormSnapshotResponse)
async def get_form(panel: StringsPanel = Depends(get_panel)) -> FormSnapshotResponse:
    """
    获取表单快照

    **返回字段**:
    - `fields`: 各字段当前显示内容
    - `invalid_fields`: 被标记为无效输入的字段
    - `notifications`: 尚未关闭的提示消息
    """
    return _snapshot(panel)


@router.put("/fields/{name}", response_model=FormSnapshotResponse)
async def set_field(
    name: str,
    body: FieldValueRequest,
    panel: StringsPanel = Depends(get_panel),
) -> FormSnapshotResponse:
    """
    修改输入框内容（不会发送请求）

    **路径参数**:
    - `name`: 输入框名称，`state` 或 `splitter`
    """
    try:
        form_field = FormField(name)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"字段 {name} 不存在")
    if form_field not in INPUT_FIELDS:
        raise HTTPException(status_code=404, detail=f"字段 {name} 不是输入框")

    panel.form.set_text(form_field, body.value)
    return _snapshot(panel)


@router.post("/actions/{action}", response_model=FormSnapshotResponse)
async def run_action(
    action: str,
    panel: StringsPanel = Depends(get_panel),
) -> FormSnapshotResponse:
    """
    触发按钮动作，等待相关请求（含派生属性刷新）完成后返回表单快照

    **路径参数**:
    - `action`: get_state / submit_state / get_splitter / submit_splitter / get_two_prop / crash
    """
    if action not in panel.actions:
        raise HTTPException(status_code=404, detail=f"动作 {action} 不存在")

    panel.run_action(action)
    await panel.wait_idle()
    return _snapshot(panel)


@router.delete("/notifications", response_model=FormSnapshotResponse)
async def dismiss_notifications(panel: StringsPanel = Depends(get_panel)) -> FormSnapshotResponse:
    """关闭所有提示消息"""
    panel.form.clear_notifications()
    return _snapshot(panel)
