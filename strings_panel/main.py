"""
应用入口
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from strings_panel.api.panel import router as panel_router
from strings_panel.clients.http_client import close_http_clients
from strings_panel.config import config
from strings_panel.core.logger import logger
from strings_panel.services.panel import StringsPanel


def create_app(panel: StringsPanel | None = None) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        panel: 面板实例，未指定时使用配置中的 base_url 创建
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("strings 面板已启动: backend={}", app.state.panel.requests.base_url)
        try:
            yield
        finally:
            await app.state.panel.wait_idle()
            await close_http_clients()
            logger.info("strings 面板已关闭")

    app = FastAPI(title="strings-panel", lifespan=lifespan)
    app.state.panel = panel or StringsPanel(base_url=config.base_url)
    app.include_router(panel_router)
    return app


def main() -> None:
    import uvicorn

    uvicorn.run(create_app(), host=config.panel_host, port=config.panel_port)


if __name__ == "__main__":
    main()
