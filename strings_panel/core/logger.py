"""
统一日志系统 - 基于 loguru

日志级别策略:
- DEBUG: 开发调试，请求构建、响应体长度、UI 更新
- INFO:  关键操作，按钮动作触发、状态/分隔符更新成功
- WARNING: 网络失败、非 2xx 响应、输入校验未通过
- ERROR: 响应解析失败、回调内部异常

输出策略:
- 控制台: 开发环境=DEBUG, 生产环境=INFO (通过 LOG_LEVEL 控制)
- 文件: 始终保存 DEBUG 级别，保留30天，按大小轮转 (100MB)

使用方式:
    from strings_panel.core.logger import logger

    logger.info("消息")
    logger.warning("[NET] 请求失败: {}", url)
    logger.error("[PARSE] 解析失败: {}", exc)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

# ============================================================================
# 环境检测
# ============================================================================

IS_DOCKER = (
    os.path.exists("/.dockerenv")
    or os.environ.get("DOCKER_CONTAINER", "false").lower() == "true"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if not IS_DOCKER else "INFO").upper()

# 是否禁用文件日志 (用于测试或特殊场景)
DISABLE_FILE_LOG = os.getenv("LOG_DISABLE_FILE", "false").lower() == "true"

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_DIR = Path(os.getenv("LOG_DIR", str(PROJECT_ROOT / "logs")))

# ============================================================================
# 日志格式定义
# ============================================================================

CONSOLE_FORMAT_DEV = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{message}</cyan>"
)

CONSOLE_FORMAT_PROD = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"

# ============================================================================
# 日志配置
# ============================================================================


def _add_console_sink() -> int:
    options: dict[str, Any] = {
        "level": LOG_LEVEL,
        "format": CONSOLE_FORMAT_PROD if IS_DOCKER else CONSOLE_FORMAT_DEV,
        "colorize": not IS_DOCKER,
    }
    if IS_DOCKER:
        options.update(backtrace=False, diagnose=False)
    return logger.add(sys.stdout, **options)


def _add_file_sinks(log_dir: Path) -> list[int]:
    """添加 app.log（全部级别）与 error.log（仅 ERROR），返回 sink id"""
    log_dir.mkdir(parents=True, exist_ok=True)

    options: dict[str, Any] = {
        "format": FILE_FORMAT,
        "retention": "30 days",
        "compression": "gz",
        "encoding": "utf-8",
        "catch": True,
    }
    if IS_DOCKER:
        options.update(backtrace=False, diagnose=False)

    return [
        logger.add(log_dir / "app.log", level="DEBUG", rotation="100 MB", **options),
        logger.add(log_dir / "error.log", level="ERROR", rotation="50 MB", **options),
    ]


logger.remove()
_add_console_sink()
if not DISABLE_FILE_LOG:
    _add_file_sinks(LOG_DIR)

# 第三方库日志只保留 WARNING 及以上
for _name in ("httpx", "httpcore", "uvicorn.access"):
    logging.getLogger(_name).setLevel(logging.WARNING)

__all__ = ["logger"]
