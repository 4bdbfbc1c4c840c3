"""
应用配置

所有配置项均从环境变量读取，提供本地开发可用的默认值。
"""

from __future__ import annotations

import os


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Config:
    """运行时配置（模块级单例 ``config``）"""

    def __init__(self) -> None:
        # 后端 strings 服务
        self.base_url = os.getenv("STRINGS_BASE_URL", "http://ndrwksr.com")

        # HTTP 客户端
        self.http_connect_timeout = _env_float("HTTP_CONNECT_TIMEOUT", 10.0)
        self.http_read_timeout = _env_float("HTTP_READ_TIMEOUT", 10.0)
        self.http_write_timeout = _env_float("HTTP_WRITE_TIMEOUT", 10.0)
        self.http_pool_timeout = _env_float("HTTP_POOL_TIMEOUT", 5.0)
        self.http_max_connections = _env_int("HTTP_MAX_CONNECTIONS", 20)
        self.http_keepalive_connections = _env_int("HTTP_KEEPALIVE_CONNECTIONS", 10)
        self.http_keepalive_expiry = _env_float("HTTP_KEEPALIVE_EXPIRY", 30.0)

        # 面板 HTTP 服务
        self.panel_host = os.getenv("PANEL_HOST", "127.0.0.1")
        self.panel_port = _env_int("PANEL_PORT", 8084)


config = Config()
