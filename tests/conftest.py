import json
import os

# 测试中不写日志文件，需在导入 strings_panel 之前设置
os.environ.setdefault("LOG_DISABLE_FILE", "true")

import httpx
import pytest

from strings_panel.services.panel import StringsPanel
from strings_panel.services.transport import Transport

BASE_URL = "http://strings.test"


class FakeStringsBackend:
    """内存中的 strings 服务，用作 httpx.MockTransport 的处理函数"""

    def __init__(self, state: str = "hello", splitter: str = " ") -> None:
        self.state = state
        self.splitter = splitter
        self.two_prop: dict = {"prop1": "abc", "prop2": 5}
        self.crashed = False
        # path -> 强制返回的状态码
        self.fail_paths: dict[str, int] = {}
        # path -> 强制返回的原始响应体
        self.raw_bodies: dict[str, str] = {}
        self.requests: list[httpx.Request] = []

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def _json(self, value: object) -> httpx.Response:
        return httpx.Response(200, text=json.dumps(value))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if self.crashed:
            raise httpx.ConnectError("connection refused", request=request)
        if path in self.fail_paths:
            return httpx.Response(self.fail_paths[path], text="server error body")
        if path in self.raw_bodies:
            return httpx.Response(200, text=self.raw_bodies[path])

        if path == "/strings/state":
            if request.method == "PUT":
                self.state = json.loads(request.content)
            return self._json(self.state)
        if path == "/strings/state/splitter":
            if request.method == "PUT":
                self.splitter = json.loads(request.content)
            return self._json(self.splitter)
        if path == "/strings/state/split":
            words = [w for w in self.state.split(self.splitter) if w]
            return httpx.Response(200, text=" ".join(f'"{w}"' for w in words))
        if path == "/strings/state/properties":
            return self._json(
                {
                    "originalString": self.state,
                    "fifthChar": self.state[4] if len(self.state) >= 5 else None,
                    "isPalindrome": self.state == self.state[::-1],
                    "reversed": self.state[::-1],
                }
            )
        if path == "/strings/twoProp":
            return self._json(self.two_prop)
        if path == "/crash":
            self.crashed = True
            raise httpx.RemoteProtocolError("server disconnected", request=request)
        return httpx.Response(404)


@pytest.fixture
def backend() -> FakeStringsBackend:
    return FakeStringsBackend()


@pytest.fixture
def http_client(backend: FakeStringsBackend) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(backend.handle))


@pytest.fixture
def transport(http_client: httpx.AsyncClient) -> Transport:
    return Transport(http_client)


@pytest.fixture
def panel(transport: Transport) -> StringsPanel:
    return StringsPanel(transport=transport, base_url=BASE_URL)
