"""Test doubles shared across sms_notifier tests."""

from collections.abc import Callable

import httpx


class RecordingBuildLog:
    """Build log that keeps every line it is given."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, line: str) -> None:
        self.infos.append(line)

    def error(self, line: str) -> None:
        self.errors.append(line)


class GatewayStub:
    """Records gateway requests and answers them via *responder*."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, text="OK - 1 SMS")
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)
