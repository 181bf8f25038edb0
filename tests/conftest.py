import copy
from typing import Any

import pytest

from core.settings import set_flag


class FakeDaemon:
    """In-memory Docker Desktop settings store."""

    def __init__(self, kubernetes_enabled: bool = True) -> None:
        self.settings: dict[str, Any] = {
            "vm": {
                "kubernetes": {"enabled": {"value": kubernetes_enabled, "locked": False}},
                "resources": {"cpus": {"value": 4}},
            },
            "autoStart": False,
        }
        self.resets = 0


class FakeSettingsClient:
    """Settings client double that records every call."""

    def __init__(self, daemon: FakeDaemon) -> None:
        self.daemon = daemon
        self.calls: list[str] = []
        self.reset_error: Exception | None = None
        self.read_error: Exception | None = None
        self.write_error: Exception | None = None
        self.after_read = None

    async def reset_cluster(self) -> None:
        self.calls.append("reset_cluster")
        if self.reset_error is not None:
            raise self.reset_error
        self.daemon.resets += 1

    async def read_settings(self) -> dict[str, Any]:
        self.calls.append("read_settings")
        if self.read_error is not None:
            raise self.read_error
        snapshot = copy.deepcopy(self.daemon.settings)
        if self.after_read is not None:
            self.after_read(self.daemon)
        return snapshot

    def set_flag(self, snapshot: dict[str, Any], flag_name: str, value: bool) -> tuple[dict[str, Any], bool]:
        self.calls.append("set_flag")
        return set_flag(snapshot, flag_name, value)

    async def write_settings(self, snapshot: dict[str, Any]) -> None:
        self.calls.append("write_settings")
        if self.write_error is not None:
            raise self.write_error
        self.daemon.settings = copy.deepcopy(snapshot)

    def count(self, name: str) -> int:
        return self.calls.count(name)


@pytest.fixture
def daemon() -> FakeDaemon:
    return FakeDaemon()


@pytest.fixture
def settings_client(daemon: FakeDaemon) -> FakeSettingsClient:
    return FakeSettingsClient(daemon)
