"""Shared fixtures for MasstDB tests."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

import pytest

from masstdb.config import get_settings
from masstdb.exceptions import ToolNotFoundError
from masstdb.utils.process_runner import ProcessResult
from masstdb.utils.tool_paths import get_tools_bin_path


@dataclass
class RecordedCall:
    kind: str
    cmd: list[str]
    env: Optional[dict]
    timeout: Optional[float] = None
    stdin: bytes = b""


@dataclass
class FakeRunner:
    """Process runner double that records commands and emulates stream wiring."""

    responses: dict[str, ProcessResult] = field(default_factory=dict)
    stdout: bytes = b""
    missing: tuple[str, ...] = ()
    calls: list[RecordedCall] = field(default_factory=list)

    def _response(self, cmd: list[str]) -> ProcessResult:
        tool = os.path.basename(cmd[0])
        if tool in self.missing:
            raise ToolNotFoundError(cmd[0])
        return self.responses.get(tool, ProcessResult(returncode=0))

    def run(self, cmd, env=None, timeout=None):  # noqa: ANN001
        self.calls.append(RecordedCall('run', list(cmd), env, timeout=timeout))
        return self._response(list(cmd))

    def stream_to(self, cmd, sink, env=None):  # noqa: ANN001
        self.calls.append(RecordedCall('stream_to', list(cmd), env))
        result = self._response(list(cmd))
        sink.write(self.stdout)
        return result

    def stream_from(self, cmd, source, env=None):  # noqa: ANN001
        call = RecordedCall('stream_from', list(cmd), env)
        self.calls.append(call)
        result = self._response(list(cmd))
        call.stdin = source.read()
        return result

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ('MASSTDB_TOOLS_BIN_PATH', 'MASSTDB_CONFIG_FILE', 'MASSTDB_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_tools_bin_path.cache_clear()
    yield
    get_settings.cache_clear()
    get_tools_bin_path.cache_clear()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
