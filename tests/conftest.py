import sys
from pathlib import Path
import asyncio
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class StubTransport:
    endpoint = "http://stub.test/LIVE"

    def __init__(self, outcome=None, gate=None):
        self.outcome = outcome
        self.gate = gate
        self.calls = []

    async def send(self, option, website):
        self.calls.append((option, website))
        if self.gate is not None:
            await self.gate.wait()
        return self.outcome


@pytest.fixture
def stub_transport():
    return StubTransport


@pytest.fixture
def service_url():
    return "http://crawler.test:8008/LIVE"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in (
        "LINKVIEW_ENDPOINT",
        "LINKVIEW_HOST",
        "LINKVIEW_PORT",
        "LINKVIEW_PATH",
        "LINKVIEW_SCHEME",
        "LINKVIEW_LOG_LEVEL",
        "DEBUG",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LINKVIEW_REPORTS_DIR", str(tmp_path / "reports"))
