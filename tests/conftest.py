from __future__ import annotations

import pytest

from osh import background


class FakeProc:
    """Stand-in for subprocess.Popen results."""

    def __init__(self, pid: int = 4242, returncode: int | None = 0) -> None:
        self.pid = pid
        self.returncode = returncode
        self.waited = False

    def wait(self) -> int:
        self.waited = True
        return self.returncode or 0

    def poll(self) -> int | None:
        return self.returncode


@pytest.fixture(autouse=True)
def _isolate_shell(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("osh.shell.init_readline", lambda: None)
    monkeypatch.setattr("osh.shell.load_history", lambda: None)
    monkeypatch.setattr("osh.shell.save_history", lambda: None)
    background.background_children.clear()
    yield
    background.background_children.clear()


@pytest.fixture
def fake_proc() -> type[FakeProc]:
    return FakeProc
