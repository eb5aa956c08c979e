from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import pytest

from scenario.dispatch import Dispatcher
from scenario.launcher import LaunchError
from scenario.model import ExecutionContext
from scenario.ui.console import Console, set_console


class FakeLauncher:
    """Records spawn calls instead of starting processes."""

    def __init__(self, status: int = 0, missing: Sequence[str] = ()):
        self.status = status
        self.missing = set(missing)
        self.calls: List[Tuple[str, List[str], Path]] = []

    def spawn(self, executable: str, args: Sequence[str], cwd: Path) -> int:
        if executable in self.missing:
            raise LaunchError(executable, "command not found")
        self.calls.append((executable, list(args), cwd))
        return self.status


@pytest.fixture(autouse=True)
def quiet_console():
    set_console(Console())
    yield
    set_console(Console())


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def dispatcher(launcher, sleeps) -> Dispatcher:
    return Dispatcher(launcher=launcher, sleep=sleeps.append)


@pytest.fixture
def context(tmp_path) -> ExecutionContext:
    return ExecutionContext(cwd=tmp_path)


@pytest.fixture
def write_script(tmp_path):
    def _write(*lines: str, name: str = "scenario.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")
        return path
    return _write
