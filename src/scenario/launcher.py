# launcher.py
# Process launching behind a small interface so the dispatcher never calls
# subprocess directly and tests can substitute a fake.

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol, Sequence


class LaunchError(Exception):
    """The executable could not be started at all."""

    def __init__(self, executable: str, reason: str):
        super().__init__(f"Failed to start '{executable}': {reason}")
        self.executable = executable
        self.reason = reason


class Launcher(Protocol):
    def spawn(self, executable: str, args: Sequence[str], cwd: Path) -> int:
        """Start `executable` with `args` in `cwd`, wait for it, return its exit status."""
        ...


class SubprocessLauncher:
    """
    Launcher backed by subprocess.run.

    The child inherits stdin/stdout/stderr so script output streams straight
    to the terminal. There is no timeout: the call blocks until the child exits.
    """

    def spawn(self, executable: str, args: Sequence[str], cwd: Path) -> int:
        try:
            proc = subprocess.run(
                [executable, *args],
                cwd=str(cwd),
            )
        except FileNotFoundError:
            raise LaunchError(executable, "command not found")
        except PermissionError:
            raise LaunchError(executable, "permission denied")
        except OSError as e:
            raise LaunchError(executable, e.strerror or str(e))
        except ValueError as e:
            # e.g. an embedded null byte in the executable or an argument
            raise LaunchError(executable, str(e))

        return proc.returncode
