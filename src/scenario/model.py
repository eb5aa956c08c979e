# model.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


# Failure kinds
USAGE = "usage"
NOT_FOUND = "not_found"
INVALID_ARGUMENT = "invalid_argument"
UNKNOWN_COMMAND = "unknown_command"
MALFORMED_LINE = "malformed_line"
OS_ERROR = "os_error"
LAUNCH_ERROR = "launch_error"
PRECONDITION = "precondition"


@dataclass(frozen=True)
class Script:
    """A script file loaded into memory, one entry per line."""
    path: Path
    lines: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Directive:
    """A tokenized, non-comment script line."""
    command: str
    args: Tuple[str, ...]
    line_no: int = 0


@dataclass
class ExecutionContext:
    """
    Mutable state of a single script run.

    Only `cd` writes `cwd`. Everything else resolves relative paths and
    launches processes against it.
    """
    cwd: Path = field(default_factory=Path.cwd)

    def resolve(self, path: str) -> Path:
        # Lexical join; symlinks are left for the caller to decide on
        return Path(os.path.normpath(self.cwd / Path(path).expanduser()))


@dataclass(frozen=True)
class Failure:
    """
    Typed failure with enough context for:
      - clean CLI output
      - asserting on the kind in tests
    """
    kind: str
    message: str
    line_no: Optional[int] = None

    def __str__(self) -> str:
        if self.line_no is not None:
            return f"Error while executing line '{self.line_no}': {self.message}"
        return self.message


@dataclass(frozen=True)
class Result:
    """Success, or a Failure."""
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls) -> Result:
        return cls()

    @classmethod
    def fail(cls, kind: str, message: str, line_no: Optional[int] = None) -> Result:
        return cls(Failure(kind=kind, message=message, line_no=line_no))
