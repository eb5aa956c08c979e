# dispatch.py
from __future__ import annotations

import shutil
import threading
import time
from typing import Callable, Dict, Optional, Sequence

from .launcher import Launcher, LaunchError, SubprocessLauncher
from .model import (
    ExecutionContext,
    Result,
    INVALID_ARGUMENT,
    LAUNCH_ERROR,
    NOT_FOUND,
    OS_ERROR,
    UNKNOWN_COMMAND,
    USAGE,
)
from .ui.console import get_console


Handler = Callable[[Sequence[str], ExecutionContext], Result]


def _missing(thing: str) -> Result:
    return Result.fail(USAGE, f"No {thing} provided.")


def _invalid_path(path: str) -> Optional[Result]:
    if not path.strip() or "\0" in path:
        return Result.fail(INVALID_ARGUMENT, f"Invalid path {path!r}.")
    return None


def _os_failure(action: str, target: str, e: Exception) -> Result:
    reason = getattr(e, "strerror", None) or e
    return Result.fail(OS_ERROR, f"Could not {action} '{target}': {reason}")


class Dispatcher:
    """
    Maps a command name to its handler and runs it against an ExecutionContext.

    Handlers never raise for expected problems (bad arity, missing paths,
    OS errors, launch failures); they return a failed Result instead.
    """

    def __init__(
        self,
        launcher: Optional[Launcher] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.launcher = launcher or SubprocessLauncher()
        self.sleep = sleep
        self.handlers: Dict[str, Handler] = {
            "cd": self.handle_cd,
            "run": self.handle_run,
            "exec": self.handle_run,
            "mkdir": self.handle_mkdir,
            "rm": self.handle_rm,
            "rmdir": self.handle_rmdir,
            "sleep": self.handle_sleep,
        }

    def execute(self, command: str, args: Sequence[str], context: ExecutionContext) -> Result:
        handler = self.handlers.get(command)
        if handler is None:
            return Result.fail(UNKNOWN_COMMAND, f"Unknown command '{command}'.")
        return handler(args, context)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def handle_cd(self, args: Sequence[str], context: ExecutionContext) -> Result:
        if not args:
            return _missing("directory")
        invalid = _invalid_path(args[0])
        if invalid:
            return invalid

        target = context.resolve(args[0])
        if not target.is_dir():
            return Result.fail(NOT_FOUND, f"Directory '{args[0]}' does not exist.")

        context.cwd = target.resolve()
        return Result.success()

    def handle_run(self, args: Sequence[str], context: ExecutionContext) -> Result:
        if not args:
            return _missing("command")

        executable, rest = args[0], list(args[1:])
        arg_string = " ".join(rest)
        console = get_console()
        console.print_debug(f"spawn '{executable}' args='{arg_string}' cwd={context.cwd}")

        try:
            status = self.launcher.spawn(executable, rest, context.cwd)
        except LaunchError as e:
            return Result.fail(LAUNCH_ERROR, str(e))

        console.print_debug(f"'{executable}' exited with status {status}")
        return Result.success()

    def handle_mkdir(self, args: Sequence[str], context: ExecutionContext) -> Result:
        if not args:
            return _missing("directory")
        invalid = _invalid_path(args[0])
        if invalid:
            return invalid

        try:
            context.resolve(args[0]).mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            return _os_failure("create directory", args[0], e)
        return Result.success()

    def handle_rm(self, args: Sequence[str], context: ExecutionContext) -> Result:
        if not args:
            return _missing("file")
        invalid = _invalid_path(args[0])
        if invalid:
            return invalid

        # A symlink is removed itself, never its target
        target = context.resolve(args[0])
        if not (target.is_symlink() or target.is_file()):
            return Result.fail(NOT_FOUND, f"File '{args[0]}' does not exist.")

        try:
            target.unlink()
        except (OSError, ValueError) as e:
            return _os_failure("delete file", args[0], e)
        return Result.success()

    def handle_rmdir(self, args: Sequence[str], context: ExecutionContext) -> Result:
        if not args:
            return _missing("directory")
        invalid = _invalid_path(args[0])
        if invalid:
            return invalid

        target = context.resolve(args[0])
        if not target.is_dir():
            return Result.fail(NOT_FOUND, f"Directory '{args[0]}' does not exist.")

        try:
            if target.is_symlink():
                target.unlink()
            else:
                shutil.rmtree(target)
        except (OSError, ValueError) as e:
            return _os_failure("delete directory", args[0], e)
        return Result.success()

    def handle_sleep(self, args: Sequence[str], context: ExecutionContext) -> Result:
        if not args:
            return _missing("time")

        raw = args[0]
        # ASCII digits only: int() would also accept "+5", " 5" and "1_000"
        if not (raw.isascii() and raw.isdigit()):
            return Result.fail(
                INVALID_ARGUMENT,
                f"Invalid time '{raw}': expected a non-negative number of milliseconds.",
            )

        # Length guard first: huge digit strings overflow float division
        if len(raw.lstrip("0")) > 13 or int(raw) / 1000 > threading.TIMEOUT_MAX:
            return Result.fail(INVALID_ARGUMENT, f"Invalid time '{raw}': too large.")

        try:
            self.sleep(int(raw) / 1000)
        except OverflowError:
            return Result.fail(INVALID_ARGUMENT, f"Invalid time '{raw}': too large.")
        return Result.success()
