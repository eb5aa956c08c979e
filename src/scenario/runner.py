# runner.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from . import settings
from .dispatch import Dispatcher
from .model import (
    Directive,
    ExecutionContext,
    Result,
    Script,
    MALFORMED_LINE,
    PRECONDITION,
)
from .tokenizer import MalformedLineError, tokenize
from .ui.console import get_console


# ----------------------------------------------------------------------
# Preconditions
# ----------------------------------------------------------------------

def is_supported_platform() -> bool:
    return os.name == "posix"


def is_superuser() -> bool:
    return os.geteuid() == 0


def check_environment(require_root: bool) -> Result:
    """
    Checks that must pass before the script file is even opened.
    """
    if not is_supported_platform():
        return Result.fail(PRECONDITION, "This script can only be run on Linux.")
    if require_root and not is_superuser():
        return Result.fail(PRECONDITION, "This script requires root privileges.")
    return Result.success()


# ----------------------------------------------------------------------
# Script loading
# ----------------------------------------------------------------------

def load_script(path: str | Path) -> Script | Result:
    """
    Load a script file into memory.

    Returns:
      Script on success, or a failed Result when the file is missing,
      unreadable or has no lines.
    """
    script_path = Path(path).expanduser()
    if not script_path.is_file():
        return Result.fail(PRECONDITION, f"Script file '{path}' does not exist.")

    try:
        text = script_path.read_text(encoding=settings.SCRIPT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        return Result.fail(PRECONDITION, f"Script file '{path}' could not be read: {e}")

    # Only \n and \r\n end a line; splitlines() would also break on \f, \x85, ...
    raw_lines = text.split("\n")
    if raw_lines[-1] == "":
        raw_lines.pop()
    lines = tuple(line.rstrip("\r") for line in raw_lines)
    if not lines:
        return Result.fail(PRECONDITION, f"Script file at '{path}' is empty.")

    return Script(path=script_path, lines=lines)


def parse_line(line: str, line_no: int) -> Optional[Directive]:
    """
    Turn one raw line into a Directive.

    Returns None for comments and blank lines.
    Raises MalformedLineError on an unterminated quote.
    """
    stripped = line.lstrip()
    if stripped.startswith(settings.COMMENT_PREFIX):
        return None

    parts = tokenize(stripped)
    if not parts:
        return None

    return Directive(command=parts[0], args=tuple(parts[1:]), line_no=line_no)


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_lines(
    script: Script,
    *,
    dispatcher: Optional[Dispatcher] = None,
    context: Optional[ExecutionContext] = None,
) -> Result:
    """
    Execute the lines of an already loaded script, in order.

    Stops at the first failing line; the returned failure carries its
    1-based line number. Effects of earlier lines are kept.
    """
    dispatcher = dispatcher or Dispatcher()
    context = context or ExecutionContext()
    console = get_console()

    for line_no, line in enumerate(script.lines, start=1):
        try:
            directive = parse_line(line, line_no)
        except MalformedLineError as e:
            return Result.fail(MALFORMED_LINE, str(e), line_no=line_no)

        if directive is None:
            continue

        console.print_directive(line_no, directive.command, directive.args)
        result = dispatcher.execute(directive.command, directive.args, context)
        if not result.ok:
            return Result.fail(result.failure.kind, result.failure.message, line_no=line_no)

    return Result.success()


def run_script(
    script_path: str | Path,
    require_root: bool = False,
    *,
    dispatcher: Optional[Dispatcher] = None,
    context: Optional[ExecutionContext] = None,
) -> Result:
    """
    Check preconditions, load the script and run it.

    Nothing executes unless every precondition holds. The root check
    happens before the script file is touched.
    """
    checked = check_environment(require_root)
    if not checked.ok:
        return checked

    loaded = load_script(script_path)
    if isinstance(loaded, Result):
        return loaded

    get_console().print_run_started(str(script_path))
    return run_lines(loaded, dispatcher=dispatcher, context=context)
