from .tokenizer import tokenize, MalformedLineError
from .dispatch import Dispatcher
from .launcher import Launcher, LaunchError, SubprocessLauncher
from .model import Directive, ExecutionContext, Failure, Result, Script
from .runner import load_script, run_lines, run_script

__all__ = [
    "tokenize",
    "MalformedLineError",
    "Dispatcher",
    "Launcher",
    "LaunchError",
    "SubprocessLauncher",
    "Directive",
    "ExecutionContext",
    "Failure",
    "Result",
    "Script",
    "load_script",
    "run_lines",
    "run_script",
]
