# cli.py
from __future__ import annotations

import sys

import click

from scenario import settings
from scenario.runner import run_script
from scenario.ui.console import Console, set_console, get_console


class StartCommand(click.Command):
    """Reports bad invocations (unknown options and the like) with exit status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            get_console().print_usage_error(e.format_message(), ctx.get_help())
            ctx.exit(1)


@click.command(cls=StartCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-r",
    "require_root",
    is_flag=True,
    default=False,
    help="Require root privileges to run the script.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=settings.DEBUG,
    help="Show each directive, child exit statuses and stack traces.",
)
@click.argument("script_path", nargs=-1, metavar="<scriptPath>")
@click.pass_context
def cli(ctx, require_root, debug, script_path):
    """Start - A simple scenario runner for Linux.

    Runs <scriptPath> line by line. Lines starting with // are comments.
    Directives: cd, run, exec, mkdir, rm, rmdir, sleep.
    """
    console = Console(debug=debug)
    set_console(console)

    if not script_path:
        if require_root:
            console.print_usage_error("No script path provided.", ctx.get_help())
        else:
            console.print_usage_error("No arguments provided.", ctx.get_help())
        sys.exit(1)

    if len(script_path) > 1:
        console.print_usage_error("Too many arguments.", ctx.get_help())
        sys.exit(1)

    try:
        result = run_script(script_path[0], require_root)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    if not result.ok:
        get_console().print_error(str(result.failure))
        sys.exit(1)


def main() -> None:
    cli(prog_name="start")


if __name__ == "__main__":
    main()
