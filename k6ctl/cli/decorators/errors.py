"""Error handling decorator shared by all commands"""

import functools
import sys
from typing import Callable

import click

from ..utils.output import console, print_error
from ...api.exceptions import K6CtlError


def handle_errors(title: str = "Error"):
    """
    Turn known errors into a red panel and a non-zero exit code

    Args:
        title: Panel title for known errors

    Example:
        @click.command()
        @handle_errors("Archive Error")
        def archive(...):
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)

            except K6CtlError as e:
                # Known errors - display in a nice panel
                print_error(str(e), title)
                sys.exit(1)

            except KeyboardInterrupt:
                console.print("\n[yellow]Operation cancelled by user[/yellow]")
                sys.exit(130)

            except Exception as e:
                print_error(
                    f"An unexpected error occurred:\n\n{e}\n\n"
                    "[dim]This might be a bug. Please report it if the problem persists.[/dim]",
                    "Unexpected Error"
                )

                ctx = click.get_current_context(silent=True)
                if ctx is not None and ctx.obj is not None and ctx.obj.debug:
                    console.print("\n[bold]Debug Information:[/bold]")
                    console.print_exception()
                else:
                    console.print("\n[dim]Run with --debug for more details[/dim]")

                sys.exit(1)

        return wrapper

    return decorator
