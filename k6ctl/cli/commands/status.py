"""Status command implementation"""

import sys

import click

from ..decorators import handle_errors
from ..utils.output import console
from ...constants import DEFAULT_NAMESPACE, ENV_NAMESPACE, EMOJI_SUCCESS, EMOJI_ERROR
from ...utils.async_utils import run_async


@click.command()
@click.argument('name')
@click.option(
    '--namespace', '-n',
    envvar=ENV_NAMESPACE,
    default=DEFAULT_NAMESPACE,
    show_default=True,
    help='Kubernetes namespace'
)
@click.pass_context
@handle_errors("Status Error")
def status(ctx, name, namespace):
    """Check whether a script ConfigMap exists

    Exits with status 1 when the ConfigMap is absent.
    """
    if run_async(ctx.obj.publisher.exists(name, namespace)):
        console.print(f"[green]{EMOJI_SUCCESS}[/green] ConfigMap {name} exists in namespace {namespace}")
    else:
        console.print(f"[red]{EMOJI_ERROR}[/red] ConfigMap {name} not found in namespace {namespace}")
        sys.exit(1)
