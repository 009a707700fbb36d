"""Retract command implementation"""

import click

from ..decorators import handle_errors
from ..utils.output import console
from ...constants import DEFAULT_NAMESPACE, ENV_NAMESPACE, MSG_RETRACT_SUCCESS
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
@handle_errors("Retract Error")
def retract(ctx, name, namespace):
    """Delete a published script ConfigMap

    Examples:
        k6ctl retract archive-test-1700000000000 -n load-tests
    """
    run_async(ctx.obj.publisher.retract(name, namespace))
    console.print(MSG_RETRACT_SUCCESS.format(name=name, namespace=namespace))
