"""Publish command implementation"""

from pathlib import Path

import click

from ..decorators import handle_errors
from ..utils.output import format_publish_result, format_script_reference
from ...constants import DEFAULT_NAMESPACE, ENV_NAMESPACE
from ...models import ArchiveResult
from ...utils.async_utils import run_async


@click.command()
@click.argument('archive_path', type=click.Path(path_type=Path))
@click.option(
    '--namespace', '-n',
    envvar=ENV_NAMESPACE,
    default=DEFAULT_NAMESPACE,
    show_default=True,
    help='Kubernetes namespace'
)
@click.pass_context
@handle_errors("Publish Error")
def publish(ctx, archive_path, namespace):
    """Publish an existing archive as a ConfigMap

    The ConfigMap name is derived from the archive filename.

    Examples:
        k6ctl publish archive-test-1700000000000.tar -n load-tests
    """
    # A pre-built archive has no known source script; the archive stands in for it
    archive_result = ArchiveResult(
        archive_path=str(archive_path),
        script_path=str(archive_path)
    )
    result = run_async(ctx.obj.publisher.publish(archive_result, namespace))
    format_publish_result(result)
    format_script_reference(result)
