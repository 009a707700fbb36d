"""Run command implementation"""

import os
from pathlib import Path

import click
from rich import box
from rich.table import Table

from ..decorators import handle_errors
from ..utils.output import (
    console,
    format_archive_result,
    format_publish_result,
    format_script_reference,
    format_env_vars,
    print_warning,
)
from ...api import remove_archive
from ...constants import ENV_NAMESPACE
from ...core import load_config, load_and_validate_env
from ...utils.async_utils import run_async
from ...utils.file_utils import get_file_size


def resolve_namespace(option_value, config):
    """Namespace from the option, then the environment, then the config file"""
    return option_value or os.environ.get(ENV_NAMESPACE) or config.namespace


def _print_run_summary(config, namespace, parallelism):
    table = Table(title="TestRun settings", box=box.ROUNDED, show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Namespace", namespace)
    table.add_row("Parallelism", str(parallelism))
    table.add_row("Runner image", config.runner.image)
    table.add_row("Arguments", " ".join(config.arguments or []) or "-")
    table.add_row("Cleanup", "yes" if config.cleanup else "no")
    if config.prometheus:
        table.add_row("Prometheus", config.prometheus.server_url)

    console.print(table)


async def _archive_and_publish(archiver, publisher, script, output_directory, namespace, keep_archive):
    archive_result = await archiver.archive(script, output_directory)
    format_archive_result(archive_result, get_file_size(archive_result.archive_path))

    try:
        return await publisher.publish(archive_result, namespace)
    finally:
        if not keep_archive:
            remove_archive(archive_result)


@click.command()
@click.argument('script', type=click.Path(path_type=Path))
@click.option('--config', '-c', 'config_path', type=click.Path(path_type=Path),
              default=None, help='Config file (default: k6ctl.config.json)')
@click.option('--namespace', '-n', default=None, help='Kubernetes namespace')
@click.option('--parallelism', '-p', type=click.IntRange(min=1), default=None,
              help='Number of runner pods')
@click.option('--env-file', '-e', type=click.Path(path_type=Path), default=None,
              help='.env file with variables for the runners')
@click.option('--output', '-o', 'output_directory', type=click.Path(path_type=Path),
              default=None, help='Directory for the intermediate archive')
@click.option('--keep-archive', is_flag=True, help='Keep the local archive after publishing')
@click.pass_context
@handle_errors("Run Error")
def run(ctx, script, config_path, namespace, parallelism, env_file, output_directory, keep_archive):
    """Archive a script and publish it for a k6-operator TestRun

    Examples:
        k6ctl run test.js

        k6ctl run test.js -n load-tests -p 4 -e .env
    """
    config = load_config(config_path)
    namespace = resolve_namespace(namespace, config)
    parallelism = parallelism or config.parallelism

    if env_file is not None:
        env_vars = load_and_validate_env(env_file)
        if env_vars:
            format_env_vars(env_vars)
        else:
            print_warning(f"{env_file} defines no variables")

    result = run_async(_archive_and_publish(
        ctx.obj.archiver,
        ctx.obj.publisher,
        script,
        output_directory,
        namespace,
        keep_archive
    ))

    format_publish_result(result)
    _print_run_summary(config, namespace, parallelism)
    format_script_reference(result)
