# k6ctl/cli/main.py
"""Main CLI entry point for k6ctl"""

import logging
import os
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..api import Archiver, Publisher
from ..api.exceptions import PublishError
from ..cluster import ClusterClient, ClusterClientError, KubernetesClusterClient
from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL, ENV_KUBECONFIG
from ..tools import PackagingTool, K6Tool

# Import all commands
from .commands import (
    archive,
    publish,
    retract,
    status,
    run,
    doctor,
)

console = Console()


def resolve_log_level(verbose: bool = False, debug: bool = False) -> int:
    """Log level from the flags, then K6CTL_LOG_LEVEL, WARNING otherwise"""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO

    level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
    # getLevelName maps unknown names to a "Level ..." string
    if not isinstance(level, int):
        return logging.WARNING
    return level


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    level = resolve_log_level(verbose, debug)

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("kubernetes").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


class Context:
    """CLI context object with lazy collaborator initialization

    The cluster client is only built when a command needs it, so commands
    such as ``archive`` work without any cluster credentials.
    """

    def __init__(self,
                 tool: Optional[PackagingTool] = None,
                 cluster_client: Optional[ClusterClient] = None):
        """Initialize CLI context"""
        self._tool = tool
        self._cluster_client = cluster_client
        self.kubeconfig: Optional[str] = None
        self.kube_context: Optional[str] = None
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def tool(self) -> PackagingTool:
        if self._tool is None:
            self._tool = K6Tool(verbose=self.debug)
        return self._tool

    @property
    def cluster_client(self) -> ClusterClient:
        """Get cluster client (lazy loading)

        Raises:
            PublishError: If no cluster configuration could be loaded
        """
        if self._cluster_client is None:
            try:
                self._cluster_client = KubernetesClusterClient.from_default(
                    kubeconfig=self.kubeconfig,
                    context=self.kube_context
                )
            except ClusterClientError as e:
                raise PublishError(str(e)) from e
        return self._cluster_client

    @property
    def archiver(self) -> Archiver:
        return Archiver(self.tool)

    @property
    def publisher(self) -> Publisher:
        return Publisher(self.cluster_client)


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--kubeconfig', envvar=ENV_KUBECONFIG, default=None,
              help='Path to the kubeconfig file')
@click.option('--context', 'kube_context', default=None,
              help='Kubeconfig context to use')
@click.pass_context
def cli(ctx, verbose, debug, quiet, kubeconfig, kube_context):
    """k6ctl - Run k6 tests on Kubernetes using the k6-operator

    Archives k6 scripts with their dependencies and publishes them as
    ConfigMaps that a TestRun can mount.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.ensure_object(Context)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.kubeconfig = kubeconfig
    ctx.obj.kube_context = kube_context


# Register commands
cli.add_command(archive.archive)
cli.add_command(publish.publish)
cli.add_command(retract.retract)
cli.add_command(status.status)
cli.add_command(run.run)
cli.add_command(doctor.doctor)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
