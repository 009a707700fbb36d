"""System diagnostic command"""

import sys

import click
from rich import box
from rich.table import Table

from ..utils.output import console
from ...api.exceptions import K6CtlError
from ...core import load_config
from ...utils.async_utils import run_async


class DiagnosticCheck:
    """Base class for diagnostic checks"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.passed = False
        self.message = ""

    def run(self, ctx) -> 'DiagnosticCheck':
        """Run the diagnostic check"""
        raise NotImplementedError


class K6InstalledCheck(DiagnosticCheck):
    """Check that the k6 binary can be invoked"""

    def __init__(self):
        super().__init__("k6", "Verify k6 is installed and runnable")

    def run(self, ctx):
        tool = ctx.obj.tool
        if run_async(tool.probe()):
            self.passed = True
            self.message = f"{tool.name} is available"
        else:
            self.passed = False
            self.message = f"{tool.name} is not installed (https://grafana.com/docs/k6/latest/set-up/install-k6/)"
        return self


class ConfigFileCheck(DiagnosticCheck):
    """Check that the project config file parses"""

    def __init__(self):
        super().__init__("Config", "Validate the k6ctl config file")

    def run(self, ctx):
        try:
            config = load_config()
        except K6CtlError as e:
            self.passed = False
            self.message = str(e)
        else:
            self.passed = True
            self.message = f"namespace '{config.namespace}', parallelism {config.parallelism}"
        return self


class ClusterAccessCheck(DiagnosticCheck):
    """Check that a cluster configuration can be loaded"""

    def __init__(self):
        super().__init__("Cluster", "Load kubeconfig or in-cluster configuration")

    def run(self, ctx):
        try:
            ctx.obj.cluster_client
        except K6CtlError as e:
            self.passed = False
            self.message = str(e)
        else:
            self.passed = True
            self.message = "Cluster configuration loaded"
        return self


@click.command()
@click.pass_context
def doctor(ctx):
    """Run system diagnostics

    Checks k6 availability, the config file and cluster configuration.
    """
    checks = [
        K6InstalledCheck(),
        ConfigFileCheck(),
        ClusterAccessCheck(),
    ]

    table = Table(title="k6ctl doctor", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for check in checks:
        check.run(ctx)
        status = "[green]✓ OK[/green]" if check.passed else "[red]✗ FAIL[/red]"
        table.add_row(check.name, status, check.message)

    console.print(table)

    if not all(check.passed for check in checks):
        sys.exit(1)
