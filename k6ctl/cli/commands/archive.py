"""Archive command implementation"""

from pathlib import Path

import click

from ..decorators import handle_errors
from ..utils.output import format_archive_result
from ...utils.async_utils import run_async
from ...utils.file_utils import get_file_size


@click.command()
@click.argument('script', type=click.Path(path_type=Path))
@click.option(
    '--output', '-o', 'output_directory',
    type=click.Path(path_type=Path),
    default=None,
    help='Output directory (default: current directory)'
)
@click.pass_context
@handle_errors("Archive Error")
def archive(ctx, script, output_directory):
    """Archive a k6 script with all of its dependencies

    Runs `k6 archive` and writes archive-<script>-<millis>.tar.

    Examples:
        k6ctl archive test.js

        k6ctl archive test.js -o build/
    """
    result = run_async(ctx.obj.archiver.archive(script, output_directory))
    format_archive_result(result, get_file_size(result.archive_path))
