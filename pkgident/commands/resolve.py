import json
from pathlib import Path

import structlog
import typer
from rich.table import Table

from pkgident.core.decorators import handle_errors
from pkgident.core.logging import console
from pkgident.core.stats import ResolveStats
from pkgident.core.storage import check_input_file
from pkgident.core.storage import load_records
from pkgident.services.scan_service import ScanService

logger = structlog.get_logger('resolve')


@handle_errors
def main(
    input_file: Path = typer.Argument(..., help='JSONL file of extractor records'),
    workers: int | None = typer.Option(None, help='Number of concurrent workers'),
    output_json: bool = typer.Option(
        False, '--json', help='Print one JSON object per package instead of a table',
    ),
):
    """
    Resolve extractor records into canonical package identities.
    """
    records = load_records(check_input_file(input_file))
    if not records:
        logger.warning('No records found', path=str(input_file))
        raise typer.Exit(0)

    service = ScanService(workers=workers)
    stats = ResolveStats()
    results = service.resolve_records(records, stats)

    if output_json:
        for result in results:
            typer.echo(json.dumps(result.to_dict()))
        return

    table = Table(title=f'Packages ({input_file.name})')
    table.add_column('Name', style='cyan')
    table.add_column('Version', style='magenta')
    table.add_column('Ecosystem', style='green')
    table.add_column('Source', style='yellow')
    table.add_column('OS Package', style='dim')
    table.add_column('Location', style='dim')

    for result in results:
        pkg = result.package_info
        table.add_row(
            pkg.name,
            pkg.version,
            str(pkg.ecosystem) or '-',
            str(pkg.source_type),
            pkg.os_package_name or '-',
            pkg.location or '-',
        )

    console.print(table)
    console.print(
        f"[bold]{stats.resolved:,}[/] resolved, "
        f"[bold]{stats.overridden:,}[/] from purl, "
        f"[bold]{stats.warnings:,}[/] warnings "
        f"in {stats.elapsed_time:.2f}s",
    )
