import typer
from rich.table import Table

from pkgident.core.logging import console
from pkgident.services.source_classifier import ARTIFACT_EXTRACTORS
from pkgident.services.source_classifier import classify_extractor
from pkgident.services.source_classifier import GIT_EXTRACTORS
from pkgident.services.source_classifier import OS_EXTRACTORS
from pkgident.services.source_classifier import SBOM_EXTRACTORS


def main(
    extractors: list[str] | None = typer.Option(
        None, '--name', '-n',
        help='Extractor name to classify, repeatable (default: all built-in)',
    ),
):
    """
    Show which source category each extractor belongs to.
    """
    names = extractors or sorted(
        OS_EXTRACTORS | SBOM_EXTRACTORS | GIT_EXTRACTORS | ARTIFACT_EXTRACTORS,
    )

    table = Table(title='Extractor Source Types')
    table.add_column('Extractor', style='cyan')
    table.add_column('Source Type', style='magenta')
    for name in names:
        table.add_row(name, str(classify_extractor(name)))
    console.print(table)
