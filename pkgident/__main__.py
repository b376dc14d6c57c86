import typer

from pkgident.__version__ import __version__
from pkgident.commands import classify
from pkgident.commands import resolve
from pkgident.core.config import get_config
from pkgident.core.logging import setup_logging

app = typer.Typer(
    help='pkgident: canonical package identities for scan inventories.',
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)

app.command('resolve')(resolve.main)
app.command('classify')(classify.main)


def _version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, '--debug', help='Enable debug logging'),
    version: bool = typer.Option(
        False, '--version', callback=_version_callback, is_eager=True,
        help='Show version and exit',
    ),
):
    """
    pkgident CLI - resolve what a package canonically is.
    """
    config = get_config()
    level = 'DEBUG' if debug else config.logging.level
    setup_logging(level=level, json=config.logging.json)


if __name__ == '__main__':
    app()
