import functools
from collections.abc import Callable
from typing import Any

import structlog
import typer

from pkgident.core.logging import console
from pkgident.core.storage import InputFileError

logger = structlog.get_logger('cli')


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn input-file problems and crashes into a message and an exit code."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except InputFileError as e:
            console.print(f"[bold red]Input Error:[/] {e}")
            logger.debug('Bad input file', path=str(e.path), reason=e.reason)
            raise typer.Exit(2)
        except OSError as e:
            console.print(f"[bold red]Cannot read input:[/] {e}")
            logger.debug('Input file unreadable', path=e.filename, exc_info=True)
            raise typer.Exit(2)
        except Exception as e:
            console.print(f"[bold red]Unexpected Error:[/] {e}")
            logger.exception('Unexpected error', command=func.__module__)
            raise typer.Exit(1)
    return wrapper
