"""Custom Click decorators for common CLI patterns."""

import functools
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

from latest_json.common.errors import LatestJsonError
from latest_json_cli.core.constants import ExitCode
from latest_json_cli.core.output import OutputStrategy
from latest_json_common.io import FileOperationError
from latest_json_logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_exceptions(func: F) -> F:
    """Handle exceptions and convert to appropriate exit codes.

    Every failure is reported as a single error line on stderr and exits with
    ``ExitCode.GENERAL_ERROR``. Unexpected exceptions also print a traceback
    when ``-vvv`` is set.

    Parameters
    ----------
    func : Callable
        Function to wrap

    Returns
    -------
    Callable
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> None:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            ctx = click.get_current_context()
            OutputStrategy.from_click_context(ctx).error("Aborted")
            ctx.exit(ExitCode.GENERAL_ERROR)
        except Exception as e:
            # Allow Click's normal exit mechanism to propagate
            if isinstance(e, (click.exceptions.Exit, click.exceptions.ClickException)):
                raise

            ctx = click.get_current_context()
            output = OutputStrategy.from_click_context(ctx)
            logger.debug("Command failed: %s", e, exc_info=True)

            if isinstance(e, (LatestJsonError, FileOperationError)):
                output.error(str(e))
            elif isinstance(e, OSError):
                output.error(f"File operation failed: {e}")
            else:
                output.error(f"Unexpected error: {e}")
                verbose_debug = bool(getattr(ctx.obj, "verbose_debug", False))
                if verbose_debug:
                    output.plain("Full traceback:", err=True)
                    output.plain(traceback.format_exc(), err=True)
            ctx.exit(ExitCode.GENERAL_ERROR)

    return wrapper  # type: ignore[return-value]
