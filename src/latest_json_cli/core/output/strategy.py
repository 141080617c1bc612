"""Default output strategy implementation."""

from __future__ import annotations

import click

from latest_json_cli.core.output.verbosity import Verbosity


class OutputStrategy:
    """Unified output strategy with verbosity contracts.

    | Method     | NORMAL | VERBOSE | DEBUG |
    |------------|--------|---------|-------|
    | error      | Yes    | Yes     | Yes   |
    | warning    | Yes    | Yes     | Yes   |
    | success    | Yes    | Yes     | Yes   |
    | plain      | Yes    | Yes     | Yes   |
    | info       | No     | Yes     | Yes   |
    | detail     | No     | Yes     | Yes   |

    Parameters
    ----------
    verbosity : Verbosity
        Current verbosity level
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL) -> None:
        self._verbosity = verbosity
        self._last_was_blank = False  # Track for blank line coalescing

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        return self._verbosity

    def _emit(
        self,
        message: str,
        *,
        err: bool = False,
        style: dict | None = None,
    ) -> None:
        """Emit a message with optional styling and blank line coalescing.

        Parameters
        ----------
        message : str
            Message to emit
        err : bool
            Whether to output to stderr
        style : dict | None
            Click style kwargs (fg, bold, etc.)
        """
        # Coalesce consecutive blank lines
        if not message or message.strip() == "":
            if self._last_was_blank:
                return
            click.echo("", err=err)
            self._last_was_blank = True
            return

        rendered = click.style(message, **style) if style else message
        click.echo(rendered, err=err)
        self._last_was_blank = False

    def error(self, message: str, to_stderr: bool = True) -> None:
        """Display error message (red). Always visible.

        Parameters
        ----------
        message : str
            Error message
        to_stderr : bool
            Whether to send to stderr (default: True)
        """
        from latest_json_cli.core.constants import Icons

        self._emit(f"{Icons.ERROR} {message}", err=to_stderr, style={"fg": "red"})

    def warning(self, message: str) -> None:
        """Display warning message (yellow). Always visible."""
        self._emit(message, style={"fg": "yellow"})

    def success(self, message: str) -> None:
        """Display success message (green). Always visible."""
        self._emit(message, style={"fg": "green"})

    def plain(self, message: str, err: bool = False) -> None:
        """Display plain message without formatting. Always visible."""
        self._emit(message, err=err)

    def info(self, message: str) -> None:
        """Display info message. Visible at VERBOSE+."""
        if self._verbosity >= Verbosity.VERBOSE:
            self._emit(message)

    def detail(self, message: str) -> None:
        """Display operational detail (dimmed). Visible at VERBOSE+."""
        if self._verbosity >= Verbosity.VERBOSE:
            self._emit(f"  {message}", style={"dim": True})

    @classmethod
    def from_click_context(cls, ctx: click.Context | None) -> OutputStrategy:
        """Create OutputStrategy from Click context.

        Parameters
        ----------
        ctx : click.Context | None
            Click context; NORMAL verbosity when it carries no flags

        Returns
        -------
        OutputStrategy
            Output strategy configured from context
        """
        obj = ctx.obj if ctx is not None else None
        verbose = getattr(obj, "verbose", False) if obj else False
        verbose_debug = getattr(obj, "verbose_debug", False) if obj else False
        return cls(verbosity=Verbosity.from_flags(verbose, verbose_debug))
