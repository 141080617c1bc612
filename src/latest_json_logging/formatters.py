"""Log formatters."""

from __future__ import annotations

import logging

import click

DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"


class SafeFormatter(logging.Formatter):
    """Formatter that never raises on a badly formed log call.

    A record whose ``msg``/``args`` do not interpolate is rendered with its
    arguments appended instead of producing a logging error.
    """

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt or DEFAULT_FORMAT, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        try:
            record.getMessage()
        except (TypeError, ValueError):
            record.msg = f"{record.msg} {record.args!r}"
            record.args = ()
        return super().format(record)


class ColoredFormatter(SafeFormatter):
    """Console formatter that colors the whole line by level."""

    LEVEL_COLORS = {
        "TRACE": "bright_black",
        "DEBUG": "cyan",
        "INFO": None,
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red",
    }

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ) -> None:
        super().__init__(fmt or CONSOLE_FORMAT, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname)
        if not self.use_colors or color is None:
            return message
        return click.style(message, fg=color, bold=record.levelno >= logging.ERROR)
