"""Main CLI entry point for tauri-latest-json.

Copies the signed updater bundles of a Tauri build into a release directory
and writes the ``latest.json`` manifest describing them.
"""

from pathlib import Path
from typing import Any

import click

from latest_json_cli import __version__
from latest_json_cli.core.constants import (
    ALL_LOG_LEVELS,
    LOGGING_PACKAGES,
    EnvVars,
    ExitCode,
    LogLevel,
)
from latest_json_cli.core.decorators import handle_exceptions
from latest_json_cli.core.output import OutputStrategy, Verbosity
from latest_json_cli.services.release import ReleaseOptions, ReleaseService
from latest_json_common.config import ProjectLayout, load_merged_config
from latest_json_common.path import normalize_path
from latest_json_logging import configure_logger, get_logger
from latest_json_logging.utils import get_log_level

logger = get_logger(__name__)


def _resolve_log_level(
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
    default_level: str,
) -> str:
    """Pick the effective log level from CLI flags.

    Parameters
    ----------
    verbose : bool
        Whether -v verbose mode is enabled
    verbose_debug : bool
        Whether -vvv verbose debug mode is enabled
    log_level : str | None
        Explicit log level if provided
    default_level : str
        Level from the tool configuration

    Returns
    -------
    str
        Explicit level, else DEBUG for -vvv, INFO for -v, otherwise the
        ``LATEST_JSON_LOG_LEVEL`` environment value or ``default_level``
    """
    if log_level:
        return log_level
    if verbose_debug:
        return LogLevel.DEBUG.value
    if verbose:
        return LogLevel.INFO.value
    return get_log_level(default=default_level)


def _configured_log_level(cfg: dict[str, Any]) -> str:
    """Default log level from the merged tool configuration."""
    defaults = cfg.get("defaults")
    level = defaults.get("log_level") if isinstance(defaults, dict) else None
    return str(level).upper() if level else LogLevel.WARNING.value


def _configure_package_loggers(effective_level: str, verbose_debug: bool) -> None:
    """Configure package loggers; -vvv also mirrors records to stderr."""
    for pkg_name in LOGGING_PACKAGES:
        configure_logger(
            pkg_name,
            profile="cli",
            level=effective_level,
            to_console=True if verbose_debug else None,
        )


class ReleaseCommand(click.Command):
    """Command that reports usage errors with the general error exit code."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = ExitCode.GENERAL_ERROR
            raise


class Context:
    """CLI context object shared with the exception handler."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.verbose_debug: bool = False
        self.config: dict[str, Any] = {}
        self._output: OutputStrategy | None = None

    @property
    def output(self) -> OutputStrategy:
        """Get output strategy singleton instance.

        Returns
        -------
        OutputStrategy
            Output strategy configured with current verbosity
        """
        if self._output is None:
            verbosity = Verbosity.from_flags(self.verbose, self.verbose_debug)
            self._output = OutputStrategy(verbosity=verbosity)
        return self._output


@click.command(name="tauri-latest-json", cls=ReleaseCommand)
@click.option(
    "--tauri-project",
    required=True,
    envvar=EnvVars.TAURI_PROJECT,
    type=click.Path(path_type=Path, file_okay=False),
    help="Path to the Tauri project (the directory containing src-tauri)",
)
@click.option(
    "--output-dir",
    required=True,
    envvar=EnvVars.OUTPUT_DIR,
    type=click.Path(path_type=Path, file_okay=False),
    help="Directory receiving the artifacts and latest.json",
)
@click.option(
    "--base-url",
    required=True,
    envvar=EnvVars.BASE_URL,
    help=(
        "Download base URL; {version}, ${version} and {{version}} are "
        "replaced with the release version"
    ),
)
@click.option(
    "--notes",
    envvar=EnvVars.NOTES,
    help="Release notes (defaults to the notes of an existing latest.json)",
)
@click.option(
    "--allow-overwrite-platforms",
    is_flag=True,
    help="Replace existing platform entries instead of failing",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show per-artifact details and INFO logging",
)
@click.option(
    "--verbose-debug",
    "-vvv",
    is_flag=True,
    help="Enable DEBUG logging on stderr and tracebacks for unexpected errors",
)
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in ALL_LOG_LEVELS]),
    help="Set logging level",
)
@click.version_option(__version__, prog_name="tauri-latest-json")
@click.pass_context
@handle_exceptions
def cli(
    ctx: click.Context,
    tauri_project: Path,
    output_dir: Path,
    base_url: str,
    notes: str | None,
    allow_overwrite_platforms: bool,
    verbose: bool,
    verbose_debug: bool,
    log_level: str | None,
) -> None:
    """Generate a Tauri updater latest.json from build artifacts.

    \b
    Scans <tauri-project>/src-tauri/target for signed bundles (AppImage, deb,
    rpm, app.tar.gz, NSIS, MSI), copies them to --output-dir and merges their
    entries into --output-dir/latest.json.
    """  # noqa: W605
    tauri_project = normalize_path(tauri_project)
    output_dir = normalize_path(output_dir)

    ctx.ensure_object(Context)
    app_ctx: Context = ctx.obj
    app_ctx.verbose = verbose
    app_ctx.verbose_debug = verbose_debug
    app_ctx.config = load_merged_config(tauri_project)

    effective_level = _resolve_log_level(
        verbose,
        verbose_debug,
        log_level,
        _configured_log_level(app_ctx.config),
    )
    _configure_package_loggers(effective_level, verbose_debug)
    logger.debug("Tool config: %s", app_ctx.config)

    options = ReleaseOptions(
        tauri_project=tauri_project,
        output_dir=output_dir,
        base_url=base_url,
        notes=notes,
        allow_overwrite=allow_overwrite_platforms,
        layout=ProjectLayout.from_config(app_ctx.config),
    )
    ReleaseService(options, app_ctx.output).run()


def main() -> None:
    """Serve as the main entry point for the CLI."""
    cli(prog_name="tauri-latest-json")


if __name__ == "__main__":
    main()
