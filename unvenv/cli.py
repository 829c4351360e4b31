"""CLI entry point: unvenv.

Subcommands:
    unvenv                      # Same as `unvenv scan`
    unvenv scan [--json]        # Report pyvenv.cfg files not ignored by Git
    unvenv version              # Print the version
    unvenv doctor               # Environment and update health check
    unvenv completions SHELL    # Print a shell completion script

Exit codes: 0 = clean, 1 = error, 2 = unignored virtual environments found.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from unvenv import __version__
from unvenv.completions import SHELLS, completion_script
from unvenv.core.config import Settings
from unvenv.core.logging import setup_logging
from unvenv.exceptions import UnvenvError
from unvenv.report import render_json, render_text
from unvenv.scanner import scan

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_VIOLATION = 2


def _decorate(settings: Settings) -> bool:
    return settings.color and sys.stdout.isatty()


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.version_option(__version__, prog_name="unvenv", message="%(prog)s %(version)s")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Python virtual environment detector CLI."""
    settings = Settings.from_env()
    setup_logging(
        level=settings.log_level or ("DEBUG" if verbose else "WARNING"),
        fmt=settings.log_format,
    )
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        ctx.invoke(scan_command)


@main.command("scan")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON")
@click.pass_obj
def scan_command(settings: Settings | None, as_json: bool) -> None:
    """Scan for unignored Python virtual environments (default)."""
    settings = settings or Settings.from_env()
    try:
        report = scan(Path.cwd())
    except (UnvenvError, OSError) as e:
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {e}", err=True)
        sys.exit(EXIT_ERROR)

    if as_json:
        click.echo(render_json(report))
    elif not report.ok:
        click.echo(render_text(report, decorate=_decorate(settings)))

    sys.exit(EXIT_OK if report.ok else EXIT_VIOLATION)


@main.command("version")
@click.pass_obj
def version_command(settings: Settings | None) -> None:
    """Show version information."""
    settings = settings or Settings.from_env()
    if _decorate(settings):
        click.echo(f"{click.style('unvenv', fg='green', bold=True)} {__version__}")
    else:
        click.echo(f"unvenv {__version__}")


@main.command("doctor")
@click.pass_obj
def doctor_command(settings: Settings | None) -> None:
    """Check the environment and look for a newer release."""
    from unvenv.doctor import run_doctor

    settings = settings or Settings.from_env()
    sys.exit(run_doctor(settings, echo=click.echo))


@main.command("completions")
@click.argument("shell", type=click.Choice(SHELLS))
def completions_command(shell: str) -> None:
    """Generate a shell completion script."""
    click.echo(completion_script(main, shell, "unvenv"))


if __name__ == "__main__":
    main()
