"""Render a ScanReport for the console or as JSON."""

from __future__ import annotations

import json

import click

from unvenv.models import ScanReport


def suggested_ignores(report: ScanReport) -> list[str]:
    """Distinct ``<dir>/`` ignore hints, in the order the records were found."""
    seen: list[str] = []
    for record in report.records:
        hint = record.suggested_ignore
        if hint and hint not in seen:
            seen.append(hint)
    return seen


def render_json(report: ScanReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def render_text(report: ScanReport, decorate: bool = False) -> str:
    """Build the human-readable violation report.

    *decorate* adds colours and glyphs; callers enable it only when stdout
    is an interactive terminal.
    """

    def style(text: str, **kwargs) -> str:
        return click.style(text, **kwargs) if decorate else text

    indent = "     " if decorate else "    "
    lines: list[str] = []

    lines.append(
        f"{style('WARNING:', fg='yellow', bold=True)} "
        "Found Python virtual environment files that are not ignored by Git!"
    )
    lines.append("")
    lines.append("Python virtual environments should not be committed to version control.")
    if decorate:
        lines.append("They contain system-specific paths and can be large and unnecessary.")
    lines.append("")

    lines.append(style("Found the following unignored pyvenv.cfg files:", bold=True))
    if decorate:
        lines.append("")
    for record in report.records:
        if decorate:
            lines.append(f"  \U0001f4c1 {style(record.path, fg='cyan')}")
        else:
            lines.append(f"  {record.path}")
        if record.home is not None:
            lines.append(f"{indent}Python home: {record.home}")
        if record.version is not None:
            lines.append(f"{indent}Python version: {record.version}")
        if record.include_system_site_packages is not None:
            lines.append(f"{indent}Include system packages: {record.include_system_site_packages}")
        if record.parse_error:
            lines.append(f"{indent}(could not parse: {record.parse_error})")
        if decorate:
            lines.append("")
    if not decorate:
        lines.append("")

    hints = suggested_ignores(report)
    if hints:
        lines.append(style("Suggested .gitignore entries:", bold=True))
        if decorate:
            lines.append("")
        for hint in hints:
            lines.append(f"  {style(hint, fg='green')}")
        lines.append("")

    lines.append("To fix this issue:")
    lines.append("1. Add the virtual environment directories to your .gitignore file")
    lines.append("2. If already committed, remove them from the index:")
    for record in report.records:
        command = f"git rm -r --cached {record.parent or record.path}"
        lines.append(f"   {style(command, fg='yellow')}")
    lines.append("3. Commit the .gitignore changes")
    return "\n".join(lines)
