"""Scan orchestrator — walk, filter through ignore rules, parse, report."""

from __future__ import annotations

from pathlib import Path

import structlog

from unvenv.ignore import is_ignored
from unvenv.models import MarkerRecord, ScanReport
from unvenv.parser import read_marker
from unvenv.repository import locate
from unvenv.walker import iter_markers

log = structlog.get_logger("unvenv.scanner")


def scan(scan_root: str | Path) -> ScanReport:
    """Scan *scan_root* for pyvenv.cfg files not ignored by Git.

    The enclosing repository (if any) is discovered once; ignore rules are
    evaluated relative to its working-tree root, while record paths are
    relative to *scan_root*. Without a repository every marker is reported.

    Raises:
        UnvenvError: the scan could not complete.
    """
    root = Path(scan_root).resolve()
    context = locate(root)
    report = ScanReport(
        scan_root=root,
        repository_root=context.workdir if context else None,
    )
    log.info(
        "scan.started",
        scan_root=str(root),
        repository_root=str(report.repository_root) if context else None,
    )

    try:
        for candidate in iter_markers(root):
            rel = candidate.relative_to(root).as_posix()
            if is_ignored(context, candidate):
                log.debug("scan.candidate_ignored", path=rel)
                continue
            content = read_marker(candidate)
            report.records.append(
                MarkerRecord(path=rel, fields=content.fields, parse_error=content.error)
            )
            log.debug("scan.violation", path=rel, fields=content.fields)
    finally:
        if context is not None:
            context.close()

    log.info("scan.finished", violations=report.count)
    return report
