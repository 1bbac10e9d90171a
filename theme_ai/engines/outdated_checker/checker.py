"""Run ``npm outdated --json`` and parse its report."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

import structlog

from theme_ai.engines.outdated_checker.models import AuditResult, OutdatedEntry
from theme_ai.exceptions import AuditError

log = structlog.get_logger("theme_ai.audit")


def parse_outdated_output(stdout: str) -> dict[str, OutdatedEntry]:
    """Parse npm's JSON report into ``name -> OutdatedEntry``.

    Raises :class:`AuditError` if *stdout* is not a JSON object. npm emits a
    list per package when it is installed in several locations; the first
    entry wins. Entries without a ``latest`` version are dropped.
    """
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise AuditError(f"unparsable npm output: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise AuditError(f"unexpected npm output type: {type(data).__name__}")

    # npm reports its own failures as {"error": {"code": ..., "summary": ...}}
    error = data.get("error")
    if isinstance(error, dict) and ("code" in error or "summary" in error):
        summary = error.get("summary") or error.get("code")
        raise AuditError(f"npm error: {summary}")

    entries: dict[str, OutdatedEntry] = {}
    for name, info in data.items():
        if isinstance(info, list):
            info = next((i for i in info if isinstance(i, dict)), None)
        if not isinstance(info, dict):
            continue
        latest = info.get("latest")
        if not latest:
            continue
        entries[name] = OutdatedEntry(
            name=name,
            current=_opt_str(info.get("current")),
            latest=str(latest),
            wanted=_opt_str(info.get("wanted")),
            location=_opt_str(info.get("location")),
        )
    return entries


def _opt_str(value: Any) -> str | None:
    return str(value) if value else None


class OutdatedChecker:
    """Invoke the npm outdated report for one project root.

    npm exits with code 1 whenever something is outdated, so stdout is
    parsed regardless of the exit code.
    """

    def __init__(self, root: Path, npm_bin: str = "npm") -> None:
        self._root = root
        self._npm_bin = npm_bin

    def check(self) -> AuditResult:
        cmd = [self._npm_bin, "outdated", "--json"]
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(self._root),
                capture_output=True,
                encoding="utf-8",
                errors="replace",
            )
        except (FileNotFoundError, PermissionError) as exc:
            log.warning("audit.npm_unavailable", npm_bin=self._npm_bin, error=str(exc))
            return AuditResult(status="failed", error=f"cannot run {self._npm_bin}: {exc}")

        stdout = proc.stdout.strip()
        if not stdout:
            if proc.returncode == 0:
                return AuditResult(status="up_to_date")
            detail = proc.stderr.strip() or f"{self._npm_bin} exited with code {proc.returncode}"
            log.warning("audit.failed", returncode=proc.returncode, stderr=detail)
            return AuditResult(status="failed", error=detail)

        try:
            entries = parse_outdated_output(stdout)
        except AuditError as exc:
            log.warning("audit.failed", returncode=proc.returncode, error=str(exc))
            return AuditResult(status="failed", error=str(exc))

        if not entries:
            return AuditResult(status="up_to_date")
        log.info("audit.outdated", count=len(entries))
        return AuditResult(status="outdated", entries=entries)
