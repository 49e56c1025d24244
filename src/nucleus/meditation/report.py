"""Rendering of ``CheckResult`` objects for logs and terminals.

``ResultReporter`` turns a result into a plain dict, JSON or YAML text,
or a Rich table.  It never raises on a failed result; it only describes
it.

Usage
-----
::

    from nucleus.meditation.report import ResultReporter

    reporter = ResultReporter()
    result = spec.check(payload)
    if result.failed():
        logger.warning("payload rejected:\\n%s", reporter.to_yaml(result))
        reporter.print(result)
"""
from __future__ import annotations

import json

import yaml
from rich.console import Console
from rich.table import Table

from nucleus.meditation.result import CheckResult, Violation, ViolationReason

_REASON_COLORS: dict[ViolationReason, str] = {
    ViolationReason.MISMATCH: "red",
    ViolationReason.MISSING: "yellow",
    ViolationReason.UNKNOWN: "magenta",
}


class ResultReporter:
    """Converts check results into serializable and printable forms."""

    def to_dict(self, result: CheckResult) -> dict[str, object]:
        """Serialize ``result`` to a JSON-compatible dict."""
        return {
            "passed": result.passed(),
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        return {
            "reason": violation.reason.name.lower(),
            "position": violation.position,
            "key": violation.key,
            "expected": violation.expected,
            "actual": violation.actual.value if violation.actual is not None else None,
        }

    def to_json(self, result: CheckResult, indent: int = 2) -> str:
        """Serialize ``result`` to a JSON string."""
        return json.dumps(self.to_dict(result), indent=indent, ensure_ascii=False)

    def to_yaml(self, result: CheckResult) -> str:
        """Serialize ``result`` to a YAML string."""
        return yaml.dump(
            self.to_dict(result),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def to_table(self, result: CheckResult, title: str = "Check result") -> Table:
        """Build a Rich table with one row per violation."""
        table = Table(title=title, show_lines=True)
        table.add_column("Reason", style="bold", min_width=8)
        table.add_column("Location", min_width=10)
        table.add_column("Expected")
        table.add_column("Actual")

        for violation in result.violations:
            color = _REASON_COLORS[violation.reason]
            actual = violation.actual.value if violation.actual is not None else "-"
            table.add_row(
                f"[{color}]{violation.reason.name}[/{color}]",
                violation.label,
                violation.expected,
                actual,
            )
        return table

    def print(self, result: CheckResult, console: Console | None = None) -> None:
        """Print ``result`` to ``console`` (stdout by default)."""
        console = console or Console()
        if result.passed():
            console.print("[green]OK[/green] no violations")
            return
        console.print(self.to_table(result))
        console.print(f"\n[bold]Summary:[/bold] {len(result)} violation(s)")
