"""Report rendering for calculated resource usage."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from kuotacalc.constants.values import (
    DETAILED_COLUMNS,
    LABEL_CPU_LIMIT,
    LABEL_CPU_REQUEST,
    LABEL_MEMORY_LIMIT,
    LABEL_MEMORY_REQUEST,
)
from kuotacalc.models.resources import Resources, ResourceUsage


class ReportGenerator:
    """Render usage tables and totals to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def summary_lines(self, total: Resources) -> list[str]:
        return [
            f"{LABEL_CPU_REQUEST}: {total.cpu_min}",
            f"{LABEL_CPU_LIMIT}: {total.cpu_max}",
            f"{LABEL_MEMORY_REQUEST}: {total.memory_min}",
            f"{LABEL_MEMORY_LIMIT}: {total.memory_max}",
        ]

    def build_table(self, usages: Sequence[ResourceUsage]) -> Table:
        """One row per workload with its rollout (peak) resources."""
        table = Table(box=None, pad_edge=False, padding=(0, 4, 0, 0))
        for column in DETAILED_COLUMNS:
            table.add_column(column, no_wrap=True)

        for usage in usages:
            details = usage.details
            peak = usage.rollout_resources
            table.add_row(
                details.version,
                details.kind,
                details.name,
                str(details.replicas),
                details.strategy,
                str(details.max_replicas),
                str(peak.cpu_min),
                str(peak.cpu_max),
                str(peak.memory_min),
                str(peak.memory_max),
            )
        return table

    def render_summary(self, total: Resources) -> None:
        for line in self.summary_lines(total):
            self.console.print(line, highlight=False, markup=False)

    def render_detailed(
        self,
        usages: Sequence[ResourceUsage],
        total: Resources,
        max_rollouts: int,
    ) -> None:
        """Print the per-workload table, what it assumes, then the total."""
        self.console.print(self.build_table(usages))
        self.console.print()
        if max_rollouts > -1:
            self.console.print("Table assuming simultaneous rollout of all resources", highlight=False)
            self.console.print(
                f"Total assuming simultaneous rollout of {max_rollouts} resources",
                highlight=False,
            )
        else:
            self.console.print(
                "Table and Total assuming simultaneous rollout of all resources",
                highlight=False,
            )
        self.console.print()
        self.console.print("Total", highlight=False)
        self.render_summary(total)
