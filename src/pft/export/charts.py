#!/usr/bin/env python3
"""
Chart Snapshot

Renders a report as a two-panel figure: income/expense proportions and the
monthly cumulative balance line. The output format follows the file suffix
(png, pdf or svg).
"""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Use non-interactive backend

import matplotlib.pyplot as plt  # noqa: E402

from ..analysis.report import SummaryReport  # noqa: E402
from ..core.currency import format_minor  # noqa: E402
from ..entries.models import EntryType  # noqa: E402

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("png", "pdf", "svg")

TYPE_COLORS = {
    EntryType.INCOME: "#10b981",
    EntryType.EXPENSE: "#ef4444",
}
ACCENT_COLOR = "#7c3aed"


def render_dashboard(
    report: SummaryReport,
    output_file: Path,
    currency_symbol: str,
    figure_size: tuple[int, int] = (12, 5),
    dpi: int = 150,
) -> Path:
    """
    Render ``report`` to ``output_file``.

    Args:
        report: Aggregated figures to draw
        output_file: Destination; suffix selects the format
        currency_symbol: Symbol for axis and slice labels
        figure_size: Figure size in inches
        dpi: Resolution for raster output

    Returns:
        The written path

    Raises:
        ValueError: If the file suffix isn't a supported format
    """
    output_file = Path(output_file)
    file_format = output_file.suffix.lstrip(".").lower()
    if file_format not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported chart format '{file_format}'. Use one of: {', '.join(SUPPORTED_FORMATS)}")

    output_file.parent.mkdir(parents=True, exist_ok=True)

    fig, (pie_ax, line_ax) = plt.subplots(1, 2, figsize=figure_size)
    try:
        _create_breakdown_panel(pie_ax, report, currency_symbol)
        _create_cumulative_panel(line_ax, report, currency_symbol)

        fig.suptitle("Income & Expense Overview", fontsize=14, fontweight="bold")
        fig.tight_layout()
        fig.savefig(output_file, dpi=dpi, bbox_inches="tight", format=file_format)
    finally:
        plt.close(fig)

    logger.info("Saved chart snapshot to %s", output_file)
    return output_file


def _create_breakdown_panel(ax, report: SummaryReport, currency_symbol: str) -> None:
    """Doughnut of amount per entry type."""
    ax.set_title("Income vs Expense", fontsize=12, fontweight="bold")

    if not report.breakdown:
        ax.axis("off")
        ax.text(0.5, 0.5, "No transactions", ha="center", va="center", fontsize=12, color="gray")
        return

    types = list(report.breakdown)
    values = [report.breakdown[t].to_minor() for t in types]
    labels = [f"{t.label}\n{format_minor(v, currency_symbol)}" for t, v in zip(types, values)]

    ax.pie(
        values,
        labels=labels,
        colors=[TYPE_COLORS[t] for t in types],
        startangle=90,
        wedgeprops={"width": 0.4},
    )
    ax.axis("equal")


def _create_cumulative_panel(ax, report: SummaryReport, currency_symbol: str) -> None:
    """Cumulative balance line over the lookback window."""
    labels = [point.label for point in report.series]
    values = [float(point.cumulative.to_decimal()) for point in report.series]

    ax.plot(labels, values, color=ACCENT_COLOR, linewidth=2, marker="o")
    ax.fill_between(range(len(values)), values, color=ACCENT_COLOR, alpha=0.14)
    ax.axhline(y=0, color="black", linestyle="-", linewidth=0.5)

    ax.set_title("Cumulative Balance", fontsize=12, fontweight="bold")
    ax.set_ylabel(f"Balance ({currency_symbol})", fontsize=10)
    ax.grid(True, alpha=0.3)
    ax.tick_params(axis="x", rotation=45, labelsize=8)
    ax.yaxis.set_major_formatter(plt.FuncFormatter(lambda x, p: f"{currency_symbol}{x:,.0f}"))
