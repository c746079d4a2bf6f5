"""Two-ring pie chart rendered with matplotlib."""

import io
from collections.abc import Sequence

from matplotlib.figure import Figure

from .base import ChartRenderer, ChartRenderError


class MatplotlibPieRenderer(ChartRenderer):
    """Draws an inner ring of percentages and an outer ring of labels.

    Both rings share one color per category and one legend below the chart.
    """

    def __init__(self, width: int = 800, height: int = 800, dpi: int = 100) -> None:
        self.width = width
        self.height = height
        self.dpi = dpi

    def render(
        self,
        title: str,
        subtitle: str,
        labeled_values: Sequence[tuple[str, int]],
    ) -> bytes:
        labels = [label for label, _ in labeled_values]
        values = [value for _, value in labeled_values]
        total = sum(values)
        if total <= 0:
            raise ChartRenderError("Cannot draw a pie chart with no data")

        colors = [f"C{i}" for i in range(len(values))]

        def percentage(pct: float) -> str:
            return f"{pct:.1f}%" if pct > 0 else ""

        fig = Figure(
            figsize=(self.width / self.dpi, self.height / self.dpi),
            dpi=self.dpi,
        )
        ax = fig.add_subplot()
        ax.set_aspect("equal")

        # Outer ring: category names outside the wedges.
        outer_wedges, _ = ax.pie(
            values,
            radius=1.0,
            colors=colors,
            labels=[label if value else "" for label, value in labeled_values],
            labeldistance=1.08,
            startangle=90,
            counterclock=False,
            wedgeprops=dict(width=0.3, edgecolor="white", linewidth=2),
            textprops=dict(color="black"),
        )

        # Inner ring: percentages inside the wedges.
        ax.pie(
            values,
            radius=0.7,
            colors=colors,
            autopct=percentage,
            pctdistance=0.7,
            startangle=90,
            counterclock=False,
            wedgeprops=dict(edgecolor="white", linewidth=2),
            textprops=dict(color="white", fontweight="bold"),
        )

        fig.suptitle(title, fontsize=20, fontweight="bold")
        ax.set_title(subtitle, fontsize=12, color="dimgray")
        ax.legend(
            outer_wedges,
            labels,
            loc="upper center",
            bbox_to_anchor=(0.5, 0.0),
            ncol=min(len(labels), 3),
            frameon=False,
        )

        buffer = io.BytesIO()
        try:
            fig.savefig(buffer, format="png", bbox_inches="tight")
        except (ValueError, RuntimeError) as e:
            raise ChartRenderError(f"Failed to render chart: {e}") from e
        return buffer.getvalue()
