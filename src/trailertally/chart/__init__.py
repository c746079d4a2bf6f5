"""Chart rendering for trailertally reports."""

from .base import ChartRenderer, ChartRenderError
from .pie import MatplotlibPieRenderer

__all__ = [
    "ChartRenderer",
    "ChartRenderError",
    "MatplotlibPieRenderer",
]
