"""Base classes and types for chart rendering."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class ChartRenderError(Exception):
    """The chart could not be rendered or written."""

    pass


class ChartRenderer(ABC):
    """Abstract base class for label/value chart renderers."""

    @abstractmethod
    def render(
        self,
        title: str,
        subtitle: str,
        labeled_values: Sequence[tuple[str, int]],
    ) -> bytes:
        """Render the table and return PNG image bytes."""
        pass

    def render_to_file(
        self,
        path: Path,
        title: str,
        subtitle: str,
        labeled_values: Sequence[tuple[str, int]],
    ) -> Path:
        image = self.render(title, subtitle, labeled_values)
        try:
            path.write_bytes(image)
        except OSError as e:
            raise ChartRenderError(f"Failed to write chart to {path}: {e}") from e
        logger.info("chart_written", path=str(path), size=len(image))
        return path
