"""trailertally configuration module.

Ambient settings only (logging, chart output). Counting behaviour is
controlled exclusively by command-line arguments. All settings support
environment variable overrides with the TRAILERTALLY_ prefix.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrailerTallySettings(BaseSettings):
    """trailertally runtime configuration.

    For example, TRAILERTALLY_LOG_LEVEL=debug enables debug tracing of
    commits whose message could not be read.
    """

    model_config = SettingsConfigDict(env_prefix="TRAILERTALLY_")

    # Logging
    log_level: str = Field(
        default="warning",
        description="Logging level (debug, info, warning, error)",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console or json)",
    )

    # Chart output
    output_dir: Path | None = Field(
        default=None,
        description="Directory the pie chart PNG is written to (working directory if unset)",
    )
    chart_width: int = Field(default=800, description="Chart width in pixels")
    chart_height: int = Field(default=800, description="Chart height in pixels")
    chart_dpi: int = Field(default=100, description="Chart resolution")

    # Labels
    ignored_label: str = Field(
        default="Ignored",
        description="Chart label for commits with no target involvement",
    )
    no_interaction_label: str = Field(
        default="No interaction",
        description="Chart label for the multi-identity residual bucket",
    )


# Module-level singleton
settings = TrailerTallySettings()
