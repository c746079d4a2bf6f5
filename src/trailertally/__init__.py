"""trailertally - commit authorship and trailer endorsement audit."""

__version__ = "0.1.0"
