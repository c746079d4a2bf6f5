"""trailertally command-line interface."""
