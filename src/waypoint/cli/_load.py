"""Shared loading for CLI commands."""

import sys
from pathlib import Path

from waypoint.errors import ConfigurationError
from waypoint.routing.generator import UrlGenerator


def load_generator(routes_file: str) -> UrlGenerator:
    """Build a generator from *routes_file*, exiting with status 1 on failure."""
    try:
        return UrlGenerator.from_json(Path(routes_file))
    except (OSError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
