"""``waypoint generate``: print the URL for a named route."""

import argparse
import sys
from typing import Any

from waypoint.cli._load import load_generator
from waypoint.errors import WaypointError


def parse_params(pairs: list[str]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` strings into a parameter mapping.

    ``tags[]=a tags[]=b`` collects ``{"tags": ["a", "b"]}``; otherwise the
    last value for a key wins.
    """
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Invalid parameter {pair!r}, expected KEY=VALUE"
            raise ValueError(msg)
        if key.endswith("[]"):
            params.setdefault(key[:-2], []).append(value)
        else:
            params[key] = value
    return params


def run_generate(args: argparse.Namespace) -> None:
    """Generate and print the URL for ``args.name``."""
    try:
        params = parse_params(args.param)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    generator = load_generator(args.routes_file)
    try:
        url = generator.generate(args.name, params, absolute=args.absolute)
    except WaypointError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(url)
