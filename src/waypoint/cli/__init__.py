"""Waypoint CLI: inspect exported route tables and generate URLs.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint: build URLs from an exported route table.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List exported routes")
    routes_parser.add_argument("routes_file", help="Path to the exported routing JSON")

    # -- waypoint generate ------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Generate the URL for a route")
    generate_parser.add_argument("routes_file", help="Path to the exported routing JSON")
    generate_parser.add_argument("name", help="Route name")
    generate_parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Route parameter (repeatable; keys ending in [] collect a list)",
    )
    generate_parser.add_argument(
        "--absolute",
        action="store_true",
        help="Always include scheme and host",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "generate":
        from waypoint.cli._generate import run_generate

        run_generate(args)
