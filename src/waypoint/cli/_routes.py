"""``waypoint routes``: list exported routes.

Prints every route with the methods it answers, its reconstructed path
pattern and the schemes it is pinned to.
"""

import argparse

from waypoint.cli._load import load_generator


def run_routes(args: argparse.Namespace) -> None:
    """Print a NAME / METHOD / PATH / SCHEMES table for ``args.routes_file``."""
    generator = load_generator(args.routes_file)

    routes = generator.routes
    if not routes:
        print("No routes exported.")
        return

    # Build rows: (name, methods, path, schemes)
    rows: list[tuple[str, str, str, str]] = []
    for name, route in routes.items():
        path = route.pattern
        if route.host_tokens:
            path = f"//{route.host_pattern}{path}"
        methods = ", ".join(sorted(route.methods)) or "ANY"
        rows.append((name, methods, path, ", ".join(route.schemes) or "ANY"))

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_methods = max(max(len(r[1]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[2]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "METHOD", "PATH", "SCHEMES"))
    sep_len = max_name + max_methods + max_path + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for name, methods, path, schemes in rows:
        print(fmt.format(name, methods, path, schemes))
