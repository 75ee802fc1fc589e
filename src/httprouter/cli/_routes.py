"""``httprouter routes`` — list compiled routes in match order."""

import argparse

from httprouter.cli._resolve import load_router
from httprouter.routing.route import ANY, RouteSpec


def format_rows(routes: tuple[RouteSpec, ...]) -> list[str]:
    """Render routes as an aligned METHOD / PATH / TARGET table."""
    rows = [("ANY" if r.method == ANY else r.method, r.path, r.describe()) for r in routes]

    max_method = max([len(r[0]) for r in rows] + [6])  # "METHOD" header
    max_path = max([len(r[1]) for r in rows] + [4])  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "TARGET")]
    sep_len = max_method + max_path + 4 + max((len(r[2]) for r in rows), default=6)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return lines


def run_routes(args: argparse.Namespace) -> None:
    """Print the router's compiled table, one row per route."""
    router = load_router(args.router)
    routes = router.table.routes
    if not routes:
        print("No routes registered.")
        return
    for line in format_rows(routes):
        print(line)
