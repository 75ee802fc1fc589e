"""httprouter CLI — route table inspection.

Entry point registered as ``httprouter`` in ``pyproject.toml``::

    [project.scripts]
    httprouter = "httprouter.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``httprouter`` command."""
    parser = argparse.ArgumentParser(
        prog="httprouter",
        description="httprouter — declarative HTTP route compiler and dispatcher.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- httprouter routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List compiled routes in match order")
    routes_parser.add_argument("router", help="Import string (e.g. myapp.routes:router)")

    # -- httprouter match -------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route a request resolves to")
    match_parser.add_argument("router", help="Import string (e.g. myapp.routes:router)")
    match_parser.add_argument("method", help="HTTP method (e.g. GET)")
    match_parser.add_argument("path", help="Request path (e.g. /1/users/42)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from httprouter.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from httprouter.cli._match import run_match

        run_match(args)
