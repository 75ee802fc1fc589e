"""``httprouter match`` — explain how one request dispatches."""

import argparse

from httprouter.cli._resolve import load_router
from httprouter.routing.route import ANY


def run_match(args: argparse.Namespace) -> None:
    """Print the winning route and its bindings; exit 1 when nothing matches."""
    router = load_router(args.router)
    result = router.dispatch(args.method, args.path)
    if not result:
        print(f"{args.method.upper()} {args.path}: not found (404)")
        raise SystemExit(1)

    route = result.route
    method = "ANY" if route.method == ANY else route.method
    print(f"{method} {route.path}  ->  {route.describe()}")
    for name, value in result.bindings.items():
        print(f"  {name} = {value!r}")
