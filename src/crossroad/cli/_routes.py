"""``crossroad routes`` — list validated routes in dispatch order.

Each row shows the path, the link sources that can actually reach the
route (its effective sources, narrowed by an explicit ``scheme://``
prefix), the explicit source if any, and the handler.
"""

import argparse

from crossroad.cli._resolve import fail, load_router, parse_source
from crossroad.routing.route import Route


def _reachable(route: Route) -> str:
    names = sorted(str(s) for s in route.sources if route.accepts(s))
    return ", ".join(names) or "-"


def _format_table(headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> list[str]:
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows, strict=True)]
    lines = []
    for cells in (headers, tuple("-" * w for w in widths), *rows):
        lines.append("  ".join(cell.ljust(w) for cell, w in zip(cells, widths, strict=True)).rstrip())
    return lines


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table for ``args.router``, optionally for one source."""
    router = load_router(args.router)

    routes = router.routes
    if args.source is not None:
        source = parse_source(args.source)
        if source not in router.accepted_sources:
            fail(f"Link source '{source}' is not accepted by {args.router}")
        routes = tuple(route for route in routes if route.accepts(source))

    if not routes:
        print("No routes registered.")
        return

    rows = [
        (
            route.pattern.path,
            _reachable(route),
            str(route.pattern.explicit_source or "-"),
            getattr(route.handler, "__name__", repr(route.handler)),
        )
        for route in routes
    ]
    for line in _format_table(("PATH", "SOURCES", "SCHEME", "HANDLER"), rows):
        print(line)
