"""``crossroad check`` — build a router and report how its sources are covered.

On success prints one line per accepted link source with the number of
routes reachable from it.  A source no route reaches is flagged, since
links from it will always fall through.  Exits with code 1 on a
declaration error.
"""

import argparse

from crossroad.cli._resolve import load_router


def run_check(args: argparse.Namespace) -> None:
    """Validate the router named by ``args.router`` and print a coverage summary."""
    router = load_router(args.router)

    print(f"OK: {len(router.routes)} routes, {len(router.accepted_sources)} link sources")
    labels = [str(source) for source in router.accepted_sources]
    width = max((len(label) for label in labels), default=0)
    for source, label in zip(router.accepted_sources, labels, strict=True):
        count = sum(1 for route in router.routes if route.accepts(source))
        if count:
            print(f"  {label:<{width}}  {count} route{'' if count == 1 else 's'}")
        else:
            print(f"  {label:<{width}}  unreachable (no route accepts it)")
