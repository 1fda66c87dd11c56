"""Crossroad CLI — check a router declaration before shipping it.

Entry point registered as ``crossroad`` in ``pyproject.toml``::

    [project.scripts]
    crossroad = "crossroad.cli:main"

Both commands take an import string naming a ``Router`` or a zero-argument
factory that builds one (``myapp.links:router``, ``myapp.links:make_router``).
Building is where validation happens, so a factory is the form that lets
``crossroad check`` report a broken declaration instead of crashing on import.
"""

import argparse
import logging
import sys


def _enable_debug_logging() -> None:
    """Send crossroad's debug records (accepted routes, dispatch) to stderr."""
    log = logging.getLogger("crossroad")
    log.setLevel(logging.DEBUG)
    if not any(getattr(h, "_crossroad_cli", False) for h in log.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        handler._crossroad_cli = True  # type: ignore[attr-defined]
        log.addHandler(handler)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``crossroad`` command."""
    parser = argparse.ArgumentParser(
        prog="crossroad",
        description="Crossroad — validate and inspect link routers.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every accepted route while the router is built",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- crossroad check --------------------------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Build the router and report the first declaration error",
    )
    check_parser.add_argument("router", help="Import string (e.g. myapp.links:make_router)")

    # -- crossroad routes -------------------------------------------------
    routes_parser = subparsers.add_parser(
        "routes",
        help="List validated routes with the link sources that reach them",
    )
    routes_parser.add_argument("router", help="Import string (e.g. myapp.links:router)")
    routes_parser.add_argument(
        "--source",
        default=None,
        help="Only list routes reachable from this link source (e.g. pokedex:// or https://example.com)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        _enable_debug_logging()

    if args.command == "check":
        from crossroad.cli._check import run_check

        run_check(args)
    elif args.command == "routes":
        from crossroad.cli._routes import run_routes

        run_routes(args)
