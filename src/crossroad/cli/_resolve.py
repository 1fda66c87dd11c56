"""Router loading for the CLI.

Resolves ``"module:attribute"`` strings to routers and command-line source
strings to link sources.  Failures are reported on stderr and end the
process with exit code 1; a ``ValidationError`` is broken down into its
kind and the offending values.
"""

import importlib
import sys
from typing import NoReturn
from urllib.parse import urlsplit

from crossroad.errors import (
    DuplicateRoute,
    InvalidLinkSource,
    InvalidPattern,
    UnknownLinkSource,
    ValidationError,
)
from crossroad.routing.router import Router
from crossroad.sources import CustomURLScheme, LinkSource, source_for_url


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a crossroad Router instance.

    The attribute defaults to ``router``.  A callable that is not a Router
    is treated as a factory and called with no arguments.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        ValidationError: If the factory's declarations are inconsistent.
        TypeError: If the factory fails otherwise, or nothing yields a Router.

    """
    module_path, _, attr_name = import_string.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "router")
    if isinstance(obj, Router):
        return obj
    if not callable(obj):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a crossroad.Router instance"
        raise TypeError(msg)

    try:
        router = obj()
    except ValidationError:
        raise
    except Exception as exc:
        msg = f"Factory function {import_string!r} raised an error: {exc}"
        raise TypeError(msg) from exc

    if not isinstance(router, Router):
        msg = f"Factory function {import_string!r} returned {type(router).__name__}, not a crossroad.Router"
        raise TypeError(msg)
    return router


def parse_source(text: str) -> LinkSource:
    """Parse ``pokedex``, ``pokedex://`` or ``https://example.com`` into a link source."""
    if "://" not in text:
        return CustomURLScheme(text)
    parts = urlsplit(text)
    return source_for_url(parts.scheme, parts.netloc)


def describe_error(exc: ValidationError) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs naming the error kind and what caused it."""
    match exc:
        case InvalidLinkSource():
            return [("kind", "invalid-link-source"), ("source", exc.source), ("reason", exc.reason)]
        case InvalidPattern(source=None):
            return [("kind", "invalid-pattern"), ("pattern", exc.pattern)]
        case InvalidPattern():
            return [
                ("kind", "undeclared-pattern-source"),
                ("pattern", exc.pattern),
                ("source", str(exc.source)),
            ]
        case UnknownLinkSource():
            return [
                ("kind", "unknown-link-source"),
                ("missing", ", ".join(sorted(str(s) for s in exc.missing))),
            ]
        case DuplicateRoute():
            return [
                ("kind", "duplicate-route"),
                ("pattern", exc.pattern),
                ("accepting", str(exc.policy)),
            ]
    return [("kind", "validation-error")]


def fail(message: str, details: list[tuple[str, str]] | None = None) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    for label, value in details or ():
        print(f"  {label + ':':<11}{value}", file=sys.stderr)
    raise SystemExit(1)


def load_router(import_string: str) -> Router:
    """Resolve *import_string*, exiting with a diagnostic if that fails."""
    try:
        return resolve_router(import_string)
    except ValidationError as exc:
        fail(str(exc), describe_error(exc))
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        fail(str(exc))
