"""Crossroad exception hierarchy.

Shared across the link source model, pattern parser, validation engine and
CLI so every module raises and catches the same types.

Every ``ValidationError`` is raised while a router is being built.  They are
programming errors surfaced at startup: retrying the same declarations will
fail the same way.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crossroad.policy import AcceptPolicy
    from crossroad.sources import LinkSource


def _render_sources(sources: Iterable[object]) -> str:
    return ", ".join(sorted(str(s) for s in sources))


class CrossroadError(Exception):
    """Base for all crossroad-specific errors."""


class ValidationError(CrossroadError):
    """Raised when a router declaration is inconsistent.

    Typically raised by ``build_router()``; no router is produced.
    """


class InvalidPattern(ValidationError):  # noqa: N818
    """A pattern string is malformed or embeds an undeclared link source."""

    def __init__(self, pattern: str, source: "LinkSource | None" = None) -> None:
        self.pattern = pattern
        self.source = source
        if source is None:
            msg = f"Pattern string '{pattern}' is invalid."
        else:
            msg = f"Pattern '{pattern}' contains invalid link source '{source}'."
        super().__init__(msg)


class UnknownLinkSource(ValidationError):  # noqa: N818
    """An accept policy names link sources the router does not accept.

    ``missing`` holds every absent source, not just the first one found.
    """

    def __init__(self, missing: "Iterable[LinkSource]") -> None:
        self.missing = frozenset(missing)
        super().__init__(f"Unknown link sources [{_render_sources(self.missing)}] is registered")


class DuplicateRoute(ValidationError):  # noqa: N818
    """Two routes share a path and overlapping link sources."""

    def __init__(self, pattern: str, policy: "AcceptPolicy") -> None:
        self.pattern = pattern
        self.policy = policy
        super().__init__(f"Route definition for {pattern} (accepting {policy}) is duplicated")


class InvalidLinkSource(ValidationError):  # noqa: N818
    """A declared link source is malformed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Link source '{source}' {reason}.")
