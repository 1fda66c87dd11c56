"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from crossroad.policy import AcceptPolicy
from crossroad.routing.context import Context
from crossroad.routing.pattern import Pattern
from crossroad.sources import LinkSource

type Handler = Callable[[Context], Any]


@dataclass(frozen=True, slots=True)
class PendingRoute:
    """A route waiting to be validated."""

    pattern: str
    accept_policy: AcceptPolicy
    handler: Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A validated route definition.

    Created by the validation engine; ``sources`` is the effective-source set
    resolved from ``accept_policy`` against the router's declared sources.
    """

    pattern: Pattern
    accept_policy: AcceptPolicy
    handler: Handler
    sources: frozenset[LinkSource]

    def accepts(self, source: LinkSource) -> bool:
        """True if a URL arriving from *source* may reach this route."""
        if source not in self.sources:
            return False
        explicit = self.pattern.explicit_source
        return explicit is None or explicit == source


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    context: Context
