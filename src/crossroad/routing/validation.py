"""Validation engine — turns declarations into a validated route table.

Runs every consistency check over the declared link sources and the pending
routes, strictly in declaration order, and stops at the first violation::

    sources = validate_sources([CustomURLScheme("pokedex")])
    routes = validate_routes(sources, pending)

Checks, per pending route:

1. the pattern parses (``InvalidPattern``)
2. an explicit ``scheme://`` prefix names a declared source (``InvalidPattern``)
3. the accept policy only names declared sources (``UnknownLinkSource``)
4. no earlier route on the same normalized path shares a link source
   (``DuplicateRoute``)
"""

import logging
from collections.abc import Iterable, Sequence

from crossroad.config import RouterConfig
from crossroad.errors import DuplicateRoute, InvalidPattern
from crossroad.policy import AcceptAny, resolve_policy
from crossroad.routing.pattern import parse_pattern
from crossroad.routing.route import PendingRoute, Route
from crossroad.sources import LinkSource

logger = logging.getLogger("crossroad.router")

_DEFAULT_CONFIG = RouterConfig()


def validate_sources(
    sources: Iterable[LinkSource], config: RouterConfig = _DEFAULT_CONFIG
) -> tuple[LinkSource, ...]:
    """Validate each declared source in order; return them de-duplicated.

    Raises ``InvalidLinkSource`` for the first malformed source.
    """
    accepted: dict[LinkSource, None] = {}
    for source in sources:
        source.validate(config)
        accepted.setdefault(source, None)
    return tuple(accepted)


def validate_routes(
    declared: Sequence[LinkSource],
    pending: Iterable[PendingRoute],
    config: RouterConfig = _DEFAULT_CONFIG,
) -> tuple[Route, ...]:
    """Validate pending routes against the (already validated) declared sources.

    Returns the routes in declaration order.  Raises the first
    ``ValidationError`` found; routes after it are not examined.
    """
    declared_set = frozenset(declared)
    # normalized path -> (effective sources, accepts any) of routes already accepted
    seen: dict[str, list[tuple[frozenset[LinkSource], bool]]] = {}
    routes: list[Route] = []

    for entry in pending:
        pattern = parse_pattern(entry.pattern, config)

        explicit = pattern.explicit_source
        if explicit is not None and explicit not in declared_set:
            raise InvalidPattern(entry.pattern, source=explicit)

        sources = resolve_policy(entry.accept_policy, declared_set)

        key = pattern.normalized_path
        # ANY overlaps every other route on the path, even an empty OnlyFor
        is_any = isinstance(entry.accept_policy, AcceptAny)
        for prior_sources, prior_any in seen.get(key, ()):
            if is_any or prior_any or sources & prior_sources:
                raise DuplicateRoute(entry.pattern, entry.accept_policy)

        seen.setdefault(key, []).append((sources, is_any))
        routes.append(Route(pattern, entry.accept_policy, entry.handler, sources))
        logger.debug("Accepted route %s (accepting %s)", entry.pattern, entry.accept_policy)

    return tuple(routes)
