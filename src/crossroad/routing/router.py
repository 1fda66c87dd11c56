"""Router builder and validated, immutable router.

Routes are registered through a ``RouteRegistry`` handed to a registration
callback, validated once by ``build_router()``, and frozen into a ``Router``.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from urllib.parse import parse_qsl, urlsplit

from crossroad.config import RouterConfig
from crossroad.policy import ANY, AcceptPolicy
from crossroad.routing.context import Context
from crossroad.routing.route import Handler, PendingRoute, Route, RouteMatch
from crossroad.routing.validation import validate_routes, validate_sources
from crossroad.sources import LinkSource, source_for_url

logger = logging.getLogger("crossroad.router")


class RouteRegistry:
    """Collects route declarations, in order, for a single router build.

    Usage::

        def register(routes: RouteRegistry) -> None:
            routes.add("/pokemons", list_pokemons)

            @routes.route("/pokemons/:id", accepting=only_for(pokedex))
            def show_pokemon(context: Context) -> bool: ...
    """

    __slots__ = ("_consumed", "_pending")

    def __init__(self) -> None:
        self._pending: list[PendingRoute] = []
        self._consumed = False

    def add(self, pattern: str, handler: Handler, *, accepting: AcceptPolicy = ANY) -> None:
        """Append a route. Must be called from the registration callback."""
        self._check_not_consumed()
        self._pending.append(PendingRoute(pattern, accepting, handler))

    def route(
        self, pattern: str, *, accepting: AcceptPolicy = ANY
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator."""

        def decorator(func: Handler) -> Handler:
            self.add(pattern, func, accepting=accepting)
            return func

        return decorator

    def __len__(self) -> int:
        return len(self._pending)

    def consume(self) -> tuple[PendingRoute, ...]:
        """Hand the pending routes over. The registry accepts no more routes."""
        self._check_not_consumed()
        self._consumed = True
        return tuple(self._pending)

    def _check_not_consumed(self) -> None:
        if self._consumed:
            msg = (
                "Cannot register routes after the router has been built. "
                "Register every route inside the registration callback."
            )
            raise RuntimeError(msg)


class Router:
    """A validated route table. Immutable after construction.

    Build one with ``build_router()``; the constructor trusts its arguments.

    Usage::

        router = build_router([CustomURLScheme("pokedex")], register)
        router.open_if_possible("pokedex://pokemons/25")
    """

    __slots__ = ("_accepted_sources", "_config", "_routes")

    def __init__(
        self,
        accepted_sources: tuple[LinkSource, ...],
        routes: tuple[Route, ...],
        config: RouterConfig,
    ) -> None:
        self._accepted_sources = accepted_sources
        self._routes = routes
        self._config = config

    def __repr__(self) -> str:
        return f"<Router sources={len(self._accepted_sources)} routes={len(self._routes)}>"

    @property
    def accepted_sources(self) -> tuple[LinkSource, ...]:
        return self._accepted_sources

    @property
    def routes(self) -> tuple[Route, ...]:
        """Validated routes in declaration order."""
        return self._routes

    def matches(self, url: str) -> Iterator[RouteMatch]:
        """Yield every route that can handle *url*, in declaration order.

        A URL that is not absolute, or that arrives from a link source the
        router does not accept, yields nothing.
        """
        try:
            parts = urlsplit(url)
        except ValueError:
            logger.debug("Ignoring unparseable URL %r", url)
            return
        if not parts.scheme:
            return
        source = source_for_url(parts.scheme, parts.netloc, self._config)
        if source not in self._accepted_sources:
            logger.debug("Ignoring %r: link source %s is not accepted", url, source)
            return

        path = parts.path
        if parts.scheme.lower() not in self._config.web_schemes:
            # Custom schemes have no origin: pokedex://pokemons/25 -> /pokemons/25
            path = f"{parts.netloc}/{path}"
        components = [p for p in path.strip("/").split("/") if p]

        query: dict[str, str] = {}
        for key, value in parse_qsl(parts.query):
            query.setdefault(key, value)

        for route in self._routes:
            if not route.accepts(source):
                continue
            params = route.pattern.match(components)
            if params is None:
                continue
            context = Context(url=url, source=source, parameters=params, query=dict(query))
            yield RouteMatch(route=route, context=context)

    def match(self, url: str) -> RouteMatch | None:
        """Return the first route that can handle *url*, or ``None``."""
        return next(self.matches(url), None)

    def open_if_possible(self, url: str) -> bool:
        """Dispatch *url* to the first matching handler that accepts it.

        A handler declines by returning ``False``; the next matching route
        is then tried.  Returns ``True`` once a handler accepts.
        """
        for match in self.matches(url):
            if match.route.handler(match.context) is False:
                logger.debug("Route %s declined %r", match.route.pattern.raw, url)
                continue
            return True
        return False


def build_router(
    accepting: Iterable[LinkSource],
    register: Callable[[RouteRegistry], None],
    *,
    config: RouterConfig | None = None,
) -> Router:
    """Validate link sources and routes and return an immutable ``Router``.

    *register* is called exactly once with a fresh ``RouteRegistry``.
    Raises the first ``ValidationError`` found; no router is produced.
    """
    config = config or RouterConfig()
    sources = validate_sources(accepting, config)

    registry = RouteRegistry()
    register(registry)
    routes = validate_routes(sources, registry.consume(), config)

    logger.debug("Built router: %d routes, %d link sources", len(routes), len(sources))
    return Router(sources, routes, config)
