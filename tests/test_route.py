"""Tests for crossroad.routing.route — PendingRoute, Route, RouteMatch."""

import pytest

from crossroad.policy import ANY, only_for
from crossroad.routing.context import Context
from crossroad.routing.pattern import parse_pattern
from crossroad.routing.route import PendingRoute, Route, RouteMatch
from crossroad.sources import CustomURLScheme, UniversalLink

POKEDEX = CustomURLScheme("pokedex")
WEB = UniversalLink("https://my-awesome-pokedex.com")


def _handler(context: Context) -> bool:
    return True


class TestPendingRoute:
    def test_creation(self) -> None:
        pending = PendingRoute("/hoge", ANY, _handler)
        assert pending.pattern == "/hoge"
        assert pending.accept_policy is ANY
        assert pending.handler is _handler


class TestRoute:
    def test_accepts_effective_sources(self) -> None:
        route = Route(parse_pattern("/hoge"), only_for(POKEDEX), _handler, frozenset({POKEDEX}))
        assert route.accepts(POKEDEX)
        assert not route.accepts(WEB)

    def test_explicit_source_narrows(self) -> None:
        route = Route(parse_pattern("pokedex://hoge"), ANY, _handler, frozenset({POKEDEX, WEB}))
        assert route.accepts(POKEDEX)
        assert not route.accepts(WEB)

    def test_frozen(self) -> None:
        route = Route(parse_pattern("/"), ANY, _handler, frozenset())
        with pytest.raises(AttributeError):
            route.handler = _handler  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        route = Route(parse_pattern("/"), ANY, _handler, frozenset({POKEDEX}))
        context = Context(url="pokedex://", source=POKEDEX)
        match = RouteMatch(route=route, context=context)
        assert match.route is route
        assert match.context.parameters == {}
