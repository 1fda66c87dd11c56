"""Tests for crossroad.routing.context — handler context and parameters."""

import pytest

from crossroad.routing.context import Context
from crossroad.sources import CustomURLScheme

POKEDEX = CustomURLScheme("pokedex")


def _context(**parameters: str) -> Context:
    return Context(url="pokedex://pokemons/25", source=POKEDEX, parameters=parameters)


class TestParameter:
    def test_default_is_str(self) -> None:
        assert _context(id="25").parameter("id") == "25"

    def test_typed(self) -> None:
        assert _context(id="25").parameter("id", int) == 25

    def test_missing(self) -> None:
        with pytest.raises(KeyError):
            _context().parameter("id")

    def test_bad_value(self) -> None:
        with pytest.raises(ValueError):
            _context(id="pikachu").parameter("id", int)


class TestContext:
    def test_defaults(self) -> None:
        context = Context(url="pokedex://", source=POKEDEX)
        assert context.parameters == {}
        assert context.query == {}

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            _context().url = "other://"  # type: ignore[misc]
