"""Tests for crossroad.routing.pattern — pattern string parsing."""

import pytest

from crossroad.errors import InvalidPattern
from crossroad.routing.pattern import parse_pattern
from crossroad.sources import CustomURLScheme, UniversalLink


class TestParsePattern:
    def test_root(self) -> None:
        pattern = parse_pattern("/")
        assert pattern.segments == ()
        assert pattern.explicit_source is None
        assert pattern.path == "/"

    def test_static(self) -> None:
        pattern = parse_pattern("/hoge/fuga")
        assert pattern.segments == ("hoge", "fuga")
        assert pattern.raw == "/hoge/fuga"

    def test_without_leading_slash(self) -> None:
        assert parse_pattern("hoge/fuga").segments == ("hoge", "fuga")

    def test_param(self) -> None:
        pattern = parse_pattern("/pokemons/:id")
        assert pattern.segments == ("pokemons", ":id")
        assert pattern.parameter_names == ("id",)

    def test_custom_scheme_prefix(self) -> None:
        pattern = parse_pattern("pokedex://hoge/fuga")
        assert pattern.explicit_source == CustomURLScheme("pokedex")
        assert pattern.segments == ("hoge", "fuga")

    def test_custom_scheme_root(self) -> None:
        pattern = parse_pattern("pokedex://")
        assert pattern.explicit_source == CustomURLScheme("pokedex")
        assert pattern.segments == ()

    def test_web_scheme_prefix_is_origin(self) -> None:
        pattern = parse_pattern("https://my-awesome-pokedex.com/pokemons/:id")
        assert pattern.explicit_source == UniversalLink("https://my-awesome-pokedex.com")
        assert pattern.segments == ("pokemons", ":id")

    def test_web_scheme_without_path(self) -> None:
        pattern = parse_pattern("https://my-awesome-pokedex.com")
        assert pattern.segments == ()

    def test_pure(self) -> None:
        assert parse_pattern("/a/:b") == parse_pattern("/a/:b")

    @pytest.mark.parametrize(
        "raw",
        [
            "/////aaaaaa/////",
            "//hoge",
            "/hoge/",
            "/hoge//fuga",
            "hoge/",
            "/hoge/:",
            "",
            "://hoge",
            "https:///hoge",
            "https://example.com//hoge",
            "pokedex://hoge//fuga",
        ],
    )
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidPattern) as exc_info:
            parse_pattern(raw)
        assert exc_info.value.pattern == raw
        assert exc_info.value.source is None

    def test_invalid_message(self) -> None:
        with pytest.raises(InvalidPattern) as exc_info:
            parse_pattern("/////aaaaaa/////")
        assert str(exc_info.value) == "Pattern string '/////aaaaaa/////' is invalid."


class TestNormalizedPath:
    def test_static(self) -> None:
        assert parse_pattern("/hoge/fuga").normalized_path == "/hoge/fuga"

    def test_param_names_erased(self) -> None:
        assert (
            parse_pattern("/users/:id").normalized_path
            == parse_pattern("/users/:name").normalized_path
        )

    def test_scheme_prefix_excluded(self) -> None:
        assert parse_pattern("pokedex://hoge/fuga").normalized_path == "/hoge/fuga"


class TestPatternMatch:
    def test_static(self) -> None:
        assert parse_pattern("/hoge/fuga").match(["hoge", "fuga"]) == {}

    def test_static_mismatch(self) -> None:
        assert parse_pattern("/hoge/fuga").match(["hoge", "piyo"]) is None

    def test_length_mismatch(self) -> None:
        assert parse_pattern("/hoge").match(["hoge", "fuga"]) is None

    def test_root(self) -> None:
        assert parse_pattern("/").match([]) == {}

    def test_captures_params(self) -> None:
        params = parse_pattern("/pokemons/:id").match(["pokemons", "25"])
        assert params == {"id": "25"}

    def test_params_are_unquoted(self) -> None:
        params = parse_pattern("/search/:keyword").match(["search", "mr%20mime"])
        assert params == {"keyword": "mr mime"}
