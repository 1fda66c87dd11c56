"""Tests for crossroad.cli — argument parsing and the verbose switch."""

import logging
import sys
import types
from collections.abc import Iterator

import pytest

from crossroad.cli import main
from crossroad.routing.router import build_router
from crossroad.sources import CustomURLScheme


@pytest.fixture
def crossroad_logger() -> Iterator[logging.Logger]:
    log = logging.getLogger("crossroad")
    handlers, level = list(log.handlers), log.level
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)


class TestArguments:
    @pytest.mark.parametrize("argv", [["--help"], ["check", "--help"], ["routes", "--help"]])
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["check", "routes"])
    def test_import_string_is_required(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command])
        assert exc_info.value.code == 2

    def test_no_command_prints_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "usage: crossroad" in capsys.readouterr().out


class TestVerbose:
    def test_logs_accepted_routes(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        crossroad_logger: logging.Logger,
    ) -> None:
        def make_router():
            return build_router([CustomURLScheme("pokedex")], lambda r: r.add("/pokemons", print))

        mod = types.ModuleType("_verbose_links")
        mod.make_router = make_router  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "_verbose_links", mod)

        main(["--verbose", "check", "_verbose_links:make_router"])
        err = capsys.readouterr().err
        assert "crossroad.router: Accepted route /pokemons (accepting any)" in err

    def test_handler_added_once(self, crossroad_logger: logging.Logger) -> None:
        from crossroad.cli import _enable_debug_logging

        before = len(crossroad_logger.handlers)
        _enable_debug_logging()
        _enable_debug_logging()
        assert len(crossroad_logger.handlers) == before + 1
        assert crossroad_logger.level == logging.DEBUG
