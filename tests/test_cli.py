"""Tests for the command-line interface."""

import logging

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from boxtui.cli.app import configure_logging, create_app, parse_child
from boxtui.cli.demo import build_dashboard
from boxtui.core.policy import SizePolicy
from boxtui.layout.allocator import SizeRequest

runner = CliRunner()


class TestParseChild:

    def test_all_fields(self) -> None:
        assert parse_child("2:5:expanding") == SizeRequest(2, 5, SizePolicy.EXPANDING)

    def test_policy_defaults_to_preferred(self) -> None:
        assert parse_child("1:3") == SizeRequest(1, 3, SizePolicy.PREFERRED)

    def test_policy_case_insensitive(self) -> None:
        assert parse_child("0:0:MAXIMUM").policy is SizePolicy.MAXIMUM

    @pytest.mark.parametrize("spec", ["5", "a:b", "1:2:huge", "-1:2", "1:2:3:4"])
    def test_invalid(self, spec: str) -> None:
        with pytest.raises(ValueError):
            parse_child(spec)


class TestAllocateCommand:

    def test_reference_allocation(self) -> None:
        result = runner.invoke(create_app(), ["allocate", "20", "2:5:minimum", "2:5:preferred", "2:5:expanding"])
        assert result.exit_code == 0
        assert "13" in result.output
        assert "Used 20 of 20" in result.output

    def test_starved_child_reported(self) -> None:
        result = runner.invoke(create_app(), ["allocate", "4", "2:5:minimum", "2:5:preferred", "2:5:expanding"])
        assert result.exit_code == 0
        assert "starved" in result.output

    def test_bad_child(self) -> None:
        result = runner.invoke(create_app(), ["allocate", "10", "2:x"])
        assert result.exit_code == 2
        assert "Invalid child" in result.output


class TestDemoCommand:

    def test_plain_render(self) -> None:
        result = runner.invoke(create_app(), ["demo", "--width", "60", "--height", "10", "--plain"])
        assert result.exit_code == 0
        assert "boxtui dashboard" in result.output
        assert "Services" in result.output
        assert "deploy finished" in result.output
        assert all(line == line.rstrip() for line in result.output.splitlines())

    def test_styled_render_with_tabs(self) -> None:
        result = runner.invoke(create_app(), ["demo", "-w", "60", "-h", "10", "--tabs", "-2"])
        assert result.exit_code == 0
        assert "Queues" in result.output


class TestDashboard:

    def test_focus_chain_covers_entries(self) -> None:
        root, chain = build_dashboard()
        assert len(chain.widgets) == 7
        assert chain.focus_default() is chain.widgets[0]


class TestConfigureLogging:

    def test_root_logger_untouched(self) -> None:
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(verbose=True)
        assert logging.getLogger().handlers == root_handlers

    def test_package_logger_gets_one_handler(self) -> None:
        configure_logging(verbose=False)
        configure_logging(verbose=True)
        logger = logging.getLogger("boxtui")
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
        assert logger.level == logging.DEBUG
