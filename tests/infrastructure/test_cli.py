"""End-to-end tests for the click command line."""

import logging

import pytest
from click.testing import CliRunner

from warehouse.infrastructure.cli.main import cli
from warehouse.infrastructure.logging_config import ROOT_LOGGER

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in ("WAREHOUSE_LOG_LEVEL", "WAREHOUSE_LOG_FORMAT", "WAREHOUSE_SEED_SAMPLE_DATA"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestDemo:

    def test_demo_replays_walkthrough(self):
        result = runner.invoke(cli, ["demo"])

        assert result.exit_code == 0
        assert "Warehouse Inventory App" in result.output
        assert "Grocery Items:" in result.output
        assert "[E] #1 Laptop (Dell) - Qty: 10, Warranty: 24m" in result.output
        assert "[Duplicate Add Error] Item with ID 101 already exists." in result.output
        assert "[AddItem Error]" not in result.output
        assert "[RemoveItem Error] Item with ID 999 not found." in result.output
        assert "[SetQuantity Error] Quantity cannot be negative." in result.output
        assert "Stock updated for #1. New Qty: 15" in result.output

    def test_groceries_listed_before_electronics(self):
        result = runner.invoke(cli, ["demo"])
        assert result.output.index("Grocery Items:") < result.output.index("Electronic Items:")

    def test_each_failure_reported_once(self):
        result = runner.invoke(cli, ["demo"])
        for message in (
            "Item with ID 101 already exists.",
            "[RemoveItem Error] Item with ID 999 not found.",
            "[SetQuantity Error] Quantity cannot be negative.",
        ):
            assert result.output.count(message) == 1


class TestList:

    def test_list_all(self):
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "[G] #101 Rice 5kg - Qty: 40" in result.output
        assert "[E] #5 Televisions (Sony) - Qty: 12, Warranty: 10m" in result.output

    def test_list_one_family(self):
        result = runner.invoke(cli, ["list", "--family", "electronics"])
        assert result.exit_code == 0
        assert "Electronic Items:" in result.output
        assert "Grocery Items:" not in result.output

    def test_list_without_seed(self, monkeypatch):
        monkeypatch.setenv("WAREHOUSE_SEED_SAMPLE_DATA", "false")
        result = runner.invoke(cli, ["list", "--family", "groceries"])
        assert result.exit_code == 0
        assert "No items found." in result.output

    def test_unknown_family_rejected(self):
        result = runner.invoke(cli, ["list", "--family", "furniture"])
        assert result.exit_code == 2


class TestStockCommands:

    def test_increase(self):
        result = runner.invoke(
            cli, ["stock", "increase", "--family", "electronics", "--id", "1", "--delta", "5"]
        )
        assert result.exit_code == 0
        assert "Stock updated for #1. New Qty: 15" in result.output

    def test_increase_below_zero_fails(self):
        result = runner.invoke(
            cli, ["stock", "increase", "--family", "groceries", "--id", "104", "--delta=-6"]
        )
        assert result.exit_code == 1
        assert "Resulting quantity cannot be negative." in result.output

    def test_set(self):
        result = runner.invoke(
            cli, ["stock", "set", "--family", "groceries", "--id", "102", "--quantity", "3"]
        )
        assert result.exit_code == 0
        assert "Quantity set for #102. New Qty: 3" in result.output

    def test_set_negative_fails(self):
        result = runner.invoke(
            cli, ["stock", "set", "--family", "groceries", "--id", "102", "--quantity=-10"]
        )
        assert result.exit_code == 1
        assert "[SetQuantity Error] Quantity cannot be negative." in result.output

    def test_remove(self):
        result = runner.invoke(cli, ["stock", "remove", "--family", "electronics", "--id", "2"])
        assert result.exit_code == 0
        assert "Item #2 removed." in result.output

    def test_remove_unknown_fails(self):
        result = runner.invoke(cli, ["stock", "remove", "--family", "electronics", "--id", "999"])
        assert result.exit_code == 1
        assert "Item with ID 999 not found." in result.output


class TestLoggingOption:

    def test_log_level_option_configures_logger(self):
        result = runner.invoke(cli, ["--log-level", "debug", "list"])
        assert result.exit_code == 0
        assert logging.getLogger(ROOT_LOGGER).level == logging.DEBUG

    def test_invalid_log_level_rejected(self):
        result = runner.invoke(cli, ["--log-level", "chatty", "list"])
        assert result.exit_code == 2


class TestFailureReporting:

    @pytest.mark.parametrize(
        "args, message",
        [
            (["stock", "set", "--family", "groceries", "--id", "102", "--quantity=-10"],
             "[SetQuantity Error] Quantity cannot be negative."),
            (["stock", "increase", "--family", "groceries", "--id", "999", "--delta", "1"],
             "[IncreaseStock Error] Item with ID 999 not found."),
            (["stock", "remove", "--family", "electronics", "--id", "999"],
             "[RemoveItem Error] Item with ID 999 not found."),
        ],
    )
    def test_failure_reported_once_with_default_settings(self, args, message):
        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert result.output.count(message) == 1
        assert "[WARNING]" not in result.output
