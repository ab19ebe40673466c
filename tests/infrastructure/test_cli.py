"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from orderentry.infrastructure.cli.main import cli
from tests.json_seed import customer, product, tax_schedule, write_json


@pytest.fixture
def data_dir(tmp_path):
    write_json(
        tmp_path / "products.json",
        [product("WID-1", "10.00", "Widget"), product("GAD-2", "5.00", "Gadget")],
    )
    write_json(tmp_path / "stock.json", {"WID-1": 10, "GAD-2": 0})
    write_json(tmp_path / "customers.json", [customer(42, "12345", "US")])
    write_json(tmp_path / "tax_rates.json", [tax_schedule("12345", "US", Default="0.1")])
    return tmp_path


def _run(data_dir, *args):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


class TestOrderPlace:

    def test_places_order(self, data_dir):
        result = _run(data_dir, "order", "place", "--customer", "42", "--items", "WID-1:2")
        assert result.exit_code == 0, result.output
        assert "Order 000001 placed" in result.output
        assert "$20.00" in result.output
        assert "$22.00" in result.output

        outbox = json.loads((data_dir / "outbox.json").read_text(encoding="utf-8"))
        assert [(m["customer_id"], m["order_id"]) for m in outbox] == [(42, 1)]

    def test_validation_failure_reports_all_reasons(self, data_dir):
        result = _run(
            data_dir, "order", "place", "--customer", "42", "--items", "GAD-2:1,GAD-2:1"
        )
        assert result.exit_code == 1
        assert "SKUs are not unique, A product is out of stock" in result.output
        assert json.loads((data_dir / "fulfillments.json").read_text(encoding="utf-8")) == []

    def test_unknown_customer(self, data_dir):
        result = _run(data_dir, "order", "place", "--customer", "7", "--items", "WID-1:1")
        assert result.exit_code == 1
        assert "Customer #7 not found" in result.output

    def test_unknown_sku(self, data_dir):
        result = _run(data_dir, "order", "place", "--customer", "42", "--items", "NOPE:1")
        assert result.exit_code == 1
        assert "Product not found" in result.output

    def test_malformed_items(self, data_dir):
        result = _run(data_dir, "order", "place", "--customer", "42", "--items", "WID-1")
        assert result.exit_code == 2
        assert "Expected 'SKU:Quantity'" in result.output


class TestProductList:

    def test_lists_catalog(self, data_dir):
        result = _run(data_dir, "product", "list")
        assert result.exit_code == 0
        assert "WID-1" in result.output
        assert "$10.00" in result.output

    def test_empty_catalog(self, tmp_path):
        result = _run(tmp_path, "product", "list")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_data_dir_from_environment(self, data_dir):
        result = CliRunner().invoke(
            cli, ["product", "list"], env={"ORDERENTRY_DATA_DIR": str(data_dir)}
        )
        assert result.exit_code == 0
        assert "GAD-2" in result.output
