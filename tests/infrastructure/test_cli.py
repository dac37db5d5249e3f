"""End-to-end tests for the command line, against a temporary data dir."""

import json

import pytest
from click.testing import CliRunner

from stockflow.domain.gateway.product_lookup import ProductDetails
from stockflow.infrastructure import bootstrap
from stockflow.infrastructure.cli.main import cli
from tests.fakes import FakeProductLookup

TATA_TEA = "8901725164016"
MAGGI = "8901030724831"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STOCKFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOCKFLOW_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def run(data_dir):
    runner = CliRunner()

    def _run(*args, input=None):
        return runner.invoke(cli, list(args), input=input)

    return _run


@pytest.fixture
def seeded(run):
    result = run("product", "seed")
    assert result.exit_code == 0, result.output
    return run


def _stock(data_dir, product_id):
    records = json.loads((data_dir / "products.json").read_text(encoding="utf-8"))
    return {r["id"]: r["stock"] for r in records}[product_id]


class TestProductCommands:

    def test_seed_then_list(self, seeded):
        result = seeded("product", "list")
        assert result.exit_code == 0
        assert "Parle-G Gold Biscuits" in result.output
        assert "₹500.00" in result.output

    def test_seed_twice_is_noop(self, seeded):
        result = seeded("product", "seed")
        assert "nothing seeded" in result.output

    def test_list_empty(self, run):
        assert "No products found." in run("product", "list").output

    def test_add(self, run, data_dir):
        result = run(
            "product", "add", "--barcode", "111", "--name", "Soap",
            "--mrp", "35", "--stock", "12", "--threshold", "3",
        )
        assert result.exit_code == 0, result.output
        assert "Soap" in result.output
        assert _stock(data_dir, "111") == 12

    def test_add_duplicate(self, seeded):
        result = seeded(
            "product", "add", "--barcode", MAGGI, "--name", "Again",
            "--mrp", "1", "--stock", "1",
        )
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_add_requires_name_without_fetch(self, run):
        result = run("product", "add", "--barcode", "1", "--mrp", "1", "--stock", "1")
        assert result.exit_code == 1
        assert "name is required" in result.output

    def test_add_with_fetch_prefills(self, run, monkeypatch):
        lookup = FakeProductLookup({"222": ProductDetails("Good Day Cookies", "Butter cookies")})
        monkeypatch.setattr(bootstrap, "product_lookup", lambda: lookup)

        result = run("product", "add", "--barcode", "222", "--mrp", "30", "--stock", "5", "--fetch")

        assert result.exit_code == 0, result.output
        listing = run("product", "search", "cookies").output
        assert "Good Day Cookies" in listing

    def test_add_with_fetch_survives_lookup_outage(self, run, monkeypatch):
        monkeypatch.setattr(bootstrap, "product_lookup", lambda: FakeProductLookup(unavailable=True))

        result = run(
            "product", "add", "--barcode", "333", "--name", "Manual",
            "--mrp", "5", "--stock", "1", "--fetch",
        )

        assert result.exit_code == 0, result.output
        assert "Please enter manually" in result.output

    def test_lookup(self, run, monkeypatch):
        lookup = FakeProductLookup({"444": ProductDetails("Bourbon", "Chocolate cream biscuits")})
        monkeypatch.setattr(bootstrap, "product_lookup", lambda: lookup)
        result = run("product", "lookup", "--barcode", "444")
        assert "Bourbon" in result.output
        assert "Chocolate cream biscuits" in result.output

    def test_update(self, seeded, data_dir):
        result = seeded("product", "update", "--id", MAGGI, "--stock", "99")
        assert result.exit_code == 0, result.output
        assert _stock(data_dir, MAGGI) == 99

    def test_update_unknown(self, run):
        result = run("product", "update", "--id", "nope", "--stock", "1")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_search_no_match(self, seeded):
        assert "No products match" in seeded("product", "search", "zzz").output


class TestInventoryCommands:

    def test_low_report(self, seeded):
        result = seeded("inventory", "low")
        assert result.exit_code == 0
        assert "Cadbury Dairy Milk Silk" in result.output
        assert "Low Stock" in result.output
        assert "Maggi" not in result.output

    def test_low_report_empty(self, run):
        assert "No products with low inventory." in run("inventory", "low").output


class TestUnusableDataDirectory:

    @pytest.fixture
    def blocked_run(self, tmp_path, monkeypatch):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        monkeypatch.setenv("STOCKFLOW_DATA_DIR", str(blocker / "data"))
        monkeypatch.delenv("STOCKFLOW_LOG_LEVEL", raising=False)
        runner = CliRunner()
        return lambda *args: runner.invoke(cli, list(args))

    def test_low_report_reads_as_empty(self, blocked_run):
        result = blocked_run("inventory", "low")
        assert result.exit_code == 0, result.output
        assert "No products with low inventory." in result.output

    def test_add_reports_write_failure(self, blocked_run):
        result = blocked_run(
            "product", "add", "--barcode", TATA_TEA, "--name", "Tata Tea",
            "--mrp", "120", "--stock", "5",
        )
        assert result.exit_code == 1
        assert "Cannot write catalog file" in result.output


class TestSell:

    def test_sell_items(self, seeded, data_dir):
        result = seeded("sell", "--item", f"{TATA_TEA}:2")
        assert result.exit_code == 0, result.output
        assert "Sale complete! Total: ₹1000.00" in result.output
        assert _stock(data_dir, TATA_TEA) == 23

    def test_sell_with_custom_price(self, seeded):
        result = seeded("sell", "--item", f"{MAGGI}:3@10")
        assert "Total: ₹30.00" in result.output

    def test_sell_scan(self, seeded, data_dir):
        result = seeded("sell", "--scan", input=f"{MAGGI}\n{MAGGI}\n\n")
        assert result.exit_code == 0, result.output
        assert _stock(data_dir, MAGGI) == 118

    def test_sell_scan_from_file(self, seeded, data_dir, tmp_path):
        scans = tmp_path / "scans.txt"
        scans.write_text(f"{MAGGI}\n{MAGGI}\n{MAGGI}\n", encoding="utf-8")
        result = seeded("sell", "--scan", "--scan-from", str(scans))
        assert result.exit_code == 0, result.output
        assert "quantity now 3" in result.output
        assert _stock(data_dir, MAGGI) == 117

    def test_unknown_scan_skipped(self, seeded, data_dir):
        result = seeded("sell", "--scan", input=f"000\n{MAGGI}\n")
        assert "No product with barcode 000 found" in result.output
        assert _stock(data_dir, MAGGI) == 119

    def test_over_stock_skipped_and_empty_cart_rejected(self, seeded, data_dir):
        result = seeded("sell", "--item", f"{TATA_TEA}:26")
        assert result.exit_code == 1
        assert "Not enough stock" in result.output
        assert "Cart is empty" in result.output
        assert _stock(data_dir, TATA_TEA) == 25

    def test_threshold_alert(self, seeded):
        result = seeded("sell", "--item", f"{TATA_TEA}:20")
        assert "Tata Tea Gold is Low Stock (5 left)" in result.output

    def test_nothing_to_sell(self, run):
        result = run("sell")
        assert result.exit_code == 1
        assert "Nothing to sell" in result.output

    def test_bad_item_format(self, seeded):
        result = seeded("sell", "--item", f"{MAGGI}:lots")
        assert result.exit_code != 0
        assert "Invalid quantity" in result.output
