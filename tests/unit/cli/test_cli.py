"""End-to-end tests for the ecom CLI."""

import re
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from src.ecom.cli import app
from src.ecom.runtime.config.config_data import ConfigData, DatabaseConfig
from src.ecom.runtime.context import with_context

# Wide enough that Rich tables never wrap ids or names
runner = CliRunner(env={"COLUMNS": "240"})

ID_PATTERN = r"([0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})"


@pytest.fixture(autouse=True)
def cli_database(tmp_path: Path) -> Generator[None]:
    """Point every command at a fresh SQLite file."""
    url = f"sqlite:///{tmp_path / 'cli.db'}"
    with with_context(ConfigData(database=DatabaseConfig(url=url))):
        result = runner.invoke(app, ["db", "init"])
        assert result.exit_code == 0, result.output
        yield
    # Sinks added by the CLI write to the runner's closed streams
    logger.remove()


def invoke(*args: str):
    return runner.invoke(app, list(args))


def created_id(output: str, kind: str) -> str:
    match = re.search(rf"Created {kind} {ID_PATTERN}", output)
    assert match, output
    return match.group(1)


@pytest.fixture
def product_id() -> str:
    result = invoke("products", "add", "Desk Lamp", "--price", "19.99", "--stock", "10", "-c", "Lighting")
    assert result.exit_code == 0, result.output
    return created_id(result.output, "product")


@pytest.fixture
def user_id() -> str:
    result = invoke("users", "add", "John", "Doe", "--email", "john.doe@example.com", "--city", "Boston")
    assert result.exit_code == 0, result.output
    return created_id(result.output, "user")


class TestDbCommands:
    def test_status(self):
        result = invoke("db", "status")

        assert result.exit_code == 0
        assert "Database (sqlite) is healthy" in result.output

    def test_init_drop(self, product_id: str):
        assert invoke("db", "init", "--drop").exit_code == 0

        result = invoke("products", "list")

        assert "No products found" in result.output


class TestProductCommands:
    def test_add_and_list(self, product_id: str):
        result = invoke("products", "list")

        assert result.exit_code == 0
        assert "Desk Lamp" in result.output
        assert "Found 1 products" in result.output

    def test_invalid_price(self):
        result = invoke("products", "add", "Lamp", "--price", "cheap")

        assert result.exit_code != 0

    def test_price_with_three_decimals_is_rejected(self, product_id: str):
        assert invoke("products", "add", "Lamp", "--price", "9.999").exit_code != 0
        assert invoke("products", "update", product_id, "--name", "Lamp", "--price", "9.999").exit_code != 0
        assert "19.99" in invoke("products", "show", product_id).output

    def test_show_missing(self):
        result = invoke("products", "show", "missing")

        assert result.exit_code == 1
        assert "Product not found with id: missing" in result.output

    def test_update(self, product_id: str):
        result = invoke("products", "update", product_id, "--name", "Floor Lamp", "--price", "29.99")

        assert result.exit_code == 0
        assert "Floor Lamp" in invoke("products", "show", product_id).output

    def test_delete_hides_product(self, product_id: str):
        assert invoke("products", "delete", product_id).exit_code == 0

        assert invoke("products", "show", product_id).exit_code == 1
        assert "No products found" in invoke("products", "list").output

    def test_search(self, product_id: str):
        assert "Desk Lamp" in invoke("products", "search", "light").output
        assert "No products found" in invoke("products", "search", "chair").output


class TestUserCommands:
    def test_add_and_show(self, user_id: str):
        result = invoke("users", "show", user_id)

        assert result.exit_code == 0
        assert "John Doe" in result.output
        assert "Boston" in result.output

    def test_update_keeps_other_fields(self, user_id: str):
        assert invoke("users", "update", user_id, "--first-name", "Jane").exit_code == 0

        output = invoke("users", "show", user_id).output
        assert "Jane Doe" in output
        assert "Boston" in output

    def test_delete_hides_user_from_default_list(self, user_id: str):
        assert invoke("users", "delete", user_id).exit_code == 0

        assert "No users found" in invoke("users", "list").output
        assert "Found 1 users" in invoke("users", "list", "--all").output

    def test_update_missing(self):
        result = invoke("users", "update", "missing", "--first-name", "Jane")

        assert result.exit_code == 1
        assert "User not found" in result.output


class TestCartAndOrderCommands:
    def test_cart_merge_and_total(self, user_id: str, product_id: str):
        invoke("cart", "add", user_id, product_id, "-q", "2")
        result = invoke("cart", "add", user_id, product_id, "-q", "3")

        assert result.exit_code == 0
        assert "Cart now holds 5" in result.output
        assert "Total: 99.95" in invoke("cart", "show", user_id).output

    def test_cart_rejects_excess_stock(self, user_id: str, product_id: str):
        result = invoke("cart", "add", user_id, product_id, "-q", "11")

        assert result.exit_code == 1
        assert "Insufficient stock" in result.output

    def test_cart_remove_and_clear(self, user_id: str, product_id: str):
        invoke("cart", "add", user_id, product_id)

        assert invoke("cart", "remove", user_id, product_id).exit_code == 0
        assert invoke("cart", "remove", user_id, product_id).exit_code == 1
        assert "Removed 0 item(s)" in invoke("cart", "clear", user_id).output

    def test_place_and_list_orders(self, user_id: str, product_id: str):
        invoke("cart", "add", user_id, product_id, "-q", "2")

        placed = invoke("orders", "place", user_id)

        assert placed.exit_code == 0, placed.output
        assert "Total: 39.98" in placed.output
        assert "is empty" in invoke("cart", "show", user_id).output
        order_id = re.search(rf"Placed order {ID_PATTERN}", placed.output).group(1)
        assert "CONFIRMED" in invoke("orders", "show", order_id).output

    def test_place_order_with_empty_cart(self, user_id: str):
        result = invoke("orders", "place", user_id)

        assert result.exit_code == 1
        assert "is empty" in result.output

    def test_list_orders_empty(self, user_id: str):
        assert "No orders for user" in invoke("orders", "list", user_id).output
