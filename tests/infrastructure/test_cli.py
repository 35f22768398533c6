"""End-to-end tests for the click commands and the interactive menu."""

import logging

import pytest
from click.testing import CliRunner

from stockroom.infrastructure.cli.main import cli
from stockroom.infrastructure.persistence.csv_inventory_repository import HEADER


@pytest.fixture(autouse=True)
def _restore_logging():
    logger = logging.getLogger("stockroom")
    handlers = list(logger.handlers)
    yield
    logger.handlers[:] = handlers
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def inv_file(tmp_path):
    return tmp_path / "inventory.txt"


def _run(inv_file, *args, **kwargs):
    return CliRunner().invoke(cli, ["--file", str(inv_file), *args], **kwargs)


def _data_lines(inv_file) -> list[str]:
    return [
        line for line in inv_file.read_text(encoding="utf-8").splitlines()
        if not line.startswith("#")
    ]


class TestOneShotCommands:

    def test_add_creates_file(self, inv_file):
        result = _run(inv_file, "add", "--name", "Pear", "--quantity", "10", "--price", "2")
        assert result.exit_code == 0, result.output
        assert "Added 'Pear': qty=10, price=2.00" in result.output
        assert inv_file.read_text(encoding="utf-8") == f"{HEADER}\nPear,10,2.00\n"

    def test_add_twice_restocks(self, inv_file):
        _run(inv_file, "add", "--name", "Pear", "--quantity", "10", "--price", "2.00")
        result = _run(inv_file, "add", "--name", "pear", "--quantity", "5", "--price", "2.50")
        assert result.exit_code == 0, result.output
        assert "Restocked 'Pear': qty=15, price=2.50" in result.output
        assert _data_lines(inv_file) == ["Pear,15,2.50"]

    def test_add_invalid_quantity(self, inv_file):
        result = _run(inv_file, "add", "--name", "Pear", "--quantity", "ten", "--price", "1")
        assert result.exit_code == 1
        assert "Invalid quantity" in result.output
        assert not inv_file.exists()

    def test_add_oversized_quantity(self, inv_file):
        result = _run(
            inv_file, "add", "--name", "Pear", "--quantity", "9" * 5000, "--price", "1"
        )
        assert result.exit_code == 1
        assert "cannot exceed" in result.output
        assert not inv_file.exists()

    def test_add_comment_like_name(self, inv_file):
        result = _run(inv_file, "add", "--name", "#1 Widget", "--quantity", "2", "--price", "3")
        assert result.exit_code == 1
        assert "cannot start with '#'" in result.output

    def test_list_empty(self, inv_file):
        result = _run(inv_file, "list")
        assert result.exit_code == 0
        assert "(inventory is empty)" in result.output

    def test_list_shows_values_and_total(self, inv_file):
        inv_file.write_text("Pear,10,2.00\nApple,3,1.5\n", encoding="utf-8")
        result = _run(inv_file, "list")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["Name", "Qty", "Price", "($)", "Value", "($)"]
        assert lines[2].split() == ["Pear", "10", "2.00", "20.00"]
        assert lines[3].split() == ["Apple", "3", "1.50", "4.50"]
        assert lines[-1].split() == ["TOTAL", "24.50"]

    def test_remove(self, inv_file):
        inv_file.write_text("a,1,1\nb,1,1\nc,1,1\n", encoding="utf-8")
        result = _run(inv_file, "remove", "--name", "B")
        assert result.exit_code == 0
        assert "Removed 'b'" in result.output
        assert _data_lines(inv_file) == ["a,1,1.00", "c,1,1.00"]

    def test_remove_missing(self, inv_file):
        inv_file.write_text("a,1,1\n", encoding="utf-8")
        result = _run(inv_file, "remove", "--name", "zzz")
        assert result.exit_code == 1
        assert "not found" in result.output
        assert inv_file.read_text(encoding="utf-8") == "a,1,1\n"

    def test_update_to_zero(self, inv_file):
        inv_file.write_text("Pear,15,2.50\n", encoding="utf-8")
        result = _run(inv_file, "update", "--name", "pear", "--quantity", "0")
        assert result.exit_code == 0
        assert "'Pear' quantity set to 0" in result.output
        assert _data_lines(inv_file) == ["Pear,0,2.50"]

    def test_update_negative(self, inv_file):
        inv_file.write_text("Pear,15,2.50\n", encoding="utf-8")
        result = _run(inv_file, "update", "--name", "Pear", "--quantity=-1")
        assert result.exit_code == 1
        assert "cannot be negative" in result.output

    def test_search(self, inv_file):
        inv_file.write_text("Pear,15,2.50\n", encoding="utf-8")
        result = _run(inv_file, "search", "--name", "PEAR")
        assert result.exit_code == 0
        assert "price=$2.50" in result.output
        assert "stock value=$37.50" in result.output

    def test_search_not_found(self, inv_file):
        result = _run(inv_file, "search", "--name", "Kiwi")
        assert result.exit_code == 0
        assert "Not found: 'Kiwi'" in result.output

    def test_total(self, inv_file):
        inv_file.write_text("Pear,10,2.00\nApple,3,1.5\n", encoding="utf-8")
        result = _run(inv_file, "total")
        assert result.exit_code == 0
        assert "Total inventory value: $24.50" in result.output

    def test_unreadable_file_is_an_error(self, inv_file):
        inv_file.write_bytes(b"\xff\xfe\n")
        result = _run(inv_file, "list")
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_file_from_environment(self, tmp_path):
        target = tmp_path / "env.txt"
        result = CliRunner().invoke(
            cli,
            ["add", "--name", "Kiwi", "--quantity", "1", "--price", "0.4"],
            env={"STOCKROOM_FILE": str(target)},
        )
        assert result.exit_code == 0, result.output
        assert _data_lines(target) == ["Kiwi,1,0.40"]


class TestMenu:

    def test_add_then_save_and_exit(self, inv_file):
        result = _run(inv_file, "menu", input="2\nPear\n10\n2.00\n7\n")
        assert result.exit_code == 0, result.output
        assert "Loaded 0 item(s)" in result.output
        assert "[OK] Added 'Pear'" in result.output
        assert "1 item(s) saved" in result.output
        assert _data_lines(inv_file) == ["Pear,10,2.00"]

    def test_exit_without_saving(self, inv_file):
        result = _run(inv_file, "menu", input="2\nPear\n10\n2.00\n8\n")
        assert result.exit_code == 0
        assert "Exiting without saving." in result.output
        assert not inv_file.exists()

    def test_end_of_input_discards_changes(self, inv_file):
        inv_file.write_text("Pear,1,1.00\n", encoding="utf-8")
        result = _run(inv_file, "menu", input="3\nPear\n")
        assert result.exit_code == 0
        assert "exiting without saving" in result.output
        assert inv_file.read_text(encoding="utf-8") == "Pear,1,1.00\n"

    def test_errors_are_reported_and_loop_continues(self, inv_file):
        result = _run(inv_file, "menu", input="3\nKiwi\n6\n8\n")
        assert result.exit_code == 0
        assert "[ERROR] 'Kiwi' not found" in result.output
        assert "Total inventory value: $0.00" in result.output

    def test_update_search_and_list(self, inv_file):
        inv_file.write_text("Pear,15,2.50\n", encoding="utf-8")
        keys = "4\npear\n0\n5\nPear\n1\n7\n"
        result = _run(inv_file, "menu", input=keys)
        assert result.exit_code == 0, result.output
        assert "[OK] 'Pear' quantity -> 0" in result.output
        assert "stock value=$0.00" in result.output
        assert "TOTAL" in result.output
        assert _data_lines(inv_file) == ["Pear,0,2.50"]

    def test_blank_name_cancels(self, inv_file):
        result = _run(inv_file, "menu", input="2\n\n8\n")
        assert result.exit_code == 0
        assert "Cancelled." in result.output

    def test_unknown_option(self, inv_file):
        result = _run(inv_file, "menu", input="9\n8\n")
        assert "Unknown option '9'" in result.output

    def test_reports_skipped_lines(self, inv_file):
        inv_file.write_text("Apple,100,0.99\napple,5,1.50\n", encoding="utf-8")
        result = _run(inv_file, "menu", input="8\n")
        assert result.exit_code == 0
        assert "Loaded 1 item(s)" in result.output
        assert "1 line(s) skipped" in result.output
        assert "Line 2: duplicate name" in result.output
