"""Tests for the click CLI."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from contactbook.adapters.json_storage import JsonAddressBookStorage
from contactbook.cli import main
from contactbook.config import Config


@pytest.fixture
def config(tmp_path, address_book):
    config = Config(address_book_file=str(tmp_path / "book.json"))
    JsonAddressBookStorage(config.address_book_file).save_address_book(address_book)
    return config


@pytest.fixture
def run(config):
    runner = CliRunner()

    def invoke(*args):
        with patch("contactbook.cli.load_config", return_value=config):
            return runner.invoke(main, list(args))

    return invoke


def stored_names(config):
    book = JsonAddressBookStorage(config.address_book_file).read_address_book()
    return [(p.name, p.archived) for p in book]


class TestListing:
    def test_list(self, run):
        result = run("list")
        assert result.exit_code == 0
        assert "1. Alice Pauline" in result.output
        assert "2. Carl Kurz" in result.output
        assert "Bob Choo" not in result.output

    def test_archivelist_json(self, run):
        result = run("archivelist", "--json")
        assert result.exit_code == 0
        assert [p["name"] for p in json.loads(result.output)] == ["Bob Choo"]

    def test_reminders(self, run):
        result = run("reminders")
        lines = result.output.strip().splitlines()
        assert lines == [
            "2025-01-02 10:00  Birthday (Carl Kurz)",
            "2025-01-02 10:00  Call (Carl Kurz)",
            "2025-01-03 12:00  Lunch (Alice Pauline)",
        ]

    def test_empty_list(self, tmp_path):
        config = Config(address_book_file=str(tmp_path / "none.json"))
        with patch("contactbook.cli.load_config", return_value=config):
            result = CliRunner().invoke(main, ["list"])
        assert result.output.strip() == "No persons."


class TestMutations:
    def test_add(self, run, config):
        result = run("add", "Dana Lee", "--phone", "81234567", "-t", "friend")
        assert result.exit_code == 0
        assert "New person added: Dana Lee" in result.output
        assert stored_names(config)[-1] == ("Dana Lee", False)

    def test_add_duplicate_fails(self, run, config):
        result = run("add", "Alice Pauline")
        assert result.exit_code == 1
        assert "Error: This person already exists" in result.output
        assert len(stored_names(config)) == 3

    def test_add_blank_name(self, run):
        result = run("add", " ")
        assert result.exit_code == 1

    def test_archive_and_unarchive(self, run, config):
        assert run("archive", "1").exit_code == 0
        assert stored_names(config)[0] == ("Alice Pauline", True)

        result = run("unarchive", "1")
        assert result.exit_code == 0
        assert "Unarchived person: Alice Pauline" in result.output
        assert stored_names(config)[0] == ("Alice Pauline", False)

    def test_unarchive_bad_index(self, run):
        result = run("unarchive", "5")
        assert result.exit_code == 1
        assert "invalid in the archived list" in result.output

    def test_edit(self, run, config):
        result = run("edit", "2", "--phone", "999")
        assert result.exit_code == 0
        book = JsonAddressBookStorage(config.address_book_file).read_address_book()
        assert book.person_list[2].phone == "999"

    def test_edit_without_fields(self, run):
        result = run("edit", "1")
        assert result.exit_code == 1

    def test_delete(self, run, config):
        assert run("delete", "2").exit_code == 0
        assert [name for name, _ in stored_names(config)] == ["Alice Pauline", "Bob Choo"]

    def test_remind_and_unremind(self, run):
        result = run("remind", "1", "Send card", "--by", "2024-12-24 18:00")
        assert result.exit_code == 0
        assert run("reminders").output.splitlines()[0] == "2024-12-24 18:00  Send card (Alice Pauline)"

        assert run("unremind", "1", "2").exit_code == 0
        assert "Send card" not in run("reminders").output

    def test_remind_invalid_deadline(self, run):
        result = run("remind", "1", "Send card", "--by", "2024-02-30 18:00")
        assert result.exit_code == 1
        assert "invalid date or time" in result.output
