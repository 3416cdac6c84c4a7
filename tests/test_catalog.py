"""Tests for Command and Catalog."""

import dataclasses

import pytest

from quickrun.exceptions import CatalogError, MalformedCommandError
from quickrun.launcher.dispatch import build_request
from quickrun.launcher.models import Catalog, Command


class TestCommand:
    def test_str_shows_title_and_command(self):
        assert str(Command("list", "ls -la")) == "list | ls -la"

    def test_is_immutable(self):
        command = Command("list", "ls -la")
        with pytest.raises(dataclasses.FrozenInstanceError):
            command.title = "other"

    def test_matches_title_or_command_text(self):
        command = Command("Disk Usage", "du -sh .")
        assert command.matches("disk")
        assert command.matches("du -s")
        assert not command.matches("cargo")


class TestCatalog:
    def test_entries_sorted_by_title(self):
        catalog = Catalog.from_mapping({"zeta": "z", "alpha": "a", "mid": "m"})
        assert [c.title for c in catalog] == ["alpha", "mid", "zeta"]

    def test_sequence_protocol(self, small_catalog):
        assert len(small_catalog) == 2
        assert small_catalog[0] == Command("build", "cargo build")
        assert list(small_catalog)[1].title == "list"
        assert Command("list", "ls -la") in small_catalog

    def test_empty_mapping(self):
        catalog = Catalog.from_mapping({})
        assert len(catalog) == 0
        assert not catalog

    def test_blank_command_skipped(self, caplog):
        catalog = Catalog.from_mapping({"good": "ls", "blank": "   ", "empty": ""})
        assert [c.title for c in catalog] == ["good"]
        assert "blank" in caplog.text

    def test_loaded_commands_always_build_a_request(self):
        catalog = Catalog.from_mapping({"spaced": "  git   log ", "tabbed": "\tls\t-la", "blank": "\t\n"})
        for command in catalog:
            assert build_request(command).path
        assert [c.title for c in catalog] == ["spaced", "tabbed"]

    def test_blank_command_rejected_in_strict_mode(self):
        with pytest.raises(MalformedCommandError) as exc_info:
            Catalog.from_mapping({"blank": "  "}, strict=True)
        assert isinstance(exc_info.value, CatalogError)
        assert exc_info.value.context["title"] == "blank"
