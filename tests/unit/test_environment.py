"""Tests for PLURALIA_CLASSICAL handling."""

import logging

import pytest

from pluralia.core.classical import ClassicalFlag
from pluralia.core.environment import PLURALIA_CLASSICAL_VAR, get_classical_flags


class TestGetClassicalFlags:
    @pytest.mark.parametrize("value", ["", "none", "OFF", "false", "0", "  "])
    def test_off_values(self, monkeypatch, value):
        monkeypatch.setenv(PLURALIA_CLASSICAL_VAR, value)
        assert get_classical_flags() == []

    def test_unset(self, monkeypatch):
        monkeypatch.delenv(PLURALIA_CLASSICAL_VAR, raising=False)
        assert get_classical_flags() == []

    def test_all(self, monkeypatch):
        monkeypatch.setenv(PLURALIA_CLASSICAL_VAR, "ALL")
        assert get_classical_flags() == [ClassicalFlag.ALL]

    def test_list(self, monkeypatch):
        monkeypatch.setenv(PLURALIA_CLASSICAL_VAR, "ancient, herd,,ancient")
        assert get_classical_flags() == [ClassicalFlag.ANCIENT, ClassicalFlag.HERD]

    def test_unknown_names_are_logged_and_skipped(self, monkeypatch, caplog):
        monkeypatch.setenv(PLURALIA_CLASSICAL_VAR, "latin,persons")
        with caplog.at_level(logging.WARNING, logger="pluralia.core.environment"):
            assert get_classical_flags() == [ClassicalFlag.PERSONS]
        assert "latin" in caplog.text
