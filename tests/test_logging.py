"""Tests for filejson.logging module."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from filejson.io import write_encodable_to_url
from filejson.logging import configure_logging, logger
from filejson.resources import read_json_from_resource


class TestLogging:
    def test_package_logger_name(self) -> None:
        assert logger.name == "filejson"

    def test_configure_logging_is_public(self) -> None:
        import filejson

        assert filejson.configure_logging is configure_logging

    def test_configure_logging_verbose(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        configure_logging(verbose=True)
        configure_logging()

        assert calls[0]["level"] == logging.DEBUG
        assert calls[1]["level"] == logging.WARNING

    def test_missing_resource_logged_at_debug(
        self, resource_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="filejson"):
            assert read_json_from_resource("absent", resource_dir) is None

        assert "absent.json not found" in caplog.text

    def test_create_failure_logged_at_debug(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="filejson"):
            assert write_encodable_to_url({"a": 1}, tmp_path / "missing" / "out.json") is False

        assert "Could not create" in caplog.text
