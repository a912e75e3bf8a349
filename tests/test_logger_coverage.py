# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_ai_gateway

import importlib
from pathlib import Path
from types import ModuleType

import groq_chat.utils.logger
import pytest
from loguru import logger


def _reload() -> ModuleType:
    for handler_id in groq_chat.utils.logger.handler_ids:
        logger.remove(handler_id)
    return importlib.reload(groq_chat.utils.logger)


def test_logger_dir_creation(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """
    Test that logger creation logic (module level) creates the log directory if it doesn't exist.
    """
    log_dir = tmp_path / "nested" / "logs"
    monkeypatch.setenv("LOG_DIR", str(log_dir))
    assert not log_dir.exists()

    try:
        _reload()
        assert log_dir.is_dir()
    finally:
        monkeypatch.delenv("LOG_DIR")
        # Restore the default sinks for other tests
        _reload()


def test_logger_level_from_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    try:
        module = _reload()
        assert module.settings.LOG_LEVEL == "ERROR"
        assert len(module.handler_ids) == 2
        module.logger.error("written to file sink")
        module.logger.complete()
        assert (tmp_path / "app.log").exists()
    finally:
        monkeypatch.delenv("LOG_DIR")
        monkeypatch.delenv("LOG_LEVEL")
        _reload()


def test_logger_keeps_host_sinks(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    messages: list[str] = []
    host_handler = logger.add(messages.append, level="INFO", format="{message}")

    try:
        _reload()
        logger.info("still delivered")
        assert "still delivered\n" in messages
    finally:
        logger.remove(host_handler)
        monkeypatch.delenv("LOG_DIR")
        _reload()
