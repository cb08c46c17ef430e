# SPDX-License-Identifier: Apache-2.0
"""Config and settings tests."""
import logging

import pytest
from pydantic import ValidationError

from ceremony.config import Settings, configure_logging, settings


def test_settings_defaults():
    assert isinstance(settings, Settings)
    fresh = Settings(_env_file=None)
    assert fresh.participant_count == 3
    assert fresh.seed_size == 32
    assert fresh.backend == "masked-sum"
    assert fresh.rollback_on_backend_failure is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CEREMONY_PARTICIPANT_COUNT", "5")
    monkeypatch.setenv("CEREMONY_ROLLBACK_ON_BACKEND_FAILURE", "false")
    s = Settings()
    assert s.participant_count == 5
    assert s.rollback_on_backend_failure is False


def test_participant_count_bounds():
    with pytest.raises(ValidationError):
        Settings(participant_count=0)


def test_log_level_validated():
    assert Settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_configure_logging_sets_level():
    configure_logging("WARNING")
    logger = logging.getLogger("ceremony")
    assert logger.level == logging.WARNING
    assert logger.handlers
    configure_logging("INFO")
    assert len(logger.handlers) == 1
