"""Tests for the application settings."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from notifyhub.config import Settings, get_settings, reset_settings_cache


def test_draft_window_defaults_to_thirty_seconds(monkeypatch):
    monkeypatch.delenv("NOTIFICATION_DRAFT_TIME", raising=False)

    assert Settings().notification_draft_window == timedelta(seconds=30)


def test_draft_window_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("NOTIFICATION_DRAFT_TIME", "1500")
    reset_settings_cache()
    try:
        assert get_settings().notification_draft_window == timedelta(milliseconds=1500)
    finally:
        monkeypatch.delenv("NOTIFICATION_DRAFT_TIME")
        reset_settings_cache()


def test_negative_draft_time_is_rejected():
    with pytest.raises(ValidationError):
        Settings(notification_draft_time=-1)
