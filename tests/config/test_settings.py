# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import pytest

from valguard.config import (
    DEFAULT_MESSAGE_MAXLEN,
    DEFAULT_REPR_MAXLEVEL,
    DEFAULT_REPR_MAXSTRING,
    Settings,
    get_settings,
)


def test_defaults_without_environment(monkeypatch):
    for name in ("VALGUARD_REPR_MAXLEVEL", "VALGUARD_REPR_MAXSTRING", "VALGUARD_MESSAGE_MAXLEN"):
        monkeypatch.delenv(name, raising=False)

    assert get_settings() == Settings(
        repr_maxlevel=DEFAULT_REPR_MAXLEVEL,
        repr_maxstring=DEFAULT_REPR_MAXSTRING,
        message_maxlen=DEFAULT_MESSAGE_MAXLEN,
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VALGUARD_REPR_MAXLEVEL", "2")
    monkeypatch.setenv("VALGUARD_REPR_MAXSTRING", "16")
    monkeypatch.setenv("VALGUARD_MESSAGE_MAXLEN", "64")

    assert get_settings() == Settings(repr_maxlevel=2, repr_maxstring=16, message_maxlen=64)


@pytest.mark.parametrize("raw", ["abc", "0", "-5", "1.5"])
def test_bad_values_fall_back_to_default_with_warning(monkeypatch, caplog, raw):
    monkeypatch.setenv("VALGUARD_MESSAGE_MAXLEN", raw)

    settings = get_settings()

    assert settings.message_maxlen == DEFAULT_MESSAGE_MAXLEN
    assert "VALGUARD_MESSAGE_MAXLEN" in caplog.text


def test_blank_value_uses_default_silently(monkeypatch, caplog):
    monkeypatch.setenv("VALGUARD_REPR_MAXLEVEL", "  ")

    assert get_settings().repr_maxlevel == DEFAULT_REPR_MAXLEVEL
    assert caplog.text == ""
