"""Tests for reportkit.core.profile module."""

from __future__ import annotations

import pytest

from reportkit.core.profile import (
    PROFILE_ENV,
    Profile,
    current_profile,
    detect_profile,
    parse_profile,
)


class TestParseProfile:
    """Tests for parse_profile()."""

    def test_known_names(self) -> None:
        assert parse_profile("debug") is Profile.DEBUG
        assert parse_profile("release") is Profile.RELEASE

    def test_case_and_whitespace_insensitive(self) -> None:
        assert parse_profile("  RELEASE\n") is Profile.RELEASE

    def test_unknown_or_missing(self) -> None:
        assert parse_profile("fast") is None
        assert parse_profile("") is None
        assert parse_profile(None) is None


class TestDetectProfile:
    """Tests for detect_profile()."""

    def test_env_override(self) -> None:
        assert detect_profile({PROFILE_ENV: "release"}) is Profile.RELEASE
        assert detect_profile({PROFILE_ENV: "debug"}) is Profile.DEBUG

    def test_falls_back_to_interpreter_flag(self) -> None:
        expected = Profile.DEBUG if __debug__ else Profile.RELEASE
        assert detect_profile({}) is expected

    def test_invalid_override_ignored(self) -> None:
        expected = Profile.DEBUG if __debug__ else Profile.RELEASE
        assert detect_profile({PROFILE_ENV: "verbose"}) is expected


class TestCurrentProfile:
    """current_profile() is resolved once per process."""

    def test_resolved_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        current_profile.cache_clear()
        try:
            monkeypatch.setenv(PROFILE_ENV, "release")
            assert current_profile() is Profile.RELEASE
            monkeypatch.setenv(PROFILE_ENV, "debug")
            assert current_profile() is Profile.RELEASE
        finally:
            current_profile.cache_clear()


class TestProfile:
    def test_str(self) -> None:
        assert str(Profile.DEBUG) == "debug"

    def test_is_debug(self) -> None:
        assert Profile.DEBUG.is_debug is True
        assert Profile.RELEASE.is_debug is False
