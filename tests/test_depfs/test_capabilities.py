"""Tests for platform capability probes."""

from __future__ import annotations

import os

import pytest

from depfs.capabilities import permission_denial_supported


class TestPermissionDenialSupported:
    @pytest.fixture(autouse=True)
    def _clear_cache(self):
        permission_denial_supported.cache_clear()
        yield
        permission_denial_supported.cache_clear()

    def test_returns_bool(self) -> None:
        assert isinstance(permission_denial_supported(), bool)

    def test_probe_runs_once(self) -> None:
        first = permission_denial_supported()
        second = permission_denial_supported()
        assert first == second
        assert permission_denial_supported.cache_info().hits == 1

    @pytest.mark.skipif(os.name != "posix", reason="posix only")
    def test_matches_effective_user(self) -> None:
        # root bypasses permission bits
        assert permission_denial_supported() == (os.geteuid() != 0)

    def test_non_posix_platforms_are_unsupported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("depfs.capabilities.os.name", "nt")
        assert permission_denial_supported() is False
