"""Tests for settings and cache configuration."""

from pathlib import Path

from agriops.core.config import Settings, get_cache_dir


class TestGetCacheDir:
    """Tests for the get_cache_dir function."""

    def test_returns_path_object(self):
        assert isinstance(get_cache_dir(), Path)

    def test_named_cache(self):
        assert get_cache_dir().name == ".cache"

    def test_cache_dir_exists_after_call(self):
        """Verify the cache directory is created if it doesn't exist."""
        result = get_cache_dir()
        assert result.exists()
        assert result.is_dir()

    def test_returns_same_path_on_multiple_calls(self):
        assert get_cache_dir() == get_cache_dir()

    def test_modules_use_same_cache_dir(self):
        from agriops.core import get_cache_dir as core_get_cache_dir

        assert core_get_cache_dir() == get_cache_dir()


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("AGRIOPS_API_URL", "AGRIOPS_API_KEY", "AGRIOPS_TENANT_ID", "DISPLAY_UNITS"):
            monkeypatch.delenv(name, raising=False)

        s = Settings(_env_file=None)

        assert s.agriops_api_url == "http://localhost:3000"
        assert s.agriops_api_key is None
        assert s.agriops_tenant_id == "demo"
        assert s.default_horizon_days == 30
        assert s.display_units == "imperial"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("AGRIOPS_TENANT_ID", "ridge-farm")
        monkeypatch.setenv("DISPLAY_UNITS", "metric")

        s = Settings(_env_file=None)

        assert s.agriops_tenant_id == "ridge-farm"
        assert s.display_units == "metric"
