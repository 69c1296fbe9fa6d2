"""Unit tests for settings loading and OrderConfig construction"""

from ordercore.config import OrderConfig, Settings, get_settings


class TestSettings:
    """Test Settings defaults and environment overrides"""

    def test_seed_buyer_defaults_to_none(self, monkeypatch):
        monkeypatch.delenv("SEED_BUYER_ORG_ID", raising=False)
        settings = Settings()
        assert settings.SEED_BUYER_ORG_ID is None

    def test_seed_buyer_from_environment(self, monkeypatch):
        monkeypatch.setenv("SEED_BUYER_ORG_ID", "org-123")
        settings = Settings()
        assert settings.SEED_BUYER_ORG_ID == "org-123"

    def test_cors_origins_split(self):
        settings = Settings(CORS_ORIGINS="http://a.example, http://b.example,")
        assert settings.cors_origins == ["http://a.example", "http://b.example"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        get_settings.cache_clear()
        monkeypatch.setenv("SEED_BUYER_ORG_ID", "org-reloaded")
        try:
            assert get_settings().SEED_BUYER_ORG_ID == "org-reloaded"
        finally:
            get_settings.cache_clear()


class TestOrderConfig:
    """Test OrderConfig built from settings"""

    def test_from_settings(self):
        config = OrderConfig.from_settings(Settings(SEED_BUYER_ORG_ID="org-123"))
        assert config.default_buyer_organization_id == "org-123"

    def test_from_settings_without_seed_buyer(self):
        config = OrderConfig.from_settings(Settings(SEED_BUYER_ORG_ID=None))
        assert config.default_buyer_organization_id is None

    def test_default(self):
        assert OrderConfig().default_buyer_organization_id is None
