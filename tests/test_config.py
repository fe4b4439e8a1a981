"""
Tests for configuration system
"""
import pytest
from config import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config
)


@pytest.mark.unit
class TestBaseConfig:
    """Tests for base configuration"""

    def test_base_config_has_secret_key(self):
        """Test that base config has a secret key"""
        config = Config()
        assert config.SECRET_KEY is not None

    def test_base_config_has_max_content_length(self):
        """Test that base config caps request bodies"""
        config = Config()
        assert config.MAX_CONTENT_LENGTH == 16 * 1024 * 1024

    def test_base_config_has_cors_settings(self):
        """Test that base config allows the client id and webhook headers"""
        config = Config()
        assert 'POST' in config.CORS_METHODS
        assert 'DELETE' in config.CORS_METHODS
        assert 'X-Client-Id' in config.CORS_ALLOW_HEADERS
        assert 'X-GHL-Signature' in config.CORS_ALLOW_HEADERS

    def test_base_config_has_company_info(self):
        """Test that documents have a company header to print"""
        config = Config()
        for key in ('name', 'address', 'city', 'phone', 'email', 'website'):
            assert config.COMPANY_INFO[key]

    def test_base_config_has_integration_endpoints(self):
        """Test that Resend and GHL endpoints have defaults"""
        config = Config()
        assert config.RESEND_API_URL.startswith('https://')
        assert config.GHL_BASE_URL == 'https://services.leadconnectorhq.com'
        assert config.GHL_API_VERSION == '2021-07-28'

    def test_base_config_has_recommendation_model(self):
        """Test that AI recommendations have a model configured"""
        config = Config()
        model = config.AI_MODELS['recommendations']
        assert model['model'] == 'gpt-3.5-turbo'
        assert model['max_tokens'] == 500

    def test_base_config_has_recommendation_limit(self):
        config = Config()
        assert config.RECOMMENDATION_LIMIT == 5

    def test_base_config_has_storage_folders(self):
        config = Config()
        assert config.OUTPUT_FOLDER == 'outputs'
        assert config.SESSION_DATA_FOLDER == 'session_data'

    def test_base_config_has_no_unused_settings(self):
        assert not hasattr(Config, 'BASE_DIR')
        assert not hasattr(Config, 'SESSION_PERMANENT')
        assert not hasattr(Config, 'PERMANENT_SESSION_LIFETIME')


@pytest.mark.unit
class TestDevelopmentConfig:
    """Tests for development configuration"""

    def test_development_config_has_debug(self):
        config = DevelopmentConfig()
        assert config.DEBUG is True
        assert config.TESTING is False

    def test_development_config_has_debug_log_level(self):
        config = DevelopmentConfig()
        assert config.LOG_LEVEL == 'DEBUG'

    def test_development_config_allows_all_cors(self):
        config = DevelopmentConfig()
        assert '*' in config.CORS_ORIGINS


@pytest.mark.unit
class TestProductionConfig:
    """Tests for production configuration"""

    def test_production_config_has_debug_disabled(self):
        config = ProductionConfig()
        assert config.DEBUG is False
        assert config.TESTING is False

    def test_production_config_has_secure_cookies(self):
        """Test that production config has secure cookies"""
        config = ProductionConfig()
        assert config.SESSION_COOKIE_SECURE is True
        assert config.SESSION_COOKIE_HTTPONLY is True
        assert config.SESSION_COOKIE_SAMESITE == 'Lax'

    def test_production_config_has_https_scheme(self):
        config = ProductionConfig()
        assert config.PREFERRED_URL_SCHEME == 'https'


@pytest.mark.unit
class TestTestingConfig:
    """Tests for testing configuration"""

    def test_testing_config_has_testing_enabled(self):
        config = TestingConfig()
        assert config.TESTING is True

    def test_testing_config_uses_fake_integration_keys(self):
        """Test that tests never carry real credentials"""
        config = TestingConfig()
        assert config.RESEND_API_KEY == 'test-resend-key'
        assert config.GHL_API_KEY == 'test-ghl-key'
        assert config.OPENAI_API_KEY is None

    def test_testing_config_does_not_wait_between_retries(self):
        config = TestingConfig()
        assert config.AI_RETRY_ATTEMPTS == 1
        assert config.AI_RETRY_DELAY == 0


@pytest.mark.unit
class TestGetConfig:
    """Tests for configuration selector"""

    def test_get_config_returns_development_by_default(self, monkeypatch):
        monkeypatch.delenv('FLASK_ENV', raising=False)
        assert get_config() == DevelopmentConfig

    def test_get_config_returns_production_when_set(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'production')
        assert get_config() == ProductionConfig

    def test_get_config_returns_testing_when_set(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'testing')
        assert get_config() == TestingConfig

    def test_get_config_falls_back_to_development(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'staging')
        assert get_config() == DevelopmentConfig
