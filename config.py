"""
Centralized Configuration for the Cleaning Estimator Application
Manages environment-specific settings, secrets, and integration configurations.
"""
import os


class Config:
    """Base configuration with defaults"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or os.urandom(32).hex()
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max request body

    # CORS Settings
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
    CORS_ALLOW_HEADERS = ['Content-Type', 'Authorization', 'X-Requested-With', 'X-Client-Id', 'X-GHL-Signature']

    # Origins allowed to embed the estimator in an iframe
    FRAME_ANCESTORS = os.environ.get('FRAME_ANCESTORS', "'self'").split()

    # File Storage Paths
    OUTPUT_FOLDER = 'outputs'
    SESSION_DATA_FOLDER = 'session_data'

    # Public URL used in outgoing emails
    APP_URL = os.environ.get('APP_URL', 'http://localhost:5000')

    # Company details printed on generated documents
    COMPANY_INFO = {
        'name': os.environ.get('COMPANY_NAME', 'Big Brother Property Solutions'),
        'address': os.environ.get('COMPANY_ADDRESS', '1200 Eastchester Dr.'),
        'city': os.environ.get('COMPANY_CITY', 'High Point, NC 27265'),
        'phone': os.environ.get('COMPANY_PHONE', '(336) 624-7442'),
        'email': os.environ.get('COMPANY_EMAIL', 'bids@bigbroprops.com'),
        'website': os.environ.get('COMPANY_WEBSITE', 'www.bigbrotherpropertysolutions.com'),
    }

    # Email (Resend)
    RESEND_API_KEY = os.environ.get('RESEND_API_KEY')
    RESEND_API_URL = os.environ.get('RESEND_API_URL', 'https://api.resend.com')
    EMAIL_FROM = os.environ.get('EMAIL_FROM', 'EstimAItor <noreply@bigbropros.com>')
    BIDS_EMAIL = os.environ.get('BIDS_EMAIL', 'bids@bigbropros.com')

    # GoHighLevel CRM
    GHL_API_KEY = os.environ.get('GHL_API_KEY')
    GHL_LOCATION_ID = os.environ.get('GHL_LOCATION_ID')
    GHL_BASE_URL = os.environ.get('GHL_BASE_URL', 'https://services.leadconnectorhq.com')
    GHL_API_VERSION = '2021-07-28'
    GHL_PIPELINE_ID = os.environ.get('GHL_PIPELINE_ID', 'default-pipeline')
    GHL_STAGE_ID = os.environ.get('GHL_STAGE_ID', 'default-stage')
    GHL_ASSIGNED_USER_ID = os.environ.get('GHL_ASSIGNED_USER_ID', 'default-user')

    # Outbound HTTP timeout for integrations
    HTTP_TIMEOUT = int(os.environ.get('HTTP_TIMEOUT', '30'))  # seconds

    # AI Service API Keys
    OPENAI_API_KEY = os.environ.get('OPENAI_API_KEY')

    # AI Model Configuration
    AI_MODELS = {
        'recommendations': {
            'model': 'gpt-3.5-turbo',
            'max_tokens': 500,
            'temperature': 0.7,
        },
    }

    # AI Retry Configuration
    AI_RETRY_ATTEMPTS = int(os.environ.get('AI_RETRY_ATTEMPTS', '3'))
    AI_RETRY_DELAY = int(os.environ.get('AI_RETRY_DELAY', '2'))  # seconds
    AI_TIMEOUT = int(os.environ.get('AI_TIMEOUT', '60'))  # seconds

    # Recommendation list length
    RECOMMENDATION_LIMIT = 5

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_FILE = os.environ.get('LOG_FILE', 'app.log')


class DevelopmentConfig(Config):
    """Development-specific configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'
    # Allow all CORS in development
    CORS_ORIGINS = ['*']


class ProductionConfig(Config):
    """Production-specific configuration"""
    DEBUG = False
    TESTING = False
    # Strict CORS in production
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'https://estimaitor.bigbropros.com').split(',')
    # Force HTTPS
    PREFERRED_URL_SCHEME = 'https'
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class TestingConfig(Config):
    """Testing-specific configuration"""
    DEBUG = True
    TESTING = True
    # Never talk to real integrations from tests
    RESEND_API_KEY = 'test-resend-key'
    GHL_API_KEY = 'test-ghl-key'
    GHL_LOCATION_ID = 'test-location'
    OPENAI_API_KEY = None
    AI_RETRY_ATTEMPTS = 1
    AI_RETRY_DELAY = 0


# Configuration selector
config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}


def get_config():
    """Get configuration based on FLASK_ENV environment variable"""
    env = os.environ.get('FLASK_ENV', 'development')
    return config_by_name.get(env, DevelopmentConfig)
