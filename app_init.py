"""
Application Initialization Module
Initializes the Flask app with configuration, logging, security, storage and blueprints
"""
import os
from flask import Flask
from config import get_config
from logging_config import setup_logging
from ai_service import AIService
from security import setup_security
from health_checks import register_health_checks
from services.email_service import EmailService
from services.ghl_integration import GHLIntegration
from services.form_state import FormStateStore
import logging

logger = logging.getLogger(__name__)


def create_app(config_class=None, overrides=None):
    """
    Application factory that creates and configures the estimator app

    Args:
        config_class: Configuration class (defaults to the FLASK_ENV selection)
        overrides: Extra config values applied after the class, mainly for tests

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)

    app.config.from_object(config_class or get_config())
    if overrides:
        app.config.update(overrides)

    setup_logging(app)

    logger.info("=" * 60)
    logger.info("🚀 Initializing Cleaning Estimator Application")
    logger.info("=" * 60)
    logger.info(f"Environment: {os.environ.get('FLASK_ENV', 'development')}")
    logger.info(f"Debug mode: {app.debug}")

    # Setup security (CORS, headers, error handlers)
    setup_security(app, app.config)

    create_required_directories(app)

    # Shared service instances used by the blueprints
    app.ai_service = initialize_ai_service(app)
    app.email_service = EmailService(app.config)
    app.ghl_integration = GHLIntegration(app.config)
    app.form_state = FormStateStore(app.config['SESSION_DATA_FOLDER'])
    log_integration_status(app)

    from app import register_blueprints
    register_blueprints(app)

    register_health_checks(app)

    logger.info("✅ Application initialization complete")
    logger.info("=" * 60)

    return app


def create_required_directories(app):
    """
    Create the output, session and log directories

    Args:
        app: Flask application instance
    """
    directories = [
        app.config['OUTPUT_FOLDER'],
        app.config['SESSION_DATA_FOLDER'],
        'logs'
    ]

    for directory in directories:
        try:
            os.makedirs(directory, exist_ok=True)
            logger.debug(f"Directory ensured: {directory}")
        except OSError as e:
            logger.error(f"Failed to create directory {directory}: {e}")

    logger.info(f"✅ Ensured {len(directories)} required directories")


def initialize_ai_service(app):
    """
    Create the OpenAI recommendation service

    Args:
        app: Flask application instance

    Returns:
        AIService instance (unavailable when no key is configured)
    """
    ai_service = AIService(app.config)

    if ai_service.is_available():
        logger.info(f"✅ AI recommendations enabled ({ai_service.status()['model']})")
    else:
        logger.warning("⚠️  OpenAI not configured - AI recommendations disabled")

    return ai_service


def log_integration_status(app):
    if not app.email_service.is_configured():
        logger.warning("⚠️  RESEND_API_KEY not set - emails will not be sent")
    if not app.ghl_integration.is_configured():
        logger.warning("⚠️  GHL_API_KEY / GHL_LOCATION_ID not set - CRM sync disabled")
