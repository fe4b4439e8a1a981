"""
Security Utilities & Middleware
CORS, response headers, JSON error handlers and webhook signature checks
"""
import os
import secrets
from functools import wraps
from typing import Callable, Dict, Any
from flask import Flask, request, jsonify, Response
from flask_cors import CORS
import logging

logger = logging.getLogger(__name__)

WEAK_SECRET_MARKERS = ('dev', 'test', 'secret', 'password', '12345', 'change-me')
MIN_SECRET_LENGTH = 32

# Paths excluded from request logging
QUIET_PATHS = ('/api/health', '/api/ping')

PRODUCTION_ENV_VARS = ['SECRET_KEY', 'RESEND_API_KEY', 'GHL_API_KEY', 'GHL_LOCATION_ID']


def is_secure_secret_key(secret_key: str) -> bool:
    """
    Check that a secret key is long enough and not a placeholder

    Args:
        secret_key: Secret key to validate

    Returns:
        True if key is secure, False otherwise
    """
    if not secret_key:
        return False

    if len(secret_key) < MIN_SECRET_LENGTH:
        logger.warning(f"Secret key is too short (minimum {MIN_SECRET_LENGTH} characters)")
        return False

    if any(marker in secret_key.lower() for marker in WEAK_SECRET_MARKERS):
        logger.warning("Secret key appears to be weak or default")
        return False

    return True


def ensure_secret_key(config: Dict[str, Any]) -> str:
    """
    Return the configured secret key, or a generated one when it is missing or weak

    Sessions signed with a generated key do not survive a restart.
    """
    secret_key = config.get('SECRET_KEY')
    if secret_key and is_secure_secret_key(secret_key):
        return secret_key

    if os.environ.get('FLASK_ENV') == 'production':
        logger.error("No secure SECRET_KEY in production! Add SECRET_KEY to environment variables.")

    secret_key = secrets.token_hex(32)
    logger.warning(f"Generated new secret key (length: {len(secret_key)})")
    return secret_key


def setup_security_headers(app: Flask):
    """
    Add security headers to all responses

    Args:
        app: Flask application instance
    """
    @app.after_request
    def add_security_headers(response: Response) -> Response:
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

        # The estimator is embedded on partner sites, so framing is allowed
        # only from configured origins
        frame_origins = app.config.get('FRAME_ANCESTORS') or ["'self'"]
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "img-src 'self' data:; "
            f"frame-ancestors {' '.join(frame_origins)};"
        )

        if not app.debug:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        return response

    logger.info("Security headers configured")


def setup_cors(app: Flask, config: Dict[str, Any]):
    """
    Configure CORS for the estimator API

    Args:
        app: Flask application instance
        config: Application configuration dictionary
    """
    cors_origins = config.get('CORS_ORIGINS', ['*'])
    cors_methods = config.get('CORS_METHODS', ['GET', 'POST', 'DELETE', 'OPTIONS'])
    cors_headers = config.get('CORS_ALLOW_HEADERS', ['Content-Type'])

    if not app.debug and '*' in cors_origins:
        logger.warning("⚠️  Using wildcard CORS in production! Set CORS_ORIGINS environment variable.")

    CORS(
        app,
        resources={r"/api/*": {"origins": cors_origins}},
        methods=cors_methods,
        allow_headers=cors_headers,
        max_age=3600
    )

    logger.info(f"CORS configured: origins={cors_origins}")


def require_ghl_signature(f: Callable) -> Callable:
    """
    Reject GoHighLevel webhook calls that carry no X-GHL-Signature header

    Usage:
        @bp.route('/api/ghl-webhook', methods=['POST'])
        @require_ghl_signature
        def ghl_webhook():
            ...
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        signature = request.headers.get('X-GHL-Signature')

        if not signature:
            logger.warning(f"Missing GHL signature for {request.path} from {request.remote_addr}")
            return jsonify({'success': False, 'error': 'Missing signature'}), 401

        return f(*args, **kwargs)

    return decorated_function


def _error_body(error: str, message: str) -> Dict[str, Any]:
    return {'success': False, 'error': error, 'message': message}


def setup_error_handlers(app: Flask):
    """
    Register JSON error handlers that don't expose stack traces

    Args:
        app: Flask application instance
    """
    handled = {
        400: ('Bad Request', 'The request could not be understood or was missing required parameters'),
        401: ('Unauthorized', 'Authentication required'),
        403: ('Forbidden', 'You do not have permission to access this resource'),
        404: ('Not Found', 'The requested resource was not found'),
        405: ('Method Not Allowed', 'The method is not allowed for the requested URL'),
        413: ('Payload Too Large', 'The request is too large'),
        429: ('Rate Limit Exceeded', 'Too many requests. Please try again later'),
        503: ('Service Unavailable', 'The service is temporarily unavailable. Please try again later'),
    }

    def make_handler(status: int, error: str, message: str):
        def handler(exc):
            return jsonify(_error_body(error, message)), status
        return handler

    for status, (error, message) in handled.items():
        app.register_error_handler(status, make_handler(status, error, message))

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.error(f"Internal server error: {error}", exc_info=True)
        body = _error_body('Internal Server Error', 'An error occurred while processing your request')
        if app.debug:
            body['details'] = str(error)
        return jsonify(body), 500

    logger.info("Error handlers registered")


def setup_request_logging(app: Flask):
    """
    Log each request and response, except health checks

    Args:
        app: Flask application instance
    """
    @app.before_request
    def log_request():
        if request.path in QUIET_PATHS:
            return

        logger.info(f"Request: {request.method} {request.path} from {request.remote_addr}")

    @app.after_request
    def log_response(response: Response) -> Response:
        if request.path in QUIET_PATHS:
            return response

        logger.info(
            f"Response: {request.method} {request.path} "
            f"status={response.status_code} "
            f"size={response.content_length}"
        )

        return response

    logger.info("Request logging configured")


def validate_environment_variables(required_vars: list, app: Flask) -> bool:
    """
    Warn about required environment variables that are not set

    Args:
        required_vars: List of required environment variable names
        app: Flask application instance

    Returns:
        True when every variable is set
    """
    missing_vars = [var for var in required_vars if not os.environ.get(var)]

    for var in missing_vars:
        logger.warning(f"Missing environment variable: {var}")

    if missing_vars and not app.debug:
        logger.error(f"Missing required environment variables in production: {missing_vars}")

    return not missing_vars


def setup_security(app: Flask, config: Dict[str, Any]):
    """
    Setup all security features for the application

    Args:
        app: Flask application instance
        config: Application configuration dictionary
    """
    logger.info("Configuring application security...")

    app.secret_key = ensure_secret_key(config)
    setup_cors(app, config)
    setup_security_headers(app)
    setup_error_handlers(app)
    setup_request_logging(app)

    if not app.debug and not app.testing:
        validate_environment_variables(PRODUCTION_ENV_VARS, app)

    logger.info("✅ Security configuration complete")
