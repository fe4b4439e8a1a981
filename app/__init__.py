"""
Cleaning Estimator - Application Package

This package contains the HTTP layer:
- api/: HTTP route handlers (Flask Blueprints)
- utils/: Shared utility functions

Business logic lives in the top-level services package. The app factory is in
app_init.py at the project root.
"""

import logging

logger = logging.getLogger(__name__)


def register_blueprints(app):
    """
    Register all API blueprints with the Flask app.
    Called from create_app() after the shared services are attached.

    Blueprint modules import services that themselves import app.utils, so
    they are imported here rather than at package import time.

    Args:
        app: Flask application instance
    """
    from app.api.estimate import estimate_bp
    from app.api.recommendations import recommendations_bp
    from app.api.documents import documents_bp
    from app.api.email import email_bp
    from app.api.ghl import ghl_bp
    from app.api.forms import forms_bp

    for blueprint in (estimate_bp, recommendations_bp, documents_bp, email_bp, ghl_bp, forms_bp):
        app.register_blueprint(blueprint)

    logger.info("API blueprints registered")


__all__ = ['register_blueprints']
