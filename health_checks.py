"""
Health Check & Monitoring Endpoints
Liveness, readiness and metrics for the estimator deployment
"""
import os
import sys
import time
import psutil
from datetime import datetime
from typing import Dict, Any
from flask import Blueprint, jsonify, current_app
import logging

logger = logging.getLogger(__name__)

SERVICE_NAME = 'cleaning-estimator'
SERVICE_VERSION = '1.0.0'

health_bp = Blueprint('health', __name__)

# Track application start time
START_TIME = time.time()


def get_system_metrics() -> Dict[str, Any]:
    """
    Process CPU, memory and thread counts

    Returns:
        Dictionary of system metrics (empty if psutil cannot read them)
    """
    try:
        process = psutil.Process()

        return {
            'cpu_percent': process.cpu_percent(interval=0.1),
            'memory_mb': round(process.memory_info().rss / 1024 / 1024, 2),
            'memory_percent': round(process.memory_percent(), 2),
            'threads': process.num_threads(),
        }
    except psutil.Error as e:
        logger.warning(f"Failed to get system metrics: {e}")
        return {}


def get_uptime() -> Dict[str, Any]:
    uptime_seconds = time.time() - START_TIME

    return {
        'uptime_seconds': round(uptime_seconds, 2),
        'uptime_hours': round(uptime_seconds / 3600, 2),
        'started_at': datetime.fromtimestamp(START_TIME).isoformat()
    }


def check_integrations(app) -> Dict[str, bool]:
    """
    Which outbound integrations have credentials configured

    Args:
        app: Flask application instance

    Returns:
        Dictionary of integration availability
    """
    return {
        'resend_email': bool(app.config.get('RESEND_API_KEY')),
        'gohighlevel': bool(app.config.get('GHL_API_KEY') and app.config.get('GHL_LOCATION_ID')),
        'openai': bool(app.config.get('OPENAI_API_KEY')),
    }


def check_filesystem(app) -> Dict[str, Dict[str, bool]]:
    """
    Check that the output, session and log directories exist and are writable

    Args:
        app: Flask application instance

    Returns:
        Dictionary of filesystem checks keyed by directory
    """
    required_dirs = [
        app.config['OUTPUT_FOLDER'],
        app.config['SESSION_DATA_FOLDER'],
        'logs',
    ]

    filesystem_status = {}

    for dir_name in required_dirs:
        exists = os.path.isdir(dir_name)
        writable = os.access(dir_name, os.W_OK) if exists else False

        filesystem_status[dir_name] = {
            'exists': exists,
            'writable': writable,
            'healthy': exists and writable
        }

    return filesystem_status


@health_bp.route('/health', methods=['GET'])
def health_check():
    """
    Liveness check
    Returns 200 whenever the application is running
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.utcnow().isoformat(),
        'service': SERVICE_NAME
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness_check():
    """
    Readiness check
    Pricing needs only the filesystem; missing integrations are reported but
    do not make the service unready.
    """
    try:
        integrations = check_integrations(current_app)
        filesystem = check_filesystem(current_app)
        filesystem_healthy = all(status['healthy'] for status in filesystem.values())

        response = {
            'status': 'ready' if filesystem_healthy else 'not_ready',
            'timestamp': datetime.utcnow().isoformat(),
            'checks': {
                'integrations': integrations,
                'filesystem': filesystem,
                'filesystem_healthy': filesystem_healthy
            }
        }

        return jsonify(response), 200 if filesystem_healthy else 503

    except Exception as e:
        logger.error(f"Readiness check failed: {e}")
        return jsonify({
            'status': 'error',
            'error': str(e),
            'timestamp': datetime.utcnow().isoformat()
        }), 503


@health_bp.route('/metrics', methods=['GET'])
def metrics():
    """Uptime, process metrics and integration status"""
    try:
        response = {
            'timestamp': datetime.utcnow().isoformat(),
            'service': SERVICE_NAME,
            'version': SERVICE_VERSION,
            'environment': os.environ.get('FLASK_ENV', 'production'),
            'uptime': get_uptime(),
            'system': get_system_metrics(),
            'integrations': check_integrations(current_app),
            'filesystem': check_filesystem(current_app),
            'python_version': sys.version.split()[0]
        }

        return jsonify(response), 200

    except Exception as e:
        logger.error(f"Metrics collection failed: {e}")
        return jsonify({
            'status': 'error',
            'error': str(e),
            'timestamp': datetime.utcnow().isoformat()
        }), 500


@health_bp.route('/ping', methods=['GET'])
def ping():
    return 'pong', 200


def register_health_checks(app):
    """
    Register health check blueprint with Flask app

    Args:
        app: Flask application instance
    """
    app.register_blueprint(health_bp, url_prefix='/api')
    logger.info("Health check endpoints registered: /api/health, /api/ready, /api/metrics, /api/ping")
