"""
Production WSGI entry point for the cleaning estimator

    gunicorn wsgi:app
"""

from application import app

__all__ = ['app']
