"""
Cleaning Estimator - application entry point

Creates the Flask app through the factory in app_init.py. Run directly for
local development; production serves it through wsgi.py.
"""
import os

from app_init import create_app

app = create_app()


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))
