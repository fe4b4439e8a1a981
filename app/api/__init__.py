"""
API Blueprints Package

All HTTP route handlers for the application, organized by domain.
Each module defines a Flask Blueprint registered in app/__init__.py.

BLUEPRINT REFERENCE:
====================

Estimating:
- estimate.py        : Price calculation, form options, cleaner recommendation
- recommendations.py : Rule-based and OpenAI recommendations

Documents:
- documents.py       : Quote, work order, purchase order and change order PDFs

Integrations:
- email.py           : Resend email dispatch and integration tests
- ghl.py             : GoHighLevel lead push and webhook

Form layer:
- forms.py           : Form modes, simple-mode expansion, wizard steps,
                       themes and per-client form state
"""

# All blueprints are imported and registered in app/__init__.py
# This file serves as documentation only

__all__ = []
