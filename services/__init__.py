"""
Services package for the cleaning estimator.
Contains the pricing calculator, document renderers and integration clients.
"""

from services.models import ProjectDescription, EstimateResult
from services.estimator import calculate_estimate, EstimateError
from services.email_service import EmailService
from services.ghl_integration import GHLIntegration
from services.form_state import FormStateStore

__all__ = [
    'ProjectDescription',
    'EstimateResult',
    'calculate_estimate',
    'EstimateError',
    'EmailService',
    'GHLIntegration',
    'FormStateStore',
]
