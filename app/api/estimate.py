"""
Estimate Routes Blueprint

Handles:
- /api/estimate: Price a project and attach recommendations
- /api/estimate/options: Project, cleaning and pressure washing choices
- /api/estimate/recommended-cleaners: Crew size for a square footage
"""

from flask import Blueprint, request, jsonify, current_app
import logging

from app.utils.helpers import resolve_client_id
from services.estimator import calculate_estimate, EstimateError
from services.form_modes import expand_simple_form, description_from_form
from services.models import PROJECT_TYPES, CLEANING_TYPES, PRESSURE_WASHING_TYPES
from services.pricing import (
    CLEANING_MULTIPLIERS, URGENCY_MULTIPLIERS, PRESSURE_WASHING_RATES,
    PRESSURE_WASHING_DAILY_RATE, get_recommended_cleaners, get_project_multiplier,
)
from services.recommendations import generate_recommendations
from validators import validate_estimate_request, parse_number, format_validation_error

logger = logging.getLogger(__name__)

estimate_bp = Blueprint('estimate_bp', __name__)


def run_estimate(form_data):
    """
    Validate, price and annotate one form submission

    Returns:
        Tuple of (ProjectDescription, EstimateResult with recommendations)

    Raises:
        EstimateError: when the form cannot be priced
    """
    is_valid, error = validate_estimate_request(form_data)
    if not is_valid:
        raise EstimateError(error)

    try:
        description = description_from_form(form_data)
    except ValueError as e:
        raise EstimateError(str(e))

    try:
        estimate = calculate_estimate(description)
    except EstimateError:
        raise
    except ValueError as e:
        raise EstimateError(str(e))

    recommendations = generate_recommendations(
        description,
        estimate.estimated_hours,
        limit=current_app.config.get('RECOMMENDATION_LIMIT', 5),
    )
    return description, estimate.with_recommendations(recommendations)


# ============================================================================
# ESTIMATE CALCULATION
# ============================================================================

@estimate_bp.route('/api/estimate', methods=['POST'])
def create_estimate():
    """
    Price a project

    Body is the estimator form (camelCase). With "mode": "simple" only the
    simple-mode fields are read and the rest comes from location defaults.
    When a client id is supplied the form and estimate are saved for it.
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

        form_data = data.get('formData', data)
        if data.get('mode') == 'simple':
            form_data = expand_simple_form(form_data)

        try:
            description, estimate = run_estimate(form_data)
        except EstimateError as e:
            logger.info(f"Estimate rejected: {e.message}")
            return jsonify(format_validation_error(e.field or 'form', e.message)), 400

        client_id = resolve_client_id(request.headers, data)
        if client_id:
            try:
                current_app.form_state.save_estimate(client_id, description.to_dict(), estimate.to_dict())
            except ValueError as e:
                return jsonify({'success': False, 'error': str(e)}), 400

        logger.info(
            f"💰 Estimate {description.project_type} {description.square_footage:,.0f} sq ft: "
            f"${estimate.total_price:,.2f}"
        )
        return jsonify({
            'success': True,
            'formData': description.to_dict(),
            'estimate': estimate.to_dict()
        })

    except Exception as e:
        logger.error(f"Error calculating estimate: {e}", exc_info=True)
        return jsonify({'success': False, 'error': str(e)}), 500


# ============================================================================
# FORM OPTIONS
# ============================================================================

@estimate_bp.route('/api/estimate/options', methods=['GET'])
def get_estimate_options():
    """Choices and multipliers the estimator forms render"""
    pressure_washing = []
    for key, label in PRESSURE_WASHING_TYPES.items():
        if key == 'daily_rate':
            pressure_washing.append({'value': key, 'label': label, 'flatRate': PRESSURE_WASHING_DAILY_RATE})
        else:
            rate = PRESSURE_WASHING_RATES[key]
            pressure_washing.append({
                'value': key,
                'label': label,
                'ratePerSqFt': rate['rate'],
                'minimum': rate.get('minimum'),
            })

    return jsonify({
        'success': True,
        'projectTypes': [
            {'value': key, 'label': label, 'multiplier': get_project_multiplier(key)}
            for key, label in PROJECT_TYPES.items()
        ],
        'cleaningTypes': [
            {'value': key, 'label': label, 'multiplier': CLEANING_MULTIPLIERS.get(key, 1.0)}
            for key, label in CLEANING_TYPES.items()
        ],
        'pressureWashingTypes': pressure_washing,
        'urgencyLevels': [
            {'value': level, 'multiplier': multiplier}
            for level, multiplier in sorted(URGENCY_MULTIPLIERS.items())
        ],
    })


@estimate_bp.route('/api/estimate/recommended-cleaners', methods=['GET'])
def recommended_cleaners():
    """Crew size for ?squareFootage="""
    square_footage = parse_number(request.args.get('squareFootage'))
    if square_footage is None or square_footage < 0:
        return jsonify({'success': False, 'error': 'squareFootage must be a non-negative number'}), 400

    return jsonify({
        'success': True,
        'squareFootage': square_footage,
        'recommendedCleaners': get_recommended_cleaners(square_footage)
    })
