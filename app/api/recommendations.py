"""
Recommendation Routes Blueprint

Handles:
- /api/recommendations: Rule-based project tips
- /api/ai-recommendations: OpenAI written recommendations
"""

from flask import Blueprint, request, jsonify, current_app
import logging

from ai_service import AIServiceError, AIServiceUnavailable, AIServiceTimeout
from services.estimator import calculate_estimated_hours
from services.form_modes import description_from_form
from services.recommendations import generate_recommendations

logger = logging.getLogger(__name__)

recommendations_bp = Blueprint('recommendations_bp', __name__)


def _form_from_request():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data.get('formData', data)


@recommendations_bp.route('/api/recommendations', methods=['POST'])
def get_recommendations():
    """Shuffled rule-based tips for the posted project"""
    try:
        form_data = _form_from_request()
        if form_data is None:
            return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

        try:
            description = description_from_form(form_data)
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400

        # Crew hours drive the workload tip; a missing size means no hours yet
        estimated_hours = calculate_estimated_hours(description) if description.square_footage > 0 else 0
        recommendations = generate_recommendations(
            description,
            estimated_hours,
            limit=current_app.config.get('RECOMMENDATION_LIMIT', 5),
        )

        return jsonify({'success': True, 'recommendations': recommendations})

    except Exception as e:
        logger.error(f"Error generating recommendations: {e}", exc_info=True)
        return jsonify({'success': False, 'error': str(e)}), 500


@recommendations_bp.route('/api/ai-recommendations', methods=['POST'])
def get_ai_recommendations():
    """Free-text recommendations from OpenAI; 503 when not configured"""
    try:
        form_data = _form_from_request()
        if form_data is None:
            return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

        try:
            description = description_from_form(form_data)
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400

        recommendations = current_app.ai_service.generate_recommendations(description)
        return jsonify({'success': True, 'recommendations': recommendations})

    except AIServiceUnavailable as e:
        return jsonify({'success': False, 'error': str(e)}), 503
    except AIServiceTimeout as e:
        logger.error(f"AI recommendations timed out: {e}")
        return jsonify({'success': False, 'error': 'AI service timed out'}), 504
    except AIServiceError as e:
        logger.error(f"AI recommendations failed: {e}")
        return jsonify({'success': False, 'error': 'Failed to generate recommendations'}), 500
    except Exception as e:
        logger.error(f"Error generating AI recommendations: {e}", exc_info=True)
        return jsonify({'success': False, 'error': str(e)}), 500
