"""
Form Routes Blueprint

Handles:
- /api/forms/modes: Simple, advanced and wizard modes
- /api/forms/simple: Expand simple-mode fields into a full form
- /api/forms/locations: State travel defaults
- /api/forms/wizard/*: Step list, per-step validation and navigation
- /api/themes: Presentation themes
- /api/forms/theme: Per-client theme preference
- /api/forms/state: Per-client saved form state
"""

from flask import Blueprint, request, jsonify, current_app
import logging

from app.utils.helpers import resolve_client_id
from services.form_modes import (
    DEFAULT_FORM_MODE, LOCATION_CONFIGS, WIZARD_STEPS, WIZARD_STEP_IDS,
    expand_simple_form, list_modes, validate_step, next_step, previous_step, wizard_progress,
)
from services.form_state import STORAGE_KEYS, WIZARD_STORAGE_KEY
from services.themes import DEFAULT_THEME_ID, THEMES, get_css_variables, list_themes

logger = logging.getLogger(__name__)

forms_bp = Blueprint('forms_bp', __name__)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _require_client_id(payload=None):
    client_id = resolve_client_id(request.headers, payload)
    if not client_id:
        return None, (jsonify({'success': False, 'error': 'Missing client id'}), 400)
    return client_id, None


# ============================================================================
# MODES
# ============================================================================

@forms_bp.route('/api/forms/modes', methods=['GET'])
def get_modes():
    return jsonify({'success': True, 'modes': list_modes(), 'default': DEFAULT_FORM_MODE})


@forms_bp.route('/api/forms/locations', methods=['GET'])
def get_locations():
    return jsonify({
        'success': True,
        'locations': [{'state': state, **config} for state, config in LOCATION_CONFIGS.items()]
    })


@forms_bp.route('/api/forms/simple', methods=['POST'])
def expand_simple():
    """Full estimator form for the simple-mode fields"""
    data = _json_body()
    if data is None:
        return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400
    return jsonify({'success': True, 'formData': expand_simple_form(data)})


# ============================================================================
# WIZARD
# ============================================================================

@forms_bp.route('/api/forms/wizard/steps', methods=['GET'])
def get_wizard_steps():
    return jsonify({'success': True, 'steps': WIZARD_STEPS})


@forms_bp.route('/api/forms/wizard/validate', methods=['POST'])
def validate_wizard_step():
    """Body: {"step": "...", "formData": {...}}"""
    data = _json_body()
    if data is None:
        return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

    step_id = data.get('step')
    if step_id not in WIZARD_STEP_IDS:
        return jsonify({'success': False, 'error': f"Unknown wizard step: {step_id}"}), 400

    is_valid, error = validate_step(step_id, data.get('formData') or {})
    return jsonify({'success': True, 'step': step_id, 'valid': is_valid, 'error': error})


@forms_bp.route('/api/forms/wizard/next', methods=['POST'])
def wizard_next():
    """
    Move the wizard forward (or back with "direction": "back")

    The resulting step is saved for the client when a client id is supplied.
    """
    try:
        data = _json_body()
        if data is None:
            return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

        step_id = data.get('step')
        if step_id not in WIZARD_STEP_IDS:
            return jsonify({'success': False, 'error': f"Unknown wizard step: {step_id}"}), 400

        if data.get('direction') == 'back':
            result = {'step': previous_step(step_id), 'advanced': False, 'error': None}
        else:
            result = next_step(step_id, data.get('formData') or {})

        client_id = resolve_client_id(request.headers, data)
        if client_id:
            try:
                current_app.form_state.save(client_id, WIZARD_STORAGE_KEY, {'currentStep': result['step']})
            except ValueError as e:
                return jsonify({'success': False, 'error': str(e)}), 400

        return jsonify({'success': True, **result, 'progress': wizard_progress(result['step'])})

    except Exception as e:
        logger.error(f"Error moving wizard step: {e}", exc_info=True)
        return jsonify({'success': False, 'error': str(e)}), 500


# ============================================================================
# THEMES
# ============================================================================

@forms_bp.route('/api/themes', methods=['GET'])
def get_themes():
    return jsonify({'success': True, 'themes': list_themes(), 'default': DEFAULT_THEME_ID})


@forms_bp.route('/api/themes/<theme_id>', methods=['GET'])
def get_theme_detail(theme_id):
    theme = THEMES.get(theme_id)
    if theme is None:
        return jsonify({'success': False, 'error': f"Unknown theme: {theme_id}"}), 404
    return jsonify({'success': True, 'theme': theme, 'cssVariables': get_css_variables(theme_id)})


@forms_bp.route('/api/forms/theme', methods=['GET'])
def get_client_theme():
    client_id = resolve_client_id(request.headers)
    try:
        theme_id = current_app.form_state.get_theme(client_id)
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    return jsonify({'success': True, 'themeId': theme_id, 'cssVariables': get_css_variables(theme_id)})


@forms_bp.route('/api/forms/theme', methods=['POST'])
def save_client_theme():
    """Body: {"themeId": "..."}"""
    data = _json_body() or {}
    client_id, error_response = _require_client_id(data)
    if error_response:
        return error_response

    theme_id = data.get('themeId')
    if not isinstance(theme_id, str):
        return jsonify({'success': False, 'error': 'themeId is required'}), 400

    try:
        current_app.form_state.save_theme(client_id, theme_id)
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    logger.info(f"🎨 Client {client_id} switched theme to {theme_id}")
    return jsonify({'success': True, 'themeId': theme_id, 'cssVariables': get_css_variables(theme_id)})


# ============================================================================
# SAVED FORM STATE
# ============================================================================

@forms_bp.route('/api/forms/state', methods=['GET'])
def get_form_state():
    """Everything saved for the client, or one value with ?key="""
    client_id, error_response = _require_client_id()
    if error_response:
        return error_response

    try:
        key = request.args.get('key')
        if key:
            if key not in STORAGE_KEYS:
                return jsonify({'success': False, 'error': f"Unknown storage key: {key}"}), 400
            return jsonify({'success': True, 'key': key, 'value': current_app.form_state.get(client_id, key)})
        return jsonify({'success': True, 'state': current_app.form_state.load_all(client_id)})
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400


@forms_bp.route('/api/forms/state', methods=['POST'])
def save_form_state():
    """Body: {"key": "...", "value": ...}"""
    data = _json_body()
    if data is None:
        return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

    client_id, error_response = _require_client_id(data)
    if error_response:
        return error_response

    if 'value' not in data:
        return jsonify({'success': False, 'error': 'value is required'}), 400

    try:
        state = current_app.form_state.save(client_id, data.get('key'), data['value'])
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    return jsonify({'success': True, 'state': state})


@forms_bp.route('/api/forms/state', methods=['DELETE'])
def clear_form_state():
    """Remove one key with ?key=, the saved estimate with ?key=estimate, else everything"""
    client_id, error_response = _require_client_id()
    if error_response:
        return error_response

    key = request.args.get('key')
    try:
        if key == 'estimate':
            current_app.form_state.clear_estimate(client_id)
            removed = True
        elif key:
            removed = current_app.form_state.remove(client_id, key)
        else:
            removed = current_app.form_state.clear(client_id)
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400

    return jsonify({'success': True, 'removed': removed})
