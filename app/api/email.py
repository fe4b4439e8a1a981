"""
Email Routes Blueprint

Handles:
- /api/email: Dispatch quote, contact, estimate and contract emails
- /api/test-integration: Send a test email or create a test CRM contact
"""

from flask import Blueprint, request, jsonify, current_app
import logging

from validators import EMAIL_TYPES, validate_email_request

logger = logging.getLogger(__name__)

email_bp = Blueprint('email_bp', __name__)


def _send(email_type, data):
    email_service = current_app.email_service
    senders = {
        'quote': email_service.send_quote,
        'contact': email_service.send_contact_form_notification,
        'estimate': email_service.send_estimate_ready,
        'contract': email_service.send_contract,
    }
    return senders[email_type](data)


@email_bp.route('/api/email', methods=['POST'])
def send_email():
    """
    Send one email

    Body: {"type": "quote" | "contact" | "estimate" | "contract", "data": {...}}
    """
    try:
        payload = request.get_json(silent=True) or {}
        email_type = payload.get('type')
        data = payload.get('data')

        if email_type not in EMAIL_TYPES:
            return jsonify({'success': False, 'error': 'Invalid email type'}), 400

        is_valid, error = validate_email_request(email_type, data)
        if not is_valid:
            return jsonify({'success': False, 'error': error}), 400

        result = _send(email_type, data)
        return jsonify(result)

    except Exception as e:
        logger.error(f"Email API error: {e}", exc_info=True)
        return jsonify({'success': False, 'error': 'Internal server error'}), 500


@email_bp.route('/api/test-integration', methods=['POST'])
def test_integration():
    """Exercise the Resend or GHL integration with placeholder data"""
    try:
        payload = request.get_json(silent=True) or {}
        test_type = payload.get('testType')
        email = payload.get('email') or 'test@example.com'
        name = payload.get('name') or ''

        if test_type == 'email':
            result = current_app.email_service.send_estimate_ready({
                'clientName': name or 'Test Client',
                'clientEmail': email,
                'projectDetails': {
                    'type': 'Test Project',
                    'squareFootage': 2500,
                    'cleaningType': 'Final Clean',
                    'totalPrice': 1250
                },
                'estimateUrl': f"{current_app.config['APP_URL']}/estimate"
            })
            return jsonify({'success': True, 'message': 'Test email sent successfully', 'result': result})

        if test_type == 'ghl':
            ghl = current_app.ghl_integration
            first_name, last_name = ghl.split_name(name or 'Test Client')
            result = ghl.create_contact({
                'firstName': first_name,
                'lastName': last_name,
                'email': email,
                'phone': '555-123-4567',
                'source': 'EstimAItor Test',
                'tags': ['Test Contact', 'Integration Test'],
                'customFields': {
                    'Test Field': 'Test Value',
                    'Integration': 'Resend + GHL'
                }
            })
            return jsonify({'success': True, 'message': 'Test contact created in GHL', 'result': result})

        return jsonify({'success': False, 'error': 'Invalid test type. Use "email" or "ghl"'})

    except Exception as e:
        logger.error(f"Integration test error: {e}", exc_info=True)
        return jsonify({'success': False, 'error': f"Test failed: {e}"}), 500


@email_bp.route('/api/test-integration', methods=['GET'])
def test_integration_usage():
    return jsonify({
        'message': 'Integration test endpoint',
        'usage': 'POST with { testType: "email"|"ghl", email: "test@example.com", name: "Test Name" }'
    })
