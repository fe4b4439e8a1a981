"""
GoHighLevel Routes Blueprint

Handles:
- /api/send-to-ghl: Push an estimate into the CRM
- /api/ghl-webhook: React to CRM events with follow-up emails
"""

from flask import Blueprint, request, jsonify, current_app
import logging

from security import require_ghl_signature

logger = logging.getLogger(__name__)

ghl_bp = Blueprint('ghl_bp', __name__)


@ghl_bp.route('/api/send-to-ghl', methods=['POST'])
def send_to_ghl():
    """Create contact, opportunity and follow-up task for an estimate"""
    try:
        payload = request.get_json(silent=True) or {}
        form_data = payload.get('formData')
        estimate_data = payload.get('estimateData')

        if not form_data or not estimate_data:
            return jsonify({'success': False, 'error': 'Missing formData or estimateData'}), 400

        result = current_app.ghl_integration.send_estimate_to_ghl(form_data, estimate_data)

        if not result['success']:
            return jsonify({'success': False, 'error': result.get('error')}), 500

        return jsonify({
            'success': True,
            'message': 'Estimate sent to GoHighLevel successfully',
            'contactId': result.get('contactId'),
            'opportunityId': result.get('opportunityId')
        })

    except Exception as e:
        logger.error(f"GHL integration error: {e}", exc_info=True)
        return jsonify({'success': False, 'error': f"Integration failed: {e}"}), 500


@ghl_bp.route('/api/send-to-ghl', methods=['GET'])
def send_to_ghl_usage():
    return jsonify({
        'message': 'GHL Direct Integration Endpoint',
        'usage': 'POST with { formData: {...}, estimateData: {...} }',
        'features': [
            'Creates contact in GHL',
            'Creates opportunity with estimate details',
            'Sets up follow-up task',
            'Tags contact with project type',
            'Stores custom fields for tracking'
        ]
    })


def _full_name(person):
    person = person or {}
    return ' '.join(part for part in (person.get('firstName'), person.get('lastName')) if part)


def handle_new_contact(contact):
    """Welcome a new CRM contact with an estimate-ready email"""
    if not contact.get('email'):
        logger.info("New GHL contact has no email, skipping welcome email")
        return None
    result = current_app.email_service.send_estimate_ready({
        'clientName': _full_name(contact),
        'clientEmail': contact['email'],
        'projectDetails': {
            'type': 'New Contact',
            'squareFootage': 0,
            'cleaningType': 'Welcome',
            'totalPrice': 0
        },
        'estimateUrl': f"{current_app.config['APP_URL']}/estimate"
    })
    logger.info(f"Welcome email result: {result}")
    return result


def handle_new_opportunity(opportunity):
    """Send a quote follow-up email to the opportunity's contact"""
    contact = opportunity.get('contact') or {}
    if not contact.get('email'):
        logger.info("GHL opportunity has no contact email, skipping quote email")
        return None
    result = current_app.email_service.send_quote({
        'clientName': _full_name(contact),
        'clientEmail': contact['email'],
        'projectName': opportunity.get('title') or 'Cleaning Project',
        'totalPrice': opportunity.get('value') or 0,
        'quoteNumber': opportunity.get('id', '')
    })
    logger.info(f"Quote email result: {result}")
    return result


def handle_appointment_scheduled(appointment):
    logger.info(f"Appointment scheduled: {appointment}")


WEBHOOK_HANDLERS = {
    'contact.created': handle_new_contact,
    'opportunity.created': handle_new_opportunity,
    'appointment.scheduled': handle_appointment_scheduled,
}


@ghl_bp.route('/api/ghl-webhook', methods=['POST'])
@require_ghl_signature
def ghl_webhook():
    """Dispatch a GHL webhook event by its type"""
    try:
        body = request.get_json(silent=True) or {}
        event_type = body.get('type')
        handler = WEBHOOK_HANDLERS.get(event_type)

        if handler is None:
            logger.info(f"Unhandled webhook type: {event_type}")
        else:
            handler(body.get('data') or {})

        return jsonify({'success': True})

    except Exception as e:
        logger.error(f"GHL webhook error: {e}", exc_info=True)
        return jsonify({'success': False, 'error': 'Webhook processing failed'}), 500
