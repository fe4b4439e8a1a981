"""
Document Routes Blueprint

Handles:
- /api/documents/quote: Client quote PDF
- /api/documents/work-order: Crew work order PDF (English or Spanish)
- /api/documents/purchase-order: Purchase order PDF
- /api/documents/change-order: Change order PDF
"""

import io
from datetime import datetime
from flask import Blueprint, request, jsonify, send_file, current_app
import logging

from app.api.estimate import run_estimate
from app.utils.helpers import resolve_client_id
from services.estimator import EstimateError
from services.form_modes import description_from_form
from services.models import EstimateResult
from services.pdf_documents import render_quote, render_work_order, render_purchase_order, render_change_order
from services.themes import is_known_theme
from validators import DOCUMENT_KINDS, DOCUMENT_LANGUAGES, validate_change_order_request

logger = logging.getLogger(__name__)

documents_bp = Blueprint('documents_bp', __name__)

OPTIONAL_OBJECT_FIELDS = ('companyInfo', 'clientInfo', 'quoteInfo', 'estimateData')


def _theme_for(data):
    """Explicit themeId, else the client's saved theme"""
    theme_id = data.get('themeId')
    if is_known_theme(theme_id):
        return theme_id
    client_id = resolve_client_id(request.headers, data)
    try:
        return current_app.form_state.get_theme(client_id)
    except ValueError:
        return None


def _pdf_response(pdf_bytes, filename):
    return send_file(
        io.BytesIO(pdf_bytes),
        mimetype='application/pdf',
        as_attachment=True,
        download_name=filename
    )


def _build_quote(data, company_info, theme_id):
    form_data = data.get('formData') or {}
    if data.get('estimateData'):
        description = description_from_form(form_data)
        estimate = EstimateResult.from_dict(data['estimateData'])
    else:
        description, estimate = run_estimate(form_data)

    quote_info = data.get('quoteInfo') or {}
    pdf_bytes = render_quote(description, estimate, company_info,
                             quote_info=quote_info, client_info=data.get('clientInfo'), theme_id=theme_id)
    number = quote_info.get('quoteNumber') or datetime.now().strftime('%Y%m%d_%H%M%S')
    return pdf_bytes, f"quote-{number}.pdf"


@documents_bp.route('/api/documents/<kind>', methods=['POST'])
def generate_document(kind):
    """Render one document kind from the posted estimator data"""
    if kind not in DOCUMENT_KINDS:
        return jsonify({'success': False, 'error': f"Unknown document type: {kind}"}), 404

    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'success': False, 'error': 'Request body must be a JSON object'}), 400

        for field in OPTIONAL_OBJECT_FIELDS:
            if data.get(field) is not None and not isinstance(data[field], dict):
                return jsonify({'success': False, 'error': f"{field} must be an object"}), 400

        company_info = {**current_app.config['COMPANY_INFO'], **(data.get('companyInfo') or {})}
        theme_id = _theme_for(data)
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S')

        if kind == 'change-order':
            is_valid, error = validate_change_order_request(data)
            if not is_valid:
                return jsonify({'success': False, 'error': error}), 400
            pdf_bytes = render_change_order(company_info, data.get('clientInfo') or {}, data['changeOrder'],
                                            theme_id=theme_id)
            return _pdf_response(pdf_bytes, f"change-order-{stamp}.pdf")

        if not isinstance(data.get('formData'), dict):
            return jsonify({'success': False, 'error': 'Missing formData'}), 400

        try:
            if kind == 'quote':
                pdf_bytes, filename = _build_quote(data, company_info, theme_id)
                return _pdf_response(pdf_bytes, filename)

            description = description_from_form(data['formData'])
        except (EstimateError, ValueError) as e:
            return jsonify({'success': False, 'error': str(e)}), 400

        quote_info = data.get('quoteInfo')
        if kind == 'work-order':
            language = data.get('language', 'en')
            if language not in DOCUMENT_LANGUAGES:
                return jsonify({'success': False, 'error': f"Unsupported language: {language}"}), 400
            pdf_bytes = render_work_order(description, company_info, quote_info=quote_info,
                                          language=language, theme_id=theme_id)
            suffix = '-es' if language == 'es' else ''
            return _pdf_response(pdf_bytes, f"work-order{suffix}-{stamp}.pdf")

        pdf_bytes = render_purchase_order(description, company_info, quote_info=quote_info, theme_id=theme_id)
        return _pdf_response(pdf_bytes, f"purchase-order-{stamp}.pdf")

    except Exception as e:
        logger.error(f"Error generating {kind} PDF: {e}", exc_info=True)
        return jsonify({'success': False, 'error': str(e)}), 500
