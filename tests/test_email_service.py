"""
Tests for the Resend email service
"""
import base64
import pytest
import requests
from unittest.mock import patch
from config import TestingConfig
from services.email_service import EmailService


def make_config(**overrides):
    config = {
        'RESEND_API_KEY': TestingConfig.RESEND_API_KEY,
        'RESEND_API_URL': 'https://api.resend.com',
        'EMAIL_FROM': 'EstimAItor <noreply@example.com>',
        'BIDS_EMAIL': 'bids@example.com',
        'COMPANY_INFO': TestingConfig.COMPANY_INFO,
        'HTTP_TIMEOUT': 5,
    }
    config.update(overrides)
    return config


@pytest.fixture
def email_service():
    return EmailService(make_config())


QUOTE_DATA = {
    'clientName': 'Jane Smith',
    'clientEmail': 'jane@example.com',
    'projectName': 'Suite 200 Buildout',
    'totalPrice': 1262.6,
    'quoteNumber': 'Q-2025-1234',
}


@pytest.mark.unit
class TestSend:
    """Tests for the Resend request and response handling"""

    @patch('services.email_service.requests.post')
    def test_send_quote_posts_to_resend(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, {'id': 'msg_123'})

        result = email_service.send_quote(QUOTE_DATA)

        assert result == {'success': True, 'messageId': 'msg_123'}
        args, kwargs = mock_post.call_args
        assert args[0] == 'https://api.resend.com/emails'
        assert kwargs['headers']['Authorization'] == 'Bearer test-resend-key'
        assert kwargs['timeout'] == 5
        payload = kwargs['json']
        assert payload['to'] == ['jane@example.com']
        assert payload['subject'] == 'Your Cleaning Quote - Q-2025-1234'
        assert '$1,262.60' in payload['html']
        assert 'attachments' not in payload

    @patch('services.email_service.requests.post')
    def test_pdf_bytes_are_attached(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, {'id': 'msg_1'})

        email_service.send_quote(QUOTE_DATA, pdf=b'%PDF-1.4 test')

        attachment = mock_post.call_args.kwargs['json']['attachments'][0]
        assert attachment['filename'] == 'quote-Q-2025-1234.pdf'
        assert base64.b64decode(attachment['content']) == b'%PDF-1.4 test'

    @patch('services.email_service.requests.post')
    def test_pdf_url_is_attached_as_path(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, {'id': 'msg_1'})

        email_service.send_quote({**QUOTE_DATA, 'pdfUrl': 'https://files.example.com/q.pdf'})

        attachment = mock_post.call_args.kwargs['json']['attachments'][0]
        assert attachment == {'filename': 'quote-Q-2025-1234.pdf', 'path': 'https://files.example.com/q.pdf'}

    @patch('services.email_service.requests.post')
    def test_api_error_is_reported(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(422, {'message': 'Invalid `to` field'})

        result = email_service.send_quote(QUOTE_DATA)

        assert result == {'success': False, 'error': 'Invalid `to` field'}

    @patch('services.email_service.requests.post')
    def test_non_json_success_body(self, mock_post, email_service, mock_response):
        response = mock_response(200, text='OK')
        response.json.side_effect = ValueError('not json')
        mock_post.return_value = response

        result = email_service.send_quote(QUOTE_DATA)

        assert result == {'success': True, 'messageId': None}

    @patch('services.email_service.requests.post')
    def test_non_json_error_body_uses_text(self, mock_post, email_service, mock_response):
        response = mock_response(502, text='Bad Gateway')
        response.json.side_effect = ValueError('not json')
        mock_post.return_value = response

        result = email_service.send_quote(QUOTE_DATA)

        assert result == {'success': False, 'error': 'Bad Gateway'}

    @patch('services.email_service.requests.post')
    def test_json_list_body(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, ['msg_1'])

        result = email_service.send_quote(QUOTE_DATA)

        assert result == {'success': True, 'messageId': None}

    @patch('services.email_service.requests.post')
    def test_network_error_is_reported(self, mock_post, email_service):
        mock_post.side_effect = requests.ConnectionError('down')

        result = email_service.send_quote(QUOTE_DATA)

        assert result == {'success': False, 'error': 'Failed to send email'}

    @patch('services.email_service.requests.post')
    def test_not_configured(self, mock_post):
        service = EmailService(make_config(RESEND_API_KEY=None))

        result = service.send_quote(QUOTE_DATA)

        assert result == {'success': False, 'error': 'Email service not configured'}
        assert service.is_configured() is False
        mock_post.assert_not_called()


@pytest.mark.unit
class TestMessages:
    """Tests for recipients, subjects and HTML bodies"""

    @patch('services.email_service.requests.post')
    def test_contact_form_goes_to_bids_inbox(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, {'id': 'msg_2'})

        email_service.send_contact_form_notification({
            'name': 'Sam', 'email': 'sam@example.com', 'projectType': 'restaurant', 'message': 'Hi',
        })

        payload = mock_post.call_args.kwargs['json']
        assert payload['to'] == ['bids@example.com']
        assert payload['subject'] == 'New Contact Form Submission - restaurant'

    @patch('services.email_service.requests.post')
    def test_estimate_ready_subject(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, {'id': 'msg_3'})

        email_service.send_estimate_ready({
            'clientEmail': 'jane@example.com',
            'projectDetails': {'type': 'Office Space', 'squareFootage': 5000, 'totalPrice': 1262.6},
            'estimateUrl': 'http://localhost:5000/estimate',
        })

        payload = mock_post.call_args.kwargs['json']
        assert payload['subject'] == 'Your Cleaning Estimate is Ready - Office Space'
        assert '5,000 sq ft' in payload['html']

    @patch('services.email_service.requests.post')
    def test_contract_subject(self, mock_post, email_service, mock_response):
        mock_post.return_value = mock_response(200, {'id': 'msg_4'})

        email_service.send_contract({'clientEmail': 'jane@example.com', 'projectName': 'Suite 200'})

        assert mock_post.call_args.kwargs['json']['subject'] == 'Your Cleaning Services Contract - Suite 200'

    def test_html_escapes_client_text(self, email_service):
        html = email_service.generate_contact_form_html({'name': '<script>alert(1)</script>'})
        assert '<script>' not in html
        assert '&lt;script&gt;' in html
