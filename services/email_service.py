"""
Email Service - transactional email through the Resend REST API.

This service handles:
- Sending quotes to clients (optionally with the quote PDF attached)
- Forwarding website contact form submissions to the bids inbox
- Estimate-ready and contract notifications

Every send returns a result dict; failures are logged and reported, never raised.
"""

import base64
import logging
from html import escape
from typing import Any, Dict, List, Optional, Union

import requests

logger = logging.getLogger(__name__)

EMAIL_TEMPLATES = {
    'QUOTE_SENT': 'quote-sent',
    'CONTACT_FORM': 'contact-form',
    'ESTIMATE_READY': 'estimate-ready',
    'CONTRACT': 'contract',
}

BASE_STYLE = """
          body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
          .container { max-width: 600px; margin: 0 auto; padding: 20px; }
          .content { background: #f8fafc; padding: 30px; border-radius: 0 0 8px 8px; }
          .details { background: white; padding: 20px; border-radius: 8px; margin: 20px 0; }
          .footer { text-align: center; margin-top: 30px; color: #6b7280; font-size: 14px; }
"""


def _money(amount: Any) -> str:
    try:
        return f"${float(amount or 0):,.2f}"
    except (TypeError, ValueError):
        return '$0.00'


def _e(value: Any) -> str:
    return escape(str(value if value is not None else ''))


class EmailService:
    """Resend client for the estimator's outgoing mail."""

    def __init__(self, config: Dict[str, Any]):
        """
        Args:
            config: Application config mapping (RESEND_API_KEY, RESEND_API_URL,
                EMAIL_FROM, BIDS_EMAIL, COMPANY_INFO, HTTP_TIMEOUT)
        """
        self.api_key = config.get('RESEND_API_KEY')
        self.api_url = config.get('RESEND_API_URL', 'https://api.resend.com').rstrip('/')
        self.from_email = config.get('EMAIL_FROM', 'EstimAItor <noreply@bigbropros.com>')
        self.bids_email = config.get('BIDS_EMAIL', 'bids@bigbropros.com')
        self.company_info = config.get('COMPANY_INFO') or {}
        self.timeout = config.get('HTTP_TIMEOUT', 30)

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _send(self, to: List[str], subject: str, html: str,
              attachments: Optional[List[Dict[str, str]]] = None) -> Dict[str, Any]:
        if not self.api_key:
            logger.warning("Resend API key not configured, email not sent")
            return {'success': False, 'error': 'Email service not configured'}

        payload = {
            'from': self.from_email,
            'to': to,
            'subject': subject,
            'html': html,
        }
        if attachments:
            payload['attachments'] = attachments

        headers = {
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json'
        }

        try:
            response = requests.post(f"{self.api_url}/emails", headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Email send error: {e}")
            return {'success': False, 'error': 'Failed to send email'}

        body = self._response_json(response)
        if response.status_code not in [200, 201, 202]:
            error = body.get('message') or response.text
            logger.error(f"Resend error ({response.status_code}): {error}")
            return {'success': False, 'error': error or f'HTTP {response.status_code}'}

        message_id = body.get('id')
        logger.info(f"📧 Sent '{subject}' to {', '.join(to)} ({message_id})")
        return {'success': True, 'messageId': message_id}

    @staticmethod
    def _response_json(response) -> Dict[str, Any]:
        """Decoded JSON object body, or an empty dict when the body is not one"""
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    @staticmethod
    def _attachment(filename: str, source: Union[str, bytes, None]) -> Optional[Dict[str, str]]:
        """A URL is passed through as a path; raw bytes are base64 encoded"""
        if not source:
            return None
        if isinstance(source, bytes):
            return {'filename': filename, 'content': base64.b64encode(source).decode('ascii')}
        return {'filename': filename, 'path': source}

    def send_quote(self, data: Dict[str, Any], pdf: Union[str, bytes, None] = None) -> Dict[str, Any]:
        """
        Send a quote to the client

        Args:
            data: clientName, clientEmail, projectName, totalPrice, quoteNumber, optional pdfUrl
            pdf: Rendered quote bytes; takes precedence over pdfUrl

        Returns:
            {'success': True, 'messageId': ...} or {'success': False, 'error': ...}
        """
        quote_number = data.get('quoteNumber', '')
        attachment = self._attachment(f"quote-{quote_number}.pdf", pdf or data.get('pdfUrl'))
        return self._send(
            [data['clientEmail']],
            f"Your Cleaning Quote - {quote_number}",
            self.generate_quote_email_html(data),
            [attachment] if attachment else None,
        )

    def send_contact_form_notification(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Forward a contact form submission to the bids inbox"""
        return self._send(
            [self.bids_email],
            f"New Contact Form Submission - {data.get('projectType', 'General')}",
            self.generate_contact_form_html(data),
        )

    def send_estimate_ready(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Tell the client their estimate is ready to view"""
        details = data.get('projectDetails') or {}
        return self._send(
            [data['clientEmail']],
            f"Your Cleaning Estimate is Ready - {details.get('type', '')}",
            self.generate_estimate_ready_html(data),
        )

    def send_contract(self, data: Dict[str, Any], pdf: Union[str, bytes, None] = None) -> Dict[str, Any]:
        """Send the services contract, optionally attached"""
        project_name = data.get('projectName') or 'Cleaning Project'
        attachment = self._attachment(
            f"contract-{project_name.replace(' ', '-').lower()}.pdf", pdf or data.get('pdfUrl'))
        return self._send(
            [data['clientEmail']],
            f"Your Cleaning Services Contract - {project_name}",
            self.generate_contract_html(data),
            [attachment] if attachment else None,
        )

    def _footer_html(self) -> str:
        name = _e(self.company_info.get('name', 'Big Brother Property Solutions'))
        phone = _e(self.company_info.get('phone', ''))
        return (
            f'<div class="footer"><p>{name} | Professional Cleaning Services<br>'
            f'Phone: {phone} | Email: {_e(self.bids_email)}</p></div>'
        )

    def _page(self, title: str, header_color: str, header_html: str, body_html: str) -> str:
        return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_e(title)}</title>
  <style>{BASE_STYLE}
          .header {{ background: {header_color}; color: white; padding: 20px; text-align: center; border-radius: 8px 8px 0 0; }}
          .button {{ display: inline-block; background: {header_color}; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px; margin: 20px 0; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">{header_html}</div>
    <div class="content">{body_html}</div>
    {self._footer_html()}
  </div>
</body>
</html>"""

    def generate_quote_email_html(self, data: Dict[str, Any]) -> str:
        phone = _e(self.company_info.get('phone', ''))
        header = f"<h1>Your Cleaning Quote is Ready!</h1><p>Quote #{_e(data.get('quoteNumber'))}</p>"
        body = f"""
      <p>Dear {_e(data.get('clientName'))},</p>
      <p>Thank you for your interest in our cleaning services. We've prepared a detailed quote for your project: <strong>{_e(data.get('projectName'))}</strong></p>
      <div class="details">
        <h3>Quote Summary</h3>
        <p><strong>Project:</strong> {_e(data.get('projectName'))}</p>
        <p><strong>Total Investment:</strong> <span style="font-size: 24px; font-weight: bold; color: #059669;">{_money(data.get('totalPrice'))}</span></p>
        <p><strong>Quote Number:</strong> {_e(data.get('quoteNumber'))}</p>
      </div>
      <p>This quote includes all labor, materials, and equipment needed for your project.</p>
      <p>To proceed with this project, please reply to this email or call us at {phone}.</p>
      <div style="text-align: center;"><a href="mailto:{_e(self.bids_email)}" class="button">Reply to Quote</a></div>
      <p>Best regards,<br>The Big Bro Pros Team</p>"""
        return self._page('Your Cleaning Quote', '#3b82f6', header, body)

    def generate_contact_form_html(self, data: Dict[str, Any]) -> str:
        fields = [('Name', 'name'), ('Email', 'email'), ('Phone', 'phone'),
                  ('Project Type', 'projectType'), ('Message', 'message')]
        rows = ''.join(
            f'<p><strong>{label}:</strong><br><span class="details">{_e(data.get(key))}</span></p>'
            for label, key in fields
        )
        header = f"<h1>New Contact Form Submission</h1><p>Project Type: {_e(data.get('projectType'))}</p>"
        body = rows + (
            '<div style="margin-top: 30px; padding: 20px; background: #dbeafe; border-radius: 8px;">'
            '<p><strong>Action Required:</strong> Please respond to this inquiry within 24 hours.</p>'
            f"<p><strong>Reply to:</strong> {_e(data.get('email'))}</p></div>"
        )
        return self._page('New Contact Form Submission', '#dc2626', header, body)

    def generate_estimate_ready_html(self, data: Dict[str, Any]) -> str:
        details = data.get('projectDetails') or {}
        try:
            square_footage = f"{float(details.get('squareFootage') or 0):,.0f}"
        except (TypeError, ValueError):
            square_footage = '0'
        header = f"<h1>Your Estimate is Ready!</h1><p>{_e(details.get('type'))} Cleaning Project</p>"
        body = f"""
      <p>Dear {_e(data.get('clientName'))},</p>
      <p>Your personalized cleaning estimate has been prepared and is ready for review.</p>
      <div class="details">
        <h3>Project Details</h3>
        <p><strong>Project Type:</strong> {_e(details.get('type'))}</p>
        <p><strong>Square Footage:</strong> {square_footage} sq ft</p>
        <p><strong>Cleaning Type:</strong> {_e(details.get('cleaningType'))}</p>
        <p><strong>Estimated Total:</strong> {_money(details.get('totalPrice'))}</p>
      </div>
      <div style="text-align: center;"><a href="{_e(data.get('estimateUrl', ''))}" class="button">View My Estimate</a></div>
      <p>Best regards,<br>The Big Bro Pros Team</p>"""
        return self._page('Your Estimate is Ready', '#059669', header, body)

    def generate_contract_html(self, data: Dict[str, Any]) -> str:
        header = f"<h1>Your Services Contract</h1><p>{_e(data.get('projectName') or 'Cleaning Project')}</p>"
        link = ''
        if data.get('contractUrl'):
            link = f'<div style="text-align: center;"><a href="{_e(data["contractUrl"])}" class="button">Review Contract</a></div>'
        body = f"""
      <p>Dear {_e(data.get('clientName'))},</p>
      <p>Please find the cleaning services contract for <strong>{_e(data.get('projectName') or 'your project')}</strong>.</p>
      <div class="details">
        <p><strong>Contract Total:</strong> {_money(data.get('totalPrice'))}</p>
        <p><strong>Start Date:</strong> {_e(data.get('startDate') or 'To be scheduled')}</p>
      </div>
      {link}
      <p>Sign and return the contract to confirm your booking.</p>
      <p>Best regards,<br>The Big Bro Pros Team</p>"""
        return self._page('Your Services Contract', '#1e40af', header, body)
