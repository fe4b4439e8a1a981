"""
GoHighLevel CRM Integration
Pushes estimator leads into GHL as contacts, opportunities and follow-up tasks
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

LEAD_SOURCE = 'EstimAItor Website'
FOLLOW_UP_HOURS = 24


class GHLIntegration:
    """Thin client for the LeadConnector (GoHighLevel) REST API."""

    def __init__(self, config: Dict[str, Any]):
        """
        Args:
            config: Application config mapping (GHL_API_KEY, GHL_LOCATION_ID,
                GHL_BASE_URL, GHL_API_VERSION, GHL_PIPELINE_ID, GHL_STAGE_ID,
                GHL_ASSIGNED_USER_ID, HTTP_TIMEOUT)
        """
        self.api_key = config.get('GHL_API_KEY') or ''
        self.location_id = config.get('GHL_LOCATION_ID') or ''
        self.base_url = (config.get('GHL_BASE_URL') or 'https://services.leadconnectorhq.com').rstrip('/')
        self.api_version = config.get('GHL_API_VERSION', '2021-07-28')
        self.pipeline_id = config.get('GHL_PIPELINE_ID', 'default-pipeline')
        self.stage_id = config.get('GHL_STAGE_ID', 'default-stage')
        self.assigned_user_id = config.get('GHL_ASSIGNED_USER_ID', 'default-user')
        self.timeout = config.get('HTTP_TIMEOUT', 30)

    def is_configured(self) -> bool:
        return bool(self.api_key and self.location_id)

    def _headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
            'Version': self.api_version
        }

    def _post(self, path: str, body: Dict[str, Any], failure_message: str, network_error: str = 'Network error'):
        """
        POST to the API with the location id added to the body

        Returns:
            Tuple of (response json or None, error message or None)
        """
        payload = dict(body)
        payload['locationId'] = self.location_id
        try:
            response = requests.post(f"{self.base_url}{path}", headers=self._headers(), json=payload,
                                     timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GHL request to {path} failed: {e}")
            return None, network_error

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if not response.ok:
            error = result.get('message') or failure_message
            logger.error(f"GHL {path} returned {response.status_code}: {error}")
            return None, error

        return result, None

    def create_contact(self, contact: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a contact

        Args:
            contact: firstName, lastName, email, phone, source, tags, customFields

        Returns:
            {'success': True, 'contactId': ...} or {'success': False, 'error': ...}
        """
        result, error = self._post('/contacts/', contact, 'Failed to create contact')
        if error:
            return {'success': False, 'error': error}
        contact_id = (result.get('contact') or {}).get('id')
        logger.info(f"Created GHL contact {contact_id}")
        return {'success': True, 'contactId': contact_id}

    def create_opportunity(self, opportunity: Dict[str, Any]) -> Dict[str, Any]:
        """Create an opportunity (title, value, contactId, pipelineId, stageId, customFields)"""
        result, error = self._post('/opportunities/', opportunity, 'Failed to create opportunity')
        if error:
            return {'success': False, 'error': error}
        opportunity_id = (result.get('opportunity') or {}).get('id')
        logger.info(f"Created GHL opportunity {opportunity_id}")
        return {'success': True, 'opportunityId': opportunity_id}

    def create_task(self, task: Dict[str, Any]) -> Dict[str, Any]:
        """Create a task (title, body, dueDate, contactId, assignedTo)"""
        result, error = self._post('/tasks/', task, 'Failed to create task')
        if error:
            return {'success': False, 'error': error}
        return {'success': True, 'taskId': (result.get('task') or {}).get('id')}

    def send_sms_notification(self, contact_id: str, message: str) -> Dict[str, Any]:
        body = {'contactId': contact_id, 'message': message, 'type': 'sms'}
        _, error = self._post('/conversations/messages', body, 'Failed to send SMS', network_error='SMS failed')
        if error:
            return {'success': False, 'error': error}
        return {'success': True}

    @staticmethod
    def split_name(full_name: Optional[str]) -> List[str]:
        """First word is the first name; the rest is the last name"""
        parts = (full_name or '').split()
        first = parts[0] if parts else 'Unknown'
        last = ' '.join(parts[1:]) or 'Client'
        return [first, last]

    def build_contact(self, form_data: Dict[str, Any], estimate_data: Dict[str, Any]) -> Dict[str, Any]:
        first_name, last_name = self.split_name(form_data.get('clientName'))
        project_type = form_data.get('projectType', 'other')
        custom_fields = {
            'Project Type': project_type,
            'Square Footage': form_data.get('squareFootage'),
            'Cleaning Type': form_data.get('cleaningType'),
            'Estimated Price': estimate_data.get('totalPrice'),
            'Estimated Hours': estimate_data.get('estimatedHours'),
            'Location': form_data.get('location') or 'Not specified',
            'Urgency Level': form_data.get('urgencyLevel') or 1,
        }
        if form_data.get('numberOfBedBaths'):
            custom_fields['Bed/Bath Units'] = form_data['numberOfBedBaths']

        return {
            'firstName': first_name,
            'lastName': last_name,
            'email': form_data.get('clientEmail') or 'no-email@example.com',
            'phone': form_data.get('clientPhone') or '',
            'source': LEAD_SOURCE,
            'tags': ['Cleaning Estimate', project_type],
            'customFields': custom_fields,
        }

    def build_opportunity(self, form_data: Dict[str, Any], estimate_data: Dict[str, Any], contact_id: str,
                          now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.utcnow()
        total = float(estimate_data.get('totalPrice') or 0)
        return {
            'title': f"{form_data.get('projectType', 'other')} Cleaning Project - ${total:,.2f}",
            'value': total,
            'contactId': contact_id,
            'pipelineId': self.pipeline_id,
            'stageId': self.stage_id,
            'customFields': {
                'Project Name': form_data.get('projectName') or 'Cleaning Project',
                'Quote Number': f"EST-{int(now.timestamp() * 1000)}",
                'Needs Pressure Washing': bool(form_data.get('needsPressureWashing')),
                'Needs Window Cleaning': bool(form_data.get('needsWindowCleaning')),
                'Has VCT': bool(form_data.get('hasVCT')),
                'VCT Square Footage': form_data.get('vctSquareFootage') or 0,
                'Distance from Office': form_data.get('distanceFromOffice') or 0,
                'Number of Cleaners': form_data.get('numberOfCleaners') or 2,
            },
        }

    def build_follow_up_task(self, form_data: Dict[str, Any], estimate_data: Dict[str, Any], contact_id: str,
                             now: Optional[datetime] = None) -> Dict[str, Any]:
        now = now or datetime.utcnow()
        total = float(estimate_data.get('totalPrice') or 0)
        project_type = form_data.get('projectType', 'other')
        body = (
            f"Client: {form_data.get('clientName', '')}\n"
            f"Project: {project_type}\n"
            f"Estimated Price: ${total:,.2f}\n"
            f"Estimated Hours: {estimate_data.get('estimatedHours')}\n\n"
            "Next Steps:\n"
            "1. Call client within 24 hours\n"
            "2. Schedule site visit if needed\n"
            "3. Send detailed proposal"
        )
        return {
            'title': f"Follow up on {project_type} estimate - ${total:,.2f}",
            'body': body,
            'dueDate': (now + timedelta(hours=FOLLOW_UP_HOURS)).isoformat() + 'Z',
            'contactId': contact_id,
            'assignedTo': self.assigned_user_id,
        }

    def send_estimate_to_ghl(self, form_data: Dict[str, Any], estimate_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Push an estimate into the CRM: contact, then opportunity, then follow-up task

        Args:
            form_data: Estimator form values (camelCase)
            estimate_data: Calculated estimate (camelCase)

        Returns:
            {'success', 'contactId', 'opportunityId', 'error'}; a failed
            opportunity still reports the created contact id
        """
        contact_result = self.create_contact(self.build_contact(form_data, estimate_data))
        if not contact_result['success']:
            return {'success': False, 'error': contact_result['error']}

        contact_id = contact_result['contactId']
        opportunity_result = self.create_opportunity(
            self.build_opportunity(form_data, estimate_data, contact_id))
        if not opportunity_result['success']:
            return {'success': False, 'error': opportunity_result['error'], 'contactId': contact_id}

        task_result = self.create_task(self.build_follow_up_task(form_data, estimate_data, contact_id))
        if not task_result['success']:
            # The lead is already in the CRM; a missing task is not a failure
            logger.warning(f"Follow-up task not created for contact {contact_id}: {task_result['error']}")

        logger.info(f"✅ Estimate sent to GHL (contact {contact_id}, opportunity {opportunity_result['opportunityId']})")
        return {
            'success': True,
            'contactId': contact_id,
            'opportunityId': opportunity_result['opportunityId'],
        }
