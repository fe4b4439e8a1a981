"""
Input Validation & Sanitization Utilities
Provides validation for estimator form data, document requests and integration payloads
"""
import math
import re
from typing import Dict, Any, List, Optional, Tuple
import logging

from services.models import PROJECT_TYPES, CLEANING_TYPES, PRESSURE_WASHING_TYPES

logger = logging.getLogger(__name__)

# Regex patterns
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
PHONE_PATTERN = re.compile(r'^\+?1?\d{9,15}$')

MAX_SQUARE_FOOTAGE = 10_000_000
MAX_CLEANERS = 100
MAX_DISTANCE_MILES = 5000
MAX_NIGHTS = 60
MAX_WINDOWS = 10000

EMAIL_TYPES = ('quote', 'contact', 'estimate', 'contract')
DOCUMENT_KINDS = ('quote', 'work-order', 'purchase-order', 'change-order')
DOCUMENT_LANGUAGES = ('en', 'es')


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> Tuple[bool, Optional[str]]:
    """
    Validate that all required fields are present in the data

    Args:
        data: Dictionary of input data
        required_fields: List of required field names

    Returns:
        Tuple of (is_valid, error_message)
    """
    missing_fields = [field for field in required_fields if field not in data or data[field] is None or data[field] == '']

    if missing_fields:
        return False, f"Missing required fields: {', '.join(missing_fields)}"

    return True, None


def validate_email(email: str) -> Tuple[bool, Optional[str]]:
    """
    Validate email format

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email or not isinstance(email, str):
        return False, "Email must be a non-empty string"

    if not EMAIL_PATTERN.match(email):
        return False, "Invalid email format"

    if len(email) > 254:  # RFC 5321
        return False, "Email address too long"

    return True, None


def validate_phone(phone: str) -> Tuple[bool, Optional[str]]:
    """
    Validate phone number format

    Args:
        phone: Phone number to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not phone or not isinstance(phone, str):
        return False, "Phone must be a non-empty string"

    # Remove common separators
    cleaned_phone = re.sub(r'[\s\-\(\)\.]', '', phone)

    if not PHONE_PATTERN.match(cleaned_phone):
        return False, "Invalid phone number format"

    return True, None


def validate_string_length(value: str, min_length: int = 0, max_length: int = 1000) -> Tuple[bool, Optional[str]]:
    """
    Validate string length is within acceptable range

    Args:
        value: String to validate
        min_length: Minimum allowed length
        max_length: Maximum allowed length

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(value, str):
        return False, "Value must be a string"

    if len(value) < min_length:
        return False, f"Value too short (minimum {min_length} characters)"

    if len(value) > max_length:
        return False, f"Value too long (maximum {max_length} characters)"

    return True, None


def parse_number(value: Any) -> Optional[float]:
    """Form inputs arrive as numbers or numeric strings; anything else, NaN and infinity are None"""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def validate_number_range(value: Any, min_value: Optional[float] = None, max_value: Optional[float] = None) -> Tuple[bool, Optional[str]]:
    """
    Validate number is within acceptable range

    Args:
        value: Number (or numeric string) to validate
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Tuple of (is_valid, error_message)
    """
    number = parse_number(value)
    if number is None:
        return False, "Value must be a number"

    if min_value is not None and number < min_value:
        return False, f"Value too small (minimum {min_value:g})"

    if max_value is not None and number > max_value:
        return False, f"Value too large (maximum {max_value:g})"

    return True, None


def _check_optional_number(data: Dict[str, Any], field: str, min_value: float, max_value: float) -> Tuple[bool, Optional[str]]:
    if data.get(field) in (None, ''):
        return True, None
    is_valid, error = validate_number_range(data[field], min_value, max_value)
    if not is_valid:
        return False, f"Invalid {field}: {error}"
    return True, None


def _is_checked(data: Dict[str, Any], field: str) -> bool:
    value = data.get(field)
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def validate_project_step(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Project type and size

    Args:
        data: Form data (camelCase keys)

    Returns:
        Tuple of (is_valid, error_message)
    """
    is_valid, error = validate_required_fields(data, ['projectType', 'squareFootage'])
    if not is_valid:
        return False, error

    if data['projectType'] not in PROJECT_TYPES:
        return False, f"Invalid projectType: {data['projectType']}"

    is_valid, error = validate_number_range(data['squareFootage'], 1, MAX_SQUARE_FOOTAGE)
    if not is_valid:
        return False, f"Invalid squareFootage: {error}"

    if data['projectType'] == 'assisted_living':
        is_valid, error = validate_number_range(data.get('numberOfBedBaths'), 1, MAX_WINDOWS)
        if not is_valid:
            return False, f"Invalid numberOfBedBaths: {error}"

    return True, None


def validate_cleaning_step(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Cleaning stage and urgency"""
    is_valid, error = validate_required_fields(data, ['cleaningType'])
    if not is_valid:
        return False, error

    if data['cleaningType'] not in CLEANING_TYPES:
        return False, f"Invalid cleaningType: {data['cleaningType']}"

    return _check_optional_number(data, 'urgencyLevel', 1, 10)


def validate_extras_step(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """VCT, pressure washing, windows and display cases"""
    is_valid, error = _check_optional_number(data, 'vctSquareFootage', 0, MAX_SQUARE_FOOTAGE)
    if not is_valid:
        return False, error

    if _is_checked(data, 'needsPressureWashing'):
        washing_type = data.get('pressureWashingType') or 'soft_wash'
        if washing_type not in PRESSURE_WASHING_TYPES:
            return False, f"Invalid pressureWashingType: {washing_type}"
        if washing_type != 'daily_rate':
            is_valid, error = validate_number_range(data.get('pressureWashingArea'), 1, MAX_SQUARE_FOOTAGE)
            if not is_valid:
                return False, f"Invalid pressureWashingArea: {error}"

    for field in ('numberOfWindows', 'numberOfLargeWindows', 'numberOfHighAccessWindows', 'numberOfDisplayCases'):
        is_valid, error = _check_optional_number(data, field, 0, MAX_WINDOWS)
        if not is_valid:
            return False, error

    if _is_checked(data, 'needsWindowCleaning'):
        total_windows = sum(
            parse_number(data.get(field)) or 0
            for field in ('numberOfWindows', 'numberOfLargeWindows', 'numberOfHighAccessWindows')
        )
        if total_windows <= 0:
            return False, "Window cleaning requires at least one window"

    return True, None


def validate_details_step(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Crew, travel and client details"""
    checks = [
        ('numberOfCleaners', 1, MAX_CLEANERS),
        ('distanceFromOffice', 0, MAX_DISTANCE_MILES),
        ('gasPrice', 0, 100),
    ]
    for field, min_value, max_value in checks:
        is_valid, error = _check_optional_number(data, field, min_value, max_value)
        if not is_valid:
            return False, error

    if _is_checked(data, 'stayingOvernight'):
        is_valid, error = validate_number_range(data.get('numberOfNights', 1), 1, MAX_NIGHTS)
        if not is_valid:
            return False, f"Invalid numberOfNights: {error}"

    for field in ('clientName', 'projectName', 'location'):
        if data.get(field):
            is_valid, error = validate_string_length(data[field], max_length=200)
            if not is_valid:
                return False, f"Invalid {field}: {error}"

    if data.get('clientEmail'):
        is_valid, error = validate_email(data['clientEmail'])
        if not is_valid:
            return False, f"Invalid clientEmail: {error}"

    if data.get('clientPhone'):
        is_valid, error = validate_phone(data['clientPhone'])
        if not is_valid:
            return False, f"Invalid clientPhone: {error}"

    return True, None


STEP_VALIDATORS = {
    'project': validate_project_step,
    'cleaning': validate_cleaning_step,
    'extras': validate_extras_step,
    'details': validate_details_step,
}


def validate_estimate_request(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate a complete estimator form submission

    Args:
        data: Request data dictionary

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(data, dict):
        return False, "Request body must be a JSON object"

    for validator in STEP_VALIDATORS.values():
        is_valid, error = validator(data)
        if not is_valid:
            return False, error

    return True, None


def validate_contact_form(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Website contact form forwarded to the bids inbox"""
    is_valid, error = validate_required_fields(data, ['name', 'email', 'message'])
    if not is_valid:
        return False, error

    is_valid, error = validate_email(data['email'])
    if not is_valid:
        return False, f"Invalid email: {error}"

    is_valid, error = validate_string_length(data['message'], min_length=1, max_length=5000)
    if not is_valid:
        return False, f"Invalid message: {error}"

    return True, None


def validate_email_request(email_type: str, data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate the payload of an /api/email request

    Args:
        email_type: quote, contact, estimate or contract
        data: Email data

    Returns:
        Tuple of (is_valid, error_message)
    """
    if email_type not in EMAIL_TYPES:
        return False, "Invalid email type"

    if not isinstance(data, dict):
        return False, "data must be an object"

    if email_type == 'contact':
        return validate_contact_form(data)

    required = {
        'quote': ['clientEmail', 'quoteNumber'],
        'estimate': ['clientEmail', 'projectDetails'],
        'contract': ['clientEmail'],
    }[email_type]
    is_valid, error = validate_required_fields(data, required)
    if not is_valid:
        return False, error

    is_valid, error = validate_email(data['clientEmail'])
    if not is_valid:
        return False, f"Invalid clientEmail: {error}"

    return True, None


def validate_change_order_request(data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """Change orders need a description and a numeric amount"""
    change_order = data.get('changeOrder')
    if not isinstance(change_order, dict):
        return False, "changeOrder must be an object"

    is_valid, error = validate_required_fields(change_order, ['description', 'amount'])
    if not is_valid:
        return False, error

    is_valid, error = validate_number_range(change_order['amount'], -MAX_SQUARE_FOOTAGE, MAX_SQUARE_FOOTAGE)
    if not is_valid:
        return False, f"Invalid amount: {error}"

    return True, None


def format_validation_error(field: str, message: str) -> Dict[str, Any]:
    """
    Format validation error for consistent API responses

    Args:
        field: Field name that failed validation
        message: Error message

    Returns:
        Error response dictionary
    """
    return {
        'success': False,
        'error': 'Validation Error',
        'field': field,
        'message': message
    }
