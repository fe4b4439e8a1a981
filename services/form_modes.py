"""
Estimator Form Modes
Simple (client reference), advanced (professional) and step-by-step wizard
flows that all end in a ProjectDescription for the pricing calculator.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from services.models import ProjectDescription
from services.pricing import get_recommended_cleaners
from validators import STEP_VALIDATORS, parse_number

logger = logging.getLogger(__name__)

FORM_MODES = {
    'simple': {
        'title': 'Client Reference Calculator',
        'description': 'Quick estimate for client reference - simplified interface',
    },
    'advanced': {
        'title': 'Professional Estimator',
        'description': 'Full-featured calculator for professional use - all options available',
    },
    'wizard': {
        'title': 'Step-by-Step Guide',
        'description': 'Guided experience through each step of the estimation process',
    },
}

DEFAULT_FORM_MODE = 'simple'

# Distance from the High Point office and local gas price per state
LOCATION_CONFIGS = {
    'NC': {'distance': 15, 'gasPrice': 3.50, 'description': 'North Carolina (Home Base - High Point)'},
    'VA': {'distance': 85, 'gasPrice': 3.45, 'description': 'Virginia'},
    'SC': {'distance': 45, 'gasPrice': 3.40, 'description': 'South Carolina'},
    'GA': {'distance': 125, 'gasPrice': 3.35, 'description': 'Georgia'},
    'TN': {'distance': 95, 'gasPrice': 3.25, 'description': 'Tennessee'},
    'MD': {'distance': 145, 'gasPrice': 3.55, 'description': 'Maryland'},
    'DC': {'distance': 155, 'gasPrice': 3.60, 'description': 'Washington DC'},
    'WV': {'distance': 165, 'gasPrice': 3.30, 'description': 'West Virginia'},
    'KY': {'distance': 185, 'gasPrice': 3.20, 'description': 'Kentucky'},
    'FL': {'distance': 285, 'gasPrice': 3.45, 'description': 'Florida'},
    'OTHER': {'distance': 100, 'gasPrice': 3.50, 'description': 'Other Location'},
}

SIMPLE_MODE_URGENCY = 3

WIZARD_STEPS = [
    {'id': 'project', 'title': 'Project Details'},
    {'id': 'cleaning', 'title': 'Cleaning Type'},
    {'id': 'extras', 'title': 'Additional Services'},
    {'id': 'details', 'title': 'Project Details'},
    {'id': 'review', 'title': 'Review & Calculate'},
]
WIZARD_STEP_IDS = [step['id'] for step in WIZARD_STEPS]


def get_location_config(state: Optional[str]) -> Dict[str, Any]:
    """Location defaults for a state code; unknown states use OTHER"""
    return LOCATION_CONFIGS.get((state or '').upper(), LOCATION_CONFIGS['OTHER'])


def expand_simple_form(simple_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Turn the simple-mode fields into a complete estimator form

    Args:
        simple_data: projectType, cleaningType, squareFootage, state and
            optional clientName / projectName

    Returns:
        Full camelCase form data with location defaults, markup on and no add-ons
    """
    location = get_location_config(simple_data.get('state'))
    square_footage = parse_number(simple_data.get('squareFootage')) or 0

    return {
        'projectType': simple_data.get('projectType', 'office'),
        'cleaningType': simple_data.get('cleaningType', 'final'),
        'squareFootage': square_footage,
        'clientName': simple_data.get('clientName', ''),
        'projectName': simple_data.get('projectName', ''),
        'distanceFromOffice': location['distance'],
        'gasPrice': location['gasPrice'],
        'hasVCT': False,
        'vctSquareFootage': 0,
        'applyMarkup': True,
        'numberOfCleaners': get_recommended_cleaners(square_footage),
        'urgencyLevel': SIMPLE_MODE_URGENCY,
        'stayingOvernight': False,
        'numberOfNights': 1,
        'needsPressureWashing': False,
        'pressureWashingArea': 0,
        'pressureWashingType': 'soft_wash',
        'needsWindowCleaning': False,
        'numberOfWindows': 0,
        'numberOfLargeWindows': 0,
        'numberOfHighAccessWindows': 0,
        'numberOfDisplayCases': 0,
    }


def description_from_form(form_data: Dict[str, Any]) -> ProjectDescription:
    """
    Build a ProjectDescription from posted form data

    The cleaner count is recommended from the square footage when the form
    leaves it empty.
    """
    description = ProjectDescription.from_dict(form_data)
    if parse_number(form_data.get('numberOfCleaners')) is None:
        recommended = get_recommended_cleaners(description.square_footage)
        logger.debug(f"No cleaner count supplied, recommending {recommended}")
        description = description.with_changes(number_of_cleaners=recommended)
    return description


def validate_step(step_id: str, form_data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Validate the fields owned by one wizard step

    The review step re-checks every earlier step.
    """
    if step_id not in WIZARD_STEP_IDS:
        return False, f"Unknown wizard step: {step_id}"

    if step_id == 'review':
        for validator in STEP_VALIDATORS.values():
            is_valid, error = validator(form_data)
            if not is_valid:
                return False, error
        return True, None

    return STEP_VALIDATORS[step_id](form_data)


def next_step(step_id: str, form_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Advance the wizard from step_id

    Returns:
        Dict with the resulting step, whether it advanced and any error.
        An invalid step stays where it is; the review step is the last one.
    """
    is_valid, error = validate_step(step_id, form_data)
    if not is_valid:
        current = step_id if step_id in WIZARD_STEP_IDS else WIZARD_STEP_IDS[0]
        return {'step': current, 'advanced': False, 'error': error}

    index = WIZARD_STEP_IDS.index(step_id)
    if index == len(WIZARD_STEP_IDS) - 1:
        return {'step': step_id, 'advanced': False, 'complete': True, 'error': None}

    return {'step': WIZARD_STEP_IDS[index + 1], 'advanced': True, 'error': None}


def previous_step(step_id: str) -> str:
    """The step before step_id; the first step stays put"""
    if step_id not in WIZARD_STEP_IDS:
        return WIZARD_STEP_IDS[0]
    return WIZARD_STEP_IDS[max(WIZARD_STEP_IDS.index(step_id) - 1, 0)]


def wizard_progress(step_id: str) -> Dict[str, Any]:
    """Step position for progress display"""
    index = WIZARD_STEP_IDS.index(step_id) if step_id in WIZARD_STEP_IDS else 0
    return {
        'step': WIZARD_STEP_IDS[index],
        'index': index,
        'total': len(WIZARD_STEPS),
        'percent': round((index + 1) / len(WIZARD_STEPS) * 100),
    }


def list_modes() -> List[Dict[str, str]]:
    return [{'id': mode_id, **info} for mode_id, info in FORM_MODES.items()]
