"""
Rule-based crew recommendations.

Collects every canned tip that applies to a project, shuffles them and keeps
the first few so repeat visits do not always show the same advice.
"""

import random
from typing import List, Optional

from services.models import ProjectDescription

DEFAULT_LIMIT = 5

PROJECT_TYPE_TIPS = {
    'restaurant': [
        'Bring specialized degreasers for kitchen areas',
        'Schedule extra time for hood cleaning and grease traps',
    ],
    'medical': [
        'Use hospital-grade disinfectants for all surfaces',
        'Pay special attention to waiting areas and examination rooms',
    ],
    'office': [
        'Focus on high-touch surfaces like door handles and light switches',
        'Consider after-hours cleaning to avoid disrupting business operations',
    ],
    'retail': [
        'Prioritize entrance areas and display surfaces',
        'Use glass cleaners for display cases and windows',
    ],
    'industrial': [
        'Bring heavy-duty cleaning equipment for concrete floors',
        'Consider pressure washing for heavily soiled areas',
    ],
    'educational': [
        'Sanitize desks, chairs, and common areas thoroughly',
        'Pay special attention to restrooms and cafeteria areas',
    ],
    'hotel': [
        'Bring specialized equipment for cleaning carpeted areas',
        'Pay special attention to bathrooms and high-touch surfaces',
        'Consider scheduling room-by-room to minimize disruption',
    ],
    'jewelry_store': [
        'Bring specialized glass and mirror cleaners for display cases',
        'Use microfiber cloths to avoid scratching delicate surfaces',
        'Pay special attention to security fixtures and lighting',
    ],
}

CLEANING_TYPE_TIPS = {
    'rough': [
        'Focus on debris removal and basic surface cleaning',
        'Bring heavy-duty garbage bags and dumpster access may be needed',
    ],
    'final': [
        'Bring a variety of cleaning solutions for different surfaces',
        'Plan for detailed cleaning of all visible surfaces',
    ],
    'rough_final': [
        'Prepare for a two-stage cleaning process with debris removal followed by detailed cleaning',
        'Bring equipment for both rough cleaning and detailed final touches',
        'Schedule proper inspection between the rough and final stages',
    ],
    'rough_final_touchup': [
        'Prepare for a comprehensive three-stage cleaning process',
        'Bring full range of equipment from heavy-duty to detail cleaning tools',
        'Allow extra time for final inspection and touchup work',
        'Consider splitting team members for different cleaning stages',
    ],
}

PRESSURE_WASHING_TIPS = [
    'Ensure water access is available at the pressure washing location',
    'Bring appropriate detergents for the surfaces being pressure washed',
    'Consider containment and proper disposal of wastewater',
    'Schedule pressure washing early in the project to allow drying time',
    'Ensure team members have proper PPE for pressure washing tasks',
]

WINDOW_CLEANING_TIPS = [
    'Bring professional-grade window cleaning solutions and squeegees',
    'Ensure proper equipment for high-access windows (ladders, lifts, extension poles)',
    'Schedule window cleaning on less windy days if possible',
    'Bring microfiber cloths and lint-free towels for streak-free results',
    'Consider safety harnesses and proper training for high-access window cleaning',
]
HIGH_ACCESS_WINDOW_TIP = 'Consider specialized high-access window cleaning equipment or subcontractors'
STOREFRONT_WINDOW_TIP = 'Pay special attention to display windows and entrance glass for retail appeal'

LARGE_SPACE_TIPS = [
    'Consider splitting the team to cover different sections simultaneously',
    'Bring multiple sets of equipment to increase efficiency',
]
SMALL_SPACE_TIP = 'A smaller team can handle this project efficiently'

VCT_TIPS = [
    'Bring floor strippers, wax, and buffing equipment',
    'Allow additional time for floor preparation and drying',
]

URGENT_TIPS = [
    'Consider adding additional cleaners to meet the tight deadline',
    'Prepare for potential overtime hours',
]

GENERAL_TIPS = [
    'Conduct a walkthrough before starting to identify any special needs',
    'Take before and after photos to document the quality of work',
]

LARGE_SPACE_SQFT = 50000
SMALL_SPACE_SQFT = 2000
HIGH_ACCESS_WINDOW_THRESHOLD = 10
URGENT_LEVEL = 8
MAX_HOURS_PER_CLEANER = 8


def collect_recommendations(description: ProjectDescription, estimated_hours: float) -> List[str]:
    """Every tip that applies to the project, in rule order"""
    tips = []
    tips.extend(PROJECT_TYPE_TIPS.get(description.project_type, []))
    tips.extend(CLEANING_TYPE_TIPS.get(description.cleaning_type, []))

    if description.needs_pressure_washing:
        tips.extend(PRESSURE_WASHING_TIPS)

    if description.needs_window_cleaning:
        tips.extend(WINDOW_CLEANING_TIPS)
        if description.number_of_high_access_windows > HIGH_ACCESS_WINDOW_THRESHOLD:
            tips.append(HIGH_ACCESS_WINDOW_TIP)
        if description.project_type in ('retail', 'jewelry_store'):
            tips.append(STOREFRONT_WINDOW_TIP)

    if description.square_footage > LARGE_SPACE_SQFT:
        tips.extend(LARGE_SPACE_TIPS)
    elif description.square_footage < SMALL_SPACE_SQFT:
        tips.append(SMALL_SPACE_TIP)

    if description.has_vct:
        tips.extend(VCT_TIPS)

    if description.urgency_level >= URGENT_LEVEL:
        tips.extend(URGENT_TIPS)

    if description.number_of_cleaners > 0:
        hours_per_cleaner = estimated_hours / description.number_of_cleaners
        if hours_per_cleaner > MAX_HOURS_PER_CLEANER:
            tips.append(
                f"Consider adding more cleaners - current workload is {hours_per_cleaner:.1f} hours per person"
            )

    tips.extend(GENERAL_TIPS)
    return tips


def shuffle(items: List[str], rng: Optional[random.Random] = None) -> List[str]:
    """Fisher-Yates shuffle into a new list"""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def generate_recommendations(description: ProjectDescription,
                             estimated_hours: float,
                             limit: int = DEFAULT_LIMIT,
                             rng: Optional[random.Random] = None) -> List[str]:
    """
    Shuffled selection of the applicable tips

    Args:
        description: Project being estimated
        estimated_hours: Crew hours from the estimator
        limit: Maximum number of tips returned
        rng: Random source, injectable for repeatable output

    Returns:
        At most `limit` distinct tips
    """
    return shuffle(collect_recommendations(description, estimated_hours), rng)[:limit]
