"""
Estimate Calculator

Maps a ProjectDescription to an EstimateResult:
- base price from square footage and the project / cleaning multipliers
- add-on services (VCT, travel, overnight, pressure washing, windows, display cases)
- urgency multiplier, optional markup, sales tax
- labour hours with economies of scale for large spaces

Pure and deterministic: the same description always prices the same.
"""

import math
import logging
from typing import Dict

from services import pricing
from services.models import ProjectDescription, EstimateResult

logger = logging.getLogger(__name__)

HOURS_PER_WORKDAY = 8

# Extra time some spaces take compared to an office
PROJECT_TIME_MODIFIERS: Dict[str, float] = {
    'restaurant': 1.5,
    'medical': 1.3,
    'retail': 0.9,
    'industrial': 1.2,
    'educational': 1.1,
    'hotel': 1.6,
    'jewelry_store': 1.2,
}

CLEANING_TIME_MULTIPLIERS: Dict[str, float] = {
    'rough': 0.7,
    'final': 1.0,
    'rough_final': 1.5,
    'rough_final_touchup': 1.8,
}

# (square feet in tier, rate factor); the last tier is unbounded
LARGE_SPACE_TIERS = [
    (15000, 0.85),
    (25000, 0.75),
    (None, 0.65),
]
STANDARD_SQFT_PER_HOUR = 1000
STANDARD_TIER_SQFT = 10000

JEWELRY_FIRST_TIER_SQFT = 1000
JEWELRY_FIRST_TIER_RATE = 750
JEWELRY_SECOND_TIER_SQFT = 5000
JEWELRY_SECOND_TIER_RATE = 1000
JEWELRY_REMAINDER_RATE = 1200

PRESSURE_WASHING_SQFT_PER_HOUR = 500
WINDOWS_PER_HOUR = 5
MAX_STANDARD_WINDOWS = 100
MAX_LARGE_WINDOWS = 50
MAX_HIGH_ACCESS_WINDOWS = 25
MAX_WINDOW_HOURS = 40
DISPLAY_CASE_HOURS = 0.6


class EstimateError(ValueError):
    """Raised when a project description cannot be priced"""
    def __init__(self, message: str, field: str = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


def round_up_quarter_hour(hours: float) -> float:
    return math.ceil(hours * 4) / 4


def _jewelry_store_hours(square_footage: float) -> float:
    if square_footage <= JEWELRY_FIRST_TIER_SQFT:
        return square_footage / JEWELRY_FIRST_TIER_RATE

    hours = JEWELRY_FIRST_TIER_SQFT / JEWELRY_FIRST_TIER_RATE
    if square_footage <= JEWELRY_SECOND_TIER_SQFT:
        return hours + (square_footage - JEWELRY_FIRST_TIER_SQFT) / JEWELRY_SECOND_TIER_RATE

    hours += (JEWELRY_SECOND_TIER_SQFT - JEWELRY_FIRST_TIER_SQFT) / JEWELRY_SECOND_TIER_RATE
    return hours + (square_footage - JEWELRY_SECOND_TIER_SQFT) / JEWELRY_REMAINDER_RATE


def _standard_hours(square_footage: float) -> float:
    if square_footage <= STANDARD_TIER_SQFT:
        return square_footage / STANDARD_SQFT_PER_HOUR

    hours = STANDARD_TIER_SQFT / STANDARD_SQFT_PER_HOUR
    remaining = square_footage - STANDARD_TIER_SQFT
    for tier_size, factor in LARGE_SPACE_TIERS:
        if remaining <= 0:
            break
        tier_sqft = remaining if tier_size is None else min(remaining, tier_size)
        hours += (tier_sqft / STANDARD_SQFT_PER_HOUR) * factor
        remaining -= tier_sqft
    return hours


def calculate_cleaning_hours(square_footage: float, project_type: str, cleaning_type: str) -> float:
    """
    Labour hours for the cleaning itself, rounded up to the quarter hour

    Args:
        square_footage: Area to clean
        project_type: Key of PROJECT_TYPES
        cleaning_type: Key of CLEANING_TYPES

    Returns:
        Crew hours
    """
    cleaning_modifier = CLEANING_TIME_MULTIPLIERS.get(cleaning_type, 1.0)

    if project_type == 'jewelry_store':
        # Jewelry tiers already include the slower pace, so only the cleaning modifier applies
        hours = _jewelry_store_hours(square_footage) * cleaning_modifier
    else:
        hours = _standard_hours(square_footage)
        hours *= PROJECT_TIME_MODIFIERS.get(project_type, 1.0)
        hours *= cleaning_modifier

    return round_up_quarter_hour(hours)


def calculate_window_hours(standard: int, large: int, high_access: int) -> float:
    weighted = (
        min(standard, MAX_STANDARD_WINDOWS)
        + min(large, MAX_LARGE_WINDOWS) * 1.5
        + min(high_access, MAX_HIGH_ACCESS_WINDOWS) * 2
    )
    return min(weighted / WINDOWS_PER_HOUR, MAX_WINDOW_HOURS)


def calculate_estimated_hours(description: ProjectDescription) -> float:
    """Cleaning hours plus pressure washing, window and display case time"""
    hours = calculate_cleaning_hours(
        description.square_footage,
        description.project_type,
        description.cleaning_type,
    )

    if description.needs_pressure_washing and description.pressure_washing_area > 0:
        hours += description.pressure_washing_area / PRESSURE_WASHING_SQFT_PER_HOUR

    if description.needs_window_cleaning:
        hours += calculate_window_hours(
            description.number_of_windows,
            description.number_of_large_windows,
            description.number_of_high_access_windows,
        )

    if description.project_type == 'jewelry_store' and description.number_of_display_cases > 0:
        hours += description.number_of_display_cases * DISPLAY_CASE_HOURS

    return hours


def calculate_project_days(total_hours: float, cleaners: int, hours_per_day: int = HOURS_PER_WORKDAY) -> int:
    if cleaners <= 0:
        return 0
    return math.ceil(total_hours / (cleaners * hours_per_day))


def check_description(description: ProjectDescription):
    """Raise EstimateError when the description cannot be priced"""
    if description.square_footage <= 0:
        raise EstimateError('Square footage must be greater than 0', 'squareFootage')
    if description.number_of_cleaners <= 0:
        raise EstimateError('Number of cleaners must be greater than 0', 'numberOfCleaners')


def calculate_estimate(description: ProjectDescription) -> EstimateResult:
    """
    Price a cleaning project

    Args:
        description: Validated ProjectDescription

    Returns:
        EstimateResult with an empty recommendations tuple

    Raises:
        EstimateError: square footage or crew size is not positive
    """
    check_description(description)

    sqft = description.square_footage
    project_multiplier = pricing.get_project_multiplier(description.project_type)
    cleaning_multiplier = pricing.get_cleaning_multiplier(description.cleaning_type)
    base_price = sqft * pricing.BASE_RATE_PER_SQFT * project_multiplier * cleaning_multiplier

    vct_cost = 0.0
    if description.has_vct:
        vct_area = description.vct_square_footage or sqft
        vct_cost = pricing.get_vct_cost(vct_area)

    travel_cost = pricing.get_travel_cost(description.distance_from_office)

    overnight_cost = 0.0
    if description.staying_overnight:
        overnight_cost = pricing.get_overnight_cost(
            description.number_of_cleaners,
            max(description.number_of_nights, 1),
            description.distance_from_office,
        )

    pressure_washing_cost = 0.0
    if description.needs_pressure_washing and (
        description.pressure_washing_area > 0 or description.pressure_washing_type == 'daily_rate'
    ):
        pressure_washing_cost = pricing.get_pressure_washing_cost(
            description.pressure_washing_type,
            description.pressure_washing_area,
        )

    window_cleaning_cost = 0.0
    if description.needs_window_cleaning and description.charge_for_window_cleaning:
        window_cleaning_cost = pricing.get_window_cleaning_cost(
            description.number_of_windows,
            description.number_of_large_windows,
            description.number_of_high_access_windows,
        )

    display_case_cost = 0.0
    if description.project_type == 'jewelry_store':
        display_case_cost = pricing.get_display_case_cost(description.number_of_display_cases)

    urgency_multiplier = pricing.get_urgency_multiplier(description.urgency_level)

    total_before_markup = (
        base_price
        + vct_cost
        + travel_cost
        + overnight_cost
        + pressure_washing_cost
        + window_cleaning_cost
        + display_case_cost
    ) * urgency_multiplier

    markup = total_before_markup * pricing.MARKUP_RATE if description.apply_markup else 0.0
    sales_tax = (total_before_markup + markup) * pricing.SALES_TAX_RATE
    total_price = total_before_markup + markup + sales_tax

    estimated_hours = calculate_estimated_hours(description)

    logger.debug(
        f"Estimate for {description.project_type}/{description.cleaning_type} "
        f"{sqft:,.0f} sq ft: ${total_price:,.2f}, {estimated_hours:.2f}h"
    )

    return EstimateResult(
        base_price=base_price,
        project_type_multiplier=project_multiplier,
        cleaning_type_multiplier=cleaning_multiplier,
        vct_cost=vct_cost,
        travel_cost=travel_cost,
        overnight_cost=overnight_cost,
        pressure_washing_cost=pressure_washing_cost,
        window_cleaning_cost=window_cleaning_cost,
        display_case_cost=display_case_cost,
        urgency_multiplier=urgency_multiplier,
        total_before_markup=total_before_markup,
        markup=markup,
        sales_tax=sales_tax,
        total_price=total_price,
        estimated_hours=estimated_hours,
        price_per_square_foot=total_price / sqft if sqft else 0.0,
        recommended_cleaners=pricing.get_recommended_cleaners(sqft),
        time_to_complete_in_days=calculate_project_days(estimated_hours, description.number_of_cleaners),
        scheduling_fee=float(pricing.SCHEDULING_FEE),
        invoicing_fee=float(pricing.INVOICING_FEE),
    )
