"""
Pricing Rate Tables
Fixed rates and the per-service cost helpers used by the estimator

Provides:
- Base, tax and markup rates
- Project type, cleaning type and urgency multipliers
- VCT, travel, window, pressure washing, overnight and display case costs
- Recommended crew size by square footage
"""

import math

# Core pricing
BASE_RATE_PER_SQFT = 0.18
SALES_TAX_RATE = 0.07
MARKUP_RATE = 0.50  # applied when the estimate is marked up

PROJECT_MULTIPLIERS = {
    'restaurant': 1.5,
    'medical': 1.6,
    'office': 1.0,
    'retail': 1.0,
    'industrial': 1.3,
    'educational': 1.25,
    'hotel': 1.35,
    'jewelry_store': 1.4,
    'grocery_store': 1.3,
    'yoga_studio': 1.15,
    'kids_fitness': 1.25,
    'bakery': 1.35,
    'church': 1.2,
    'arcade': 1.3,
    'coffee_shop': 1.25,
    'fire_station': 1.4,
    'fast_food': 1.2,
    'interactive_toy_store': 1.45,
    'home_renovation': 1.4,
    'building_shell': 1.1,
    'assisted_living': 1.5,
    'other': 1.0,
}

CLEANING_MULTIPLIERS = {
    'rough': 0.8,
    'final': 1.2,  # final includes a touchup pass
    'final_touchup': 1.2,
    'rough_final': 1.4,
    'rough_final_touchup': 1.6,
    'pressure_washing': 1.0,
    'vct_only': 1.0,
    'window_cleaning_only': 1.0,
}

URGENCY_MULTIPLIERS = {
    1: 1.00, 2: 1.04, 3: 1.08, 4: 1.12, 5: 1.16,
    6: 1.20, 7: 1.24, 8: 1.28, 9: 1.32, 10: 1.40,
}

# VCT (vinyl composition tile) strip and wax, sliding scale by area
VCT_COST_PER_SQFT = 2.20
VCT_SMALL_JOB_THRESHOLD = 1000
VCT_LARGE_JOB_THRESHOLD = 5000
VCT_LARGE_JOB_RATE = 1.50
VCT_SCALE_DISCOUNT = 0.70

# Window cleaning
WINDOW_COST = 18
LARGE_WINDOW_MULTIPLIER = 1.6
HIGH_ACCESS_WINDOW_MULTIPLIER = 2.2

# Pressure washing, rate per sq ft (daily rate is flat)
PRESSURE_WASHING_RATES = {
    'soft_wash': {'rate': 0.18, 'minimum': 235},
    'roof_wash': {'rate': 0.50},
    'driveway': {'rate': 0.20},
    'deck': {'rate': 1.00},
}
PRESSURE_WASHING_DAILY_RATE = 1800

DISPLAY_CASE_COST = 30

# Travel billed per hour of one-way drive time
TRAVEL_BASE_FEE = 100
TRAVEL_HOURLY_INCREMENT = 100
AVERAGE_SPEED_MPH = 60

# Overnight stays
HOTEL_PER_NIGHT = 180
PER_DIEM_PER_DAY = 90
CLEANERS_PER_ROOM = 2
CLEANERS_PER_VEHICLE = 3
OVERNIGHT_COORDINATION_FEE = 0.05

# Administrative fees reported alongside an estimate
SCHEDULING_FEE = 99
INVOICING_FEE = 99

# Charged when a return trip is needed because the site was not ready
RESCHEDULE_MINIMUM_FEE = 250

# (upper bound exclusive, crew size)
CLEANER_THRESHOLDS = [
    (2000, 2),
    (5000, 3),
    (10000, 4),
    (20000, 6),
    (40000, 8),
    (60000, 10),
    (80000, 12),
]
MAX_RECOMMENDED_CLEANERS = 15


def get_project_multiplier(project_type):
    return PROJECT_MULTIPLIERS.get(project_type, PROJECT_MULTIPLIERS['other'])


def get_cleaning_multiplier(cleaning_type):
    return CLEANING_MULTIPLIERS.get(cleaning_type, 1.0)


def get_urgency_multiplier(urgency_level):
    """Urgency levels outside 1..10 are clamped to the nearest end."""
    level = min(max(int(urgency_level or 1), 1), 10)
    return URGENCY_MULTIPLIERS[level]


def get_vct_cost(square_footage):
    """
    Cost of VCT stripping, waxing and buffing.

    Small jobs pay the full rate, the rate slides down linearly between
    1,000 and 5,000 sq ft, and large jobs pay the flat large-job rate.
    """
    if square_footage <= 0:
        return 0.0
    if square_footage < VCT_SMALL_JOB_THRESHOLD:
        return square_footage * VCT_COST_PER_SQFT
    if square_footage <= VCT_LARGE_JOB_THRESHOLD:
        ratio = (square_footage - VCT_SMALL_JOB_THRESHOLD) / (VCT_LARGE_JOB_THRESHOLD - VCT_SMALL_JOB_THRESHOLD)
        rate = VCT_COST_PER_SQFT - ratio * VCT_SCALE_DISCOUNT
        return square_footage * rate
    return square_footage * VCT_LARGE_JOB_RATE


def get_drive_time_hours(distance_miles):
    return max(distance_miles, 0) / AVERAGE_SPEED_MPH


def get_travel_cost(distance_miles):
    """$100 within an hour's drive, plus $100 for each started hour beyond."""
    drive_hours = get_drive_time_hours(distance_miles)
    if drive_hours <= 1:
        return float(TRAVEL_BASE_FEE)
    billed_hours = math.ceil(drive_hours)
    return float(TRAVEL_BASE_FEE + (billed_hours - 1) * TRAVEL_HOURLY_INCREMENT)


def get_window_cleaning_cost(standard, large, high_access):
    standard_cost = standard * WINDOW_COST
    large_cost = large * WINDOW_COST * LARGE_WINDOW_MULTIPLIER
    high_access_cost = high_access * WINDOW_COST * HIGH_ACCESS_WINDOW_MULTIPLIER
    return standard_cost + large_cost + high_access_cost


def get_pressure_washing_cost(washing_type, area):
    """
    Cost of a pressure washing job

    Args:
        washing_type: soft_wash, roof_wash, driveway, deck or daily_rate
        area: Area to wash in square feet

    Returns:
        Dollar cost; unknown types are priced as soft wash
    """
    if washing_type == 'daily_rate':
        return float(PRESSURE_WASHING_DAILY_RATE)

    service = PRESSURE_WASHING_RATES.get(washing_type, PRESSURE_WASHING_RATES['soft_wash'])
    cost = max(area, 0) * service['rate']
    minimum = service.get('minimum')
    return max(cost, minimum) if minimum else cost


def get_overnight_cost(cleaners, nights, distance_miles):
    """
    Hotel rooms, per diem and extra vehicles for an overnight crew, plus
    a coordination fee.

    Two cleaners share a room; every three cleaners beyond the first vehicle
    need another vehicle, each billed at the travel rate.
    """
    hotel_rooms = math.ceil(cleaners / CLEANERS_PER_ROOM)
    hotel_cost = hotel_rooms * HOTEL_PER_NIGHT * nights
    per_diem_cost = cleaners * PER_DIEM_PER_DAY * nights

    vehicle_cost = 0.0
    if cleaners > 2:
        additional_vehicles = math.ceil(cleaners / CLEANERS_PER_VEHICLE) - 1
        vehicle_cost = additional_vehicles * get_travel_cost(distance_miles)

    subtotal = hotel_cost + per_diem_cost + vehicle_cost
    return subtotal + subtotal * OVERNIGHT_COORDINATION_FEE


def get_display_case_cost(number_of_cases):
    return float(max(number_of_cases, 0) * DISPLAY_CASE_COST)


def get_recommended_cleaners(square_footage):
    for threshold, cleaners in CLEANER_THRESHOLDS:
        if square_footage < threshold:
            return cleaners
    return MAX_RECOMMENDED_CLEANERS
