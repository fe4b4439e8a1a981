"""
Estimate value records.

ProjectDescription is what the form layer collects; EstimateResult is what the
pricing calculator returns. Both are immutable and travel between the form
layer, the calculator, the PDF renderers and the integrations as plain values.
The wire format is the camelCase JSON the estimator forms post.
"""

import math
import re
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Tuple


PROJECT_TYPES: Dict[str, str] = {
    'restaurant': 'Restaurant',
    'fast_food': 'Fast Food',
    'medical': 'Medical Facility',
    'retail': 'Retail Store',
    'office': 'Office Space',
    'industrial': 'Industrial Facility',
    'educational': 'Educational Facility',
    'hotel': 'Hotel',
    'jewelry_store': 'Jewelry Store',
    'grocery_store': 'Grocery Store',
    'yoga_studio': 'Yoga Studio',
    'kids_fitness': 'Kids Fitness Center',
    'bakery': 'Bakery',
    'interactive_toy_store': 'Interactive Toy Store',
    'church': 'Church',
    'arcade': 'Arcade',
    'coffee_shop': 'Coffee Shop',
    'fire_station': 'Fire Station',
    'home_renovation': 'Home Renovation',
    'building_shell': 'Building Shell',
    'assisted_living': 'Assisted Living Facility',
    'other': 'Other',
}

CLEANING_TYPES: Dict[str, str] = {
    'rough': 'Rough Clean',
    'final': 'Final Clean',
    'final_touchup': 'Final & Touchup',
    'rough_final': 'Rough & Final',
    'rough_final_touchup': 'Complete Package',
    'pressure_washing': 'Pressure Washing Only',
    'vct_only': 'VCT Flooring Only',
    'window_cleaning_only': 'Window Cleaning Only',
}

PRESSURE_WASHING_TYPES: Dict[str, str] = {
    'soft_wash': 'Soft Wash',
    'roof_wash': 'Roof Wash',
    'driveway': 'Driveway',
    'deck': 'Deck',
    'daily_rate': 'Daily Rate',
}


# Acronym keys the forms spell differently from plain camelCase
CAMEL_OVERRIDES = {'has_vct': 'hasVCT'}
SNAKE_OVERRIDES = {camel: snake for snake, camel in CAMEL_OVERRIDES.items()}


def to_camel(name: str) -> str:
    """snake_case -> camelCase"""
    if name in CAMEL_OVERRIDES:
        return CAMEL_OVERRIDES[name]
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def to_snake(name: str) -> str:
    """camelCase -> snake_case"""
    if name in SNAKE_OVERRIDES:
        return SNAKE_OVERRIDES[name]
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def _coerce_number(value: Any, cast):
    if value is None or value == '':
        return cast(0)
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return cast(number)


@dataclass(frozen=True)
class ProjectDescription:
    """
    Everything needed to price a cleaning project.

    Attributes:
        project_type: Key of PROJECT_TYPES
        cleaning_type: Key of CLEANING_TYPES
        square_footage: Area to be cleaned, in square feet
        vct_square_footage: VCT area; 0 means the whole square footage
        distance_from_office: One-way distance in miles
        urgency_level: 1 (no rush) to 10 (ASAP)
        number_of_bed_baths: Assisted living bed/bath units
    """

    project_type: str = 'office'
    cleaning_type: str = 'final'
    square_footage: float = 0.0
    has_vct: bool = False
    vct_square_footage: float = 0.0
    distance_from_office: float = 0.0
    gas_price: float = 3.50
    apply_markup: bool = False
    number_of_cleaners: int = 2
    urgency_level: int = 1
    staying_overnight: bool = False
    number_of_nights: int = 1
    needs_pressure_washing: bool = False
    pressure_washing_area: float = 0.0
    pressure_washing_type: str = 'soft_wash'
    needs_window_cleaning: bool = False
    charge_for_window_cleaning: bool = True
    number_of_windows: int = 0
    number_of_large_windows: int = 0
    number_of_high_access_windows: int = 0
    number_of_display_cases: int = 0
    number_of_bed_baths: int = 0
    client_name: str = ''
    project_name: str = ''
    client_email: str = ''
    client_phone: str = ''
    location: str = ''

    @property
    def total_windows(self) -> int:
        return self.number_of_windows + self.number_of_large_windows + self.number_of_high_access_windows

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectDescription':
        """
        Build a description from form JSON (camelCase or snake_case keys).

        Unknown keys are ignored; missing keys take the field defaults.
        Raises ValueError when a numeric field cannot be parsed.
        """
        values = {}
        defaults = {f.name: f.default for f in fields(cls)}
        for key, raw in (data or {}).items():
            name = to_snake(key)
            if name not in defaults or raw is None:
                continue
            default = defaults[name]
            if isinstance(default, bool):
                values[name] = _coerce_bool(raw)
            elif isinstance(default, int):
                values[name] = _coerce_number(raw, int)
            elif isinstance(default, float):
                values[name] = _coerce_number(raw, float)
            else:
                values[name] = str(raw).strip()
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {to_camel(f.name): getattr(self, f.name) for f in fields(self)}

    def with_changes(self, **changes) -> 'ProjectDescription':
        return replace(self, **changes)


@dataclass(frozen=True)
class EstimateResult:
    """Itemized price and labour breakdown for one ProjectDescription."""

    base_price: float
    project_type_multiplier: float
    cleaning_type_multiplier: float
    vct_cost: float
    travel_cost: float
    overnight_cost: float
    pressure_washing_cost: float
    window_cleaning_cost: float
    display_case_cost: float
    urgency_multiplier: float
    total_before_markup: float
    markup: float
    sales_tax: float
    total_price: float
    estimated_hours: float
    price_per_square_foot: float
    recommended_cleaners: int
    time_to_complete_in_days: int
    scheduling_fee: float
    invoicing_fee: float
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def urgency_adjustment(self) -> float:
        """Dollar amount added by the urgency multiplier"""
        if self.urgency_multiplier == 0:
            return 0.0
        return self.total_before_markup - self.total_before_markup / self.urgency_multiplier

    def with_recommendations(self, recommendations: List[str]) -> 'EstimateResult':
        return replace(self, recommendations=tuple(recommendations))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EstimateResult':
        """Rebuild a result from its serialised form; missing amounts read as 0."""
        values = {}
        for f in fields(cls):
            raw = data.get(to_camel(f.name), data.get(f.name))
            if f.name == 'recommendations':
                values[f.name] = tuple(raw or ())
            elif f.name in ('recommended_cleaners', 'time_to_complete_in_days'):
                values[f.name] = _coerce_number(raw, int)
            else:
                values[f.name] = _coerce_number(raw, float)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        result = {to_camel(f.name): getattr(self, f.name) for f in fields(self)}
        result['recommendations'] = list(self.recommendations)
        result['aiRecommendations'] = list(self.recommendations)
        return result
