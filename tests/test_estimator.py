"""
Tests for the estimate calculator and value records
"""
import pytest
from services.estimator import (
    calculate_estimate,
    calculate_cleaning_hours,
    calculate_window_hours,
    calculate_estimated_hours,
    calculate_project_days,
    round_up_quarter_hour,
    EstimateError,
)
from services.models import ProjectDescription, EstimateResult, to_camel, to_snake


@pytest.mark.unit
class TestProjectDescription:
    """Tests for the form-facing project record"""

    def test_from_camel_case_form(self, sample_form_data):
        description = ProjectDescription.from_dict(sample_form_data)
        assert description.project_type == 'office'
        assert description.square_footage == 5000.0
        assert description.number_of_cleaners == 3
        assert description.client_name == 'Jane Smith'

    def test_numeric_strings_and_checkbox_values(self):
        description = ProjectDescription.from_dict({
            'squareFootage': '2500',
            'hasVCT': 'true',
            'applyMarkup': 'off',
            'urgencyLevel': '7',
        })
        assert description.square_footage == 2500.0
        assert description.has_vct is True
        assert description.apply_markup is False
        assert description.urgency_level == 7

    def test_unknown_keys_are_ignored(self):
        description = ProjectDescription.from_dict({'favoriteColor': 'blue'})
        assert description == ProjectDescription()

    def test_unparseable_number_raises(self):
        with pytest.raises(ValueError):
            ProjectDescription.from_dict({'squareFootage': 'huge'})

    def test_non_finite_number_raises(self):
        with pytest.raises(ValueError):
            ProjectDescription.from_dict({'squareFootage': float('nan')})
        with pytest.raises(ValueError):
            ProjectDescription.from_dict({'distanceFromOffice': 'inf'})

    def test_to_dict_round_trips_vct_key(self):
        data = ProjectDescription(has_vct=True).to_dict()
        assert data['hasVCT'] is True
        assert ProjectDescription.from_dict(data).has_vct is True

    def test_is_immutable(self, sample_description):
        with pytest.raises(Exception):
            sample_description.square_footage = 1

    def test_total_windows(self):
        description = ProjectDescription(number_of_windows=4, number_of_large_windows=2,
                                         number_of_high_access_windows=1)
        assert description.total_windows == 7

    def test_key_conversion(self):
        assert to_camel('number_of_bed_baths') == 'numberOfBedBaths'
        assert to_snake('numberOfBedBaths') == 'number_of_bed_baths'
        assert to_snake('hasVCT') == 'has_vct'


@pytest.mark.unit
class TestHours:
    """Tests for labour hour calculation"""

    def test_round_up_quarter_hour(self):
        assert round_up_quarter_hour(1.01) == 1.25
        assert round_up_quarter_hour(2.0) == 2.0

    def test_standard_office(self):
        assert calculate_cleaning_hours(5000, 'office', 'final') == 5.0

    def test_large_space_tiers(self):
        assert calculate_cleaning_hours(25000, 'office', 'final') == 22.75
        assert calculate_cleaning_hours(50000, 'office', 'final') == 41.5
        assert calculate_cleaning_hours(60000, 'office', 'final') == 48.0

    def test_project_and_cleaning_modifiers(self):
        assert calculate_cleaning_hours(2000, 'restaurant', 'final') == 3.0
        # 1.0 * 1.6 hotel * 0.7 rough = 1.12, rounded up
        assert calculate_cleaning_hours(1000, 'hotel', 'rough') == 1.25

    def test_jewelry_store_tiers(self):
        assert calculate_cleaning_hours(500, 'jewelry_store', 'final') == 0.75
        assert calculate_cleaning_hours(7400, 'jewelry_store', 'final') == 7.5

    def test_window_hours_are_capped(self):
        assert calculate_window_hours(200, 0, 0) == 20.0
        assert calculate_window_hours(100, 50, 25) == 40.0

    def test_add_on_hours(self):
        description = ProjectDescription(
            project_type='jewelry_store',
            square_footage=500,
            needs_pressure_washing=True,
            pressure_washing_area=1000,
            needs_window_cleaning=True,
            number_of_windows=10,
            number_of_display_cases=5,
        )
        assert calculate_estimated_hours(description) == pytest.approx(0.75 + 2 + 2 + 3)

    def test_project_days(self):
        assert calculate_project_days(17, 2) == 2
        assert calculate_project_days(5, 3) == 1
        assert calculate_project_days(5, 0) == 0


@pytest.mark.unit
class TestCalculateEstimate:
    """Tests for the full price breakdown"""

    def test_basic_office(self, sample_description):
        estimate = calculate_estimate(sample_description)

        assert estimate.base_price == pytest.approx(1080.0)
        assert estimate.travel_cost == 100.0
        assert estimate.total_before_markup == pytest.approx(1180.0)
        assert estimate.markup == 0.0
        assert estimate.sales_tax == pytest.approx(82.6)
        assert estimate.total_price == pytest.approx(1262.6)
        assert estimate.estimated_hours == 5.0
        assert estimate.time_to_complete_in_days == 1
        assert estimate.recommended_cleaners == 4
        assert estimate.price_per_square_foot == pytest.approx(1262.6 / 5000)

    def test_admin_fees_are_reported_not_added(self, sample_description):
        estimate = calculate_estimate(sample_description)
        assert estimate.scheduling_fee == 99.0
        assert estimate.invoicing_fee == 99.0
        assert estimate.total_price == pytest.approx(1262.6)

    def test_markup(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(apply_markup=True))
        assert estimate.markup == pytest.approx(590.0)
        assert estimate.sales_tax == pytest.approx(1770.0 * 0.07)
        assert estimate.total_price == pytest.approx(1770.0 * 1.07)

    def test_urgency(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(urgency_level=10))
        assert estimate.urgency_multiplier == 1.40
        assert estimate.total_before_markup == pytest.approx(1180.0 * 1.4)
        assert estimate.urgency_adjustment == pytest.approx(1180.0 * 0.4)

    def test_vct_defaults_to_whole_area(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(has_vct=True))
        assert estimate.vct_cost == pytest.approx(7500.0)

    def test_vct_specific_area(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(has_vct=True, vct_square_footage=500))
        assert estimate.vct_cost == pytest.approx(1100.0)

    def test_vct_ignored_when_unchecked(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(vct_square_footage=500))
        assert estimate.vct_cost == 0.0

    def test_pressure_washing_daily_rate(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(
            needs_pressure_washing=True, pressure_washing_type='daily_rate'))
        assert estimate.pressure_washing_cost == 1800.0

    def test_window_cleaning_can_be_free(self, sample_description):
        description = sample_description.with_changes(
            needs_window_cleaning=True, number_of_windows=10, charge_for_window_cleaning=False)
        estimate = calculate_estimate(description)
        assert estimate.window_cleaning_cost == 0.0
        assert estimate.estimated_hours == pytest.approx(7.0)

    def test_display_cases_only_for_jewelry(self, sample_description):
        office = calculate_estimate(sample_description.with_changes(number_of_display_cases=10))
        jewelry = calculate_estimate(sample_description.with_changes(
            project_type='jewelry_store', number_of_display_cases=10))
        assert office.display_case_cost == 0.0
        assert jewelry.display_case_cost == 300.0

    def test_overnight(self, sample_description):
        estimate = calculate_estimate(sample_description.with_changes(staying_overnight=True, number_of_nights=2))
        # Three cleaners: two rooms, three per diems, one vehicle
        assert estimate.overnight_cost == pytest.approx((720 + 540) * 1.05)

    def test_zero_square_footage_raises(self, sample_description):
        with pytest.raises(EstimateError) as exc_info:
            calculate_estimate(sample_description.with_changes(square_footage=0))
        assert exc_info.value.field == 'squareFootage'

    def test_zero_cleaners_raises(self, sample_description):
        with pytest.raises(EstimateError) as exc_info:
            calculate_estimate(sample_description.with_changes(number_of_cleaners=0))
        assert exc_info.value.field == 'numberOfCleaners'

    def test_deterministic(self, sample_description):
        assert calculate_estimate(sample_description) == calculate_estimate(sample_description)


@pytest.mark.unit
class TestEstimateResult:
    """Tests for estimate serialisation"""

    def test_to_dict_camel_case(self, sample_description):
        data = calculate_estimate(sample_description).with_recommendations(['Tip']).to_dict()
        assert data['totalPrice'] == pytest.approx(1262.6)
        assert data['timeToCompleteInDays'] == 1
        assert data['recommendations'] == ['Tip']
        assert data['aiRecommendations'] == ['Tip']

    def test_from_dict_restores_result(self, sample_description):
        estimate = calculate_estimate(sample_description).with_recommendations(['Tip'])
        assert EstimateResult.from_dict(estimate.to_dict()) == estimate

    def test_from_dict_missing_amounts(self):
        estimate = EstimateResult.from_dict({'totalPrice': '500'})
        assert estimate.total_price == 500.0
        assert estimate.base_price == 0.0
        assert estimate.recommendations == ()
