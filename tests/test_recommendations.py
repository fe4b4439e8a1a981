"""
Tests for rule-based recommendations
"""
import random
import pytest
from services.models import ProjectDescription
from services.recommendations import (
    collect_recommendations,
    generate_recommendations,
    shuffle,
    GENERAL_TIPS,
    PROJECT_TYPE_TIPS,
    PRESSURE_WASHING_TIPS,
    WINDOW_CLEANING_TIPS,
    HIGH_ACCESS_WINDOW_TIP,
    STOREFRONT_WINDOW_TIP,
    SMALL_SPACE_TIP,
    LARGE_SPACE_TIPS,
    URGENT_TIPS,
    VCT_TIPS,
)


@pytest.mark.unit
class TestCollectRecommendations:
    """Tests for which tips apply"""

    def test_small_office(self):
        description = ProjectDescription(project_type='office', cleaning_type='final', square_footage=1500)
        tips = collect_recommendations(description, 1.5)

        assert tips[:2] == PROJECT_TYPE_TIPS['office']
        assert SMALL_SPACE_TIP in tips
        assert tips[-2:] == GENERAL_TIPS

    def test_large_space(self):
        description = ProjectDescription(square_footage=60000)
        tips = collect_recommendations(description, 0)
        assert all(tip in tips for tip in LARGE_SPACE_TIPS)
        assert SMALL_SPACE_TIP not in tips

    def test_add_on_tips(self):
        description = ProjectDescription(
            square_footage=5000,
            has_vct=True,
            needs_pressure_washing=True,
            urgency_level=9,
        )
        tips = collect_recommendations(description, 5)
        for group in (VCT_TIPS, PRESSURE_WASHING_TIPS, URGENT_TIPS):
            assert all(tip in tips for tip in group)

    def test_window_tips(self):
        description = ProjectDescription(
            project_type='retail',
            square_footage=5000,
            needs_window_cleaning=True,
            number_of_high_access_windows=12,
        )
        tips = collect_recommendations(description, 5)
        assert all(tip in tips for tip in WINDOW_CLEANING_TIPS)
        assert HIGH_ACCESS_WINDOW_TIP in tips
        assert STOREFRONT_WINDOW_TIP in tips

    def test_overloaded_crew(self):
        description = ProjectDescription(square_footage=5000, number_of_cleaners=2)
        tips = collect_recommendations(description, 20)
        assert 'Consider adding more cleaners - current workload is 10.0 hours per person' in tips

    def test_no_project_tips_for_untyped_project(self):
        description = ProjectDescription(project_type='other', cleaning_type='vct_only', square_footage=5000)
        assert collect_recommendations(description, 1) == GENERAL_TIPS


@pytest.mark.unit
class TestGenerateRecommendations:
    """Tests for the shuffled selection"""

    def test_limit(self):
        description = ProjectDescription(project_type='hotel', cleaning_type='rough_final_touchup',
                                         square_footage=60000, needs_pressure_washing=True)
        tips = generate_recommendations(description, 50, limit=5, rng=random.Random(7))
        assert len(tips) == 5
        assert len(set(tips)) == 5

    def test_fewer_tips_than_limit(self):
        description = ProjectDescription(project_type='other', cleaning_type='vct_only', square_footage=5000)
        tips = generate_recommendations(description, 1, limit=5)
        assert sorted(tips) == sorted(GENERAL_TIPS)

    def test_seeded_rng_is_repeatable(self):
        description = ProjectDescription(project_type='medical', square_footage=1000)
        first = generate_recommendations(description, 1, rng=random.Random(3))
        second = generate_recommendations(description, 1, rng=random.Random(3))
        assert first == second

    def test_shuffle_keeps_items(self):
        items = ['a', 'b', 'c', 'd']
        shuffled = shuffle(items, random.Random(1))
        assert sorted(shuffled) == items
        assert items == ['a', 'b', 'c', 'd']
