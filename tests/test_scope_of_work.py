"""
Tests for scope of work templates
"""
import pytest
from services.scope_of_work import (
    get_scope_template,
    build_scope_items,
    SCOPE_HEADER,
    SCOPE_HEADER_ES,
    FLOOR_TASK,
    SPECIFIC_TASKS,
    WINDOW_COUNT_PLACEHOLDER,
)


@pytest.mark.unit
class TestScopeTemplate:
    """Tests for the bulleted template text"""

    def test_template_starts_with_header(self):
        template = get_scope_template('office')
        assert template.split('\n')[0] == SCOPE_HEADER
        assert f'• {FLOOR_TASK}' in template

    def test_template_keeps_window_placeholder(self):
        assert WINDOW_COUNT_PLACEHOLDER in get_scope_template('restaurant')

    def test_unknown_type_uses_other(self):
        assert get_scope_template('spaceport') == get_scope_template('other')

    def test_spanish_template_is_shared(self):
        spanish = get_scope_template('restaurant', language='es')
        assert spanish.split('\n')[0] == SCOPE_HEADER_ES
        assert spanish == get_scope_template('medical', language='es')


@pytest.mark.unit
class TestBuildScopeItems:
    """Tests for rendered scope lines"""

    def test_items_have_no_bullets(self):
        items = build_scope_items('office', total_windows=4)
        assert items[0] == SCOPE_HEADER
        assert items[1] == FLOOR_TASK
        assert not any(item.startswith('•') for item in items)

    def test_project_specific_tasks_follow_floor_task(self):
        items = build_scope_items('medical', total_windows=4)
        assert items[2:2 + len(SPECIFIC_TASKS['medical'])] == SPECIFIC_TASKS['medical']

    def test_window_count_substituted(self):
        items = build_scope_items('office', total_windows=12)
        assert 'Clean interior/exterior windows (12 windows)' in items

    def test_window_line_dropped_without_windows(self):
        items = build_scope_items('office', total_windows=0)
        assert not any('windows' in item.lower() and 'interior/exterior' in item for item in items)
        assert not any(WINDOW_COUNT_PLACEHOLDER in item for item in items)

    def test_spanish_window_count(self):
        items = build_scope_items('office', total_windows=3, language='es')
        assert 'Limpiar ventanas interiores/exteriores (3 ventanas)' in items

    def test_jewelry_display_case_line(self):
        items = build_scope_items('jewelry_store', total_windows=0)
        assert 'Detail clean display cases and jewelry counters (30 per case)' in items
