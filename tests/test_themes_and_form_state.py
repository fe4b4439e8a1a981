"""
Tests for presentation themes and saved form state
"""
import pytest
from services.themes import (
    get_theme,
    list_themes,
    get_css_variables,
    is_known_theme,
    THEMES,
    DEFAULT_THEME_ID,
    THEME_STORAGE_KEY,
)
from services.form_state import (
    FormStateStore,
    FORM_STORAGE_KEY,
    ESTIMATE_STORAGE_KEY,
    WIZARD_STORAGE_KEY,
)


@pytest.mark.unit
class TestThemes:
    """Tests for theme lookup and CSS variables"""

    def test_five_themes(self):
        assert [theme['id'] for theme in list_themes()] == ['minimalist', 'corporate', 'visual', 'service', 'data']

    def test_unknown_theme_falls_back(self):
        assert get_theme('neon') is THEMES[DEFAULT_THEME_ID]
        assert get_theme(None) is THEMES[DEFAULT_THEME_ID]

    def test_every_theme_has_pdf_colours(self):
        for theme in THEMES.values():
            assert set(theme['pdf']) == {'accentColor', 'headerBackground', 'tableStripe'}

    def test_css_variables(self):
        variables = get_css_variables('corporate')
        assert variables['--color-primary'] == '#1e40af'
        assert variables['--font-secondary'] == 'Georgia, serif'
        assert variables['--border-radius'] == '0.25rem'

    def test_is_known_theme(self):
        assert is_known_theme('visual') is True
        assert is_known_theme('neon') is False

    def test_non_string_theme_ids(self):
        assert is_known_theme(['corporate']) is False
        assert is_known_theme({'id': 'corporate'}) is False
        assert get_theme(['corporate']) is THEMES[DEFAULT_THEME_ID]


@pytest.mark.unit
class TestFormStateStore:
    """Tests for per-client JSON storage"""

    @pytest.fixture
    def store(self, tmp_path):
        return FormStateStore(str(tmp_path / 'session_data'))

    def test_empty_client(self, store):
        assert store.load_all('client-1') == {}
        assert store.get('client-1', FORM_STORAGE_KEY) is None

    def test_save_and_get(self, store):
        store.save('client-1', WIZARD_STORAGE_KEY, {'currentStep': 'extras'})
        assert store.get('client-1', WIZARD_STORAGE_KEY) == {'currentStep': 'extras'}
        assert 'updatedAt' in store.load_all('client-1')

    def test_clients_are_isolated(self, store):
        store.save('client-1', FORM_STORAGE_KEY, {'squareFootage': 100})
        assert store.get('client-2', FORM_STORAGE_KEY) is None

    def test_unknown_key_rejected(self, store):
        with pytest.raises(ValueError):
            store.save('client-1', 'password', 'hunter2')

    def test_path_traversal_rejected(self, store):
        with pytest.raises(ValueError):
            store.load_all('../../etc/passwd')

    def test_save_and_clear_estimate(self, store):
        store.save_estimate('client-1', {'squareFootage': 100}, {'totalPrice': 50})
        assert store.get('client-1', ESTIMATE_STORAGE_KEY) == {'totalPrice': 50}

        store.clear_estimate('client-1')
        assert store.get('client-1', FORM_STORAGE_KEY) is None
        assert store.get('client-1', ESTIMATE_STORAGE_KEY) is None

    def test_remove_missing_key(self, store):
        assert store.remove('client-1', FORM_STORAGE_KEY) is False

    def test_clear(self, store):
        store.save('client-1', FORM_STORAGE_KEY, {})
        assert store.clear('client-1') is True
        assert store.clear('client-1') is False

    def test_corrupt_file_reads_as_empty(self, store, tmp_path):
        folder = tmp_path / 'session_data'
        folder.mkdir()
        (folder / 'client-1.json').write_text('{not json')
        assert store.load_all('client-1') == {}

    def test_theme_default_and_save(self, store):
        assert store.get_theme(None) == DEFAULT_THEME_ID
        assert store.get_theme('client-1') == DEFAULT_THEME_ID

        store.save_theme('client-1', 'data')
        assert store.get_theme('client-1') == 'data'
        assert store.get('client-1', THEME_STORAGE_KEY) == 'data'

    def test_unknown_theme_rejected(self, store):
        with pytest.raises(ValueError):
            store.save_theme('client-1', 'neon')

    def test_non_string_theme_rejected(self, store):
        with pytest.raises(ValueError):
            store.save('client-1', THEME_STORAGE_KEY, ['corporate'])
        assert store.get_theme('client-1') == DEFAULT_THEME_ID

    def test_stored_list_theme_reads_as_default(self, store, tmp_path):
        folder = tmp_path / 'session_data'
        folder.mkdir()
        (folder / 'client-1.json').write_text('{"estimaitor-theme": ["corporate"]}')
        assert store.get_theme('client-1') == DEFAULT_THEME_ID

    def test_non_object_file_reads_as_empty(self, store, tmp_path):
        folder = tmp_path / 'session_data'
        folder.mkdir()
        (folder / 'client-1.json').write_text('["not", "a", "dict"]')
        assert store.load_all('client-1') == {}

    def test_non_string_client_id_rejected(self, store):
        with pytest.raises(ValueError):
            store.load_all(['client-1'])
