"""
Pytest configuration and shared fixtures
"""
import os
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def app_config():
    """Fixture providing test configuration"""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def test_env_vars():
    """Fixture providing test environment variables"""
    original_env = os.environ.copy()

    os.environ['FLASK_ENV'] = 'testing'
    os.environ['SECRET_KEY'] = 'a9f3c2e1b7d64f0e8c5a2b9d7e1f3c6a'
    os.environ['RESEND_API_KEY'] = 'test-resend-key'
    os.environ['OPENAI_API_KEY'] = 'test-openai-key'

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def app(tmp_path, app_config):
    """Fixture providing an app whose storage lives in a temp directory"""
    from app_init import create_app
    return create_app(app_config, overrides={
        'OUTPUT_FOLDER': str(tmp_path / 'outputs'),
        'SESSION_DATA_FOLDER': str(tmp_path / 'session_data'),
    })


@pytest.fixture
def client(app):
    """Fixture providing a Flask test client"""
    return app.test_client()


@pytest.fixture
def sample_form_data():
    """Fixture providing a complete advanced-mode form submission"""
    return {
        'projectType': 'office',
        'cleaningType': 'final',
        'squareFootage': 5000,
        'hasVCT': False,
        'vctSquareFootage': 0,
        'distanceFromOffice': 20,
        'gasPrice': 3.50,
        'applyMarkup': False,
        'numberOfCleaners': 3,
        'urgencyLevel': 1,
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
        'clientName': 'Jane Smith',
        'projectName': 'Suite 200 Buildout',
        'clientEmail': 'jane@example.com',
        'clientPhone': '(336) 555-0142',
        'location': 'Greensboro, NC',
    }


@pytest.fixture
def sample_description(sample_form_data):
    """Fixture providing the sample form as a ProjectDescription"""
    from services.models import ProjectDescription
    return ProjectDescription.from_dict(sample_form_data)


@pytest.fixture
def mock_response():
    """Fixture building fake requests.Response objects"""
    from unittest.mock import Mock

    def build(status_code=200, json_data=None, text=''):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.json.return_value = json_data if json_data is not None else {}
        response.text = text
        return response

    return build
