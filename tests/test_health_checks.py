"""
Tests for health check endpoints
"""
import pytest
import time
from unittest.mock import Mock, patch
import psutil
from health_checks import (
    get_system_metrics,
    get_uptime,
    check_integrations,
    check_filesystem,
    SERVICE_NAME,
)


@pytest.mark.unit
class TestSystemMetrics:
    """Tests for system metrics collection"""

    def test_get_system_metrics_returns_dict(self):
        metrics = get_system_metrics()
        assert isinstance(metrics, dict)

    def test_system_metrics_has_memory_info(self):
        metrics = get_system_metrics()
        if metrics:
            assert 'cpu_percent' in metrics
            assert 'memory_mb' in metrics
            assert 'memory_percent' in metrics

    @patch('health_checks.psutil.Process')
    def test_system_metrics_handles_errors(self, mock_process):
        """Test that get_system_metrics returns an empty dict when psutil fails"""
        mock_process.side_effect = psutil.Error("Test error")
        metrics = get_system_metrics()
        assert metrics == {}


@pytest.mark.unit
class TestUptime:
    """Tests for uptime calculation"""

    def test_uptime_has_required_fields(self):
        uptime = get_uptime()
        assert 'uptime_seconds' in uptime
        assert 'uptime_hours' in uptime
        assert 'started_at' in uptime

    def test_uptime_increases_over_time(self):
        uptime1 = get_uptime()
        time.sleep(0.05)
        uptime2 = get_uptime()
        assert uptime2['uptime_seconds'] > uptime1['uptime_seconds']


@pytest.mark.unit
class TestIntegrationsCheck:
    """Tests for integration availability check"""

    def test_check_integrations_with_all_keys(self):
        mock_app = Mock()
        mock_app.config = {
            'RESEND_API_KEY': 'key',
            'GHL_API_KEY': 'key',
            'GHL_LOCATION_ID': 'loc',
            'OPENAI_API_KEY': 'key',
        }

        integrations = check_integrations(mock_app)

        assert integrations == {'resend_email': True, 'gohighlevel': True, 'openai': True}

    def test_check_integrations_with_no_keys(self):
        mock_app = Mock()
        mock_app.config = {}

        integrations = check_integrations(mock_app)

        assert not any(integrations.values())

    def test_gohighlevel_needs_location_id(self):
        """Test that a GHL key without a location id is not usable"""
        mock_app = Mock()
        mock_app.config = {'GHL_API_KEY': 'key'}

        assert check_integrations(mock_app)['gohighlevel'] is False


@pytest.mark.unit
class TestFilesystemCheck:
    """Tests for filesystem availability check"""

    def _app(self, tmp_path):
        mock_app = Mock()
        mock_app.config = {
            'OUTPUT_FOLDER': str(tmp_path / 'outputs'),
            'SESSION_DATA_FOLDER': str(tmp_path / 'session_data'),
        }
        return mock_app

    def test_check_filesystem_directory_missing(self, tmp_path):
        mock_app = self._app(tmp_path)

        filesystem = check_filesystem(mock_app)

        status = filesystem[mock_app.config['OUTPUT_FOLDER']]
        assert status['exists'] is False
        assert status['healthy'] is False

    def test_check_filesystem_healthy_directory(self, tmp_path):
        mock_app = self._app(tmp_path)
        (tmp_path / 'session_data').mkdir()

        filesystem = check_filesystem(mock_app)

        status = filesystem[mock_app.config['SESSION_DATA_FOLDER']]
        assert status == {'exists': True, 'writable': True, 'healthy': True}

    @patch('health_checks.os.access')
    def test_check_filesystem_directory_not_writable(self, mock_access, tmp_path):
        mock_access.return_value = False
        mock_app = self._app(tmp_path)
        (tmp_path / 'outputs').mkdir()

        filesystem = check_filesystem(mock_app)

        status = filesystem[mock_app.config['OUTPUT_FOLDER']]
        assert status['exists'] is True
        assert status['writable'] is False
        assert status['healthy'] is False


@pytest.mark.integration
class TestHealthCheckEndpoints:
    """Integration tests for health check endpoints"""

    def test_health_endpoint_returns_200(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200
        data = response.get_json()
        assert data['status'] == 'healthy'
        assert data['service'] == SERVICE_NAME
        assert 'timestamp' in data

    def test_ping_endpoint_returns_pong(self, client):
        response = client.get('/api/ping')
        assert response.status_code == 200
        assert response.data == b'pong'

    def test_ready_endpoint_is_ready_with_directories(self, client):
        """Test that the app factory creates everything readiness needs"""
        response = client.get('/api/ready')
        data = response.get_json()
        assert response.status_code == 200
        assert data['status'] == 'ready'
        assert data['checks']['filesystem_healthy'] is True
        assert 'integrations' in data['checks']

    def test_ready_endpoint_reports_missing_openai(self, client):
        data = client.get('/api/ready').get_json()
        assert data['checks']['integrations']['openai'] is False
        assert data['checks']['integrations']['resend_email'] is True

    def test_ready_endpoint_unready_without_session_folder(self, app, client, tmp_path):
        app.config['SESSION_DATA_FOLDER'] = str(tmp_path / 'missing')
        response = client.get('/api/ready')
        assert response.status_code == 503
        assert response.get_json()['status'] == 'not_ready'

    def test_metrics_endpoint_has_uptime_and_version(self, client):
        response = client.get('/api/metrics')
        assert response.status_code == 200
        data = response.get_json()
        assert 'uptime_seconds' in data['uptime']
        assert data['version']
        assert 'integrations' in data
