import pytest
import sys
import json
from pathlib import Path
from unittest.mock import Mock

import httplib2
from googleapiclient.errors import HttpError

# Add the source root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


def make_http_error(status: int, message: str = "boom") -> HttpError:
    """Build an HttpError as raised by googleapiclient for the given status."""
    resp = httplib2.Response({"status": status})
    resp.reason = message
    content = json.dumps({"error": {"code": status, "message": message}}).encode("utf-8")
    return HttpError(resp, content)


@pytest.fixture
def http_error():
    """Factory fixture for googleapiclient HttpError instances."""
    return make_http_error


@pytest.fixture
def mock_drive_service():
    """Mock Drive API service for testing."""
    mock_service = Mock()
    mock_files = Mock()
    mock_drives = Mock()
    mock_service.files.return_value = mock_files
    mock_service.drives.return_value = mock_drives
    return mock_service


@pytest.fixture
def drive_api(mock_drive_service):
    """DriveApiService backed by the mock Drive service."""
    from google_drive_provisioner.services.drive import DriveApiService
    return DriveApiService(mock_drive_service)


@pytest.fixture
def sample_file_response():
    """Sample Drive API file resource."""
    return {
        "id": "doc_123",
        "name": "TEMPLATE",
        "mimeType": "application/vnd.google-apps.document",
        "parents": ["folder_456"],
        "webViewLink": "https://docs.google.com/document/d/doc_123/edit"
    }


@pytest.fixture
def sample_folder_response():
    """Sample Drive API folder resource."""
    return {
        "id": "folder_456",
        "name": "Team A",
        "mimeType": "application/vnd.google-apps.folder",
        "parents": ["root_789"],
        "webViewLink": "https://drive.google.com/drive/folders/folder_456"
    }


@pytest.fixture
def sample_token_info():
    """Token data in the format written by Credentials.to_json()."""
    return {
        "token": "mock_token",
        "refresh_token": "mock_refresh_token",
        "token_uri": "https://oauth2.googleapis.com/token",
        "client_id": "mock_client_id",
        "client_secret": "mock_client_secret",
        "scopes": ["https://www.googleapis.com/auth/drive"],
        "expiry": "2099-01-01T00:00:00Z"
    }


@pytest.fixture
def sample_client_config():
    """Sample OAuth client secrets (installed application)."""
    return {
        "installed": {
            "client_id": "mock_client_id",
            "client_secret": "mock_client_secret",
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": ["http://localhost"]
        }
    }
