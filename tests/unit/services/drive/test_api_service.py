import pytest
from unittest.mock import Mock

from google_drive_provisioner.services.drive import DriveApiService
from google_drive_provisioner.services.drive.constants import FOLDER_MIME_TYPE, GOOGLE_DOCS_MIME_TYPE
from google_drive_provisioner.exceptions import DriveError, DrivePermissionError, DriveNotFoundError


@pytest.mark.unit
@pytest.mark.drive
class TestListFiles:
    """Test cases for DriveApiService.list_files."""

    def test_list_files(self, drive_api, mock_drive_service, sample_file_response):
        mock_drive_service.files.return_value.list.return_value.execute.return_value = {
            'files': [sample_file_response]
        }

        files = drive_api.list_files("folder_456", "TEMPLATE", GOOGLE_DOCS_MIME_TYPE)

        assert len(files) == 1
        assert files[0].file_id == "doc_123"
        assert files[0].name == "TEMPLATE"
        assert files[0].web_view_link == "https://docs.google.com/document/d/doc_123/edit"
        mock_drive_service.files.return_value.list.assert_called_once_with(
            q=(
                "trashed = false and "
                "mimeType = 'application/vnd.google-apps.document' and "
                "'folder_456' in parents and "
                "name = 'TEMPLATE'"
            ),
            fields="files(id, name, mimeType, parents, webViewLink)",
            supportsAllDrives=True,
            includeItemsFromAllDrives=True
        )

    def test_list_files_scoped_to_shared_drive(self, mock_drive_service):
        mock_drive_service.files.return_value.list.return_value.execute.return_value = {'files': []}
        api = DriveApiService(mock_drive_service, drive_id="drive_1")

        api.list_files("folder_456", "Team A", FOLDER_MIME_TYPE)

        kwargs = mock_drive_service.files.return_value.list.call_args.kwargs
        assert kwargs['corpora'] == "drive"
        assert kwargs['driveId'] == "drive_1"
        assert kwargs['supportsAllDrives'] is True
        assert kwargs['includeItemsFromAllDrives'] is True

    def test_empty_drive_id_is_not_a_scope(self, mock_drive_service):
        mock_drive_service.files.return_value.list.return_value.execute.return_value = {}
        api = DriveApiService(mock_drive_service, drive_id="")

        assert api.list_files("folder_456", "Team A", FOLDER_MIME_TYPE) == []
        kwargs = mock_drive_service.files.return_value.list.call_args.kwargs
        assert 'corpora' not in kwargs
        assert 'driveId' not in kwargs

    def test_entries_without_id_are_skipped(self, drive_api, mock_drive_service):
        mock_drive_service.files.return_value.list.return_value.execute.return_value = {
            'files': [{'name': 'ghost'}, {'id': 'real', 'name': 'real'}]
        }

        files = drive_api.list_files("p", "real", FOLDER_MIME_TYPE)

        assert [f.file_id for f in files] == ['real']

    @pytest.mark.parametrize("status, error_class", [
        (403, DrivePermissionError),
        (404, DriveNotFoundError),
        (500, DriveError),
    ])
    def test_http_errors(self, drive_api, mock_drive_service, http_error, status, error_class):
        mock_drive_service.files.return_value.list.return_value.execute.side_effect = http_error(status)

        with pytest.raises(error_class):
            drive_api.list_files("folder_456", "TEMPLATE", GOOGLE_DOCS_MIME_TYPE)

    def test_transport_error(self, drive_api, mock_drive_service):
        mock_drive_service.files.return_value.list.return_value.execute.side_effect = OSError("connection reset")

        with pytest.raises(DriveError, match="connection reset"):
            drive_api.list_files("folder_456", "TEMPLATE", GOOGLE_DOCS_MIME_TYPE)


@pytest.mark.unit
@pytest.mark.drive
class TestFileOperations:
    """Test cases for get, create and copy."""

    def test_get_file(self, drive_api, mock_drive_service, sample_file_response):
        mock_drive_service.files.return_value.get.return_value.execute.return_value = sample_file_response

        drive_file = drive_api.get_file("doc_123")

        assert drive_file.file_id == "doc_123"
        assert drive_file.is_google_doc()
        mock_drive_service.files.return_value.get.assert_called_once_with(
            fileId="doc_123",
            supportsAllDrives=True,
            fields="id, name, mimeType, parents, webViewLink"
        )

    def test_get_file_not_found(self, drive_api, mock_drive_service, http_error):
        mock_drive_service.files.return_value.get.return_value.execute.side_effect = http_error(404)

        with pytest.raises(DriveNotFoundError, match="missing_id"):
            drive_api.get_file("missing_id")

    def test_get_web_view_link(self, drive_api, mock_drive_service):
        mock_drive_service.files.return_value.get.return_value.execute.return_value = {
            'id': 'doc_123', 'webViewLink': 'https://docs.google.com/document/d/doc_123/edit'
        }

        assert drive_api.get_web_view_link("doc_123") == "https://docs.google.com/document/d/doc_123/edit"
        assert mock_drive_service.files.return_value.get.call_args.kwargs['fields'] == "id, webViewLink"

    def test_get_web_view_link_missing(self, drive_api, mock_drive_service):
        mock_drive_service.files.return_value.get.return_value.execute.return_value = {'id': 'doc_123'}

        with pytest.raises(DriveError, match="no web view link"):
            drive_api.get_web_view_link("doc_123")

    def test_create_folder(self, drive_api, mock_drive_service, sample_folder_response):
        mock_drive_service.files.return_value.create.return_value.execute.return_value = sample_folder_response

        folder = drive_api.create_folder("root_789", "Team A")

        assert folder.file_id == "folder_456"
        assert folder.is_folder()
        mock_drive_service.files.return_value.create.assert_called_once_with(
            body={
                'name': 'Team A',
                'mimeType': 'application/vnd.google-apps.folder',
                'parents': ['root_789'],
            },
            supportsAllDrives=True,
            fields="id, name, mimeType, parents, webViewLink"
        )

    def test_create_folder_empty_name(self, drive_api, mock_drive_service):
        with pytest.raises(ValueError, match="cannot be empty"):
            drive_api.create_folder("root_789", "   ")

        mock_drive_service.files.return_value.create.assert_not_called()

    def test_create_folder_permission_denied(self, drive_api, mock_drive_service, http_error):
        mock_drive_service.files.return_value.create.return_value.execute.side_effect = http_error(403)

        with pytest.raises(DrivePermissionError, match="creating folder"):
            drive_api.create_folder("root_789", "Team A")

    def test_copy_file(self, drive_api, mock_drive_service, sample_file_response):
        mock_drive_service.files.return_value.copy.return_value.execute.return_value = sample_file_response

        copied = drive_api.copy_file("T0", "folder_456", "TEMPLATE")

        assert copied.file_id == "doc_123"
        mock_drive_service.files.return_value.copy.assert_called_once_with(
            fileId="T0",
            body={
                'name': 'TEMPLATE',
                'mimeType': 'application/vnd.google-apps.document',
                'parents': ['folder_456'],
            },
            supportsAllDrives=True,
            fields="id, name, mimeType, parents, webViewLink"
        )

    def test_copy_file_template_missing(self, drive_api, mock_drive_service, http_error):
        mock_drive_service.files.return_value.copy.return_value.execute.side_effect = http_error(404)

        with pytest.raises(DriveNotFoundError, match="T0"):
            drive_api.copy_file("T0", "folder_456", "TEMPLATE")


@pytest.mark.unit
@pytest.mark.drive
class TestListings:
    """Test cases for list_drives and list_all_files."""

    def test_list_drives(self, drive_api, mock_drive_service):
        mock_drive_service.drives.return_value.list.return_value.execute.return_value = {
            'drives': [{'id': 'drive_1', 'name': 'Engineering'}, {'id': 'drive_2', 'name': 'Ops'}]
        }

        drives = drive_api.list_drives()

        assert [d.drive_id for d in drives] == ['drive_1', 'drive_2']
        assert drives[0].name == 'Engineering'
        mock_drive_service.drives.return_value.list.assert_called_once_with(fields="drives(id, name)")

    def test_list_drives_error(self, drive_api, mock_drive_service, http_error):
        mock_drive_service.drives.return_value.list.return_value.execute.side_effect = http_error(500)

        with pytest.raises(DriveError, match="listing drives"):
            drive_api.list_drives()

    def test_list_all_files(self, mock_drive_service, sample_file_response, sample_folder_response):
        mock_drive_service.files.return_value.list.return_value.execute.return_value = {
            'files': [sample_file_response, sample_folder_response]
        }
        api = DriveApiService(mock_drive_service, drive_id="drive_1")

        files = api.list_all_files()

        assert len(files) == 2
        kwargs = mock_drive_service.files.return_value.list.call_args.kwargs
        assert 'q' not in kwargs
        assert kwargs['driveId'] == "drive_1"
