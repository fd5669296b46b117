from typing import Optional, List, Any, Dict
import logging

from googleapiclient.errors import HttpError

from ...utils.log_sanitizer import sanitize_for_logging
from ...exceptions import DriveError, DrivePermissionError, DriveNotFoundError
from .types import DriveFile, SharedDrive
from . import utils
from .constants import (
    FOLDER_MIME_TYPE, GOOGLE_DOCS_MIME_TYPE, FILE_FIELDS, LIST_FILE_FIELDS,
    CREATED_FILE_FIELDS, DRIVE_LIST_FIELDS, CORPORA_DRIVE
)
from .query_builder import build_child_query

logger = logging.getLogger(__name__)


def _raise_for_http_error(e: HttpError, action: str, resource_id: Optional[str] = None):
    status = e.resp.status if e.resp is not None else None
    target = f" {resource_id}" if resource_id else ""
    if status == 403:
        raise DrivePermissionError(f"Permission denied while {action}{target}: {e}") from e
    if status == 404:
        raise DriveNotFoundError(f"Drive resource not found while {action}{target}: {e}") from e
    raise DriveError(f"Drive API error while {action}: {e}") from e


class DriveApiService:
    """
    Service layer for Drive API operations.

    Every request supports shared drives. When a drive id is configured, list
    queries are scoped to that shared drive.
    """

    def __init__(self, service: Any, drive_id: Optional[str] = None):
        """
        Initialize Drive service.

        Args:
            service: The Drive API service instance
            drive_id: Shared drive to scope list queries to
        """
        self._service = service
        self.drive_id = drive_id or None

    def _list_params(self) -> Dict[str, Any]:
        request_params = {
            'supportsAllDrives': True,
            'includeItemsFromAllDrives': True,
        }
        if self.drive_id:
            request_params['corpora'] = CORPORA_DRIVE
            request_params['driveId'] = self.drive_id
        return request_params

    def list_files(self, parent_id: str, name: str, mime_type: str) -> List[DriveFile]:
        """
        Lists non-trashed files of one MIME type named exactly ``name`` directly under a folder.

        Only the first page of results is read.

        Args:
            parent_id: The parent folder id.
            name: The exact file name.
            mime_type: The MIME type to match.

        Returns:
            A list of DriveFile objects, possibly empty.
        """
        query = build_child_query(parent_id, name, mime_type)
        sanitized = sanitize_for_logging(parent_id=parent_id, query=query)
        logger.info("Listing files in parent_id=%s with query=%s", sanitized['parent_id'], sanitized['query'])

        try:
            result = self._service.files().list(
                q=query,
                fields=LIST_FILE_FIELDS,
                **self._list_params()
            ).execute()
        except HttpError as e:
            _raise_for_http_error(e, "listing files", parent_id)
        except Exception as e:
            raise DriveError(f"Unexpected error listing files: {e}") from e

        files = utils.parse_files(result.get('files', []))
        logger.info("Found %d matching files", len(files))
        return files

    def get_file(self, file_id: str, fields: str = FILE_FIELDS) -> DriveFile:
        """
        Retrieves metadata for a single file.

        Args:
            file_id: The file id.
            fields: Field selector for the response.

        Returns:
            A DriveFile object.
        """
        logger.info("Retrieving file %s", sanitize_for_logging(file_id=file_id)['file_id'])

        try:
            file_data = self._service.files().get(
                fileId=file_id,
                supportsAllDrives=True,
                fields=fields
            ).execute()
        except HttpError as e:
            _raise_for_http_error(e, "getting file", file_id)
        except Exception as e:
            raise DriveError(f"Unexpected error getting file: {e}") from e

        return utils.from_google_file(file_data)

    def get_web_view_link(self, file_id: str) -> str:
        """Returns the link that opens the file in the Drive web interface."""
        drive_file = self.get_file(file_id, fields="id, webViewLink")
        if not drive_file.web_view_link:
            raise DriveError(f"File {file_id} has no web view link")
        return drive_file.web_view_link

    def create_folder(self, parent_id: str, name: str) -> DriveFile:
        """
        Creates an empty folder.

        Args:
            parent_id: The folder to create it in.
            name: Name of the new folder.

        Returns:
            A DriveFile object for the created folder.
        """
        utils.validate_name(name)
        sanitized = sanitize_for_logging(name=name, parent_id=parent_id)
        logger.info("Creating folder name=%s in parent_id=%s", sanitized['name'], sanitized['parent_id'])

        try:
            created = self._service.files().create(
                body=utils.create_file_body(name, FOLDER_MIME_TYPE, parent_id),
                supportsAllDrives=True,
                fields=CREATED_FILE_FIELDS
            ).execute()
        except HttpError as e:
            _raise_for_http_error(e, "creating folder", parent_id)
        except Exception as e:
            raise DriveError(f"Unexpected error creating folder: {e}") from e

        logger.info("Folder created with ID: %s", sanitize_for_logging(id=created.get('id'))['id'])
        return utils.from_google_file(created)

    def copy_file(
            self,
            template_id: str,
            parent_id: str,
            name: str,
            mime_type: str = GOOGLE_DOCS_MIME_TYPE
    ) -> DriveFile:
        """
        Copies a file into a folder under a new name.

        Args:
            template_id: The file to copy.
            parent_id: The folder to place the copy in.
            name: Name of the copy.
            mime_type: MIME type of the copy.

        Returns:
            A DriveFile object for the copy.
        """
        utils.validate_name(name)
        sanitized = sanitize_for_logging(template_id=template_id, name=name, parent_id=parent_id)
        logger.info(
            "Copying template_id=%s to name=%s in parent_id=%s",
            sanitized['template_id'], sanitized['name'], sanitized['parent_id']
        )

        try:
            copied = self._service.files().copy(
                fileId=template_id,
                body=utils.create_file_body(name, mime_type, parent_id),
                supportsAllDrives=True,
                fields=CREATED_FILE_FIELDS
            ).execute()
        except HttpError as e:
            _raise_for_http_error(e, "copying file", template_id)
        except Exception as e:
            raise DriveError(f"Unexpected error copying file: {e}") from e

        logger.info("File copied with ID: %s", sanitize_for_logging(id=copied.get('id'))['id'])
        return utils.from_google_file(copied)

    def list_drives(self) -> List[SharedDrive]:
        """
        Lists the shared drives visible to the caller (first page only).

        Returns:
            A list of SharedDrive objects.
        """
        logger.info("Fetching shared drives")

        try:
            result = self._service.drives().list(fields=DRIVE_LIST_FIELDS).execute()
        except HttpError as e:
            _raise_for_http_error(e, "listing drives")
        except Exception as e:
            raise DriveError(f"Unexpected error listing drives: {e}") from e

        drives = [utils.from_google_drive(drive) for drive in result.get('drives', [])]
        logger.info("Retrieved %d shared drives", len(drives))
        return drives

    def list_all_files(self) -> List[DriveFile]:
        """
        Lists every file visible to the caller (first page only).

        Returns:
            A list of DriveFile objects.
        """
        logger.info("Fetching all visible files")

        try:
            result = self._service.files().list(
                fields=LIST_FILE_FIELDS,
                **self._list_params()
            ).execute()
        except HttpError as e:
            _raise_for_http_error(e, "listing files")
        except Exception as e:
            raise DriveError(f"Unexpected error listing files: {e}") from e

        files = utils.parse_files(result.get('files', []))
        logger.info("Retrieved %d files", len(files))
        return files
