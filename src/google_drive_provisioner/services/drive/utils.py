import re
from typing import Optional, List, Dict, Any
import logging

from .types import DriveFile, SharedDrive

logger = logging.getLogger(__name__)


def escape_query_value(value: str) -> str:
    """
    Escape a string for use inside a single-quoted Drive query literal.

    Args:
        value: The raw string

    Returns:
        The string with backslashes and single quotes escaped
    """
    if value is None:
        return ""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def validate_name(name: Optional[str], field_name: str = "name") -> str:
    """Validates a resource name and returns it unchanged."""
    if not name or not name.strip():
        raise ValueError(f"{field_name} cannot be empty")
    if re.search(r'[\x00-\x1f\x7f]', name):
        raise ValueError(f"{field_name} cannot contain control characters")
    return name


def from_google_file(google_file: Dict[str, Any]) -> DriveFile:
    """
    Create a DriveFile instance from a Drive API file resource.

    Args:
        google_file: Dictionary containing file data from the Drive API

    Returns:
        DriveFile instance populated with the data from the dictionary
    """
    return DriveFile(
        file_id=google_file.get('id'),
        name=google_file.get('name'),
        mime_type=google_file.get('mimeType'),
        parents=list(google_file.get('parents', [])),
        web_view_link=google_file.get('webViewLink')
    )


def from_google_drive(google_drive: Dict[str, Any]) -> SharedDrive:
    """Create a SharedDrive instance from a Drive API drive resource."""
    return SharedDrive(
        drive_id=google_drive.get('id'),
        name=google_drive.get('name')
    )


def create_file_body(name: str, mime_type: str, parent_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the request body for creating or copying a file.

    Args:
        name: Name of the new file
        mime_type: MIME type of the new file
        parent_id: Folder to place the file in

    Returns:
        Request body for files().create / files().copy
    """
    body = {
        'name': name,
        'mimeType': mime_type,
    }
    if parent_id:
        body['parents'] = [parent_id]
    return body


def parse_files(google_files: List[Dict[str, Any]]) -> List[DriveFile]:
    """Parse a list of file resources, skipping entries without an id."""
    files = []
    for google_file in google_files:
        if not google_file.get('id'):
            logger.warning("Skipping file resource without id: %s", google_file.get('name'))
            continue
        files.append(from_google_file(google_file))
    return files
