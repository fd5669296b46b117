from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .constants import FOLDER_MIME_TYPE, GOOGLE_DOCS_MIME_TYPE


class ResourceKind(Enum):
    """Kinds of resource the resolver can look up, keyed by their Drive MIME type."""
    FOLDER = FOLDER_MIME_TYPE
    DOCUMENT = GOOGLE_DOCS_MIME_TYPE

    @property
    def mime_type(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "ResourceKind":
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(
                f"Invalid resource kind: {label}. Must be one of: {', '.join(k.label for k in cls)}"
            )


@dataclass
class DriveFile:
    """
    Represents a file in Google Drive.
    Args:
        file_id: The unique identifier for the file.
        name: The name of the file.
        mime_type: The MIME type of the file.
        parents: List of parent folder IDs.
        web_view_link: Link to view the file in Drive web interface.
    """
    file_id: Optional[str] = None
    name: Optional[str] = None
    mime_type: Optional[str] = None
    parents: List[str] = field(default_factory=list)
    web_view_link: Optional[str] = None

    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    def is_google_doc(self) -> bool:
        return self.mime_type == GOOGLE_DOCS_MIME_TYPE

    def to_dict(self) -> dict:
        """
        Converts the DriveFile instance to a dictionary representation.
        Returns:
            A dictionary containing the file data.
        """
        result = {}
        if self.file_id:
            result["id"] = self.file_id
        if self.name:
            result["name"] = self.name
        if self.mime_type:
            result["mimeType"] = self.mime_type
        if self.parents:
            result["parents"] = self.parents
        if self.web_view_link:
            result["webViewLink"] = self.web_view_link
        return result

    def __str__(self):
        return f"{self.name} ({self.file_id})"

    def __repr__(self):
        return f"DriveFile(id={self.file_id!r}, name={self.name!r}, mime_type={self.mime_type!r})"


@dataclass
class SharedDrive:
    """
    Represents a shared drive.
    Args:
        drive_id: The unique identifier for the drive. Also the id of its root folder.
        name: The name of the drive.
    """
    drive_id: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> dict:
        result = {}
        if self.drive_id:
            result["id"] = self.drive_id
        if self.name:
            result["name"] = self.name
        return result

    def __str__(self):
        return f"[Drive] {self.name} ({self.drive_id})"
