"""Find-or-create folders and documents in Google Drive."""

from .config import DriveConfig
from .drive_client import DriveClient
from .incident import IncidentLayout, ProvisionResult
from .services.drive import DriveApiService, ResourceResolver, ResourceMaterializer, ResourceKind

__version__ = "0.1.0"

__all__ = [
    "DriveConfig",
    "DriveClient",
    "IncidentLayout",
    "ProvisionResult",
    "DriveApiService",
    "ResourceResolver",
    "ResourceMaterializer",
    "ResourceKind",
]
