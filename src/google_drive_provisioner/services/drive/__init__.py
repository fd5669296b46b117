"""Drive client module for Google API integration."""

from .api_service import DriveApiService
from .types import DriveFile, SharedDrive, ResourceKind
from .query_builder import DriveQueryBuilder
from .resolver import ResourceResolver, ResourceMaterializer

__all__ = [
    # Service layer
    "DriveApiService",

    # Data types
    "DriveFile",
    "SharedDrive",
    "ResourceKind",

    # Query builder
    "DriveQueryBuilder",

    # Get-or-create
    "ResourceResolver",
    "ResourceMaterializer",
]
