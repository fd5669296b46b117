"""
Get-or-create resolution of folders and documents.

A lookup is one list query scoped to a parent folder, filtered by exact name
and kind. The number of matches decides the outcome:

    0  -> ResourceNotFoundError
    1  -> the id of the match
    >1 -> AmbiguousResourceError

Get-or-create only materializes a new resource on ResourceNotFoundError.
Ambiguity always propagates and nothing is created.
"""

import logging
from typing import Optional

from ...exceptions import ResourceNotFoundError, AmbiguousResourceError
from ...utils.log_sanitizer import sanitize_for_logging
from .api_service import DriveApiService
from .types import ResourceKind

logger = logging.getLogger(__name__)


class ResourceMaterializer:
    """Creates the resources the resolver could not find. It never updates existing ones."""

    def __init__(self, api: DriveApiService):
        self._api = api

    def create_folder(self, parent_id: str, name: str) -> str:
        """Create an empty folder and return its id."""
        return self._api.create_folder(parent_id, name).file_id

    def copy_document(self, template_id: str, parent_id: str, name: str) -> str:
        """Copy a template document into ``parent_id`` as ``name`` and return the copy's id."""
        return self._api.copy_file(template_id, parent_id, name, ResourceKind.DOCUMENT.mime_type).file_id


class ResourceResolver:
    """
    Maps (parent, name, kind) to the single matching resource id.
    """

    def __init__(self, api: DriveApiService, materializer: Optional[ResourceMaterializer] = None):
        self._api = api
        self._materializer = materializer or ResourceMaterializer(api)

    @property
    def api(self) -> DriveApiService:
        return self._api

    def resolve(self, parent_id: str, name: str, kind: ResourceKind) -> str:
        """
        Find the unique resource of ``kind`` named ``name`` directly under ``parent_id``.

        Args:
            parent_id: The parent folder id.
            name: The exact resource name.
            kind: Folder or document.

        Returns:
            The id of the matching resource.

        Raises:
            ResourceNotFoundError: No resource matches.
            AmbiguousResourceError: More than one resource matches.
        """
        matches = self._api.list_files(parent_id, name, kind.mime_type)
        label = "folder" if kind is ResourceKind.FOLDER else "file"

        if len(matches) == 0:
            raise ResourceNotFoundError(
                f"The {label} {name} is not present in the drive",
                parent_id=parent_id, name=name
            )
        if len(matches) > 1:
            raise AmbiguousResourceError(
                f"The {label} {name} is present in the drive more than once",
                parent_id=parent_id, name=name,
                matches=[match.file_id for match in matches]
            )

        resource_id = matches[0].file_id
        sanitized = sanitize_for_logging(name=name, resource_id=resource_id)
        logger.info("Resolved %s %s to %s", kind.label, sanitized['name'], sanitized['resource_id'])
        return resource_id

    def resolve_folder(self, parent_id: str, name: str) -> str:
        return self.resolve(parent_id, name, ResourceKind.FOLDER)

    def resolve_document(self, parent_id: str, name: str) -> str:
        return self.resolve(parent_id, name, ResourceKind.DOCUMENT)

    def get_or_create_folder(self, parent_id: str, name: str) -> str:
        """
        Return the id of folder ``name`` under ``parent_id``, creating it when absent.
        """
        try:
            return self.resolve_folder(parent_id, name)
        except ResourceNotFoundError:
            logger.info("Folder %s not found, creating it", sanitize_for_logging(name=name)['name'])
            return self._materializer.create_folder(parent_id, name)

    def get_or_create_document(self, parent_id: str, template_id: str, name: str) -> str:
        """
        Return the id of document ``name`` under ``parent_id``, copying ``template_id`` when absent.
        """
        try:
            return self.resolve_document(parent_id, name)
        except ResourceNotFoundError:
            logger.info("Document %s not found, copying template", sanitize_for_logging(name=name)['name'])
            return self._materializer.copy_document(template_id, parent_id, name)
