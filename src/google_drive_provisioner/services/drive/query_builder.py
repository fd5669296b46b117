from typing import Optional, List
import logging

from .utils import escape_query_value

logger = logging.getLogger(__name__)


class DriveQueryBuilder:
    """
    Builder pattern for constructing Drive ``q`` search strings with a fluent API.

    Example usage:
        q = (DriveQueryBuilder()
            .not_trashed()
            .mime_type("application/vnd.google-apps.folder")
            .in_parent("folder_id")
            .name_equals("Team A")
            .build())
    """

    def __init__(self):
        self._clauses: List[str] = []

    def not_trashed(self) -> "DriveQueryBuilder":
        """
        Exclude files in the trash.
        Returns:
            Self for method chaining
        """
        self._clauses.append("trashed = false")
        return self

    def mime_type(self, mime_type: str) -> "DriveQueryBuilder":
        """
        Match files with exactly this MIME type.
        Args:
            mime_type: The MIME type to match
        Returns:
            Self for method chaining
        """
        self._clauses.append(f"mimeType = '{escape_query_value(mime_type)}'")
        return self

    def in_parent(self, parent_id: str) -> "DriveQueryBuilder":
        """
        Match files whose parents include this folder.
        Args:
            parent_id: The parent folder id
        Returns:
            Self for method chaining
        """
        self._clauses.append(f"'{escape_query_value(parent_id)}' in parents")
        return self

    def name_equals(self, name: str) -> "DriveQueryBuilder":
        """
        Match files with exactly this name.
        Args:
            name: The file name
        Returns:
            Self for method chaining
        """
        self._clauses.append(f"name = '{escape_query_value(name)}'")
        return self

    def build(self) -> Optional[str]:
        """
        Join the clauses into a query string.
        Returns:
            The query, or None when no clause was added
        """
        if not self._clauses:
            return None
        query = " and ".join(self._clauses)
        logger.debug("Built Drive query with %d clauses", len(self._clauses))
        return query


def build_child_query(parent_id: str, name: str, mime_type: str) -> str:
    """Query for non-trashed files of one MIME type named ``name`` directly under ``parent_id``."""
    return (DriveQueryBuilder()
            .not_trashed()
            .mime_type(mime_type)
            .in_parent(parent_id)
            .name_equals(name)
            .build())
