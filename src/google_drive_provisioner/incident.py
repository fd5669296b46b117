"""
Post-incident review folder layout.

    <root parent>/
        Post Incident Review/          (must exist)
            TEMPLATE                   (base template, must exist)
            <team>/                    (created when absent)
                TEMPLATE               (copied from the base template when absent)
                <incident>             (copied from the team template when absent)
"""

import logging
from dataclasses import dataclass

from .config import DriveConfig
from .services.drive.resolver import ResourceResolver
from .utils.log_sanitizer import sanitize_for_logging

logger = logging.getLogger(__name__)


@dataclass
class ProvisionResult:
    """
    Identifiers produced by one provisioning run.
    Args:
        review_folder_id: The review root folder.
        base_template_id: The base template document in the review root.
        team_folder_id: The team's folder.
        team_template_id: The team's copy of the template.
        post_mortem_id: The incident post-mortem document.
        post_mortem_link: Web link to the post-mortem document.
    """
    review_folder_id: str
    base_template_id: str
    team_folder_id: str
    team_template_id: str
    post_mortem_id: str
    post_mortem_link: str

    def to_dict(self) -> dict:
        return {
            "review_folder_id": self.review_folder_id,
            "base_template_id": self.base_template_id,
            "team_folder_id": self.team_folder_id,
            "team_template_id": self.team_template_id,
            "post_mortem_id": self.post_mortem_id,
            "post_mortem_link": self.post_mortem_link,
        }


class IncidentLayout:
    """Resolves or creates the folders and documents for one incident post-mortem."""

    def __init__(self, resolver: ResourceResolver, config: DriveConfig):
        self._resolver = resolver
        self._config = config

    def provision(self, team_name: str, incident_name: str) -> ProvisionResult:
        """
        Make sure the team folder, the team template and the post-mortem document exist.

        Args:
            team_name: Name of the team folder.
            incident_name: Name of the post-mortem document.

        Returns:
            ProvisionResult with every id and the post-mortem link.
        """
        if not team_name or not team_name.strip():
            raise ValueError("Team name cannot be empty")
        if not incident_name or not incident_name.strip():
            raise ValueError("Incident name cannot be empty")

        sanitized = sanitize_for_logging(team_name=team_name, incident_name=incident_name)
        logger.info("Provisioning post-mortem %s for team %s", sanitized['incident_name'], sanitized['team_name'])

        review_folder_id = self._resolver.resolve_folder(
            self._config.effective_root_parent_id, self._config.root_folder_name
        )
        base_template_id = self._resolver.resolve_document(review_folder_id, self._config.template_name)

        team_folder_id = self._resolver.get_or_create_folder(review_folder_id, team_name)
        team_template_id = self._resolver.get_or_create_document(
            team_folder_id, base_template_id, self._config.template_name
        )
        post_mortem_id = self._resolver.get_or_create_document(team_folder_id, team_template_id, incident_name)

        post_mortem_link = self._resolver.api.get_web_view_link(post_mortem_id)

        return ProvisionResult(
            review_folder_id=review_folder_id,
            base_template_id=base_template_id,
            team_folder_id=team_folder_id,
            team_template_id=team_template_id,
            post_mortem_id=post_mortem_id,
            post_mortem_link=post_mortem_link,
        )
