"""
Configured entry point to the Drive provisioner.

Bundles the credentials, the Drive service layer, the resolver and the incident
layout so callers only deal with one object.
"""

from typing import Optional

from .auth.auth import get_credentials, get_drive_service
from .auth.oauth import CodeProvider
from .config import DriveConfig
from .incident import IncidentLayout
from .services.drive import DriveApiService, ResourceResolver


class DriveClient:
    """
    Client for one authenticated identity and one configuration.

    Usage Examples:
        client = DriveClient.from_config(DriveConfig.from_env())
        folder_id = client.resolver.get_or_create_folder(parent_id, "Team A")
        result = client.incidents.provision("Team A", "Outage 2024-05-01")
    """

    def __init__(self, credentials, config: Optional[DriveConfig] = None):
        """
        Initialize the client with credentials.

        Args:
            credentials: google.auth credentials for this identity
            config: Runtime configuration
        """
        self._credentials = credentials
        self.config = config or DriveConfig()
        self._drive = None
        self._resolver = None

    @classmethod
    def from_config(cls, config: DriveConfig, code_provider: Optional[CodeProvider] = None) -> "DriveClient":
        """
        Authenticate with the method selected in ``config``.

        Args:
            config: Runtime configuration
            code_provider: Authorization code source for the OAuth method

        Returns:
            DriveClient instance
        """
        credentials = get_credentials(config, code_provider)
        return cls(credentials, config)

    @property
    def drive(self) -> DriveApiService:
        """Drive service layer for this identity."""
        if self._drive is None:
            self._drive = DriveApiService(get_drive_service(self._credentials), self.config.drive_id)
        return self._drive

    @property
    def resolver(self) -> ResourceResolver:
        if self._resolver is None:
            self._resolver = ResourceResolver(self.drive)
        return self._resolver

    @property
    def incidents(self) -> IncidentLayout:
        return IncidentLayout(self.resolver, self.config)
