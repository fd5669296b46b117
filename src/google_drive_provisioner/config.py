"""
Runtime configuration for the Drive provisioner.

Defaults live in module constants and can be overridden with environment
variables. Command-line options override both.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional, List

from .exceptions import ValidationError

# Scopes for the Drive API
DRIVE_APPDATA_SCOPE = "https://www.googleapis.com/auth/drive.appdata"
DRIVE_SCOPE = "https://www.googleapis.com/auth/drive"
DRIVE_FILE_SCOPE = "https://www.googleapis.com/auth/drive.file"

SCOPES = [
    DRIVE_APPDATA_SCOPE,
    DRIVE_SCOPE,
    DRIVE_FILE_SCOPE,
]

CREDENTIALS_PATH = "credentials.json"
CLIENT_SECRETS_PATH = "oauth.json"
TOKEN_PATH = "token.json"

AUTH_METHOD_OAUTH = "oauth"
AUTH_METHOD_TOKEN = "token"
AUTH_METHOD_SERVICE_ACCOUNT = "service_account"
AUTH_METHOD_DEFAULT = "default"
AUTH_METHODS = (
    AUTH_METHOD_OAUTH,
    AUTH_METHOD_TOKEN,
    AUTH_METHOD_SERVICE_ACCOUNT,
    AUTH_METHOD_DEFAULT,
)

# Out-of-band redirect, used only when the client secrets list no redirect URIs.
DEFAULT_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"

# "root" is the Drive API alias for the caller's My Drive root folder.
MY_DRIVE_ROOT_ID = "root"
DEFAULT_ROOT_FOLDER_NAME = "Post Incident Review"
DEFAULT_TEMPLATE_NAME = "TEMPLATE"


def _split_scopes(value: Optional[str]) -> List[str]:
    if not value:
        return list(SCOPES)
    return [scope.strip() for scope in value.split(",") if scope.strip()]


@dataclass
class DriveConfig:
    """
    Settings shared by the credential loader, the Drive service and the incident layout.

    Args:
        credentials_path: Service account or generic Google credentials file.
        client_secrets_path: OAuth client secrets file used by the authorization-code flow.
        token_path: Cached user token file.
        auth_method: One of AUTH_METHODS.
        scopes: OAuth scopes to request.
        drive_id: Shared drive to scope queries to. None searches everything visible.
        root_parent_id: Folder holding the review root. Defaults to the shared drive root,
            or My Drive when no drive is configured.
        root_folder_name: Name of the review root folder.
        template_name: Name of the base template document.
        redirect_uri: Redirect URI override. None uses the first redirect URI in the client secrets.
    """
    credentials_path: str = CREDENTIALS_PATH
    client_secrets_path: str = CLIENT_SECRETS_PATH
    token_path: str = TOKEN_PATH
    auth_method: str = AUTH_METHOD_OAUTH
    scopes: List[str] = field(default_factory=lambda: list(SCOPES))
    drive_id: Optional[str] = None
    root_parent_id: Optional[str] = None
    root_folder_name: str = DEFAULT_ROOT_FOLDER_NAME
    template_name: str = DEFAULT_TEMPLATE_NAME
    redirect_uri: Optional[str] = None

    def __post_init__(self):
        if self.auth_method not in AUTH_METHODS:
            raise ValidationError(
                f"Invalid auth method: {self.auth_method}. Must be one of: {', '.join(AUTH_METHODS)}"
            )
        if not self.scopes:
            raise ValidationError("At least one scope is required")
        # An empty drive id means "no shared drive", not a drive named ''.
        if not self.drive_id:
            self.drive_id = None

    @classmethod
    def from_env(cls) -> "DriveConfig":
        """
        Build a configuration from environment variables, falling back to the module defaults.

        Returns:
            DriveConfig instance
        """
        return cls(
            credentials_path=os.getenv("GOOGLE_CREDENTIALS_PATH", CREDENTIALS_PATH),
            client_secrets_path=os.getenv("GOOGLE_CLIENT_SECRETS_PATH", CLIENT_SECRETS_PATH),
            token_path=os.getenv("GOOGLE_TOKEN_PATH", TOKEN_PATH),
            auth_method=os.getenv("GOOGLE_AUTH_METHOD", AUTH_METHOD_OAUTH),
            scopes=_split_scopes(os.getenv("GOOGLE_DRIVE_SCOPES")),
            drive_id=os.getenv("GOOGLE_DRIVE_ID") or None,
            root_parent_id=os.getenv("DRIVE_ROOT_PARENT_ID") or None,
            root_folder_name=os.getenv("DRIVE_ROOT_FOLDER_NAME", DEFAULT_ROOT_FOLDER_NAME),
            template_name=os.getenv("DRIVE_TEMPLATE_NAME", DEFAULT_TEMPLATE_NAME),
            redirect_uri=os.getenv("DRIVE_REDIRECT_URI") or None,
        )

    def with_overrides(self, **overrides) -> "DriveConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    @property
    def effective_root_parent_id(self) -> str:
        """Folder id under which the review root folder is looked up."""
        if self.root_parent_id:
            return self.root_parent_id
        # A shared drive's id doubles as the id of its root folder.
        if self.drive_id:
            return self.drive_id
        return MY_DRIVE_ROOT_ID
