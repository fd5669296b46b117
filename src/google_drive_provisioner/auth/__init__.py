"""Credential loading, token caching and the OAuth2 authorization-code flow."""

from .auth import (
    get_credentials, get_credentials_from_oauth, get_credentials_from_token,
    get_service_account_credentials, get_credentials_from_file, get_drive_service
)
from .oauth import CodeProvider, ConsoleCodeProvider, StaticCodeProvider, DriveOAuthManager
from .token_cache import TokenCache

__all__ = [
    "get_credentials",
    "get_credentials_from_oauth",
    "get_credentials_from_token",
    "get_service_account_credentials",
    "get_credentials_from_file",
    "get_drive_service",
    "CodeProvider",
    "ConsoleCodeProvider",
    "StaticCodeProvider",
    "DriveOAuthManager",
    "TokenCache",
]
