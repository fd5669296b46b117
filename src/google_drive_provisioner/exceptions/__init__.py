from .base import GoogleAPIClientError, AuthenticationError, APIError, ValidationError
from .auth import InvalidCredentialsError, CredentialsFileError, TokenCacheError
from .drive import (
    DriveError, DrivePermissionError, DriveNotFoundError,
    ResolutionError, ResourceNotFoundError, AmbiguousResourceError
)

__all__ = [
    "GoogleAPIClientError",
    "AuthenticationError",
    "APIError",
    "ValidationError",
    "InvalidCredentialsError",
    "CredentialsFileError",
    "TokenCacheError",
    "DriveError",
    "DrivePermissionError",
    "DriveNotFoundError",
    "ResolutionError",
    "ResourceNotFoundError",
    "AmbiguousResourceError",
]
