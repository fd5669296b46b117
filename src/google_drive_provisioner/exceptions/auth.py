from .base import AuthenticationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when credentials are invalid or expired."""
    pass


class CredentialsFileError(AuthenticationError):
    """Raised when a credentials file is missing or cannot be parsed."""
    pass


class TokenCacheError(AuthenticationError):
    """Raised when the cached token file cannot be read or written."""
    pass
