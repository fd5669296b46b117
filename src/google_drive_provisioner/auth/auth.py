import logging
from functools import cache
from typing import Optional

import google.auth
from google.auth.exceptions import DefaultCredentialsError
from google.oauth2 import service_account
from googleapiclient.discovery import build

from ..config import (
    DriveConfig, SCOPES, CLIENT_SECRETS_PATH, CREDENTIALS_PATH, TOKEN_PATH,
    AUTH_METHOD_OAUTH, AUTH_METHOD_TOKEN, AUTH_METHOD_SERVICE_ACCOUNT, AUTH_METHOD_DEFAULT
)
from ..exceptions import AuthenticationError, CredentialsFileError, TokenCacheError
from .oauth import CodeProvider, ConsoleCodeProvider, DriveOAuthManager, load_client_config
from .token_cache import TokenCache
from ..utils.log_sanitizer import sanitize_email

logger = logging.getLogger(__name__)


def get_credentials_from_oauth(
        client_secrets_path: str = None,
        token_path: str = None,
        scopes: list = None,
        code_provider: Optional[CodeProvider] = None,
        redirect_uri: str = None
):
    """
    User credentials backed by a cached token, falling back to the authorization-code flow.

    Args:
        client_secrets_path: OAuth client secrets file (read only when a new token is needed).
        token_path: Token cache file.
        scopes: Scopes to request.
        code_provider: Source of the authorization code. Defaults to a console prompt.
        redirect_uri: Redirect URI override. Defaults to the first one in the client secrets.

    Returns:
        Valid Credentials. The token file is rewritten whenever they change.
    """
    client_secrets_path = client_secrets_path or CLIENT_SECRETS_PATH
    token_cache = TokenCache(token_path or TOKEN_PATH)
    scopes = scopes or SCOPES

    try:
        creds = token_cache.load_credentials(scopes)
    except TokenCacheError as e:
        logger.warning("Failed to load existing token, re-authorizing: %s", e)
        creds = None

    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            try:
                creds = DriveOAuthManager.refresh_credentials(creds)
            except AuthenticationError as e:
                logger.warning("Token refresh failed, re-authorizing: %s", e)
                creds = None
        else:
            creds = None

        # If refresh failed or no credentials, start OAuth flow
        if not creds:
            logger.info("Starting OAuth2 flow")
            client_config = load_client_config(client_secrets_path)
            oauth_manager = DriveOAuthManager(client_config, scopes, redirect_uri)
            creds = oauth_manager.authorize(code_provider or ConsoleCodeProvider())

        token_cache.save_credentials(creds)

    return creds


def get_credentials_from_token(token_path: str = None, scopes: list = None):
    """Credentials built from a cached token alone; no authorization flow is attempted."""
    token_cache = TokenCache(token_path or TOKEN_PATH)
    if not token_cache.exists():
        raise TokenCacheError(f"Unable to retrieve Token file: {token_cache.token_path} does not exist")
    return token_cache.load_credentials(scopes or SCOPES)


def get_service_account_credentials(credentials_path: str = None, scopes: list = None):
    """Credentials for a service account key file."""
    credentials_path = credentials_path or CREDENTIALS_PATH
    try:
        creds = service_account.Credentials.from_service_account_file(
            credentials_path, scopes=scopes or SCOPES
        )
    except FileNotFoundError:
        raise CredentialsFileError(f"Credentials file not found at {credentials_path}")
    except (OSError, ValueError) as e:
        raise CredentialsFileError(f"Unable to retrieve credentials from {credentials_path}: {e}")

    logger.info("Loaded service account credentials for %s", sanitize_email(creds.service_account_email))
    return creds


def get_credentials_from_file(credentials_path: str = None, scopes: list = None):
    """Credentials of whatever type the Google credentials file describes."""
    credentials_path = credentials_path or CREDENTIALS_PATH
    try:
        creds, _ = google.auth.load_credentials_from_file(credentials_path, scopes=scopes or SCOPES)
    except DefaultCredentialsError as e:
        raise CredentialsFileError(f"Unable to retrieve credentials from {credentials_path}: {e}")

    logger.info("Loaded credentials from %s", credentials_path)
    return creds


def get_credentials(config: DriveConfig, code_provider: Optional[CodeProvider] = None):
    """
    Obtain credentials using the method selected in the configuration.

    Args:
        config: Runtime configuration.
        code_provider: Authorization code source for the OAuth method.

    Returns:
        google.auth credentials
    """
    logger.info("Authenticating with method: %s", config.auth_method)

    if config.auth_method == AUTH_METHOD_OAUTH:
        return get_credentials_from_oauth(
            config.client_secrets_path, config.token_path, config.scopes,
            code_provider=code_provider, redirect_uri=config.redirect_uri
        )
    if config.auth_method == AUTH_METHOD_TOKEN:
        return get_credentials_from_token(config.token_path, config.scopes)
    if config.auth_method == AUTH_METHOD_SERVICE_ACCOUNT:
        return get_service_account_credentials(config.credentials_path, config.scopes)
    if config.auth_method == AUTH_METHOD_DEFAULT:
        return get_credentials_from_file(config.credentials_path, config.scopes)

    raise AuthenticationError(f"Unsupported auth method: {config.auth_method}")


@cache
def get_drive_service(credentials):
    return build("drive", "v3", credentials=credentials)
