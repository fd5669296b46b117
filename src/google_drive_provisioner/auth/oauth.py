import json
import logging
import sys
from typing import List, Optional, Protocol

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from ..config import DEFAULT_REDIRECT_URI
from ..exceptions import AuthenticationError, CredentialsFileError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class CodeProvider(Protocol):
    """Supplies the authorization code for a consent URL."""

    def get_code(self, auth_url: str) -> str:
        ...


class ConsoleCodeProvider:
    """
    Prints the consent URL and blocks until the user types the authorization code.
    """

    def __init__(self, input_stream=None, output_stream=None):
        self._input = input_stream or sys.stdin
        self._output = output_stream or sys.stdout

    def get_code(self, auth_url: str) -> str:
        print(
            "Go to the following link in your browser then type the authorization code: ",
            file=self._output,
        )
        print(auth_url, file=self._output)
        self._output.flush()

        line = self._input.readline()
        if not line:
            raise AuthenticationError("Unable to read authorization code: no input")
        return line.strip()


class StaticCodeProvider:
    """Returns an authorization code obtained ahead of time, for non-interactive runs."""

    def __init__(self, code: str):
        self._code = code

    def get_code(self, auth_url: str) -> str:
        logger.info("Using pre-supplied authorization code")
        return self._code


def load_client_config(client_secrets_path: str) -> dict:
    """
    Load an OAuth client configuration (the JSON downloaded from Google Cloud Console).

    Args:
        client_secrets_path: Path to the client secrets file.

    Returns:
        The parsed client configuration.
    """
    try:
        with open(client_secrets_path, "r") as f:
            client_config = json.load(f)
    except FileNotFoundError:
        raise CredentialsFileError(
            f"Client secrets file not found at {client_secrets_path}. "
            "Please download it from Google Cloud Console."
        )
    except (OSError, ValueError) as e:
        raise CredentialsFileError(f"Unable to read client secret file {client_secrets_path}: {e}")

    # Handle both installed app and web app credential formats
    if not isinstance(client_config, dict) or not ("installed" in client_config or "web" in client_config):
        raise CredentialsFileError(
            f"Unable to parse client secret file to config: {client_secrets_path} "
            "is missing an 'installed' or 'web' section"
        )
    return client_config


def default_redirect_uri(client_config: dict) -> str:
    """
    First redirect URI registered in the client secrets, or the out-of-band URI when none is listed.
    """
    section = client_config.get("installed") or client_config.get("web") or {}
    redirect_uris = section.get("redirect_uris") or []
    return redirect_uris[0] if redirect_uris else DEFAULT_REDIRECT_URI


class DriveOAuthManager:
    """
    Runs the OAuth2 authorization-code flow for a single user.
    """

    def __init__(self, client_config: dict, scopes: List[str], redirect_uri: Optional[str] = None):
        self.client_config = client_config
        self.scopes = scopes
        self.redirect_uri = redirect_uri or default_redirect_uri(client_config)

    def _create_flow(self) -> Flow:
        flow = Flow.from_client_config(
            client_config=self.client_config,
            scopes=self.scopes,
            redirect_uri=self.redirect_uri
        )
        return flow

    def generate_auth_url(self, flow: Flow) -> str:
        """
        Generate an OAuth2 authorization URL for user consent.

        Returns:
            Authorization URL string
        """
        auth_url, _ = flow.authorization_url(
            access_type='offline',
            prompt='consent'
        )
        return auth_url

    def authorize(self, code_provider: CodeProvider) -> Credentials:
        """
        Obtain user credentials, asking the code provider for the authorization code.

        Args:
            code_provider: Source of the authorization code.

        Returns:
            Credentials issued for the configured scopes.
        """
        flow = self._create_flow()
        auth_url = self.generate_auth_url(flow)

        code = code_provider.get_code(auth_url)
        if not code:
            raise AuthenticationError("Unable to read authorization code: empty code")

        logger.info("Exchanging authorization code for token")
        try:
            flow.fetch_token(code=code)
        except Exception as e:
            raise AuthenticationError(f"Unable to retrieve token from web: {e}") from e

        logger.info("OAuth2 flow completed successfully")
        return flow.credentials

    @classmethod
    def refresh_credentials(cls, creds: Credentials) -> Credentials:
        """Refresh expired credentials in place using their refresh token."""
        logger.info("Refreshing expired credentials")
        try:
            creds.refresh(Request())
        except Exception as e:
            raise InvalidCredentialsError(f"Failed to refresh credentials: {e}") from e
        return creds
