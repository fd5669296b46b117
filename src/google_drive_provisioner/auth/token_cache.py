import json
import os
import logging
from typing import Optional, List, Dict, Any

from google.oauth2.credentials import Credentials

from ..exceptions import TokenCacheError

logger = logging.getLogger(__name__)

TOKEN_FILE_MODE = 0o600


class TokenCache:
    """
    File-backed store for a single user's OAuth token.

    The file holds the JSON produced by ``Credentials.to_json()``: access token,
    refresh token, token URI, client id/secret, scopes and expiry.
    """

    def __init__(self, token_path: str):
        self.token_path = token_path

    def exists(self) -> bool:
        return os.path.exists(self.token_path)

    def read_info(self) -> Dict[str, Any]:
        """
        Read the cached token data.

        Returns:
            The token data as a dictionary.
        """
        try:
            with open(self.token_path, "r") as token:
                return json.load(token)
        except FileNotFoundError:
            raise TokenCacheError(f"Token file not found at {self.token_path}")
        except (OSError, ValueError) as e:
            raise TokenCacheError(f"Unable to read token file {self.token_path}: {e}")

    def write_info(self, token_info: Dict[str, Any]) -> None:
        """
        Persist token data, readable by the owner only.

        Args:
            token_info: Token data to store.
        """
        logger.info("Saving credential file to: %s", self.token_path)
        directory = os.path.dirname(self.token_path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            fd = os.open(self.token_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
            with os.fdopen(fd, "w") as token:
                # O_CREAT only applies the mode to new files
                os.chmod(self.token_path, TOKEN_FILE_MODE)
                json.dump(token_info, token)
        except OSError as e:
            raise TokenCacheError(f"Unable to cache oauth token at {self.token_path}: {e}")

    def load_credentials(self, scopes: Optional[List[str]] = None) -> Optional[Credentials]:
        """
        Build user credentials from the cached token.

        Args:
            scopes: Scopes the credentials should carry.

        Returns:
            Credentials, or None when no token has been cached yet.
        """
        if not self.exists():
            return None

        token_info = self.read_info()
        try:
            creds = Credentials.from_authorized_user_info(token_info, scopes)
        except ValueError as e:
            raise TokenCacheError(f"Token file {self.token_path} is malformed: {e}")

        logger.info("Loaded credentials from token file")
        return creds

    def save_credentials(self, creds: Credentials) -> None:
        """Persist the given credentials."""
        self.write_info(json.loads(creds.to_json()))
