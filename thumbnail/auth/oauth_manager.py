"""
OAuth Manager

Handles Google OAuth 2.0 authorization for the YouTube Data API.
Credentials are stored per datastore so each tool keeps its own token.

Flow:
1. First run: no stored token, a browser window opens for consent
2. Later runs: the stored token in <credentials_dir>/<datastore>.json is reused
3. Token refresh: happens automatically when the access token has expired
"""

import logging
import os
from typing import List, Optional
from urllib.parse import urlencode

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from thumbnail.constants import OAUTH_REVOKE_URI
from thumbnail.interfaces.thumbnail_interface import AuthorizationError


class OAuthManager:
    """
    Manages Google OAuth 2.0 authorization.

    This class:
    - Loads stored credentials for a datastore
    - Refreshes expired tokens automatically
    - Falls back to the installed-app browser flow
    - Saves new or refreshed tokens
    """

    def __init__(
        self,
        client_secret_path: str,
        credentials_dir: str,
        port: int = 8080,
    ):
        """
        Initialize OAuth manager.

        Args:
            client_secret_path: Path to client_secrets.json from Google Cloud
            credentials_dir: Directory holding stored tokens
            port: Local port for the OAuth callback

        Example:
            oauth = OAuthManager(
                client_secret_path="client_secrets.json",
                credentials_dir="~/.oauth-credentials",
            )
            credentials = oauth.authorize(YOUTUBE_SCOPES, "uploadthumbnail")
        """
        self.logger = logging.getLogger(__name__)

        self.client_secret_path = client_secret_path
        self.credentials_dir = os.path.expanduser(credentials_dir)
        self.port = port
        self.credentials: Optional[Credentials] = None
        self.token_path: Optional[str] = None

    def get_token_path(self, credential_datastore: str) -> str:
        """Path of the stored token for a datastore"""
        return os.path.join(self.credentials_dir, f"{credential_datastore}.json")

    def authorize(self, scopes: List[str], credential_datastore: str) -> Credentials:
        """
        Authorize the installed application to access the user's account.

        Args:
            scopes: OAuth scopes required by the caller
            credential_datastore: Name the token is stored under

        Returns:
            Valid Google OAuth credentials

        Raises:
            AuthorizationError: If credentials cannot be obtained or stored
        """
        self.token_path = self.get_token_path(credential_datastore)

        try:
            credentials = self._load_credentials(scopes)

            if credentials and credentials.valid:
                self.logger.debug("Using stored credentials")
            elif credentials and credentials.expired and credentials.refresh_token:
                self.logger.info("Access token expired, refreshing...")
                credentials.refresh(Request())
                self._save_credentials(credentials)
                self.logger.info("Access token refreshed successfully")
            else:
                credentials = self._run_flow(scopes)
                self._save_credentials(credentials)

        except AuthorizationError:
            raise
        except (OSError, ValueError, GoogleAuthError) as e:
            self.logger.error(f"Authorization failed: {e}")
            raise AuthorizationError(f"Authorization failed: {e}") from e

        self.credentials = credentials
        self.logger.info(f"Authorized for datastore '{credential_datastore}'")
        return credentials

    def _load_credentials(self, scopes: List[str]) -> Optional[Credentials]:
        """Load stored credentials, or None if nothing is stored yet"""
        if not os.path.exists(self.token_path):
            self.logger.debug(f"No stored token at {self.token_path}")
            return None

        return Credentials.from_authorized_user_file(self.token_path, scopes)

    def _run_flow(self, scopes: List[str]) -> Credentials:
        """
        Run the installed-app flow in the user's browser.

        Raises:
            AuthorizationError: If client_secrets.json doesn't exist
        """
        if not os.path.exists(self.client_secret_path):
            raise AuthorizationError(
                f"Client secret file not found: {self.client_secret_path}\n"
                f"Download it from Google Cloud Console > Credentials",
            )

        flow = InstalledAppFlow.from_client_secrets_file(
            self.client_secret_path,
            scopes,
        )

        self.logger.info(f"Starting OAuth flow on port {self.port}...")
        self.logger.info("A browser window will open for authorization")

        return flow.run_local_server(port=self.port)

    def _save_credentials(self, credentials: Credentials) -> None:
        """Write credentials to the datastore token file"""
        os.makedirs(self.credentials_dir, exist_ok=True)
        with open(self.token_path, "w") as token_file:
            token_file.write(credentials.to_json())
        self.logger.debug(f"Credentials saved to {self.token_path}")

    def is_authenticated(self) -> bool:
        """
        Check if currently holding valid credentials.

        Returns:
            True if credentials are valid
        """
        return self.credentials is not None and self.credentials.valid

    def revoke_credentials(self) -> bool:
        """
        Revoke current credentials.

        The user will need to authorize again on the next run.

        Returns:
            True if successfully revoked
        """
        try:
            if self.credentials and self.credentials.token:
                # Revoke token on Google's servers
                response = Request()(
                    url=OAUTH_REVOKE_URI,
                    method="POST",
                    body=urlencode({"token": self.credentials.token}),
                    headers={"content-type": "application/x-www-form-urlencoded"},
                )
                if response.status != 200:
                    self.logger.warning(
                        f"Token revocation returned HTTP {response.status}",
                    )

            if self.token_path and os.path.exists(self.token_path):
                os.remove(self.token_path)

            self.credentials = None
            self.logger.info("Credentials revoked")
            return True

        except (OSError, GoogleAuthError) as e:
            self.logger.error(f"Failed to revoke credentials: {e}")
            return False
