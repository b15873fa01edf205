"""
OAuth Manager

Handles Google OAuth 2.0 authentication for the YouTube upload scope.

Flow:
1. First run: no token.json yet, a browser consent flow runs for the
   configured account and the token is saved
2. Later runs: token.json is loaded and used as-is
3. Token refresh: happens automatically when the access token expired
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from google.auth.exceptions import GoogleAuthError, RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from video_upload.constants import YOUTUBE_SCOPES
from video_upload.exceptions import AuthError, ConfigLoadError


class OAuthManager:
    """
    Manages Google OAuth 2.0 authentication.

    This class:
    - Loads credentials from token.json
    - Refreshes expired tokens automatically
    - Runs the consent flow when no usable token exists
    """

    def __init__(
        self,
        client_secret_path: Union[str, Path],
        token_path: Union[str, Path],
        account_id: str = "",
        scopes: Optional[List[str]] = None,
        port: int = 0,
    ):
        """
        Initialize OAuth manager.

        Args:
            client_secret_path: Path to client_secret.json from Google Cloud
            token_path: Path to token.json (created on first run)
            account_id: Google account pre-selected on the consent screen
            scopes: OAuth scopes (default: upload only)
            port: Local port for the OAuth redirect (0 = any free port)

        Raises:
            ConfigLoadError: If client_secret.json doesn't exist

        Example:
            oauth = OAuthManager(
                client_secret_path="credentials/client_secret.json",
                token_path="credentials/token.json",
                account_id="me@example.com",
            )
        """
        self.logger = logging.getLogger(__name__)

        self.client_secret_path = Path(client_secret_path)
        self.token_path = Path(token_path)
        self.account_id = account_id
        self.scopes = list(scopes or YOUTUBE_SCOPES)
        self.port = port
        self.credentials: Optional[Credentials] = None

        self._validate_paths()

        self.logger.debug("OAuth Manager initialized")

    def _validate_paths(self) -> None:
        """
        Validate that the client secret file exists.

        Raises:
            ConfigLoadError: If client_secret.json doesn't exist
        """
        if not self.client_secret_path.is_file():
            raise ConfigLoadError(
                f"Client secret file not found: {self.client_secret_path}\n"
                f"Download from Google Cloud Console > Credentials",
            )

    def _load_stored_credentials(self) -> Optional[Credentials]:
        """Load token.json if present; an unreadable token is ignored"""
        if not self.token_path.exists():
            self.logger.info("No cached token, consent required")
            return None

        try:
            return Credentials.from_authorized_user_file(
                str(self.token_path),
                self.scopes,
            )
        except (OSError, ValueError) as e:
            self.logger.warning(f"Ignoring unreadable token {self.token_path}: {e}")
            return None

    def _run_consent_flow(self) -> Credentials:
        """
        Run the browser consent flow for the configured account.

        Raises:
            ConfigLoadError: If client_secret.json is malformed
            AuthError: If the user or Google rejects the authorization
        """
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                str(self.client_secret_path),
                self.scopes,
            )
        except (OSError, ValueError) as e:
            raise ConfigLoadError(
                f"Invalid client secret file {self.client_secret_path}: {e}"
            ) from e

        self.logger.info(f"Starting OAuth flow on port {self.port}...")
        self.logger.info("A browser window will open for authentication")

        kwargs = {"login_hint": self.account_id} if self.account_id else {}
        try:
            return flow.run_local_server(port=self.port, **kwargs)
        except Exception as e:
            raise AuthError(f"Authentication failed: {e}") from e

    def _save_credentials(self) -> None:
        """Save credentials to token.json"""
        try:
            self.token_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.token_path, "w", encoding="utf-8") as token_file:
                token_file.write(self.credentials.to_json())
            self.logger.debug("Credentials saved to token file")
        except OSError as e:
            self.logger.warning(f"Failed to save credentials: {e}")

    def get_credentials(self) -> Credentials:
        """
        Get valid OAuth credentials.

        Uses the cached token when possible, refreshes it if expired and
        falls back to the consent flow otherwise.

        Returns:
            Valid Google OAuth credentials

        Raises:
            AuthError: If credentials cannot be obtained
            ConfigLoadError: If client_secret.json is malformed
        """
        if self.credentials and self.credentials.valid:
            return self.credentials

        credentials = self.credentials or self._load_stored_credentials()

        if credentials and credentials.expired and credentials.refresh_token:
            self.logger.info("Access token expired, refreshing...")
            try:
                credentials.refresh(Request())
                self.logger.info("Access token refreshed successfully")
            except RefreshError as e:
                self.logger.warning(f"Token refresh rejected ({e}), re-authenticating")
                credentials = None
            except GoogleAuthError as e:
                raise AuthError(f"Token refresh failed: {e}") from e

        if not credentials or not credentials.valid:
            credentials = self._run_consent_flow()

        self.credentials = credentials
        self._save_credentials()
        return self.credentials

    def is_authenticated(self) -> bool:
        """
        Check if currently holding valid credentials.

        Does not start a consent flow.
        """
        return self.credentials is not None and self.credentials.valid

    def revoke_credentials(self) -> bool:
        """
        Forget credentials locally.

        Deletes token.json so the next run asks for consent again.

        Returns:
            True if successfully removed
        """
        try:
            if self.token_path.exists():
                os.remove(self.token_path)

            self.credentials = None
            self.logger.info("Credentials revoked")
            return True

        except OSError as e:
            self.logger.error(f"Failed to revoke credentials: {e}")
            return False
