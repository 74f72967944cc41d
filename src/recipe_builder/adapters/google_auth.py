"""Google service account credentials for the Sheets API."""

import json
from dataclasses import dataclass, field
from typing import Protocol

from google.auth.transport.requests import Request
from google.oauth2 import service_account

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class TokenProvider(Protocol):
    """Source of OAuth access tokens."""

    def get_token(self) -> str:
        """Return a currently valid access token."""


@dataclass
class GoogleTokenProvider(TokenProvider):
    """Service account token provider.

    Inline JSON credentials take precedence over the key file. Credentials
    are loaded on first use and refreshed whenever they are no longer valid.
    """

    credentials_json: str | None = None
    credentials_file: str = "credentials.json"
    _credentials: service_account.Credentials | None = field(
        default=None, init=False, repr=False
    )

    def get_token(self) -> str:
        """Return an access token, refreshing the credentials if needed."""
        credentials = self._load_credentials()
        if not credentials.valid:
            credentials.refresh(Request())
        return credentials.token

    def _load_credentials(self) -> service_account.Credentials:
        if self._credentials is not None:
            return self._credentials
        if self.credentials_json:
            self._credentials = service_account.Credentials.from_service_account_info(
                json.loads(self.credentials_json), scopes=SHEETS_SCOPES
            )
        else:
            self._credentials = service_account.Credentials.from_service_account_file(
                self.credentials_file, scopes=SHEETS_SCOPES
            )
        return self._credentials
