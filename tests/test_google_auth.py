"""Tests for Google service account token loading."""

import json
from unittest.mock import MagicMock, patch

from recipe_builder.adapters.google_auth import SHEETS_SCOPES, GoogleTokenProvider

_CREDENTIALS_PATH = "recipe_builder.adapters.google_auth.service_account.Credentials"


def test_inline_credentials_take_precedence() -> None:
    credentials = MagicMock(valid=True, token="inline-token")
    info = {"type": "service_account", "client_email": "bot@example.com"}
    provider = GoogleTokenProvider(
        credentials_json=json.dumps(info), credentials_file="ignored.json"
    )

    with (
        patch(f"{_CREDENTIALS_PATH}.from_service_account_info") as from_info,
        patch(f"{_CREDENTIALS_PATH}.from_service_account_file") as from_file,
    ):
        from_info.return_value = credentials
        token = provider.get_token()

    assert token == "inline-token"
    from_info.assert_called_once_with(info, scopes=SHEETS_SCOPES)
    from_file.assert_not_called()
    credentials.refresh.assert_not_called()


def test_key_file_credentials_are_loaded_once_and_refreshed() -> None:
    credentials = MagicMock(valid=False, token="file-token")
    provider = GoogleTokenProvider(credentials_file="creds.json")

    with patch(f"{_CREDENTIALS_PATH}.from_service_account_file") as from_file:
        from_file.return_value = credentials
        provider.get_token()
        provider.get_token()

    from_file.assert_called_once_with("creds.json", scopes=SHEETS_SCOPES)
    assert credentials.refresh.call_count == 2
