"""Google Sheets values API client."""

import asyncio
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from recipe_builder.adapters.google_auth import TokenProvider


class SheetsClient(Protocol):
    """Interface for reading and appending spreadsheet values."""

    async def get_values(self, range_: str) -> list[list[str]]:
        """Return the cell values of a range, row by row."""

    async def append_values(self, range_: str, rows: list[list[object]]) -> None:
        """Append rows after the last row of a range."""


@dataclass
class HttpxSheetsClient(SheetsClient):
    """HTTPX-backed Sheets client."""

    spreadsheet_id: str
    token_provider: TokenProvider
    http_client: httpx.AsyncClient
    base_url: str = "https://sheets.googleapis.com/v4"

    @classmethod
    def create(
        cls, spreadsheet_id: str, token_provider: TokenProvider, base_url: str
    ) -> "HttpxSheetsClient":
        """Create a Sheets client with a managed httpx session."""
        return cls(
            spreadsheet_id=spreadsheet_id,
            token_provider=token_provider,
            http_client=httpx.AsyncClient(),
            base_url=base_url,
        )

    async def get_values(self, range_: str) -> list[list[str]]:
        """Read a range."""
        response = await self.http_client.get(
            self._values_url(range_),
            headers=await self._auth_headers(),
            timeout=15,
        )
        response.raise_for_status()
        return response.json().get("values", [])

    async def append_values(self, range_: str, rows: list[list[object]]) -> None:
        """Append rows as raw values."""
        response = await self.http_client.post(
            f"{self._values_url(range_)}:append",
            params={"valueInputOption": "RAW"},
            headers=await self._auth_headers(),
            json={"values": rows},
            timeout=15,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _auth_headers(self) -> dict[str, str]:
        # Token refresh performs blocking I/O.
        token = await asyncio.to_thread(self.token_provider.get_token)
        return {"Authorization": f"Bearer {token}"}

    def _values_url(self, range_: str) -> str:
        return (
            f"{self.base_url}/spreadsheets/{self.spreadsheet_id}"
            f"/values/{quote(range_, safe='!:')}"
        )


def rows_to_dicts(rows: list[list[str]]) -> list[dict[str, str]]:
    """Key data rows by the header row, filling missing cells with ``""``."""
    if not rows:
        return []
    headers = rows[0]
    return [row_to_dict(headers, row) for row in rows[1:]]


def row_to_dict(headers: list[str], row: list[str]) -> dict[str, str]:
    """Key a single row by headers."""
    return {
        header: (row[index] if index < len(row) else "") or ""
        for index, header in enumerate(headers)
    }
