"""Google Sheets range fetch via gspread."""

from __future__ import annotations

import logging
from typing import Any

import gspread
import requests
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.utils import absolute_range_name

from sheets2json.errors import CredentialError, FetchError, Sheets2JsonError
from sheets2json.models.records import CellGrid

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

# Default: read all columns
DEFAULT_RANGE = "A:ZZ"

# CLI choice -> Sheets API valueRenderOption
VALUE_RENDER_OPTIONS = {
    "formatted": "FORMATTED_VALUE",
    "unformatted": "UNFORMATTED_VALUE",
    "formula": "FORMULA",
}

_FETCH_ERRORS = (
    gspread.exceptions.GSpreadException,
    GoogleAuthError,
    requests.exceptions.RequestException,
)


def build_range(worksheet: str | None = None, cell_range: str | None = None) -> str:
    """Build an A1 range from the optional worksheet and range arguments.

    Without a worksheet the range applies to the first visible sheet.
    """
    if worksheet:
        return absolute_range_name(worksheet, cell_range or DEFAULT_RANGE)
    return cell_range or DEFAULT_RANGE


class SheetsService:
    """Read-only access to one spreadsheet."""

    def __init__(
        self,
        credential_info: dict[str, Any],
        spreadsheet_id: str,
        value_render: str = "formatted",
    ) -> None:
        if value_render not in VALUE_RENDER_OPTIONS:
            raise Sheets2JsonError(f"Unknown value render option: {value_render}")
        self.spreadsheet_id = spreadsheet_id
        self.value_render_option = VALUE_RENDER_OPTIONS[value_render]
        self._connect(credential_info)

    def _connect(self, credential_info: dict[str, Any]) -> None:
        try:
            creds = Credentials.from_service_account_info(credential_info, scopes=SCOPES)
        except ValueError as e:
            raise CredentialError(f"Unable to parse credential JSON: {e}") from e

        try:
            gc = gspread.authorize(creds)
            self.spreadsheet = gc.open_by_key(self.spreadsheet_id)
        except _FETCH_ERRORS as e:
            raise FetchError(f"Unable to open spreadsheet {self.spreadsheet_id}: {e}") from e

    def fetch_range(self, range_spec: str) -> CellGrid:
        """Return the raw cell grid for ``range_spec``.

        Trailing empty cells and rows are omitted by the API, so rows may be
        ragged. A range with no data yields an empty list.
        """
        try:
            response = self.spreadsheet.values_get(
                range_spec, params={"valueRenderOption": self.value_render_option},
            )
        except _FETCH_ERRORS as e:
            raise FetchError(f"Unable to retrieve data from sheet: {e}") from e

        values = response.get("values", [])
        logger.info("Fetched %d row(s) from %s", len(values), range_spec)
        return values


def fetch_grid(
    credential_info: dict[str, Any],
    spreadsheet_id: str,
    range_spec: str,
    value_render: str = "formatted",
) -> CellGrid:
    """Open the spreadsheet and fetch one range in a single call."""
    service = SheetsService(credential_info, spreadsheet_id, value_render=value_render)
    return service.fetch_range(range_spec)
