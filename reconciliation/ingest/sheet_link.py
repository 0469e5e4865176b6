"""
Spreadsheet link reader for shared Google Sheets.

The reader validates the link and derives its CSV export URL; downloading
is delegated to a fetcher supplied by the caller.
"""

import re
from typing import Callable
from urllib.parse import parse_qs, urlparse

from ..core.models import Dataset
from ..observability.logger import get_logger
from .file_reader import read_csv_text

logger = get_logger(__name__)

SHEET_PATH_PATTERN = re.compile(r"^/spreadsheets/d/(?P<sheet_id>[A-Za-z0-9_-]+)")
SHEET_HOST = "docs.google.com"

Fetcher = Callable[[str], str]


class SheetUrlError(ValueError):
    """Raised when a spreadsheet link is empty or not a Google Sheets URL."""
    pass


def parse_sheet_url(url: str) -> tuple[str, str | None]:
    """
    Extract the sheet id and optional tab gid from a Google Sheets URL.

    Raises:
        SheetUrlError: If the URL is empty or not a Google Sheets document
    """
    if not url or not url.strip():
        raise SheetUrlError("Please enter a valid Google Sheets URL")

    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or parsed.netloc != SHEET_HOST:
        raise SheetUrlError(f"Not a Google Sheets URL: {url}")

    match = SHEET_PATH_PATTERN.match(parsed.path)
    if not match:
        raise SheetUrlError(f"Google Sheets URL has no document id: {url}")

    # gid may appear in the query string or the fragment (#gid=123)
    gid = None
    for part in (parsed.query, parsed.fragment):
        values = parse_qs(part).get("gid")
        if values:
            gid = values[0]
            break

    return match.group("sheet_id"), gid


def export_csv_url(sheet_id: str, gid: str | None = None) -> str:
    url = f"https://{SHEET_HOST}/spreadsheets/d/{sheet_id}/export?format=csv"
    if gid is not None:
        url += f"&gid={gid}"
    return url


class SheetLinkReader:
    """
    Reads a shared sheet into a spreadsheet-link dataset.
    """

    def __init__(self, fetcher: Fetcher):
        """
        Args:
            fetcher: Callable taking the CSV export URL and returning CSV text
        """
        self.fetcher = fetcher

    def read(self, url: str, name: str | None = None) -> Dataset:
        sheet_id, gid = parse_sheet_url(url)
        csv_text = self.fetcher(export_csv_url(sheet_id, gid))

        dataset = read_csv_text(
            csv_text,
            name=name or f"sheet-{sheet_id}",
            source_kind="spreadsheet-link",
            location=url.strip(),
        )
        logger.info(
            "Sheet connected",
            extra={"dataset": dataset.name, "sheet_id": sheet_id, "record_count": dataset.row_count}
        )
        return dataset
