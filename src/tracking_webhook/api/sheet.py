# src/tracking_webhook/api/sheet.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol
import logging

import requests

from .errors import UpstreamFetchError
from .transport import RequestsTransport


class SheetSource(Protocol):
    def fetch_csv(self) -> str:
        ...


class SheetCsvClient:
    """Fetches the spreadsheet's CSV export over HTTP.

    One GET per `fetch_csv()` call; nothing is cached between calls. Transport
    failures and non-2xx statuses are raised as UpstreamFetchError.
    """

    def __init__(
        self,
        url: str,
        transport: Optional[RequestsTransport] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.url = url
        self.transport = transport or RequestsTransport()
        self.logger: logging.Logger = logger or logging.getLogger(
            "tracking_webhook.api.sheet"
        )

    def fetch_csv(self) -> str:
        self.logger.info("Fetching CSV from: %s", self.url)
        try:
            resp = self.transport.get(self.url)
            resp.raise_for_status()
        except requests.RequestException as ex:
            self.logger.warning("Sheet fetch failed for %s: %s", self.url, ex)
            raise UpstreamFetchError(ex) from ex

        text = resp.text
        self.logger.debug(
            "CSV data received (status=%s): %s",
            resp.status_code,
            (text[:200] + "...") if len(text) > 200 else text,
        )
        return text


@dataclass
class ReplaySheetSource:
    """Serves a local CSV file in place of the live export.

    Used for offline runs (`--csv-file`) and tests. The file is read on every
    call so edits show up without restarting.
    """

    path: Path

    def fetch_csv(self) -> str:
        try:
            return Path(self.path).read_text(encoding="utf-8")
        except OSError as ex:
            raise UpstreamFetchError(ex) from ex


__all__ = ["SheetSource", "SheetCsvClient", "ReplaySheetSource"]
