from __future__ import annotations

from pathlib import Path

import pytest
import requests

from tracking_webhook.api.errors import UpstreamFetchError
from tracking_webhook.api.sheet import ReplaySheetSource, SheetCsvClient
from tracking_webhook.api.transport import RequestsTransport


class _FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class _FakeTransport:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls: list[str] = []

    def get(self, url, **kwargs):
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response


def test_fetch_csv_returns_body_and_makes_one_call():
    transport = _FakeTransport(_FakeResponse("A,B\n1,2"))
    client = SheetCsvClient("https://example.test/sheet.csv", transport)

    assert client.fetch_csv() == "A,B\n1,2"
    assert transport.calls == ["https://example.test/sheet.csv"]


def test_fetch_csv_is_not_cached():
    transport = _FakeTransport(_FakeResponse("A\n1"))
    client = SheetCsvClient("https://example.test/sheet.csv", transport)
    client.fetch_csv()
    client.fetch_csv()
    assert len(transport.calls) == 2


def test_network_error_becomes_upstream_fetch_error():
    transport = _FakeTransport(exc=requests.ConnectionError("connection refused"))
    client = SheetCsvClient("https://example.test/sheet.csv", transport)

    with pytest.raises(UpstreamFetchError) as e:
        client.fetch_csv()
    assert e.value.status_code == 500
    assert e.value.message == "Internal Server Error: connection refused"


def test_non_success_status_becomes_upstream_fetch_error():
    transport = _FakeTransport(_FakeResponse("nope", status_code=404))
    client = SheetCsvClient("https://example.test/sheet.csv", transport)

    with pytest.raises(UpstreamFetchError) as e:
        client.fetch_csv()
    assert "404" in e.value.message


def test_replay_source_reads_file(tmp_path: Path):
    f = tmp_path / "sheet.csv"
    f.write_text("TrackingID,Status\nT1,Shipped\n", encoding="utf-8")
    assert ReplaySheetSource(f).fetch_csv() == "TrackingID,Status\nT1,Shipped\n"


def test_replay_source_missing_file_is_upstream_error(tmp_path: Path):
    with pytest.raises(UpstreamFetchError):
        ReplaySheetSource(tmp_path / "missing.csv").fetch_csv()


def test_transport_defaults_to_single_attempt():
    transport = RequestsTransport(timeout=5)
    adapter = transport.session.get_adapter("https://example.test/")
    assert adapter.max_retries.total == 0
    assert transport.timeout == 5
