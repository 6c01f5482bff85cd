from __future__ import annotations
from dataclasses import dataclass

DEFAULT_SHEET_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/"
    "12GZO7YJU-VP3jWDekHqzeWwH3rYSwqzwsKbq6UuiEYg/gviz/tq?tqx=out:csv&sheet=Sheet1"
)
DEFAULT_FETCH_TIMEOUT = 30


@dataclass(frozen=True)
class EnvCfg:
    """Settings the lookup needs from get_app_env()."""
    SHEET_CSV_URL: str = DEFAULT_SHEET_CSV_URL
    SHEET_FETCH_TIMEOUT: int = DEFAULT_FETCH_TIMEOUT
