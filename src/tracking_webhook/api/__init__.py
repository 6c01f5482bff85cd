from .handler import handler, lookup_tracking, validate_request
from .sheet import SheetCsvClient, ReplaySheetSource

__all__ = [
    "handler",
    "lookup_tracking",
    "validate_request",
    "SheetCsvClient",
    "ReplaySheetSource",
]
