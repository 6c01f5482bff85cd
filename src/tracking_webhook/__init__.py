# src/tracking_webhook/__init__.py
from .api.handler import handler, lookup_tracking
from .rules.status_mapper import map_status_to_tag
from .rules.datetime_normalizer import format_date_time

__all__ = [
    "handler",
    "lookup_tracking",
    "map_status_to_tag",
    "format_date_time",
]
