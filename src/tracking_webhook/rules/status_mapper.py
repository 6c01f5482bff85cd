# src/tracking_webhook/rules/status_mapper.py
from __future__ import annotations

from typing import Optional

DELIVERED = "Delivered"
IN_TRANSIT = "InTransit"
EXCEPTION = "Exception"
OUT_FOR_DELIVERY = "OutForDelivery"
READY_FOR_PICKUP = "ReadyForPickup"
INFO_RECEIVED = "InfoReceived"
UNKNOWN = "Unknown"

TAGS = (
    DELIVERED,
    IN_TRANSIT,
    EXCEPTION,
    OUT_FOR_DELIVERY,
    READY_FOR_PICKUP,
    INFO_RECEIVED,
    UNKNOWN,
)

# Lower-cased sheet phrases -> aggregator tag. Exact match only, no substring search.
_STATUS_TAGS = {
    "delivered": DELIVERED,
    "delivery": DELIVERED,
    "shipped": IN_TRANSIT,
    "in transit": IN_TRANSIT,
    "transit": IN_TRANSIT,
    "dispatched": IN_TRANSIT,
    "pending": INFO_RECEIVED,
    "processing": INFO_RECEIVED,
    "exception": EXCEPTION,
    "failed": EXCEPTION,
    "out for delivery": OUT_FOR_DELIVERY,
    "ready for pickup": READY_FOR_PICKUP,
    "picked up": READY_FOR_PICKUP,
}


def map_status_to_tag(status: Optional[str]) -> str:
    """
    Map a free-text sheet status to one of TAGS.

    Empty/missing status -> Unknown. Any other phrase not in the table
    -> InfoReceived, so a typed-but-unrecognised status still shows as
    "we have info" rather than "no data".
    """
    if not status:
        return UNKNOWN
    return _STATUS_TAGS.get(status.lower().strip(), INFO_RECEIVED)


__all__ = ["TAGS", "map_status_to_tag"] + [
    "DELIVERED", "IN_TRANSIT", "EXCEPTION", "OUT_FOR_DELIVERY",
    "READY_FOR_PICKUP", "INFO_RECEIVED", "UNKNOWN",
]
