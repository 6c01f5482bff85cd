# src/tracking_webhook/api/normalize.py
from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from tracking_webhook.models import Checkpoint, Tracking
from tracking_webhook.rules.datetime_normalizer import format_date_time
from tracking_webhook.rules.status_mapper import map_status_to_tag

# Sheet column names the aggregator fields are read from.
COL_TRACKING_ID = "TrackingID"
COL_STATUS = "Status"
COL_LOCATION = "Location"
COL_DATE = "Date"
COL_TIME = "Time"


def normalize_row(
    row: Dict[str, str],
    *,
    tracking_number: str,
    now: Optional[datetime] = None,
) -> Tracking:
    """
    Produce a Tracking for one matched sheet row.

    Missing columns behave like empty cells. Exactly one checkpoint is
    emitted; the sheet carries no event history.
    """
    tracking_id = row.get(COL_TRACKING_ID) or tracking_number
    status = row.get(COL_STATUS, "")
    location = row.get(COL_LOCATION, "")
    tag = map_status_to_tag(status)

    checkpoint = Checkpoint(
        city=location or "Unknown",
        message=status or "Status unknown",
        checkpoint_time=format_date_time(
            row.get(COL_DATE), row.get(COL_TIME), now=now),
        tag=tag,
        subtag=status or "Unknown",
        raw_message=f"Location: {location or 'Unknown'}, Status: {status or 'Unknown'}",
    )

    return Tracking(
        id=tracking_id,
        tracking_number=tracking_id,
        tag=tag,
        subtag=status or "Unknown",
        checkpoints=(checkpoint,),
    )
