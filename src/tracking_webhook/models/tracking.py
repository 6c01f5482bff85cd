from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

CARRIER_SLUG = "custom-carrier"


@dataclass(frozen=True)
class Checkpoint:
    # to_dict() emits keys in aggregator order
    city: str
    message: str
    checkpoint_time: str
    tag: str
    subtag: str
    raw_message: str
    slug: str = CARRIER_SLUG
    country: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "slug": self.slug,
            "city": self.city,
            "message": self.message,
            "checkpoint_time": self.checkpoint_time,
            "country": self.country,
            "tag": self.tag,
            "subtag": self.subtag,
            "raw_message": self.raw_message,
        }


@dataclass(frozen=True)
class Tracking:
    id: str
    tracking_number: str
    tag: str
    subtag: str
    checkpoints: tuple[Checkpoint, ...] = field(default_factory=tuple)
    origin_country: Optional[str] = None
    destination_country: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tracking_number": self.tracking_number,
            "tag": self.tag,
            "subtag": self.subtag,
            "origin_country": self.origin_country,
            "destination_country": self.destination_country,
            "checkpoints": [c.to_dict() for c in self.checkpoints],
        }

    def to_payload(self) -> dict[str, Any]:
        """Full 200 body: meta + data.tracking."""
        return {"meta": {"code": 200}, "data": {"tracking": self.to_dict()}}

