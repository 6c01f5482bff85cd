from .status_mapper import TAGS, map_status_to_tag
from .datetime_normalizer import CheckpointTime, parse_checkpoint_time, format_date_time

__all__ = [
    "TAGS",
    "map_status_to_tag",
    "CheckpointTime",
    "parse_checkpoint_time",
    "format_date_time",
]
