from .env_cfg import EnvCfg
from .tracking import Checkpoint, Tracking, CARRIER_SLUG

__all__ = [
    "EnvCfg",
    "Checkpoint",
    "Tracking",
    "CARRIER_SLUG",
]
