# src/tracking_webhook/config/env.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple, Dict

from tracking_webhook.models import EnvCfg
from tracking_webhook.models.env_cfg import DEFAULT_SHEET_CSV_URL, DEFAULT_FETCH_TIMEOUT

try:
    from dotenv import load_dotenv, find_dotenv, dotenv_values  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "Missing dependency 'python-dotenv'. Install it with:\n"
        "  pip install python-dotenv"
    ) from e


# --- Public contract ---------------------------------------------------------

class EnvError(RuntimeError):
    """Raised when required environment variables are missing or malformed."""


REQUIRED_KEYS: Tuple[str, ...] = (
    "SHEET_CSV_URL",
)


def load_project_dotenv(start: Optional[Path] = None, *, override: bool = False) -> Path:
    """
    Load variables from the nearest `.env` file (searching upward from `start` or CWD).
    Does NOT override existing env vars unless `override=True`.
    Returns the resolved Path to the .env file if found; otherwise Path().
    """
    start_path = Path.cwd() if start is None else Path(start)

    dotenv_str = find_dotenv(filename=".env", usecwd=True)
    dotenv_path = Path(dotenv_str) if dotenv_str else Path()

    # python-dotenv searches from CWD; fall back to walking up from `start`
    if not dotenv_str:
        for p in (start_path, *start_path.parents):
            candidate = p / ".env"
            if candidate.exists():
                dotenv_path = candidate
                break

    if not dotenv_path.exists() or dotenv_path.is_dir():
        return Path()

    load_dotenv(dotenv_path=dotenv_path, override=override)
    return dotenv_path.resolve()


def env(name: str, *, default: Optional[str] = None, required: bool = False, cast=None):
    """
    Test-friendly accessor.

    - If `required=True` and var is missing, raise KeyError(name).
    - If `cast` is provided, apply it to the raw string and propagate cast errors.
    - Returns `default` when missing and not required.
    """
    raw = os.getenv(name)
    if raw is None:
        if required:
            raise KeyError(name)
        return default

    if cast is not None:
        return cast(raw)
    return raw


# --- Main loader APIs --------------------------------------------------------

def load_env(
    dotenv_path: Optional[Path] = None,
    *,
    override: bool = False,
    required_keys: Tuple[str, ...] = (),
    strict: bool = False,
) -> Dict[str, str]:
    """
    Load env vars from a .env file into the process environment and return a dict
    of key/value pairs found in that file.

    - If `dotenv_path` is provided, load exactly that file.
    - Otherwise, auto-discover the nearest .env via `load_project_dotenv`.
    - If `strict=True` and `required_keys` are provided, ensure they are present
      in `os.environ` after loading; otherwise raise EnvError.
    """
    loaded: Dict[str, str] = {}

    if dotenv_path:
        path = Path(dotenv_path)
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
            loaded = {k: v or "" for k, v in dotenv_values(path).items()}
    else:
        path = load_project_dotenv(override=override)
        if path and path.exists():
            loaded = {k: v or "" for k, v in dotenv_values(path).items()}

    if strict and required_keys:
        missing = [k for k in required_keys if not os.getenv(k)]
        if missing:
            raise EnvError(
                f"Missing required environment variable(s): {', '.join(missing)}")

    return loaded


def get_app_env(dotenv_path: Path | str | None = ".env", *, strict: bool = False) -> EnvCfg:
    """
    Load the sheet settings and return a typed config object.

    - `dotenv_path` may point to a specific .env file or be None to auto-discover.
    - Process env wins over .env values (override=False).
    - When `strict=True`, SHEET_CSV_URL must be set explicitly; otherwise the
      built-in export URL is used.
    """
    load_env(
        Path(dotenv_path) if dotenv_path else None,
        override=False,
        required_keys=REQUIRED_KEYS,
        strict=strict,
    )

    try:
        timeout = env("SHEET_FETCH_TIMEOUT",
                      default=DEFAULT_FETCH_TIMEOUT, cast=int)
    except ValueError as e:
        raise EnvError(
            f"SHEET_FETCH_TIMEOUT must be an integer number of seconds: {e}") from e

    return EnvCfg(
        SHEET_CSV_URL=env("SHEET_CSV_URL") or DEFAULT_SHEET_CSV_URL,
        SHEET_FETCH_TIMEOUT=timeout,
    )


__all__ = [
    "EnvError",
    "REQUIRED_KEYS",
    "load_project_dotenv",
    "load_env",
    "env",
    "get_app_env",
]
