# src/tracking_webhook/cli.py
from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

from .config.logging_config import get_logger
from .config.env import get_app_env
from .api.handler import handler


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tracking-webhook",
        description="Look up a tracking number in the shipment sheet and print the aggregator response.",
    )
    p.add_argument("tracking_number", help="Tracking number to look up.")
    p.add_argument(
        "--method",
        default="POST",
        help="HTTP method to simulate. Default: POST",
    )
    p.add_argument(
        "--csv-file",
        type=Path,
        default=None,
        help="Read the sheet from a local CSV export instead of fetching SHEET_CSV_URL.",
    )
    p.add_argument(
        "--url",
        default=None,
        help="Sheet CSV export URL (overrides SHEET_CSV_URL).",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO",
    )
    p.add_argument(
        "--no-console",
        action="store_true",
        help="Disable console logging (file logging remains).",
    )
    p.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger(
        "tracking_webhook",
        level=args.log_level,
        console=not args.no_console,
        log_file=args.log_file,
    )
    logger.debug("Logger initialized.")

    try:
        cfg = get_app_env(dotenv_path=None, strict=False)
    except RuntimeError as e:
        logger.error("Environment error: %s", e)
        return 2
    if args.url:
        cfg = replace(cfg, SHEET_CSV_URL=args.url)

    source = None
    if args.csv_file:
        from .api.sheet import ReplaySheetSource

        source = ReplaySheetSource(args.csv_file)
        logger.info("Replay mode enabled: %s", args.csv_file)

    event = {
        "httpMethod": args.method.upper(),
        "body": json.dumps({"tracking_number": args.tracking_number}),
    }
    response = handler(event, cfg=cfg, source=source)

    print(json.dumps(json.loads(response["body"]), indent=2))
    return 0 if response["statusCode"] == 200 else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
