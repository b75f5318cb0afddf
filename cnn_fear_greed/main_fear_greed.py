from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

from cnn_fear_greed.client import build_use_case
from cnn_fear_greed.domain.errors import FearGreedError
from cnn_fear_greed.utils.config_loader import load_settings
from cnn_fear_greed.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)
load_dotenv()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scrape the CNN Money Fear & Greed page and print the result as JSON"
    )
    parser.add_argument("--config", default=None, help="Path to fear_greed.yaml")
    parser.add_argument(
        "--camel-case",
        action="store_true",
        help="Serialize keys as camelCase (imageUrl, previousClose, ...)",
    )
    parser.add_argument(
        "--image-out",
        default=None,
        help="Also download the chart image and write it to this path",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config)
    setup_logging(
        getattr(logging, str(args.log_level).upper(), logging.INFO),
        log_file=settings.log_file,
    )

    with requests.Session() as session:
        use_case = build_use_case(
            url=settings.url,
            timeout_seconds=settings.timeout_seconds,
            session=session,
            user_agent=settings.user_agent,
            tz=settings.tz,
        )
        try:
            result, image = _run(use_case, args.image_out)
        except FearGreedError as exc:
            logger.error("Fear & Greed scrape failed: %s", exc)
            return 1

    if image is not None:
        out_path = Path(args.image_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(image)
        logger.info("Chart image saved", extra={"path": str(out_path), "bytes": len(image)})

    print(result.to_json(camel_case=args.camel_case, indent=2))
    return 0


def _run(use_case, image_out: str | None):
    result = use_case.execute()
    image = use_case.download_image(result) if image_out else None
    return result, image


if __name__ == "__main__":
    sys.exit(main())
