# cnn_fear_greed/adapters/cnn_fear_greed_extractor.py
from __future__ import annotations

import logging
import re
from datetime import datetime, tzinfo
from typing import Callable, Optional

from bs4 import BeautifulSoup

from cnn_fear_greed.domain.errors import EmptyFieldError, ItemCountError, TextParseError
from cnn_fear_greed.domain.time.eastern import EASTERN, require_tz_aware
from cnn_fear_greed.domain.time.last_updated import resolve_last_updated
from cnn_fear_greed.entities.fear_greed_result import (
    INDICATOR_FIELDS,
    FearGreedResult,
    ValueText,
)
from cnn_fear_greed.interfaces.fear_greed_extractor import FearGreedExtractor

logger = logging.getLogger(__name__)

CONTAINER_SELECTOR = "#fearGreedContainer .modContent"
ITEM_SELECTOR = "ul li"
DATE_SELECTOR = "#needleAsOfDate"

_IMAGE_URL_RE = re.compile(
    r"http://markets\.money\.cnn\.com/Marketsdata/uploadhandler/\w+\.png"
)
# "Fear & Greed Now: 44 (Fear)" -> (44, "Fear")
_VALUE_TEXT_RE = re.compile(r".+?(\d+)\s\((.+)\)")


def extract_image_url(html: str) -> str:
    """Return the first chart image URL found in the markup, or ''."""
    m = _IMAGE_URL_RE.search(html or "")
    return m.group(0) if m else ""


def parse_value_text(text: str) -> tuple[int, str]:
    """
    Parse '<prefix> <N> (<label>)' into (N, label).

    Raises:
        TextParseError if the text does not have that shape.
    """
    m = _VALUE_TEXT_RE.search(text or "")
    if not m:
        raise TextParseError(f"Unsupported indicator text: {text!r}")
    return int(m.group(1)), m.group(2)


class CnnFearGreedExtractor(FearGreedExtractor):
    """
    Extracts the Fear & Greed indicators from the money.cnn.com page.

    Contrato temporal:
    - o relógio injetado deve devolver datetimes timezone-aware
    - last_update_date é sempre timezone-aware no fuso `tz`
    """

    def __init__(
        self,
        tz: tzinfo = EASTERN,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.tz = tz
        self._clock = clock or (lambda: datetime.now(self.tz))

    def _parse_items(self, container) -> dict[str, ValueText]:
        items = container.select(ITEM_SELECTOR)
        if len(items) != len(INDICATOR_FIELDS):
            raise ItemCountError(len(INDICATOR_FIELDS), len(items))

        indicators: dict[str, ValueText] = {}
        for field_name, item in zip(INDICATOR_FIELDS, items):
            text = " ".join(item.get_text().split())
            value, label = parse_value_text(text)
            indicators[field_name] = ValueText(value=value, text=label)
        return indicators

    def _parse_date(self, container) -> Optional[datetime]:
        node = container.select_one(DATE_SELECTOR)
        text = node.get_text() if node is not None else ""

        # relógio ingênuo é erro do chamador, não campo vazio
        now = self._clock()
        require_tz_aware(now, "clock()")

        try:
            return resolve_last_updated(text, now=now, tz=self.tz)
        except ValueError as exc:
            logger.warning("Could not resolve last updated date: %s", exc)
            return None

    def extract(self, doc: BeautifulSoup) -> FearGreedResult:
        fields: dict = {}

        container = doc.select_one(CONTAINER_SELECTOR)
        if container is not None:
            fields["image_url"] = extract_image_url(container.decode_contents())
            fields.update(self._parse_items(container))
            fields["last_update_date"] = self._parse_date(container)
        else:
            logger.warning(
                "Fear & Greed container not found",
                extra={"selector": CONTAINER_SELECTOR},
            )

        result = FearGreedResult(**fields)

        try:
            result.ensure_complete()
        except EmptyFieldError as exc:
            logger.warning(
                "Fear & Greed extraction incomplete",
                extra={"missing": ",".join(exc.missing_fields)},
            )
            raise

        logger.info(
            "Fear & Greed extracted",
            extra={
                "now": result.now.value,
                "last_update_date": result.last_update_date.isoformat(),
            },
        )
        return result
