# cnn_fear_greed/entities/fear_greed_result.py

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from cnn_fear_greed.domain.errors import EmptyFieldError

if TYPE_CHECKING:
    from cnn_fear_greed.interfaces.image_fetcher import ImageFetcher


# Ordem dos itens na página: agora, fechamento anterior, 1 semana, 1 mês, 1 ano
INDICATOR_FIELDS: tuple[str, ...] = (
    "now",
    "previous_close",
    "one_week_ago",
    "one_month_ago",
    "one_year_ago",
)

_CAMEL_KEYS = {
    "image_url": "imageUrl",
    "now": "now",
    "previous_close": "previousClose",
    "one_week_ago": "oneWeekAgo",
    "one_month_ago": "oneMonthAgo",
    "one_year_ago": "oneYearAgo",
    "last_update_date": "lastUpdateDate",
}


@dataclass(frozen=True, slots=True)
class ValueText:
    """
    One sentiment indicator: numeric reading (roughly 0-100) and its label,
    e.g. (44, "Fear") or (23, "Extreme Fear").
    """

    value: int = 0
    text: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("value must be an int")
        if not isinstance(self.text, str):
            raise TypeError("text must be a string")

    def is_empty(self) -> bool:
        # uma leitura igual a 0 também conta como vazia
        return self.value == 0 or self.text == ""

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "text": self.text}


@dataclass(frozen=True, slots=True)
class FearGreedResult:
    """
    Domain entity holding one scrape of the CNN Fear & Greed page.

    Invariants (checked by ensure_complete):
    - image_url is non-empty
    - every indicator has a non-zero value and a non-empty text
    - last_update_date is present and timezone-aware
    """

    image_url: str = ""
    now: ValueText = field(default_factory=ValueText)
    previous_close: ValueText = field(default_factory=ValueText)
    one_week_ago: ValueText = field(default_factory=ValueText)
    one_month_ago: ValueText = field(default_factory=ValueText)
    one_year_ago: ValueText = field(default_factory=ValueText)
    last_update_date: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not isinstance(self.image_url, str):
            raise TypeError("image_url must be a string")

        for field_name in INDICATOR_FIELDS:
            if not isinstance(getattr(self, field_name), ValueText):
                raise TypeError(f"{field_name} must be a ValueText")

        if self.last_update_date is not None:
            if not isinstance(self.last_update_date, datetime):
                raise TypeError("last_update_date must be a datetime")
            if self.last_update_date.tzinfo is None:
                raise ValueError("last_update_date must be timezone-aware")

    def missing_fields(self) -> list[str]:
        missing: list[str] = []
        if not self.image_url:
            missing.append("image_url")
        for field_name in INDICATOR_FIELDS:
            if getattr(self, field_name).is_empty():
                missing.append(field_name)
        if self.last_update_date is None:
            missing.append("last_update_date")
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def ensure_complete(self) -> "FearGreedResult":
        """
        Raise EmptyFieldError unless every field is populated.

        Returns self so it can be chained after construction.
        """
        missing = self.missing_fields()
        if missing:
            raise EmptyFieldError(missing, result=self)
        return self

    def indicators(self) -> dict[str, ValueText]:
        return {name: getattr(self, name) for name in INDICATOR_FIELDS}

    def to_dict(self, camel_case: bool = False) -> dict[str, Any]:
        payload: dict[str, Any] = {"image_url": self.image_url}
        for name, vt in self.indicators().items():
            payload[name] = vt.to_dict()
        payload["last_update_date"] = (
            self.last_update_date.isoformat() if self.last_update_date else None
        )

        if camel_case:
            return {_CAMEL_KEYS[k]: v for k, v in payload.items()}
        return payload

    def to_json(self, camel_case: bool = False, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(camel_case=camel_case), indent=indent)

    def get_image_bytes(self, fetcher: "ImageFetcher") -> bytes:
        """Download the chart image referenced by this result."""
        return fetcher.download_image(self.image_url)
