# tests/unit/entities/test_fear_greed_result.py

import json
from datetime import datetime

import pytest

from cnn_fear_greed.domain.errors import EmptyFieldError
from cnn_fear_greed.domain.time.eastern import EASTERN
from cnn_fear_greed.entities.fear_greed_result import FearGreedResult, ValueText

IMAGE_URL = "http://markets.money.cnn.com/Marketsdata/uploadhandler/z6f8f7d0az4c46c1b6d9644447a6d8829abaa17ece.png"


def _complete(**overrides) -> FearGreedResult:
    kwargs = dict(
        image_url=IMAGE_URL,
        now=ValueText(44, "Fear"),
        previous_close=ValueText(52, "Neutral"),
        one_week_ago=ValueText(54, "Neutral"),
        one_month_ago=ValueText(48, "Neutral"),
        one_year_ago=ValueText(23, "Extreme Fear"),
        last_update_date=datetime(2021, 3, 29, 16, 59, tzinfo=EASTERN),
    )
    kwargs.update(overrides)
    return FearGreedResult(**kwargs)


class _RecordingImageFetcher:
    def __init__(self) -> None:
        self.urls: list[str] = []

    def download_image(self, url: str) -> bytes:
        self.urls.append(url)
        return b"\x89PNG"


def test_complete_result_passes_validation():
    r = _complete()

    assert r.is_complete()
    assert r.missing_fields() == []
    assert r.ensure_complete() is r


def test_empty_result_reports_every_field():
    r = FearGreedResult()

    assert r.missing_fields() == [
        "image_url",
        "now",
        "previous_close",
        "one_week_ago",
        "one_month_ago",
        "one_year_ago",
        "last_update_date",
    ]


@pytest.mark.parametrize(
    "overrides, missing",
    [
        ({"image_url": ""}, "image_url"),
        ({"now": ValueText(0, "Fear")}, "now"),
        ({"previous_close": ValueText(52, "")}, "previous_close"),
        ({"one_week_ago": ValueText()}, "one_week_ago"),
        ({"one_month_ago": ValueText(0, "")}, "one_month_ago"),
        ({"one_year_ago": ValueText(23, "")}, "one_year_ago"),
        ({"last_update_date": None}, "last_update_date"),
    ],
)
def test_ensure_complete_rejects_any_single_empty_field(overrides, missing):
    r = _complete(**overrides)

    with pytest.raises(EmptyFieldError) as exc_info:
        r.ensure_complete()

    assert exc_info.value.missing_fields == (missing,)
    assert exc_info.value.result is r


def test_value_text_rejects_non_int_value():
    with pytest.raises(TypeError, match="value must be an int"):
        ValueText("44", "Fear")  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="value must be an int"):
        ValueText(True, "Fear")  # type: ignore[arg-type]


def test_result_requires_timezone_aware_last_update_date():
    with pytest.raises(ValueError, match="timezone-aware"):
        _complete(last_update_date=datetime(2021, 3, 29, 16, 59))


def test_result_is_immutable():
    r = _complete()
    with pytest.raises(AttributeError):
        r.image_url = "x"  # type: ignore[misc]


def test_to_dict_snake_case():
    d = _complete().to_dict()

    assert d == {
        "image_url": IMAGE_URL,
        "now": {"value": 44, "text": "Fear"},
        "previous_close": {"value": 52, "text": "Neutral"},
        "one_week_ago": {"value": 54, "text": "Neutral"},
        "one_month_ago": {"value": 48, "text": "Neutral"},
        "one_year_ago": {"value": 23, "text": "Extreme Fear"},
        "last_update_date": "2021-03-29T16:59:00-04:00",
    }


def test_to_json_camel_case_keys():
    payload = json.loads(_complete().to_json(camel_case=True))

    assert list(payload) == [
        "imageUrl",
        "now",
        "previousClose",
        "oneWeekAgo",
        "oneMonthAgo",
        "oneYearAgo",
        "lastUpdateDate",
    ]
    assert payload["oneYearAgo"] == {"value": 23, "text": "Extreme Fear"}


def test_get_image_bytes_delegates_to_fetcher():
    fetcher = _RecordingImageFetcher()

    assert _complete().get_image_bytes(fetcher) == b"\x89PNG"
    assert fetcher.urls == [IMAGE_URL]
