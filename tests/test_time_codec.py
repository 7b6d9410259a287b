from datetime import datetime

import pandas as pd
import pytest

from bikeflow.traffic.time_codec import format_time, is_valid_time_filter, minutes_since_midnight
from bikeflow.traffic.types import ANY_TIME


def test_minutes_since_midnight_drops_seconds():
    assert minutes_since_midnight(datetime(2024, 3, 1, 13, 30, 59, 999999)) == 810
    assert minutes_since_midnight(datetime(2024, 3, 1, 0, 0)) == 0
    assert minutes_since_midnight(datetime(2024, 3, 1, 23, 59, 59)) == 1439


def test_minutes_since_midnight_accepts_pandas_timestamp():
    assert minutes_since_midnight(pd.Timestamp("2024-03-01 08:05:00")) == 485


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "12:00 AM"),
        (5, "12:05 AM"),
        (540, "9:00 AM"),
        (720, "12:00 PM"),
        (810, "1:30 PM"),
        (1439, "11:59 PM"),
    ],
)
def test_format_time(minutes, expected):
    assert format_time(minutes) == expected


def test_is_valid_time_filter():
    assert is_valid_time_filter(ANY_TIME)
    assert is_valid_time_filter(0)
    assert is_valid_time_filter(1439)
    assert not is_valid_time_filter(1440)
    assert not is_valid_time_filter(-2)
    assert not is_valid_time_filter(12.5)
    assert not is_valid_time_filter(True)
    assert not is_valid_time_filter(None)
