from datetime import date, datetime

import pandas as pd
import pytest

from campaign_views.isoweek import iso_week_key


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-01-04", "2021-W01"),
        ("2020-12-31", "2020-W53"),
        ("2023-01-02", "2023-W01"),
        ("2023-01-01", "2022-W52"),
        ("2023-03-15", "2023-W11"),
        ("2023-01-02T10:30:00Z", "2023-W01"),
    ],
)
def test_iso_week_key_from_strings(value, expected):
    assert iso_week_key(value) == expected


def test_iso_week_key_from_date_types():
    assert iso_week_key(date(2021, 1, 4)) == "2021-W01"
    assert iso_week_key(datetime(2020, 12, 31, 23, 59)) == "2020-W53"
    assert iso_week_key(pd.Timestamp("2019-12-30")) == "2020-W01"


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2023-13-45", 20230102, pd.NaT])
def test_iso_week_key_unparseable_is_none(value):
    assert iso_week_key(value) is None
