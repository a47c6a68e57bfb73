"""ISO-8601 week keys (``YYYY-Www``) for calendar dates."""

from datetime import date, datetime

import pandas as pd

type DateLike = date | datetime | str | None


def _to_date(value: DateLike) -> date | None:
    if value is None or value is pd.NaT:
        return None

    match value:
        case datetime():
            return value.date()
        case date():
            return value
        case str() if value.strip():
            parsed = pd.to_datetime(value.strip(), errors="coerce")
            return None if pd.isna(parsed) else parsed.date()
        case _:
            return None


def iso_week_key(value: DateLike) -> str | None:
    """Return the ISO week of ``value`` as ``YYYY-Www``.

    Weeks run Monday to Sunday and week 1 is the week holding the year's
    first Thursday, so the year part is the ISO year and can differ from the
    calendar year around New Year (2020-12-31 is ``2020-W53``, 2021-01-04 is
    ``2021-W01``). Anything that does not parse as a date gives ``None``.
    """
    day = _to_date(value)
    if day is None:
        return None

    year, week, _ = day.isocalendar()
    return f"{year}-W{week:02d}"
