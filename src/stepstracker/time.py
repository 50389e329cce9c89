# SPDX-License-Identifier: MIT

from typing import cast

import pendulum

DATE_FORMAT = "YYYY-MM-DD"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"Not a datetime: {datetime}")
    return parsed


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def date_to_str(date: pendulum.Date) -> str:
    return date.format(DATE_FORMAT)


def date_from_str(date: str) -> pendulum.Date:
    return cast(pendulum.Date, pendulum.from_format(date.strip(), DATE_FORMAT).date())


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")
