# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from stepstracker.model.entity_id import EntityId
from stepstracker.repository.id_map import ID_MAP_REPO
from stepstracker.time import date_from_str


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a calendar day.

    Accepts YYYY-MM-DD, "today"/"t", "yesterday"/"y", or a day offset from
    today such as "-2".
    """
    if date_param is None:
        return None

    date = date_param.strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d{1,4}$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    raise typer.BadParameter("Incorrect date format, expected YYYY-MM-DD")


def resolve_entry_id(id_param: str) -> EntityId:
    """
    Map the short id shown in tables back to the stored entry id. Anything
    that is not a known short id is taken as a stored id as-is.
    """
    id_param = id_param.strip()
    if re.match(r"^\d+$", id_param):
        real_id = ID_MAP_REPO.get_real_id(int(id_param))
        if real_id is not None:
            return real_id
    return id_param
