# SPDX-License-Identifier: MIT

from typing import Optional, Union

import pendulum

from stepstracker.errors import ValidationError
from stepstracker.time import date_from_str, date_to_str, today_local


def validate_participant(participant: Optional[str], participants: list[str]) -> str:
    if participant is None or participant.strip() == "":
        raise ValidationError("Please choose a participant.")
    participant = participant.strip()
    if participant not in participants:
        raise ValidationError(
            f"Unknown participant: {participant}. "
            f"Valid options: {', '.join(participants)}"
        )
    return participant


def validate_steps(steps: Optional[Union[int, str]]) -> int:
    """
    Accept a step count as an int or a string of digits.

    Returns the count, raises ValidationError when it is missing, not a whole
    number, or negative.
    """
    if steps is None or (isinstance(steps, str) and steps.strip() == ""):
        raise ValidationError("Please enter a step count.")
    if isinstance(steps, bool):
        raise ValidationError(f"Step count must be a whole number. Got: {steps}")
    if isinstance(steps, str):
        try:
            steps = int(steps.strip())
        except ValueError:
            raise ValidationError(f"Step count must be a whole number. Got: {steps}")
    if not isinstance(steps, int):
        raise ValidationError(
            f"Step count must be a whole number. Got: {type(steps).__name__}"
        )
    if steps < 0:
        raise ValidationError("Step count must be a positive number.")
    return steps


def validate_date(
    date: Optional[Union[pendulum.Date, str]],
    today: Optional[pendulum.Date] = None,
) -> pendulum.Date:
    if date is None or (isinstance(date, str) and date.strip() == ""):
        raise ValidationError("Please enter a date.")
    if isinstance(date, str):
        try:
            date = date_from_str(date)
        except ValueError:
            raise ValidationError(f"Date must be in YYYY-MM-DD format. Got: {date}")

    if today is None:
        today = today_local()
    if date > today:
        raise ValidationError(
            f"Date cannot be in the future ({date_to_str(date)} is after "
            f"{date_to_str(today)})."
        )
    return date
