# SPDX-License-Identifier: MIT

from stepstracker.model.entry import Status


def format_amount(amount: int, currency: str) -> str:
    return f"{currency} {amount:,}"


def format_steps(steps: int) -> str:
    return f"{steps:,}"


def format_status(status: Status) -> str:
    if status == "OK":
        return "[green]OK[/green]"
    return "[red]Missed[/red]"


def format_paid(is_paid: bool) -> str:
    return "[green]Paid[/green]" if is_paid else "[yellow]Unpaid[/yellow]"
