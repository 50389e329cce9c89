# SPDX-License-Identifier: MIT

from stepstracker import configuration
from stepstracker.model.app_state import PaymentLedger
from stepstracker.model.entry import Entry, Status
from stepstracker.model.summary import EntryTotals, GrandTotals, ParticipantSummary


def status(
    steps: int, target_steps: int = configuration.DEFAULT_TARGET_STEPS
) -> Status:
    """Reaching the target exactly counts as met."""
    return "OK" if steps >= target_steps else "Missed"


def amount_owed(
    steps: int,
    target_steps: int = configuration.DEFAULT_TARGET_STEPS,
    penalty_amount: int = configuration.DEFAULT_PENALTY_AMOUNT,
) -> int:
    return 0 if status(steps, target_steps) == "OK" else penalty_amount


def participant_summary(
    participant: str,
    entries: list[Entry],
    payments: PaymentLedger,
    target_steps: int = configuration.DEFAULT_TARGET_STEPS,
    penalty_amount: int = configuration.DEFAULT_PENALTY_AMOUNT,
) -> ParticipantSummary:
    """
    Summarize one participant's entries.

    The amount owed is always recomputed from the entries. Paying does not
    reduce it; the payment flag only decides whether grand totals count the
    amount as collected.
    """
    participant_entries = [
        entry for entry in entries if entry["participant"] == participant
    ]
    total_days = len(participant_entries)
    days_missed = len(
        [
            entry
            for entry in participant_entries
            if status(entry["steps"], target_steps) == "Missed"
        ]
    )
    completion_rate = (
        (total_days - days_missed) / total_days * 100 if total_days > 0 else 0.0
    )

    return {
        "participant": participant,
        "total_days": total_days,
        "days_missed": days_missed,
        "amount_owed": days_missed * penalty_amount,
        "completion_rate": completion_rate,
        "is_paid": payments.get(participant, False),
    }


def participant_summaries(
    participants: list[str],
    entries: list[Entry],
    payments: PaymentLedger,
    target_steps: int = configuration.DEFAULT_TARGET_STEPS,
    penalty_amount: int = configuration.DEFAULT_PENALTY_AMOUNT,
    include_empty: bool = False,
) -> list[ParticipantSummary]:
    summaries = [
        participant_summary(
            participant, entries, payments, target_steps, penalty_amount
        )
        for participant in participants
    ]
    if include_empty:
        return summaries
    return [summary for summary in summaries if summary["total_days"] > 0]


def grand_totals(
    participants: list[str],
    entries: list[Entry],
    payments: PaymentLedger,
    target_steps: int = configuration.DEFAULT_TARGET_STEPS,
    penalty_amount: int = configuration.DEFAULT_PENALTY_AMOUNT,
) -> GrandTotals:
    total_owed = 0
    total_collected = 0
    for summary in participant_summaries(
        participants,
        entries,
        payments,
        target_steps,
        penalty_amount,
        include_empty=True,
    ):
        total_owed += summary["amount_owed"]
        if summary["is_paid"]:
            total_collected += summary["amount_owed"]

    return {"total_owed": total_owed, "total_collected": total_collected}


def entry_totals(
    entries: list[Entry],
    target_steps: int = configuration.DEFAULT_TARGET_STEPS,
    penalty_amount: int = configuration.DEFAULT_PENALTY_AMOUNT,
) -> EntryTotals:
    return {
        "total_entries": len(entries),
        "total_owed": sum(
            amount_owed(entry["steps"], target_steps, penalty_amount)
            for entry in entries
        ),
    }
