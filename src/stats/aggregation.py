"""
Summary statistics over submissions and RSVPs.

`compute_*` are the authoritative full recomputes. `add_submission` and
`remove_submission` are the incremental rules applied between recomputes; for
any sequence of inserts and deletes they produce the same value as a full
recompute of the resulting collection.
"""

from collections import Counter
from collections.abc import Iterable

from src.memories.dtos import SubmissionDTO
from src.rsvp.dtos import RSVPDTO, Attendance
from src.stats.dtos import RSVPStats, SubmissionStats


def compute_submission_stats(submissions: Iterable[SubmissionDTO]) -> SubmissionStats:
    total = 0
    by_table: Counter[int] = Counter()
    for submission in submissions:
        total += 1
        if submission.table_number is not None:
            by_table[submission.table_number] += 1
    return SubmissionStats(total=total, by_table=dict(by_table))


def add_submission(stats: SubmissionStats, submission: SubmissionDTO) -> SubmissionStats:
    by_table = dict(stats.by_table)
    if submission.table_number is not None:
        by_table[submission.table_number] = by_table.get(submission.table_number, 0) + 1
    return SubmissionStats(total=stats.total + 1, by_table=by_table)


def remove_submission(stats: SubmissionStats, submission: SubmissionDTO) -> SubmissionStats:
    """Decrement for a confirmed delete. A table that drops to zero loses its key."""
    by_table = dict(stats.by_table)
    table = submission.table_number
    if table is not None and table in by_table:
        remaining = by_table[table] - 1
        if remaining > 0:
            by_table[table] = remaining
        else:
            del by_table[table]
    return SubmissionStats(total=max(stats.total - 1, 0), by_table=by_table)


def compute_rsvp_stats(rsvps: Iterable[RSVPDTO]) -> RSVPStats:
    total = attending = not_attending = maybe = total_guests = 0
    for rsvp in rsvps:
        total += 1
        if rsvp.attendance == Attendance.ATTENDING:
            attending += 1
            total_guests += rsvp.guest_count
        elif rsvp.attendance == Attendance.NOT_ATTENDING:
            not_attending += 1
        elif rsvp.attendance == Attendance.MAYBE:
            maybe += 1
        else:
            raise ValueError(f"Unhandled attendance: {rsvp.attendance!r}")
    return RSVPStats(
        total=total,
        attending=attending,
        not_attending=not_attending,
        maybe=maybe,
        total_guests=total_guests,
    )
