"""Week-window helpers.

Week boundaries are Monday-Sunday (ISO week).
"""

from datetime import date, timedelta


def week_start(d: date) -> date:
    """Return Monday of the calendar week containing d."""
    return d - timedelta(days=d.weekday())


def week_end(d: date) -> date:
    """Return Sunday of the calendar week containing d."""
    return week_start(d) + timedelta(days=6)


def trailing_week_starts(reference_date: date, weeks: int) -> list[date]:
    """Return the Mondays of the last `weeks` weeks, oldest first, ending with the current week."""
    current = week_start(reference_date)
    return [current - timedelta(weeks=offset) for offset in range(weeks - 1, -1, -1)]
