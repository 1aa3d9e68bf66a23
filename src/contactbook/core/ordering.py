"""Ordering of the global reminder feed - pure functions."""

from datetime import datetime

from .person import Person
from .reminder import Reminder

PersonReminder = tuple[Person, Reminder]


def general_reminder_sort_key(pair: PersonReminder) -> tuple[datetime, str]:
    """Sooner deadline first, then header (case-sensitive)."""
    _, reminder = pair
    return (reminder.deadline, reminder.header)


def compare_general_reminders(a: PersonReminder, b: PersonReminder) -> int:
    """
    Comparator form of general_reminder_sort_key.

    Returns -1, 0 or 1. Pairs with equal deadline and header compare equal
    regardless of the person they belong to.
    """
    result = a[1].compare_deadline(b[1])
    if result != 0:
        return result
    return a[1].compare_header(b[1])


def sort_general_reminders(pairs: list[PersonReminder]) -> None:
    """Sort the feed in place. Stable, so equal pairs keep insertion order."""
    pairs.sort(key=general_reminder_sort_key)
