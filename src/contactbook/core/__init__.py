"""Functional core - the in-memory address book model, no I/O."""

from .errors import (
    ContactBookError,
    ValidationError,
    DuplicatePersonError,
    PersonNotFoundError,
    DuplicateReminderError,
    ReminderNotFoundError,
    DataLoadingError,
)
from .reminder import Reminder
from .person import Person
from .ordering import general_reminder_sort_key, compare_general_reminders
from .address_book import AddressBook
from .model import ModelManager, show_all_persons, show_active_persons, show_archived_persons

__all__ = [
    # Errors
    "ContactBookError",
    "ValidationError",
    "DuplicatePersonError",
    "PersonNotFoundError",
    "DuplicateReminderError",
    "ReminderNotFoundError",
    "DataLoadingError",
    # Entities
    "Reminder",
    "Person",
    "AddressBook",
    # Reminder feed ordering
    "general_reminder_sort_key",
    "compare_general_reminders",
    # Model
    "ModelManager",
    "show_all_persons",
    "show_active_persons",
    "show_archived_persons",
]
