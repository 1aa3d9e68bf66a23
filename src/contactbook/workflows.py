"""Shared command layer between the CLI and the model.

Each command function takes a ModelManager plus user input, mutates the
model, and returns the message to show the user. Indices are 1-based, as
displayed in listings.
"""

import dataclasses
import logging
from pathlib import Path

from .adapters.json_storage import JsonAddressBookStorage
from .config import Config, address_book_path
from .core.errors import ContactBookError, DataLoadingError, DuplicateReminderError
from .core.model import ModelManager
from .core.person import Person
from .core.reminder import Reminder

logger = logging.getLogger(__name__)

MESSAGE_INVALID_PERSON_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_ARCHIVED_INDEX = "The person index provided is invalid in the archived list"
MESSAGE_INVALID_REMINDER_INDEX = "The reminder index provided is invalid"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"
MESSAGE_DUPLICATE_ARCHIVED_PERSON = "This person already exists in the archived list"
MESSAGE_DUPLICATE_REMINDER = "This reminder already exists for this person"


class CommandError(Exception):
    """Raised when a command cannot be carried out, with a user-facing message."""

    pass


def get_storage(config: Config) -> JsonAddressBookStorage:
    """Resolve the address book file from config."""
    return JsonAddressBookStorage(address_book_path(config))


def load_model(config: Config) -> ModelManager:
    """
    Build the model from stored data.

    Starts with an empty address book if the file is missing or unreadable,
    logging why.
    """
    storage = get_storage(config)
    try:
        book = storage.read_address_book()
    except DataLoadingError as e:
        logger.warning(f"Data file could not be loaded, starting with an empty address book: {e}")
        book = None
    return ModelManager(book, config)


def save_model(model: ModelManager) -> Path:
    """Write the model's address book to the file named in its prefs."""
    storage = get_storage(model.prefs)
    storage.save_address_book(model.get_address_book())
    return storage.path


def _pick(items: tuple, index: int, message: str):
    if index < 1 or index > len(items):
        raise CommandError(message)
    return items[index - 1]


# ============== Listing ==============


def list_persons(model: ModelManager) -> tuple[Person, ...]:
    """Switch to the active list and return it."""
    model.set_viewing_archived_list(False)
    model.refresh_filtered_person_list()
    return model.filtered_person_list


def list_archived(model: ModelManager) -> tuple[Person, ...]:
    """Switch to the archived list and return it."""
    model.set_viewing_archived_list(True)
    model.refresh_filtered_person_list()
    return model.filtered_person_list


# ============== Persons ==============


def add_person(model: ModelManager, person: Person) -> str:
    if model.has_archived_person(person):
        raise CommandError(MESSAGE_DUPLICATE_ARCHIVED_PERSON)
    if model.has_person(person):
        raise CommandError(MESSAGE_DUPLICATE_PERSON)
    model.add_person(person)
    for reminder in person.reminders:
        model.add_general_reminder(person, reminder)
    return f"New person added: {person}"


def edit_person(model: ModelManager, index: int, **changes) -> str:
    """
    Replace the person at index with an edited copy.

    The edited person is a new value; its reminders in the general feed are
    re-pointed at it.
    """
    target = _pick(model.filtered_person_list, index, MESSAGE_INVALID_PERSON_INDEX)
    try:
        edited = dataclasses.replace(target, reminders=list(target.reminders), **changes)
        model.set_person(target, edited)
    except ContactBookError as e:
        raise CommandError(str(e)) from e

    feed = model.general_reminder_list
    for reminder in target.reminders:
        if (target, reminder) in feed:
            model.delete_general_reminder(target, reminder)
            model.add_general_reminder(edited, reminder)
    model.refresh_filtered_person_list()
    return f"Edited person: {edited}"


def delete_person(model: ModelManager, index: int) -> str:
    target = _pick(model.filtered_person_list, index, MESSAGE_INVALID_PERSON_INDEX)
    model.delete_person(target)
    for reminder in target.reminders:
        model.delete_general_reminder(target, reminder)
    return f"Deleted person: {target}"


def archive_person(model: ModelManager, index: int) -> str:
    """Archive the person at index in the active list."""
    model.set_viewing_archived_list(False)
    model.refresh_filtered_person_list()
    target = _pick(model.filtered_person_list, index, MESSAGE_INVALID_PERSON_INDEX)
    model.archive_person(target)
    model.refresh_filtered_person_list()
    return f"Archived person: {target}"


def unarchive_person(model: ModelManager, index: int) -> str:
    """Unarchive the person at index in the archived list."""
    archived = model.get_address_book().archived_person_list()
    target = _pick(archived, index, MESSAGE_INVALID_ARCHIVED_INDEX)
    model.unarchive_person(target)
    model.refresh_filtered_person_list()
    return f"Unarchived person: {target}"


# ============== Reminders ==============


def add_reminder(model: ModelManager, index: int, header: str, deadline: str) -> str:
    person = _pick(model.filtered_person_list, index, MESSAGE_INVALID_PERSON_INDEX)
    try:
        reminder = Reminder.from_text(header, deadline)
    except ContactBookError as e:
        raise CommandError(str(e)) from e

    try:
        person.add_reminder(reminder)
    except DuplicateReminderError as e:
        raise CommandError(MESSAGE_DUPLICATE_REMINDER) from e
    model.add_general_reminder(person, reminder)
    return f"New reminder for {person.name} added: {reminder}"


def delete_reminder(model: ModelManager, index: int, reminder_index: int) -> str:
    person = _pick(model.filtered_person_list, index, MESSAGE_INVALID_PERSON_INDEX)
    reminder = _pick(tuple(person.reminders), reminder_index, MESSAGE_INVALID_REMINDER_INDEX)
    person.remove_reminder(reminder)
    model.delete_general_reminder(person, reminder)
    return f"Reminder for {person.name} deleted: {reminder}"
