"""In-memory model: the address book plus the views derived from it."""

import copy
import logging
from pathlib import Path
from typing import Callable

from contactbook.config import Config, GuiSettings

from .address_book import AddressBook
from .errors import PersonNotFoundError
from .ordering import PersonReminder, sort_general_reminders
from .person import Person
from .reminder import Reminder

logger = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]


def show_all_persons(person: Person) -> bool:
    return True


def show_active_persons(person: Person) -> bool:
    return not person.is_archived


def show_archived_persons(person: Person) -> bool:
    return person.is_archived


class ModelManager:
    """
    Owns the address book and derives three views from it.

    - filtered_person_list: persons matching the current filter (active
      persons by default)
    - archived_person_list: archived persons
    - general_reminder_list: (person, reminder) pairs across persons, sorted
      by deadline then header

    Views are recomputed on demand, not kept live. Mutations that go through
    the model (add, delete, set, sort, reset) re-derive them with the current
    filter. Flipping a person's archived flag does not, so callers must call
    refresh_filtered_person_list() afterwards.

    The reminder feed is built once from the active persons at construction
    and then only changes through add_general_reminder and
    delete_general_reminder.
    """

    def __init__(self, address_book=None, prefs: Config | None = None):
        logger.debug(f"Initializing with address book: {address_book!r} and prefs {prefs!r}")

        self._address_book = AddressBook.from_snapshot(address_book) if address_book is not None else AddressBook()
        self._prefs = copy.deepcopy(prefs) if prefs is not None else Config()
        self._viewing_archived_list = False
        self._current_filter: PersonPredicate = show_active_persons
        self._filtered_persons: tuple[Person, ...] = ()
        self._archived_persons: tuple[Person, ...] = ()
        self._recompute()
        self._general_reminders: list[PersonReminder] = self._collect_general_reminders()

    def _collect_general_reminders(self) -> list[PersonReminder]:
        pairs = [(p, r) for p in self._filtered_persons for r in p.reminders]
        sort_general_reminders(pairs)
        return pairs

    def _recompute(self) -> None:
        persons = self._address_book.person_list
        self._filtered_persons = tuple(p for p in persons if self._current_filter(p))
        self._archived_persons = tuple(p for p in persons if show_archived_persons(p))

    # ============== User prefs ==============

    @property
    def prefs(self) -> Config:
        return self._prefs

    def set_prefs(self, prefs: Config) -> None:
        self._prefs = copy.deepcopy(prefs)

    @property
    def gui_settings(self) -> GuiSettings:
        return self._prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._prefs.gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> Path:
        return self._prefs.address_book_file_path

    def set_address_book_file_path(self, path: Path | str) -> None:
        self._prefs.address_book_file = str(path)

    # ============== Address book ==============

    def get_address_book(self) -> AddressBook:
        return self._address_book

    def reset_data(self, snapshot) -> None:
        """Replace all persons with a snapshot and rebuild every view."""
        self._address_book.reset_data(snapshot)
        self._recompute()
        self._general_reminders = self._collect_general_reminders()

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def has_archived_person(self, person: Person) -> bool:
        return any(p.is_archived and p.is_same_person(person) for p in self._address_book)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.refresh_filtered_person_list()

    def delete_person(self, target: Person) -> None:
        self._address_book.remove_person(target)
        self._recompute()

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)
        self._recompute()

    def sort_persons(self, key: Callable[[Person], object], reverse: bool = False) -> None:
        self._address_book.sort_persons(key, reverse=reverse)
        self._recompute()

    def archive_person(self, person: Person) -> None:
        """Mark an active person archived. Refreshing is left to the caller."""
        for p in self._address_book:
            if not p.is_archived and p.is_same_person(person):
                p.archive()
                logger.info(f"Archived {p.name}")
                return
        raise PersonNotFoundError(f"No active person named {person.name}")

    def unarchive_person(self, person: Person) -> None:
        """Mark an archived person active. Refreshing is left to the caller."""
        for p in self._address_book.archived_person_list():
            if p.is_same_person(person):
                p.unarchive()
                logger.info(f"Unarchived {p.name}")
                return
        raise PersonNotFoundError(f"No archived person named {person.name}")

    # ============== General reminders ==============

    @property
    def general_reminder_list(self) -> tuple[PersonReminder, ...]:
        return tuple(self._general_reminders)

    def add_general_reminder(self, person: Person, reminder: Reminder) -> None:
        self._general_reminders.append((person, reminder))
        sort_general_reminders(self._general_reminders)
        logger.info(f"Reminder {{{reminder}}} for {{{person.name}}} added to general reminders")

    def delete_general_reminder(self, person: Person, reminder: Reminder) -> None:
        """Remove the first matching pair. Does nothing if there is none."""
        try:
            self._general_reminders.remove((person, reminder))
        except ValueError:
            logger.debug(f"Reminder {{{reminder}}} for {{{person.name}}} not in general reminders")
            return
        logger.info(f"Reminder {{{reminder}}} for {{{person.name}}} deleted from general reminders")

    # ============== Person views ==============

    def is_viewing_archived_list(self) -> bool:
        return self._viewing_archived_list

    def set_viewing_archived_list(self, viewing: bool) -> None:
        """Choose which built-in filter refresh uses. Does not refresh."""
        self._viewing_archived_list = viewing

    @property
    def current_filter(self) -> PersonPredicate:
        return self._current_filter

    def set_current_filter(self, predicate: PersonPredicate) -> None:
        self.update_filtered_person_list(predicate)

    @property
    def filtered_person_list(self) -> tuple[Person, ...]:
        return self._filtered_persons

    @property
    def archived_person_list(self) -> tuple[Person, ...]:
        return self._archived_persons

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._current_filter = predicate
        self._recompute()

    def refresh_filtered_person_list(self) -> None:
        if self._viewing_archived_list:
            self.update_filtered_person_list(show_archived_persons)
        else:
            self.update_filtered_person_list(show_active_persons)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._prefs == other._prefs
            and self._filtered_persons == other._filtered_persons
        )
