"""JSON file storage adapter for the address book."""

import json
import logging
from pathlib import Path

from contactbook.core.address_book import AddressBook
from contactbook.core.errors import ContactBookError, DataLoadingError
from contactbook.core.person import Person
from contactbook.core.reminder import Reminder
from contactbook.ports.storage import ReadOnlyAddressBook

logger = logging.getLogger(__name__)


def reminder_to_dict(reminder: Reminder) -> dict:
    return {"header": reminder.header, "deadline": reminder.deadline_text}


def person_to_dict(person: Person) -> dict:
    return {
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "tags": list(person.tags),
        "archived": person.archived,
        "reminders": [reminder_to_dict(r) for r in person.reminders],
    }


def person_from_dict(data: dict) -> Person:
    """Build a Person from its stored form. Raises ContactBookError on bad values."""
    if "name" not in data:
        raise DataLoadingError("Person's name field is missing!")

    archived = data.get("archived", False)
    if not isinstance(archived, bool):
        raise DataLoadingError(f"Person's archived field must be true or false, got {archived!r}")

    tags = data.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise DataLoadingError(f"Person's tags field must be a list of strings, got {tags!r}")

    return Person(
        name=data["name"],
        phone=data.get("phone", ""),
        email=data.get("email", ""),
        address=data.get("address", ""),
        tags=list(tags),
        archived=archived,
        reminders=[Reminder.from_text(r["header"], r["deadline"]) for r in data.get("reminders", [])],
    )


class JsonAddressBookStorage:
    """
    JSON file storage.

    Implements AddressBookStorage protocol. The whole book is one file:
    {"persons": [...]}, persons in store order.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read_address_book(self) -> AddressBook | None:
        """Load the address book. Returns None if the file does not exist."""
        if not self.path.exists():
            logger.info(f"Data file not found: {self.path}")
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            persons = [person_from_dict(item) for item in data.get("persons", [])]
            book = AddressBook(persons)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataLoadingError(f"Malformed JSON in {self.path}: {e}") from e
        except (ContactBookError, KeyError, TypeError, AttributeError) as e:
            raise DataLoadingError(f"Illegal values in {self.path}: {e}") from e

        logger.debug(f"Loaded {len(book)} persons from {self.path}")
        return book

    def save_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        """Write the address book, creating parent directories as needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"persons": [person_to_dict(p) for p in address_book.person_list]}
        self.path.write_text(json.dumps(data, indent=2))
        logger.debug(f"Saved {len(data['persons'])} persons to {self.path}")
