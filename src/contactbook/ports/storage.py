"""Address book storage interface."""

from typing import Protocol

from contactbook.core.address_book import AddressBook
from contactbook.core.person import Person


class ReadOnlyAddressBook(Protocol):
    """Anything exposing an ordered, read-only sequence of persons."""

    @property
    def person_list(self) -> tuple[Person, ...]:
        ...


class AddressBookStorage(Protocol):
    """Interface for loading and saving the address book."""

    def read_address_book(self) -> AddressBook | None:
        """Load the stored address book. Returns None if nothing is stored."""
        ...

    def save_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        """Persist a snapshot of the address book."""
        ...
