"""Ports - interfaces/protocols for external dependencies."""

from .storage import AddressBookStorage, ReadOnlyAddressBook

__all__ = [
    "AddressBookStorage",
    "ReadOnlyAddressBook",
]
