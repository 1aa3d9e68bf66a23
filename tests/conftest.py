"""Shared fixtures."""

import pytest

from contactbook.core.address_book import AddressBook
from contactbook.core.person import Person
from contactbook.core.reminder import Reminder


@pytest.fixture
def alice():
    return Person(
        name="Alice Pauline",
        phone="94351253",
        email="alice@example.com",
        reminders=[Reminder.from_text("Lunch", "2025-01-03 12:00")],
    )


@pytest.fixture
def bob():
    return Person(
        name="Bob Choo",
        phone="98765432",
        archived=True,
        reminders=[Reminder.from_text("Renew policy", "2025-01-01 09:00")],
    )


@pytest.fixture
def carl():
    return Person(
        name="Carl Kurz",
        email="carl@example.com",
        reminders=[
            Reminder.from_text("Call", "2025-01-02 10:00"),
            Reminder.from_text("Birthday", "2025-01-02 10:00"),
        ],
    )


@pytest.fixture
def address_book(alice, bob, carl):
    return AddressBook([alice, bob, carl])
