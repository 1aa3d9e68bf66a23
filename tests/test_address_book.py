"""Tests for the AddressBook store."""

import pytest

from contactbook.core.address_book import AddressBook
from contactbook.core.errors import DuplicatePersonError, PersonNotFoundError
from contactbook.core.person import Person


class TestAddPerson:
    def test_appends_in_order(self, alice, carl):
        book = AddressBook()
        book.add_person(alice)
        book.add_person(carl)
        assert book.person_list == (alice, carl)

    def test_duplicate_rejected_and_store_unchanged(self, address_book, alice):
        before = address_book.person_list
        with pytest.raises(DuplicatePersonError):
            address_book.add_person(Person(name=alice.name, phone="000"))
        assert address_book.person_list == before

    def test_has_person_uses_identity(self, address_book, alice):
        assert address_book.has_person(Person(name=alice.name)) is True
        assert address_book.has_person(Person(name="Nobody")) is False


class TestRemovePerson:
    def test_removes_by_identity(self, address_book, alice, bob, carl):
        address_book.remove_person(Person(name=alice.name))
        assert address_book.person_list == (bob, carl)

    def test_missing_raises(self, address_book):
        with pytest.raises(PersonNotFoundError):
            address_book.remove_person(Person(name="Nobody"))
        assert len(address_book) == 3


class TestSetPerson:
    def test_preserves_position(self, address_book, alice, bob, carl):
        edited = Person(name="Bob Choo", phone="12345678")
        address_book.set_person(bob, edited)
        assert address_book.person_list == (alice, edited, carl)

    def test_rename_allowed(self, address_book, bob):
        edited = Person(name="Robert Choo")
        address_book.set_person(bob, edited)
        assert address_book.person_list[1] is edited

    def test_missing_target(self, address_book):
        with pytest.raises(PersonNotFoundError):
            address_book.set_person(Person(name="Nobody"), Person(name="Somebody"))

    def test_collision_with_other_entry(self, address_book, alice, bob):
        before = address_book.person_list
        with pytest.raises(DuplicatePersonError):
            address_book.set_person(bob, Person(name=alice.name))
        assert address_book.person_list == before


class TestSortAndViews:
    def test_sort_is_stable(self):
        people = [Person(name=n, phone=p) for n, p in [("A", "2"), ("B", "1"), ("C", "2"), ("D", "1")]]
        book = AddressBook(people)
        book.sort_persons(key=lambda p: p.phone)
        assert [p.name for p in book] == ["B", "D", "A", "C"]

    def test_archived_person_list(self, address_book, bob):
        assert address_book.archived_person_list() == (bob,)

    def test_set_persons_rejects_duplicates(self, alice):
        with pytest.raises(DuplicatePersonError):
            AddressBook([alice, Person(name=alice.name)])

    def test_reset_data_copies_list(self, address_book):
        copy = AddressBook.from_snapshot(address_book)
        assert copy == address_book
        copy.remove_person(copy.person_list[0])
        assert len(address_book) == 3
