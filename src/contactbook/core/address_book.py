"""The canonical, ordered collection of persons."""

from typing import Callable, Iterable, Iterator

from .errors import DuplicatePersonError, PersonNotFoundError
from .person import Person


class AddressBook:
    """
    Ordered list of persons, unique under Person.is_same_person.

    Archived persons stay in the same list; the archived flag lives on the
    person. Every mutator either succeeds or leaves the list unchanged.
    """

    def __init__(self, persons: Iterable[Person] | None = None):
        self._persons: list[Person] = []
        if persons is not None:
            self.set_persons(persons)

    @classmethod
    def from_snapshot(cls, snapshot) -> "AddressBook":
        """Copy any ReadOnlyAddressBook into a new AddressBook."""
        book = cls()
        book.reset_data(snapshot)
        return book

    @property
    def person_list(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def archived_person_list(self) -> tuple[Person, ...]:
        """Archived persons, in store order."""
        return tuple(p for p in self._persons if p.is_archived)

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(f"Person already exists: {person.name}")
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited, keeping its position."""
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(f"Person already exists: {edited.name}")
        self._persons[index] = edited

    def remove_person(self, person: Person) -> None:
        del self._persons[self._index_of(person)]

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the whole list. Rejects input containing duplicates."""
        persons = list(persons)
        for i, person in enumerate(persons):
            if any(person.is_same_person(other) for other in persons[i + 1:]):
                raise DuplicatePersonError(f"Person already exists: {person.name}")
        self._persons = persons

    def reset_data(self, snapshot) -> None:
        self.set_persons(snapshot.person_list)

    def sort_persons(self, key: Callable[[Person], object], reverse: bool = False) -> None:
        """Stable in-place sort."""
        self._persons.sort(key=key, reverse=reverse)

    def _index_of(self, person: Person) -> int:
        for i, p in enumerate(self._persons):
            if p.is_same_person(person):
                return i
        raise PersonNotFoundError(f"Person not found: {person.name}")

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({len(self._persons)} persons)"
