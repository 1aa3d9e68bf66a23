"""Pure person domain logic - no I/O dependencies."""

from dataclasses import dataclass, field

from .errors import DuplicateReminderError, ReminderNotFoundError, ValidationError
from .reminder import Reminder

NAME_MESSAGE_CONSTRAINTS = "Names should not be blank."


@dataclass
class Person:
    """A contact with identity fields, an archived flag and reminders."""

    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    tags: list[str] = field(default_factory=list)
    archived: bool = False
    reminders: list[Reminder] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError(NAME_MESSAGE_CONSTRAINTS)

    @property
    def is_archived(self) -> bool:
        return self.archived

    def is_same_person(self, other: "Person | None") -> bool:
        """
        Identity comparison used for duplicate detection.

        Weaker than ==: two persons with the same name are the same person
        even if their contact fields, archive state or reminders differ.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def archive(self) -> None:
        self.archived = True

    def unarchive(self) -> None:
        self.archived = False

    def has_reminder(self, reminder: Reminder) -> bool:
        return reminder in self.reminders

    def add_reminder(self, reminder: Reminder) -> None:
        """Append a reminder, rejecting one equal to an existing reminder."""
        if self.has_reminder(reminder):
            raise DuplicateReminderError(f"{self.name} already has reminder: {reminder}")
        self.reminders.append(reminder)

    def remove_reminder(self, reminder: Reminder) -> None:
        if not self.has_reminder(reminder):
            raise ReminderNotFoundError(f"{self.name} has no reminder: {reminder}")
        self.reminders.remove(reminder)

    def __str__(self) -> str:
        parts = [self.name]
        if self.phone:
            parts.append(f"Phone: {self.phone}")
        if self.email:
            parts.append(f"Email: {self.email}")
        if self.address:
            parts.append(f"Address: {self.address}")
        if self.tags:
            parts.append("Tags: " + ", ".join(self.tags))
        return "; ".join(parts)
