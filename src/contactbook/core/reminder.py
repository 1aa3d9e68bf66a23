"""Pure reminder domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime

from .errors import ValidationError

HEADER_REGEX = re.compile(r"[^\s].*")
HEADER_MESSAGE_CONSTRAINTS = "Reminder can take any value but cannot be blank."

DATE_INPUT_FORMAT = "%Y-%m-%d %H:%M"
DATE_INPUT_MESSAGE = "yyyy-MM-dd HH:mm"
DATE_INPUT_REGEX = re.compile(r"\d{4}-(0[1-9]|1[0-2])-\d{2} \d{2}:\d{2}")
DEADLINE_MESSAGE_FORMAT_CONSTRAINT = f"Deadline should be in the following format: {DATE_INPUT_MESSAGE}"
DEADLINE_MESSAGE_INVALID_CONSTRAINT = "Deadline given is an invalid date or time."


@dataclass(frozen=True, eq=False)
class Reminder:
    """
    A dated note attached to a person.

    Immutable. Equality ignores header case so that "Call" and "call" due at
    the same time count as the same reminder.
    """

    header: str
    deadline: datetime

    def __post_init__(self):
        if not isinstance(self.header, str) or not self.is_valid_header(self.header):
            raise ValidationError(HEADER_MESSAGE_CONSTRAINTS)
        if not isinstance(self.deadline, datetime):
            raise ValidationError(DEADLINE_MESSAGE_INVALID_CONSTRAINT)

    @classmethod
    def from_text(cls, header: str, deadline: str) -> "Reminder":
        """Create a Reminder from user input, validating both fields."""
        if not isinstance(header, str) or not cls.is_valid_header(header):
            raise ValidationError(HEADER_MESSAGE_CONSTRAINTS)
        if not isinstance(deadline, str):
            raise ValidationError(DEADLINE_MESSAGE_FORMAT_CONSTRAINT)
        cls.is_valid_deadline(deadline)
        return cls(header=header, deadline=datetime.strptime(deadline, DATE_INPUT_FORMAT))

    @staticmethod
    def is_valid_header(header: str) -> bool:
        """Non-blank header."""
        return HEADER_REGEX.fullmatch(header) is not None

    @staticmethod
    def is_valid_deadline_format(text: str) -> bool:
        return DATE_INPUT_REGEX.fullmatch(text) is not None

    @staticmethod
    def is_valid_deadline_date(text: str) -> bool:
        """True if the text resolves to a real calendar date and time."""
        try:
            datetime.strptime(text, DATE_INPUT_FORMAT)
        except ValueError:
            return False
        return True

    @classmethod
    def is_valid_deadline(cls, text: str) -> bool:
        """
        Check format first, then calendar validity.

        Raises ValidationError describing whichever check failed.
        """
        if not cls.is_valid_deadline_format(text):
            raise ValidationError(DEADLINE_MESSAGE_FORMAT_CONSTRAINT)
        if not cls.is_valid_deadline_date(text):
            raise ValidationError(DEADLINE_MESSAGE_INVALID_CONSTRAINT)
        return True

    @property
    def deadline_text(self) -> str:
        """Deadline formatted in the input pattern."""
        return self.deadline.strftime(DATE_INPUT_FORMAT)

    def compare_deadline(self, other: "Reminder") -> int:
        if self.deadline == other.deadline:
            return 0
        return -1 if self.deadline < other.deadline else 1

    def compare_header(self, other: "Reminder") -> int:
        """Case-sensitive header comparison, so sorting has a proper order."""
        return (self.header > other.header) - (self.header < other.header)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Reminder):
            return NotImplemented
        return self.deadline == other.deadline and self.header.lower() == other.header.lower()

    def __hash__(self) -> int:
        return hash((self.header.lower(), self.deadline))

    def __str__(self) -> str:
        return f"{self.header}, due by {self.deadline_text}"
