"""Exceptions raised by the address book model."""


class ContactBookError(Exception):
    """Base class for model errors."""

    pass


class ValidationError(ContactBookError, ValueError):
    """Raised when a field value fails validation."""

    pass


class DuplicatePersonError(ContactBookError):
    """Raised when a person identity-equal to an existing one is added."""

    pass


class PersonNotFoundError(ContactBookError):
    """Raised when an operation targets a person that is not present."""

    pass


class DuplicateReminderError(ContactBookError):
    """Raised when a person already carries an equal reminder."""

    pass


class ReminderNotFoundError(ContactBookError):
    """Raised when a person does not carry the given reminder."""

    pass


class DataLoadingError(ContactBookError):
    """Raised when a stored address book cannot be read."""

    pass
