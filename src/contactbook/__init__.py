"""contactbook - personal contact manager with reminders."""

__version__ = "0.1.0"
