"""Adapters - I/O implementations of ports."""

from .json_storage import JsonAddressBookStorage

__all__ = [
    "JsonAddressBookStorage",
]
