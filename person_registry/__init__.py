"""
Person Registry

Track every Person you create, find them by name, build them from
delimited text, normalize their names and clear them all at once.
"""

from .entities import Person
from .core import PersonRegistry, PersonBuilder, parse_records
from .exceptions import PersonRegistryError, MalformedRecordError

__version__ = "0.1.0"

__all__ = [
    "Person",
    "PersonRegistry",
    "PersonBuilder",
    "parse_records",
    "PersonRegistryError",
    "MalformedRecordError",
]
