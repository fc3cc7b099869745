"""
Exceptions raised by the person registry.
"""

from typing import Optional


class PersonRegistryError(Exception):
    """Base class for registry errors."""


class MalformedRecordError(PersonRegistryError, ValueError):
    """
    A delimited-text record did not have the expected number of fields.

    Attributes:
        line_number: 1-based line number in the source text
        line: The raw line as it appeared in the source
        expected: Number of fields a record must have
        found: Number of fields the record actually had
    """

    def __init__(self, line_number: int, line: str, expected: int, found: int, source: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        self.expected = expected
        self.found = found
        self.source = source
        where = f"{source}:{line_number}" if source else f"line {line_number}"
        super().__init__(
            f"Malformed record at {where}: expected {expected} fields, found {found}: {line!r}"
        )
