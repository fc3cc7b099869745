"""
Core modules for Person Registry

1. Registry (tracked people, lookup, bulk operations)
2. Builder (custom constructors that feed the registry)
3. Parser (naive delimited-text records)
"""

from .registry import PersonRegistry
from .builder import PersonBuilder
from .parser import parse_records, split_record, FIELD_DELIMITER, RECORD_FIELDS

__all__ = [
    "PersonRegistry",
    "PersonBuilder",
    "parse_records",
    "split_record",
    "FIELD_DELIMITER",
    "RECORD_FIELDS",
]
