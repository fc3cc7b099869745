"""
Parser - Naive delimited-text records

Input looks like:

    Elon Musk, 45, Tesla
    Mark Zuckerberg, 32, Facebook

One record per line (only a line feed ends a record; a carriage return
before it is dropped), fields separated by the literal ", ". There is no
quoting and no escaping, so this is deliberately not CSV: a comma-space
inside a value always starts a new field.
"""

import logging
from typing import List, Optional, Tuple

from ..config import Config, MALFORMED_POLICIES
from ..exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ", "
RECORD_FIELDS = ("name", "age", "company")

Record = Tuple[Optional[str], ...]


def split_record(line: str, trim: bool = True) -> List[str]:
    """Split one line into its raw fields."""
    fields = line.split(FIELD_DELIMITER)
    if trim:
        fields = [f.strip() for f in fields]
    return fields


def parse_records(
    text: str,
    trim: Optional[bool] = None,
    policy: Optional[str] = None,
    source: Optional[str] = None,
) -> List[Record]:
    """
    Parse delimited text into (name, age, company) records.

    Blank and whitespace-only lines are skipped. Lines with the wrong
    number of fields are handled according to policy:
        raise - raise MalformedRecordError (nothing is returned)
        skip  - log a warning and drop the line
        pad   - fill missing trailing fields with None; too many fields
                still raises

    Args:
        text: Raw text, newline separated
        trim: Strip whitespace around each field (default: Config.TRIM_FIELDS)
        policy: Malformed-record policy (default: Config.MALFORMED_POLICY)
        source: Optional name of where the text came from, used in errors

    Returns:
        Records in the order they appear

    Raises:
        MalformedRecordError: For a bad record under 'raise' or 'pad'
        ValueError: If policy is unknown
    """
    trim = Config.TRIM_FIELDS if trim is None else trim
    policy = (Config.MALFORMED_POLICY if policy is None else policy).lower()

    if policy not in MALFORMED_POLICIES:
        raise ValueError(f"Unknown malformed-record policy: {policy}")

    expected = len(RECORD_FIELDS)
    records: List[Record] = []

    # Line feed only; form feeds, U+2028 and the like stay inside the record
    for line_number, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]

        if not line.strip():
            continue

        fields = split_record(line, trim=trim)

        if len(fields) == expected:
            records.append(tuple(fields))
            continue

        if policy == "skip":
            logger.warning(
                "Skipping line %d: expected %d fields, found %d", line_number, expected, len(fields)
            )
            continue

        if policy == "pad" and len(fields) < expected:
            padded: List[Optional[str]] = list(fields)
            padded.extend([None] * (expected - len(fields)))
            logger.debug("Padded line %d with %d empty field(s)", line_number, expected - len(fields))
            records.append(tuple(padded))
            continue

        raise MalformedRecordError(line_number, line, expected, len(fields), source=source)

    logger.debug("Parsed %d record(s)", len(records))
    return records
