"""
Builder - Custom constructors on top of the plain Person constructor

Composes three steps for every record:
1. Base construction (Person(name=...), no side effects)
2. Field assignment (age, company)
3. Registry insertion

so the base constructor never has to know about the registry.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..entities.person import Person
from .parser import parse_records
from .registry import PersonRegistry

logger = logging.getLogger(__name__)


class PersonBuilder:
    """
    Builds tracked people from raw delimited text.

    Example:
        >>> registry = PersonRegistry()
        >>> builder = PersonBuilder(registry)
        >>> people = builder.create_from_text("Elon Musk, 45, Tesla")
        >>> registry.find_by_name("Elon Musk") is people[0]
        True
    """

    def __init__(
        self,
        registry: PersonRegistry,
        trim: Optional[bool] = None,
        policy: Optional[str] = None,
    ):
        """
        Initialize the builder.

        Args:
            registry: Registry new people are added to
            trim: Override Config.TRIM_FIELDS
            policy: Override Config.MALFORMED_POLICY ("raise", "skip" or "pad")
        """
        self.registry = registry
        self.trim = trim
        self.policy = policy

    def build(self, name: str, age: Optional[str] = None, company: Optional[str] = None) -> Person:
        """Construct and populate a person without tracking it."""
        person = Person(name=name)
        person.age = age
        person.company = company
        return person

    def create(self, name: str, age: Optional[str] = None, company: Optional[str] = None) -> Person:
        """Construct, populate and track a person."""
        return self.registry.add(self.build(name, age, company))

    def create_from_text(self, text: str, source: Optional[str] = None) -> List[Person]:
        """
        Create one tracked person per record in text.

        Every record is parsed before anything is created, so a malformed
        record under the 'raise' policy leaves the registry untouched.

        Returns:
            The new people, in record order
        """
        records = parse_records(text, trim=self.trim, policy=self.policy, source=source)
        people = [self.create(*record) for record in records]
        logger.info("Created %d person(s)%s", len(people), f" from {source}" if source else "")
        return people

    def create_from_file(self, path: Union[str, Path]) -> List[Person]:
        """Read a UTF-8 text file and create a tracked person per record."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        return self.create_from_text(text, source=str(path))
