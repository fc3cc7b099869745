"""
Person - The entity tracked by the registry

A plain record of who someone is and where they work:
- Person(name="Grace Hopper")
- Person(name="Elon Musk", age="45", company="Tesla")

Constructing a Person has no side effects. Only the registry and the
builder decide what gets tracked.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Any


@dataclass
class Person:
    """
    A person known to a PersonRegistry.

    Age is kept as the text it was read from ("45"), never coerced.

    Example:
        Person(name="Martha Stewart", age="74", company="MSL")
    """
    name: str
    age: Optional[str] = None
    company: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Person":
        return cls(
            name=data["name"],
            age=data.get("age"),
            company=data.get("company"),
        )

    def as_record(self) -> tuple:
        """Fields in the order the delimited-text format uses."""
        return (self.name, self.age, self.company)
