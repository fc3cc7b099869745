"""
Registry - Tracking every Person that has been created

Maintains an ordered, in-memory list of tracked people and the class-level
style operations that work on all of them at once:
- all()             → every tracked person, in creation order
- find_by_name()    → first person with that exact name, or None
- normalize_names() → capitalize every name in place
- destroy_all()     → forget everyone
"""

import logging
import threading
from typing import Any, Dict, Iterator, List, Optional

from ..entities.person import Person
from ..utils.text import capitalize_words

logger = logging.getLogger(__name__)


class PersonRegistry:
    """
    Owned registry of tracked people.

    Provides:
    - Tracked creation (create, add, find_or_create_by_name)
    - Read access that never exposes the internal list
    - Exact-match lookup
    - Bulk normalize and reset

    Constructing Person(...) directly does not register it; hand it to
    add() or go through create() if it should be tracked.
    """

    def __init__(self):
        self._people: List[Person] = []
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Tracked creation
    # ------------------------------------------------------------------

    def add(self, person: Person) -> Person:
        """Track an already constructed person."""
        with self._lock:
            self._people.append(person)
        logger.debug("Tracked person: %s", person.name)
        return person

    def create(
        self,
        name: str,
        age: Optional[str] = None,
        company: Optional[str] = None,
    ) -> Person:
        """Construct a person and track it."""
        return self.add(Person(name=name, age=age, company=company))

    def find_or_create_by_name(self, name: str) -> Person:
        """Return the first person with this name, creating one if there is none."""
        with self._lock:
            person = self.find_by_name(name)
            if person is None:
                person = self.create(name)
            return person

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def all(self) -> List[Person]:
        """
        List every tracked person in creation order.

        The list is a snapshot; changing it does not change the registry.
        """
        with self._lock:
            return list(self._people)

    def count(self) -> int:
        with self._lock:
            return len(self._people)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Person]:
        return iter(self.all())

    def __contains__(self, person: object) -> bool:
        return any(p is person for p in self.all())

    # ------------------------------------------------------------------
    # Finding
    # ------------------------------------------------------------------

    def find_by(self, attribute: str, value: Any) -> Optional[Person]:
        """
        Find the first tracked person whose attribute equals value.

        Args:
            attribute: Person field to compare ("name", "age", "company")
            value: Value it must equal exactly

        Returns:
            First matching Person or None

        Raises:
            AttributeError: If Person has no such field
        """
        _check_attribute(attribute)
        for person in self.all():
            if getattr(person, attribute) == value:
                return person
        return None

    def find_all_by(self, attribute: str, value: Any) -> List[Person]:
        """Find every tracked person whose attribute equals value, in creation order."""
        _check_attribute(attribute)
        return [p for p in self.all() if getattr(p, attribute) == value]

    def find_by_name(self, name: str) -> Optional[Person]:
        """Find the first tracked person with exactly this name."""
        return self.find_by("name", name)

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def normalize_names(self) -> int:
        """
        Capitalize every word of every tracked person's name, in place.

        Returns:
            How many names actually changed
        """
        changed = 0
        with self._lock:
            for person in self._people:
                normalized = capitalize_words(person.name)
                if normalized != person.name:
                    person.name = normalized
                    changed += 1
        logger.info("Normalized %d of %d name(s)", changed, self.count())
        return changed

    def destroy_all(self) -> None:
        """Forget every tracked person. The Person objects themselves stay usable."""
        with self._lock:
            removed = len(self._people)
            self._people.clear()
        logger.info("Cleared registry (%d person(s) removed)", removed)

    def stats(self) -> Dict[str, int]:
        """Get registry statistics."""
        people = self.all()
        return {
            "people": len(people),
            "unique_names": len({p.name for p in people}),
            "companies": len({p.company for p in people if p.company}),
        }


def _check_attribute(attribute: str) -> None:
    if attribute not in Person.__dataclass_fields__:
        raise AttributeError(f"Person has no attribute '{attribute}'")
