"""
Entities Module - The records a PersonRegistry tracks

- "Elon Musk, 45, Tesla" → Person(name="Elon Musk", age="45", company="Tesla")
"""

from .person import Person

__all__ = [
    "Person",
]
