"""Dependency inversion: depend on abstractions, not on details.

``TightlyCoupledResearch`` reaches into the storage of ``Relationships``.
``Research`` only knows the ``RelationshipBrowser`` protocol, so the storage
behind ``BetterRelationships`` can change without touching it.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from ..domain.record import Record


class Relationship(str, Enum):
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"


class Person(Record):
    name: str


# -- low-level module, storage exposed --------------------------------------


class Relationships:
    def __init__(self) -> None:
        self.relations: list[tuple[Person, Relationship, Person]] = []

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self.relations.append((parent, Relationship.PARENT, child))
        self.relations.append((child, Relationship.CHILD, parent))


class TightlyCoupledResearch:
    def __init__(self, relationships: Relationships, name: str = "John") -> None:
        self.findings: list[str] = [
            f"{name} is a parent of child {other.name}"
            for person, relation, other in relationships.relations
            if person.name == name and relation is Relationship.PARENT
        ]


# -- abstraction and the modules depending on it ----------------------------


@runtime_checkable
class RelationshipBrowser(Protocol):
    def find_all_children_of(self, name: str) -> list[Person]:
        """Children of every person called *name*, in insertion order."""
        ...


class BetterRelationships:
    def __init__(self) -> None:
        self._relations: list[tuple[Person, Relationship, Person]] = []

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self._relations.append((parent, Relationship.PARENT, child))
        self._relations.append((child, Relationship.CHILD, parent))

    def find_all_children_of(self, name: str) -> list[Person]:
        return [
            other
            for person, relation, other in self._relations
            if person.name == name and relation is Relationship.PARENT
        ]


class Research:
    def __init__(self, browser: RelationshipBrowser, name: str = "John") -> None:
        self.findings: list[str] = [
            f"{name} is a parent of child {child.name}"
            for child in browser.find_all_children_of(name)
        ]


def run() -> None:
    parent = Person(name="John")
    children = [Person(name="Tom"), Person(name="Anna")]

    relationships = Relationships()
    better = BetterRelationships()
    for child in children:
        relationships.add_parent_and_child(parent, child)
        better.add_parent_and_child(parent, child)

    print("Tightly coupled approach:")
    for line in TightlyCoupledResearch(relationships).findings:
        print(f" {line}")

    print("Loosely coupled approach:")
    for line in Research(better).findings:
        print(f" {line}")
