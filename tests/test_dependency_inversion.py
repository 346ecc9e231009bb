from __future__ import annotations

import pytest

from solid_principles.principles.dependency_inversion import (
    BetterRelationships,
    Person,
    Relationship,
    RelationshipBrowser,
    Relationships,
    Research,
    TightlyCoupledResearch,
)


@pytest.fixture
def family() -> tuple[Person, list[Person]]:
    return Person(name="John"), [Person(name="Tom"), Person(name="Anna")]


def test_relationships_store_both_directions(family):
    parent, (tom, _) = family
    relationships = Relationships()

    relationships.add_parent_and_child(parent, tom)

    assert relationships.relations == [
        (parent, Relationship.PARENT, tom),
        (tom, Relationship.CHILD, parent),
    ]


def test_both_research_styles_agree(family):
    parent, children = family
    relationships = Relationships()
    better = BetterRelationships()
    for child in children:
        relationships.add_parent_and_child(parent, child)
        better.add_parent_and_child(parent, child)

    expected = [
        "John is a parent of child Tom",
        "John is a parent of child Anna",
    ]
    assert TightlyCoupledResearch(relationships).findings == expected
    assert Research(better).findings == expected


def test_better_relationships_is_a_browser():
    assert isinstance(BetterRelationships(), RelationshipBrowser)
    assert not hasattr(BetterRelationships(), "relations")


def test_find_all_children_of_ignores_child_edges(family):
    parent, children = family
    better = BetterRelationships()
    for child in children:
        better.add_parent_and_child(parent, child)

    assert better.find_all_children_of("John") == children
    assert better.find_all_children_of("Tom") == []


def test_research_depends_only_on_the_protocol():
    class StubBrowser:
        def find_all_children_of(self, name: str) -> list[Person]:
            return [Person(name="Zoe")] if name == "Ann" else []

    research = Research(StubBrowser(), name="Ann")
    assert research.findings == ["Ann is a parent of child Zoe"]
