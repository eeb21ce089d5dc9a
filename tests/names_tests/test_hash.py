from hypothesis import given

from jsxref.base import ElementName, Location
from tests.utils import implication

from . import strategies


@given(strategies.element_names, strategies.element_names)
def test_relation_with_equality(name_node: ElementName,
                                other_name_node: ElementName) -> None:
    assert implication(name_node == other_name_node,
                       hash(name_node) == hash(other_name_node))


@given(strategies.locations, strategies.locations)
def test_locations(location: Location, other_location: Location) -> None:
    assert implication(location == other_location,
                       hash(location) == hash(other_location))
