import pytest

from citysaver.business_objects import InvalidItem, Item, StateValidationError


def test_item_is_frozen():
    it = Item("Boston", 6, 675647)
    with pytest.raises(AttributeError):
        it.value = 0  # type: ignore[misc]


def test_from_city_uses_name_length_as_weight():
    it = Item.from_city("San Antonio", 1434625)
    assert it == Item("San Antonio", 11, 1434625)


@pytest.mark.parametrize(
    "name, weight, value",
    [
        ("", 1, 1),
        ("x", -1, 5),
        ("x", 1, -5),
        ("x", 1.5, 5),
        ("x", True, 5),
        ("x", 1, "5"),
    ],
)
def test_invalid_items_are_rejected(name, weight, value):
    with pytest.raises(InvalidItem):
        Item(name, weight, value)


def test_invalid_item_is_a_state_validation_error():
    with pytest.raises(StateValidationError):
        Item("x", -1, 0)


def test_from_record_accepts_triples_and_items():
    it = Item("Dallas", 6, 1300000)
    assert Item.from_record(it) is it
    assert Item.from_record(("Dallas", 6, 1300000)) == it


@pytest.mark.parametrize("record", [("only-two", 1), 42, ("a", 1, 2, 3)])
def test_from_record_rejects_malformed_records(record):
    with pytest.raises(InvalidItem):
        Item.from_record(record)


@pytest.mark.parametrize("name", [None, 42])
def test_non_string_names_are_rejected(name):
    with pytest.raises(InvalidItem):
        Item(name, 1, 1)
    with pytest.raises(InvalidItem):
        Item.from_record((name, 1, 1))
