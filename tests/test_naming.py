import pytest

from json2ts import DeclarationRegistry, singularize, suggest_name


@pytest.mark.parametrize(
    "key,expected",
    [
        ("users", "User"),
        ("categories", "Category"),
        ("class", "Class"),
        ("data", "Data"),
        ("boxes", "Box"),
        ("address", "Address"),
        ("settings", "Setting"),
        ("lastLogin", "LastLogin"),
        ("", "Item"),
        ("s", "Item"),
    ],
)
def test_suggest_name(key: str, expected: str) -> None:
    assert suggest_name(key) == expected


def test_singularize_rule_order() -> None:
    # "ies" wins over "es", which wins over "s".
    assert singularize("ies") == "y"
    assert singularize("statuses") == "status"
    assert singularize("glass") == "glass"
    assert singularize("item") == "item"


def test_suggest_name_is_identifier_safe() -> None:
    assert suggest_name("user-accounts") == "UserAccount"
    assert suggest_name("first name") == "FirstName"
    assert suggest_name("2d_points") == "_2d_point"
    assert suggest_name("$refs") == "$ref"
    assert suggest_name("---") == "Item"


def test_reserve_appends_counter() -> None:
    registry = DeclarationRegistry()
    assert registry.reserve("Item") == "Item"
    assert registry.reserve("Item") == "Item1"
    assert registry.reserve("Item") == "Item2"
    assert registry.reserve("Other") == "Other"


def test_reserve_sees_inserted_names() -> None:
    registry = DeclarationRegistry()
    name = registry.reserve("Tag")
    registry.insert(name, "export interface Tag {\n}")
    assert registry.reserve("Tag") == "Tag1"


def test_insert_keeps_insertion_order() -> None:
    registry = DeclarationRegistry()
    parent = registry.reserve("Root")
    child = registry.reserve("Child")

    # Pending names are reserved but not yet part of the output.
    assert parent in registry
    assert len(registry) == 0

    registry.insert(child, "child")
    registry.insert(parent, "parent")
    assert list(registry) == ["Child", "Root"]
    assert registry["Root"] == "parent"
    assert list(registry.items()) == [("Child", "child"), ("Root", "parent")]


def test_insert_requires_reservation() -> None:
    registry = DeclarationRegistry()
    with pytest.raises(ValueError):
        registry.insert("Root", "text")

    # Names can only be inserted once.
    registry.insert(registry.reserve("Root"), "text")
    with pytest.raises(ValueError):
        registry.insert("Root", "other")
    assert registry["Root"] == "text"
