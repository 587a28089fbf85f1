from hypothesis import given

from json2ts import (
    ConversionConfig,
    DeclarationGenerator,
    DeclarationRegistry,
    format_property_name,
    from_python,
)

from .utils import json_objects


def _generate(value, config: ConversionConfig = ConversionConfig()):
    registry = DeclarationRegistry()
    typ = DeclarationGenerator(config, registry).generate("Root", from_python(value))
    return typ, registry


def test_scalars_produce_no_declarations() -> None:
    for value, expected in [(1, "number"), ("a", "string"), (None, "null")]:
        typ, registry = _generate(value)
        assert typ == expected
        assert len(registry) == 0


def test_top_level_array() -> None:
    typ, registry = _generate([1, 2])
    assert typ == "number[]"
    assert len(registry) == 0

    typ, registry = _generate([{"id": 1}])
    assert typ == "Item[]"
    assert list(registry) == ["Item"]


def test_empty_object() -> None:
    typ, registry = _generate({})
    assert typ == "Root"
    assert registry["Root"] == "export interface Root {\n}"


def test_nested_objects_are_inserted_before_parents() -> None:
    typ, registry = _generate({"user": {"address": {"city": "x"}}})
    assert typ == "Root"
    assert list(registry) == ["Address", "User", "Root"]
    assert registry["User"] == "export interface User {\n  address: Address;\n}"


def test_sibling_name_collision() -> None:
    _, registry = _generate({"item": {"a": 1}, "items": {"b": 2}})
    assert list(registry) == ["Item", "Item1", "Root"]
    assert "  items: Item1;" in registry["Root"]


def test_child_cannot_take_pending_ancestor_name() -> None:
    _, registry = _generate({"roots": {"a": 1}})
    assert list(registry) == ["Root1", "Root"]
    assert registry["Root"] == "export interface Root {\n  roots: Root1;\n}"


def test_identical_shapes_are_not_merged() -> None:
    _, registry = _generate({"home": {"city": "a"}, "work": {"city": "b"}})
    assert list(registry) == ["Home", "Work", "Root"]
    assert registry["Home"].replace("Home", "") == registry["Work"].replace("Work", "")


def test_optional_fields_apply_to_every_property() -> None:
    config = ConversionConfig(use_optional_fields=True)
    _, registry = _generate({"a": 1, "b": {"c": None}}, config)
    assert registry["Root"] == "export interface Root {\n  a?: number;\n  b?: B;\n}"
    assert registry["B"] == "export interface B {\n  c?: null;\n}"


@given(json_objects)
def test_keys_preserved_in_order(value) -> None:
    _, registry = _generate(value)
    lines = registry["Root"].split("\n")[1:-1]
    assert len(lines) == len(value)
    for line, key in zip(lines, value):
        assert line.startswith(f"  {format_property_name(key)}: ")
