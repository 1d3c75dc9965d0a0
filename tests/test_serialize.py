from dataclasses import dataclass

from src.tintlog.serialize import CIRCULAR_MARKER, MAX_NODES, TRUNCATED_MARKER, join_message, serialize


def test_primitives_render_directly():
    assert serialize("text") == "text"
    assert serialize(42) == "42"
    assert serialize(1.5) == "1.5"
    assert serialize(True) == "True"
    assert serialize(None) == "None"


def test_dict_renders_as_indented_json():
    assert serialize({"x": 1}) == '{\n  "x": 1\n}'


def test_self_reference_becomes_root_marker():
    node = {"name": "root"}
    node["self"] = node

    text = serialize(node)

    assert '"name": "root"' in text
    assert f'"self": "{CIRCULAR_MARKER}"' in text


def test_nested_back_reference_records_path():
    child = {"id": 2}
    root = {"child": child, "items": [child]}
    child["parent"] = child

    text = serialize(root)

    assert '"parent": "[Circular ~.child]"' in text


def test_shared_acyclic_reference_is_rendered_twice():
    shared = {"v": 1}
    text = serialize([shared, shared])
    assert "Circular" not in text
    assert text.count('"v": 1') == 2


def test_cyclic_list_terminates():
    items = [1]
    items.append(items)
    assert serialize(items) == '[\n  1,\n  "[Circular ~]"\n]'


@dataclass
class Point:
    x: int
    y: int


class Account:
    def __init__(self) -> None:
        self.owner = "ada"
        self.me = self


def test_dataclass_and_object_attributes():
    assert '"x": 3' in serialize(Point(3, 4))
    text = serialize(Account())
    assert '"owner": "ada"' in text
    assert CIRCULAR_MARKER in text


class Exploding:
    def __str__(self) -> str:
        raise RuntimeError("boom")


def test_unrenderable_value_falls_back_to_type_name():
    assert serialize(Exploding()) == "<Exploding>"


def test_non_json_leaves_use_str():
    assert serialize({"raw": b"ab"}) == '{\n  "raw": "b\'ab\'"\n}'


def test_deep_nesting_does_not_raise():
    value: list = []
    for _ in range(5000):
        value = [value]
    assert isinstance(serialize(value), str)


def test_join_message_concatenates_without_separator():
    assert join_message(["a", 1, "b"]) == "a1b"


def test_join_message_renders_objects():
    text = join_message(["user=", {"x": 1}])
    assert text.startswith("user={")
    assert '"x": 1' in text


def test_join_message_of_nothing_is_empty():
    assert join_message([]) == ""


def test_shared_references_are_bounded_by_node_budget():
    node = {"leaf": 1}
    for _ in range(25):
        node = {"a": node, "b": node}

    text = serialize(node)

    assert TRUNCATED_MARKER in text
    assert text.count('"leaf": 1') < MAX_NODES


def test_small_values_are_not_truncated():
    assert TRUNCATED_MARKER not in serialize({"items": list(range(100))})


def test_keys_equal_as_strings_are_kept_apart():
    text = serialize({1: "a", "1": "b"})
    assert '"1": "a"' in text
    assert '"\'1\'": "b"' in text
