"""Tests for DataNode dataclass and NodeKind StrEnum.

Verifies:
- NodeKind has exactly 6 members with lowercase string values (StrEnum property)
- DataNode.create() starts scalars with valid JSON text and containers empty
- Each DataNode instance gets independent members / items containers
- Child lookup, insertion and counting respect the node kind
- destroy() releases the whole subtree
"""

import pytest

from json_data_io.tree.nodes import CONTAINER_KINDS, DataNode, NodeKind


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(NodeKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.OBJECT == "object"
        assert NodeKind.ARRAY == "array"
        assert NodeKind.STRING == "string"
        assert NodeKind.NUMBER == "number"
        assert NodeKind.BOOLEAN == "boolean"
        assert NodeKind.NULL == "null"

    def test_members_are_str_instances(self) -> None:
        for member in NodeKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    def test_container_kinds(self) -> None:
        assert CONTAINER_KINDS == {NodeKind.OBJECT, NodeKind.ARRAY}


class TestDataNodeConstruction:
    """Tests for DataNode construction and defaults."""

    def test_create_object_is_empty(self) -> None:
        node = DataNode.create(NodeKind.OBJECT)
        assert node.kind == NodeKind.OBJECT
        assert node.members == {}
        assert node.items == []
        assert node.text == ""

    @pytest.mark.parametrize(
        ("kind", "text"),
        [
            (NodeKind.STRING, ""),
            (NodeKind.NUMBER, "0"),
            (NodeKind.BOOLEAN, "false"),
            (NodeKind.NULL, "null"),
        ],
    )
    def test_create_scalar_initial_text(self, kind: NodeKind, text: str) -> None:
        assert DataNode.create(kind).text == text

    def test_containers_are_independent_per_instance(self) -> None:
        """Two nodes must NOT share the same members dict or items list."""
        node_a = DataNode(kind=NodeKind.ARRAY)
        node_b = DataNode(kind=NodeKind.ARRAY)
        node_a.items.append(DataNode(kind=NodeKind.NULL, text="null"))

        assert len(node_b.items) == 0
        assert node_a.items is not node_b.items
        assert node_a.members is not node_b.members

    def test_nodes_compare_by_identity(self) -> None:
        a = DataNode(kind=NodeKind.STRING, text="x")
        b = DataNode(kind=NodeKind.STRING, text="x")
        assert a != b
        assert a == a

    def test_uses_slots(self) -> None:
        assert hasattr(DataNode, "__slots__")

    def test_cannot_add_arbitrary_attributes(self) -> None:
        node = DataNode(kind=NodeKind.STRING, text="x")
        with pytest.raises(AttributeError):
            node.undefined_attribute = "should fail"  # type: ignore[attr-defined]


class TestScalarText:
    def test_set_and_get_text(self) -> None:
        node = DataNode.create(NodeKind.STRING)
        node.set_text("hello")
        assert node.get_text() == "hello"

    def test_set_text_on_container_raises(self) -> None:
        with pytest.raises(TypeError, match="object"):
            DataNode.create(NodeKind.OBJECT).set_text("x")

    def test_is_container(self) -> None:
        assert DataNode.create(NodeKind.ARRAY).is_container
        assert not DataNode.create(NodeKind.BOOLEAN).is_container


class TestChildren:
    def test_add_key_on_object(self) -> None:
        parent = DataNode.create(NodeKind.OBJECT)
        child = parent.add_key(NodeKind.NUMBER, "n")
        assert child is not None
        assert parent.find_by_key("n") is child
        assert parent.child_count() == 1

    def test_add_key_replaces_existing_key(self) -> None:
        parent = DataNode.create(NodeKind.OBJECT)
        parent.add_key(NodeKind.NUMBER, "first")
        parent.add_key(NodeKind.NUMBER, "n")
        replacement = parent.add_key(NodeKind.STRING, "n")
        assert parent.find_by_key("n") is replacement
        assert list(parent.members) == ["first", "n"]

    def test_add_key_on_array_returns_none(self) -> None:
        assert DataNode.create(NodeKind.ARRAY).add_key(NodeKind.NUMBER, "n") is None

    def test_add_index_appends(self) -> None:
        parent = DataNode.create(NodeKind.ARRAY)
        first = parent.add_index(NodeKind.NUMBER)
        second = parent.add_index(NodeKind.STRING)
        assert parent.find_by_index(0) is first
        assert parent.find_by_index(1) is second
        assert parent.child_count() == 2

    def test_add_index_on_scalar_returns_none(self) -> None:
        assert DataNode.create(NodeKind.STRING).add_index(NodeKind.NUMBER) is None

    def test_find_by_index_out_of_range(self) -> None:
        parent = DataNode.create(NodeKind.ARRAY)
        parent.add_index(NodeKind.NUMBER)
        assert parent.find_by_index(1) is None
        assert parent.find_by_index(-1) is None

    def test_find_by_key_on_array_returns_none(self) -> None:
        assert DataNode.create(NodeKind.ARRAY).find_by_key("0") is None

    def test_find_by_index_on_object_returns_none(self) -> None:
        parent = DataNode.create(NodeKind.OBJECT)
        parent.add_key(NodeKind.NUMBER, "0")
        assert parent.find_by_index(0) is None

    def test_scalar_child_count_is_zero(self) -> None:
        assert DataNode.create(NodeKind.NUMBER).child_count() == 0


class TestDestroy:
    def test_destroy_clears_whole_subtree(self) -> None:
        root = DataNode.create(NodeKind.OBJECT)
        level = root.add_key(NodeKind.OBJECT, "level")
        assert level is not None
        items = level.add_key(NodeKind.ARRAY, "items")
        assert items is not None
        items.add_index(NodeKind.NUMBER)

        root.destroy()

        assert root.child_count() == 0
        assert level.child_count() == 0
        assert items.child_count() == 0

    def test_destroy_nesting_deeper_than_recursion_limit(self) -> None:
        chain = [DataNode.create(NodeKind.ARRAY)]
        for _ in range(10_000):
            child = chain[-1].add_index(NodeKind.ARRAY)
            assert child is not None
            chain.append(child)

        chain[0].destroy()

        assert all(node.child_count() == 0 for node in chain)
