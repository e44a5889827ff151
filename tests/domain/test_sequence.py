"""Tests for the Node/End sequence type and its constructors."""

import pickle

import pytest

from foldkit.domain.sequence import (
    END,
    End,
    Node,
    from_iterable,
    is_empty,
    is_sequence,
    iterate,
    sequence,
    to_list,
)


class TestEnd:
    def test_singleton(self) -> None:
        assert End() is END
        assert End() is End()

    def test_repr(self) -> None:
        assert repr(END) == "End"

    def test_iterates_nothing(self) -> None:
        assert list(END) == []

    def test_pickle_preserves_identity(self) -> None:
        assert pickle.loads(pickle.dumps(END)) is END


class TestNode:
    def test_fields(self) -> None:
        node = Node(1, END)
        assert node.value == 1
        assert node.rest is END

    def test_frozen(self) -> None:
        node = Node(1, END)
        with pytest.raises(AttributeError):
            node.value = 2  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        assert Node(1, Node(2, END)) == Node(1, Node(2, END))

    def test_inequality_on_value(self) -> None:
        assert Node(1, Node(2, END)) != Node(1, Node(3, END))

    def test_inequality_on_length(self) -> None:
        assert Node(1, END) != Node(1, Node(2, END))
        assert Node(1, Node(2, END)) != Node(1, END)

    def test_not_equal_to_end(self) -> None:
        assert Node(1, END) != END
        assert END != Node(1, END)

    def test_not_equal_to_list(self) -> None:
        assert Node(1, END) != [1]

    def test_same_nan_object_is_equal(self) -> None:
        """Element comparison matches list: identical objects are equal."""
        nan = float("nan")
        assert sequence(nan, 1) == sequence(nan, 1)
        assert [nan, 1] == to_list(sequence(nan, 1))

    def test_distinct_nan_objects_differ(self) -> None:
        assert sequence(float("nan")) != sequence(float("nan"))

    def test_equal_sequences_hash_equal(self) -> None:
        assert hash(sequence(1, 2, 3)) == hash(sequence(1, 2, 3))
        assert len({sequence(1, 2), sequence(1, 2), sequence(2, 1)}) == 2

    def test_repr_nests(self) -> None:
        assert repr(sequence(1, 2, 3)) == "Node(1, Node(2, Node(3, End)))"

    def test_repr_uses_value_repr(self) -> None:
        assert repr(sequence("a")) == "Node('a', End)"

    def test_pattern_matching(self) -> None:
        match sequence(1, 2):
            case Node(head, Node(second, End())):
                assert (head, second) == (1, 2)
            case _:
                pytest.fail("Node did not match")

    def test_shared_remainder(self) -> None:
        """Two sequences may share a tail since nothing mutates."""
        tail = sequence(2, 3)
        a = Node(1, tail)
        b = Node(0, tail)
        assert a.rest is b.rest


class TestConstructors:
    def test_sequence_builds_nodes(self) -> None:
        assert sequence(1, 2, 3) == Node(1, Node(2, Node(3, END)))

    def test_sequence_empty(self) -> None:
        assert sequence() is END

    def test_from_iterable_generator(self) -> None:
        assert from_iterable(x * x for x in range(1, 4)) == sequence(1, 4, 9)

    def test_to_list(self) -> None:
        assert to_list(sequence("a", "b")) == ["a", "b"]

    def test_iterate_order(self) -> None:
        assert list(iterate(sequence(3, 1, 2))) == [3, 1, 2]

    def test_node_iter(self) -> None:
        assert list(sequence(1, 2)) == [1, 2]

    def test_is_empty(self) -> None:
        assert is_empty(END)
        assert not is_empty(sequence(1))

    @pytest.mark.parametrize("obj", [END, Node(1, END)])
    def test_is_sequence(self, obj: object) -> None:
        assert is_sequence(obj)

    @pytest.mark.parametrize("obj", [None, [], (1,), "abc"])
    def test_is_not_sequence(self, obj: object) -> None:
        assert not is_sequence(obj)


class TestLongSequences:
    """Spine walks must not recurse per node."""

    N = 50_000

    def test_equality(self) -> None:
        assert from_iterable(range(self.N)) == from_iterable(range(self.N))

    def test_repr(self) -> None:
        text = repr(from_iterable(range(self.N)))
        assert text.startswith("Node(0, Node(1, ")
        assert text.endswith("End" + ")" * self.N)

    def test_hash(self) -> None:
        assert isinstance(hash(from_iterable(range(self.N))), int)
