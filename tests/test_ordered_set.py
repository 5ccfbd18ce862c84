"""Tests for OrderedSet."""

import pytest

from topsort import OrderedSet


class TestOrderedSetAdd:
    def test_add_new_item_returns_true(self) -> None:
        s: OrderedSet[str] = OrderedSet()
        assert s.add("a") is True
        assert "a" in s

    def test_add_existing_item_returns_false(self) -> None:
        s = OrderedSet(["a"])
        assert s.add("a") is False
        assert len(s) == 1

    def test_iteration_follows_insertion_order(self) -> None:
        s = OrderedSet(["c", "a", "b", "a", "c"])
        assert list(s) == ["c", "a", "b"]
        assert s.items == ("c", "a", "b")

    def test_works_with_integers(self) -> None:
        s = OrderedSet([3, 1, 2, 1])
        assert list(s) == [3, 1, 2]


class TestOrderedSetIndex:
    def test_index_of_present_items(self) -> None:
        s = OrderedSet(["x", "y", "z"])
        assert s.index("x") == 0
        assert s.index("y") == 1
        assert s.index("z") == 2

    def test_index_of_missing_item(self) -> None:
        s = OrderedSet(["x"])
        assert s.index("missing") == -1


class TestOrderedSetCopy:
    def test_copy_has_same_contents(self) -> None:
        s = OrderedSet(["a", "b"])
        clone = s.copy()
        assert clone == s
        assert clone is not s

    def test_mutating_copy_leaves_original_untouched(self) -> None:
        s = OrderedSet(["a", "b"])
        clone = s.copy()
        clone.add("c")
        clone.pop()
        clone.pop()

        assert list(s) == ["a", "b"]
        assert s.index("b") == 1
        assert list(clone) == ["a"]

    def test_mutating_original_leaves_copy_untouched(self) -> None:
        s = OrderedSet(["a"])
        clone = s.copy()
        s.add("b")
        assert "b" not in clone


class TestOrderedSetPop:
    def test_pop_returns_last_added(self) -> None:
        s = OrderedSet(["a", "b"])
        assert s.pop() == "b"
        assert list(s) == ["a"]
        assert s.index("b") == -1

    def test_popped_item_can_be_added_again(self) -> None:
        s = OrderedSet(["a", "b"])
        s.pop()
        assert s.add("b") is True
        assert s.index("b") == 1

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(KeyError, match="empty"):
            OrderedSet().pop()


class TestOrderedSetComparison:
    def test_equality_is_order_sensitive(self) -> None:
        assert OrderedSet(["a", "b"]) == OrderedSet(["a", "b"])
        assert OrderedSet(["a", "b"]) != OrderedSet(["b", "a"])

    def test_not_equal_to_other_types(self) -> None:
        assert OrderedSet(["a"]) != ["a"]

    def test_repr(self) -> None:
        assert repr(OrderedSet(["a", "b"])) == "OrderedSet(['a', 'b'])"
