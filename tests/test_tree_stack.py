import pytest

from storomata.tree_stack import TreeStack, TreeStackError


def test_tree_stack():
    ts = TreeStack(0)
    assert ts.current_symbol() == 0

    ts = ts.push(1, 1)
    assert ts.current_symbol() == 1

    ts = ts.down()
    assert ts.current_symbol() == 0

    ts = ts.push(2, 2)
    assert ts.current_symbol() == 2

    ts = ts.down()
    ts = ts.up(1)
    assert ts.current_symbol() == 1

    ts = ts.push(1, 11)
    assert ts.current_symbol() == 11

    ts = ts.down()
    ts = ts.down()
    ts = ts.up(2)
    ts = ts.push(1, 21)
    assert ts.current_symbol() == 21

    ts = ts.down()
    ts = ts.down()
    assert ts.current_symbol() == 0


def test_to_tree():
    ts = TreeStack("@")
    ts = ts.push(0, "a")
    ts = ts.push(0, "b")
    ts = ts.down()
    ts = ts.down()
    ts = ts.push(1, "c")
    ts = ts.down()
    ts = ts.push(3, "d")
    ts = ts.push(1, "e")

    expected = {
        (): "@",
        (0,): "a",
        (0, 0): "b",
        (1,): "c",
        (3,): "d",
        (3, 1): "e",
    }
    assert ts.to_tree() == (expected, (3, 1))


def test_push_into_occupied_position_raises():
    ts = TreeStack("@").push(0, "a").down()
    with pytest.raises(TreeStackError):
        ts.push(0, "b")


def test_push_with_does_not_evaluate_on_failure():
    calls = []
    ts = TreeStack("@").push(0, "a").down()

    def make():
        calls.append(1)
        return "b"

    with pytest.raises(TreeStackError):
        ts.push_with(0, make)
    assert calls == []
    assert ts.push_with(1, make).current_symbol() == "b"
    assert calls == [1]


def test_up_into_vacant_position_raises():
    ts = TreeStack("@")
    with pytest.raises(TreeStackError):
        ts.up(0)
    ts = ts.push(2, "a").down()
    with pytest.raises(TreeStackError):
        ts.up(1)


def test_down_at_bottom_raises():
    with pytest.raises(TreeStackError):
        TreeStack("@").down()


def test_is_at_bottom():
    ts = TreeStack("@")
    assert ts.is_at_bottom()
    pushed = ts.push(0, "a")
    assert not pushed.is_at_bottom()
    assert pushed.down().is_at_bottom()


def test_operations_leave_original_unchanged():
    ts = TreeStack("@")
    ts.push(0, "a")
    assert ts.to_tree() == ({(): "@"}, ())


def test_set_replaces_current_value():
    ts = TreeStack("@").push(0, "a").set("z")
    assert ts.current_symbol() == "z"
    assert ts.to_tree() == ({(): "@", (0,): "z"}, (0,))


def test_push_next_fills_first_vacant_position():
    ts = TreeStack("@").push(1, "a").down()
    ts = ts.push_next("b")
    assert ts.to_tree() == ({(): "@", (0,): "b", (1,): "a"}, (0,))
    ts = ts.down().push_next("c")
    assert ts.to_tree()[1] == (2,)


def test_ups_returns_one_stack_per_child():
    ts = TreeStack("@").push(0, "a").down().push(2, "b").down()
    symbols = [t.current_symbol() for t in ts.ups()]
    assert symbols == ["a", "b"]


def test_up_then_down_is_identity():
    ts = TreeStack("@").push(1, "a").down()
    assert ts.up(1).down() == ts


def test_all_checks_subtree():
    ts = TreeStack(2).push(0, 4).down().push(1, 6).down()
    assert ts.all(lambda x: x % 2 == 0)
    assert not ts.all(lambda x: x < 5)
    assert ts.up(1).all(lambda x: x > 5)


def test_map_applies_to_every_node():
    ts = TreeStack(1).push(0, 2).push(3, 3)
    mapped = ts.map(lambda x: x * 10)
    assert mapped.to_tree() == ({(): 10, (0,): 20, (0, 3): 30}, (0, 3))


def test_map_inverse():
    ts = TreeStack(1).push(0, 2).down().push(1, 3)
    assert ts.map(lambda x: x * 2).map(lambda x: x // 2) == ts


def test_str_marks_pointer():
    ts = TreeStack("@").push(0, "a")
    assert str(ts) == " \n @\n |\n*+-0: a\n"


def test_equality_and_hash():
    a = TreeStack("@").push(0, "a").down()
    b = TreeStack("@").push(0, "a").down()
    assert a == b
    assert len({a, b}) == 1
    assert a != TreeStack("@")


def test_ordering():
    assert TreeStack(1) < TreeStack(2)
    assert TreeStack(0) < TreeStack(1).push(0, 0).set(0)
    assert sorted([TreeStack(3), TreeStack(1), TreeStack(2)]) == [
        TreeStack(1),
        TreeStack(2),
        TreeStack(3),
    ]