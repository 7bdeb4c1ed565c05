import pytest

from storomata.pos_state import Initial, Position
from storomata.tree_stack import TreeStack
from storomata.tree_stack_instruction import (
    Down,
    Push,
    Up,
    parse_tree_stack_instruction,
)


@pytest.mark.parametrize(
    "instruction, expected",
    [
        (Up(1, 1, 2, 3), Up(1, 2, 4, 6)),
        (Down(1, 2, 3), Down(2, 4, 6)),
        (Push(1, 1, 2), Push(1, 2, 4)),
    ],
)
def test_map_correctness(instruction, expected):
    assert instruction.map(lambda x: x * 2) == expected


def test_map_inverse():
    instruction = Up(1, 1, 2, 3)
    mapped = instruction.map(lambda x: x * 2)
    assert mapped.map(lambda x: x // 2) == instruction


def _base():
    return TreeStack("@").push(1, "a").down()


def test_apply_correctness():
    tree_stack = _base()

    up_instruction = Up(1, "@", "a", "a")
    assert up_instruction.apply(tree_stack) == [tree_stack.up(1)]

    tree_stack = tree_stack.up(1)
    down_instruction = Down("a", "@", "@")
    assert down_instruction.apply(tree_stack) == [tree_stack.down()]

    tree_stack = tree_stack.down()
    push_instruction = Push(2, "@", "b")
    assert push_instruction.apply(tree_stack) == [tree_stack.push(2, "b")]


@pytest.mark.parametrize(
    "instruction",
    [Up(1, "x", "a", "a"), Down("@", "x", "x"), Push(1, "@", "y")],
)
def test_apply_invalid(instruction):
    assert instruction.apply(_base()) == []


def test_apply_up_checks_old_value():
    assert Up(1, "@", "z", "a").apply(_base()) == []


def test_apply_up_rewrites_child():
    result = Up(1, "@", "a", "q").apply(_base())
    assert [ts.current_symbol() for ts in result] == ["q"]


def test_apply_inverse():
    tree_stack = _base()
    up_instruction = Up(1, "@", "a", "a")
    down_instruction = Down("a", "@", "@")
    upped = up_instruction.apply(tree_stack).pop()
    assert down_instruction.apply(upped) == [tree_stack]


def test_str():
    assert str(Up(1, "@", "a", "b")) == "(Up 1 @ a b)"
    assert str(Push(0, 1, 2)) == "(Push 0 1 2)"
    assert str(Down("a", "b", "c")) == "(Down a b c)"
    assert str(Push(0, Initial(), Position("r", 0, 0))) == "(Push 0 I (r, 0, 0))"


def test_ordering_by_variant_then_fields():
    instructions = [Down(0, 0, 0), Push(0, 1, 2), Up(5, 0, 0, 0), Push(0, 0, 9)]
    assert sorted(instructions) == [
        Up(5, 0, 0, 0),
        Push(0, 0, 9),
        Push(0, 1, 2),
        Down(0, 0, 0),
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Push 0 1 2", Push(0, 1, 2)),
        ("Up 3 4 5 6", Up(3, 4, 5, 6)),
        ("Down 7 8 9", Down(7, 8, 9)),
        ("  Push   2  1 2 ", Push(2, 1, 2)),
    ],
)
def test_parse_with_ints(text, expected):
    assert parse_tree_stack_instruction(text, int) == expected


def test_parse_default_keeps_strings():
    assert parse_tree_stack_instruction("Up 1 a b c") == Up(1, "a", "b", "c")


@pytest.mark.parametrize(
    "text",
    ["", "Up 1 2 3", "Push 0 1", "Down 1 2", "Jump 1 2 3", "Push x 1 2", "Push -1 1 2"],
)
def test_parse_malformed(text):
    with pytest.raises(ValueError):
        parse_tree_stack_instruction(text, int)


def test_parse_malformed_label():
    with pytest.raises(ValueError, match="Malformed node label."):
        parse_tree_stack_instruction("Push 0 a 2", int)


def test_parse_unknown_instruction_message():
    with pytest.raises(ValueError, match="Malformed instruction."):
        parse_tree_stack_instruction("Pop 1 2 3")