import pytest

from byol.errors import ByolIndexError, ByolTypeError
from byol.types.value import Value, ValueType


def nums(*ns):
    return [Value.number(n) for n in ns]


def test_constructors_set_type_and_payload():
    assert Value.number(7).num == 7
    assert Value.error("boom").err == "boom"
    assert Value.symbol("x").sym == "x"
    assert Value.sexpr().type is ValueType.SEXPR
    assert Value.qexpr(nums(1, 2)).cells == nums(1, 2)


def test_function_keeps_callable_and_name():
    fn = lambda env, args: args
    val = Value.function(fn, "ident")
    assert val.type is ValueType.FUN
    assert val.fn is fn
    assert val.fn_name == "ident"


@pytest.mark.parametrize(
    "value,expected",
    [
        (Value.number(1), "Number"),
        (Value.error("e"), "Error"),
        (Value.symbol("s"), "Symbol"),
        (Value.function(print), "Function"),
        (Value.sexpr(), "S-Expression"),
        (Value.qexpr(), "Q-Expression"),
    ]
)
def test_type_description(value, expected):
    assert value.type_description() == expected


def test_append_moves_child_into_container():
    q = Value.qexpr()
    child = Value.number(1)
    assert q.append(child) is q
    assert q.cells[0] is child


def test_pop_shifts_remaining_children():
    q = Value.qexpr(nums(1, 2, 3))
    popped = q.pop(1)
    assert popped == Value.number(2)
    assert q.cells == nums(1, 3)


def test_take_empties_container():
    s = Value.sexpr(nums(1, 2, 3))
    taken = s.take(2)
    assert taken == Value.number(3)
    assert len(s) == 0


def test_join_moves_all_children_and_empties_other():
    a = Value.qexpr(nums(1, 2))
    b = Value.qexpr(nums(3, 4))
    assert a.join(b) is a
    assert a.cells == nums(1, 2, 3, 4)
    assert len(b) == 0


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_pop_out_of_range_raises(index):
    q = Value.qexpr(nums(1, 2, 3))
    with pytest.raises(ByolIndexError):
        q.pop(index)
    # nothing moved
    assert q.cells == nums(1, 2, 3)


def test_pop_on_atom_raises():
    with pytest.raises(ByolTypeError):
        Value.number(1).pop(0)


def test_deep_copy_is_independent():
    original = Value.qexpr([Value.number(1), Value.qexpr(nums(2, 3)), Value.symbol("x")])
    copy = original.deep_copy()
    assert copy == original
    copy.cells[1].pop(0)
    copy.cells[0].num = 99
    assert original == Value.qexpr([Value.number(1), Value.qexpr(nums(2, 3)), Value.symbol("x")])


def test_deep_copy_shares_function_callable():
    fn = lambda env, args: args
    copy = Value.function(fn, "f").deep_copy()
    assert copy.fn is fn


def test_equality_distinguishes_list_forms():
    assert Value.sexpr(nums(1)) != Value.qexpr(nums(1))
    assert Value.number(1) != Value.symbol("1")


def test_repr_is_informative():
    assert repr(Value.number(3)) == "Value(Number, 3)"
    assert repr(Value.qexpr(nums(1))) == "Value(Q-Expression, [Value(Number, 1)])"


def test_bare_value_takes_its_kind():
    val = Value(kind=ValueType.SEXPR)
    assert val.type is ValueType.SEXPR
    assert val.cells == []
