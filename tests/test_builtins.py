import pytest

from telescope.builtin import env_builtin
from telescope.builtin.env_builtin import (
    cons, equals, exit_builtin, first, gt, gte, logical_and, logical_not,
    logical_or, lt, lte, rest, truthy,
)
from telescope.evaluation.evaluator import evaluate
from telescope.reader.parser import parse
from telescope.types.builtin_fn import Builtin
from telescope.types.errors import (
    TelescopeArityError,
    TelescopeComparisonError,
    TelescopeError,
    TelescopeExit,
    TelescopeTypeError,
)
from telescope.types.nil import Nil
from telescope.types.symbol import Symbol
from telescope.types.vector import Vector


def test_register_installs_named_builtins(env):
    for name in env_builtin.BUILTINS:
        fn = env.lookup(Symbol(name))
        assert isinstance(fn, Builtin)
        assert fn.name == name
    assert str(env.lookup("+")) == "#[builtin +]"


# -------------------------------
# Comparison
# -------------------------------
@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        (True, 1, False),
        ("a", "a", True),
        ([1, [2]], [1, [2]], True),
        ([1, 2], Vector([1, 2]), False),
        (Vector([1]), Vector([1]), True),
        (Nil, Nil, True),
        (Nil, [], False),
    ]
)
def test_structural_equality(env, a, b, expected):
    assert equals(env, [a, b]) is expected


@pytest.mark.parametrize(
    "fn,a,b,expected",
    [
        (lt, 1, 2, True),
        (lt, 2.0, 1.0, False),
        (lte, 2, 2, True),
        (gt, "b", "a", True),
        (gte, "a", "b", False),
    ]
)
def test_ordering(env, fn, a, b, expected):
    assert fn(env, [a, b]) is expected


@pytest.mark.parametrize("a,b", [(1, 2.0), (2.0, 1), ("a", 1), (True, False), ([1], [2]), (Nil, 1)])
def test_ordering_undefined_across_types(env, a, b):
    for fn in (lt, lte, gt, gte):
        with pytest.raises(TelescopeComparisonError, match="Comparison undefined"):
            fn(env, [a, b])


@pytest.mark.parametrize("args", [[], [1], [1, 2, 3]])
def test_comparisons_require_two_args(env, args):
    for fn in (equals, lt, lte, gt, gte):
        with pytest.raises(TelescopeArityError):
            fn(env, args)


# -------------------------------
# Boolean logic
# -------------------------------
@pytest.mark.parametrize(
    "value,expected",
    [(Nil, False), (False, False), (True, True), (0, True), ("", True), ([], True)],
)
def test_truthiness(value, expected):
    assert truthy(value) is expected


def test_not(env):
    assert logical_not(env, [True]) is False
    assert logical_not(env, [Nil]) is True
    assert logical_not(env, [0]) is False
    with pytest.raises(TelescopeArityError):
        logical_not(env, [True, False])


def test_and_or(env):
    assert logical_and(env, [True, True]) is True
    assert logical_and(env, [True, False]) is False
    assert logical_and(env, []) is True
    assert logical_or(env, [False, True]) is True
    assert logical_or(env, []) is False


@pytest.mark.parametrize("args", [[True, 1], [Nil], ["true"], [False, 0]])
def test_and_or_require_booleans(env, args):
    with pytest.raises(TelescopeTypeError):
        logical_and(env, args)
    with pytest.raises(TelescopeTypeError):
        logical_or(env, args)


def test_and_does_not_short_circuit(env):
    # the second argument is evaluated even though the first is false
    with pytest.raises(TelescopeTypeError):
        evaluate(parse("(and false (first 1))"), env)
    with pytest.raises(TelescopeTypeError):
        evaluate(parse("(or true 5)"), env)


# -------------------------------
# Sequences
# -------------------------------
def test_first(env):
    assert first(env, [[1, 2]]) == 1
    assert first(env, [Vector([3, 4])]) == 3
    assert first(env, [[]]) is Nil
    assert first(env, [Vector()]) is Nil


def test_rest(env):
    assert rest(env, [[1, 2, 3]]) == [2, 3]
    tail = rest(env, [Vector([1, 2, 3])])
    assert tail == Vector([2, 3])
    assert isinstance(tail, Vector)
    assert rest(env, [[1]]) == []
    assert rest(env, [[]]) is Nil
    assert rest(env, [Vector()]) is Nil


def test_rest_does_not_mutate(env):
    xs = [1, 2, 3]
    rest(env, [xs])
    assert xs == [1, 2, 3]


def test_cons_prepends_to_list_and_appends_to_vector(env):
    assert cons(env, ["x", []]) == ["x"]
    assert cons(env, ["x", Vector()]) == Vector(["x"])
    assert cons(env, [0, [1, 2]]) == [0, 1, 2]
    assert cons(env, [3, Vector([1, 2])]) == Vector([1, 2, 3])
    assert cons(env, [1, Nil]) == [1]


def test_cons_does_not_mutate(env):
    xs = Vector([1])
    cons(env, [2, xs])
    assert xs == Vector([1])


@pytest.mark.parametrize("fn", [first, rest])
def test_sequence_ops_reject_non_sequences(env, fn):
    with pytest.raises(TelescopeTypeError):
        fn(env, [1])
    with pytest.raises(TelescopeTypeError):
        fn(env, ["abc"])


def test_cons_checks_args(env):
    with pytest.raises(TelescopeArityError):
        cons(env, [1])
    with pytest.raises(TelescopeTypeError):
        cons(env, [1, 2])


def test_list_and_vector_builtins(env):
    assert evaluate(parse("(list 1 (+ 1 1) 3)"), env) == [1, 2, 3]
    assert evaluate(parse("(vector 1 2)"), env) == Vector([1, 2])
    assert evaluate(parse("(first (rest (list 1 2 3)))"), env) == 2


# -------------------------------
# I/O and control
# -------------------------------
def test_print_outputs_and_returns_nil(env, capsys):
    assert evaluate(parse('(print "alpha")'), env) is Nil
    assert evaluate(parse("(print (list 1 2.5 \"s\"))"), env) is Nil
    assert capsys.readouterr().out == 'alpha\n(1 2.5 "s")\n'


def test_print_takes_one_argument(env):
    with pytest.raises(TelescopeArityError):
        evaluate(parse("(print 1 2)"), env)


def test_exit_defaults_to_zero(env):
    with pytest.raises(TelescopeExit) as excinfo:
        exit_builtin(env, [])
    assert excinfo.value.code == 0


def test_exit_with_code(env):
    with pytest.raises(TelescopeExit) as excinfo:
        evaluate(parse("(exit 3)"), env)
    assert excinfo.value.code == 3


def test_exit_is_not_an_ordinary_error(env):
    assert not issubclass(TelescopeExit, TelescopeError)
    assert not issubclass(TelescopeExit, Exception)
    with pytest.raises(TelescopeExit):
        try:
            exit_builtin(env, [])
        except Exception:
            pytest.fail("exit was caught as an ordinary error")


def test_exit_checks_args(env):
    with pytest.raises(TelescopeTypeError):
        exit_builtin(env, ["1"])
    with pytest.raises(TelescopeArityError):
        exit_builtin(env, [1, 2])
