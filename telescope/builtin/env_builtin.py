"""Built-in procedures for the Telescope runtime environment.

This module defines arithmetic, comparison, boolean logic, sequence
operations, output and session control, plus the registration helper that
installs them into an environment. Every builtin takes the calling
environment and the list of already-evaluated arguments, and checks its own
arity and argument types.
"""
from __future__ import annotations

import math
import operator
from functools import reduce
from typing import Callable

from telescope import LispValue
from telescope.printer import display, to_text
from telescope.types.builtin_fn import Builtin
from telescope.types.environment import Environment
from telescope.types.errors import (
    TelescopeArityError,
    TelescopeComparisonError,
    TelescopeDivisionByZero,
    TelescopeEvalError,
    TelescopeExit,
    TelescopeTypeError,
)
from telescope.types.nil import Nil
from telescope.types.symbol import Symbol
from telescope.types.vector import Vector

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


# -------------------------------
# Helpers
# -------------------------------
def is_int(x: LispValue) -> bool:
    # bool is an int subclass in Python but never a number here
    return isinstance(x, int) and not isinstance(x, bool)


def is_num(x: LispValue) -> bool:
    return is_int(x) or isinstance(x, float)


def truthy(x: LispValue) -> bool:
    """Only Nil and false are falsey."""
    return not (x is Nil or x is False)


def ensure_args(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise TelescopeArityError(f"{name} requires exactly {n} argument(s), got {len(expr)}")


def ensure_min_args(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) < n:
        raise TelescopeArityError(f"{name} requires at least {n} argument(s), got {len(expr)}")


def check_int(name: str, value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise TelescopeEvalError(f"{name}: integer overflow")
    return value


def numeric_op(
    name: str,
    expr: list[LispValue],
    fn_int: Callable[[list[int]], int],
    fn_flt: Callable[[list[float]], float],
) -> LispValue:
    """Apply the int or float form of an operator.

    All-int arguments use the int form; if any argument is a float, every
    argument is widened and the float form is used. Anything non-numeric is
    a type error, with no coercion from strings or booleans.
    """
    if not all(is_num(x) for x in expr):
        raise TelescopeTypeError(f"All arguments to {name} must be numbers")
    if any(isinstance(x, float) for x in expr):
        return fn_flt([float(x) for x in expr])
    return check_int(name, fn_int(expr))


def checked(name: str, op: Callable[[int, int], int]) -> Callable[[int, int], int]:
    """Wrap a binary int operation so every intermediate result is range-checked."""
    return lambda a, b: check_int(name, op(a, b))


def int_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise TelescopeDivisionByZero("Division by zero")
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def float_div(a: float, b: float) -> float:
    """IEEE-754 division; Python itself raises on a zero divisor."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; 0 with none."""
    return numeric_op(
        "+",
        expr,
        lambda ints: reduce(checked("+", operator.add), ints, 0),
        lambda floats: reduce(operator.add, floats),
    )


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    ensure_min_args("-", expr, 1)
    if len(expr) == 1:
        return numeric_op("-", expr, lambda ints: -ints[0], lambda floats: -floats[0])
    return numeric_op(
        "-",
        expr,
        lambda ints: reduce(checked("-", operator.sub), ints),
        lambda floats: reduce(operator.sub, floats),
    )


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments; 1 with none."""
    return numeric_op(
        "*",
        expr,
        lambda ints: reduce(checked("*", operator.mul), ints, 1),
        lambda floats: reduce(operator.mul, floats),
    )


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the float reciprocal.

    Integer mode raises on any zero divisor. Float mode gives inf/nan.
    """
    ensure_min_args("/", expr, 1)
    if len(expr) == 1:
        x = expr[0]
        if is_int(x):
            if x == 0:
                raise TelescopeDivisionByZero("Division by zero")
            return 1.0 / x
        if isinstance(x, float):
            return float_div(1.0, x)
        raise TelescopeTypeError("All arguments to / must be numbers")
    return numeric_op(
        "/",
        expr,
        lambda ints: reduce(checked("/", int_div), ints),
        lambda floats: reduce(float_div, floats),
    )


# -------------------------------
# Comparison
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; values of different types are never equal."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def equals(env: Environment, expr: list[LispValue]) -> bool:
    ensure_args("=", expr, 2)
    return is_equal(expr[0], expr[1])


def _ordered(name: str, expr: list[LispValue], op: Callable[[LispValue, LispValue], bool]) -> bool:
    ensure_args(name, expr, 2)
    a, b = expr
    if (
        (is_int(a) and is_int(b))
        or (isinstance(a, float) and isinstance(b, float))
        or (isinstance(a, str) and isinstance(b, str))
    ):
        return op(a, b)
    raise TelescopeComparisonError(f"Comparison undefined for: {display(a)}, {display(b)}")


def lt(env: Environment, expr: list[LispValue]) -> bool:
    return _ordered("<", expr, operator.lt)


def lte(env: Environment, expr: list[LispValue]) -> bool:
    return _ordered("<=", expr, operator.le)


def gt(env: Environment, expr: list[LispValue]) -> bool:
    return _ordered(">", expr, operator.gt)


def gte(env: Environment, expr: list[LispValue]) -> bool:
    return _ordered(">=", expr, operator.ge)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    """Logical NOT of a single value's truthiness."""
    ensure_args("not", expr, 1)
    return not truthy(expr[0])


def _booleans(name: str, expr: list[LispValue]) -> list[bool]:
    if not all(isinstance(x, bool) for x in expr):
        raise TelescopeTypeError(f"{name} expected boolean arguments")
    return expr


# TODO: make and/or special forms so they can short-circuit
def logical_and(env: Environment, expr: list[LispValue]) -> bool:
    return all(_booleans("and", expr))


def logical_or(env: Environment, expr: list[LispValue]) -> bool:
    return any(_booleans("or", expr))


# -------------------------------
# Sequences
# -------------------------------
def _sequence(name: str, x: LispValue) -> list[LispValue]:
    if not isinstance(x, list):
        raise TelescopeTypeError(f"{name} expected a list or vector, got {display(x)}")
    return x


def first(env: Environment, expr: list[LispValue]) -> LispValue:
    """First element of a list or vector; Nil when empty."""
    ensure_args("first", expr, 1)
    xs = _sequence("first", expr[0])
    return xs[0] if xs else Nil


def rest(env: Environment, expr: list[LispValue]) -> LispValue:
    """All but the first element, as the same kind of sequence; Nil when empty."""
    ensure_args("rest", expr, 1)
    xs = _sequence("rest", expr[0])
    if not xs:
        return Nil
    return Vector(xs[1:]) if isinstance(xs, Vector) else xs[1:]


def cons(env: Environment, expr: list[LispValue]) -> LispValue:
    """(cons item seq): prepend to a list, append to a vector.

    The asymmetry between the two sequence kinds is part of the language.
    A Nil sequence is treated as the empty list.
    """
    ensure_args("cons", expr, 2)
    item, seq = expr
    if seq is Nil:
        return [item]
    seq = _sequence("cons", seq)
    if isinstance(seq, Vector):
        return Vector([*seq, item])
    return [item, *seq]


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(expr)


def vector_builtin(env: Environment, expr: list[LispValue]) -> Vector:
    return Vector(expr)


# -------------------------------
# I/O and control
# -------------------------------
def print_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Print one value followed by a newline; returns Nil."""
    ensure_args("print", expr, 1)
    print(to_text(expr[0]))
    return Nil


def exit_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """(exit [code]): ask the REPL to end the session."""
    if len(expr) > 1:
        raise TelescopeArityError(f"exit takes at most 1 argument, got {len(expr)}")
    code = expr[0] if expr else 0
    if not is_int(code):
        raise TelescopeTypeError("exit code must be an integer")
    raise TelescopeExit(code)


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "and": logical_and,
    "or": logical_or,
    "first": first,
    "rest": rest,
    "cons": cons,
    "list": list_builtin,
    "vector": vector_builtin,
    "print": print_builtin,
    "exit": exit_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
