"""Core evaluator for the Telescope interpreter.

Structural recursion over the expression tree: atoms evaluate to
themselves, symbols are looked up, special forms are dispatched by name,
and any other non-empty list is a procedure application with its operands
evaluated eagerly, left to right, in the caller's environment.
"""

from __future__ import annotations

from telescope import SExpression, LispValue
from telescope.types.environment import Environment
from telescope.types.errors import TelescopeUnboundSymbol
from telescope.types.symbol import Symbol
from telescope.types.vector import Vector
from telescope.evaluation.apply import apply
from telescope.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            value = env.lookup(expr)
            if value is None:
                raise TelescopeUnboundSymbol(f"Undefined symbol: {expr}")
            return value

        case Vector():
            return Vector(evaluate(item, env) for item in expr)

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

    # --- Atoms, functions and the empty list return as-is ---
    return expr
