from telescope import EvaluatorFn
from telescope import SExpression, LispValue
from telescope.types.environment import Environment
from telescope.types.errors import TelescopeArityError, TelescopeTypeError
from telescope.types.nil import Nil
from telescope.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; an outer binding is shadowed, not changed.
    """
    if len(tail) != 2:
        raise TelescopeArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TelescopeTypeError("define requires a symbol as its first argument")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Nil
