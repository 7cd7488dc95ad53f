from telescope import EvaluatorFn
from telescope import SExpression, LispValue
from telescope.builtin.env_builtin import truthy
from telescope.types.environment import Environment
from telescope.types.errors import TelescopeArityError
from telescope.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise TelescopeArityError("if requires a condition, a then-expression and an optional else")

    cond = evaluate_fn(tail[0], env)
    if truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
