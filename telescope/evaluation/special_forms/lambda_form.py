from telescope import EvaluatorFn
from telescope import SExpression, LispValue
from telescope.types.environment import Environment
from telescope.types.errors import TelescopeArityError, TelescopeTypeError
from telescope.types.lambda_fn import Lambda
from telescope.types.symbol import Symbol
from telescope.types.vector import Vector


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    Captures `env`; the body is evaluated there at call time, whoever calls.
    """
    if len(tail) != 2:
        raise TelescopeArityError("lambda requires a parameter list and exactly one body")

    params, body = tail
    if not isinstance(params, list) or isinstance(params, Vector):
        raise TelescopeTypeError("lambda parameters must be a list of symbols")
    if not all(isinstance(p, Symbol) for p in params):
        raise TelescopeTypeError("lambda parameters must be a list of symbols")
    if len(set(params)) != len(params):
        raise TelescopeTypeError("lambda parameters must be distinct")

    return Lambda(list(params), body, env)
