"""Application engine for Telescope.

Centralizes procedure application for the evaluator and for builtins that
call back into user code:
- Builtins are called with the caller's environment and the evaluated args.
- Lambdas bind their parameters in a child of the environment they closed
  over and evaluate their body there.
"""

from telescope import LispValue, EvaluatorFn
from telescope.printer import display
from telescope.types.builtin_fn import Builtin
from telescope.types.environment import Environment
from telescope.types.errors import TelescopeTypeError
from telescope.types.lambda_fn import Lambda


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin to already-evaluated arguments.

    Arity mismatches for a Lambda raise TelescopeArityError; arity and type
    checks for a Builtin are the builtin's own business.
    """
    if isinstance(head, Lambda):
        return evaluate_fn(head.body, head.extend_env(args))
    if isinstance(head, Builtin):
        return head(env, args)
    raise TelescopeTypeError(f"Not a function: {display(head)}")
