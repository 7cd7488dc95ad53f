"""Lambda function representation and argument binding for Telescope."""

from __future__ import annotations

from io import StringIO

from telescope import SExpression, LispValue
from telescope.types.environment import Environment
from telescope.types.symbol import Symbol
from telescope.types.errors import TelescopeArityError


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from telescope.printer import display

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(display(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters in a
        fresh child of the captured environment.

        The caller's environment plays no part: free variables in the body
        resolve against the environment the lambda was created in.
        """
        if len(args) != len(self.formals):
            raise TelescopeArityError(
                f"{self} expected {len(self.formals)} arguments, got {len(args)}"
            )
        return Environment(dict(zip(self.formals, args)), outer=self.env)
