"""Interactive front end for Telescope.

The REPL owns the process lifecycle: it is the only place that decides
when the session ends and with which status code.
"""

import logging
import readline  # noqa: F401  (line editing for input())
import sys

from telescope import __version__
from telescope.config import get_log_level, get_prompt
from telescope.interpreter import Interpreter
from telescope.log_support import setup_loggers
from telescope.printer import display
from telescope.types.errors import TelescopeEOF, TelescopeError, TelescopeExit, TelescopeIOError

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("exit", "quit")


class Repl:
    def __init__(self, interp=None, prompt=None, out=None):
        self.interp = interp if interp is not None else Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.out = out if out is not None else sys.stdout

    def write(self, text):
        print(text, file=self.out)

    def header(self):
        self.write(f"telescope v{__version__}\n---------")

    def input(self):
        try:
            return input(self.prompt)
        except OSError as e:
            raise TelescopeIOError(f"failed to read input: {e}") from e

    def eval_line(self, line):
        """Evaluate one line and print its result or error.

        Returns an exit code when the line ends the session, else None.
        """
        try:
            result = self.interp.eval(line)
        except TelescopeEOF:
            return None
        except TelescopeExit as e:
            logger.debug("exit requested with code %d", e.code)
            return e.code
        except TelescopeError as e:
            logger.debug("error evaluating %r", line, exc_info=True)
            self.write(f"error: {e}")
            return None
        self.write(display(result))
        return None

    def run(self):
        """Loop until end of input, interrupt, a quit command or `exit`."""
        self.header()
        while True:
            try:
                line = self.input()
            except (EOFError, KeyboardInterrupt):
                self.write("")
                return 0
            except TelescopeIOError as e:
                logger.error("%s", e)
                self.write(f"error: {e}")
                return 1

            if line.strip() in QUIT_COMMANDS:
                return 0
            try:
                code = self.eval_line(line)
            except KeyboardInterrupt:
                self.write("")
                return 130
            if code is not None:
                return code


def main():
    setup_loggers(get_log_level())
    sys.exit(Repl().run())


if __name__ == "__main__":
    main()
