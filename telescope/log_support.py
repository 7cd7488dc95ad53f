"""
    Logging setup for Telescope: level names are colored on VT-100 terminals,
    plain otherwise. Records go to stderr so they never mix with REPL output.
"""

import logging
import os
import sys

# Only color when stderr is attached to a terminal
has_a_tty = os.isatty(2)


def color_me(color):
    """Return a function wrapping a message in the given ANSI color code."""
    RESET_SEQ = "\033[0m"
    COLOR_SEQ = "\033[1;%dm"

    color_seq = COLOR_SEQ % (30 + color)

    def closure(msg):
        return color_seq + msg + RESET_SEQ
    return closure


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name by severity."""

    BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

    colors = {
        'WARNING': color_me(YELLOW),
        'DEBUG': color_me(BLUE),
        'CRITICAL': color_me(RED),
        'ERROR': color_me(RED),
        'INFO': color_me(GREEN)
    }

    def __init__(self, msg, use_color=True, datefmt=None):
        super().__init__(msg, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record):
        # format a copy so other handlers see the original record
        orig = record.__dict__
        record.__dict__ = record.__dict__.copy()
        levelname = record.levelname

        prn_name = levelname + ' ' * (8 - len(levelname))

        if self.use_color and levelname in self.colors and has_a_tty:
            record.levelname = self.colors[levelname](prn_name)
        else:
            record.levelname = prn_name

        res = super().format(record)
        record.__dict__ = orig
        return res


def setup_loggers(def_level=logging.WARNING):
    """Attach a colored stderr handler to the 'telescope' logger.

    Calling it again only updates the level of the existing handler.
    """
    logger = logging.getLogger('telescope')
    logger.setLevel(logging.DEBUG)

    for handler in logger.handlers:
        if isinstance(handler.formatter, ColoredFormatter):
            handler.setLevel(def_level)
            return logger

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(def_level)

    log_format = '%(asctime)s - %(levelname)s - %(name)-8s - %(message)s'
    sh.setFormatter(ColoredFormatter(log_format, datefmt="%H:%M:%S"))
    logger.addHandler(sh)
    return logger
