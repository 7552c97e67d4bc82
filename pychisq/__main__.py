"""
Command-line entry point.

    python -m pychisq [oe|binomial|poisson|contingency] [--min-expected X]
                      [--log-level LEVEL] [--log-file PATH]

Without a model a numbered menu is shown. The editors run under curses;
the report is printed to stdout once the terminal is restored.
"""

from __future__ import annotations

import argparse
import logging
import logging.handlers
import os
import sys

from pychisq.core.config import FitConfig, MIN_EXPECTED
from pychisq.core.exceptions import ChiSquaredError
from pychisq.session import MODELS, SessionOutcome, run_session

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("pychisq")


class DeferredHandler(logging.handlers.MemoryHandler):
    """Holds every record until flush() is called explicitly."""

    def __init__(self, target: logging.Handler):
        super().__init__(capacity=0, target=target)

    def shouldFlush(self, record: logging.LogRecord) -> bool:
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pychisq",
        description="Interactive chi-squared goodness-of-fit calculator",
    )
    parser.add_argument(
        "model", nargs="?", choices=sorted(MODELS),
        help="model to fit (default: choose from a menu)",
    )
    parser.add_argument(
        "--min-expected", type=float, default=MIN_EXPECTED,
        help=f"bin grouping threshold (default: {MIN_EXPECTED:g})",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        help="write logs here; otherwise they are printed after the session",
    )
    return parser


def configure_logging(level: str, log_file: str | None) -> DeferredHandler | None:
    """
    Set up logging without writing to the terminal while curses owns it.

    Returns the buffering handler to flush afterwards, or None when
    logging to a file.
    """
    if log_file:
        logging.basicConfig(level=level, filename=log_file, format=LOG_FORMAT)
        return None
    target = logging.StreamHandler(sys.stderr)
    target.setFormatter(logging.Formatter(LOG_FORMAT))
    buffer = DeferredHandler(target)
    logging.basicConfig(level=level, handlers=[buffer])
    return buffer


def _interactive(stdscr, model: str | None, config: FitConfig) -> SessionOutcome:
    from pychisq.terminal import CursesTerminal

    terminal = CursesTerminal(stdscr)
    if model is None:
        model = terminal.choose_model()
    terminal.title = MODELS[model]
    return run_session(model, terminal, terminal, terminal.ask_int, config)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    buffer = configure_logging(args.log_level, args.log_file)

    try:
        config = FitConfig(min_expected=args.min_expected)
        import curses

        # Esc terminates the editors; don't wait a full second to see it
        os.environ.setdefault("ESCDELAY", "25")
        outcome = curses.wrapper(_interactive, args.model, config)
    except ChiSquaredError as e:
        logger.debug("session failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    finally:
        if buffer is not None:
            buffer.flush()

    print(outcome.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
