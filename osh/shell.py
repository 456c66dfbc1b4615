import sys

from osh.background import cleanup_background, reap_background
from osh.builtin import classify
from osh.config import PROMPT
from osh.dispatcher import dispatch
from osh.errors import ErrorKind, ShellError, report_error
from osh.history import HistoryLog, init_readline, load_history, save_history
from osh.parser import normalize, tokenize


def prompt():
    return PROMPT


def read_line(text):
    """Read one line from the terminal; raises EOFError at end of input"""
    return input(text)


def run_line(raw, history):
    """
    Push one raw line through normalize -> tokenize -> classify -> dispatch.
    Returns (keep_running: bool, next_line: str or None)
    """
    line = normalize(raw)
    if line is None:
        return True, None

    args = tokenize(line)
    return dispatch(classify(args), args, line, history)


def main_loop(read=None, history=None):
    """
    Main shell loop.
    Returns: process exit status
    """
    read = read or read_line
    history = HistoryLog() if history is None else history
    status = 0
    pending = None

    init_readline()
    load_history()

    try:
        while True:
            reap_background()

            if pending is not None:
                raw, pending = pending, None
            else:
                try:
                    raw = read(prompt())
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    print()
                    continue

            try:
                keep_running, pending = run_line(raw, history)
            except ShellError as e:
                if report_error(e):
                    status = 1
                    break
                continue
            except MemoryError:
                report_error(ShellError(ErrorKind.ALLOCATION_FAILURE))
                status = 1
                break
            except Exception as e:
                report_error(ShellError(ErrorKind.GENERAL_UNCLASSIFIED, e))
                status = 1
                break

            if not keep_running:
                break

    finally:
        save_history()
        cleanup_background()

    return status


def main():
    sys.exit(main_loop())


if __name__ == "__main__":
    main()
