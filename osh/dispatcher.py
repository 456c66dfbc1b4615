from osh.builtin import Builtin, Category
from osh.config import HISTORY_SHOW_LIMIT
from osh.errors import ErrorKind, ShellError
from osh.executor import execute
from osh.parser import check_background


def run_builtin(classification, line, history):
    """
    Execute a built-in command.
    Returns (keep_running: bool, next_line: str or None)
    """
    kind = classification.builtin

    if kind is Builtin.EXIT:
        return False, None

    if kind is Builtin.SHOW_HISTORY:
        history.append(line)
        history.show(HISTORY_SHOW_LIMIT)
        return True, None

    if kind is Builtin.RECALL_LAST:
        recalled = history.last_command()
    elif kind is Builtin.RECALL_AT:
        recalled = history.recall(classification.offset)
    else:
        raise ShellError(ErrorKind.GENERAL_UNCLASSIFIED, kind)

    if recalled is None:
        raise ShellError(ErrorKind.EMPTY_HISTORY)
    # fed back to the pipeline as fresh input on the next iteration
    return True, str(recalled)


def dispatch(classification, args, line, history):
    """
    Act on a classified command line.
    Returns (keep_running: bool, next_line: str or None)
    """
    category = classification.category

    if category is Category.EMPTY:
        return True, None

    if category is Category.INVALID:
        raise ShellError(classification.reason)

    if category is Category.BUILTIN:
        return run_builtin(classification, line, history)

    history.append(line)
    background = check_background(args)
    execute(args, background)
    return True, None
