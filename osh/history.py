import os
import sys
from collections import deque

from osh.builtin import Builtin, classify
from osh.config import HISTORY_FILE, MAX_CHRONO, MAX_HISTORY, HISTORY_SHOW_LIMIT
from osh.parser import normalize, tokenize

try:
    import readline
except ImportError:
    readline = None

LISTING_COMMAND = "history"


class HistoryLog:
    """
    Ring buffer of dispatched command lines.

    Entries are addressed from the end: offset 1 is the most recent write.
    Once capacity is reached the oldest entry is evicted.
    """

    def __init__(self, capacity=MAX_CHRONO):
        self.capacity = capacity
        self.written = 0
        self._entries = deque(maxlen=capacity)

    def append(self, entry):
        self._entries.append(str(entry))
        self.written += 1

    def recall(self, offset):
        """Returns: the entry offset writes back, or None"""
        if offset < 1 or offset > len(self._entries):
            return None
        return self._entries[-offset]

    def last_command(self):
        """Most recent entry that is not a history listing."""
        for entry in reversed(self._entries):
            if entry.split(" ", 1)[0] != LISTING_COMMAND:
                return entry
        return None

    def show(self, limit=HISTORY_SHOW_LIMIT, stream=None):
        """Print the newest entries first, labelled from 0."""
        stream = stream or sys.stdout
        for index, entry in enumerate(reversed(self._entries)):
            if index >= limit:
                break
            print(f"{index} {entry}", file=stream)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))


# ---------- Line editing ----------

def init_readline():
    """Configure readline key bindings for the prompt"""
    if readline is None:
        return
    try:
        if not sys.stdin.isatty():
            return

        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")
        readline.parse_and_bind("set editing-mode emacs")
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def is_recall_line(line):
    """True for the recall commands "!!", "! N" and "!N"."""
    line = normalize(line)
    if line is None:
        return False
    return classify(tokenize(line)).builtin in (Builtin.RECALL_LAST, Builtin.RECALL_AT)


def save_history():
    """Write line-editing history to HISTORY_FILE, without recall lines"""
    if readline is None:
        return
    try:
        lines = [
            readline.get_history_item(i)
            for i in range(1, readline.get_current_history_length() + 1)
        ]
        readline.clear_history()
        for line in lines:
            if line and not is_recall_line(line):
                readline.add_history(line)

        readline.set_history_length(MAX_HISTORY)
        readline.write_history_file(HISTORY_FILE)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)


def load_history():
    """Load line-editing history from HISTORY_FILE"""
    if readline is None:
        return
    try:
        if os.path.exists(HISTORY_FILE):
            readline.read_history_file(HISTORY_FILE)
            readline.set_history_length(MAX_HISTORY)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)
