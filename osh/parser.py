from osh.config import MAX_LINE, MAX_TOKEN
from osh.errors import ErrorKind, ShellError

SEPARATORS = (" ", "\n")
BACKGROUND = "&"


class ArgumentVector:
    """
    Bounded list of tokens; index 0 is the command name.
    Pushing past capacity is refused, never raises.
    """

    def __init__(self, capacity=MAX_LINE):
        self.capacity = capacity
        self._tokens = []

    def push(self, token):
        """Append token. Returns: False if the vector is full"""
        if self.full():
            return False
        self._tokens.append(token)
        return True

    def pop(self, index=-1):
        return self._tokens.pop(index)

    def full(self):
        return len(self._tokens) >= self.capacity

    def argv(self):
        """Owned copy suitable for subprocess."""
        return list(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __getitem__(self, index):
        return self._tokens[index]

    def __iter__(self):
        return iter(self._tokens)

    def __repr__(self):
        return f"ArgumentVector({self._tokens!r})"


def normalize(raw):
    """
    Drop non-printable characters, collapse space/newline runs and trim.
    Returns: normalized line, or None if nothing is left
    """
    if raw is None:
        return None

    out = []
    for ch in raw:
        if ch in SEPARATORS:
            if out and out[-1] != " ":
                out.append(" ")
        elif ch.isprintable():
            out.append(ch)

    line = "".join(out).strip(" ")
    return line or None


def tokenize(line, capacity=MAX_LINE, token_size=MAX_TOKEN):
    """
    Split a normalized line into an ArgumentVector.
    Tokens longer than token_size are cut; tokens past capacity are dropped.
    """
    if line is None:
        raise ShellError(ErrorKind.INPUT_UNAVAILABLE)

    args = ArgumentVector(capacity)
    buf = []
    for ch in line:
        if ch in SEPARATORS:
            if buf and not args.push("".join(buf)):
                return args
            buf = []
        elif len(buf) < token_size:
            buf.append(ch)

    if buf:
        args.push("".join(buf))
    return args


def check_background(args):
    """
    Remove a trailing '&' token.
    Returns: True if the command should run in background
    """
    if len(args) > 1 and args[-1] == BACKGROUND:
        args.pop()
        return True
    return False
