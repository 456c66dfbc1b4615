from dataclasses import dataclass
from enum import Enum

from osh.errors import ErrorKind


class Builtin(Enum):
    EXIT = "exit"
    SHOW_HISTORY = "show_history"
    RECALL_LAST = "recall_last"
    RECALL_AT = "recall_at"


class Category(Enum):
    EMPTY = "empty"
    INVALID = "invalid"
    BUILTIN = "builtin"
    EXTERNAL = "external"


@dataclass(frozen=True)
class BuiltinSpec:
    kind: Builtin
    needs_args: bool = False


@dataclass(frozen=True)
class Classification:
    category: Category
    builtin: Builtin = None
    offset: int = None
    reason: ErrorKind = None

    @classmethod
    def empty(cls):
        return cls(Category.EMPTY)

    @classmethod
    def invalid(cls, reason=ErrorKind.INVALID_ARGUMENT):
        return cls(Category.INVALID, reason=reason)

    @classmethod
    def external(cls):
        return cls(Category.EXTERNAL)

    @classmethod
    def of(cls, kind, offset=None):
        return cls(Category.BUILTIN, builtin=kind, offset=offset)


BUILTINS = {
    "exit": BuiltinSpec(Builtin.EXIT),
    "history": BuiltinSpec(Builtin.SHOW_HISTORY),
    "!!": BuiltinSpec(Builtin.RECALL_LAST),
    "!": BuiltinSpec(Builtin.RECALL_AT, needs_args=True),
}

RECALL_PREFIX = "!"


def parse_offset(text):
    """Returns: positive int, or None"""
    try:
        num = int(text)
    except (TypeError, ValueError):
        return None
    return num if num > 0 else None


def classify(args, table=None):
    """
    Decide what the argument vector asks for.
    Never raises: malformed built-ins come back as INVALID.
    """
    table = BUILTINS if table is None else table
    if len(args) == 0:
        return Classification.empty()

    cmd = args[0]
    spec = table.get(cmd)

    if spec is None:
        # "!3" is shorthand for "! 3"
        if cmd.startswith(RECALL_PREFIX) and RECALL_PREFIX in table:
            offset = parse_offset(cmd[len(RECALL_PREFIX):])
            if offset is None:
                return Classification.invalid()
            return Classification.of(Builtin.RECALL_AT, offset)
        return Classification.external()

    if spec.needs_args:
        if len(args) < 2:
            return Classification.invalid()
        offset = parse_offset(args[1])
        if offset is None:
            return Classification.invalid()
        return Classification.of(spec.kind, offset)

    if spec.kind is Builtin.RECALL_LAST:
        return Classification.of(spec.kind, 1)
    return Classification.of(spec.kind)
