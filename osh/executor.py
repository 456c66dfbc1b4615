import errno
import os
import shutil
import subprocess

from osh.background import add_background_child
from osh.errors import ErrorKind, ShellError

# Process creation itself failed; anything else is a program that will not load
FORK_ERRNOS = (errno.EAGAIN, errno.EMFILE, errno.ENFILE)


def run_external(args, background=False):
    """
    Start args[0] with args as its argument list.
    Returns: Popen object
    """
    if shutil.which(args[0]) is None:
        raise ShellError(ErrorKind.COMMAND_NOT_FOUND, args[0])

    try:
        if background:
            # own process group, so Ctrl+C at the prompt does not reach it
            return subprocess.Popen(args, preexec_fn=os.setpgrp)
        return subprocess.Popen(args)
    except MemoryError:
        raise ShellError(ErrorKind.ALLOCATION_FAILURE)
    except OSError as e:
        if e.errno == errno.ENOMEM:
            raise ShellError(ErrorKind.ALLOCATION_FAILURE, e.strerror)
        if e.errno in FORK_ERRNOS:
            raise ShellError(ErrorKind.PROCESS_CREATION_FAILURE, e.strerror)
        # the image could not be loaded: not found, no permission, bad format
        raise ShellError(ErrorKind.COMMAND_NOT_FOUND, f"{args[0]}: {e.strerror}")


def wait_foreground(proc):
    """Block until proc exits; an interrupt at the terminal does not abandon it"""
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            print()


def execute(args, background=False):
    """
    Run an external command.
    Returns: exit code, or None for a background child
    """
    argv = list(args)
    proc = run_external(argv, background)

    if background:
        add_background_child(proc, " ".join(argv))
        return None

    return wait_foreground(proc)
