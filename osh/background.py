import psutil

from osh.config import CLEANUP_TIMEOUT

# Children started with a trailing '&': pid -> (Popen, command line)
background_children = {}


def add_background_child(proc, cmdline):
    """Remember a child that nobody is waiting for"""
    background_children[proc.pid] = (proc, cmdline)
    print(f" [+] {proc.pid}")


def reap_background():
    """
    Collect background children that have finished, without blocking.
    Returns: list of reaped pids
    """
    reaped = []
    for pid, (proc, cmdline) in list(background_children.items()):
        if proc.poll() is not None:
            del background_children[pid]
            reaped.append(pid)
            print(f"[{pid}] done: {cmdline}")
    return reaped


def _process_tree(pid):
    try:
        parent = psutil.Process(pid)
        return parent.children(recursive=True) + [parent]
    except psutil.NoSuchProcess:
        return []


def cleanup_background(timeout=CLEANUP_TIMEOUT):
    """Terminate every background child still running, with its descendants"""
    procs = []
    for pid, (proc, _) in list(background_children.items()):
        if proc.poll() is None:
            procs.extend(_process_tree(pid))
        del background_children[pid]

    for p in procs:
        try:
            p.terminate()
        except psutil.NoSuchProcess:
            pass

    _, alive = psutil.wait_procs(procs, timeout=timeout)
    for p in alive:
        try:
            p.kill()
        except psutil.NoSuchProcess:
            pass
    return len(procs)
