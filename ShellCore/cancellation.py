import logging
import signal
from contextlib import contextmanager

import psutil

logger = logging.getLogger(__name__)


def kill_process_tree(pid):
    """Kill a process and every descendant it has spawned."""
    try:
        parent = psutil.Process(pid)
        procs = [parent] + parent.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return

    for p in procs:
        try:
            p.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            continue


class CancelToken:
    """
    Cancellation signal shared by every stage of one pipeline.
    Processes bound to the token are killed when it is cancelled.
    """

    def __init__(self):
        self.cancelled = False
        self._procs = []

    def bind(self, proc):
        self._procs.append(proc)
        if self.cancelled:
            kill_process_tree(proc.pid)

    def cancel(self):
        if self.cancelled:
            return
        self.cancelled = True
        logger.debug("pipeline cancelled, killing %d process(es)", len(self._procs))
        for proc in self._procs:
            # returncode is set once reaped; the pid may already be reused
            if proc.returncode is None:
                kill_process_tree(proc.pid)

    def release(self):
        self._procs = []


@contextmanager
def cancellation_scope():
    """
    Yield a fresh CancelToken that Ctrl+C (SIGINT) cancels.
    The previous SIGINT handler is restored when the block exits.
    """
    token = CancelToken()

    def handle_sigint(signum, frame):
        token.cancel()

    try:
        previous = signal.signal(signal.SIGINT, handle_sigint)
        installed = True
    except ValueError:
        # signal.signal only works in the main thread
        logger.debug("SIGINT handler not installed outside the main thread")
        previous, installed = None, False

    try:
        yield token
    finally:
        if installed:
            signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
        token.release()
