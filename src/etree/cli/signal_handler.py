"""SIGPIPE and SIGINT handling for the etree CLI.

Both signals only set a flag. SafeWriter checks the flags before every write,
so an interrupted run stops at the next line and main() turns the flag into
the conventional exit status. SIGPIPE does not exist on Windows, where only
SIGINT is watched.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Optional

SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)

EXIT_SIGPIPE = 128 + 13
EXIT_SIGINT = 128 + 2


class SignalHandler:
    """Records interrupting signals for the rest of the CLI to act on.

    Each handler fires once: it sets its event and reinstalls the handler that
    was active before, so a second Ctrl+C behaves as usual.

    Attributes:
        sigpipe_received: Set once SIGPIPE has arrived.
        sigint_received: Set once SIGINT has arrived.
        original_sigpipe_handler: Handler to restore for SIGPIPE; None without SIGPIPE.
        original_sigint_handler: Handler to restore for SIGINT.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler: Any = None if SIGPIPE is None else signal.getsignal(SIGPIPE)
        self.original_sigint_handler: Any = signal.getsignal(signal.SIGINT)

    @property
    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def exit_code(self) -> Optional[int]:
        """Exit status for the received signals, SIGPIPE first; None when none arrived."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Route SIGPIPE (where available) and SIGINT to the shared handler."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    Runs at interpreter exit, so flushing a stdout whose reader is gone does
    not print a second error.
    """
    if not signal_handler.interrupted:
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
