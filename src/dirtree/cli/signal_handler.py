"""Signal handling for the dirtree CLI.

Records SIGPIPE (reader went away, e.g. ``dirtree . | head``) and SIGINT (Ctrl+C)
so that output stops cleanly and the process exits with the conventional
``128 + signal number`` code: 141 for SIGPIPE, 130 for SIGINT.
"""

import atexit
import os
import signal
import sys
from types import FrameType
from typing import Any, Dict, Optional, Set, Tuple

# SIGPIPE does not exist on Windows
HAS_SIGPIPE = hasattr(signal, "SIGPIPE")

# In order of precedence when choosing the exit code
HANDLED_SIGNALS: Tuple[int, ...] = ((signal.SIGPIPE,) if HAS_SIGPIPE else ()) + (signal.SIGINT,)


class SignalHandler:
    """Records interrupting signals for the CLI.

    Each handled signal is recorded once; the handler then restores the previous
    disposition so a second signal of the same kind behaves as it would have
    without dirtree.
    """

    def __init__(self) -> None:
        self.received: Set[int] = set()
        self._previous: Dict[int, Any] = {}

    def install(self) -> None:
        """Install this handler for every signal in HANDLED_SIGNALS."""
        for signum in HANDLED_SIGNALS:
            self._previous[signum] = signal.signal(signum, self.handle)

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        self.received.add(signum)
        signal.signal(signum, self._previous.get(signum, signal.SIG_DFL))

    @property
    def interrupted(self) -> bool:
        """True once any handled signal has been received."""
        return bool(self.received)

    def exit_code(self) -> Optional[int]:
        """Exit code for the received signal, SIGPIPE first; None if there was none."""
        for signum in HANDLED_SIGNALS:
            if signum in self.received:
                return 128 + signum
        return None


signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE (where available) and SIGINT handlers."""
    signal_handler.install()


def cleanup() -> None:
    """Send stdout to the null device after an interruption to silence shutdown errors."""
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
