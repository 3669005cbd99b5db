"""Fixed regions of the terminal that are redrawn in place."""

import signal
import threading
from enum import IntEnum

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[0;0H"
CLEAR_TO_EOL = "\x1b[0K"


class WindowType(IntEnum):
    CUTOFF_GUIDE = 0
    RSC_LIST = 1
    INPUT_LINE = 2


class Windows:
    """Draws windows one after another, padding each to its last height.

    While disabled, windows are written as plain lines with no escapes.
    """

    def __init__(self, output):
        self.output = output
        self.enabled = False
        self._newline_records = {window: 0 for window in WindowType}
        self._current_newlines = 0
        self._current = None
        self._require_clear_screen = True

    def _check_no_current_window(self):
        if self._current is not None:
            raise RuntimeError(f"window still being written: {self._current!r}")

    def _check_current_window(self):
        if self._current is None:
            raise RuntimeError("no window is being written")

    def request_clear(self):
        """Clear the whole screen on the next return to the top."""
        self._require_clear_screen = True

    def enable(self):
        """Turn on escape output and clear on terminal resize."""
        sigwinch = getattr(signal, "SIGWINCH", None)
        if sigwinch is not None and threading.current_thread() is threading.main_thread():
            signal.signal(sigwinch, lambda signum, frame: self.request_clear())
        self.enabled = True

    def to_top_of_screen(self):
        """Move the cursor home, clearing the screen first if requested."""
        self._check_no_current_window()
        if not self.enabled:
            return
        if self._require_clear_screen:
            self.output.add(CLEAR_SCREEN)
            self._require_clear_screen = False
        self.output.add(CURSOR_HOME)

    def start_window(self, window):
        """Begin writing the given window."""
        try:
            window = WindowType(window)
        except ValueError:
            raise ValueError(f"window id out of range: {window!r}") from None
        self._check_no_current_window()
        self._current = window
        self._current_newlines = 0

    def add_newline(self):
        """End a line of the current window."""
        self._check_current_window()
        if self.enabled:
            self.output.add(CLEAR_TO_EOL)
        self.output.add("\n")
        self._current_newlines += 1

    def finish_window(self):
        """End the current window, blanking lines left from a taller draw."""
        self._check_current_window()
        try:
            if not self.enabled:
                return
            while self._current_newlines < self._newline_records[self._current]:
                self.add_newline()
            self._newline_records[self._current] = self._current_newlines
        finally:
            self._current = None