"""Shared utility functions for CLI commands."""

import sys
import threading
import time


def format_size(num_bytes: int) -> str:
    """Format a byte count for humans.

    Args:
        num_bytes: Size in bytes.

    Returns:
        Size string such as "512 B", "4.0 MB" or "1.2 GB".
    """
    size = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            return f"{int(size)} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def format_elapsed(seconds: float) -> str:
    """Format elapsed seconds as e.g. "45s" or "2m 30s"."""
    secs = int(seconds)
    if secs < 60:
        return f"{secs}s"
    return f"{secs // 60}m {secs % 60}s"


class Spinner:
    """Terminal spinner shown on stderr while an upload is in flight.

    Args:
        show_elapsed: If True, show elapsed time next to the status text.
    """

    _FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
    _INTERVAL = 0.1  # seconds between frames

    def __init__(self, show_elapsed: bool = True):
        self._text = ""
        self._running = False
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._start_time = 0.0
        self._show_elapsed = show_elapsed
        # Animate only on a real terminal
        self._enabled = sys.stderr.isatty()

    def start(self, text: str) -> None:
        """Start spinning with the given status text."""
        with self._lock:
            self._text = text
            self._start_time = time.monotonic()
            if self._running or not self._enabled:
                return
            self._running = True
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()

    def _stop_thread(self) -> float:
        with self._lock:
            elapsed = time.monotonic() - self._start_time
            running, self._running = self._running, False
        if running and self._thread:
            self._thread.join(timeout=0.5)
            self._thread = None
        return elapsed

    def done(self, symbol: str = "✓") -> None:
        """Stop and leave the status line with a symbol and elapsed time."""
        elapsed = self._stop_thread()
        line = f"{symbol} {self._text}"
        if self._show_elapsed:
            line += f" ({format_elapsed(elapsed)})"
        prefix = "\r\033[K" if self._enabled else ""
        sys.stderr.write(prefix + line + "\n")
        sys.stderr.flush()

    def fail(self) -> None:
        """Stop and leave the status line with a failure symbol."""
        self.done(symbol="✗")

    def _animate(self) -> None:
        idx = 0
        while True:
            with self._lock:
                if not self._running:
                    break
                text = self._text
                elapsed = time.monotonic() - self._start_time
            frame = self._FRAMES[idx % len(self._FRAMES)]
            line = f"\r\033[K{frame} {text}"
            if self._show_elapsed:
                line += f" \033[2m{format_elapsed(elapsed)}\033[0m"
            sys.stderr.write(line)
            sys.stderr.flush()
            idx += 1
            time.sleep(self._INTERVAL)
