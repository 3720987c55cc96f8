"""
Cooperative cancellation from the console.

A StopListener thread reads lines from a stream (stdin by default) and
sets a StopToken when the user types "stop". The download loop checks the
token between items, so a running download always finishes first.
"""

import sys
import threading
from typing import Optional, TextIO

from feed_catcher import config
from feed_catcher.logging_config import setup_logging

logger = setup_logging(__name__)


class StopToken:
    """Stop flag shared between the listener and the download loop."""

    def __init__(self):
        self._event = threading.Event()

    def request_stop(self) -> None:
        self._event.set()

    def stop_requested(self) -> bool:
        return self._event.is_set()


def is_stop_command(line: str) -> bool:
    """Return True if a console line is the stop command."""
    return line.strip().lower() == config.STOP_COMMAND


class StopListener:
    """
    Background console reader that requests a stop on the stop command.

    The listener keeps reading after a stop was requested. It ends when the
    stream reaches EOF or after close() was called and the next line (or
    read error) comes in. The thread is a daemon so a read blocked on an
    idle console never keeps the process alive.
    """

    def __init__(self, stop_token: StopToken, stream: Optional[TextIO] = None, error_delay: float = None):
        self.stop_token = stop_token
        self.stream = stream if stream is not None else sys.stdin
        self.error_delay = config.LISTENER_ERROR_DELAY if error_delay is None else error_delay
        self._closed = threading.Event()
        self._thread = threading.Thread(target=self._listen, name='stop-listener', daemon=True)

    def start(self) -> 'StopListener':
        self._thread.start()
        return self

    def close(self) -> None:
        """Ask the listener loop to end."""
        self._closed.set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the listener thread.

        Returns:
        bool: True if the thread has ended
        """
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.debug("Stop listener is still waiting for console input")
            return False
        return True

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def _listen(self) -> None:
        while not self._closed.is_set():
            try:
                line = self.stream.readline()
            except (OSError, ValueError) as e:
                logger.warning(f"Unable to read console input. Error: {e}")
                # Avoid spinning on a stream that keeps failing
                self._closed.wait(self.error_delay)
                continue

            if line == '':
                logger.debug("Console input closed, stop listener exiting")
                return

            if is_stop_command(line):
                logger.info("Stopping the download process.")
                self.stop_token.request_stop()
