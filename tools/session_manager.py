"""
Session Manager — one browser session per worker thread.

Scenarios running concurrently on different threads each get their own
session; nothing is shared between them. The registry is an ordinary object
handed to whoever needs it (the behave context holds it for the run).
"""

import threading
from contextlib import contextmanager
from typing import Callable, Optional

from tools.browser_session import BrowserSession
from tools.run_logger import get_logger

logger = get_logger(__name__)


class SessionManager:
    """Registry of live browser sessions keyed by thread id."""

    def __init__(self, factory: Callable[[], BrowserSession] = None):
        self._factory = factory or BrowserSession.launch
        self._sessions: dict[int, BrowserSession] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _worker_id() -> int:
        return threading.get_ident()

    def initialize(self) -> BrowserSession:
        """Create a session for the calling worker if it has none, and return it."""
        worker = self._worker_id()
        with self._lock:
            session = self._sessions.get(worker)
        if session is not None:
            return session

        # Launch outside the lock; only this worker can touch its own key
        session = self._factory()
        with self._lock:
            self._sessions[worker] = session
        logger.debug("Session started for worker %s", worker)
        return session

    def get_current(self) -> Optional[BrowserSession]:
        """The calling worker's session, or None if initialize() has not run."""
        with self._lock:
            return self._sessions.get(self._worker_id())

    def teardown(self) -> None:
        """Close the calling worker's session and forget it. No-op if there is none."""
        worker = self._worker_id()
        with self._lock:
            session = self._sessions.pop(worker, None)
        if session is None:
            return

        try:
            session.close()
        except Exception as e:
            logger.warning("⚠️  Failed to close browser session cleanly: %s", e)
        else:
            logger.debug("Session closed for worker %s", worker)

    @contextmanager
    def scope(self):
        """Initialize a session for the block and always tear it down afterwards."""
        session = self.initialize()
        try:
            yield session
        finally:
            self.teardown()

    def active_count(self) -> int:
        with self._lock:
            return len(self._sessions)
