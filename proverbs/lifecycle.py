"""
Process lifecycle: load the snapshot, serve, and flush it back on shutdown.

States move LOADING -> SERVING -> DRAINING -> STOPPED. A load failure while
LOADING propagates and is fatal. DRAINING is entered once, when the server
shuts down after SIGINT/SIGTERM, and only if the listener was bound. A save
failure is logged and does not stop the process from exiting.
"""

from __future__ import annotations

import enum
import logging
import os
from typing import Callable, Optional

from proverbs.repositories import json_storage
from proverbs.repositories.json_storage import StorageError
from proverbs.services.proverb_store import ProverbStore

logger = logging.getLogger(__name__)


class LifecycleState(enum.Enum):
    LOADING = "loading"
    SERVING = "serving"
    DRAINING = "draining"
    STOPPED = "stopped"


class Lifecycle:
    def __init__(
        self,
        data_file: Optional[str | os.PathLike],
        listening: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.data_file = data_file
        # reports whether the listener got bound; None when the caller owns no socket
        self.listening = listening
        self.state = LifecycleState.LOADING

    def start(self, store: Optional[ProverbStore] = None) -> ProverbStore:
        """Load the snapshot (unless a store is supplied) and start serving."""
        if self.state is not LifecycleState.LOADING:
            raise RuntimeError(f"cannot start from state {self.state.value}")
        if store is None:
            proverbs = json_storage.load(self.data_file)
            store = ProverbStore(proverbs)
            logger.info("Loaded %d proverbs from %s", len(proverbs), self.data_file)
        self.state = LifecycleState.SERVING
        return store

    def drain(self, store: ProverbStore) -> bool:
        """
        Save the store to the snapshot file. Runs at most once.

        Returns True when the snapshot was written. Errors are logged, never
        raised: shutdown proceeds either way.
        """
        if self.state is not LifecycleState.SERVING:
            return False
        if self.listening is not None and not self.listening():
            # startup failed before serving (e.g. bind error): the snapshot stays untouched
            logger.error("Listener never started, not saving proverbs")
            self.state = LifecycleState.STOPPED
            return False
        self.state = LifecycleState.DRAINING
        saved = False
        try:
            if self.data_file is None:
                logger.info("No data file configured, skipping save")
            else:
                logger.info("Saving proverbs...")
                json_storage.save(self.data_file, store.snapshot())
                saved = True
        except StorageError as exc:
            logger.error("Something went wrong: %s.", exc)
        finally:
            self.state = LifecycleState.STOPPED
            logger.info("Bye.")
        return saved
