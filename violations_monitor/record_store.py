import logging
import threading

from datetime import datetime, timezone
from typing import Iterable, Optional, Tuple

from violations_monitor.models.violation import Violation

LOG = logging.getLogger(__name__)


class RecordStore:
    """Holds the last successfully fetched snapshot of violations and
    the time it was fetched. The snapshot is only ever replaced whole.
    """

    def __init__(self):
        self._lock = threading.Lock()

        self._snapshot: Tuple[Violation, ...] = ()
        self._last_update: Optional[datetime] = None

        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def last_update(self) -> Optional[datetime]:
        return self._last_update

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._snapshot = ()

    def current(self) -> Tuple[Violation, ...]:
        return self._snapshot

    def replace(self, new_snapshot: Iterable[Violation]) -> bool:
        """Swap in new_snapshot, discarding the old one entirely.

        Returns False, leaving everything untouched, once the store has
        been closed.
        """
        snapshot: Tuple[Violation, ...] = tuple(new_snapshot)

        with self._lock:
            if self._closed:
                LOG.debug('Store is closed, discarding snapshot')
                return False

            self._snapshot = snapshot
            self._last_update = datetime.now(timezone.utc)

        return True
