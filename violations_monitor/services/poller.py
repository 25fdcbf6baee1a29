import logging
import threading

from concurrent.futures import Future, ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, List, Optional

from violations_monitor.models.poll_error import PollError
from violations_monitor.models.violation import Violation
from violations_monitor.record_store import RecordStore
from violations_monitor.services.apis.records_service import RecordsService
from violations_monitor.services.constants.exceptions import \
    FetchFailureException

LOG = logging.getLogger(__name__)


class Poller:
    """Keeps a RecordStore in step with the violations collection.

    refresh() may be triggered at any time, by the periodic timer or on
    demand; while a refresh is running further calls share its future
    instead of issuing a second request.
    """

    POLL_INTERVAL_IN_SECONDS = 10.0

    def __init__(self,
                 store: RecordStore,
                 records_service: RecordsService,
                 interval: Optional[float] = None):

        self.store = store
        self.records_service = records_service
        self.interval = interval if interval is not None else self.POLL_INTERVAL_IN_SECONDS

        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix='violations-poller')

        self._pending: Optional[Future] = None
        self._timer: Optional[threading.Timer] = None

        self._closed = False
        self._stopped = True

        self._last_error: Optional[PollError] = None
        self._listeners: List[Callable[[bool], None]] = []

        # Log how many times we've polled
        self._poll_iteration = 0

    @property
    def in_flight(self) -> bool:
        return self._pending is not None

    @property
    def last_error(self) -> Optional[PollError]:
        return self._last_error

    @property
    def last_update(self) -> Optional[datetime]:
        return self.store.last_update

    def add_listener(self, listener: Callable[[bool], None]) -> None:
        """Register a callable to be told, with True or False, whether
        each refresh succeeded."""
        self._listeners.append(listener)

    def clear_error(self) -> None:
        self._last_error = None

    def refresh(self) -> Future:
        """Fetch the newest page of violations into the store.

        The returned future resolves to True once the store has been
        replaced and to False if the fetch failed or its result was
        discarded; it never raises.
        """
        with self._lock:
            return self._refresh_locked()

    def resync(self) -> Future:
        """Like refresh(), but the request behind the returned future
        is always issued after this call. A refresh already in flight
        may have read the collection too early, so a new one is
        chained after it rather than sharing its result.
        """
        with self._lock:
            pending: Optional[Future] = self._pending

            if pending is None:
                return self._refresh_locked()

        LOG.debug('Refresh in flight, chaining a resync after it')

        resynced: Future = Future()

        def forward_result(refreshed: Future) -> None:
            resynced.set_result(refreshed.result())

        def refresh_after_pending(_: Future) -> None:
            self.refresh().add_done_callback(forward_result)

        pending.add_done_callback(refresh_after_pending)

        return resynced

    def start(self) -> None:
        """Refresh now, then every `interval` seconds until stopped."""
        with self._lock:
            self._stopped = False

        self._tick()

    def stop(self) -> None:
        """Stop refreshing periodically. A refresh already under way
        is left to finish."""
        with self._lock:
            self._stopped = True

            if self._timer:
                self._timer.cancel()
                self._timer = None

    def close(self) -> None:
        self.stop()

        with self._lock:
            self._closed = True

        self._executor.shutdown(wait=False)

    def _notify_listeners(self, succeeded: bool) -> None:
        for listener in self._listeners:
            try:
                listener(succeeded)
            except Exception as e:
                LOG.error(f'Refresh listener failed: {e}')
                LOG.exception('stack trace')

    def _poll(self) -> bool:
        try:
            return self._fetch_into_store()
        finally:
            with self._lock:
                self._pending = None

    def _fetch_into_store(self) -> bool:
        try:
            violations: List[Violation] = self.records_service.list_violations()

        except FetchFailureException as e:
            LOG.error(f'Error fetching violations: {e}')
            self._record_error(str(e))
            return False

        except Exception as e:
            LOG.error(f'Unexpected error fetching violations: {e}')
            LOG.exception('stack trace')
            self._record_error(str(e))
            return False

        if not self.store.replace(violations):
            LOG.debug('Discarding fetched violations, store has been torn down')
            return False

        self._last_error = None
        self._notify_listeners(True)

        return True

    def _record_error(self, message: str) -> None:
        if self.store.closed:
            return

        self._last_error = PollError(
            message=message, occurred_at=datetime.now(timezone.utc))
        self._notify_listeners(False)

    def _refresh_locked(self) -> Future:
        if self._pending is not None:
            LOG.debug('Refresh already in flight, sharing its result')
            return self._pending

        if self._closed:
            LOG.debug('Poller is closed, not refreshing')
            discarded: Future = Future()
            discarded.set_result(False)
            return discarded

        self._poll_iteration += 1
        LOG.debug(f'Refreshing violations on iteration {self._poll_iteration}')

        self._pending = self._executor.submit(self._poll)

        return self._pending

    def _tick(self) -> None:
        with self._lock:
            if self._stopped:
                return

            # set up timer
            self._timer = threading.Timer(self.interval, self._tick)
            self._timer.daemon = True

            # start timer
            self._timer.start()

            self._refresh_locked()
