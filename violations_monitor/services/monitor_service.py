import logging

from concurrent.futures import Future
from datetime import datetime
from typing import Callable, List, Optional, Union

from violations_monitor import aggregator, filter_engine
from violations_monitor.constants.statuses import ViolationStatus
from violations_monitor.models.derived_view import DerivedView
from violations_monitor.models.filter_criteria import FilterCriteria
from violations_monitor.models.poll_error import PollError
from violations_monitor.record_store import RecordStore
from violations_monitor.services.apis.records_service import RecordsService
from violations_monitor.services.mutator import Mutator
from violations_monitor.services.poller import Poller

LOG = logging.getLogger(__name__)


class ViolationsMonitor:
    """Owns the state of one monitoring session: the store, the poller
    that is its only writer and the mutator that is the only caller of
    the remote write.
    """

    def __init__(self,
                 records_service: Optional[RecordsService] = None,
                 poll_interval: Optional[float] = None):

        self.records_service = records_service or RecordsService()

        self.store = RecordStore()
        self.poller = Poller(store=self.store,
                             records_service=self.records_service,
                             interval=poll_interval)
        self.mutator = Mutator(records_service=self.records_service,
                               poller=self.poller)

    @property
    def in_flight(self) -> bool:
        return self.poller.in_flight

    @property
    def last_error(self) -> Optional[PollError]:
        return self.poller.last_error

    @property
    def last_update(self) -> Optional[datetime]:
        return self.store.last_update

    def add_listener(self, listener: Callable[[bool], None]) -> None:
        self.poller.add_listener(listener)

    def camera_options(self) -> List[Optional[str]]:
        return filter_engine.camera_options(self.store.current())

    def dismiss_error(self) -> None:
        self.poller.clear_error()

    def refresh(self) -> Future:
        return self.poller.refresh()

    def set_status(self,
                   violation_id: Union[int, str],
                   new_status: Union[ViolationStatus, str]) -> Optional[Future]:
        return self.mutator.set_status(violation_id, new_status)

    def shutdown(self) -> None:
        LOG.debug('Shutting down violations monitor')

        self.poller.close()
        self.store.close()
        self.records_service.close()

    def start(self) -> None:
        self.poller.start()

    def view(self, criteria: Optional[FilterCriteria] = None) -> DerivedView:
        return aggregator.derive_view(
            self.store.current(), criteria or FilterCriteria())
