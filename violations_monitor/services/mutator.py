import logging

from concurrent.futures import Future
from typing import Optional, Union

from violations_monitor.constants.statuses import ViolationStatus
from violations_monitor.services.apis.records_service import RecordsService
from violations_monitor.services.constants.exceptions import \
    MutationFailureException
from violations_monitor.services.poller import Poller

LOG = logging.getLogger(__name__)


class Mutator:
    """Changes the review status of a violation on the server.

    Nothing is patched locally: a successful write is followed by a
    full refresh, and the change shows up once that refresh lands.
    A failed write leaves the store exactly as it was.
    """

    def __init__(self, records_service: RecordsService, poller: Poller):
        self.records_service = records_service
        self.poller = poller

    def set_status(self,
                   violation_id: Union[int, str],
                   new_status: Union[ViolationStatus, str]) -> Optional[Future]:
        """Set the status of a violation, then resync.

        :param violation_id: the id of the violation to update
        :param new_status: any ViolationStatus, regardless of the
                           violation's current status
        :return: the future of the triggered refresh, or None if the
                 write failed.
        :raises ValueError: if new_status is not a known status.
        """
        status: str = ViolationStatus(new_status).value

        try:
            self.records_service.update_status(violation_id, status)

        except MutationFailureException as e:
            LOG.error(f'Error updating status of violation {violation_id}: {e}')
            return None

        LOG.info(f'Set status of violation {violation_id} to {status}, resyncing')

        return self.poller.resync()
