import logging
import os
import requests
import requests_futures.sessions

from typing import Any, Dict, List, Optional, Type, Union

from violations_monitor.constants import L10N
from violations_monitor.constants.environment import EnvironmentVariable
from violations_monitor.models.violation import Violation
from violations_monitor.services.constants.exceptions import \
    APIFailureException, FetchFailureException, MutationFailureException

LOG = logging.getLogger(__name__)


class RecordsService:
    """Client for the two operations the violations collection exposes:
    listing the most recent page of records and setting the status of
    a single record.
    """

    COLLECTION_PATH = '/rest/v1/violations'

    PAGE_SIZE = 100

    # applied to every request
    REQUEST_TIMEOUT_IN_SECONDS = 10

    def __init__(self,
                 base_url: Optional[str] = None,
                 api_key: Optional[str] = None,
                 max_workers: int = 2):

        self.base_url = base_url if base_url is not None else os.getenv(
            EnvironmentVariable.VIOLATIONS_API_URL.value)
        self.api_key = api_key if api_key is not None else os.getenv(
            EnvironmentVariable.VIOLATIONS_API_KEY.value)

        self.api = requests_futures.sessions.FuturesSession(
            max_workers=max_workers)

    def list_violations(self) -> List[Violation]:
        """Fetch the newest page of violations, newest first.

        :raises FetchFailureException: on a transport error, a non-2xx
                                       response or a body that is not
                                       a JSON array.
        """
        params: Dict[str, Union[int, str]] = {
            'order': 'timestamp.desc',
            'limit': self.PAGE_SIZE}

        result = self._perform_request(
            method='GET',
            failure_class=FetchFailureException,
            headers=self._auth_headers(),
            params=params)

        try:
            records: Any = result.json()
        except ValueError as ve:
            raise FetchFailureException(
                f'malformed response when accessing {self._collection_url()}',
                status_code=result.status_code) from ve

        if not isinstance(records, list):
            raise FetchFailureException(
                f'unexpected response when accessing {self._collection_url()}',
                status_code=result.status_code)

        violations: List[Violation] = []

        for record in records:
            if not isinstance(record, dict) or record.get('id') is None:
                LOG.warning(f'Skipping record without an id: {record!r}')
                continue

            violations.append(Violation.from_record(record))

        LOG.debug(
            f'Fetched {len(violations)} violation{L10N.pluralize(len(violations))}')

        return violations

    def update_status(self, violation_id: Union[int, str], status: str) -> None:
        """Set the status of the violation identified by violation_id.

        :raises MutationFailureException: on a transport error or a
                                          non-2xx response.
        """
        headers: Dict[str, str] = self._auth_headers()
        headers['Content-Type'] = 'application/json'
        headers['Prefer'] = 'return=minimal'

        self._perform_request(
            method='PATCH',
            failure_class=MutationFailureException,
            headers=headers,
            params={'id': f'eq.{violation_id}'},
            json={'status': status})

        LOG.debug(f'Set status of violation {violation_id} to {status}')

    def close(self) -> None:
        self.api.close()

    def _auth_headers(self) -> Dict[str, str]:
        return {
            'apikey': f'{self.api_key}',
            'Authorization': f'Bearer {self.api_key}'}

    def _collection_url(self) -> str:
        return f'{(self.base_url or "").rstrip("/")}{self.COLLECTION_PATH}'

    def _perform_request(self,
                         method: str,
                         failure_class: Type[APIFailureException],
                         **kwargs) -> requests.Response:
        url: str = self._collection_url()

        try:
            response = self.api.request(
                method, url, timeout=self.REQUEST_TIMEOUT_IN_SECONDS, **kwargs)

            result: requests.Response = response.result()

        except requests.exceptions.RequestException as e:
            raise failure_class(
                f'transport error when accessing {url}: {e}') from e

        if result.status_code in range(200, 300):
            return result
        elif result.status_code in range(300, 400):
            raise failure_class(
                f'redirect error when accessing {url}',
                status_code=result.status_code)
        elif result.status_code in range(400, 500):
            raise failure_class(
                f'user error when accessing {url}',
                status_code=result.status_code)
        elif result.status_code in range(500, 600):
            raise failure_class(
                f'server error when accessing {url}',
                status_code=result.status_code)
        else:
            raise failure_class(
                f'unknown error when accessing {url}',
                status_code=result.status_code)
