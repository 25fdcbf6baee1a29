from typing import Iterable, List, Optional, Tuple

from violations_monitor.constants.statuses import ALL
from violations_monitor.models.filter_criteria import FilterCriteria
from violations_monitor.models.violation import Violation


def apply(snapshot: Iterable[Violation],
          criteria: FilterCriteria) -> Tuple[Violation, ...]:
    """Narrow a snapshot down to the violations matching every active
    criterion, keeping snapshot order. A blank search and the 'all'
    status and camera selections match everything.
    """
    filtered: Iterable[Violation] = snapshot

    if criteria.search:
        search_term: str = criteria.search.lower()
        filtered = [violation for violation in filtered
                    if _matches_search(violation, search_term)]

    if criteria.status != ALL:
        filtered = [violation for violation in filtered
                    if violation.status == criteria.status]

    if criteria.camera != ALL:
        filtered = [violation for violation in filtered
                    if violation.camera_id == criteria.camera]

    return tuple(filtered)


def camera_options(snapshot: Iterable[Violation]) -> List[Optional[str]]:
    """'all' followed by every camera in the snapshot, in the order
    each first appears."""
    cameras: List[Optional[str]] = [ALL]

    for violation in snapshot:
        if violation.camera_id not in cameras:
            cameras.append(violation.camera_id)

    return cameras


def _matches_search(violation: Violation, search_term: str) -> bool:
    return any(field is not None and search_term in str(field).lower()
               for field in (violation.plate_text, violation.camera_id))
