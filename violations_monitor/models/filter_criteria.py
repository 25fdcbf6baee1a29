from dataclasses import dataclass

from violations_monitor.constants.statuses import ALL

@dataclass(frozen=True)
class FilterCriteria:
    """ The operator's current search/status/camera selection """

    search: str = ''
    status: str = ALL
    camera: str = ALL
