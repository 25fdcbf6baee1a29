from dataclasses import dataclass
from typing import Tuple

from violations_monitor.models.violation import Violation
from violations_monitor.models.violation_stats import ViolationStats


@dataclass(frozen=True)
class DerivedView:
    """ Represents what the operator sees for a snapshot and a set of
        criteria. stats always describe the whole snapshot.
    """
    filtered: Tuple[Violation, ...]
    stats: ViolationStats
