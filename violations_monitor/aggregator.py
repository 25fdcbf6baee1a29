from typing import Sequence

from violations_monitor import filter_engine
from violations_monitor.constants.statuses import ViolationStatus
from violations_monitor.models.derived_view import DerivedView
from violations_monitor.models.filter_criteria import FilterCriteria
from violations_monitor.models.violation import Violation
from violations_monitor.models.violation_stats import ViolationStats


def compute_stats(snapshot: Sequence[Violation]) -> ViolationStats:
    """ Count violations across the whole snapshot, never a filtered one """
    return ViolationStats(
        total=len(snapshot),
        new_count=len([violation for violation in snapshot
                       if violation.status == ViolationStatus.NEW.value]),
        no_plate_count=len([violation for violation in snapshot
                            if violation.has_no_plate()]),
        detected_count=len([violation for violation in snapshot
                            if violation.has_detected_plate()]))


def derive_view(snapshot: Sequence[Violation],
                criteria: FilterCriteria) -> DerivedView:
    return DerivedView(
        filtered=filter_engine.apply(snapshot, criteria),
        stats=compute_stats(snapshot))
