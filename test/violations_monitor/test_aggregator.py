import ddt
import unittest

from violations_monitor import aggregator
from violations_monitor.models.derived_view import DerivedView
from violations_monitor.models.filter_criteria import FilterCriteria
from violations_monitor.models.violation import Violation
from violations_monitor.models.violation_stats import ViolationStats


@ddt.ddt
class TestAggregator(unittest.TestCase):

    def setUp(self):
        self.first_violation = Violation.from_record({
            'id': 1, 'status': 'new', 'plate_text': 'ABC123',
            'confidence': 0.92, 'camera_id': 'cam_01'})
        self.second_violation = Violation.from_record({
            'id': 2, 'status': 'resolved', 'plate_text': 'no_plate_detected',
            'camera_id': 'cam_01'})

        self.snapshot = [self.first_violation, self.second_violation]

    def test_compute_stats(self):
        self.assertEqual(aggregator.compute_stats(self.snapshot), ViolationStats(
            total=2, new_count=1, no_plate_count=1, detected_count=1))

    def test_compute_stats_for_empty_snapshot(self):
        self.assertEqual(aggregator.compute_stats([]), ViolationStats())

    def test_compute_stats_counts_missing_plate_towards_neither(self):
        snapshot = [
            Violation(id=1, status='new', plate_text=None),
            Violation(id=2, status='reviewed', plate_text=''),
            Violation(id=3, status='new', plate_text='unreadable'),
            Violation(id=4, status='resolved', plate_text='KLM456')]

        stats = aggregator.compute_stats(snapshot)

        self.assertEqual(stats, ViolationStats(
            total=4, new_count=2, no_plate_count=1, detected_count=1))
        self.assertLess(stats.no_plate_count + stats.detected_count, stats.total)

    def test_derive_view_matching_search(self):
        view = aggregator.derive_view(
            self.snapshot, FilterCriteria(search='abc'))

        self.assertEqual(view, DerivedView(
            filtered=(self.first_violation,),
            stats=ViolationStats(
                total=2, new_count=1, no_plate_count=1, detected_count=1)))

    def test_derive_view_matching_status(self):
        view = aggregator.derive_view(
            self.snapshot, FilterCriteria(status='resolved'))

        self.assertEqual(view.filtered, (self.second_violation,))

    @ddt.data(
        FilterCriteria(),
        FilterCriteria(search='abc'),
        FilterCriteria(search='no match at all'),
        FilterCriteria(status='reviewed'),
        FilterCriteria(camera='cam_99'),
    )
    def test_derive_view_stats_ignore_criteria(self, criteria):
        view = aggregator.derive_view(self.snapshot, criteria)

        self.assertEqual(view.stats, aggregator.compute_stats(self.snapshot))
