import ddt
import unittest

from datetime import datetime, timezone

from violations_monitor.models.violation import Violation


@ddt.ddt
class TestViolation(unittest.TestCase):

    def test_from_record(self):
        violation = Violation.from_record({
            'id': 7,
            'camera_id': 'cam_02',
            'plate_text': 'XYZ987',
            'confidence': 0.75,
            'scene_url': 'https://images.example.com/scene/7.jpg',
            'plate_url': 'https://images.example.com/plate/7.jpg',
            'timestamp': '2024-03-05T14:07:00+00:00',
            'status': 'reviewed',
            'created_by': 'detector'})

        self.assertEqual(violation, Violation(
            id=7,
            status='reviewed',
            camera_id='cam_02',
            plate_text='XYZ987',
            confidence=0.75,
            scene_url='https://images.example.com/scene/7.jpg',
            plate_url='https://images.example.com/plate/7.jpg',
            timestamp=datetime(2024, 3, 5, 14, 7, tzinfo=timezone.utc),
            raw_timestamp='2024-03-05T14:07:00+00:00'))

    def test_from_record_with_missing_fields(self):
        violation = Violation.from_record({'id': 'a1b2'})

        self.assertEqual(violation.id, 'a1b2')
        self.assertIsNone(violation.camera_id)
        self.assertIsNone(violation.plate_text)
        self.assertIsNone(violation.confidence)
        self.assertIsNone(violation.scene_url)
        self.assertIsNone(violation.plate_url)
        self.assertIsNone(violation.timestamp)
        self.assertIsNone(violation.status)

    @ddt.data(
        {'confidence': '0.5', 'expected': 0.5},
        {'confidence': 1, 'expected': 1.0},
        {'confidence': 'high', 'expected': None},
        {'confidence': None, 'expected': None},
    )
    @ddt.unpack
    def test_from_record_parses_confidence(self, confidence, expected):
        violation = Violation.from_record({'id': 1, 'confidence': confidence})

        self.assertEqual(violation.confidence, expected)

    def test_from_record_keeps_unparseable_timestamp(self):
        violation = Violation.from_record({'id': 1, 'timestamp': 'yesterday'})

        self.assertIsNone(violation.timestamp)
        self.assertEqual(violation.raw_timestamp, 'yesterday')

    @ddt.data(
        {'plate_text': 'ABC123', 'detected': True, 'no_plate': False},
        {'plate_text': 'no_plate_detected', 'detected': False, 'no_plate': True},
        {'plate_text': 'unreadable', 'detected': False, 'no_plate': True},
        {'plate_text': None, 'detected': False, 'no_plate': False},
        {'plate_text': '', 'detected': False, 'no_plate': False},
    )
    @ddt.unpack
    def test_plate_predicates(self, plate_text, detected, no_plate):
        violation = Violation(id=1, plate_text=plate_text)

        self.assertEqual(violation.has_detected_plate(), detected)
        self.assertEqual(violation.has_no_plate(), no_plate)

    def test_from_record_converts_non_text_fields_to_text(self):
        violation = Violation.from_record({
            'id': 1, 'camera_id': 17, 'plate_text': 4521})

        self.assertEqual(violation.camera_id, '17')
        self.assertEqual(violation.plate_text, '4521')
