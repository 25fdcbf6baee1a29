import logging

from dataclasses import dataclass
from datetime import datetime
from dateutil import parser as date_parser
from typing import Any, Dict, Optional, Union

from violations_monitor.constants.plates import NO_PLATE_SENTINELS

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Violation:
    """ Represents a single violation record as returned by the
        violations collection. Only `status` is ever changed, and only
        on the server.
    """

    id: Union[int, str]
    status: Optional[str] = None
    camera_id: Optional[str] = None
    plate_text: Optional[str] = None
    confidence: Optional[float] = None
    scene_url: Optional[str] = None
    plate_url: Optional[str] = None
    timestamp: Optional[datetime] = None
    raw_timestamp: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Violation':
        raw_timestamp: Optional[str] = record.get('timestamp')

        return cls(
            id=record['id'],
            status=record.get('status'),
            camera_id=cls._parse_text(record.get('camera_id')),
            plate_text=cls._parse_text(record.get('plate_text')),
            confidence=cls._parse_confidence(record.get('confidence')),
            scene_url=record.get('scene_url'),
            plate_url=record.get('plate_url'),
            timestamp=cls._parse_timestamp(raw_timestamp),
            raw_timestamp=raw_timestamp)

    def has_detected_plate(self) -> bool:
        return bool(self.plate_text) and self.plate_text not in NO_PLATE_SENTINELS

    def has_no_plate(self) -> bool:
        return self.plate_text in NO_PLATE_SENTINELS

    @staticmethod
    def _parse_confidence(confidence: Any) -> Optional[float]:
        if confidence is None:
            return None

        try:
            return float(confidence)
        except (TypeError, ValueError):
            LOG.info(f'Confidence could not be determined from {confidence!r}')
            return None

    @staticmethod
    def _parse_text(value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @staticmethod
    def _parse_timestamp(raw_timestamp: Optional[str]) -> Optional[datetime]:
        if not raw_timestamp:
            return None

        try:
            return date_parser.isoparse(raw_timestamp)
        except (TypeError, ValueError):
            LOG.info(f'Timestamp could not be determined from {raw_timestamp!r}')
            return None
