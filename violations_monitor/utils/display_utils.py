import os
import pytz

from datetime import datetime
from typing import List, Optional

from violations_monitor.constants import L10N
from violations_monitor.constants.environment import EnvironmentVariable
from violations_monitor.models.derived_view import DerivedView
from violations_monitor.models.violation import Violation

DISPLAY_TIME_FORMAT = '%b %-d, %I:%M %p'


def display_timezone() -> pytz.BaseTzInfo:
    return pytz.timezone(
        os.getenv(EnvironmentVariable.VIOLATIONS_DISPLAY_TIMEZONE.value) or 'UTC')


def confidence_label(violation: Violation) -> str:
    # A confidence of exactly zero is shown as missing.
    if violation.confidence is not None and violation.confidence > 0:
        return f'{violation.confidence * 100:.1f}%'

    return L10N.NOT_AVAILABLE_STRING


def format_time(timestamp: Optional[datetime],
                timezone: Optional[pytz.BaseTzInfo] = None) -> str:
    if timestamp is None:
        return L10N.NOT_AVAILABLE_STRING

    timezone = timezone or display_timezone()

    if timestamp.tzinfo is None:
        timestamp = pytz.utc.localize(timestamp)

    return timestamp.astimezone(timezone).strftime(DISPLAY_TIME_FORMAT)


def image_label(url: Optional[str], placeholder: str) -> str:
    return url or placeholder


def plate_label(violation: Violation) -> str:
    if violation.has_no_plate():
        return L10N.CANNOT_EXTRACT_STRING

    return violation.plate_text or L10N.NOT_AVAILABLE_STRING


def summary_lines(view: DerivedView,
                  timezone: Optional[pytz.BaseTzInfo] = None) -> List[str]:
    """Render a derived view as lines of text: the stats first, then
    one line per visible violation."""
    lines: List[str] = [L10N.STATS_STRING.format(
        view.stats.total,
        view.stats.new_count,
        view.stats.detected_count,
        view.stats.no_plate_count)]

    if not view.filtered:
        lines.append(L10N.NO_VIOLATIONS_FOUND_STRING)

    lines.extend(violation_line(violation, timezone) for violation in view.filtered)

    return lines


def violation_line(violation: Violation,
                   timezone: Optional[pytz.BaseTzInfo] = None) -> str:
    return L10N.VIOLATION_STRING.format(
        violation.status,
        violation.id,
        violation.camera_id,
        plate_label(violation),
        confidence_label(violation),
        format_time(violation.timestamp, timezone))


def detail_lines(violation: Violation,
                 timezone: Optional[pytz.BaseTzInfo] = None) -> List[str]:
    return [
        f'Camera ID: {violation.camera_id}',
        f'Timestamp: {format_time(violation.timestamp, timezone)}',
        f'Plate Number: {plate_label(violation)}',
        f'Confidence: {confidence_label(violation)}',
        f'Status: {violation.status}',
        f'Scene Image: {image_label(violation.scene_url, L10N.NO_SCENE_IMAGE_STRING)}',
        f'Plate Image: {image_label(violation.plate_url, L10N.NO_PLATE_IMAGE_STRING)}']
