import argparse
import logging
import sys
import threading

from typing import List, Optional

from violations_monitor.constants import L10N
from violations_monitor.constants.statuses import (ALL, STATUS_FILTER_OPTIONS,
    ViolationStatus)
from violations_monitor.models.filter_criteria import FilterCriteria
from violations_monitor.services.monitor_service import ViolationsMonitor
from violations_monitor.utils import display_utils

LOGGING_LEVELS = {'critical': logging.CRITICAL,
                  'error': logging.ERROR,
                  'warning': logging.WARNING,
                  'info': logging.INFO,
                  'debug': logging.DEBUG}

LOG = logging.getLogger(__name__)


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def run(args: argparse.Namespace,
        monitor: Optional[ViolationsMonitor] = None,
        stop_event: Optional[threading.Event] = None) -> int:
    monitor = monitor or ViolationsMonitor()

    try:
        if args.set_status:
            violation_id, status = args.set_status
            return set_status(monitor, violation_id, status)
        elif args.show:
            return show(monitor, args.show)
        else:
            criteria = FilterCriteria(search=args.search,
                                      status=args.status,
                                      camera=args.camera)
            return watch(monitor, criteria, stop_event or threading.Event())
    finally:
        monitor.shutdown()


def set_status(monitor: ViolationsMonitor, violation_id: str, status: str) -> int:
    """ Set the status of one violation and wait for the resync """
    try:
        refresh = monitor.set_status(violation_id, status)
    except ValueError as ve:
        LOG.error(ve)
        print(L10N.STATUS_UPDATE_FAILED_STRING.format(violation_id, status))
        return 2

    if refresh is None:
        print(L10N.STATUS_UPDATE_FAILED_STRING.format(violation_id, status))
        return 1

    refresh.result()
    print(L10N.STATUS_UPDATED_STRING.format(violation_id, status))

    return 0


def show(monitor: ViolationsMonitor, violation_id: str) -> int:
    if not monitor.refresh().result():
        print(L10N.ERROR_STRING.format(monitor.last_error.message))
        return 1

    matches = [violation for violation in monitor.store.current()
               if str(violation.id) == violation_id]

    if not matches:
        print(L10N.NO_VIOLATIONS_FOUND_STRING)
        return 1

    print_lines(display_utils.detail_lines(matches[0]))

    return 0


def watch(monitor: ViolationsMonitor,
          criteria: FilterCriteria,
          stop_event: threading.Event) -> int:
    """ Print the derived view after every refresh until interrupted """

    def on_refresh(succeeded: bool) -> None:
        if not succeeded:
            print(L10N.ERROR_STRING.format(monitor.last_error.message))
            return

        print(L10N.LAST_UPDATED_STRING.format(
            display_utils.format_time(monitor.last_update)))
        print_lines(display_utils.summary_lines(monitor.view(criteria)))

    monitor.add_listener(on_refresh)

    print(L10N.LOADING_STRING)
    monitor.start()

    try:
        stop_event.wait()
    except KeyboardInterrupt:
        LOG.info('Interrupted, stopping violations monitor')

    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Monitor parking violations')
    parser.add_argument(
        '-l',
        '--log-level',
        help='Log level')
    parser.add_argument(
        '-f',
        '--log-file',
        help='Log file name')
    parser.add_argument(
        '--search',
        default='',
        help='Only show violations whose plate or camera contains this text')
    parser.add_argument(
        '--status',
        choices=STATUS_FILTER_OPTIONS,
        default=ALL,
        help='Only show violations with this status')
    parser.add_argument(
        '--camera',
        default=ALL,
        help='Only show violations from this camera')
    parser.add_argument(
        '--set-status',
        nargs=2,
        metavar=('ID', 'STATUS'),
        help='Set the status of one violation '
             f'({", ".join(status.value for status in ViolationStatus)}) and exit')
    parser.add_argument(
        '--show',
        metavar='ID',
        help='Print the details of one violation and exit')
    return parser.parse_args(argv)


if __name__ == '__main__':
    args = parse_args()

    logging_level: int = LOGGING_LEVELS.get(
        args.log_level, logging.NOTSET)
    logging.basicConfig(level=logging_level, filename=args.log_file,
                        format='%(asctime)s %(levelname)s: %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')

    sys.exit(run(args))
