from enum import Enum


class ViolationStatus(Enum):
    NEW = 'new'
    REVIEWED = 'reviewed'
    RESOLVED = 'resolved'


ALL = 'all'

STATUS_FILTER_OPTIONS = (ALL,) + tuple(status.value for status in ViolationStatus)
